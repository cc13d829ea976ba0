"""Unit tests for EntityDirectory and RegistrarConfig."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from registrar.config import RegistrarConfig, format_record_id, parse_record_number
from registrar.models import CourseCode, Semester, Student


class TestStudents:
    """Tests for student records."""

    def test_add_student_assigns_ids(self, directory):
        first = directory.add_student("REG001", "Ada Lovelace", "ada@example.edu")
        second = directory.add_student("REG002", "Alan Turing", "alan@example.edu")
        assert (first.id, second.id) == ("STU0001", "STU0002")
        assert first.active
        assert first.gpa == 0.0
        assert first.current_semester is Semester.FALL_2025

    def test_duplicate_reg_no(self, directory, student):
        with pytest.raises(ValueError):
            directory.add_student("REG001", "Someone Else", "else@example.edu")

    def test_find(self, directory, student):
        assert directory.find_student(student.id) is student
        assert directory.find_student_by_reg_no("REG001") is student
        assert directory.find_student("STU9999") is None

    def test_update_and_status(self, directory, student):
        assert directory.update_student(student.id, email="ada@new.edu")
        assert student.email == "ada@new.edu"
        assert student.full_name == "Ada Lovelace"

        assert directory.deactivate_student(student.id)
        assert directory.active_students() == []
        assert directory.activate_student(student.id)
        assert directory.active_students() == [student]
        assert not directory.deactivate_student("STU9999")

    def test_search(self, directory, student, other_student):
        assert directory.search_students(name="ada") == [student]
        assert directory.search_students(email="EXAMPLE.EDU") == [student, other_student]
        assert directory.search_students(predicate=lambda s: s.reg_no == "REG002") == [other_student]

    def test_register_continues_sequence(self, directory):
        directory.register_student(Student(id="STU0010", reg_no="R10", full_name="X", email="x@y"))
        assert directory.add_student("R11", "Y", "y@z").id == "STU0011"

    def test_students_in_course(self, directory, engine, student, other_student, courses):
        engine.enroll(student.id, "CSE101", Semester.FALL_2025)
        assert directory.students_in_course("cse101") == [student]


class TestCourses:
    """Tests for course records."""

    def test_add_course(self, directory):
        course = directory.add_course("cse101", "Intro", "CSE")
        assert course.id == "CRS0001"
        assert course.code == CourseCode("CSE", "101")
        assert course.credits == 3
        assert course.semester is Semester.FALL_2025

    def test_duplicate_code(self, directory, courses):
        with pytest.raises(ValueError):
            directory.add_course("CSE101", "Again", "CSE")

    def test_non_positive_credits(self, directory):
        with pytest.raises(ValueError):
            directory.add_course("CSE999", "Nothing", "CSE", credits=0)

    def test_find_course(self, directory, courses):
        assert directory.find_course("cse101") is courses["CSE101"]
        assert directory.find_course(CourseCode("MATH", "201")) is courses["MATH201"]
        assert directory.find_course("!!") is None
        assert directory.find_course("XYZ100") is None
        assert directory.find_course_by_id("CRS0002") is courses["CSE201"]

    def test_update_course(self, directory, courses):
        assert directory.update_course("CSE101", title="Programming I", credits=4)
        assert courses["CSE101"].title == "Programming I"
        assert courses["CSE101"].credits == 4
        with pytest.raises(ValueError):
            directory.update_course("CSE101", credits=-1)
        assert not directory.update_course("XYZ100", title="Nope")

    def test_search_courses(self, directory, courses):
        assert [str(c.code) for c in directory.search_courses(department="cse")] == [
            "CSE101", "CSE201"]
        assert [str(c.code) for c in directory.search_courses(min_credits=4)] == [
            "PHYS110", "BIO120"]
        assert directory.search_courses(title="drawing") == [courses["ART150"]]
        assert directory.search_courses(semester=Semester.SPRING_2026) == []

    def test_sorted_courses(self, directory, courses):
        assert str(directory.sorted_courses("code")[0].code) == "ART150"
        assert directory.sorted_courses("title")[0].title == "Cell Biology"
        assert directory.sorted_courses("credits")[0].credits == 2
        with pytest.raises(ValueError):
            directory.sorted_courses("popularity")

    def test_deactivate_course(self, directory, courses):
        assert directory.deactivate_course("ART150")
        assert courses["ART150"] not in directory.active_courses()


class TestInstructors:
    """Tests for instructor records."""

    def test_assign_instructor(self, directory, courses):
        grace = directory.add_instructor("Grace Hopper", "grace@example.edu", "CSE", "Dr.")
        alan = directory.add_instructor("Alan Kay", "alan@example.edu", "CSE", "Prof.")
        assert grace.id == "INS0001"

        assert directory.assign_instructor("CSE101", grace.id)
        assert courses["CSE101"].instructor_id == grace.id
        assert grace.assigned_courses == [CourseCode("CSE", "101")]

        assert directory.assign_instructor("CSE101", alan.id)
        assert grace.assigned_courses == []
        assert alan.assigned_courses == [CourseCode("CSE", "101")]
        assert directory.search_courses(instructor_id=alan.id) == [courses["CSE101"]]

    def test_assign_unknown(self, directory, courses):
        assert not directory.assign_instructor("CSE101", "INS9999")
        assert not directory.assign_instructor("XYZ100", "INS0001")

    def test_clear(self, directory, student, courses):
        directory.clear()
        assert directory.list_students() == []
        assert directory.list_courses() == []
        assert directory.add_student("R1", "A", "a@b").id == "STU0001"


class TestConfig:
    """Tests for RegistrarConfig and id helpers."""

    def test_defaults(self, tmp_path):
        config = RegistrarConfig(data_dir=tmp_path)
        assert config.max_credits_per_semester == 18
        assert config.csv_delimiter == ","
        assert config.backup_dir == tmp_path / "backups"

    @pytest.mark.parametrize("kwargs", [{"max_credits_per_semester": 0},
                                        {"csv_delimiter": ""},
                                        {"csv_delimiter": ",;"},
                                        {"log_level": "LOUD"}])
    def test_invalid_values(self, tmp_path, kwargs):
        with pytest.raises(ValueError):
            RegistrarConfig(data_dir=tmp_path, **kwargs)

    def test_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("REGISTRAR_DATA_DIR", str(tmp_path / "registry"))
        monkeypatch.setenv("REGISTRAR_MAX_CREDITS_PER_SEMESTER", "21")
        monkeypatch.setenv("REGISTRAR_CSV_DELIMITER", "|")
        monkeypatch.setenv("REGISTRAR_LOG_LEVEL", "debug")

        config = RegistrarConfig.from_env()
        assert config.data_dir == Path(tmp_path / "registry")
        assert config.max_credits_per_semester == 21
        assert config.csv_delimiter == "|"
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("name,value", [
        ("REGISTRAR_MAX_CREDITS_PER_SEMESTER", "eighteen"),
        ("REGISTRAR_MAX_CREDITS_PER_SEMESTER", "-3"),
        ("REGISTRAR_CSV_DELIMITER", "::"),
    ])
    def test_invalid_environment_is_rejected(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ValidationError):
            RegistrarConfig.from_env()

    def test_keyword_arguments_override_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("REGISTRAR_MAX_CREDITS_PER_SEMESTER", "21")
        config = RegistrarConfig(data_dir=tmp_path, max_credits_per_semester=12)
        assert config.max_credits_per_semester == 12

    def test_default_data_dir_follows_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.delenv("REGISTRAR_DATA_DIR", raising=False)
        monkeypatch.chdir(tmp_path)
        assert RegistrarConfig().data_dir == Path.cwd() / "data"

    def test_config_is_frozen(self, config):
        with pytest.raises(ValidationError):
            config.max_credits_per_semester = 30

    def test_ensure_directories(self, config):
        config.ensure_directories()
        assert config.data_dir.is_dir()
        assert config.backup_dir.is_dir()

    def test_record_ids(self):
        assert format_record_id("ENR", 7) == "ENR0007"
        assert parse_record_number("ENR0007", "ENR") == 7
        assert parse_record_number("STU0007", "ENR") == 0
        assert parse_record_number("ENRabc", "ENR") == 0
