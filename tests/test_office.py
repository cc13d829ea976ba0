"""Tests for RegistrarOffice persistence and display wiring."""

import pytest

from registrar import RegistrarOffice
from registrar.config import RegistrarConfig
from registrar.errors import NotFoundError
from registrar.models import Grade, Semester

FALL = Semester.FALL_2025


@pytest.fixture
def office(config):
    return RegistrarOffice(config)


@pytest.fixture
def populated(office):
    """Office with one instructor, two students, three courses and graded enrollments."""
    directory = office.directory
    grace = directory.add_instructor("Grace Hopper", "grace@example.edu", "CSE", "Dr.")
    ada = directory.add_student("REG001", "Ada Lovelace", "ada@example.edu")
    alan = directory.add_student("REG002", "Alan Turing", "alan@example.edu")
    directory.add_course("CSE101", "Intro to Programming", "CSE", credits=4,
                         instructor_id=grace.id)
    directory.add_course("MATH201", "Linear Algebra", "MATH")
    directory.add_course("HIST100", "World History", "HIST")

    office.enrollment.enroll(ada.id, "CSE101", FALL)
    office.enrollment.enroll(ada.id, "MATH201", FALL)
    office.enrollment.enroll(alan.id, "CSE101", FALL)
    office.enrollment.enroll(alan.id, "HIST100", FALL)
    office.enrollment.unenroll(alan.id, "HIST100", FALL)

    office.grading.record_grade(ada.id, "CSE101", FALL, 95.0)      # A
    office.grading.record_grade(ada.id, "MATH201", FALL, Grade.B)
    office.grading.record_grade(alan.id, "CSE101", FALL, 72.0)     # C-
    return office


class TestPersistence:
    """Tests for save_all / load_all."""

    def test_save_all_writes_every_file(self, populated, config):
        paths = populated.save_all()
        assert set(paths) == {"students", "courses", "instructors", "enrollments"}
        for path in paths.values():
            assert path.parent == config.data_dir
            assert path.exists()

    def test_load_all_restores_registry(self, populated, config):
        expected_gpa = populated.directory.find_student("STU0001").gpa
        populated.save_all()

        fresh = RegistrarOffice(config)
        counts = fresh.load_all()

        assert counts == {"instructors": 1, "students": 2, "courses": 3, "enrollments": 4}
        ada = fresh.directory.find_student("STU0001")
        assert ada.gpa == pytest.approx(expected_gpa)
        assert ada.gpa == pytest.approx((4.0 * 4 + 3.0 * 3) / 7)
        assert ada.total_credits == 7

        course = fresh.directory.find_course("CSE101")
        assert course.instructor_id == "INS0001"
        assert not fresh.enrollment.is_enrolled("STU0002", "HIST100", FALL)

    def test_scores_survive_reload(self, populated, config):
        populated.save_all()
        fresh = RegistrarOffice(config)
        fresh.load_all()

        by_percentage = fresh.enrollment.find_enrollment("STU0001", "CSE101", FALL)
        by_letter = fresh.enrollment.find_enrollment("STU0001", "MATH201", FALL)
        assert (by_percentage.grade, by_percentage.percentage_score) == (Grade.A, 95.0)
        assert (by_letter.grade, by_letter.percentage_score) == (Grade.B, None)

    def test_ids_continue_after_load(self, populated, config):
        populated.save_all()
        fresh = RegistrarOffice(config)
        fresh.load_all()

        assert fresh.directory.add_student("REG003", "Grace", "g@example.edu").id == "STU0003"
        assert fresh.directory.add_course("BIO120", "Cell Biology", "BIO").id == "CRS0004"
        assert fresh.enrollment.enroll("STU0002", "MATH201", FALL).id == "ENR0005"

    def test_load_all_with_no_files(self, office):
        counts = office.load_all()
        assert counts == {"instructors": 0, "students": 0, "courses": 0, "enrollments": 0}

    def test_load_all_replaces_existing_records(self, populated, config):
        populated.save_all()
        populated.directory.add_student("REG099", "Temporary", "tmp@example.edu")
        populated.load_all()
        assert populated.directory.find_student_by_reg_no("REG099") is None


class TestDisplay:
    """Tests for the printing helpers."""

    def test_show_transcript(self, populated, capsys):
        transcript = populated.show_transcript("STU0001")
        out = capsys.readouterr().out
        assert "Ada Lovelace" in out
        assert "CSE101" in out
        assert transcript.total_credits == 7

    def test_show_semester_transcript(self, populated):
        transcript = populated.show_transcript("STU0001", Semester.SPRING_2026)
        assert transcript.entries == []

    def test_log_lines_stay_off_stdout(self, tmp_path, capsys):
        office = RegistrarOffice(RegistrarConfig(data_dir=tmp_path, log_level="INFO"))
        student = office.directory.add_student("REG001", "Ada Lovelace", "ada@example.edu")
        office.directory.add_course("CSE101", "Intro to Programming", "CSE")
        office.enrollment.enroll(student.id, "CSE101", FALL)
        office.grading.record_grade(student.id, "CSE101", FALL, 92.5)
        office.show_transcript(student.id)

        out = capsys.readouterr().out
        assert "Ada Lovelace" in out
        for event in ("student_added", "course_added", "student_enrolled",
                      "grade_recorded", "gpa_recalculated"):
            assert event not in out

    def test_show_transcript_unknown_student(self, office):
        with pytest.raises(NotFoundError):
            office.show_transcript("STU9999")

    def test_show_student_profile(self, populated, capsys):
        assert populated.show_student_profile("STU0002")
        assert "Alan Turing" in capsys.readouterr().out
        assert not populated.show_student_profile("STU9999")

    def test_show_reports(self, populated, capsys):
        results = populated.show_reports(top=1)
        assert set(results) == {"gpa_distribution", "semester_statistics",
                                "course_popularity", "top_students", "student_statistics"}
        assert [s.reg_no for s in results["top_students"]] == ["REG001"]
        assert str(results["course_popularity"][0].course_code) == "CSE101"
        assert "REPORTS" in capsys.readouterr().out
