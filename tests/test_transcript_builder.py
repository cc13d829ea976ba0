"""Unit tests for TranscriptBuilder."""

import pytest

from registrar.errors import NotFoundError
from registrar.models import Grade, Semester

FALL = Semester.FALL_2025
SPRING = Semester.SPRING_2026


class TestGenerateTranscript:
    """Tests for generate_transcript."""

    def test_unknown_student(self, transcripts):
        with pytest.raises(NotFoundError):
            transcripts.generate_transcript("STU9999")

    def test_no_enrollments(self, transcripts, student):
        transcript = transcripts.generate_transcript(student.id)
        assert transcript.student_id == student.id
        assert transcript.student_name == "Ada Lovelace"
        assert transcript.entries == []
        assert transcript.overall_gpa == 0.0
        assert transcript.total_credits == 0

    def test_entries_follow_enrollment_order(self, transcripts, engine, grading, student, courses):
        engine.enroll(student.id, "PHYS110", FALL)
        engine.enroll(student.id, "CSE101", FALL)
        grading.record_grade(student.id, "PHYS110", FALL, 88.0)

        transcript = transcripts.generate_transcript(student.id)
        assert [e.course_code for e in transcript.entries] == ["PHYS110", "CSE101"]

        physics, intro = transcript.entries
        assert physics.course_title == "Mechanics"
        assert physics.credits == 4
        assert physics.grade is Grade.B_PLUS
        assert physics.grade_points == pytest.approx(3.3 * 4)
        assert intro.grade is None

    def test_ungraded_entries_do_not_affect_totals(self, transcripts, engine, grading,
                                                   student, courses):
        engine.enroll(student.id, "CSE101", FALL)
        engine.enroll(student.id, "MATH201", FALL)
        grading.record_grade(student.id, "CSE101", FALL, Grade.B)

        transcript = transcripts.generate_transcript(student.id)
        assert len(transcript.entries) == 2
        assert transcript.overall_gpa == pytest.approx(3.0)
        assert transcript.total_credits == 3

    def test_matches_student_gpa(self, transcripts, engine, grading, student, courses):
        engine.enroll(student.id, "CSE101", FALL)
        engine.enroll(student.id, "PHYS110", FALL)
        engine.enroll(student.id, "HIST100", FALL)
        grading.record_grade(student.id, "CSE101", FALL, 91.0)
        grading.record_grade(student.id, "PHYS110", FALL, 75.0)
        grading.record_grade(student.id, "HIST100", FALL, Grade.WITHDRAWAL)

        transcript = transcripts.generate_transcript(student.id)
        assert transcript.overall_gpa == pytest.approx(student.gpa)
        assert transcript.total_credits == student.total_credits

    def test_withdrawn_enrollments_are_omitted(self, transcripts, engine, student, courses):
        engine.enroll(student.id, "CSE101", FALL)
        engine.enroll(student.id, "MATH201", FALL)
        engine.unenroll(student.id, "CSE101", FALL)

        transcript = transcripts.generate_transcript(student.id)
        assert [e.course_code for e in transcript.entries] == ["MATH201"]

    def test_inactive_student_still_gets_transcript(self, transcripts, engine, directory,
                                                    student, courses):
        engine.enroll(student.id, "CSE101", FALL)
        directory.deactivate_student(student.id)
        assert len(transcripts.generate_transcript(student.id).entries) == 1


class TestSemesterTranscript:
    """Tests for generate_semester_transcript."""

    def test_filters_by_semester(self, transcripts, engine, grading, student, courses):
        engine.enroll(student.id, "CSE101", FALL)
        engine.enroll(student.id, "MATH201", SPRING)
        grading.record_grade(student.id, "CSE101", FALL, Grade.A)
        grading.record_grade(student.id, "MATH201", SPRING, Grade.C)

        fall = transcripts.generate_semester_transcript(student.id, FALL)
        spring = transcripts.generate_semester_transcript(student.id, SPRING)

        assert [e.course_code for e in fall.entries] == ["CSE101"]
        assert fall.overall_gpa == pytest.approx(4.0)
        assert spring.overall_gpa == pytest.approx(2.0)
        assert transcripts.generate_transcript(student.id).overall_gpa == pytest.approx(3.0)

    def test_empty_semester(self, transcripts, engine, student, courses):
        engine.enroll(student.id, "CSE101", FALL)
        transcript = transcripts.generate_semester_transcript(student.id, Semester.SUMMER_2026)
        assert transcript.entries == []
        assert transcript.overall_gpa == 0.0

    def test_unknown_student(self, transcripts):
        with pytest.raises(NotFoundError):
            transcripts.generate_semester_transcript("STU9999", FALL)
