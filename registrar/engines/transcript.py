"""
Transcript Builder.

This module joins a student's enrollments with course data into a
Transcript.
"""

from typing import Optional

from ..config import RegistrarConfig
from ..data import EntityDirectory
from ..errors import NotFoundError
from ..models import Semester, Transcript, TranscriptEntry
from .enrollment import EnrollmentEngine


class TranscriptBuilder:
    """
    Builds transcripts on demand.

    Entries follow the student's enrollment order rather than being sorted,
    so the transcript reads in the order the student signed up. Enrollments
    whose course no longer resolves are left off. GPA and credit totals are
    recomputed from the entries themselves; the stored student GPA is not
    consulted, which is what lets a semester transcript show a
    semester-only GPA.
    """

    def __init__(self, directory: EntityDirectory, enrollment_engine: EnrollmentEngine,
                 config: RegistrarConfig):
        self.directory = directory
        self.enrollments = enrollment_engine
        self.config = config

    def generate_transcript(self, student_id: str) -> Transcript:
        """
        Transcript of every active enrollment across all semesters.

        Raises:
            NotFoundError: Unknown student (inactive students still get one)
        """
        return self._build(student_id, semester=None)

    def generate_semester_transcript(self, student_id: str, semester: Semester) -> Transcript:
        """Transcript restricted to one semester."""
        return self._build(student_id, semester=semester)

    def _build(self, student_id: str, semester: Optional[Semester]) -> Transcript:
        student = self.directory.find_student(student_id)
        if student is None:
            raise NotFoundError("Student", student_id)

        transcript = Transcript(student_id=student.id, student_name=student.full_name)

        for enrollment in self.enrollments.student_enrollments(student_id):
            if semester is not None and enrollment.semester != semester:
                continue
            course = self.directory.find_course(enrollment.course_code)
            if course is None:
                continue
            transcript.add_entry(TranscriptEntry(
                course_code=str(enrollment.course_code),
                course_title=course.title,
                credits=course.credits,
                grade=enrollment.grade,
                semester=enrollment.semester,
            ))

        return transcript
