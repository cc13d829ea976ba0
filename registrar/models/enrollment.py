"""
Enrollment data model.

An Enrollment links one student to one course in one semester. It is
created by the EnrollmentEngine, graded in place by the GradeCalculator,
and soft-deactivated (never deleted) on withdrawal.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .academic import CourseCode, Grade, Semester


@dataclass
class Enrollment:
    """
    A single enrollment record.

    Attributes:
        id: Engine-assigned id (e.g., "ENR0001")
        student_id: Id of the enrolled student
        course_code: Code of the course
        semester: Semester of the enrollment
        enrolled_at: Creation timestamp
        grade: Letter grade, or None until graded
        percentage_score: Raw score behind the grade, or None when the grade
            was recorded as a letter (or not at all)
        active: False once the student has withdrawn
    """
    id: str
    student_id: str
    course_code: CourseCode
    semester: Semester
    enrolled_at: datetime = field(default_factory=datetime.now)
    grade: Optional[Grade] = None
    percentage_score: Optional[float] = None
    active: bool = True

    @property
    def is_graded(self) -> bool:
        return self.grade is not None

    @property
    def grade_points(self) -> float:
        return self.grade.grade_points if self.grade is not None else 0.0

    def matches(self, student_id: str, course_code: CourseCode, semester: Semester) -> bool:
        """True if this enrollment is for the given (student, course, semester)."""
        return (
            self.student_id == student_id
            and self.course_code == course_code
            and self.semester == semester
        )
