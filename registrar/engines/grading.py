"""
Grade Calculator.

This module records grades on enrollments and keeps each student's GPA in
step with them.
"""

from typing import Union

from ..config import RegistrarConfig
from ..data import EntityDirectory
from ..errors import InvalidScoreError
from ..models import Grade, Semester
from ..utils import get_logger
from .enrollment import EnrollmentEngine

logger = get_logger(__name__)


class GradeCalculator:
    """
    Records grades and recomputes GPA.

    GPA FORMULA:
    ------------
    Over the student's ACTIVE enrollments whose grade counts towards GPA
    (everything except I and W) and whose course still resolves:

        GPA = sum(grade_points x credits) / sum(credits)

    and 0.0 when no credits qualify. The GPA and the qualifying credit
    total are written to the student after every recorded grade; nothing
    else writes them.

    SCORE VS LETTER:
    ----------------
    A grade can be recorded from a percentage (the letter is derived) or
    as a letter directly. The letter is the canonical value: recording a
    letter clears any earlier percentage so the two never disagree.
    """

    def __init__(self, directory: EntityDirectory, enrollment_engine: EnrollmentEngine,
                 config: RegistrarConfig):
        self.directory = directory
        self.enrollments = enrollment_engine
        self.config = config

    def record_grade(self, student_id: str, course_code, semester: Semester,
                     result: Union[float, Grade]) -> bool:
        """
        Record a grade for an active enrollment.

        Args:
            student_id: Id of the student
            course_code: Code of the course
            semester: Semester of the enrollment
            result: Percentage score in [0.0, 100.0], or a Grade

        Returns:
            True if the grade was recorded, False if there is no active
            enrollment for the triple

        Raises:
            InvalidScoreError: Percentage outside [0.0, 100.0] (checked before
                the lookup, so it is raised even when nothing would match)
        """
        if isinstance(result, Grade):
            grade, score = result, None
        elif isinstance(result, (int, float)) and not isinstance(result, bool):
            score = float(result)
            grade = self.grade_for_score(score)
        else:
            raise TypeError(f"Expected a percentage or a Grade, got {type(result).__name__}")

        enrollment = self.enrollments.find_enrollment(student_id, course_code, semester)
        if enrollment is None:
            return False

        enrollment.grade = grade
        enrollment.percentage_score = score
        logger.info("grade_recorded", enrollment_id=enrollment.id, student_id=student_id,
                    course_code=str(enrollment.course_code), grade=grade.letter, score=score)

        self.recalculate_gpa(student_id)
        return True

    @staticmethod
    def grade_for_score(score: float) -> Grade:
        """Validate a percentage score and map it to its letter grade."""
        if not 0.0 <= score <= 100.0:
            raise InvalidScoreError(score)
        return Grade.from_percentage(score)

    def calculate_gpa(self, student_id: str) -> tuple:
        """
        Compute a student's GPA without writing it.

        Returns:
            (gpa, qualifying_credits)
        """
        weighted_points = 0.0
        credits = 0
        for enrollment in self.enrollments.student_enrollments(student_id):
            if enrollment.grade is None or not enrollment.grade.counts_towards_gpa:
                continue
            course = self.directory.find_course(enrollment.course_code)
            if course is None:
                continue
            weighted_points += enrollment.grade.grade_points * course.credits
            credits += course.credits
        gpa = weighted_points / credits if credits > 0 else 0.0
        return gpa, credits

    def recalculate_gpa(self, student_id: str) -> float:
        """Recompute and store a student's GPA and credit total."""
        gpa, credits = self.calculate_gpa(student_id)
        student = self.directory.find_student(student_id)
        if student is not None:
            # Guard against float drift just past the 4.0 ceiling
            student.set_gpa(min(gpa, 4.0))
            student.set_total_credits(credits)
            logger.info("gpa_recalculated", student_id=student_id, gpa=round(gpa, 3),
                        total_credits=credits)
        return gpa

    def recalculate_all(self):
        """Recompute every student's GPA (e.g., after loading saved data)."""
        for student in self.directory.list_students():
            self.recalculate_gpa(student.id)
