"""
Enrollment Engine.

This module owns the enrollment records and the rules for creating and
withdrawing them.
"""

from typing import Optional

from ..config import ENROLLMENT_ID_PREFIX, RegistrarConfig, format_record_id, parse_record_number
from ..data import EntityDirectory
from ..errors import DuplicateEnrollmentError, MaxCreditLimitExceededError, NotFoundError
from ..models import CourseCode, Enrollment, Semester
from ..utils import get_logger

logger = get_logger(__name__)


class EnrollmentEngine:
    """
    Creates and withdraws enrollments under the registrar's invariants.

    INVARIANTS:
    -----------
    1. UNIQUENESS: Among active enrollments, (student, course, semester)
       appears at most once. A student may re-enroll after withdrawing; the
       withdrawn record stays behind as inactive history.

    2. CREDIT CAP: The credits of a student's active enrollments in one
       semester never exceed `config.max_credits_per_semester` (18).

    Every check runs before anything is mutated, so a rejected enrollment
    leaves no trace.

    SOFT DEACTIVATION:
    ------------------
    Withdrawal flips `active` to False. Records are never removed, and
    every query below looks at active records only unless it says otherwise.
    """

    def __init__(self, directory: EntityDirectory, config: RegistrarConfig):
        self.directory = directory
        self.config = config
        self._enrollments = []
        self._next_id = 1

    # =========================================================================
    # ENROLL / UNENROLL
    # =========================================================================

    def enroll(self, student_id: str, course_code, semester: Semester) -> Enrollment:
        """
        Enroll a student in a course for a semester.

        Args:
            student_id: Id of an active student
            course_code: Code of an active course (CourseCode or string)
            semester: Semester of the enrollment

        Returns:
            The newly created Enrollment

        Raises:
            NotFoundError: Student or course missing or inactive
            DuplicateEnrollmentError: Already actively enrolled in the triple
            MaxCreditLimitExceededError: The course would exceed the cap
        """
        student = self.directory.find_student(student_id)
        if student is None or not student.active:
            raise NotFoundError("Student", student_id)

        course = self.directory.find_course(course_code)
        if course is None or not course.active:
            raise NotFoundError("Course", course_code)
        code = course.code

        if self.is_enrolled(student_id, code, semester):
            logger.warning("enrollment_rejected", reason="duplicate",
                           student_id=student_id, course_code=str(code), semester=str(semester))
            raise DuplicateEnrollmentError(student_id, code, semester)

        current = self.current_semester_credits(student_id, semester)
        max_credits = self.config.max_credits_per_semester
        if current + course.credits > max_credits:
            logger.warning("enrollment_rejected", reason="credit_limit",
                           student_id=student_id, course_code=str(code),
                           current_credits=current, attempted_credits=course.credits)
            raise MaxCreditLimitExceededError(student_id, current, max_credits, course.credits)

        enrollment = Enrollment(
            id=format_record_id(ENROLLMENT_ID_PREFIX, self._next_id),
            student_id=student_id,
            course_code=code,
            semester=semester,
        )
        self._next_id += 1
        self._enrollments.append(enrollment)
        student.enroll_in_course(code)

        logger.info("student_enrolled", enrollment_id=enrollment.id, student_id=student_id,
                    course_code=str(code), semester=str(semester))
        return enrollment

    def unenroll(self, student_id: str, course_code, semester: Semester) -> bool:
        """
        Withdraw a student from a course.

        Returns:
            True if an active enrollment was deactivated, False if there was
            nothing to withdraw (which is not an error)
        """
        enrollment = self.find_enrollment(student_id, course_code, semester)
        if enrollment is None:
            return False

        enrollment.active = False
        student = self.directory.find_student(student_id)
        if student is not None:
            student.unenroll_from_course(enrollment.course_code)

        logger.info("student_unenrolled", enrollment_id=enrollment.id, student_id=student_id,
                    course_code=str(enrollment.course_code), semester=str(semester))
        return True

    # =========================================================================
    # LOOKUPS
    # =========================================================================

    def find_enrollment(self, student_id: str, course_code,
                        semester: Semester) -> Optional[Enrollment]:
        """Return the active enrollment for the triple, or None."""
        try:
            code = CourseCode.parse(course_code)
        except ValueError:
            return None
        for enrollment in self._enrollments:
            if enrollment.active and enrollment.matches(student_id, code, semester):
                return enrollment
        return None

    def is_enrolled(self, student_id: str, course_code, semester: Semester) -> bool:
        return self.find_enrollment(student_id, course_code, semester) is not None

    def current_semester_credits(self, student_id: str, semester: Semester) -> int:
        """
        Sum of credits over the student's active enrollments in a semester.

        Courses that can no longer be resolved contribute 0 rather than
        raising.
        """
        total = 0
        for enrollment in self._enrollments:
            if (enrollment.active and enrollment.student_id == student_id
                    and enrollment.semester == semester):
                course = self.directory.find_course(enrollment.course_code)
                total += course.credits if course is not None else 0
        return total

    def student_enrollments(self, student_id: str) -> list:
        """Active enrollments of a student, in the order they were created."""
        return [e for e in self._enrollments if e.active and e.student_id == student_id]

    def course_enrollments(self, course_code, semester: Semester) -> list:
        code = CourseCode.parse(course_code)
        return [
            e for e in self._enrollments
            if e.active and e.course_code == code and e.semester == semester
        ]

    def semester_enrollments(self, semester: Semester) -> list:
        return [e for e in self._enrollments if e.active and e.semester == semester]

    def graded_enrollments(self) -> list:
        """Every graded enrollment, including withdrawn ones."""
        return [e for e in self._enrollments if e.is_graded]

    def ungraded_enrollments(self) -> list:
        return [e for e in self._enrollments if e.active and not e.is_graded]

    def all_enrollments(self) -> list:
        """Every enrollment record, active or not (for persistence)."""
        return list(self._enrollments)

    # =========================================================================
    # DATA MANAGEMENT
    # =========================================================================

    def load(self, enrollments: list):
        """
        Register previously persisted enrollments.

        The id sequence continues after the highest loaded id. Records are
        taken as-is; the uniqueness and credit rules are not re-checked.
        """
        for enrollment in enrollments:
            self._enrollments.append(enrollment)
            number = parse_record_number(enrollment.id, ENROLLMENT_ID_PREFIX)
            self._next_id = max(self._next_id, number + 1)
        logger.info("enrollments_loaded", count=len(enrollments))

    def clear(self):
        self._enrollments.clear()
        self._next_id = 1

    def count(self) -> int:
        return len(self._enrollments)
