"""
Registrar exceptions.

Every failure the registrar raises on purpose derives from RegistrarError,
so callers can catch the whole family in one place. Lookups that simply
find nothing (unenroll, record_grade) return False instead of raising.
"""


class RegistrarError(Exception):
    """Base exception for registrar errors."""

    pass


class NotFoundError(RegistrarError):
    """Raised when a required student, course, or enrollment is missing."""

    def __init__(self, kind: str, key):
        super().__init__(f"{kind} not found or inactive: {key}")
        self.kind = kind
        self.key = key


class DuplicateEnrollmentError(RegistrarError):
    """Raised when an active enrollment already exists for the triple."""

    def __init__(self, student_id: str, course_code, semester):
        super().__init__(
            f"Student {student_id} is already enrolled in {course_code} for {semester}"
        )
        self.student_id = student_id
        self.course_code = course_code
        self.semester = semester


class MaxCreditLimitExceededError(RegistrarError):
    """
    Raised when an enrollment would push a student past the semester cap.

    Carries the credit figures so the caller can explain the rejection.
    """

    def __init__(self, student_id: str, current_credits: int,
                 max_credits: int, attempted_credits: int):
        super().__init__(
            f"Student {student_id} cannot enroll in {attempted_credits} credits. "
            f"Current: {current_credits}, Max: {max_credits}"
        )
        self.student_id = student_id
        self.current_credits = current_credits
        self.max_credits = max_credits
        self.attempted_credits = attempted_credits


class InvalidScoreError(RegistrarError, ValueError):
    """Raised when a percentage score falls outside [0.0, 100.0]."""

    def __init__(self, score: float):
        super().__init__(f"Percentage score must be between 0.0 and 100.0, got {score}")
        self.score = score


class RecordFormatError(RegistrarError, ValueError):
    """Raised when a persisted record line cannot be parsed."""

    pass
