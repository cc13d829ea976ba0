"""
Course data model.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..config import DEFAULT_COURSE_CREDITS
from .academic import CourseCode, Semester


@dataclass
class Course:
    """
    A course offered in one semester.

    The registrar only reads courses: `credits` feeds the credit cap and GPA
    weighting, `semester` scopes the popularity report, and `active`
    decides whether new enrollments are accepted.

    Attributes:
        id: Registry id (e.g., "CRS0001")
        code: Course code, unique within the directory
        title: Human-readable course title
        department: Owning department
        credits: Positive credit count
        description: Free-text description
        instructor_id: Id of the assigned instructor, if any
        semester: Semester the course is offered in
        active: False once the course has been withdrawn from the catalog
    """
    id: str
    code: CourseCode
    title: str
    department: str
    credits: int = DEFAULT_COURSE_CREDITS
    description: str = ""
    instructor_id: Optional[str] = None
    semester: Semester = Semester.FALL_2025
    active: bool = True
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        if self.credits <= 0:
            raise ValueError("Credits must be positive")
