"""
Academic value types.

Contains the Grade and Semester enums and the CourseCode value object that
the rest of the registrar keys its records on.
"""

from dataclasses import dataclass
from enum import Enum


class Grade(Enum):
    """
    Letter grades with their grade-point values.

    INCOMPLETE (I) and WITHDRAWAL (W) carry 0.0 points but are left out of
    GPA calculations entirely, unlike F which counts as 0.0.
    """
    A_PLUS = ("A+", 4.0)
    A = ("A", 4.0)
    A_MINUS = ("A-", 3.7)
    B_PLUS = ("B+", 3.3)
    B = ("B", 3.0)
    B_MINUS = ("B-", 2.7)
    C_PLUS = ("C+", 2.3)
    C = ("C", 2.0)
    C_MINUS = ("C-", 1.7)
    D_PLUS = ("D+", 1.3)
    D = ("D", 1.0)
    F = ("F", 0.0)
    INCOMPLETE = ("I", 0.0)
    WITHDRAWAL = ("W", 0.0)

    def __init__(self, letter: str, grade_points: float):
        self.letter = letter
        self.grade_points = grade_points

    @property
    def counts_towards_gpa(self) -> bool:
        return self not in (Grade.INCOMPLETE, Grade.WITHDRAWAL)

    @classmethod
    def from_percentage(cls, percentage: float) -> "Grade":
        """
        Map a percentage score to its letter grade.

        The caller is responsible for range checking; anything under 60
        (including negative values) maps to F.
        """
        for threshold, grade in _PERCENTAGE_THRESHOLDS:
            if percentage >= threshold:
                return grade
        return cls.F

    @classmethod
    def from_letter(cls, letter: str) -> "Grade":
        """Parse a letter such as "B+" (or an enum name such as "B_PLUS")."""
        text = letter.strip().upper()
        for grade in cls:
            if grade.letter == text or grade.name == text:
                return grade
        raise ValueError(f"Unknown letter grade: {letter!r}")

    def __str__(self):
        return self.letter


# Lowest percentage that still earns each grade, highest first
_PERCENTAGE_THRESHOLDS = (
    (97, Grade.A_PLUS),
    (93, Grade.A),
    (90, Grade.A_MINUS),
    (87, Grade.B_PLUS),
    (83, Grade.B),
    (80, Grade.B_MINUS),
    (77, Grade.C_PLUS),
    (73, Grade.C),
    (70, Grade.C_MINUS),
    (67, Grade.D_PLUS),
    (60, Grade.D),
)


class Semester(Enum):
    """
    Academic semesters in chronological order.

    Declaration order IS the ordering: comparisons and next() follow it,
    and reports list semesters in this order.
    """
    FALL_2024 = (2024, "Fall")
    SPRING_2025 = (2025, "Spring")
    SUMMER_2025 = (2025, "Summer")
    FALL_2025 = (2025, "Fall")
    SPRING_2026 = (2026, "Spring")
    SUMMER_2026 = (2026, "Summer")

    def __init__(self, year: int, season: str):
        self.year = year
        self.season = season

    @property
    def position(self) -> int:
        return list(Semester).index(self)

    def next(self) -> "Semester":
        """Return the following semester; the last semester returns itself."""
        ordered = list(Semester)
        return ordered[min(self.position + 1, len(ordered) - 1)]

    def __lt__(self, other):
        if not isinstance(other, Semester):
            return NotImplemented
        return self.position < other.position

    def __le__(self, other):
        if not isinstance(other, Semester):
            return NotImplemented
        return self.position <= other.position

    def __gt__(self, other):
        if not isinstance(other, Semester):
            return NotImplemented
        return self.position > other.position

    def __ge__(self, other):
        if not isinstance(other, Semester):
            return NotImplemented
        return self.position >= other.position

    @classmethod
    def parse(cls, text: str) -> "Semester":
        """
        Parse "Fall 2025", "FALL_2025" or "fall-2025" into a Semester.
        """
        key = text.strip().upper().replace(" ", "_").replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown semester: {text!r}") from None

    def __str__(self):
        return f"{self.season} {self.year}"


@dataclass(frozen=True, order=True)
class CourseCode:
    """
    Immutable course code made of a department prefix and a number.

    Example:
        CourseCode.parse("cse101") -> CourseCode(department="CSE", number="101")
        str(CourseCode("MATH", "20A")) -> "MATH20A"
    """
    department: str
    number: str

    def __post_init__(self):
        if not self.department or not self.department.strip():
            raise ValueError("Department cannot be empty")
        if not self.number or not self.number.strip():
            raise ValueError("Number cannot be empty")
        # Normalize through object.__setattr__ since the dataclass is frozen
        object.__setattr__(self, "department", self.department.strip().upper())
        object.__setattr__(self, "number", self.number.strip().upper())

    @classmethod
    def parse(cls, code) -> "CourseCode":
        """
        Parse a code such as "CSE101" into department letters and number.

        Accepts an existing CourseCode unchanged so callers may pass either.
        """
        if isinstance(code, CourseCode):
            return code
        if code is None or not str(code).strip():
            raise ValueError("Course code cannot be empty")

        text = str(code).strip().upper().replace(" ", "")
        i = 0
        while i < len(text) and text[i].isalpha():
            i += 1
        if i == 0 or i >= len(text):
            raise ValueError(f"Invalid course code format: {code!r}")
        return cls(text[:i], text[i:])

    def __str__(self):
        return f"{self.department}{self.number}"
