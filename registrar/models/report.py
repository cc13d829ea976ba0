"""
Report data models.

Result types returned by the ReportAggregator. They carry counts only; the
terminal display decides how they are worded.
"""

from dataclasses import dataclass

from .academic import CourseCode, Semester


@dataclass
class GpaDistribution:
    """
    Count of active students per GPA band.

    The four bands are non-overlapping and cover every GPA from 0.0 to 4.0:
        Excellent          3.7 and above
        Good               3.0 to below 3.7
        Satisfactory       2.0 to below 3.0
        Needs Improvement  below 2.0
    """
    excellent: int = 0
    good: int = 0
    satisfactory: int = 0
    needs_improvement: int = 0

    @property
    def total(self) -> int:
        return self.excellent + self.good + self.satisfactory + self.needs_improvement

    def as_dict(self) -> dict:
        return {
            "Excellent": self.excellent,
            "Good": self.good,
            "Satisfactory": self.satisfactory,
            "Needs Improvement": self.needs_improvement,
        }


@dataclass
class SemesterStatistic:
    semester: Semester
    enrollment_count: int


@dataclass
class CoursePopularity:
    """
    Active enrollment count for one course in its own semester.
    """
    course_code: CourseCode
    title: str
    semester: Semester
    enrollment_count: int

    @property
    def sort_key(self) -> tuple:
        """Most enrolled first; equal counts fall back to course code order."""
        return (-self.enrollment_count, str(self.course_code))


@dataclass
class StudentStatistics:
    total_students: int
    active_students: int
    average_gpa: float
