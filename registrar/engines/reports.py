"""
Report Aggregator.

This module computes registry-wide statistics from students, courses and
enrollments. Every report is read-only.
"""

from ..config import GPA_BANDS, RegistrarConfig
from ..data import EntityDirectory
from ..models import (
    CoursePopularity,
    GpaDistribution,
    Semester,
    SemesterStatistic,
    StudentStatistics,
)
from .enrollment import EnrollmentEngine

# GpaDistribution attribute for each band name in config.GPA_BANDS
_BAND_FIELDS = {
    "Excellent": "excellent",
    "Good": "good",
    "Satisfactory": "satisfactory",
    "Needs Improvement": "needs_improvement",
}


class ReportAggregator:
    """
    Cross-cutting statistics over the registry.

    REPORTS:
    --------
    - GPA distribution: active students per GPA band
    - Semester statistics: active enrollments per semester, every semester
      listed (zero counts included) in chronological order
    - Course popularity: active enrollments per active course in that
      course's own semester, most popular first; equal counts are ordered
      by course code so the ranking is stable
    - Top students and student statistics
    """

    def __init__(self, directory: EntityDirectory, enrollment_engine: EnrollmentEngine,
                 config: RegistrarConfig):
        self.directory = directory
        self.enrollments = enrollment_engine
        self.config = config

    def gpa_distribution(self) -> GpaDistribution:
        distribution = GpaDistribution()
        for student in self.directory.active_students():
            field_name = _BAND_FIELDS[self.gpa_band(student.gpa)]
            setattr(distribution, field_name, getattr(distribution, field_name) + 1)
        return distribution

    @staticmethod
    def gpa_band(gpa: float) -> str:
        """Name of the GPA band a value falls into."""
        for name, lower_bound in GPA_BANDS:
            if gpa >= lower_bound:
                return name
        # Only reachable for negative values, which Student.set_gpa rejects
        return GPA_BANDS[-1][0]

    def semester_statistics(self) -> list:
        return [
            SemesterStatistic(semester=semester,
                              enrollment_count=len(self.enrollments.semester_enrollments(semester)))
            for semester in Semester
        ]

    def course_popularity(self) -> list:
        results = [
            CoursePopularity(
                course_code=course.code,
                title=course.title,
                semester=course.semester,
                enrollment_count=len(self.enrollments.course_enrollments(course.code,
                                                                         course.semester)),
            )
            for course in self.directory.active_courses()
        ]
        results.sort(key=lambda r: r.sort_key)
        return results

    def top_students(self, limit: int = 5) -> list:
        """Active students by GPA, highest first; ties keep registry order."""
        students = sorted(self.directory.active_students(), key=lambda s: s.gpa, reverse=True)
        return students[:limit]

    def student_statistics(self) -> StudentStatistics:
        students = self.directory.list_students()
        active = [s for s in students if s.active]
        average = sum(s.gpa for s in active) / len(active) if active else 0.0
        return StudentStatistics(
            total_students=len(students),
            active_students=len(active),
            average_gpa=average,
        )
