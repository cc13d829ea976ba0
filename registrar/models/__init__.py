"""
Data models for the registrar.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between the engines, the file layer and the UI.
"""

from .academic import CourseCode, Grade, Semester
from .people import Instructor, Person, Student, describe
from .course import Course
from .enrollment import Enrollment
from .transcript import Transcript, TranscriptEntry
from .report import CoursePopularity, GpaDistribution, SemesterStatistic, StudentStatistics

__all__ = [
    # Value types
    "CourseCode",
    "Grade",
    "Semester",
    # People
    "Instructor",
    "Person",
    "Student",
    "describe",
    # Catalog and enrollment
    "Course",
    "Enrollment",
    # Transcripts
    "Transcript",
    "TranscriptEntry",
    # Reports
    "CoursePopularity",
    "GpaDistribution",
    "SemesterStatistic",
    "StudentStatistics",
]
