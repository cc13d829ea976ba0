"""
Enrollment and grading engines.

This package contains the engines that perform the core business logic of
the registrar.
"""

from .enrollment import EnrollmentEngine
from .grading import GradeCalculator
from .transcript import TranscriptBuilder
from .reports import ReportAggregator

__all__ = [
    "EnrollmentEngine",
    "GradeCalculator",
    "TranscriptBuilder",
    "ReportAggregator",
]
