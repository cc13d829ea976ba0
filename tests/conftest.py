"""Pytest configuration and shared fixtures.

Fixtures build a fresh registry per test:
- config: RegistrarConfig pointing at a temporary data directory
- directory: empty EntityDirectory
- engine / grading / transcripts / reports: engines wired to the directory
- student / courses: a seeded student and a small catalog
"""

import pytest

from registrar.config import RegistrarConfig
from registrar.data import EntityDirectory
from registrar.engines import (
    EnrollmentEngine,
    GradeCalculator,
    ReportAggregator,
    TranscriptBuilder,
)
from registrar.models import Semester


# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture
def config(tmp_path):
    """Config with its data directory under pytest's tmp_path."""
    return RegistrarConfig(data_dir=tmp_path / "data")


# =============================================================================
# Registry and engines
# =============================================================================


@pytest.fixture
def directory():
    return EntityDirectory()


@pytest.fixture
def engine(directory, config):
    return EnrollmentEngine(directory, config)


@pytest.fixture
def grading(directory, engine, config):
    return GradeCalculator(directory, engine, config)


@pytest.fixture
def transcripts(directory, engine, config):
    return TranscriptBuilder(directory, engine, config)


@pytest.fixture
def reports(directory, engine, config):
    return ReportAggregator(directory, engine, config)


# =============================================================================
# Seed data
# =============================================================================


@pytest.fixture
def student(directory):
    return directory.add_student("REG001", "Ada Lovelace", "ada@example.edu")


@pytest.fixture
def other_student(directory):
    return directory.add_student("REG002", "Alan Turing", "alan@example.edu")


@pytest.fixture
def courses(directory):
    """A small Fall 2025 catalog keyed by code string."""
    catalog = [
        ("CSE101", "Intro to Programming", "CSE", 3),
        ("CSE201", "Data Structures", "CSE", 3),
        ("MATH201", "Linear Algebra", "MATH", 3),
        ("PHYS110", "Mechanics", "PHYS", 4),
        ("HIST100", "World History", "HIST", 3),
        ("ART150", "Drawing", "ART", 2),
        ("BIO120", "Cell Biology", "BIO", 4),
    ]
    return {
        code: directory.add_course(code, title, dept, credits=credits,
                                   semester=Semester.FALL_2025)
        for code, title, dept, credits in catalog
    }
