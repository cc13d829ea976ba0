"""
Campus Registrar Package
========================

A small registry of students, courses and enrollments for an academic term,
with enrollment rules, grading, GPA, transcripts and reports.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                           ENGINE LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌──────────────────┐  ┌──────────────────┐  ┌──────────────────────┐   │
│  │ EnrollmentEngine │─▶│ GradeCalculator  │  │  TranscriptBuilder   │   │
│  │ (uniqueness,     │  │ (scores, grades, │  │  (per-student view)  │   │
│  │  credit cap)     │  │  GPA recompute)  │  └──────────────────────┘   │
│  └──────────────────┘  └──────────────────┘  ┌──────────────────────┐   │
│                                              │  ReportAggregator    │   │
│                                              │  (registry stats)    │   │
│                                              └──────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                │ reads/mutates                      │ returns dataclasses
                ▼                                    ▼
┌──────────────────────────────────┐   ┌──────────────────────────────────┐
│          DATA LAYER              │   │       PRESENTATION LAYER         │
│  EntityDirectory (in memory)     │   │  TerminalDisplay (only printer)  │
│  CsvStore (files, backups)       │   │  cli.main (menus)                │
└──────────────────────────────────┘   └──────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                        RegistrarOffice                                  │
│          (Orchestrator - wires every component to one config)           │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

registrar/
├── __init__.py          # This file - main exports
├── config.py            # Defaults and RegistrarConfig
├── errors.py            # RegistrarError and subclasses
├── office.py            # RegistrarOffice orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── academic.py      # Grade, Semester, CourseCode
│   ├── people.py        # Student, Instructor
│   ├── course.py        # Course
│   ├── enrollment.py    # Enrollment
│   ├── transcript.py    # Transcript, TranscriptEntry
│   └── report.py        # GpaDistribution, CoursePopularity, ...
│
├── data/                # Record storage
│   ├── directory.py     # EntityDirectory
│   └── csv_store.py     # CsvStore
│
├── engines/             # Business rules
│   ├── enrollment.py    # EnrollmentEngine
│   ├── grading.py       # GradeCalculator
│   ├── transcript.py    # TranscriptBuilder
│   └── reports.py       # ReportAggregator
│
├── ui/
│   └── terminal.py      # TerminalDisplay
│
└── utils/
    └── logging.py       # structlog setup

USAGE
-----

    from registrar import RegistrarConfig, RegistrarOffice, Semester

    office = RegistrarOffice(RegistrarConfig())
    student = office.directory.add_student("REG001", "Ada Lovelace", "ada@example.edu")
    office.directory.add_course("CSE101", "Intro to Programming", "CSE", credits=4)

    office.enrollment.enroll(student.id, "CSE101", Semester.FALL_2025)
    office.grading.record_grade(student.id, "CSE101", Semester.FALL_2025, 92.5)  # A-
    transcript = office.transcripts.generate_transcript(student.id)

Running from command line:

    python -m registrar

"""

# Version
__version__ = "1.0.0"

# Main exports
from .office import RegistrarOffice
from .cli import main

# Model exports (for programmatic use)
from .models import (
    Course,
    CourseCode,
    CoursePopularity,
    Enrollment,
    GpaDistribution,
    Grade,
    Instructor,
    Semester,
    SemesterStatistic,
    Student,
    StudentStatistics,
    Transcript,
    TranscriptEntry,
)

# Engine exports
from .engines import (
    EnrollmentEngine,
    GradeCalculator,
    ReportAggregator,
    TranscriptBuilder,
)

# Data exports
from .data import CsvStore, EntityDirectory

# UI exports
from .ui import TerminalDisplay

# Configuration and errors
from .config import MAX_CREDITS_PER_SEMESTER, RegistrarConfig
from .errors import (
    DuplicateEnrollmentError,
    InvalidScoreError,
    MaxCreditLimitExceededError,
    NotFoundError,
    RecordFormatError,
    RegistrarError,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "RegistrarOffice",
    "main",
    # Models
    "Course",
    "CourseCode",
    "CoursePopularity",
    "Enrollment",
    "GpaDistribution",
    "Grade",
    "Instructor",
    "Semester",
    "SemesterStatistic",
    "Student",
    "StudentStatistics",
    "Transcript",
    "TranscriptEntry",
    # Engines
    "EnrollmentEngine",
    "GradeCalculator",
    "ReportAggregator",
    "TranscriptBuilder",
    # Data
    "CsvStore",
    "EntityDirectory",
    # UI
    "TerminalDisplay",
    # Config
    "MAX_CREDITS_PER_SEMESTER",
    "RegistrarConfig",
    # Errors
    "DuplicateEnrollmentError",
    "InvalidScoreError",
    "MaxCreditLimitExceededError",
    "NotFoundError",
    "RecordFormatError",
    "RegistrarError",
]
