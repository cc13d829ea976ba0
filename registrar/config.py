"""
Configuration for the registrar.

This module contains the default values used throughout the registrar and
the RegistrarConfig value that carries them at runtime. The config is built
once at startup and handed to every component; nothing reads module state
behind the caller's back.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# =============================================================================
# FILE PATHS
# =============================================================================

# Data directory name, resolved against the working directory when a config
# is built
DATA_DIR_NAME = "data"
BACKUP_DIR_NAME = "backups"
BACKUP_PREFIX = "backup_"

STUDENTS_FILE = "students.csv"
COURSES_FILE = "courses.csv"
INSTRUCTORS_FILE = "instructors.csv"
ENROLLMENTS_FILE = "enrollments.csv"

# The delimiter is written as-is, with no quoting or escaping of fields.
# A title such as "Data, Structures" will not survive a round trip.
CSV_DELIMITER = ","


# =============================================================================
# ENROLLMENT RULES
# =============================================================================

# A student may carry at most this many credits (active enrollments) in one
# semester. Enrollment attempts beyond the cap are rejected.
MAX_CREDITS_PER_SEMESTER = 18

DEFAULT_COURSE_CREDITS = 3


# =============================================================================
# IDENTIFIERS
# =============================================================================
# Records are numbered per type: STU0001, CRS0001, INS0001, ENR0001

STUDENT_ID_PREFIX = "STU"
COURSE_ID_PREFIX = "CRS"
INSTRUCTOR_ID_PREFIX = "INS"
ENROLLMENT_ID_PREFIX = "ENR"


def format_record_id(prefix: str, number: int) -> str:
    """Format a sequential record id (e.g., ("ENR", 7) -> "ENR0007")."""
    return f"{prefix}{number:04d}"


def parse_record_number(record_id: str, prefix: str) -> int:
    """Return the numeric part of a record id, or 0 if it has another shape."""
    if not record_id.startswith(prefix):
        return 0
    digits = record_id[len(prefix):]
    return int(digits) if digits.isdigit() else 0


# =============================================================================
# GPA BANDS
# =============================================================================
# Lower bounds of the GPA distribution buckets, highest first. A student
# falls into the first band whose bound their GPA reaches.

GPA_BANDS = (
    ("Excellent", 3.7),
    ("Good", 3.0),
    ("Satisfactory", 2.0),
    ("Needs Improvement", 0.0),
)


# =============================================================================
# RUNTIME CONFIGURATION
# =============================================================================

class RegistrarConfig(BaseSettings):
    """
    Runtime settings shared by every registrar component.

    Values come from keyword arguments, then REGISTRAR_* environment
    variables (REGISTRAR_DATA_DIR, REGISTRAR_MAX_CREDITS_PER_SEMESTER,
    REGISTRAR_CSV_DELIMITER, REGISTRAR_LOG_LEVEL), then the defaults above.
    Invalid values raise pydantic's ValidationError, a ValueError.

    Attributes:
        data_dir: Directory holding CSV exports and backups
        max_credits_per_semester: Credit cap enforced on enrollment
        csv_delimiter: Field separator for the CSV file layer
        log_level: Name of the logging level (e.g., "INFO")
    """

    model_config = SettingsConfigDict(
        env_prefix="REGISTRAR_",
        extra="ignore",
        frozen=True,
    )

    data_dir: Path = Field(default_factory=lambda: Path.cwd() / DATA_DIR_NAME)
    max_credits_per_semester: int = MAX_CREDITS_PER_SEMESTER
    csv_delimiter: str = CSV_DELIMITER
    log_level: str = "WARNING"

    @field_validator("max_credits_per_semester")
    @classmethod
    def validate_max_credits(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("max_credits_per_semester must be positive")
        return value

    @field_validator("csv_delimiter")
    @classmethod
    def validate_delimiter(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("csv_delimiter must be a single character")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        name = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return name

    @property
    def backup_dir(self) -> Path:
        return self.data_dir / BACKUP_DIR_NAME

    @classmethod
    def from_env(cls) -> "RegistrarConfig":
        """Build the config from REGISTRAR_* environment variables and defaults."""
        return cls()

    def ensure_directories(self):
        """Create the data and backup directories if they don't exist yet."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.backup_dir.mkdir(parents=True, exist_ok=True)
