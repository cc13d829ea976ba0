"""
CSV file layer and backups.

This module writes registry records to delimited text files, reads them
back, and keeps timestamped backup copies of the data directory.

RECORD FORMAT:
Each record is one line of fields joined by the configured delimiter. Fields
are NOT quoted or escaped: a value that contains the delimiter is written
as-is (with a warning) and will split into extra fields when read back.
The enrollment line is:

    id, student_id, course_code, semester, enrolled_at, score, grade, status

where score has two decimals (empty when there is none), grade is
the letter or empty, and status is ACTIVE or INACTIVE.
"""

import shutil
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from ..config import (
    BACKUP_PREFIX,
    COURSES_FILE,
    ENROLLMENTS_FILE,
    INSTRUCTORS_FILE,
    STUDENTS_FILE,
    RegistrarConfig,
)
from ..errors import RecordFormatError
from ..models import Course, CourseCode, Enrollment, Grade, Instructor, Semester, Student
from ..utils import get_logger

logger = get_logger(__name__)

STUDENT_HEADER = ("id", "regNo", "fullName", "email", "status", "enrolledCourseCodes", "createdAt")
COURSE_HEADER = ("id", "courseCode", "title", "description", "credits", "department",
                 "instructorId", "semester", "status")
INSTRUCTOR_HEADER = ("id", "fullName", "email", "department", "title", "status", "assignedCourses")
ENROLLMENT_HEADER = ("id", "studentId", "courseCode", "semester", "enrolledAt",
                     "percentageScore", "grade", "status")

# Separator for lists of course codes inside a single field
LIST_SEPARATOR = ";"


def _status(active: bool) -> str:
    return "ACTIVE" if active else "INACTIVE"


def _codes(codes: list) -> str:
    return LIST_SEPARATOR.join(str(c) for c in codes)


def _parse_codes(text: str) -> list:
    return [CourseCode.parse(part) for part in text.split(LIST_SEPARATOR) if part.strip()]


def _require_fields(fields: list, kind: str, *counts: int):
    """Reject a record unless it has exactly one of the allowed field counts."""
    if len(fields) not in counts:
        expected = " or ".join(str(c) for c in counts)
        raise RecordFormatError(
            f"Invalid {kind} record: expected {expected} fields, got {len(fields)}"
        )


# =============================================================================
# RECORD CONVERSION
# =============================================================================

def student_to_fields(student: Student) -> list:
    return [
        student.id, student.reg_no, student.full_name, student.email,
        _status(student.active), _codes(student.enrolled_courses),
        student.created_at.isoformat(),
    ]


def student_from_fields(fields: list) -> Student:
    _require_fields(fields, "student", 6, 7)
    student = Student(id=fields[0], reg_no=fields[1], full_name=fields[2], email=fields[3])
    student.active = fields[4] == "ACTIVE"
    student.enrolled_courses = _parse_codes(fields[5])
    if len(fields) > 6 and fields[6]:
        student.created_at = datetime.fromisoformat(fields[6])
    return student


def course_to_fields(course: Course) -> list:
    return [
        course.id, str(course.code), course.title, course.description,
        str(course.credits), course.department, course.instructor_id or "",
        str(course.semester), _status(course.active),
    ]


def course_from_fields(fields: list) -> Course:
    _require_fields(fields, "course", 9)
    return Course(
        id=fields[0],
        code=CourseCode.parse(fields[1]),
        title=fields[2],
        description=fields[3],
        credits=int(fields[4]),
        department=fields[5],
        instructor_id=fields[6] or None,
        semester=Semester.parse(fields[7]),
        active=fields[8] == "ACTIVE",
    )


def instructor_to_fields(instructor: Instructor) -> list:
    return [
        instructor.id, instructor.full_name, instructor.email, instructor.department,
        instructor.title, _status(instructor.active), _codes(instructor.assigned_courses),
    ]


def instructor_from_fields(fields: list) -> Instructor:
    _require_fields(fields, "instructor", 6, 7)
    instructor = Instructor(
        id=fields[0], full_name=fields[1], email=fields[2],
        department=fields[3], title=fields[4],
    )
    instructor.active = fields[5] == "ACTIVE"
    if len(fields) > 6:
        instructor.assigned_courses = _parse_codes(fields[6])
    return instructor


def enrollment_to_fields(enrollment: Enrollment) -> list:
    score = enrollment.percentage_score
    return [
        enrollment.id, enrollment.student_id, str(enrollment.course_code),
        str(enrollment.semester), enrollment.enrolled_at.isoformat(),
        f"{score:.2f}" if score is not None else "",
        enrollment.grade.letter if enrollment.grade else "",
        _status(enrollment.active),
    ]


def enrollment_from_fields(fields: list) -> Enrollment:
    """
    Rebuild an Enrollment from its record fields.

    An empty score column means no score. Older files hold "0.00" for
    every unscored enrollment, so a stored score is also dropped when it is
    not the one that produced the stored grade.
    """
    _require_fields(fields, "enrollment", 8)
    grade = Grade.from_letter(fields[6]) if fields[6] else None
    score = float(fields[5]) if fields[5] else None
    if score is not None and (grade is None or Grade.from_percentage(score) != grade):
        score = None
    return Enrollment(
        id=fields[0],
        student_id=fields[1],
        course_code=CourseCode.parse(fields[2]),
        semester=Semester.parse(fields[3]),
        enrolled_at=datetime.fromisoformat(fields[4]),
        grade=grade,
        percentage_score=score,
        active=fields[7] == "ACTIVE",
    )


# =============================================================================
# FILE STORE
# =============================================================================

class CsvStore:
    """
    Reads and writes registry records under the configured data directory.

    Filenames passed to import/export methods are resolved relative to
    `config.data_dir`. Imports skip the header line and blank lines; lines
    that fail to parse are logged and skipped so one bad row does not lose
    the rest of the file.
    """

    def __init__(self, config: RegistrarConfig):
        self.config = config
        self.delimiter = config.csv_delimiter

    @property
    def data_dir(self) -> Path:
        return self.config.data_dir

    @property
    def backup_dir(self) -> Path:
        return self.config.backup_dir

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def export_students(self, students: list, filename: str = STUDENTS_FILE) -> Path:
        return self._write(filename, STUDENT_HEADER, [student_to_fields(s) for s in students])

    def export_courses(self, courses: list, filename: str = COURSES_FILE) -> Path:
        return self._write(filename, COURSE_HEADER, [course_to_fields(c) for c in courses])

    def export_instructors(self, instructors: list, filename: str = INSTRUCTORS_FILE) -> Path:
        return self._write(filename, INSTRUCTOR_HEADER,
                           [instructor_to_fields(i) for i in instructors])

    def export_enrollments(self, enrollments: list, filename: str = ENROLLMENTS_FILE) -> Path:
        return self._write(filename, ENROLLMENT_HEADER,
                           [enrollment_to_fields(e) for e in enrollments])

    def _write(self, filename: str, header: tuple, rows: list) -> Path:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        path = self.data_dir / filename
        lines = [self.delimiter.join(header)]
        for row in rows:
            for value in row:
                if self.delimiter in value:
                    # Not escaped: the record will not read back intact
                    logger.warning("field_contains_delimiter", file=filename,
                                   record_id=row[0], value=value)
            lines.append(self.delimiter.join(row))
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        logger.info("records_exported", file=str(path), count=len(rows))
        return path

    # -------------------------------------------------------------------------
    # Import
    # -------------------------------------------------------------------------

    def import_students(self, filename: str = STUDENTS_FILE) -> list:
        return self._read(filename, student_from_fields, "student")

    def import_courses(self, filename: str = COURSES_FILE) -> list:
        return self._read(filename, course_from_fields, "course")

    def import_instructors(self, filename: str = INSTRUCTORS_FILE) -> list:
        return self._read(filename, instructor_from_fields, "instructor")

    def import_enrollments(self, filename: str = ENROLLMENTS_FILE) -> list:
        return self._read(filename, enrollment_from_fields, "enrollment")

    def _read(self, filename: str, parse: Callable[[list], object], kind: str) -> list:
        path = self.data_dir / filename
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        records = []
        lines = path.read_text(encoding="utf-8").splitlines()
        for line_no, line in enumerate(lines[1:], start=2):
            line = line.strip()
            if not line:
                continue
            try:
                records.append(parse(line.split(self.delimiter)))
            except ValueError as e:
                logger.warning("record_skipped", file=filename, line=line_no,
                               kind=kind, error=str(e))
        logger.info("records_imported", file=str(path), count=len(records))
        return records

    # -------------------------------------------------------------------------
    # Backups
    # -------------------------------------------------------------------------

    def create_backup(self, timestamp: Optional[datetime] = None) -> Path:
        """
        Copy every CSV file in the data directory into a new backup folder.

        Returns:
            Path of the backup folder (backups/backup_YYYYMMDD_HHMMSS)
        """
        stamp = (timestamp or datetime.now()).strftime("%Y%m%d_%H%M%S")
        backup_path = self.backup_dir / f"{BACKUP_PREFIX}{stamp}"
        backup_path.mkdir(parents=True, exist_ok=True)

        copied = 0
        for csv_file in sorted(self.data_dir.glob("*.csv")):
            shutil.copy2(csv_file, backup_path / csv_file.name)
            copied += 1
        logger.info("backup_created", path=str(backup_path), files=copied)
        return backup_path

    def list_backups(self) -> list:
        """Backup folders, most recent first."""
        if not self.backup_dir.is_dir():
            return []
        backups = [
            p for p in self.backup_dir.iterdir()
            if p.is_dir() and p.name.startswith(BACKUP_PREFIX)
        ]
        return sorted(backups, key=lambda p: p.name, reverse=True)

    def backup_size(self, backup_path: Path) -> int:
        return self._directory_size(backup_path)

    def total_backup_size(self) -> int:
        return self._directory_size(self.backup_dir)

    @staticmethod
    def _directory_size(directory: Path) -> int:
        if not directory.is_dir():
            return 0
        return sum(p.stat().st_size for p in directory.rglob("*") if p.is_file())

    @staticmethod
    def format_file_size(size: int) -> str:
        """Human-readable size (e.g., 2048 -> "2.00 KB")."""
        if size < 1024:
            return f"{size} B"
        if size < 1024 ** 2:
            return f"{size / 1024:.2f} KB"
        if size < 1024 ** 3:
            return f"{size / 1024 ** 2:.2f} MB"
        return f"{size / 1024 ** 3:.2f} GB"
