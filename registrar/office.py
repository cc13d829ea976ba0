"""
Registrar Office - Main Orchestrator.

This module contains the RegistrarOffice class that connects the engines
and the file layer to the presentation layer.
"""

from typing import Optional

from .config import RegistrarConfig
from .data import CsvStore, EntityDirectory
from .engines import EnrollmentEngine, GradeCalculator, ReportAggregator, TranscriptBuilder
from .models import Semester, Transcript
from .ui import TerminalDisplay
from .utils import get_logger, setup_logging

logger = get_logger(__name__)


class RegistrarOffice:
    """
    Main interface for the registrar.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    Every component receives the same RegistrarConfig and the same
    EntityDirectory, so they all see one consistent registry:

        directory ─┬─> EnrollmentEngine ─┬─> GradeCalculator
                   │                     ├─> TranscriptBuilder
                   │                     └─> ReportAggregator
                   └─> CsvStore (save/load)

    The engines return data; the show_* methods here pass that data to the
    display. To drive the registrar from other code, call the engines
    directly and skip the display.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        office = RegistrarOffice(RegistrarConfig.from_env())
        s = office.directory.add_student("REG001", "Ada Lovelace", "ada@example.edu")
        office.directory.add_course("CSE101", "Intro to Programming", "CSE")
        office.enrollment.enroll(s.id, "CSE101", Semester.FALL_2025)
        office.grading.record_grade(s.id, "CSE101", Semester.FALL_2025, 92.5)
        office.show_transcript(s.id)
    """

    def __init__(self, config: RegistrarConfig, display: Optional[TerminalDisplay] = None):
        setup_logging(config)
        self.config = config
        self.directory = EntityDirectory()
        self.enrollment = EnrollmentEngine(self.directory, config)
        self.grading = GradeCalculator(self.directory, self.enrollment, config)
        self.transcripts = TranscriptBuilder(self.directory, self.enrollment, config)
        self.reports = ReportAggregator(self.directory, self.enrollment, config)
        self.store = CsvStore(config)
        self.display = display or TerminalDisplay()

    # =========================================================================
    # PERSISTENCE
    # =========================================================================

    def save_all(self) -> dict:
        """
        Export every record type to its CSV file in the data directory.

        Returns:
            {"students": Path, "courses": Path, "instructors": Path, "enrollments": Path}
        """
        return {
            "students": self.store.export_students(self.directory.list_students()),
            "courses": self.store.export_courses(self.directory.list_courses()),
            "instructors": self.store.export_instructors(self.directory.list_instructors()),
            "enrollments": self.store.export_enrollments(self.enrollment.all_enrollments()),
        }

    def load_all(self) -> dict:
        """
        Replace the in-memory registry with the CSV files in the data directory.

        Missing files are treated as empty. GPAs are not stored on disk, so
        they are recomputed from the loaded enrollments.

        Returns:
            Count of loaded records per type
        """
        self.directory.clear()
        self.enrollment.clear()

        loaders = {
            "instructors": (self.store.import_instructors, self.directory.register_instructor),
            "students": (self.store.import_students, self.directory.register_student),
            "courses": (self.store.import_courses, self.directory.register_course),
        }
        counts = {}
        for kind, (read, register) in loaders.items():
            records = self._read_or_empty(read, kind)
            for record in records:
                register(record)
            counts[kind] = len(records)

        enrollments = self._read_or_empty(self.store.import_enrollments, "enrollments")
        self.enrollment.load(enrollments)
        counts["enrollments"] = len(enrollments)

        self.grading.recalculate_all()
        logger.info("registry_loaded", **counts)
        return counts

    @staticmethod
    def _read_or_empty(read, kind: str) -> list:
        try:
            return read()
        except FileNotFoundError:
            logger.info("data_file_missing", kind=kind)
            return []

    # =========================================================================
    # DISPLAY
    # =========================================================================

    def show_transcript(self, student_id: str, semester: Optional[Semester] = None) -> Transcript:
        """Build a transcript (all semesters, or one) and print it."""
        if semester is None:
            transcript = self.transcripts.generate_transcript(student_id)
        else:
            transcript = self.transcripts.generate_semester_transcript(student_id, semester)
        self.display.print_transcript(transcript)
        return transcript

    def show_student_profile(self, student_id: str) -> bool:
        student = self.directory.find_student(student_id)
        if student is None:
            self.display.print_error(f"Student not found: {student_id}")
            return False
        self.display.print_student_profile(student, self.enrollment.student_enrollments(student_id))
        return True

    def show_reports(self, top: int = 5) -> dict:
        """Compute every report, print them, and return the raw results."""
        results = {
            "gpa_distribution": self.reports.gpa_distribution(),
            "semester_statistics": self.reports.semester_statistics(),
            "course_popularity": self.reports.course_popularity(),
            "top_students": self.reports.top_students(top),
            "student_statistics": self.reports.student_statistics(),
        }
        self.display.print_header("REPORTS")
        self.display.print_student_statistics(results["student_statistics"])
        self.display.print_gpa_distribution(results["gpa_distribution"])
        self.display.print_top_students(results["top_students"])
        self.display.print_semester_statistics(results["semester_statistics"])
        self.display.print_course_popularity(results["course_popularity"])
        return results
