"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the registrar package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..models import (
    Course,
    CoursePopularity,
    Enrollment,
    GpaDistribution,
    StudentStatistics,
    Transcript,
    describe,
)


class TerminalDisplay:
    """
    Pretty terminal output for registry records, transcripts and reports.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"

    WIDTH = 80

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * cls.WIDTH}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * cls.WIDTH}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def print_success(cls, message: str):
        print(f"  {cls.GREEN}✓ {message}{cls.RESET}")

    @classmethod
    def print_error(cls, message: str):
        print(f"  {cls.RED}✗ {message}{cls.RESET}")

    @classmethod
    def print_info(cls, message: str):
        print(f"  {cls.DIM}{message}{cls.RESET}")

    @classmethod
    def gpa_color(cls, gpa: float) -> str:
        if gpa >= 3.0:
            return cls.GREEN
        if gpa >= 2.0:
            return cls.YELLOW
        return cls.RED

    # =========================================================================
    # RECORD LISTINGS
    # =========================================================================

    @classmethod
    def print_people(cls, title: str, people: list):
        cls.print_subheader(title)
        if not people:
            cls.print_info("(none)")
            return
        for person in people:
            print(f"  {cls.BOLD}{person.id:<8}{cls.RESET} {describe(person)}")

    @classmethod
    def print_student_profile(cls, student, enrollments: list):
        cls.print_header("STUDENT PROFILE")
        print(f"  {cls.BOLD}Name:{cls.RESET} {student.full_name}")
        print(f"  {cls.BOLD}Id:{cls.RESET} {student.id}")
        print(f"  {cls.BOLD}Registration:{cls.RESET} {student.reg_no}")
        print(f"  {cls.BOLD}Email:{cls.RESET} {student.email}")
        print(f"  {cls.BOLD}Status:{cls.RESET} {'Active' if student.active else 'Inactive'}")
        print(f"  {cls.BOLD}GPA:{cls.RESET} "
              f"{cls.gpa_color(student.gpa)}{student.gpa:.2f}{cls.RESET} "
              f"({student.total_credits} credits)")
        cls.print_enrollments(enrollments)

    @classmethod
    def print_courses(cls, courses: list):
        cls.print_subheader("Courses")
        if not courses:
            cls.print_info("(none)")
            return
        print(f"  {cls.BOLD}{'CODE':<10} {'TITLE':<30} {'CR':>3} {'DEPT':<8} "
              f"{'SEMESTER':<12} STATUS{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 74}{cls.RESET}")
        for course in courses:
            cls._print_course_row(course)

    @classmethod
    def _print_course_row(cls, course: Course):
        status = f"{cls.GREEN}active{cls.RESET}" if course.active else f"{cls.DIM}inactive{cls.RESET}"
        print(f"  {str(course.code):<10} {course.title[:30]:<30} {course.credits:>3} "
              f"{course.department[:8]:<8} {str(course.semester):<12} {status}")

    @classmethod
    def print_enrollments(cls, enrollments: list):
        cls.print_subheader("Enrollments")
        if not enrollments:
            cls.print_info("(none)")
            return
        print(f"  {cls.BOLD}{'ID':<8} {'STUDENT':<8} {'COURSE':<10} {'SEMESTER':<12} "
              f"{'GRADE':<6} {'SCORE':>6}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 56}{cls.RESET}")
        for enrollment in enrollments:
            cls._print_enrollment_row(enrollment)

    @classmethod
    def _print_enrollment_row(cls, enrollment: Enrollment):
        grade = enrollment.grade.letter if enrollment.grade else "-"
        score = f"{enrollment.percentage_score:.2f}" if enrollment.percentage_score is not None else "-"
        dim = "" if enrollment.active else cls.DIM
        print(f"  {dim}{enrollment.id:<8} {enrollment.student_id:<8} "
              f"{str(enrollment.course_code):<10} {str(enrollment.semester):<12} "
              f"{grade:<6} {score:>6}{cls.RESET}")

    # =========================================================================
    # TRANSCRIPTS
    # =========================================================================

    @classmethod
    def print_transcript(cls, transcript: Transcript):
        """Print a transcript as a table with GPA and credit totals."""
        print()
        print(f"{cls.BOLD}{'=' * cls.WIDTH}{cls.RESET}")
        print(f"  {cls.BOLD}TRANSCRIPT FOR:{cls.RESET} {transcript.student_name} "
              f"({transcript.student_id})")
        print(f"  {cls.BOLD}Generated:{cls.RESET} "
              f"{transcript.generated_at.strftime('%Y-%m-%d %H:%M:%S')}")
        gpa = transcript.overall_gpa
        print(f"  {cls.BOLD}Overall GPA:{cls.RESET} {cls.gpa_color(gpa)}{gpa:.2f}{cls.RESET}")
        print(f"  {cls.BOLD}Total Credits:{cls.RESET} {transcript.total_credits}")
        print(f"{cls.BOLD}{'=' * cls.WIDTH}{cls.RESET}")
        print(f"  {cls.BOLD}{'CODE':<10} {'TITLE':<30} {'CR':>3} {'GRADE':>5}  SEMESTER{cls.RESET}")
        print(f"  {cls.DIM}{'-' * (cls.WIDTH - 2)}{cls.RESET}")

        if not transcript.entries:
            cls.print_info("(no courses)")
        for entry in transcript.entries:
            grade = entry.grade.letter if entry.grade else "N/A"
            print(f"  {entry.course_code:<10} {entry.course_title[:30]:<30} "
                  f"{entry.credits:>3} {grade:>5}  {entry.semester}")

        print(f"{cls.BOLD}{'=' * cls.WIDTH}{cls.RESET}")

    # =========================================================================
    # REPORTS
    # =========================================================================

    @classmethod
    def print_gpa_distribution(cls, distribution: GpaDistribution):
        cls.print_subheader("GPA Distribution")
        labels = {
            "Excellent": "Excellent (3.7+)",
            "Good": "Good (3.0-3.7)",
            "Satisfactory": "Satisfactory (2.0-3.0)",
            "Needs Improvement": "Needs Improvement (<2.0)",
        }
        for band, count in distribution.as_dict().items():
            print(f"  {labels[band]:<28} {count:>4} students")

    @classmethod
    def print_semester_statistics(cls, statistics: list):
        cls.print_subheader("Semester-wise Statistics")
        for stat in statistics:
            print(f"  {str(stat.semester):<14} {stat.enrollment_count:>4} enrollments")

    @classmethod
    def print_course_popularity(cls, popularity: list):
        cls.print_subheader("Course Popularity")
        if not popularity:
            cls.print_info("(no active courses)")
            return
        for rank, item in enumerate(popularity, 1):
            cls._print_popularity_row(rank, item)

    @classmethod
    def _print_popularity_row(cls, rank: int, item: CoursePopularity):
        print(f"  {rank:>2}. {str(item.course_code):<10} {item.title[:30]:<30} "
              f"{item.enrollment_count:>4} students")

    @classmethod
    def print_top_students(cls, students: list):
        cls.print_subheader("Top Students")
        if not students:
            cls.print_info("(none)")
            return
        for rank, student in enumerate(students, 1):
            print(f"  {rank:>2}. {student.full_name:<30} "
                  f"{cls.gpa_color(student.gpa)}{student.gpa:.2f}{cls.RESET}")

    @classmethod
    def print_student_statistics(cls, stats: StudentStatistics):
        cls.print_subheader("Student Statistics")
        print(f"  {cls.BOLD}Total:{cls.RESET} {stats.total_students}")
        print(f"  {cls.BOLD}Active:{cls.RESET} {stats.active_students}")
        print(f"  {cls.BOLD}Average GPA:{cls.RESET} {stats.average_gpa:.2f}")
