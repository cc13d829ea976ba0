"""
Command-Line Interface for the Registrar.

This module provides the interactive, menu-driven CLI. It only gathers
input and calls into RegistrarOffice; every rule lives in the engines and
every line of output goes through TerminalDisplay.

Run with:
    python -m registrar
"""

from pydantic import ValidationError

from .config import RegistrarConfig
from .errors import RegistrarError
from .models import Grade, Semester
from .office import RegistrarOffice
from .ui import TerminalDisplay

MAIN_MENU = (
    ("1", "Manage Students"),
    ("2", "Manage Courses"),
    ("3", "Enrollment"),
    ("4", "Grades & Transcripts"),
    ("5", "Import/Export Data"),
    ("6", "Backups"),
    ("7", "Reports"),
    ("8", "Configuration Info"),
    ("9", "Exit"),
)


def _ask(label: str) -> str:
    return input(f"  {label}: ").strip()


def _choose(title: str, options: tuple) -> str:
    """Print a numbered submenu and return the chosen key."""
    TerminalDisplay.print_subheader(title)
    for key, label in options:
        print(f"    {key}. {label}")
    return _ask("Choice")


def _ask_semester(default: Semester = Semester.FALL_2025) -> Semester:
    """
    Ask for a semester by number or name; Enter keeps the default.
    """
    semesters = list(Semester)
    listing = ", ".join(f"{i}={s}" for i, s in enumerate(semesters, 1))
    print(f"  {TerminalDisplay.DIM}{listing}{TerminalDisplay.RESET}")
    answer = _ask(f"Semester [{default}]")
    if not answer:
        return default
    if answer.isdigit() and 1 <= int(answer) <= len(semesters):
        return semesters[int(answer) - 1]
    return Semester.parse(answer)


# =============================================================================
#  STUDENTS
# =============================================================================

def _students_menu(office: RegistrarOffice):
    choice = _choose("Manage Students", (
        ("1", "Add Student"),
        ("2", "List All Students"),
        ("3", "Search Students"),
        ("4", "Update Student"),
        ("5", "Deactivate Student"),
        ("6", "View Student Profile"),
    ))
    directory = office.directory

    if choice == "1":
        student = directory.add_student(_ask("Registration number"), _ask("Full name"),
                                        _ask("Email"))
        TerminalDisplay.print_success(f"Added {student.id}: {student.full_name}")
    elif choice == "2":
        TerminalDisplay.print_people("Students", directory.list_students())
    elif choice == "3":
        name = _ask("Name contains (Enter to skip)")
        email = _ask("Email contains (Enter to skip)")
        TerminalDisplay.print_people("Matches", directory.search_students(name=name, email=email))
    elif choice == "4":
        student_id = _ask("Student id")
        updated = directory.update_student(student_id, _ask("New full name (Enter to keep)"),
                                           _ask("New email (Enter to keep)"))
        _report(updated, f"Updated {student_id}", f"Student not found: {student_id}")
    elif choice == "5":
        student_id = _ask("Student id")
        _report(directory.deactivate_student(student_id),
                f"Deactivated {student_id}", f"Student not found: {student_id}")
    elif choice == "6":
        office.show_student_profile(_ask("Student id"))


# =============================================================================
#  COURSES
# =============================================================================

def _courses_menu(office: RegistrarOffice):
    choice = _choose("Manage Courses", (
        ("1", "Add Course"),
        ("2", "List All Courses"),
        ("3", "Search Courses"),
        ("4", "Update Course"),
        ("5", "Add Instructor"),
        ("6", "Assign Instructor"),
        ("7", "Sort Courses"),
        ("8", "Deactivate Course"),
    ))
    directory = office.directory

    if choice == "1":
        course = directory.add_course(
            _ask("Course code (e.g., CSE101)"),
            _ask("Title"),
            _ask("Department"),
            credits=int(_ask("Credits") or 3),
            description=_ask("Description"),
            semester=_ask_semester(),
        )
        TerminalDisplay.print_success(f"Added {course.code}: {course.title}")
    elif choice == "2":
        TerminalDisplay.print_courses(directory.list_courses())
    elif choice == "3":
        TerminalDisplay.print_courses(directory.search_courses(
            department=_ask("Department (Enter to skip)") or None,
            title=_ask("Title contains (Enter to skip)") or None,
        ))
    elif choice == "4":
        code = _ask("Course code")
        credits = _ask("New credits (Enter to keep)")
        updated = directory.update_course(code, title=_ask("New title (Enter to keep)"),
                                          credits=int(credits) if credits else None)
        _report(updated, f"Updated {code}", f"Course not found: {code}")
    elif choice == "5":
        instructor = directory.add_instructor(_ask("Full name"), _ask("Email"),
                                              _ask("Department"), _ask("Title (e.g., Dr.)"))
        TerminalDisplay.print_success(f"Added {instructor.id}: {instructor.full_name}")
    elif choice == "6":
        code = _ask("Course code")
        instructor_id = _ask("Instructor id")
        _report(directory.assign_instructor(code, instructor_id),
                f"Assigned {instructor_id} to {code}", "Course or instructor not found")
    elif choice == "7":
        key = _ask("Sort by (code/title/credits)") or "code"
        TerminalDisplay.print_courses(directory.sorted_courses(by=key))
    elif choice == "8":
        code = _ask("Course code")
        _report(directory.deactivate_course(code), f"Deactivated {code}",
                f"Course not found: {code}")


# =============================================================================
#  ENROLLMENT
# =============================================================================

def _enrollment_menu(office: RegistrarOffice):
    choice = _choose("Enrollment", (
        ("1", "Enroll Student"),
        ("2", "Unenroll Student"),
        ("3", "List Student Enrollments"),
        ("4", "Semester Credit Load"),
    ))
    engine = office.enrollment

    if choice == "1":
        enrollment = engine.enroll(_ask("Student id"), _ask("Course code"), _ask_semester())
        TerminalDisplay.print_success(
            f"Enrolled ({enrollment.id}): {enrollment.student_id} in "
            f"{enrollment.course_code} for {enrollment.semester}"
        )
    elif choice == "2":
        student_id = _ask("Student id")
        code = _ask("Course code")
        _report(engine.unenroll(student_id, code, _ask_semester()),
                f"Unenrolled {student_id} from {code}", "No active enrollment found")
    elif choice == "3":
        TerminalDisplay.print_enrollments(engine.student_enrollments(_ask("Student id")))
    elif choice == "4":
        student_id = _ask("Student id")
        semester = _ask_semester()
        credits = engine.current_semester_credits(student_id, semester)
        TerminalDisplay.print_info(
            f"{student_id} carries {credits}/{office.config.max_credits_per_semester} "
            f"credits in {semester}"
        )


# =============================================================================
#  GRADES & TRANSCRIPTS
# =============================================================================

def _grades_menu(office: RegistrarOffice):
    choice = _choose("Grades & Transcripts", (
        ("1", "Record Grade (percentage)"),
        ("2", "Record Grade (letter)"),
        ("3", "Full Transcript"),
        ("4", "Semester Transcript"),
    ))

    if choice in ("1", "2"):
        student_id = _ask("Student id")
        code = _ask("Course code")
        semester = _ask_semester()
        if choice == "1":
            result = float(_ask("Percentage score (0-100)"))
        else:
            result = Grade.from_letter(_ask("Letter grade (A+ ... F, I, W)"))
        recorded = office.grading.record_grade(student_id, code, semester, result)
        _report(recorded, "Grade recorded", "No active enrollment found")
    elif choice == "3":
        office.show_transcript(_ask("Student id"))
    elif choice == "4":
        office.show_transcript(_ask("Student id"), _ask_semester())


# =============================================================================
#  FILES
# =============================================================================

def _import_export_menu(office: RegistrarOffice):
    choice = _choose("Import/Export Data", (
        ("1", "Export All"),
        ("2", "Import All (replaces current data)"),
    ))

    if choice == "1":
        for kind, path in office.save_all().items():
            TerminalDisplay.print_success(f"Exported {kind} to {path}")
    elif choice == "2":
        for kind, count in office.load_all().items():
            TerminalDisplay.print_success(f"Imported {count} {kind}")


def _backup_menu(office: RegistrarOffice):
    choice = _choose("Backups", (
        ("1", "Create Backup"),
        ("2", "List Backups"),
    ))
    store = office.store

    if choice == "1":
        path = store.create_backup()
        size = store.format_file_size(store.backup_size(path))
        TerminalDisplay.print_success(f"Backup created at {path} ({size})")
    elif choice == "2":
        backups = store.list_backups()
        if not backups:
            TerminalDisplay.print_info("(no backups)")
        for path in backups:
            print(f"    {path.name}  {store.format_file_size(store.backup_size(path))}")
        total = store.format_file_size(store.total_backup_size())
        TerminalDisplay.print_info(f"Total backup size: {total}")


def _config_info(office: RegistrarOffice):
    config = office.config
    TerminalDisplay.print_subheader("Configuration")
    print(f"    Data directory:     {config.data_dir}")
    print(f"    Backup directory:   {config.backup_dir}")
    print(f"    Max credits/term:   {config.max_credits_per_semester}")
    print(f"    CSV delimiter:      {config.csv_delimiter!r}")
    print(f"    Log level:          {config.log_level}")


def _report(ok: bool, success: str, failure: str):
    if ok:
        TerminalDisplay.print_success(success)
    else:
        TerminalDisplay.print_error(failure)


MENU_ACTIONS = {
    "1": _students_menu,
    "2": _courses_menu,
    "3": _enrollment_menu,
    "4": _grades_menu,
    "5": _import_export_menu,
    "6": _backup_menu,
    "7": lambda office: office.show_reports(),
    "8": _config_info,
}


def main():
    """
    Command-line interface for the registrar.

    Settings come from REGISTRAR_* environment variables (see
    RegistrarConfig). Invalid settings stop the program with a message.
    Registry errors from any action are shown and the menu continues. End of
    input exits.
    """
    try:
        config = RegistrarConfig.from_env()
    except ValidationError as e:
        TerminalDisplay.print_error(f"Invalid REGISTRAR_* setting:\n{e}")
        raise SystemExit(2) from None
    config.ensure_directories()
    office = RegistrarOffice(config)

    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         CAMPUS REGISTRAR                                         ║")
    print("║         Students · Courses · Enrollment · Grades                 ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")

    while True:
        try:
            choice = _choose("Main Menu", MAIN_MENU)
            if choice == "9":
                break
            action = MENU_ACTIONS.get(choice)
            if action is None:
                TerminalDisplay.print_error("Invalid choice")
                continue
            action(office)
        except EOFError:
            break
        except (RegistrarError, ValueError, FileNotFoundError) as e:
            TerminalDisplay.print_error(str(e))

    print(f"\n  {TerminalDisplay.DIM}Goodbye.{TerminalDisplay.RESET}")


if __name__ == "__main__":
    main()
