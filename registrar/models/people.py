"""
Person data models.

Students and instructors are separate record types that share a small
capability set: display_info() and person_type(). Code that handles either
takes a Person and dispatches on those two methods only.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Union

from .academic import CourseCode, Semester


@dataclass
class Student:
    """
    A student record.

    `gpa` and `total_credits` are derived values. They are written only by
    the GradeCalculator when a grade is recorded; everything else reads them.

    Attributes:
        id: Registry id (e.g., "STU0001")
        reg_no: Registration number issued by the institution
        full_name: Display name
        email: Contact address
        active: False once the student has been deactivated
        enrolled_courses: Codes of courses the student is enrolled in
            (no duplicates, enrollment order)
        current_semester: Semester the student is currently attending
        gpa: Credit-weighted grade-point average, 0.0 to 4.0
        total_credits: Credits that count towards the GPA
        created_at: When the record was created
    """
    id: str
    reg_no: str
    full_name: str
    email: str
    active: bool = True
    enrolled_courses: list = field(default_factory=list)
    current_semester: Semester = Semester.FALL_2025
    gpa: float = 0.0
    total_credits: int = 0
    created_at: datetime = field(default_factory=datetime.now)

    def set_gpa(self, gpa: float):
        if gpa < 0.0 or gpa > 4.0:
            raise ValueError("GPA must be between 0.0 and 4.0")
        self.gpa = gpa

    def set_total_credits(self, total_credits: int):
        if total_credits < 0:
            raise ValueError("Total credits cannot be negative")
        self.total_credits = total_credits

    def enroll_in_course(self, course_code: CourseCode):
        if course_code not in self.enrolled_courses:
            self.enrolled_courses.append(course_code)

    def unenroll_from_course(self, course_code: CourseCode):
        if course_code in self.enrolled_courses:
            self.enrolled_courses.remove(course_code)

    def is_enrolled_in(self, course_code: CourseCode) -> bool:
        return course_code in self.enrolled_courses

    def person_type(self) -> str:
        return "Student"

    def display_info(self) -> str:
        return f"Student: {self.full_name} ({self.reg_no}) - {self.email}"


@dataclass
class Instructor:
    """
    An instructor record.

    Instructors are referenced from courses by id; the registrar does not
    apply any rules to them beyond keeping their assigned-course list.
    """
    id: str
    full_name: str
    email: str
    department: str
    title: str
    active: bool = True
    assigned_courses: list = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)

    def assign_course(self, course_code: CourseCode):
        if course_code not in self.assigned_courses:
            self.assigned_courses.append(course_code)

    def unassign_course(self, course_code: CourseCode):
        if course_code in self.assigned_courses:
            self.assigned_courses.remove(course_code)

    def person_type(self) -> str:
        return "Instructor"

    def display_info(self) -> str:
        return f"Instructor: {self.title} {self.full_name} ({self.department}) - {self.email}"


Person = Union[Student, Instructor]


def describe(person: Optional[Person]) -> str:
    """One-line description of any person record, for listings."""
    if person is None:
        return "(unknown)"
    status = "" if person.active else " [inactive]"
    return f"[{person.person_type()}] {person.display_info()}{status}"
