"""
Entity directory.

This module keeps the student, course and instructor records in memory and
hands them out by id or code. It applies no enrollment rules of its own;
the engines look records up here and mutate them in place.
"""

from typing import Callable, Optional

from ..config import (
    COURSE_ID_PREFIX,
    DEFAULT_COURSE_CREDITS,
    INSTRUCTOR_ID_PREFIX,
    STUDENT_ID_PREFIX,
    format_record_id,
    parse_record_number,
)
from ..models import Course, CourseCode, Instructor, Semester, Student
from ..utils import get_logger

logger = get_logger(__name__)


class EntityDirectory:
    """
    Keyed, in-memory store of students, courses and instructors.

    Records keep their insertion order, which is the order listings and
    reports walk them in.

    Usage:
        directory = EntityDirectory()
        student = directory.add_student("REG001", "Ada Lovelace", "ada@example.edu")
        course = directory.add_course("CSE101", "Intro to Programming", "CSE", credits=4)
        directory.find_course("cse101")  # -> course
    """

    def __init__(self):
        self._students = {}     # Keyed by student id
        self._courses = {}      # Keyed by CourseCode
        self._instructors = {}  # Keyed by instructor id
        self._next_student = 1
        self._next_course = 1
        self._next_instructor = 1

    # =========================================================================
    # STUDENTS
    # =========================================================================

    def add_student(self, reg_no: str, full_name: str, email: str) -> Student:
        if self.find_student_by_reg_no(reg_no) is not None:
            raise ValueError(f"Registration number already in use: {reg_no}")
        student_id = format_record_id(STUDENT_ID_PREFIX, self._next_student)
        self._next_student += 1
        student = Student(id=student_id, reg_no=reg_no, full_name=full_name, email=email)
        self._students[student_id] = student
        logger.info("student_added", student_id=student_id, reg_no=reg_no)
        return student

    def register_student(self, student: Student):
        """Register an existing (e.g., imported) student record as-is."""
        self._students[student.id] = student
        number = parse_record_number(student.id, STUDENT_ID_PREFIX)
        self._next_student = max(self._next_student, number + 1)

    def find_student(self, student_id: str) -> Optional[Student]:
        return self._students.get(student_id)

    def find_student_by_reg_no(self, reg_no: str) -> Optional[Student]:
        for student in self._students.values():
            if student.reg_no == reg_no:
                return student
        return None

    def list_students(self) -> list:
        return list(self._students.values())

    def active_students(self) -> list:
        return [s for s in self._students.values() if s.active]

    def update_student(self, student_id: str, full_name: Optional[str] = None,
                       email: Optional[str] = None) -> bool:
        student = self.find_student(student_id)
        if student is None:
            return False
        if full_name:
            student.full_name = full_name
        if email:
            student.email = email
        return True

    def deactivate_student(self, student_id: str) -> bool:
        return self._set_student_active(student_id, False)

    def activate_student(self, student_id: str) -> bool:
        return self._set_student_active(student_id, True)

    def _set_student_active(self, student_id: str, active: bool) -> bool:
        student = self.find_student(student_id)
        if student is None:
            return False
        student.active = active
        logger.info("student_status_changed", student_id=student_id, active=active)
        return True

    def search_students(self, name: Optional[str] = None, email: Optional[str] = None,
                        predicate: Optional[Callable[[Student], bool]] = None) -> list:
        """
        Case-insensitive substring search; every given criterion must match.
        """
        results = []
        for student in self._students.values():
            if name and name.lower() not in student.full_name.lower():
                continue
            if email and email.lower() not in student.email.lower():
                continue
            if predicate and not predicate(student):
                continue
            results.append(student)
        return results

    def students_in_course(self, course_code) -> list:
        code = CourseCode.parse(course_code)
        return [s for s in self._students.values() if s.is_enrolled_in(code)]

    # =========================================================================
    # COURSES
    # =========================================================================

    def add_course(self, code, title: str, department: str,
                   credits: int = DEFAULT_COURSE_CREDITS, description: str = "",
                   instructor_id: Optional[str] = None,
                   semester: Semester = Semester.FALL_2025) -> Course:
        course_code = CourseCode.parse(code)
        if course_code in self._courses:
            raise ValueError(f"Course code already in use: {course_code}")
        course = Course(
            id=format_record_id(COURSE_ID_PREFIX, self._next_course),
            code=course_code,
            title=title,
            department=department,
            credits=credits,
            description=description,
            instructor_id=instructor_id,
            semester=semester,
        )
        self._next_course += 1
        self._courses[course_code] = course
        if instructor_id:
            self._link_instructor(course, instructor_id)
        logger.info("course_added", course_code=str(course_code), credits=credits,
                    semester=str(semester))
        return course

    def register_course(self, course: Course):
        """Register an existing (e.g., imported) course record as-is."""
        self._courses[course.code] = course
        number = parse_record_number(course.id, COURSE_ID_PREFIX)
        self._next_course = max(self._next_course, number + 1)

    def find_course(self, code) -> Optional[Course]:
        """Look up a course by code; malformed codes simply find nothing."""
        try:
            course_code = CourseCode.parse(code)
        except ValueError:
            return None
        return self._courses.get(course_code)

    def find_course_by_id(self, course_id: str) -> Optional[Course]:
        for course in self._courses.values():
            if course.id == course_id:
                return course
        return None

    def list_courses(self) -> list:
        return list(self._courses.values())

    def active_courses(self) -> list:
        return [c for c in self._courses.values() if c.active]

    def update_course(self, code, title: Optional[str] = None,
                      description: Optional[str] = None,
                      credits: Optional[int] = None) -> bool:
        course = self.find_course(code)
        if course is None:
            return False
        if credits is not None and credits <= 0:
            raise ValueError("Credits must be positive")
        if title:
            course.title = title
        if description is not None:
            course.description = description
        if credits is not None:
            course.credits = credits
        return True

    def assign_instructor(self, code, instructor_id: str) -> bool:
        course = self.find_course(code)
        if course is None or instructor_id not in self._instructors:
            return False
        if course.instructor_id and course.instructor_id in self._instructors:
            self._instructors[course.instructor_id].unassign_course(course.code)
        self._link_instructor(course, instructor_id)
        return True

    def _link_instructor(self, course: Course, instructor_id: str):
        course.instructor_id = instructor_id
        instructor = self._instructors.get(instructor_id)
        if instructor is not None:
            instructor.assign_course(course.code)

    def deactivate_course(self, code) -> bool:
        return self._set_course_active(code, False)

    def activate_course(self, code) -> bool:
        return self._set_course_active(code, True)

    def _set_course_active(self, code, active: bool) -> bool:
        course = self.find_course(code)
        if course is None:
            return False
        course.active = active
        logger.info("course_status_changed", course_code=str(course.code), active=active)
        return True

    def search_courses(self, department: Optional[str] = None,
                       semester: Optional[Semester] = None,
                       instructor_id: Optional[str] = None,
                       title: Optional[str] = None,
                       min_credits: int = 0) -> list:
        """
        Filter courses by any combination of criteria.

        Department matching is case-insensitive; title is a substring match.
        """
        results = []
        for course in self._courses.values():
            if department and course.department.lower() != department.lower():
                continue
            if semester is not None and course.semester != semester:
                continue
            if instructor_id and course.instructor_id != instructor_id:
                continue
            if title and title.lower() not in course.title.lower():
                continue
            if course.credits < min_credits:
                continue
            results.append(course)
        return results

    def sorted_courses(self, by: str = "code") -> list:
        """Return all courses sorted by "code", "title" or "credits"."""
        keys = {
            "code": lambda c: str(c.code),
            "title": lambda c: c.title.lower(),
            "credits": lambda c: c.credits,
        }
        if by not in keys:
            raise ValueError(f"Cannot sort courses by {by!r}")
        return sorted(self._courses.values(), key=keys[by])

    # =========================================================================
    # INSTRUCTORS
    # =========================================================================

    def add_instructor(self, full_name: str, email: str, department: str,
                       title: str) -> Instructor:
        instructor = Instructor(
            id=format_record_id(INSTRUCTOR_ID_PREFIX, self._next_instructor),
            full_name=full_name,
            email=email,
            department=department,
            title=title,
        )
        self._next_instructor += 1
        self._instructors[instructor.id] = instructor
        logger.info("instructor_added", instructor_id=instructor.id)
        return instructor

    def register_instructor(self, instructor: Instructor):
        self._instructors[instructor.id] = instructor
        number = parse_record_number(instructor.id, INSTRUCTOR_ID_PREFIX)
        self._next_instructor = max(self._next_instructor, number + 1)

    def find_instructor(self, instructor_id: str) -> Optional[Instructor]:
        return self._instructors.get(instructor_id)

    def list_instructors(self) -> list:
        return list(self._instructors.values())

    # =========================================================================
    # DATA MANAGEMENT
    # =========================================================================

    def clear(self):
        self._students.clear()
        self._courses.clear()
        self._instructors.clear()
        self._next_student = 1
        self._next_course = 1
        self._next_instructor = 1
