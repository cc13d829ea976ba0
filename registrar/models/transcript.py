"""
Transcript data models.

A Transcript is a derived, throwaway view: it is built on demand from a
student's enrollments and holds no state the registrar depends on.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .academic import Grade, Semester


@dataclass
class TranscriptEntry:
    """
    One line of a transcript.

    `grade_points` is the weighted figure (grade points x credits), not the
    per-credit value of the grade.
    """
    course_code: str
    course_title: str
    credits: int
    grade: Optional[Grade]
    semester: Semester
    grade_points: float = field(init=False)

    def __post_init__(self):
        self.grade_points = self.grade.grade_points * self.credits if self.grade is not None else 0.0

    @property
    def counts_towards_gpa(self) -> bool:
        return self.grade is not None and self.grade.counts_towards_gpa


@dataclass
class Transcript:
    """
    A student's course history with overall GPA and credit totals.

    Totals are updated every time an entry is added: only entries whose
    grade counts towards the GPA contribute to either figure, so ungraded,
    incomplete and withdrawn entries appear on the transcript without
    affecting it.

    Entries keep the order they were added in (enrollment chronology).
    """
    student_id: str
    student_name: str
    entries: list = field(default_factory=list)
    overall_gpa: float = 0.0
    total_credits: int = 0
    generated_at: datetime = field(default_factory=datetime.now)
    _weighted_points: float = field(default=0.0, repr=False)

    def add_entry(self, entry: TranscriptEntry):
        self.entries.append(entry)
        if entry.counts_towards_gpa:
            self._weighted_points += entry.grade_points
            self.total_credits += entry.credits
        self.overall_gpa = (
            self._weighted_points / self.total_credits if self.total_credits > 0 else 0.0
        )

    def entries_by_semester(self, semester: Semester) -> list:
        return [e for e in self.entries if e.semester == semester]

    def entries_by_grade(self, grade: Grade) -> list:
        return [e for e in self.entries if e.grade == grade]

    @property
    def semesters(self) -> list:
        """Distinct semesters on the transcript, in chronological order."""
        return sorted({e.semester for e in self.entries})
