"""Student marksheets: totals, percentages, grades and ranking."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

_GRADES = (
    (95, "A+"),
    (90, "A"),
    (85, "B+"),
    (80, "B"),
    (75, "C+"),
    (70, "C"),
    (65, "D+"),
    (60, "D"),
    (50, "E+"),
    (40, "E"),
)

_SCALE = """Grading Scale:
--------------
95 - 100: A+
90 - 94 : A 
85 - 89 : B+
80 - 84 : B 
75 - 79 : C+
70 - 74 : C 
65 - 69 : D+ 
60 - 64 : D 
50 - 59 : E+ 
40 - 59 : E 
Below 40: F
"""

_HEADER = "Rank\tName\tTotal Marks\tPercentage\tGrade\n"
_RULE = "-" * 51 + "\n"


@dataclass
class Student:
    """A student's marks together with the results derived from them."""

    name: str
    marks: list[int] = field(default_factory=list)
    total_marks: int = 0
    percentage: float = 0.0
    grade: str = "F"


def total_marks(marks: Iterable[int]) -> int:
    """Sum of the marks."""
    return sum(marks)


def percentage(total: int, possible: int) -> float:
    """Share of ``possible`` marks obtained, as a percentage."""
    if possible <= 0:
        raise ValueError("the possible marks must be positive")
    return total / possible * 100.0


def grade_for(percentage: float) -> str:
    """Letter grade for a percentage."""
    for threshold, grade in _GRADES:
        if percentage >= threshold:
            return grade
    return "F"


def grading_scale() -> str:
    """The printed grading scale."""
    return _SCALE


def make_student(name: str, marks: Sequence[int]) -> Student:
    """Build a student, scoring each subject out of 100."""
    marks = list(marks)
    total = total_marks(marks)
    share = percentage(total, len(marks) * 100)
    return Student(name, marks, total, share, grade_for(share))


def rank_students(students: Iterable[Student]) -> list[Student]:
    """Students ordered from the highest percentage to the lowest."""
    return sorted(students, key=lambda student: student.percentage, reverse=True)


def format_marksheet(students: Sequence[Student]) -> str:
    """Render the ranked table; rank follows the given order."""
    rows = "".join(
        f"{rank}\t{s.name}\t{s.total_marks}\t\t{s.percentage:.2f}%\t\t{s.grade}\n"
        for rank, s in enumerate(students, start=1)
    )
    return _HEADER + _RULE + rows