from models.assignment import Assignment
from models.student import Student
from models.classroom import Classroom

__all__ = [
    "Assignment",
    "Student",
    "Classroom",
]
