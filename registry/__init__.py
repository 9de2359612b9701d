from registry.classroom_registry import ClassroomRegistry
from registry.errors import (
    AssignmentNotScheduledError,
    ClassroomManagerError,
    ClassroomNotFoundError,
    DuplicateClassroomError,
    DuplicateStudentError,
    MissingArgumentError,
    StudentNotEnrolledInClassError,
    UnknownCommandError,
)

__all__ = [
    "ClassroomRegistry",
    "ClassroomManagerError",
    "DuplicateClassroomError",
    "DuplicateStudentError",
    "ClassroomNotFoundError",
    "StudentNotEnrolledInClassError",
    "AssignmentNotScheduledError",
    "MissingArgumentError",
    "UnknownCommandError",
]
