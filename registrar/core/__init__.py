"""
Core module containing the entity records, interfaces and exceptions.
"""

from .entities import *
from .interfaces import *
from .exceptions import *

__all__ = [
    # Entities
    "Student",
    "Teacher",
    "Course",
    "Enrollment",
    "Grade",

    # Interfaces
    "Repository",

    # Exceptions
    "RegistrarException",
    "NullArgumentError",
    "InvalidArgumentError",
    "ValidationError",
    "ReferenceNotFoundError",
    "ConfigurationError",
]
