"""
Console user interface.
"""

from .console import SchoolManagementUI

__all__ = [
    "SchoolManagementUI",
]
