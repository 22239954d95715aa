"""
Registrar: an in-memory student, course and enrollment record manager.

Records live in generic in-memory repositories, are validated by a thin
service layer, and are reachable through a console menu or a REST API.
"""

__version__ = "1.0.0"
__author__ = "Registrar Development Team"
__description__ = "In-memory student, course and enrollment record manager"
