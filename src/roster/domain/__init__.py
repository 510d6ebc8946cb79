"""Domain model for ROSTER.

Pure data types with no knowledge of storage or presentation.
"""

from .student import NAME_MAX_LENGTH, Student

__all__ = ["NAME_MAX_LENGTH", "Student"]
