"""ROSTER

Student record lookups over SQLAlchemy. The lookup logic talks to a narrow
storage interface so that tests can swap the real database for a stand-in.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
