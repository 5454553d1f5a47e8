"""
SQLAlchemy ORM models for the coaching backend.
"""

from archcoach.models.project import ProjectRecord

__all__ = [
    "ProjectRecord",
]
