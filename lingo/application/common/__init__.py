"""
Application common module.

Contains base classes for the application layer:
- UnitOfWork: transaction boundary port implemented by infrastructure
"""

from .unit_of_work import UnitOfWork

__all__ = ["UnitOfWork"]
