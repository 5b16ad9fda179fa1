"""
SQLite storage for saved careers.
"""

from .connection import DatabaseConnection

__all__ = ['DatabaseConnection']
