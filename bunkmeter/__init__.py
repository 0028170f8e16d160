"""Attendance percentage and skip/attend advice."""

__version__ = "1.0.0"
