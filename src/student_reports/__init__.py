"""
Student records report tool.

Joins curricular (CSV) and extracurricular (nested key:value) student records
and writes one of six fixed CSV reports.
"""

from student_reports.config import APP_VERSION as __version__

__all__ = ["__version__"]
