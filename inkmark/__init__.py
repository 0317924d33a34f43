"""
Inkmark: burn on-screen annotations into a copy of a PDF document.
"""

__version__ = "0.1.0"
