"""
QuickNotes - minimal note-taking application

A FastAPI store for title/content notes and a terminal client that
filters, sorts and reorders them locally.
"""

__version__ = "1.0.0"
