"""
Research Portfolio API.

FastAPI backend for a researcher workspace: accounts, projects, ideas, notes,
career goals, future work, deadlines, calendar events, profile and resume.
"""

__version__ = "1.0.0"
