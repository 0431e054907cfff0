"""
Services package.

This package contains logic that sits above the repositories:
- Resume rendering from a stored profile
"""
