"""
Core module for application configuration, database setup, and dependency injection.

This module contains the foundational infrastructure for the FastAPI application:
- Configuration management
- Storage backend creation and health checks
- Dependency injection setup
- Password hashing
- Custom exceptions
"""
