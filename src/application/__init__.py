"""Application layer - Orchestration around the pure validators.

Structure:
- services/: Application services (registry dispatch with logging)

The application layer orchestrates domain logic but contains no validation
rules of its own.
"""
