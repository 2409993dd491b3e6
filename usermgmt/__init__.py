"""A lightweight REST API for managing users with in-memory storage."""

__version__ = "1.0.0"