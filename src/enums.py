"""Enumerations used throughout the constraint naming package."""

from enum import StrEnum


class ConstraintPrefix(StrEnum):
    """Prefix prepended to an implicitly generated constraint name."""

    FOREIGN_KEY = "FK"
    UNIQUE_KEY = "UK"
    INDEX = "IDX"
