"""
Validation Module for Fizop Documents

Provides structural schema validation, semantic locale and image checks,
and report generation for Fizop documents.
"""

from fizop.validation.report import ValidationIssue, ValidationReport
from fizop.validation.engine import ValidationEngine, is_valid_fizop, validate_fizop

__all__ = [
    "ValidationIssue",
    "ValidationReport",
    "ValidationEngine",
    "is_valid_fizop",
    "validate_fizop",
]
