"""
Fizop document validation.

A Fizop document maps operator names to operator descriptors carrying an
optional localized label and an optional image reference. This package
validates such documents structurally and semantically, and retrieves
them from files, URLs and npm packages.
"""

from fizop.errors import FizopError, FizopRetrievalError, InvalidFizopError
from fizop.schemas import ImageReference, ImageType, Operator
from fizop.validation import (
    ValidationEngine,
    ValidationIssue,
    ValidationReport,
    is_valid_fizop,
    validate_fizop,
)

__version__ = "1.0.0"

__all__ = [
    "FizopError",
    "FizopRetrievalError",
    "InvalidFizopError",
    "ImageReference",
    "ImageType",
    "Operator",
    "ValidationEngine",
    "ValidationIssue",
    "ValidationReport",
    "is_valid_fizop",
    "validate_fizop",
]
