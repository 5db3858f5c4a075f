"""
Fizop Error Hierarchy

Exceptions raised by the document retrieval layer. Data-quality problems
found by validation are never raised by the validators themselves; they
are returned as ValidationIssue lists. These exceptions exist for callers
that want a ready-to-use document or nothing.

Error Hierarchy:
    FizopError (base)
    ├── FizopRetrievalError (file, network or JSON decoding failure)
    └── InvalidFizopError (document decoded but failed validation)
"""

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from fizop.validation.report import ValidationIssue


class FizopError(Exception):
    """Base exception for all Fizop errors."""
    pass


class FizopRetrievalError(FizopError):
    """Raised when a document cannot be read, downloaded or decoded.

    Attributes:
        source: Path or URL that was being retrieved
        original_error: The underlying I/O, HTTP or JSON error
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.source = source
        self.original_error = original_error


class InvalidFizopError(FizopError):
    """Raised when a decoded document fails validation.

    Attributes:
        issues: Every validation issue found in the document
    """

    def __init__(self, issues: List["ValidationIssue"], source: Optional[str] = None):
        self.issues = list(issues)
        self.source = source
        where = f" in {source}" if source else ""
        details = "; ".join(
            f"[{i.operator_name if i.operator_name is not None else 'root'}] {i.message}"
            for i in self.issues
        )
        super().__init__(f"Invalid Fizop document{where}: {details}")
