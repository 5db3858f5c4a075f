"""
Schema Validator

Wraps the Pydantic Fizop schemas for structural validation with
field-level error details. Returns ValidationIssue lists instead of
raising exceptions.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from pydantic import ValidationError

from fizop.schemas import FizopDocument, document_adapter
from fizop.validation.report import CATEGORY_SCHEMA, ValidationIssue


logger = logging.getLogger(__name__)


@dataclass
class SchemaResult:
    """Outcome of structural validation.

    Attributes:
        valid: Whether the candidate matches the Fizop document shape
        errors: Schema issues (empty when valid)
        document: The parsed document when valid, else None
    """
    valid: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    document: Optional[FizopDocument] = None


def _pydantic_errors_to_issues(errors: list) -> List[ValidationIssue]:
    """Convert Pydantic validation errors to ValidationIssue list."""
    issues = []
    for err in errors:
        loc = err["loc"]
        field_path = ".".join(str(part) for part in loc) if loc else "root"
        issues.append(ValidationIssue(
            operator_name=str(loc[0]) if loc else None,
            message=f"{err['msg']} (type={err['type']})",
            category=CATEGORY_SCHEMA,
            path=field_path,
        ))
    return issues


def validate_schema(candidate: Any) -> SchemaResult:
    """Check that a decoded value has the structural shape of a Fizop document.

    Args:
        candidate: Any decoded JSON value.

    Returns:
        SchemaResult; ``errors`` is non-empty whenever ``valid`` is False.
    """
    try:
        document = document_adapter.validate_python(candidate)
    except ValidationError as e:
        issues = _pydantic_errors_to_issues(e.errors())
        logger.debug(f"Schema validation failed with {len(issues)} error(s)")
        return SchemaResult(valid=False, errors=issues)
    return SchemaResult(valid=True, document=document)
