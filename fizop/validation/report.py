"""
Validation Report Data Models

Defines ValidationIssue and ValidationReport dataclasses used across
the validation module for structured error reporting.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Literal, Optional


CATEGORY_SCHEMA = "schema"
CATEGORY_SEMANTIC = "semantic"


@dataclass(frozen=True)
class ValidationIssue:
    """A single defect found in a Fizop document.

    Attributes:
        operator_name: Operator the issue is attributed to (None for
            defects of the document root itself)
        message: Human-readable description of the issue
        category: Which validation phase produced the issue
        path: Dotted location of the offending value (schema issues)
    """
    operator_name: Optional[str]
    message: str
    category: Literal["schema", "semantic"] = CATEGORY_SEMANTIC
    path: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        d = {
            "operator_name": self.operator_name,
            "message": self.message,
            "category": self.category,
        }
        if self.path:
            d["path"] = self.path
        return d


@dataclass
class ValidationReport:
    """Structured report from a validation run.

    Attributes:
        source: File path, URL or package the document came from
        is_valid: Whether the document passed validation
        strict: Whether semantic checks were requested
        issues: List of validation issues found
        operator_count: Number of operators in the document (0 if unreadable)
        timestamp: When validation was performed (UTC)
        duration_ms: How long validation took in milliseconds
    """
    source: str
    is_valid: bool
    strict: bool = True
    issues: List[ValidationIssue] = field(default_factory=list)
    operator_count: int = 0
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    duration_ms: int = 0

    @property
    def schema_errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.category == CATEGORY_SCHEMA]

    @property
    def semantic_errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.category == CATEGORY_SEMANTIC]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "source": self.source,
            "is_valid": self.is_valid,
            "strict": self.strict,
            "operator_count": self.operator_count,
            "issues": [i.to_dict() for i in self.issues],
            "timestamp": self.timestamp,
            "duration_ms": self.duration_ms,
            "summary": {
                "schema_errors": len(self.schema_errors),
                "semantic_errors": len(self.semantic_errors),
            },
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize report to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def format_human(self) -> str:
        """Format report for human-readable console output."""
        mode = "strict" if self.strict else "lenient"
        if self.is_valid:
            lines = [f"✅ {self.source}: Valid ({self.operator_count} operators, {mode})"]
        else:
            lines = [f"❌ {self.source}: Failed ({len(self.issues)} issues, {mode})"]

        for issue in self.issues:
            where = issue.operator_name if issue.operator_name is not None else "root"
            lines.append(f"  ❌ [{where}] {issue.message}")
            if issue.path and issue.category == CATEGORY_SCHEMA:
                lines.append(f"      → at {issue.path}")

        return "\n".join(lines)
