"""
Validation Engine

Two-phase Fizop validation: structural schema validation, then (in
strict mode) semantic checks over schema-valid documents. The module
level functions are the pure core; ValidationEngine wraps them with
document retrieval and produces ValidationReport objects for files,
URLs, npm packages and glob batches.
"""

import glob
import logging
import time
from pathlib import Path
from typing import Any, List, Optional

from fizop.errors import FizopRetrievalError
from fizop.retrieval import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_UNPKG_BASE_URL,
    fetch_json_from_path,
    fetch_json_from_url,
    npm_package_url,
)
from fizop.validation.report import CATEGORY_SCHEMA, ValidationIssue, ValidationReport
from fizop.validation.schema_validator import validate_schema
from fizop.validation.semantic import (
    validate_images,
    validate_locale_consistency,
    validate_locale_formats,
)


logger = logging.getLogger(__name__)


def validate_fizop(
    candidate: Any,
    strict: bool = True,
    base_dir: Optional[str] = None,
) -> List[ValidationIssue]:
    """Validate a decoded value as a Fizop document.

    Schema errors are returned as-is and stop validation. Otherwise, in
    strict mode, the locale consistency, locale format and image checks
    run and their issues are concatenated in that order.

    Args:
        candidate: Any decoded JSON value.
        strict: Run semantic checks after a schema pass.
        base_dir: Base directory for resolving relative UnpkgPath images.

    Returns:
        List of ValidationIssue (empty if valid).
    """
    schema_result = validate_schema(candidate)
    if not schema_result.valid:
        return schema_result.errors

    if not strict:
        return []

    issues: List[ValidationIssue] = []
    issues.extend(validate_locale_consistency(candidate))
    issues.extend(validate_locale_formats(candidate))
    issues.extend(validate_images(candidate, base_dir))
    logger.debug(f"Semantic validation of {len(candidate)} operator(s) found {len(issues)} issue(s)")
    return issues


def is_valid_fizop(
    candidate: Any,
    strict: bool = True,
    base_dir: Optional[str] = None,
) -> bool:
    """Whether ``candidate`` is a valid Fizop document."""
    return len(validate_fizop(candidate, strict, base_dir)) == 0


class ValidationEngine:
    """Validation orchestrator for Fizop documents from any source.

    Retrieval failures are reported as root-level schema issues so that
    every source yields a ValidationReport rather than an exception.
    """

    def __init__(
        self,
        strict: bool = True,
        unpkg_base_url: str = DEFAULT_UNPKG_BASE_URL,
        http_timeout: float = DEFAULT_HTTP_TIMEOUT,
    ):
        """Initialize the validation engine.

        Args:
            strict: If True, semantic checks run after the schema pass.
            unpkg_base_url: CDN used to resolve npm package names.
            http_timeout: Timeout in seconds for URL retrieval.
        """
        self.strict = strict
        self.unpkg_base_url = unpkg_base_url
        self.http_timeout = http_timeout

    def validate_candidate(
        self,
        candidate: Any,
        source: str = "<memory>",
        base_dir: Optional[str] = None,
    ) -> ValidationReport:
        """Validate an already decoded value."""
        start = time.time()
        issues = validate_fizop(candidate, self.strict, base_dir)
        elapsed_ms = int((time.time() - start) * 1000)
        return ValidationReport(
            source=source,
            is_valid=not issues,
            strict=self.strict,
            issues=issues,
            operator_count=len(candidate) if isinstance(candidate, dict) else 0,
            duration_ms=elapsed_ms,
        )

    def validate_file(self, file_path: str) -> ValidationReport:
        """Validate a local JSON file.

        Relative UnpkgPath images are resolved against the file's directory.
        """
        try:
            data = fetch_json_from_path(file_path)
        except FizopRetrievalError as e:
            return self._failed_report(file_path, str(e))
        return self.validate_candidate(data, file_path, str(Path(file_path).parent))

    def validate_url(self, url: str) -> ValidationReport:
        """Validate a document downloaded from ``url``."""
        try:
            data = fetch_json_from_url(url, timeout=self.http_timeout)
        except FizopRetrievalError as e:
            return self._failed_report(url, str(e))
        return self.validate_candidate(data, url)

    def validate_npm(self, package_name: str) -> ValidationReport:
        """Validate the fizop.json published by an npm package."""
        return self.validate_url(npm_package_url(package_name, self.unpkg_base_url))

    def validate_batch(self, pattern: str) -> List[ValidationReport]:
        """Validate every file matching a glob pattern.

        Args:
            pattern: Glob pattern (e.g., 'catalogs/**/fizop.json').

        Returns:
            List of ValidationReport, one per file.
        """
        files = sorted(glob.glob(pattern, recursive=True))
        if not files:
            return [self._failed_report(pattern, f"No files matching pattern: {pattern}")]

        logger.debug(f"Validating {len(files)} file(s) matching {pattern}")
        return [self.validate_file(fp) for fp in files]

    def _failed_report(self, source: str, message: str) -> ValidationReport:
        return ValidationReport(
            source=source,
            is_valid=False,
            strict=self.strict,
            issues=[ValidationIssue(None, message, CATEGORY_SCHEMA, "root")],
        )
