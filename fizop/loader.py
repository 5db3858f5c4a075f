"""
Fizop Loader

Retrieve a Fizop document from a local file, a URL or an npm package
and return it only if it validates. Unlike ValidationEngine, which
always reports, these helpers raise: FizopRetrievalError when the
document cannot be obtained and InvalidFizopError when it is invalid.

Usage:
    >>> from fizop.loader import retrieve_fizop_from_npm
    >>> fizop = retrieve_fizop_from_npm("my-operators")
    >>> fizop["flour"]["label"]["fr"]
    'farine'
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from fizop.errors import InvalidFizopError
from fizop.retrieval import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_UNPKG_BASE_URL,
    fetch_json_from_path,
    fetch_json_from_url,
    npm_package_url,
)
from fizop.validation.engine import validate_fizop


logger = logging.getLogger(__name__)


def make_fizop(
    candidate: Any,
    strict: bool = True,
    base_dir: Optional[str] = None,
    source: Optional[str] = None,
) -> Dict[str, Any]:
    """Return ``candidate`` unchanged if it is a valid Fizop document.

    Raises:
        InvalidFizopError: With every issue found, if validation fails.
    """
    issues = validate_fizop(candidate, strict, base_dir)
    if issues:
        raise InvalidFizopError(issues, source)
    return candidate


def retrieve_fizop_from_path(file_path: str, strict: bool = True) -> Dict[str, Any]:
    """Load a Fizop document from a local JSON file.

    Relative UnpkgPath images are resolved against the file's directory.
    """
    data = fetch_json_from_path(file_path)
    return make_fizop(data, strict, str(Path(file_path).parent), file_path)


def retrieve_fizop_from_url(
    url: str,
    strict: bool = True,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
) -> Dict[str, Any]:
    """Load a Fizop document from a URL."""
    data = fetch_json_from_url(url, timeout=timeout)
    fizop = make_fizop(data, strict, source=url)
    logger.info(f"Loaded {len(fizop)} operator(s) from {url}")
    return fizop


def retrieve_fizop_from_npm(
    package_name: str,
    strict: bool = True,
    unpkg_base_url: str = DEFAULT_UNPKG_BASE_URL,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
) -> Dict[str, Any]:
    """Load the fizop.json published at the root of an npm package."""
    url = npm_package_url(package_name, unpkg_base_url)
    return retrieve_fizop_from_url(url, strict, timeout)
