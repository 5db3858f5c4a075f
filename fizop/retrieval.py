"""
Document Retrieval

Thin I/O helpers that turn a file path, URL or npm package name into a
decoded JSON value. Failures are raised as FizopRetrievalError so that
transport and decoding problems stay separate from validation results.
"""

import json
import logging
from typing import Any

import requests

from fizop.errors import FizopRetrievalError


logger = logging.getLogger(__name__)

DEFAULT_UNPKG_BASE_URL = "https://unpkg.com"
DEFAULT_HTTP_TIMEOUT = 30.0
FIZOP_FILENAME = "fizop.json"


def fetch_json_from_path(file_path: str) -> Any:
    """Read and decode a JSON file.

    Raises:
        FizopRetrievalError: If the file is missing, unreadable or not JSON.
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise FizopRetrievalError(f"File not found: {file_path}", file_path, e)
    except IsADirectoryError as e:
        raise FizopRetrievalError(f"Path is not a file: {file_path}", file_path, e)
    except json.JSONDecodeError as e:
        raise FizopRetrievalError(f"Invalid JSON: {e}", file_path, e)
    except OSError as e:
        raise FizopRetrievalError(f"Cannot read file: {e}", file_path, e)


def fetch_json_from_url(url: str, timeout: float = DEFAULT_HTTP_TIMEOUT) -> Any:
    """Download and decode a JSON document over HTTP(S).

    Raises:
        FizopRetrievalError: On connection errors, non-2xx responses or
            a body that is not JSON.
    """
    logger.info(f"Fetching Fizop document from {url}")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise FizopRetrievalError(f"Cannot fetch {url}: {e}", url, e)

    try:
        return response.json()
    except ValueError as e:
        raise FizopRetrievalError(f"Invalid JSON from {url}: {e}", url, e)


def npm_package_url(package_name: str, unpkg_base_url: str = DEFAULT_UNPKG_BASE_URL) -> str:
    """URL of the fizop.json shipped at the root of an npm package."""
    return f"{unpkg_base_url.rstrip('/')}/{package_name}/{FIZOP_FILENAME}"
