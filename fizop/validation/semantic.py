"""
Semantic Validator

Cross-operator and cross-field checks for schema-valid Fizop documents:
- Every operator offers the same set of label locales
- Locale tags are well-formed language tags
- Image data is valid for its declared image type

All checks accept the decoded document mapping and return issues in
operator traversal order.
"""

import base64
import binascii
import os
import re
from typing import Any, Callable, Dict, List, Mapping, Optional

import langcodes
from pydantic import AnyUrl, TypeAdapter, ValidationError

from fizop.schemas import ImageType
from fizop.validation.report import ValidationIssue


_url_adapter = TypeAdapter(AnyUrl)

# RFC 2397: data:[<mediatype>][;base64],<data>
_DATA_URI_PATTERN = re.compile(
    r"^data:"
    r"(?P<mediatype>[a-z]+/[a-z0-9\-+.]+(?:;[a-z0-9\-.!#$%*+{}|~`]+=[a-z0-9\-.!#$%*+{}|~`]+)*)?"
    r"(?P<base64>;base64)?"
    r",(?P<data>[a-z0-9!$&',()*+;=\-._~:@/?%\s<>]*)\Z",
    re.IGNORECASE,
)


def _label_locales(operator: Mapping[str, Any]) -> List[str]:
    """Locale keys of an operator's label; string or missing labels have none."""
    label = operator.get("label")
    if isinstance(label, Mapping):
        return list(label)
    return []


def validate_locale_consistency(document: Mapping[str, Mapping[str, Any]]) -> List[ValidationIssue]:
    """Check that every operator covers the same label locales.

    The reference set is taken from the first operator, in traversal
    order, whose label is a locale mapping. Operators without such a
    label are compared as having no locales.

    Args:
        document: Schema-valid Fizop document.

    Returns:
        List of ValidationIssue for missing and extra locales.
    """
    issues: List[ValidationIssue] = []

    reference: Optional[List[str]] = None
    for operator in document.values():
        if isinstance(operator.get("label"), Mapping):
            reference = _label_locales(operator)
            break
    if reference is None:
        return issues

    for name, operator in document.items():
        locales = _label_locales(operator)
        for locale in reference:
            if locale not in locales:
                issues.append(ValidationIssue(name, f"Missing locale {locale}"))
        for locale in locales:
            if locale not in reference:
                issues.append(ValidationIssue(name, f"Extra locale {locale}"))

    return issues


def is_valid_locale(tag: str) -> bool:
    """Whether a string is a well-formed, registered BCP-47 language tag.

    Subtags must exist in the IANA language subtag registry, so a
    well-formed but unassigned code such as ``jp`` is rejected.
    Underscore separators (``en_US``) are rejected rather than normalized.
    """
    if not tag or "_" in tag:
        return False
    return langcodes.tag_is_valid(tag)


def validate_locale_formats(document: Mapping[str, Mapping[str, Any]]) -> List[ValidationIssue]:
    """Check the syntax of every distinct locale tag used by any label.

    Each tag is checked once; a rejected tag is reported against the
    operator where it first appears.
    """
    issues: List[ValidationIssue] = []
    checked = set()

    for name, operator in document.items():
        for locale in _label_locales(operator):
            if locale in checked:
                continue
            checked.add(locale)
            if not is_valid_locale(locale):
                issues.append(ValidationIssue(name, f"Invalid locale {locale}"))

    return issues


def is_valid_url_format(data: str) -> bool:
    """Whether ``data`` parses as an absolute URL."""
    try:
        _url_adapter.validate_python(data)
    except ValidationError:
        return False
    return True


def is_valid_path_format(data: str, base_dir: Optional[str] = None) -> bool:
    """Whether ``data`` names an existing local path.

    Relative paths are tried against ``base_dir`` first, then as given.
    An empty path never names a file, even though joining it onto
    ``base_dir`` yields the directory itself.
    """
    if not data:
        return False
    if base_dir and os.path.exists(os.path.join(base_dir, data)):
        return True
    return os.path.exists(data)


def is_valid_data_uri_format(data: str) -> bool:
    """Whether ``data`` is a syntactically valid data URI.

    Base64-flagged payloads must also decode.
    """
    match = _DATA_URI_PATTERN.match(data)
    if not match:
        return False
    if match.group("base64"):
        payload = "".join(match.group("data").split())
        try:
            base64.b64decode(payload, validate=True)
        except binascii.Error:
            return False
    return True


def _reject(data: str) -> bool:
    return False


def validate_images(
    document: Mapping[str, Mapping[str, Any]],
    base_dir: Optional[str] = None,
) -> List[ValidationIssue]:
    """Check each image's data against its declared image type.

    An unrecognized ``imgType`` is reported and its data is then
    rejected as well, so such an operator always yields two issues.

    Args:
        document: Schema-valid Fizop document.
        base_dir: Base directory for resolving relative UnpkgPath images.

    Returns:
        List of ValidationIssue for invalid image types and payloads.
    """
    checkers: Dict[str, Callable[[str], bool]] = {
        ImageType.URL.value: is_valid_url_format,
        ImageType.UNPKG_PATH.value: lambda data: is_valid_path_format(data, base_dir),
        ImageType.DATA_URI.value: is_valid_data_uri_format,
    }
    issues: List[ValidationIssue] = []

    for name, operator in document.items():
        image = operator.get("image")
        if image is None:
            continue
        img_type = image["imgType"]
        img_data = image["imgData"]

        checker = checkers.get(img_type)
        if checker is None:
            issues.append(ValidationIssue(name, f"Invalid imgType {img_type}"))
            checker = _reject
        if not checker(img_data):
            issues.append(ValidationIssue(
                name,
                f"Invalid imgeData {img_data} for imgType {img_type}",
            ))

    return issues
