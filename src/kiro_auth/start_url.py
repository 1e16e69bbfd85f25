"""IAM Identity Center start URL helpers."""

from __future__ import annotations

import re

from .constants import IDC_START_URL_DOMAIN

# Host label directly in front of awsapps.com, e.g. https://d-1234567890.awsapps.com/start
_IDC_IDENTIFIER_PATTERN = re.compile(
    r"(?:^|[/.@])([a-z0-9-]+)\." + re.escape(IDC_START_URL_DOMAIN) + r"(?=$|[/:?#])",
    re.IGNORECASE,
)


def extract_idc_identifier(start_url: str) -> str:
    """Return the tenant identifier from an IDC start URL.

    ``https://my-company.awsapps.com/start`` yields ``my-company``. URLs that
    do not point at an ``*.awsapps.com`` host yield an empty string.
    """
    if not start_url:
        return ""
    match = _IDC_IDENTIFIER_PATTERN.search(start_url)
    if match is None:
        return ""
    return match.group(1)
