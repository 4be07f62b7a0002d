"""
Data Bindings
=============

Fixed mapping from bound element ids to content derived from the
certificate record.
"""

import logging
from datetime import datetime
from typing import Callable, Dict, Optional

from ..models.certificate_models import CertificateData

logger = logging.getLogger(__name__)

# Formats tried after ISO 8601 parsing fails
DATE_INPUT_FORMATS = [
    "%d/%m/%Y",
    "%Y/%m/%d",
    "%d-%m-%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
]


def _parse_date(value: str) -> Optional[datetime]:
    text = value.strip()
    iso_text = text[:-1] + "+00:00" if text.endswith("Z") else text
    try:
        return datetime.fromisoformat(iso_text)
    except ValueError:
        pass

    for fmt in DATE_INPUT_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def format_date(value: Optional[str]) -> str:
    """
    Format a date string as DD/MM/YYYY.

    Empty input gives an empty string; input that is not a valid
    calendar date is returned unchanged.
    """
    if not value:
        return ""

    parsed = _parse_date(value)
    if parsed is None:
        logger.debug(f"[BINDINGS] Unparseable date passed through: {value!r}")
        return value
    return parsed.strftime("%d/%m/%Y")


BINDING_RULES: Dict[str, Callable[[CertificateData], str]] = {
    "client-name": lambda data: data.client_name,
    "standard": lambda data: f"Standard: {data.standard}",
    "scope-content": lambda data: data.scope,
    "scope-work-content": lambda data: data.scope,
    "cert-number": lambda data: f"Certification Number: {data.display_certificate_number}",
    "orig-reg-date": lambda data: f"Date of original registration: {format_date(data.original_registration_date)}",
    "issue-date": lambda data: f"Date of certificate: {format_date(data.issue_date)}",
    "expiry-date": lambda data: f"Date of certificate expiry: {format_date(data.expiry_date)}",
}

BOUND_KEYS = frozenset(BINDING_RULES)


def is_bound(element_id: str) -> bool:
    """Check whether an element id takes its content from the certificate record."""
    return element_id in BINDING_RULES


def derive_content(element_id: str, data: CertificateData) -> Optional[str]:
    """Content for a bound element, or None when the id is not bound."""
    rule = BINDING_RULES.get(element_id)
    if rule is None:
        return None
    return rule(data)
