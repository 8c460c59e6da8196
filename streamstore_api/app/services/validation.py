"""
Field validation shared by the catalog services.

Every helper returns the cleaned value or raises ``ValidationError``.
Text is stored stripped; optional text that is blank becomes ``None``.
"""

import math
from decimal import Decimal
from typing import Optional

from streamstore_api.app.core.errors import ValidationError

IMAGE_PREFIXES = ("http://", "https://", "/", "data:image/")


def require_text(value: Optional[str], field: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"Field '{field}' is required")
    return value.strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip()


def require_image(value: Optional[str], field: str) -> str:
    """Validate a required image reference.

    Accepts absolute http(s) URLs, site-relative paths and embedded
    ``data:image/...`` URIs.
    """
    value = require_text(value, field)
    if not value.startswith(IMAGE_PREFIXES):
        raise ValidationError(f"Field '{field}' must be a URL, a path or a data:image URI")
    return value


def optional_image(value: Optional[str], field: str) -> Optional[str]:
    if optional_text(value) is None:
        return None
    return require_image(value, field)


def require_price(value: Optional[float]) -> float:
    """Validate a price in currency units with at most two decimal places."""
    if value is None:
        raise ValidationError("Field 'price' is required")
    if math.isnan(value) or math.isinf(value):
        raise ValidationError("Field 'price' must be a finite number")
    if value < 0:
        raise ValidationError("Field 'price' must not be negative")
    if Decimal(str(value)).as_tuple().exponent < -2:
        raise ValidationError("Field 'price' must have at most two decimal places")
    return float(value)
