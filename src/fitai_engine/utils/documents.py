"""Persistence-safe document conversion."""

import logging
import math
from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum

logger = logging.getLogger(__name__)


def sanitize_document(value):
    """Recursively coerce a structure into values a document store accepts.

    Mappings become dicts with string keys, sequences and sets become lists,
    enums collapse to their value and dates to ISO strings. Anything that has
    no stored representation (non-finite floats, arbitrary objects) becomes
    ``None``. Strings, booleans, integers and finite floats pass through
    unchanged.
    """
    if value is None or isinstance(value, (str, bool, int)):
        if isinstance(value, Enum):
            return value.value
        return value

    if isinstance(value, float):
        return value if math.isfinite(value) else None

    if isinstance(value, Enum):
        return sanitize_document(value.value)

    if isinstance(value, (datetime, date)):
        return value.isoformat()

    if isinstance(value, Mapping):
        return {str(key): sanitize_document(item) for key, item in value.items()}

    if isinstance(value, (list, tuple)):
        return [sanitize_document(item) for item in value]

    if isinstance(value, (set, frozenset)):
        items = [sanitize_document(item) for item in value]
        try:
            return sorted(items)
        except TypeError:
            return items

    logger.debug("Dropping unsupported value of type %s", type(value).__name__)
    return None
