from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

_MISSING = object()

# selected is intentionally not part of the structural check
SUBJECT_FIELD_TYPES: tuple[tuple[str, str], ...] = (
    ("id", "number"),
    ("name", "string"),
    ("credit", "number"),
    ("score", "number"),
    ("semester", "string"),
)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _field(candidate: Any, name: str) -> Any:
    try:
        if isinstance(candidate, Mapping):
            return candidate.get(name, _MISSING)
        return getattr(candidate, name, _MISSING)
    except Exception:
        return _MISSING


def validate_subject_data(candidate: Any) -> bool:
    """
    True when ``candidate`` has the Subject shape: numeric id/credit/score and
    string name/semester. Mappings are read by key, anything else by attribute.
    Ranges are not checked and nothing is raised.
    """
    if candidate is None:
        return False

    for name, kind in SUBJECT_FIELD_TYPES:
        value = _field(candidate, name)
        ok = _is_number(value) if kind == "number" else isinstance(value, str)
        if not ok:
            logger.debug("Subject rejected: field %r is not a %s", name, kind)
            return False
    return True
