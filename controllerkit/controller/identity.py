"""
Identifier strategies.

A CRUD controller pulls the raw ``id`` out of the request and hands it to
its strategy before calling the model.
"""

import re
from typing import Any, Optional

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)


def raw_id(value: Any) -> Any:
    """Opaque identifiers (document stores): passed through untouched."""
    return value


def int_id(value: Any) -> Optional[int]:
    """
    Integer identifiers (relational stores).

    Leading/trailing whitespace is ignored. Only plain ASCII digits with an
    optional sign are accepted; anything else yields None, which the model
    then fails to find.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value

    text = str(value).strip()
    if not _INTEGER.fullmatch(text):
        return None
    return int(text)
