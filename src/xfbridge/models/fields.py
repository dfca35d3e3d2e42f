"""
Integer field types shared by the response models.

The XenForo API is inconsistent about how it serializes some counters: the
same field may arrive as ``42`` in one response and ``"42"`` in the next.
``NumberFromString`` accepts both and yields the same ``int``; ``U64`` is the
plain strict form used where the server always sends a JSON number.
"""

from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import BeforeValidator, Field, Strict

U64_MAX = 2**64 - 1

_DIGITS = re.compile(r"[0-9]+")


def number_from_string(value: Any) -> Any:
    """
    Convert a string of ASCII digits to ``int``; pass anything else through.

    Non-string values are left for the strict integer validation that
    follows, so numbers keep their normal checks.

    Raises:
        ValueError: If ``value`` is a string that is not all digits.
    """
    if isinstance(value, str):
        if not _DIGITS.fullmatch(value):
            raise ValueError("expected a number or a string of digits")
        return int(value)
    return value


U64 = Annotated[int, Strict(), Field(ge=0, le=U64_MAX)]

NumberFromString = Annotated[U64, BeforeValidator(number_from_string)]
