"""Render a list of values for inclusion in a failure message"""


import json
from typing import Any, Sequence


# More than this many values are truncated with a trailing ", ..."
MAX_VALUES = 10


def encode_string(value: str) -> str:
    """Wrap a string in double quotes, escaping it like a string literal

    Backslashes, double quotes and control characters are escaped. Non-ASCII
    characters are left alone so that messages stay readable.
    """
    return json.dumps(value, ensure_ascii=False)


def render_value(value: Any) -> str:
    """Textual form of one element: quoted if a string, str() otherwise"""
    if isinstance(value, str):
        return encode_string(value)
    return str(value)


def format_values(values: Sequence[Any], limit: int = MAX_VALUES) -> str:
    """Join values with ", ", keeping only the first limit-1 if there are more

    >>> format_values(["a", 1])
    '"a", 1'
    """

    values = list(values)
    has_extra = len(values) > limit
    if has_extra:
        values = values[:limit - 1]

    out = ", ".join(map(render_value, values))
    if has_extra:
        out += ", ..."
    return out
