"""Pair an evaluated value with the label used to describe it in messages"""


from typing import Any, NamedTuple, Optional


# Longest repr() that will be used as an automatic label
_MAX_LENGTH = 80


class Labelled(NamedTuple):
    """An evaluated value together with its display label"""

    # The value exactly as the caller passed it
    value: Any

    # Text which identifies the value in failure messages (e.g., `x`)
    label: str


def safe_repr(obj: Any, short: bool = False) -> str:
    """repr() which never raises and which can be shortened for display"""

    try:
        result = repr(obj)
    except Exception:  # pylint: disable=broad-exception-caught
        result = object.__repr__(obj)
    if not short or len(result) < _MAX_LENGTH:
        return result
    return result[:_MAX_LENGTH] + ' [truncated]...'


def quasi_label(value: Any, label: Optional[str] = None) -> Labelled:
    """Attach a label to a value, falling back to a shortened repr()

    Python cannot see the source expression which produced an argument, so
    the caller is responsible for supplying a meaningful label. When it does
    not, the (possibly truncated) repr of the value stands in for it.
    """

    if label is None:
        label = safe_repr(value, short=True)
    return Labelled(value=value, label=label)
