"""Encoding of documents into the JSON shapes of an update request."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import Any

from solrinplace.document import Document


class EncodeError(ValueError):
    """A document cannot be encoded."""


def _format_float(value: float) -> str:
    """Format a float the way a shortest ``%g`` conversion does."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    nd = len(digits)
    dp = nd + exponent
    prefix = "-" if sign else ""

    exp = dp - 1
    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if nd > 1 else "")
        exp_sign = "-" if exp < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp):02d}"

    if dp <= 0:
        body = "0." + "0" * (-dp) + digits
    elif dp >= nd:
        body = digits + "0" * (dp - nd)
    else:
        body = digits[:dp] + "." + digits[dp:]
    return prefix + body


def _format_value(value: Any) -> tuple[str, bool]:
    """Return the textual value and whether it needs quoting."""
    if isinstance(value, bool):
        raise EncodeError("unsupported field type")
    if isinstance(value, int):
        return str(value), False
    if isinstance(value, float):
        return _format_float(value), False
    if isinstance(value, str):
        return value, True
    raise EncodeError("unsupported field type")


def _quoted(text: str, quote: bool) -> str:
    return f'"{text}"' if quote else text


def _kv(key: str, value: str, quote: bool) -> str:
    return f'"{key}":{_quoted(value, quote)}'


def _encode(
    doc: Document,
    allowed_fields: Sequence[str] | None,
    write_field: Callable[[str, str, bool], str],
) -> str:
    parts = ["{", _kv("id", doc.id, True)]
    for fld in doc.fields:
        if allowed_fields is not None and fld.key not in allowed_fields:
            continue
        value, quote = _format_value(fld.value)
        parts.append(",")
        parts.append(write_field(fld.key, value, quote))
    parts.append("}")
    return "".join(parts)


def json_encode(doc: Document, allowed_fields: Sequence[str] | None) -> str:
    """Encode a document as a plain JSON object.

    When ``allowed_fields`` is not None, only fields named in it are written.
    """
    return _encode(doc, allowed_fields, _kv)


def in_place_update_encode(doc: Document, allowed_fields: Sequence[str] | None) -> str:
    """Encode a document with every field wrapped as a ``{"set": value}`` update."""

    def write_set(key: str, value: str, quote: bool) -> str:
        return f'"{key}":{{{_kv("set", value, quote)}}}'

    return _encode(doc, allowed_fields, write_set)