"""Conversion of attribute strings to numbers, vectors and quaternions."""

from __future__ import annotations

import math
import re
import sys

from .errors import UrdfError, UrdfErrorType
from .geometry import Quaternion, Vec3, quat_normalize

# Longest prefix a C-style decimal or hexadecimal float reader would accept.
_NUMBER_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*"
    r"(?P<number>[+-]?(?:"
    r"0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
    r"|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[iI][nN][fF](?:[iI][nN][iI][tT][yY])?"
    r"|[nN][aA][nN](?:\([0-9A-Za-z_]*\))?"
    r"))"
)


def _to_float(number: str) -> float:
    unsigned = number.lstrip("+-")
    if unsigned[:2] in ("0x", "0X"):
        return float.fromhex(number)
    if unsigned[:3].lower() == "nan":
        return -math.nan if number.startswith("-") else math.nan
    return float(number)


def string_to_real(text: str) -> float:
    """Read a real number from the start of ``text``; trailing characters are ignored.

    Raises ``UrdfError`` with ``VALUE_CONVERSION_FAILED`` when no number starts
    the text, and with ``RANGE_ERROR`` when the value is infinite or at the
    limits of the float range.
    """
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        raise UrdfError(UrdfErrorType.VALUE_CONVERSION_FAILED, f"'{text}' is not a number")
    value = _to_float(match.group("number"))
    largest = sys.float_info.max
    if math.isinf(value) or value >= largest or value <= -largest:
        raise UrdfError(
            UrdfErrorType.RANGE_ERROR,
            f"'{text[match.end():]}' value is out of range of type `real_t`",
        )
    return value


def split_string_spaces(text: str) -> list[str]:
    """Split on single spaces, dropping empty pieces."""
    return [piece for piece in text.split(" ") if piece]


def string_to_vector(text: str) -> Vec3:
    """Read three space-separated numbers into a ``Vec3``."""
    pieces = split_string_spaces(text)
    if len(pieces) != 3:
        raise UrdfError(
            UrdfErrorType.VALUE_CONVERSION_FAILED,
            f"Conversion failed to Vec3 due to string '{text}' "
            "not split into 3 substrings separated by spaces.",
        )
    x, y, z = (string_to_real(piece) for piece in pieces)
    return Vec3(x, y, z)


def string_to_quaternion(text: str) -> Quaternion:
    """Read four space-separated numbers (w x y z) into a unit quaternion."""
    pieces = split_string_spaces(text)
    if len(pieces) != 4:
        raise UrdfError(
            UrdfErrorType.VALUE_CONVERSION_FAILED,
            f"Conversion failed to Quaternion due to string '{text}' "
            "not split into 4 substrings separated by spaces.",
        )
    qw, qx, qy, qz = (string_to_real(piece) for piece in pieces)
    return quat_normalize(Quaternion(qw, qx, qy, qz))