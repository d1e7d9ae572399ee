# storefront/utils/parsing.py
import re

_SIGN = re.compile(r"\s*([+-]?)")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_DEC_DIGITS = re.compile(r"[0-9]+")


def parse_int(value: str) -> int | None:
    """
    Lenient integer parsing for identifiers taken from the URL path.

    Leading whitespace and an optional sign are accepted, then as many ASCII
    digits as follow; the rest of the string is ignored ("12abc" -> 12).
    A "0x"/"0X" prefix switches to hexadecimal ("0x1f" -> 31).
    Returns None when there are no leading digits, so the value never equals
    a stored identifier.
    """
    sign_match = _SIGN.match(value)
    negative = sign_match.group(1) == "-"
    rest = value[sign_match.end():]

    if rest[:2] in ("0x", "0X"):
        digits = _HEX_DIGITS.match(rest, 2)
        base = 16
    else:
        digits = _DEC_DIGITS.match(rest)
        base = 10

    if not digits:
        return None

    number = int(digits.group(0), base)
    return -number if negative else number
