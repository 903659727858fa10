"""Hex color parsing for trip and destination colors."""

import re

DEFAULT_COLOR = "#4A90E2"

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")


def parse_hex(text: str | None) -> tuple[float, float, float] | None:
    """Parse '#RRGGBB' into (red, green, blue) components in [0, 1].

    Leading hex digits are scanned after stripping whitespace and '#';
    returns None when there are none.
    """
    if text is None:
        return None
    sanitized = text.strip().replace("#", "")
    match = _HEX_DIGITS.match(sanitized)
    if not match:
        return None
    rgb = int(match.group(0), 16)
    return (
        ((rgb & 0xFF0000) >> 16) / 255.0,
        ((rgb & 0x00FF00) >> 8) / 255.0,
        (rgb & 0x0000FF) / 255.0,
    )


def to_hex(red: float, green: float, blue: float) -> str:
    return "#%02X%02X%02X" % (int(red * 255), int(green * 255), int(blue * 255))


def resolve_color(text: str | None, default: str = DEFAULT_COLOR) -> str:
    """Normalize a stored color to '#RRGGBB', falling back to default."""
    components = parse_hex(text)
    if components is None:
        return default
    return to_hex(*components)
