"""
Value normalization for CSS declarations.

Canonicalizes raw CSS value strings before they are compared against token
scales. Every function is total: empty input yields an empty/neutral value.

Key behaviors:
- Lower-case unless the value is a function call, quoted, or a proper noun
- Unit predicates anchor on the whole string
- Box shorthand expands to [top, right, bottom, left]
- Hex colours expand to 6/8 digits, functional notation loses whitespace
"""

from __future__ import annotations

import re

DEFAULT_BASE_FONT_PX = 16.0

_NUMBER = r"-?\d*\.?\d+"
_PX_RE = re.compile(rf"^{_NUMBER}px$")
_REM_RE = re.compile(rf"^{_NUMBER}rem$")
_EM_RE = re.compile(rf"^{_NUMBER}em$")
_PCT_RE = re.compile(rf"^{_NUMBER}%$")
_NUMBER_RE = re.compile(rf"^{_NUMBER}$")
_PROPER_NOUN_RE = re.compile(r"^[A-Z][a-z]")

_WHITESPACE_RE = re.compile(r"\s+")
_HEX_SHORT_RE = re.compile(r"^#[0-9a-f]{3,4}$")
_COLOR_FUNCTION_RE = re.compile(r"^(rgb|rgba|hsl|hsla|hwb|lab|lch|oklab|oklch|color)\s*\(")


def normalize_value(value: str | None) -> str:
    """
    Trim and lower-case a CSS value.

    Case is preserved for function/variable calls, quoted strings and values
    that look like proper nouns ("Inter", "Helvetica Neue").
    """
    if not value:
        return ""

    trimmed = value.strip()
    if (
        "(" in trimmed
        or '"' in trimmed
        or "'" in trimmed
        or _PROPER_NOUN_RE.match(trimmed)
    ):
        return trimmed
    return trimmed.lower()


def is_px(value: str | None) -> bool:
    return bool(_PX_RE.match(normalize_value(value)))


def is_rem(value: str | None) -> bool:
    return bool(_REM_RE.match(normalize_value(value)))


def is_em(value: str | None) -> bool:
    return bool(_EM_RE.match(normalize_value(value)))


def is_pct(value: str | None) -> bool:
    return bool(_PCT_RE.match(normalize_value(value)))


def is_number(value: str | None) -> bool:
    return bool(_NUMBER_RE.match(normalize_value(value)))


def to_px(value: str | None, base_font_px: float = DEFAULT_BASE_FONT_PX) -> float | None:
    """
    Convert px/rem/em/bare-number to pixels.

    Returns None for percentages, keywords and any other relative unit.
    """
    normalized = normalize_value(value)
    if not normalized:
        return None
    if _PX_RE.match(normalized):
        return float(normalized[:-2])
    if _REM_RE.match(normalized):
        return float(normalized[:-3]) * base_font_px
    if _EM_RE.match(normalized):
        return float(normalized[:-2]) * base_font_px
    if _NUMBER_RE.match(normalized):
        return float(normalized)
    return None


def to_number(value: str | None) -> float | None:
    """Bare-number reading of a value (line-height comparisons)."""
    normalized = normalize_value(value)
    if not _NUMBER_RE.match(normalized):
        return None
    return float(normalized)


def parse_box_shorthand(value: str | None) -> list[str]:
    """
    Expand a 1-4 value box shorthand to [top, right, bottom, left].

    More than four values keeps the first four.
    """
    if not value:
        return []

    parts = normalize_value(value).split()
    if not parts:
        return []
    if len(parts) == 1:
        return [parts[0]] * 4
    if len(parts) == 2:
        return [parts[0], parts[1], parts[0], parts[1]]
    if len(parts) == 3:
        return [parts[0], parts[1], parts[2], parts[1]]
    return parts[:4]


def split_values(value: str | None) -> list[str]:
    """Split a multi-value declaration on whitespace outside parentheses."""
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    for char in normalize_value(value):
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)
        if char.isspace() and depth == 0:
            if current:
                parts.append("".join(current))
                current = []
            continue
        current.append(char)
    if current:
        parts.append("".join(current))
    return parts

def normalize_color(value: str | None) -> str:
    """
    Canonical colour form.

    #fff -> #ffffff, #ffff -> #ffffffff, "rgb(0, 0, 0)" -> "rgb(0,0,0)".
    Named colours are lower-cased and otherwise left alone.
    """
    if not value:
        return ""

    trimmed = value.strip().lower()
    if _HEX_SHORT_RE.match(trimmed):
        return "#" + "".join(char * 2 for char in trimmed[1:])
    if _COLOR_FUNCTION_RE.match(trimmed):
        return _WHITESPACE_RE.sub("", trimmed)
    return trimmed


def to_arbitrary(prefix: str, value: str | None) -> str:
    """Render `prefix-[value]`; whitespace inside the value becomes '_'."""
    normalized_prefix = prefix.strip()
    normalized_value = normalize_value(value)
    if not normalized_prefix or not normalized_value:
        return ""
    escaped = _WHITESPACE_RE.sub("_", normalized_value)
    return f"{normalized_prefix}-[{escaped}]"


def is_arbitrary(cls_name: str) -> bool:
    return "[" in cls_name and "]" in cls_name
