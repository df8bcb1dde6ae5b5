"""Font descriptions for the ``font`` command.

Follows the Pango font description layout: comma-separated families,
then five style slots, size, and OpenType variations.  Every slot is
emitted, empty or not, so a bare family renders with trailing blanks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from swaycmd.domain.values import format_number, or_empty


class FontStyle(StrEnum):
    NORMAL = "Normal"
    ROMAN = "Roman"
    OBLIQUE = "Oblique"
    ITALIC = "Italic"


class FontVariant(StrEnum):
    SMALL_CAPS = "Small-Caps"
    ALL_SMALL_CAPS = "All-Small-Caps"
    PETITE_CAPS = "Petite-Caps"
    ALL_PETITE_CAPS = "All-Petite-Caps"
    UNICASE = "Unicase"
    TITLE_CAPS = "Title-Caps"


class FontWeight(StrEnum):
    THIN = "Thin"
    ULTRA_LIGHT = "Ultra-Light"
    EXTRA_LIGHT = "Extra-Light"
    LIGHT = "Light"
    SEMI_LIGHT = "Semi-Light"
    DEMI_LIGHT = "Demi-Light"
    BOOK = "Book"
    REGULAR = "Regular"
    MEDIUM = "Medium"
    SEMI_BOLD = "Semi-Bold"
    DEMI_BOLD = "Demi-Bold"
    BOLD = "Bold"
    ULTRA_BOLD = "Ultra-Bold"
    EXTRA_BOLD = "Extra-Bold"
    HEAVY = "Heavy"
    BLACK = "Black"
    ULTRA_BLACK = "Ultra-Black"
    EXTRA_BLACK = "Extra-Black"


class FontStretch(StrEnum):
    ULTRA_CONDENSED = "Ultra-Condensed"
    EXTRA_CONDENSED = "Extra-Condensed"
    CONDENSED = "Condensed"
    SEMI_CONDENSED = "Semi-Condensed"
    SEMI_EXPANDED = "Semi-Expanded"
    EXPANDED = "Expanded"
    EXTRA_EXPANDED = "Extra-Expanded"
    ULTRA_EXPANDED = "Ultra-Expanded"


class FontGravity(StrEnum):
    NOT_ROTATED = "Not-Rotated"
    SOUTH = "South"
    UPSIDE_DOWN = "Upside-Down"
    NORTH = "North"
    ROTATED_LEFT = "Rotated-Left"
    EAST = "East"
    ROTATED_RIGHT = "Rotated-Right"
    WEST = "West"


@dataclass(frozen=True)
class FontStyleOptions:
    style: FontStyle | None = None
    variant: FontVariant | None = None
    weight: FontWeight | None = None
    stretch: FontStretch | None = None
    gravity: FontGravity | None = None


@dataclass(frozen=True)
class FontSize:
    """Size in points, or in device pixels with ``pixels=True``."""

    value: float
    pixels: bool = False


@dataclass(frozen=True)
class FontDescription:
    families: tuple[str, ...]
    options: FontStyleOptions = field(default_factory=FontStyleOptions)
    size: FontSize | None = None
    # (axis, value) pairs, e.g. (("wght", "500"),)
    variations: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class Font:
    """A font for title bars; ``pango`` enables Pango markup in titles."""

    description: FontDescription
    pango: bool = False


def render_font_size(size: FontSize) -> str:
    text = format_number(size.value)
    return f"{text}px" if size.pixels else text


def render_font_options(options: FontStyleOptions) -> str:
    return " ".join(
        or_empty(slot)
        for slot in (
            options.style,
            options.variant,
            options.weight,
            options.stretch,
            options.gravity,
        )
    )


def render_font_description(description: FontDescription) -> str:
    families = ",".join(description.families)
    size = render_font_size(description.size) if description.size else ""
    variations = ",".join(f"`{axis}`={value}" for axis, value in description.variations)
    return f"{families} {render_font_options(description.options)} {size} {variations}"


def render_font(font: Font) -> str:
    prefix = "pango:" if font.pango else ""
    return prefix + render_font_description(font.description)
