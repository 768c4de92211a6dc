"""
CSS class resolution for Google Sheets HTML exports.

Sheets writes one rule per distinct cell style into the embedded ``<style>``
blocks, scoped under the table class::

    .waffle .s3{border-bottom:1px SOLID #000000;background-color:#ffffff;
                font-family:'docs-Roboto',Arial;font-size:10pt;...}

Only a fixed set of properties matters (see ``parse_declarations``); the rest
of the style sheet is discarded.
"""

from __future__ import annotations

import logging
import math
import re

from bs4 import BeautifulSoup

from config import (
    GENERATED_FONT_PREFIX,
    PT_TO_PX,
    SHEET_NAMESPACE_CLASS,
    TextAlign,
)
from models import StyleRecord

logger = logging.getLogger(__name__)


# ── regex patterns ────────────────────────────────────────────────────────

# ".waffle .s1 { ... }" (single class token, flat declaration list)
RE_CLASS_RULE = re.compile(
    r"\." + re.escape(SHEET_NAMESPACE_CLASS) + r"\s+\.(\w+)\s*\{([^}]*)\}"
)

RE_SIZE = re.compile(r"^(\d+(?:\.\d*)?|\.\d+)(pt|px)$", re.IGNORECASE)

RE_HEX_COLOR = re.compile(r"^#(?:[0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)
RE_RGB_COLOR = re.compile(r"^rgb\((\d+),\s*(\d+),\s*(\d+)\)$", re.IGNORECASE)

BORDER_SIDES = {
    "border-top": "border_top",
    "border-bottom": "border_bottom",
    "border-left": "border_left",
    "border-right": "border_right",
}


# ── value normalization ───────────────────────────────────────────────────


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def parse_size(value: str) -> int | None:
    """Convert a ``pt`` / ``px`` length to whole pixels.

    >>> parse_size("12pt")
    16
    >>> parse_size("16px")
    16
    >>> parse_size("12em") is None
    True
    """
    m = RE_SIZE.match(value.strip())
    if not m:
        return None
    number = float(m.group(1))
    if m.group(2).lower() == "pt":
        return _round_half_up(number * PT_TO_PX)
    return _round_half_up(number)


def normalize_color(value: str) -> str | None:
    """Normalize ``#RGB`` / ``#RRGGBB`` / ``rgb(r, g, b)`` to lower-case hex.

    Returns ``None`` for anything else (named colors, ``rgba()``, …).
    """
    value = value.strip()
    if RE_HEX_COLOR.match(value):
        return value.lower()
    m = RE_RGB_COLOR.match(value)
    if m:
        return "#" + "".join(format(int(c), "02x") for c in m.groups())
    return None


def pick_font_family(value: str) -> str:
    """Return the first family that is not a generated ``docs-`` alias.

    Falls back to the first listed family when every entry is an alias.
    """
    families = [re.sub(r"[\"']", "", f).strip() for f in value.split(",")]
    for family in families:
        if not family.lower().startswith(GENERATED_FONT_PREFIX):
            return family
    return families[0]


# ── declarations ──────────────────────────────────────────────────────────


def parse_declarations(decls: str) -> StyleRecord:
    """Parse a ``key: value; ...`` declaration list into a ``StyleRecord``.

    Malformed declarations and unsupported properties are skipped.
    """
    style = StyleRecord()

    for raw in decls.split(";"):
        key, sep, val = raw.partition(":")
        if not sep:
            continue
        key = key.strip().lower()
        val = val.strip()
        vl = val.lower()

        if key == "font-weight":
            if vl == "bold":
                style.bold = True
        elif key == "font-style":
            if vl == "italic":
                style.italic = True
        elif key == "color":
            color = normalize_color(val)
            if color:
                style.color = color
        elif key == "background-color":
            color = normalize_color(val)
            if color:
                style.bg_color = color
        elif key == "text-align":
            if vl in {a.value for a in TextAlign}:
                style.align = TextAlign(vl)
        elif key == "font-size":
            size = parse_size(val)
            if size:
                style.font_size = size
        elif key == "font-family":
            style.font_family = pick_font_family(val)
        elif key in BORDER_SIDES:
            setattr(style, BORDER_SIDES[key], "none" not in vl)

    return style


# ── StyleSheetResolver ────────────────────────────────────────────────────


class StyleSheetResolver:
    """Builds the class → ``StyleRecord`` map of one document."""

    def resolve(self, source: str | BeautifulSoup) -> dict[str, StyleRecord]:
        """Collect every ``.waffle .<class>`` rule from all ``<style>`` blocks.

        Blocks are read in document order; a later rule for the same class
        replaces the earlier one.
        """
        soup = source if isinstance(source, BeautifulSoup) else BeautifulSoup(source, "lxml")

        style_map: dict[str, StyleRecord] = {}
        for block in soup.find_all("style"):
            style_map.update(self.resolve_block(block.get_text()))
        return style_map

    @staticmethod
    def resolve_block(css: str) -> dict[str, StyleRecord]:
        """Parse the rules of a single style-sheet text."""
        rules: dict[str, StyleRecord] = {}
        for m in RE_CLASS_RULE.finditer(css):
            class_name, decls = m.group(1), m.group(2)
            if class_name in rules:
                logger.debug("Class %r redefined, keeping the later rule", class_name)
            rules[class_name] = parse_declarations(decls)
        return rules
