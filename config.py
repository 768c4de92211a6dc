"""
Configuration for the sheet HTML → ``.wsheet`` converter.

Contains the CSS conventions of Google Sheets HTML exports, the formatting
defaults that are not worth persisting, and the batch-driver directory and
extension settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class TextAlign(str, Enum):
    """Horizontal alignments kept from ``text-align`` declarations."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# ---------------------------------------------------------------------------
# Sheets export conventions
# ---------------------------------------------------------------------------

# Every cell rule in an export is scoped as ``.waffle .s12 { ... }``
SHEET_NAMESPACE_CLASS = "waffle"

# Web-font aliases generated by Docs (``docs-Roboto``) are not real families
GENERATED_FONT_PREFIX = "docs-"

# Sheets writes black-on-white explicitly for nearly every cell
DEFAULT_TEXT_COLOR = "#000000"
DEFAULT_BG_COLOR = "#ffffff"

PT_TO_PX = 1.333

DOCUMENT_VERSION = 1

# ---------------------------------------------------------------------------
# Batch driver
# ---------------------------------------------------------------------------

SOURCE_EXTENSIONS: tuple[str, ...] = (".html", ".htm")
TARGET_EXTENSION = ".wsheet"
INDEX_FILE_NAME = "index.json"

INPUT_DIR = Path("convert")
OUTPUT_DIR = Path("data")


@dataclass(frozen=True)
class ConvertConfig:
    """Directories and extensions for one batch run."""

    input_dir: Path = INPUT_DIR
    output_dir: Path = OUTPUT_DIR
    source_extensions: tuple[str, ...] = SOURCE_EXTENSIONS
    target_extension: str = TARGET_EXTENSION
    index_name: str = INDEX_FILE_NAME

    @property
    def index_path(self) -> Path:
        return self.output_dir / self.index_name
