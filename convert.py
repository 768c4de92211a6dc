#!/usr/bin/env python3
"""
CLI entry point for converting Google Sheets HTML exports to ``.wsheet``.

Pipeline
--------
1. Every ``.html`` / ``.htm`` file in the input directory is parsed by
   ``TableExtractor`` into a ``Document``.
2. The document is written as compact JSON to the output directory under the
   same stem with the ``.wsheet`` extension, and the source HTML is deleted.
3. ``index.json`` in the output directory is rebuilt from all ``.wsheet``
   files found there.

A file that fails to convert is reported and left in place; the batch goes
on with the next file.

Usage
-----
    # Defaults: convert/*.html → data/*.wsheet
    python convert.py

    # Explicit directories
    python convert.py --input-dir exports --output-dir public/data
"""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from pathlib import Path

from base_parser import BaseParser
from config import INPUT_DIR, OUTPUT_DIR, ConvertConfig
from models import Document
from parser_html import TableExtractor, TableStructureError

logger = logging.getLogger(__name__)


# ── file helpers ──────────────────────────────────────────────────────────


def list_source_files(input_dir: Path, extensions: tuple[str, ...]) -> list[str]:
    """Names of the files in *input_dir* with one of *extensions*.

    The suffix check is case-insensitive; order is whatever the file system
    returns.
    """
    wanted = {ext.lower() for ext in extensions}
    return [
        p.name
        for p in input_dir.iterdir()
        if p.is_file() and p.suffix.lower() in wanted
    ]


def target_name(
    file_name: str,
    source_extensions: tuple[str, ...],
    target_extension: str,
) -> str:
    """Replace the source extension of *file_name* with *target_extension*."""
    pattern = "|".join(re.escape(ext) for ext in source_extensions)
    return re.sub(rf"(?:{pattern})$", target_extension, file_name, flags=re.IGNORECASE)


def write_document(document: Document, path: Path) -> None:
    """Write *document* as compact UTF-8 JSON."""
    path.write_text(
        json.dumps(document.to_dict(), ensure_ascii=False, separators=(",", ":")),
        encoding="utf-8",
    )


def convert_file(
    src: Path,
    out: Path,
    parser: BaseParser,
) -> Document:
    """Convert *src* into *out*, then delete *src*.

    Nothing is written or deleted when parsing fails.
    """
    document = parser.parse_text(src.read_text(encoding="utf-8"))
    write_document(document, out)
    src.unlink()
    return document


def rebuild_index(output_dir: Path, target_extension: str, index_name: str) -> list[str]:
    """Write a sorted JSON list of every *target_extension* file in *output_dir*.

    Sorting ignores case.  Returns the listed names.
    """
    ext = target_extension.lower()
    names = sorted(
        (p.name for p in output_dir.iterdir() if p.is_file() and p.suffix.lower() == ext),
        key=str.casefold,
    )
    (output_dir / index_name).write_text(
        json.dumps(names, ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    return names


# ── batch ─────────────────────────────────────────────────────────────────


def run(config: ConvertConfig, parser: BaseParser | None = None) -> tuple[int, int]:
    """Convert every source file of *config*.

    Returns ``(converted, failed)``.
    """
    parser = parser or TableExtractor()

    files = list_source_files(config.input_dir, config.source_extensions)
    if not files:
        print(f"No HTML files found in {config.input_dir}")
        return 0, 0

    config.output_dir.mkdir(parents=True, exist_ok=True)

    ok = fail = 0
    for file_name in files:
        src = config.input_dir / file_name
        out_name = target_name(file_name, config.source_extensions, config.target_extension)
        out = config.output_dir / out_name
        print(f"Converting: {file_name} → {config.output_dir.name}/{out_name} … ", end="")
        try:
            convert_file(src, out, parser)
        except (TableStructureError, OSError, UnicodeDecodeError) as exc:
            print(f"FAILED: {exc}")
            logger.debug("Conversion of %s failed", src, exc_info=True)
            fail += 1
            continue
        print("ok")
        ok += 1

    print(f"\nDone: {ok} converted, {fail} failed.")

    listed = rebuild_index(config.output_dir, config.target_extension, config.index_name)
    print(f"{config.index_name} updated — {len(listed)} files listed.")

    return ok, fail


def main() -> None:
    ap = argparse.ArgumentParser(
        description="Convert Google Sheets HTML exports to .wsheet documents "
                    "and rebuild the output index."
    )
    ap.add_argument(
        "--input-dir",
        type=str,
        default=str(INPUT_DIR),
        help=f"Directory scanned for .html/.htm exports (default: {INPUT_DIR}).",
    )
    ap.add_argument(
        "--output-dir",
        type=str,
        default=str(OUTPUT_DIR),
        help=f"Directory receiving .wsheet files and the index (default: {OUTPUT_DIR}).",
    )

    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="  %(message)s")

    input_dir = Path(args.input_dir)
    if not input_dir.is_dir():
        print(f"Error: input directory not found: {input_dir}", file=sys.stderr)
        sys.exit(1)

    run(ConvertConfig(input_dir=input_dir, output_dir=Path(args.output_dir)))


if __name__ == "__main__":
    main()
