from __future__ import annotations

import argparse
import sys
from pathlib import Path

from app.core.config import settings
from app.core.logging import setup_logging
from app.modules.flashcards.errors import FlashcardImportError
from app.modules.flashcards.main import SUPPORTED_FORMATS, FlashcardImporter


def _read_text(path: Path) -> str:
    if not path.is_file():
        raise SystemExit(f"File not found: {path}")
    # utf-8-sig drops a leading BOM from JSON files; CSV handles its own
    return path.read_text(encoding="utf-8-sig")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="flashcards-import", description="Flashcard import CLI"
    )
    parser.add_argument("--log-level", help="Override LOG_LEVEL for this run")
    sub = parser.add_subparsers(dest="cmd", required=True)

    imp = sub.add_parser("import", help="Import a JSON or CSV flashcard file")
    imp.add_argument("path", help="Path to the file to import")
    imp.add_argument(
        "--format",
        "-f",
        choices=SUPPORTED_FORMATS,
        help="Input format (default: from the file extension)",
    )

    args = parser.parse_args(argv)
    setup_logging(level=args.log_level)

    if args.cmd == "import":
        path = Path(args.path)
        text = _read_text(path)
        if len(text) > settings.imports.max_text_chars:
            print(
                f"Input too large: {len(text)} characters "
                f"(limit {settings.imports.max_text_chars})",
                file=sys.stderr,
            )
            return 1
        try:
            collection = FlashcardImporter().import_text(text, path.name, args.format)
        except FlashcardImportError as exc:
            print(str(exc), file=sys.stderr)
            return 1
        print(collection.model_dump_json(by_alias=True, indent=2))
        return 0

    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
