"""CLI helper resolving a navigation expression against a text file."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from ..core.positions import TextPosition
from ..editor.snapshot import CursorSnapshot, DocumentSnapshot
from ..interpreter.interpret import interpret
from ..services.feedback import USAGE_HINT, feedback_for
from ..services.settings import ActiveRelativeTo, ColumnDefault, SettingsStore
from ..utils import file_io
from ..utils.logging import level_for, setup_logging

LOGGER = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="select-to-line",
        description="Resolve a go-to/selection expression against a document.",
        epilog=USAGE_HINT,
    )
    parser.add_argument("expression", help="Expression to resolve, e.g. '5,10..20,30' or '-3.'.")
    parser.add_argument(
        "--file",
        type=Path,
        help="Document to resolve against. Reads stdin when omitted.",
    )
    parser.add_argument(
        "--cursor",
        type=_parse_cursor,
        default=TextPosition(0, 0),
        metavar="LINE,COLUMN",
        help="1-based primary cursor position (default: 1,1).",
    )
    parser.add_argument(
        "--column-default",
        choices=[item.value for item in ColumnDefault],
        help="Column used when the expression omits one.",
    )
    parser.add_argument(
        "--active-relative-to",
        choices=[item.value for item in ActiveRelativeTo],
        help="Whether relative range ends count from the start position or the cursor.",
    )
    parser.add_argument("--settings", type=Path, help="Settings file overriding the default location.")
    parser.add_argument("--json", action="store_true", help="Print the resolved target as JSON.")
    parser.add_argument("--log-dir", type=Path, help="Directory for the rotating log file.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug details.")
    args = parser.parse_args(argv)

    settings = SettingsStore(args.settings).load(
        overrides={
            "column_defaults_to": args.column_default,
            "active_relative_to": args.active_relative_to,
        }
    )
    setup_logging(
        level_for(settings.debug_logging, verbose=args.verbose),
        log_dir=args.log_dir,
        console=False,
        force=True,
    )

    try:
        text = _load_text(args.file)
    except OSError as exc:
        parser.error(f"cannot read {args.file}: {exc.strerror or exc}")
    document = DocumentSnapshot.from_text(text)
    cursor = CursorSnapshot.caret(args.cursor)
    target = interpret(args.expression, document, cursor, settings)
    feedback = feedback_for(target, document, cursor)
    if target is None:
        LOGGER.info("Rejected expression %r", args.expression)
        print(feedback.message, file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(target.to_dict(), sort_keys=True))
    else:
        print(feedback.message)
    return 0


def _parse_cursor(value: str) -> TextPosition:
    parts = value.replace(":", ",").split(",")
    try:
        numbers = [int(part) for part in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid cursor position: {value!r}") from None
    if len(numbers) != 2 or min(numbers) < 1:
        raise argparse.ArgumentTypeError(f"cursor must be LINE,COLUMN with 1-based numbers: {value!r}")
    return TextPosition(numbers[0] - 1, numbers[1] - 1)


def _load_text(path: Path | None) -> str:
    if path:
        return file_io.read_text(path)
    return sys.stdin.read()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
