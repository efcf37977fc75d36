import argparse
import dataclasses
import json
import logging
from enum import Enum
from typing import Any, List, Optional

from rich import print, print_json
from rich.markup import escape

from business_logic.edm.errors import FormatError
from business_logic.edm.header_parser import EdmHeaderParser
from log import setup_logging

logger = logging.getLogger("edm")


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Cannot serialize {type(value).__name__}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="edm-header", description="Decode the header of a JPI EDM file")
    p.add_argument("path", help="EDM file, e.g. FILE.JPI")
    p.add_argument("--strict", action="store_true", help="Fail on the first bad header line")
    p.add_argument("--json", action="store_true", help="Print the result as JSON")
    p.add_argument(
        "--log-level",
        default=None,
        help="CRITICAL|ERROR|WARNING|INFO|DEBUG (or env EDM_LOG_LEVEL)",
    )
    args = p.parse_args(argv)

    setup_logging(args.log_level)

    try:
        result = EdmHeaderParser(args.path, strict=args.strict).decode()
    except FormatError as e:
        logger.error("Could not decode header of %s: %s", args.path, e)
        return 1
    except OSError as e:
        logger.error("Could not read %s: %s", args.path, e)
        return 2

    if args.json:
        print_json(json.dumps(dataclasses.asdict(result), default=_jsonable))
    else:
        print(result.record)
        for w in result.warnings:
            print(f"[yellow]line {w.line_no} ({w.tag}): {w.code}: {escape(w.message)}[/yellow]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
