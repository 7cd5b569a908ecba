"""
Enricher Module Entry Point

Allows execution via: python -m apps.enricher [EVENT_JSON]

Runs the Firehose handler on a saved transformation event (file path or
stdin) and prints the response JSON to stdout. Logs go to stderr.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import orjson
from pydantic import ValidationError

from apps.enricher.handler import handler
from utils.config import settings
from utils.logging import setup_logging
from utils.timezones import ConfigurationError

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for local transformation runs."""
    args = list(sys.argv[1:] if argv is None else argv)

    setup_logging(level=settings.LOG_LEVEL, format_type="text", stream=sys.stderr)

    try:
        if args and args[0] != "-":
            raw = Path(args[0]).read_bytes()
        else:
            raw = sys.stdin.buffer.read()
        event = orjson.loads(raw)
        response = handler(event, None)
    except (OSError, orjson.JSONDecodeError, ValidationError, ConfigurationError) as e:
        logger.error("Could not transform event: %s", str(e).split("\n")[0])
        return 1

    sys.stdout.write(orjson.dumps(response, option=orjson.OPT_INDENT_2).decode("utf-8"))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
