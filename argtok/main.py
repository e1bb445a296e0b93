import logging
import os
import sys
from typing import Optional, Sequence

from argtok.errors import ArgumentError
from argtok.pipeline import run

LOG_LEVEL_ENV = "ARGTOK_LOG_LEVEL"

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[Sequence[str]] = None) -> int:

    configure_logging()

    if argv is None:
        argv = sys.argv

    try:
        run(argv)
    except ArgumentError as e:
        logger.debug("rejected argv %r", list(argv))
        print(f"argtok: error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
