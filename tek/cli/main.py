"""Main entry point for CLI commands."""
import logging
import sys

from . import app
from . import generate  # noqa: F401  registers `makefile`
from . import describe  # noqa: F401  registers `processors` and `claim`

logger = logging.getLogger(__name__)


def main() -> None:  # noqa: D401
    """CLI entrypoint."""
    try:
        app()
    except Exception as e:
        logger.exception(f"Unhandled exception: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
