import sys
import os
import curses
import logging

from app_state import AppState
from config_paths import LOG_PATH, ensure_config_dirs, load_config
from log_setup import configure_logging

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from orchestrator import Orchestrator

try:
    from _version import __version__
except Exception:
    __version__ = "0.0.0"

logger = logging.getLogger(__name__)

USAGE = "todoterm - terminal todo list\n\nUsage:\n  todoterm\n  todoterm -v\n  todoterm -h\n"


def main():
    args = sys.argv[1:]

    if "-v" in args or "-V" in args:
        print(__version__)
        return

    if "-h" in args:
        print(USAGE)
        return

    if args:
        print(f"Unknown arguments: {' '.join(args)}\n", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(2)

    ensure_config_dirs()
    cfg = load_config()
    configure_logging(LOG_PATH, cfg["LOG_LEVEL"])

    state = AppState.from_titles(cfg["SEED_ITEMS"])

    def curses_main(stdscr):
        Orchestrator(stdscr, state).run()

    try:
        curses.wrapper(curses_main)
    except curses.error as exc:
        logger.exception("Terminal session failed")
        print(f"Error running todoterm: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
