import argparse
import curses
import logging
import os
import sys

import config_paths
from _version import __version__
from app_state import TableState
from default_df_initializer import DefaultDfInitializer
from file_type_handler import FileTypeHandler, MissingEngineError, UnsupportedFileTypeError
from pagination import PageAction

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="tablepager",
        description="tablepager - page through tables in the terminal",
        add_help=False,
    )
    parser.add_argument("path", nargs="?")
    parser.add_argument("-m", "--mode", choices=sorted(a.value for a in PageAction))
    parser.add_argument("-s", "--page-size", type=int)
    parser.add_argument(
        "-c",
        "--page-count",
        type=int,
        help="custom mode: pages reported by the source; 0 for unknown",
    )
    parser.add_argument("-d", "--debug", action="store_true")
    parser.add_argument("-v", "-V", "--version", action="store_true")
    parser.add_argument("-h", "--help", action="store_true")
    return parser


def resolve_settings(args, cfg):
    """Merge CLI flags over config.json values."""
    page_size = cfg["PAGE_SIZE"] if args.page_size is None else args.page_size
    if page_size <= 0:
        raise ValueError("page size must be > 0")
    page_count = cfg["PAGE_COUNT"] if args.page_count is None else args.page_count
    if page_count is not None and page_count < 0:
        # 0 means unknown
        raise ValueError("page count must be >= 0")
    return {
        "page_action": PageAction(args.mode or cfg["PAGE_ACTION"]),
        "page_size": page_size,
        "page_count": page_count or None,
        "known_count": args.page_count != 0,
    }


def build_state(df, path, settings):
    if settings["page_action"] is PageAction.CUSTOM:
        state = TableState.served(
            df,
            settings["page_size"],
            known_count=settings["known_count"],
            file_path=path,
        )
        if settings["page_count"]:
            state.page_count = settings["page_count"]
        return state
    return TableState(
        df,
        file_path=path,
        page_action=settings["page_action"],
        page_size=settings["page_size"],
    )


def setup_logging(debug: bool):
    if not debug:
        return
    config_paths.ensure_config_dirs()
    logging.basicConfig(
        filename=config_paths.LOG_PATH,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if args.version:
        print(__version__)
        return 0

    if args.help:
        print(
            "tablepager - terminal table pager\n\nUsage:\n"
            "  tablepager [path] [-m none|native|custom] [-s SIZE] [-c COUNT] [-d]\n"
            "  tablepager -v\n\n"
            "Keys: n/p next/previous page, g/G first/last page, <N>G go to page N,\n"
            "      h/j/k/l move the active cell, Esc clear selection, q quit\n"
        )
        return 0

    setup_logging(args.debug)

    try:
        settings = resolve_settings(args, config_paths.load_config())
        if args.path:
            df = FileTypeHandler(args.path).load()
        else:
            df = DefaultDfInitializer().create()
    except (UnsupportedFileTypeError, MissingEngineError, ValueError) as exc:
        print(f"Load failed: {exc}", file=sys.stderr)
        return 1

    state = build_state(df, args.path, settings)

    from orchestrator import Orchestrator

    curses.wrapper(lambda stdscr: Orchestrator(stdscr, state).run())
    return 0


if __name__ == "__main__":
    sys.exit(main())
