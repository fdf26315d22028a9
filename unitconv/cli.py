#!/usr/bin/env python3
"""
unitconv CLI: length, weight and temperature conversions.

Every command has a primary name and standard aliases:

    COMMAND         ALIASES         WHAT IT DOES
    -------         -------         ----------------------------------
    repl            start, run      Interactive conversion loop (default)
    convert         calc, c         Convert one line given on the command line
    units           list, ls        List every recognized unit and alias
    console         tui, jack       Launch the Textual console
    banner          tone            Print the banner
"""

import argparse
import logging
import sys
from pathlib import Path

from unitconv import __version__

logger = logging.getLogger(__name__)

EXIT_WORD = "exit"

BANNER = r"""
    ╔══════════════════════════════════════════════╗
    ║                                              ║
    ║   █  █ █▄ █ █ ▀█▀   ▄▀▀ ▄▀▄ █▄ █ █ █         ║
    ║   ▀▄▄▀ █ ▀█ █  █    ▀▄▄ ▀▄▀ █ ▀█ ▀▄▀         ║
    ║                                              ║
    ║   length · weight · temperature   v""" + __version__ + r"""     ║
    ║                                              ║
    ╚══════════════════════════════════════════════╝
"""


def setup_logging(cfg: dict, verbose: bool = False):
    log_cfg = cfg.get("logging", {})
    level_name = "DEBUG" if verbose else str(log_cfg.get("level", "WARNING"))
    level = getattr(logging, level_name.upper(), logging.WARNING)
    log_file = log_cfg.get("file")

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_repl(args):
    """Read a line, convert it, print the result, until 'exit'."""
    from unitconv.config import get_config
    from unitconv.converter import UnitConverter

    cfg = get_config()
    prompt = cfg["repl"]["prompt"]
    converter = UnitConverter()

    try:
        while True:
            print(prompt)
            try:
                line = input().strip()
            except EOFError:
                break
            if line.lower() == EXIT_WORD:
                break
            print(converter.run(line))
    except KeyboardInterrupt:
        print()
    logger.debug("REPL finished")


def cmd_convert(args):
    """Convert a single request given as arguments."""
    from unitconv.converter import UnitConverter

    line = " ".join(args.query)
    print(UnitConverter().run(line))


def cmd_units(args):
    """List the catalog grouped by kind."""
    from unitconv.catalog import CATALOG, UnitKind

    kinds = [UnitKind(args.kind)] if args.kind else list(UnitKind)
    for kind in kinds:
        units = CATALOG.by_kind(kind)
        print(f"  {kind.label}")
        for i, unit in enumerate(units):
            prefix = "└─" if i == len(units) - 1 else "├─"
            print(f"  {prefix} {unit.key.lower():<11} {', '.join(unit.names)}")
        print()


def cmd_console(args):
    """Launch the unitconv Textual console."""
    from unitconv.tui.app import ConverterApp
    app = ConverterApp()
    app.run()


def cmd_banner(args):
    """Print the banner."""
    print(BANNER)


# ---------------------------------------------------------------------------
# Parser with aliases
# ---------------------------------------------------------------------------

def _add_command(subparsers, names, help_text, func, setup_fn=None):
    """Register a command under multiple names."""
    p = subparsers.add_parser(names[0], help=help_text, aliases=names[1:])
    p.set_defaults(func=func)
    if setup_fn:
        setup_fn(p)
    return p


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unitconv",
        description="unitconv: length, weight and temperature conversions.",
        epilog=(
            "Example: unitconv convert 5 km to miles\n"
            "Run 'unitconv <command> --help' for command-specific options."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V", action="version",
        version=f"unitconv {__version__}",
    )
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", metavar="<command>")

    _add_command(sub, ["repl", "start", "run"],
                 "Interactive conversion loop", cmd_repl)

    def setup_convert(p):
        p.add_argument("query", nargs="+", help="e.g. 5 km to miles")

    _add_command(sub, ["convert", "calc", "c"],
                 "Convert one request and exit", cmd_convert, setup_convert)

    def setup_units(p):
        p.add_argument("--kind", "-k", choices=["length", "weight", "temperature"],
                       default=None, help="Only list one kind")

    _add_command(sub, ["units", "list", "ls"],
                 "List recognized units and aliases", cmd_units, setup_units)

    _add_command(sub, ["console", "tui", "jack"],
                 "Launch the interactive Textual console", cmd_console)

    _add_command(sub, ["banner", "tone"],
                 "Print the unitconv banner", cmd_banner)

    return parser


def main(argv=None):
    from unitconv.config import load_config

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"  ✗  Bad config: {e}", file=sys.stderr)
        return 2
    setup_logging(cfg, verbose=args.verbose)

    if not args.command:
        cmd_repl(args)
        return 0

    args.func(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
