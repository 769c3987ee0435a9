"""queryhl command line entry point.

Usage:
    queryhl tokenize <file>      Display the token stream
    queryhl highlight <file>     Print the highlighted HTML fragment
    queryhl page <file>          Print a standalone HTML preview page

Pass '-' as <file> to read the query from standard input.
Add -v or --verbose anywhere to enable debug logging.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from queryhl.lexer.lexer import tokenize
from queryhl.render.highlighter import HtmlRenderer

LOG = logging.getLogger("queryhl")

COMMANDS = ("tokenize", "highlight", "page")


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]

    verbose = any(a in ("-v", "--verbose") for a in args)
    args = [a for a in args if a not in ("-v", "--verbose")]
    _configure_logging(verbose)

    if len(args) < 1:
        print(__doc__.strip())
        return 1

    command = args[0]

    if command in ("--help", "-h"):
        print(__doc__.strip())
        return 0

    if command == "--version":
        from queryhl import __version__
        print(f"queryhl {__version__}")
        return 0

    if command not in COMMANDS:
        print(f"Error: unknown command '{command}'")
        print(__doc__.strip())
        return 1

    if len(args) < 2:
        print(f"Error: command '{command}' requires a file argument")
        return 1

    source = _read_source(args[1])
    if source is None:
        return 1

    if command == "tokenize":
        return _cmd_tokenize(source)
    elif command == "highlight":
        return _cmd_highlight(source)
    else:
        return _cmd_page(source, args[1])


def _configure_logging(verbose: bool) -> None:
    if not logging.getLogger().handlers:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    level = logging.DEBUG if verbose else logging.WARNING
    LOG.setLevel(level)
    LOG.debug("verbose mode enabled")


def _read_source(name: str) -> str | None:
    """Read the query from a file, or stdin for '-'. None on failure."""
    if name == "-":
        try:
            return sys.stdin.read()
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: cannot read stdin: {e}")
            return None

    filepath = Path(name)
    if not filepath.exists():
        print(f"Error: file not found: {filepath}")
        return None
    try:
        return filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {filepath}: {e}")
        return None


def _cmd_tokenize(source: str) -> int:
    """Display the token stream."""
    for tok in tokenize(source):
        print(tok)
    return 0


def _cmd_highlight(source: str) -> int:
    """Print the highlighted fragment."""
    print(HtmlRenderer().highlight(source))
    return 0


def _cmd_page(source: str, name: str) -> int:
    """Print a full HTML page around the highlighted fragment."""
    title = "stdin" if name == "-" else Path(name).name
    sys.stdout.write(HtmlRenderer().page(source, title=title))
    return 0


if __name__ == "__main__":
    sys.exit(main())
