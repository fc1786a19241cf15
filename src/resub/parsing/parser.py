# resub/parsing/parser.py
from __future__ import annotations

import argparse

from resub.constants import STDIN_SENTINEL, UNBOUNDED_DEPTH


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {raw!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - PATTERN uses Python `re` syntax; REPLACEMENT uses `$1`, `${name}`
          and `$$` references.
        - Exit status is non-zero only for invalid arguments, patterns or globs.
    """
    from resub import __version__

    p = argparse.ArgumentParser(
        prog="resub",
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [OPTIONS] PATTERN REPLACEMENT PATH",
        add_help=False,
        description=(
            "resub – regex search & replace over a directory tree or stdin\n"
            f"Files are rewritten in place unless -p is given; PATH “{STDIN_SENTINEL}” "
            "reads stdin and writes stdout."
        ),
    )

    p.add_argument("pattern", metavar="PATTERN", help="Regular expression (Python `re` syntax).")
    p.add_argument(
        "replacement",
        metavar="REPLACEMENT",
        help=(
            "Replacement template. `$1` / `${1}` insert numbered groups, "
            "`$name` / `${name}` named groups, `$$` a literal dollar."
        ),
    )
    p.add_argument(
        "path",
        metavar="PATH",
        help=(
            "Root directory, a single file, or “-” for stdin → stdout "
            "(glob, level and hidden options are ignored in that mode)."
        ),
    )

    g_sel = p.add_argument_group("Selection")
    g_out = p.add_argument_group("Output")
    g_misc = p.add_argument_group("Miscellaneous")

    # -----------------------
    # Selection
    # -----------------------
    g_sel.add_argument(
        "-g",
        "--glob",
        metavar="PATTERN",
        dest="glob",
        default=None,
        help=(
            "Glob the full path of a file must match to be edited "
            "(e.g. '*.txt'; `*` also crosses directory separators;\n"
            "a '**/' component may also match no directory). Default: every file."
        ),
    )
    g_sel.add_argument(
        "-l",
        "--level",
        metavar="N",
        type=int,
        dest="level",
        default=UNBOUNDED_DEPTH,
        help=(
            "Max depth in the directory tree; 0 = only the direct children of PATH. "
            "Negative values mean unbounded (default: %(default)s)."
        ),
    )
    g_sel.add_argument(
        "-a",
        "--all",
        action="store_true",
        dest="include_hidden",
        help="Include hidden files and directories (names starting with a dot).",
    )

    # -----------------------
    # Output
    # -----------------------
    g_out.add_argument(
        "-p",
        "--print",
        action="store_true",
        dest="to_stdout",
        help="Print each rewritten file to stdout instead of overwriting it.",
    )
    g_out.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Explain what is being done: report modified files and read errors.",
    )
    g_out.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit diagnostics in JSON format instead of plain text.",
    )

    # -----------------------
    # Miscellaneous
    # -----------------------
    g_misc.add_argument(
        "-j",
        "--jobs",
        metavar="N",
        type=_positive_int,
        dest="jobs",
        default=None,
        help="Number of worker threads used to rewrite files (default: automatic).",
    )
    g_misc.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    g_misc.add_argument(
        "-h",
        "--help",
        action="help",
        help="Show this help message and exit.",
    )

    return p
