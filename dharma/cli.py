"""
Command-line interface for dharma.

Provides the main entry point for the dharma interpreter with subcommands
for running, parsing and tokenizing programs and for the interactive shell.
"""

import argparse
import sys
from pathlib import Path
from typing import TextIO

from .backend import dump, to_source
from .core import Interpreter
from .frontend import Lexer, LexerError
from .shell import start_interactive_shell
from .utils import DEFAULT_SETTINGS, configure_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        argparse.ArgumentParser: The configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="dharma",
        description="dharma: parenthesized arithmetic interpreter",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  echo "((1+2)*4)" | python -m dharma run
  python -m dharma run program.dh
  python -m dharma parse program.dh --format source
  python -m dharma -i
        """
    )
    parser.add_argument(
        "-i", "--interactive",
        action="store_true",
        help="Start the interactive shell"
    )

    # Shared options for subcommands
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    subparsers = parser.add_subparsers(dest="command")

    # Run command
    run_parser = subparsers.add_parser(
        "run",
        parents=[common],
        help="Parse and evaluate a program"
    )
    run_parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Program file, or - for standard input (default)"
    )

    # Parse command
    parse_parser = subparsers.add_parser(
        "parse",
        parents=[common],
        help="Print the expression tree of a program"
    )
    parse_parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Program file, or - for standard input (default)"
    )
    parse_parser.add_argument(
        "--format",
        choices=["tree", "source"],
        default="tree",
        help="Output format (default: tree)"
    )

    # Tokens command
    tokens_parser = subparsers.add_parser(
        "tokens",
        parents=[common],
        help="Print the token stream of a program"
    )
    tokens_parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Program file, or - for standard input (default)"
    )

    # Shell command
    subparsers.add_parser(
        "shell",
        aliases=["interactive"],
        parents=[common],
        help="Start the interactive shell"
    )

    # Version command
    subparsers.add_parser(
        "version",
        parents=[common],
        help="Show version information"
    )

    return parser


def _open_input(name: str) -> TextIO:
    if name == "-":
        return sys.stdin
    return Path(name).open(encoding="utf-8")


def _missing(name: str) -> bool:
    if name != "-" and not Path(name).exists():
        print(f"[dharma] Error: Input file not found: {name}", file=sys.stderr)
        return True
    return False


def handle_run(args: argparse.Namespace) -> int:
    """Handle the run command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    interpreter = Interpreter()

    if args.input == "-":
        result = interpreter.run(sys.stdin)
    else:
        result = interpreter.run_file(Path(args.input))

    if result.success:
        print(result.value)
        return 0
    else:
        print(f"[dharma] Error: {result.error_message}", file=sys.stderr)
        return 1


def handle_parse(args: argparse.Namespace) -> int:
    """Handle the parse command."""
    if _missing(args.input):
        return 1

    try:
        stream = _open_input(args.input)
    except OSError as e:
        print(f"[dharma] Error: Cannot read input file: {e}", file=sys.stderr)
        return 1

    try:
        tree = Interpreter().parse(stream)
    except LexerError as e:
        print(f"[dharma] Error: Parse error: {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"[dharma] Error: Read error: {e}", file=sys.stderr)
        return 1
    finally:
        if stream is not sys.stdin:
            stream.close()

    if args.format == "source":
        print(to_source(tree))
    else:
        print(dump(tree))
    return 0


def handle_tokens(args: argparse.Namespace) -> int:
    """Handle the tokens command."""
    if _missing(args.input):
        return 1

    try:
        stream = _open_input(args.input)
    except OSError as e:
        print(f"[dharma] Error: Cannot read input file: {e}", file=sys.stderr)
        return 1

    try:
        for token in Lexer(stream).tokens():
            print(f"{token.lineno}:{token.col_offset}\t{token.type.name}\t{token.value!r}")
    except UnicodeDecodeError as e:
        print(f"[dharma] Error: Read error: {e}", file=sys.stderr)
        return 1
    finally:
        if stream is not sys.stdin:
            stream.close()
    return 0


def handle_version(args: argparse.Namespace) -> int:
    """Handle the version command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (always 0 for version)
    """
    from . import __version__, __author__
    print(f"dharma version {__version__}")
    print(f"Author: {__author__}")
    return 0


def main(argv: list = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        int: Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(getattr(args, "verbose", False), level=DEFAULT_SETTINGS.log_level)

    if args.interactive or args.command in ("shell", "interactive"):
        return start_interactive_shell()
    elif args.command == "run":
        return handle_run(args)
    elif args.command == "parse":
        return handle_parse(args)
    elif args.command == "tokens":
        return handle_tokens(args)
    elif args.command == "version":
        return handle_version(args)
    else:
        parser.print_help()
        return 2


if __name__ == "__main__":
    sys.exit(main())
