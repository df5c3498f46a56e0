import argparse
import logging
import sys

from .api import ColumnAligner
from .core.models import ConfigurationError
from .core.rules import RULE_SEPARATOR
from .output.formatter import OutputFormatter
from .utils import build_options_from_args, build_options_from_env


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Align operators, colons and commas into columns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  column-aligner --all < settings.py
  column-aligner --line 12 source.js -o source.js
  column-aligner --all --rules '/(=)/{RULE_SEPARATOR}/:/a' config.txt

Without --all only the block containing --line (or $TM_LINE_NUMBER) is
formatted. TM_SOURCE_ALIGNMENT_PATTERN and TM_SELECTED_TEXT are honoured
when the matching flags are not given.
        """,
    )

    parser.add_argument(
        "input", nargs="?", help="File to format (default: standard input)"
    )
    parser.add_argument(
        "-o", "--output", help="Write the result here instead of standard output"
    )
    parser.add_argument(
        "--rules",
        type=str,
        default=None,
        help=f"Alignment rules as /pattern/flag joined by '{RULE_SEPARATOR}'; flag 'a' pads after the match",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Format every block instead of only the one under the cursor",
    )
    parser.add_argument(
        "--line",
        type=int,
        default=None,
        help="1-based cursor line selecting the block to format",
    )
    parser.add_argument(
        "--report", type=str, help="Write a JSON report of the applied rules"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output (show debug information)",
    )

    args = parser.parse_args(argv)

    # Configure logging
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
    package_logger = logging.getLogger("column_aligner")
    package_logger.setLevel(logging.DEBUG if args.verbose else logging.INFO)
    package_logger.propagate = False

    try:
        env_options = build_options_from_env(with_line_number=args.line is None)
        options = build_options_from_args(args, env_options)
        aligner = ColumnAligner(options.rule_spec)
    except ConfigurationError as e:
        logging.error(f"Error: {e}")
        return 1

    try:
        if args.input:
            with open(args.input, encoding="utf-8", newline="") as f:
                text = f.read()
        else:
            text = sys.stdin.read()
    except OSError as e:
        logging.error(f"Error reading input: {e}")
        return 1

    formatted, results = aligner.format_with_report(text, options)

    try:
        if args.output:
            with open(args.output, "w", encoding="utf-8", newline="") as f:
                f.write(formatted)
        else:
            sys.stdout.write(formatted)

        if args.report:
            report = OutputFormatter.build_report(results)
            OutputFormatter.save_report(report, args.report)
            OutputFormatter.print_report(report)
    except OSError as e:
        logging.error(f"Error writing output: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
