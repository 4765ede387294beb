# src/textstats/cli.py
import sys
import argparse
import json
from pathlib import Path
from typing import List

from textstats.config import DEFAULT_ENCODING, DEFAULT_TIE_BREAK, REPORT_FORMATS
from textstats.core.document import DocumentStatistics
from textstats.core.ignore import load_exclude_spec, split_excluded
from textstats.exceptions import InvalidInputError, TextStatsError
from textstats.models import NO_LETTER, DocumentReport, TieBreak


def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="textstats",
        description="Line, word and letter statistics for plain-text files."
    )
    parser.add_argument("paths", nargs="*", help="Text files to analyse")
    parser.add_argument(
        "-d", "--delimiter",
        type=str,
        default=None,
        help="Word delimiter as a regular expression (default: any run of whitespace)"
    )
    parser.add_argument("--literal", action="store_true", help="Match the delimiter verbatim instead of as a pattern")
    parser.add_argument("--encoding", type=str, default=DEFAULT_ENCODING, help="File encoding (default: %(default)s)")
    parser.add_argument(
        "--tie-break",
        choices=[t.value for t in TieBreak],
        default=DEFAULT_TIE_BREAK.value,
        help="How to choose between equally common letters (default: %(default)s)"
    )
    parser.add_argument("-x", "--exclude", action="append", default=[], metavar="PATTERN",
                        help="Skip paths matching this gitignore-style pattern (repeatable)")
    parser.add_argument("--exclude-from", type=Path, default=None, metavar="FILE",
                        help="Read exclude patterns from FILE")
    parser.add_argument("-f", "--format", choices=REPORT_FORMATS, default="text", help="Report format")
    return parser


def validate_paths(paths: List[str]) -> None:
    """Rejects a missing or blank path list before any file is opened."""
    if not paths:
        raise InvalidInputError("Please provide the path of at least one text file.")
    for path in paths:
        if not path.strip():
            raise InvalidInputError(f"An invalid filename '{path}' was provided.")


def format_text(report: DocumentReport) -> str:
    letter = report.most_common_letter if report.most_common_letter is not NO_LETTER else "none"
    lines = [
        "=================",
        f"Statistics for {report.path}",
        f"Line count is: {report.line_count}",
        f"Non-blank line count is: {report.non_blank_line_count}",
        f"Word count is: {report.word_count}",
        f"Average word length is: {report.average_word_length}",
        f"Most common letter is: {letter}",
    ]
    return "\n".join(lines)


def format_json(report: DocumentReport) -> str:
    return json.dumps(report.as_dict(), ensure_ascii=False)


def main():
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args()

        validate_paths(args.paths)
        exclude_spec = load_exclude_spec(args.exclude, args.exclude_from)
        paths, excluded = split_excluded(args.paths, exclude_spec)
        for path in excluded:
            print(f"Skipping excluded path: {path}", file=sys.stderr)

        formatter = format_json if args.format == "json" else format_text
        tie_break = TieBreak(args.tie_break)

        # 2. One report per file; a failing file does not stop the rest
        failures = 0
        for path in paths:
            try:
                stats = DocumentStatistics(path, encoding=args.encoding, tie_break=tie_break)
                report = stats.report(args.delimiter, args.literal)
            except TextStatsError as e:
                print(f"Error: {e}", file=sys.stderr)
                failures += 1
                continue
            print(formatter(report))

        if failures:
            sys.exit(1)

    except TextStatsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)


if __name__ == "__main__":
    main()
