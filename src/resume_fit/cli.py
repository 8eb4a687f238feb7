from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from resume_fit.constants import SUPPORTED_PAGE_LIMITS
from resume_fit.services.resume_pdf import render_resume
from resume_fit.templates import DEFAULT_TEMPLATE, get_template, list_templates
from resume_fit.utils.export import default_output_path, load_resume_content


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-fit",
        description="Render resume JSON into a PDF that fits a one- or two-page budget.",
    )
    parser.add_argument("input", nargs="?", type=Path, help="Portfolio or resume JSON file")
    parser.add_argument(
        "-t",
        "--template",
        default=DEFAULT_TEMPLATE,
        help=f"Template identifier (default: {DEFAULT_TEMPLATE})",
    )
    parser.add_argument(
        "-p",
        "--pages",
        type=int,
        choices=SUPPORTED_PAGE_LIMITS,
        default=1,
        help="Maximum number of pages (default: 1)",
    )
    parser.add_argument("-o", "--output", type=Path, help="Output PDF path")
    parser.add_argument(
        "--data-uri",
        action="store_true",
        help="Print a data: URI for inline preview instead of writing a file",
    )
    parser.add_argument("--list-templates", action="store_true", help="List templates and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _print_templates() -> None:
    print("Available templates:")
    for name in list_templates():
        style = get_template(name)
        print(f"  {name:<14} {style.description}")


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Parse *argv*, render the resume and report the result.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_templates:
        _print_templates()
        return 0

    if args.input is None:
        parser.print_usage()
        print("❌ No input file given.")
        return 1

    try:
        content = load_resume_content(args.input)
    except FileNotFoundError:
        print(f"❌ Input file not found: {args.input}")
        return 1
    except (json.JSONDecodeError, ValidationError, ValueError) as exc:
        print(f"❌ Could not read {args.input}: {exc}")
        return 1

    try:
        document = render_resume(content, args.template, args.pages)
    except ValueError as exc:
        print(f"❌ Error: {exc}")
        return 1

    if args.data_uri:
        print(document.to_data_uri())
        return 0

    output_path = args.output or default_output_path(content)
    document.save(output_path)

    print(f"✅ Resume written to {output_path}")
    print(f"   Template:    {document.template}")
    print(f"   Pages:       {document.page_count} of {args.pages}")
    print(f"   Compression: {document.compression}")
    print(f"   Shrink step: {document.layout.shrink_step}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    try:
        return run_cli(argv)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user. Exiting.")
        return 130
    except Exception as exc:
        print(f"\n❌ Unexpected error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
