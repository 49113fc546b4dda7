"""Command-line interface for extracting nameplate fields from OCR text.

Reads OCR output from files or stdin and prints the extracted fields as a
summary or JSON, optionally writing the result to a file.
"""

import argparse
import json
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from nameplate_ocr.extraction.orchestrator import FieldExtractor
from nameplate_ocr.utils.config import AppConfig, load_config
from nameplate_ocr.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

DEFAULT_OUTPUT_NAME = "extracted-text.txt"
_STDIN = "-"


def _read_source(source: str) -> str:
    """Read OCR text from a file path, or from stdin for ``-``.

    Args:
        source: File path or ``-``.

    Returns:
        The raw text.
    """
    if source == _STDIN:
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def extract_text(
    raw_text: str, config: AppConfig, source: str = _STDIN
) -> dict[str, object]:
    """Run extraction on one OCR text and build a JSON-ready record.

    Args:
        raw_text: OCR output.
        config: Application configuration with the target fields.
        source: Name of the input, recorded in the record.

    Returns:
        Dictionary with source, fields, found count, and summary.
    """
    extractor = FieldExtractor(config.extraction, config.fields)
    result, summary = extractor.extract(raw_text)
    return {
        "source": source,
        "fields": result.as_dict(config.extraction.not_found_label),
        "found": result.found_count,
        "summary": summary,
    }


def _render(records: list[dict[str, object]], as_json: bool) -> str:
    if as_json:
        payload: object = records[0] if len(records) == 1 else records
        return json.dumps(payload, indent=2)
    if len(records) == 1:
        return str(records[0]["summary"])
    return "\n\n".join(f"== {r['source']}\n{r['summary']}" for r in records)


def _write_output(output: str, path: Path) -> None:
    """Write rendered output to ``path``, creating parent directories."""
    if path.is_dir():
        path = path / DEFAULT_OUTPUT_NAME
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(output + "\n", encoding="utf-8")
    print(f"Output written to {path}")


def _cmd_extract(args: argparse.Namespace, config: AppConfig) -> int:
    sources: list[str] = args.files or [_STDIN]
    texts: list[str] = []
    for source in sources:
        if source != _STDIN and not Path(source).is_file():
            print(f"Error: {source} does not exist", file=sys.stderr)
            return 1
        try:
            texts.append(_read_source(source))
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error: cannot read {source}: {exc}", file=sys.stderr)
            return 1

    records = [extract_text(t, config, s) for t, s in zip(texts, sources)]
    output = _render(records, args.json)

    if args.output:
        _write_output(output, args.output)
    else:
        print(output)
    return 0


def _cmd_fields(config: AppConfig) -> int:
    for spec in config.fields:
        print(f"{spec.key}: {', '.join(spec.patterns)}")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate command.

    Args:
        argv: Command-line arguments (defaults to sys.argv).
    """
    parser = argparse.ArgumentParser(
        description="Nameplate OCR field extractor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-c", "--config", type=Path, help="YAML configuration file"
    )
    parser.add_argument(
        "--log-level", help="Override the configured log level (e.g. DEBUG)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    extract_parser = subparsers.add_parser(
        "extract", help="Extract fields from OCR text files or stdin"
    )
    extract_parser.add_argument(
        "files",
        nargs="*",
        help="OCR text files to process (default: read stdin, or use '-')",
    )
    extract_parser.add_argument(
        "--json", action="store_true", help="Print JSON instead of the summary"
    )
    extract_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help=f"Write output to a file (a directory gets {DEFAULT_OUTPUT_NAME})",
    )

    subparsers.add_parser("fields", help="List configured fields and aliases")

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (ValidationError, yaml.YAMLError, TypeError) as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        sys.exit(2)

    setup_logging(args.log_level or config.log_level)

    if args.command == "extract":
        sys.exit(_cmd_extract(args, config))
    elif args.command == "fields":
        sys.exit(_cmd_fields(config))
    else:
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":
    main()
