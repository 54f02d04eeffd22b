"""Command-line entry point: HTML file or stdin in, block JSON out.

Usage:
    html-to-blocks -i page.html -o blocks.json
    html-to-blocks -i page.html --stdout
    echo "<h2>Test</h2>" | html-to-blocks --stdout
"""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from dotenv import load_dotenv

from . import storage
from .config import load_config
from .converter import HtmlToBlocksConverter
from .utils import setup_logger, sha1_text


EPILOG = """\
Supported HTML -> block mappings:
  <p>                 -> core/paragraph
  <h1>-<h6>           -> core/heading (with level)
  <ul>, <ol>          -> core/list (nested lists kept inside their item)
  <img>               -> core/image (src, alt, dimensions)
  <div>, <section>... -> no block, children are converted in place
  other tags          -> core/html (raw markup fallback)

Inline markup (<strong>, <em>, <a>...), styles and classes are preserved.
"""


class EmptyInputError(ValueError):
    """Raised when the input holds no HTML to convert."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html-to-blocks",
        description="Convert HTML into a Gutenberg-compatible JSON block array.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-i", "--input", default="", help="Input HTML file (default: read piped stdin)")
    parser.add_argument("-o", "--output", default="", help="Output JSON file")
    parser.add_argument("--stdout", action="store_true", help="Print the JSON to stdout instead of saving it")
    parser.add_argument("--config", default="", help="Optional config.json with a 'converter' section")
    parser.add_argument("--meta-out", default="", help="Optional output blocks_meta.json")
    parser.add_argument("--csv", default="", help="Optional CSV export of the blocks for review")
    parser.add_argument("--client-ids", action="store_true", help="Attach a unique clientId to every block")
    return parser


def read_input(input_path: str, stdin: TextIO) -> str:
    """
    Return the HTML to convert: the ``--input`` file if given, otherwise piped
    stdin. Raises FileNotFoundError, EmptyInputError, or ValueError when there
    is no input source at all.
    """
    if input_path:
        html_text = storage.read_text(input_path)
    elif not stdin.isatty():
        html_text = stdin.read().strip()
    else:
        raise ValueError("No input provided. Use -i <file> or pipe HTML content.")

    if not html_text.strip():
        raise EmptyInputError("No HTML content to process.")
    return html_text


def build_meta(html_text: str, blocks: List[Dict[str, Any]], namespace: str) -> Dict[str, Any]:
    return {
        "source_sha1": sha1_text(html_text),
        "n_blocks": len(blocks),
        "block_counts": dict(Counter(b["blockName"] for b in blocks)),
        "block_namespace": namespace,
    }


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    load_dotenv()
    try:
        cfg = load_config(args.config or None)
    except FileNotFoundError:
        raise SystemExit(f"Error: Config file '{args.config}' not found.")
    except OSError as exc:
        raise SystemExit(f"Error: Cannot read config file '{args.config}': {exc}")
    except ValueError as exc:
        raise SystemExit(f"Error: Invalid configuration: {exc}")
    if args.client_ids:
        cfg.client_ids = True
    logger = setup_logger(cfg.logs_dir)

    if not args.stdout and not args.output:
        raise SystemExit("Error: No output method specified. Use -o <file> or --stdout.")

    try:
        html_text = read_input(args.input, sys.stdin)
    except FileNotFoundError:
        raise SystemExit(f"Error: Input file '{args.input}' not found.")
    except IsADirectoryError:
        raise SystemExit(f"Error: Input '{args.input}' is a directory.")
    except UnicodeDecodeError:
        raise SystemExit(f"Error: Input file '{args.input}' is not valid UTF-8.")
    except EmptyInputError as exc:
        raise SystemExit(f"Error: {exc}")
    except ValueError as exc:
        raise SystemExit(f"Error: {exc}\nRun with --help for usage information.")

    converter = HtmlToBlocksConverter(cfg)
    try:
        blocks = converter.to_dicts(converter.convert(html_text))
    except Exception:
        logger.exception("Error converting HTML.")
        raise SystemExit(1)

    if args.stdout:
        print(storage.dumps_json(blocks, indent=cfg.json_indent))
    else:
        storage.write_json(args.output, blocks, indent=cfg.json_indent)
        print(f"Converted HTML to Gutenberg blocks: {args.output}")
        print(f"Generated {len(blocks)} block(s)")

    if args.meta_out:
        storage.write_json(args.meta_out, build_meta(html_text, blocks, cfg.block_namespace))
        logger.info("Wrote block metadata to %s", Path(args.meta_out))
    if args.csv:
        storage.write_blocks_csv(args.csv, blocks)
        logger.info("Wrote block CSV to %s", Path(args.csv))


if __name__ == "__main__":
    main()
