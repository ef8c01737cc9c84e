"""Command-line entry point: ``python -m qspec2mdx FILE``."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from qspec2mdx.exceptions import Qspec2mdxError
from qspec2mdx.pipeline import PipelineOptions, process_file
from qspec2mdx.schemas import dump_tree

logger = logging.getLogger("qspec2mdx")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qspec2mdx",
        description="Compile Markdown (and question specs) into an MDX-ready syntax tree.",
    )
    parser.add_argument("file", help="Markdown file to process")
    parser.add_argument(
        "--no-admonitions",
        action="store_true",
        help="Leave :::tip/:::info/... directives untouched",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    options = PipelineOptions(rewrite_admonitions=not args.no_admonitions)
    try:
        tree = process_file(args.file, options)
    except FileNotFoundError:
        logger.error("File not found: %s", args.file)
        return 1
    except UnicodeDecodeError as exc:
        logger.error("%s is not valid UTF-8: %s", args.file, exc)
        return 1
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.file, exc)
        return 1
    except Qspec2mdxError as exc:
        logger.error("%s", exc)
        return 1

    json.dump(dump_tree(tree), sys.stdout, ensure_ascii=False, indent=args.indent)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
