#!/usr/bin/env python3
"""
Command-line wrapper: parse a WXR export and dump the posts as JSON or CSV.

Usage:
  python main.py docs/export.xml --output data/posts.json
  wxr-parse docs/export.xml --format csv --post-type page -v
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
from typing import IO, Any, Dict, List, Optional, Sequence

from wxr_parser.config import OUTPUT_FORMATS, load_config
from wxr_parser.models.post import Post
from wxr_parser.parser import WXRParser
from wxr_parser.utils.errors import MalformedDocumentError
from wxr_parser.utils.logger import StdLoggerAdapter

CSV_FIELDS = list(Post.model_fields)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract published posts from a WordPress WXR export.",
    )
    parser.add_argument("input", help="Path to the WXR (.xml) export file")
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Output format (default: json)")
    parser.add_argument("--config", help="Path to a JSON configuration file")
    parser.add_argument("--post-type", help="Only keep items of this post type (empty string for any)")
    parser.add_argument("--status", help="Only keep items with this status (empty string for any)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log parsing progress to stderr")
    return parser.parse_args(argv)


def _csv_row(post: Post) -> Dict[str, Any]:
    row = post.to_dict()
    row["categories"] = "|".join(post.categories)
    row["tags"] = "|".join(post.tags)
    row["meta"] = json.dumps(post.meta, ensure_ascii=False)
    return row


def write_posts(posts: List[Post], out: IO[str], fmt: str = "json") -> None:
    if fmt == "csv":
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for post in posts:
            writer.writerow(_csv_row(post))
        return
    json.dump([p.to_dict() for p in posts], out, ensure_ascii=False, indent=2)
    out.write("\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    config = load_config(config_file=args.config)
    if args.post_type is not None:
        config["filter"]["post_type"] = args.post_type
    if args.status is not None:
        config["filter"]["status"] = args.status
    if args.format:
        config["output"]["format"] = args.format

    level = "INFO" if args.verbose else config["logging"]["level"]
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s", stream=sys.stderr)
    log = logging.getLogger("wxr_parser")

    parser = WXRParser.from_config(config, logger=StdLoggerAdapter(log))
    try:
        with open(args.input, "rb") as f:
            posts = parser.parse(f)
    except FileNotFoundError:
        log.error("Input file not found: %s", args.input)
        return 1
    except MalformedDocumentError as e:
        log.error("%s", e)
        return 1

    fmt = config["output"]["format"]
    if args.output:
        with open(args.output, "w", newline="", encoding="utf-8") as out:
            write_posts(posts, out, fmt)
        log.info("Wrote %d posts to %s", len(posts), args.output)
    else:
        write_posts(posts, sys.stdout, fmt)
    return 0


if __name__ == "__main__":
    sys.exit(main())
