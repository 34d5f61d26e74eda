#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from sumopost import LogEvent, SumoPostError, new_log_endpoint, post_logs, post_logs_string
from sumopost.infrastructure.logging import configure_logging
from sumopost.infrastructure.settings import settings

logger = logging.getLogger("sumopost.scripts.post_file")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Post a log file to an HTTP collector")
    parser.add_argument("--input", type=Path, required=True)
    parser.add_argument("--format", choices=["jsonl", "plain"], default="plain")
    parser.add_argument("--url", default=settings.endpoint_url)
    parser.add_argument("--log-level", default=settings.log_level)
    args = parser.parse_args(argv)
    if not args.url:
        parser.error("no endpoint URL, pass --url or set SUMOPOST_ENDPOINT_URL")

    try:
        configure_logging(args.log_level)
        text = args.input.read_text(encoding=settings.input_encoding)
        endpoint = new_log_endpoint(args.url)
        if args.format == "jsonl":
            events = _load_events(text.splitlines())
            post_logs(endpoint, events)
            logger.info("posted_file", extra={"path": str(args.input), "count": len(events)})
        else:
            post_logs_string(endpoint, text)
            logger.info("posted_file", extra={"path": str(args.input)})
    except (SumoPostError, OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


def _load_events(lines: list[str]) -> list[LogEvent]:
    events: list[LogEvent] = []
    for number, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            events.append(LogEvent.model_validate_json(line))
        except ValidationError as exc:
            raise SumoPostError(f"line {number}: {exc}") from exc
    return events


if __name__ == "__main__":
    sys.exit(main())
