# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.
"""Perform one guarded fetch from the command line.

Usage:
    guarded-fetch https://example.com
    guarded-fetch https://httpbin.org/post -X POST -H 'Content-Type: application/json' -d '{"a": 1}'
    python -m guarded_fetch https://example.com/missing --fail

Body goes to stdout, status and errors to stderr.
Exit codes: 0 fetched, 1 transport/config error, 22 non-2xx with --fail.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from guarded_fetch.config import FetchConfig, load_config
from guarded_fetch.errors import ConfigError
from guarded_fetch.fetcher import create_fetch
from guarded_fetch.guard import create_guarded_fetch
from guarded_fetch.logger import get_logger
from guarded_fetch.result import Fail, Ok, Result

log = get_logger("guarded_fetch.cli")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_HTTP_STATUS = 22


def parse_headers(raw: Sequence[str]) -> Result[list[tuple[str, str]]]:
    """Split ``Name: value`` strings into header pairs."""
    pairs: list[tuple[str, str]] = []
    for item in raw:
        name, sep, value = item.partition(":")
        if not sep or not name.strip():
            return Fail(error=f"Malformed header (expected 'Name: value'): {item!r}")
        pairs.append((name.strip(), value.strip()))
    return Ok(data=pairs)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="guarded-fetch",
        description="Fetch a URL; transport failures are reported, never raised",
    )
    parser.add_argument("url", help="Target URL")
    parser.add_argument("-X", "--method", default=None, help="HTTP method (default: GET, or POST with --data)")
    parser.add_argument(
        "-H",
        "--header",
        action="append",
        default=[],
        dest="headers",
        help="Request header 'Name: value' (repeatable)",
    )
    parser.add_argument("-d", "--data", default=None, help="Request body")
    parser.add_argument("--config", type=Path, default=None, help="YAML settings file")
    parser.add_argument(
        "--fail",
        action="store_true",
        help="Exit with 22 when the response status is not 2xx",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    config = FetchConfig()
    if args.config is not None:
        cfg_result = load_config(args.config.resolve())
        if not cfg_result.ok:
            log.error(cfg_result.error)
            return EXIT_ERROR
        config = cfg_result.data

    headers_result = parse_headers(args.headers)
    if not headers_result.ok:
        log.error(headers_result.error)
        return EXIT_ERROR

    try:
        fetch = create_fetch(config)
    except ConfigError as exc:
        log.error(str(exc))
        return EXIT_ERROR

    options: dict[str, object] = {"headers": headers_result.data}
    if args.data is not None:
        options["body"] = args.data
    method = args.method or ("POST" if args.data is not None else "GET")
    options["method"] = method

    guarded = create_guarded_fetch(fetch)
    outcome = asyncio.run(guarded(args.url, options))
    if not outcome.ok:
        log.error("%s %s failed: %s", method, args.url, outcome.failure)
        return EXIT_ERROR

    response = outcome.result
    log.info("%s %s → %d %s", method, response.url, response.status, response.reason)
    sys.stdout.buffer.write(response.body)
    sys.stdout.flush()

    if args.fail and not response.ok:
        log.warning("Non-success status: %d", response.status)
        return EXIT_HTTP_STATUS
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
