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

"""Loads fetch settings from YAML into a typed dataclass.

Pure loader — no network access, no CA bundle checks. Expected shape::

    fetch:
      timeout: 10
      user_agent: my-tool/1.0
      ca_file: /etc/ssl/corp-ca.pem

Every key is optional; a missing ``fetch`` section yields the defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from guarded_fetch._version import __version__
from guarded_fetch.result import Fail, Ok, Result

DEFAULT_USER_AGENT = f"guarded-fetch/{__version__}"


@dataclass(frozen=True, slots=True)
class FetchConfig:
    """Settings for the built-in fetch capability.

    ``timeout`` is the socket timeout of the transport in seconds, ``None``
    meaning the interpreter default. ``ca_file`` overrides the certifi
    bundle used for TLS verification.
    """

    timeout: float | None = None
    user_agent: str = DEFAULT_USER_AGENT
    ca_file: str | None = None


def _build_fetch_config(raw: dict[str, Any]) -> FetchConfig:
    timeout = raw.get("timeout")
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise TypeError(f"fetch.timeout must be a number, got {timeout!r}")
        if timeout <= 0:
            raise TypeError(f"fetch.timeout must be positive, got {timeout!r}")
        timeout = float(timeout)

    user_agent = raw.get("user_agent", DEFAULT_USER_AGENT)
    if not isinstance(user_agent, str):
        raise TypeError(f"fetch.user_agent must be a string, got {user_agent!r}")

    ca_file = raw.get("ca_file")
    if ca_file is not None:
        ca_file = str(ca_file)

    return FetchConfig(timeout=timeout, user_agent=user_agent, ca_file=ca_file)


def load_config(path: Path) -> Result[FetchConfig]:
    """Load a YAML settings file into FetchConfig. No validation beyond structure."""
    if not path.exists():
        return Fail(error=f"Config file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        return Fail(error=f"YAML parse error: {exc}", context=str(path))

    if raw is None:
        return Ok(data=FetchConfig())

    try:
        section = raw.get("fetch")
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise TypeError(f"'fetch' must be a mapping, got {type(section).__name__}")
        config = _build_fetch_config(section)
    except (AttributeError, TypeError) as exc:
        return Fail(error=f"Config structure error: {exc}", context=str(path))

    return Ok(data=config)
