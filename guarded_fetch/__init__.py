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

"""guarded-fetch — fetch that returns its failures instead of raising.

    from guarded_fetch import guarded_fetch

    response, error = await guarded_fetch("https://example.com")

``guarded_fetch`` is bound once, at import, to the built-in ``fetch``.
Rebinding ``guarded_fetch.fetch`` later does not change it; wrap a custom
capability with ``create_guarded_fetch`` instead.
"""

from guarded_fetch._version import __version__
from guarded_fetch.config import FetchConfig, load_config
from guarded_fetch.errors import ConfigError, FetchError, GuardedFetchError
from guarded_fetch.fetcher import Response, create_fetch, fetch
from guarded_fetch.guard import create_guarded_fetch
from guarded_fetch.result import (
    Fail,
    GuardedResult,
    Ok,
    Rejected,
    Resolved,
    Result,
)

guarded_fetch = create_guarded_fetch(fetch)

__all__ = [
    "__version__",
    "ConfigError",
    "Fail",
    "FetchConfig",
    "FetchError",
    "GuardedFetchError",
    "GuardedResult",
    "Ok",
    "Rejected",
    "Resolved",
    "Response",
    "Result",
    "create_fetch",
    "create_guarded_fetch",
    "fetch",
    "guarded_fetch",
    "load_config",
]
