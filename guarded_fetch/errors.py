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

"""Exception hierarchy raised by the built-in fetch capability."""

from __future__ import annotations


class GuardedFetchError(Exception):
    """Base exception for all guarded-fetch errors."""


class FetchError(TypeError, GuardedFetchError):
    """The request could not be built or the transport failed.

    Subclasses ``TypeError`` because that is what a browser ``fetch``
    rejects with for the same situations. HTTP error statuses are never
    reported through this exception.
    """

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class ConfigError(GuardedFetchError):
    """Configuration could not be loaded or resolved."""
