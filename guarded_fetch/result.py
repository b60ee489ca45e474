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

"""Result types: outcomes carried as values instead of raised exceptions.

Two families live here:

* ``GuardedResult[T] = Resolved[T] | Rejected`` is what a guarded fetch
  returns. ``Rejected.failure`` holds the raised exception object itself.
* ``Result[T] = Ok[T] | Fail`` is used by the package's own fallible steps
  (config loading, argument parsing) where a readable message is enough.

In both, the variant decides success. Never test the payload's truthiness:
an empty body or ``None`` is a perfectly good result.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Resolved(Generic[T]):
    """The underlying call completed and produced ``result``."""

    result: T
    ok: bool = field(default=True, init=False)

    @property
    def failure(self) -> None:
        return None

    def __iter__(self) -> Iterator[Any]:
        yield self.result
        yield None


@dataclass(frozen=True, slots=True)
class Rejected:
    """The underlying call raised; ``failure`` is that exact exception."""

    failure: BaseException
    ok: bool = field(default=False, init=False)

    @property
    def result(self) -> None:
        return None

    def __iter__(self) -> Iterator[Any]:
        yield None
        yield self.failure


GuardedResult = Resolved[T] | Rejected


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying typed data."""

    data: T
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True, slots=True)
class Fail:
    """Failed result carrying error message and optional context."""

    error: str
    context: Any = None
    ok: bool = field(default=False, init=False)


Result = Ok[T] | Fail
