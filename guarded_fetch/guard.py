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

"""Guard combinator — turns a raising fetch into one that returns its failure.

``create_guarded_fetch(fetch_fn)`` returns an async function with the same
parameters as ``fetch_fn``. It always completes; the outcome is a
``Resolved`` (the value ``fetch_fn`` produced) or a ``Rejected`` (the very
exception object it raised).

What counts as success is left to ``fetch_fn``. With an HTTP fetch a 404
response is a ``Resolved`` whose status the caller still has to check.

No logging, retries or timeouts happen here.
"""

from __future__ import annotations

import asyncio
import functools
import inspect
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from guarded_fetch.result import GuardedResult, Rejected, Resolved

P = ParamSpec("P")
T = TypeVar("T")

# Interpreter control flow, never a failure of the wrapped call.
_PROPAGATE = (KeyboardInterrupt, SystemExit, GeneratorExit)


def _own_task_cancelling() -> bool:
    task = asyncio.current_task()
    return task is not None and task.cancelling() > 0


def create_guarded_fetch(
    fetch_fn: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[GuardedResult[T]]]:
    """Wrap ``fetch_fn`` so failures come back as ``Rejected`` values.

    Arguments are forwarded untouched. A synchronous raise from
    ``fetch_fn`` and a raise while awaiting its result are both captured.
    A ``CancelledError`` coming out of ``fetch_fn`` is captured too, unless
    the task running the guarded call is itself being cancelled.
    ``KeyboardInterrupt``, ``SystemExit`` and ``GeneratorExit`` propagate.
    """

    @functools.wraps(fetch_fn)
    async def guarded(*args: P.args, **kwargs: P.kwargs) -> GuardedResult[T]:
        try:
            value = fetch_fn(*args, **kwargs)
            if inspect.isawaitable(value):
                value = await value
        except _PROPAGATE:
            raise
        except asyncio.CancelledError as exc:
            if _own_task_cancelling():
                raise
            return Rejected(failure=exc)
        except BaseException as exc:
            return Rejected(failure=exc)
        return Resolved(result=value)

    return guarded
