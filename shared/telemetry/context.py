# SPDX-FileCopyrightText: 2025 Weibo, Inc.
#
# SPDX-License-Identifier: Apache-2.0

"""
Request context for log correlation.

One agent run sets a request id here so every log line written while the run
is executing carries the same id.
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Iterator, Optional

_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def set_request_id(request_id: Optional[str]) -> Token:
    """Set the request id for the current context.

    Returns:
        Token restoring the previous value via reset_request_id()
    """
    return _request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    """Restore the request id that was current before set_request_id()."""
    _request_id.reset(token)


def get_request_id() -> Optional[str]:
    """Get the request id of the current context, or None."""
    return _request_id.get()


@contextmanager
def request_context(request_id: Optional[str]) -> Iterator[None]:
    """Set the request id for the duration of the block.

    The block must not suspend a generator: the reset has to run in the
    context that made the set.
    """
    token = set_request_id(request_id)
    try:
        yield
    finally:
        reset_request_id(token)
