from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class RequestContext:
    """Per-request (or per-session) locale state."""

    locale: Optional[str] = None
    locale_preferences: Any = None


_current: ContextVar[Optional[RequestContext]] = ContextVar("localekit_context", default=None)


def get_context() -> Optional[RequestContext]:
    return _current.get()


def bind_context(ctx: RequestContext) -> Token:
    return _current.set(ctx)


def reset_context(token: Token) -> None:
    _current.reset(token)


@contextmanager
def context_scope(ctx: Optional[RequestContext] = None) -> Iterator[RequestContext]:
    """Bind a context for the duration of the block (a fresh one when omitted)."""
    ctx = ctx if ctx is not None else RequestContext()
    token = bind_context(ctx)
    try:
        yield ctx
    finally:
        reset_context(token)
