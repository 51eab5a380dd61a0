"""
Guard chains: an ordered list of guards followed by a terminal handler.
Each guard returns None to continue or a ChainError to stop; the first error wins.
"""
from dataclasses import dataclass, field
from typing import Any, Callable

from fastapi.responses import Response

from grubdash.errors import ChainError


@dataclass
class RequestContext:
    """Request-scoped state shared by every step of one chain run."""
    params: dict[str, str] = field(default_factory=dict)
    data: dict[str, Any] = field(default_factory=dict)
    # Records resolved by existence guards, keyed by entity name ("dish", "order")
    locals: dict[str, Any] = field(default_factory=dict)


Guard = Callable[[RequestContext], ChainError | None]
Handler = Callable[[RequestContext], Response]


@dataclass
class Chain:
    guards: list[Guard]
    handler: Handler

    def __call__(self, ctx: RequestContext) -> Response:
        for guard in self.guards:
            error = guard(ctx)
            if error is not None:
                raise error
        return self.handler(ctx)
