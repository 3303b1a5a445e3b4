"""
Graph — computation graphs over nodnod.

    from basket import graph as G

    @G.node
    class SubtotalNode:
        def __init__(self, value: float) -> None:
            self.value = value

        @classmethod
        def __compose__(cls, request: PricingRequest) -> "SubtotalNode":
            return cls(subtotal(request.lines))

    node = await G.compose(SubtotalNode, request)

Inputs are injected by their runtime type, so each input type appears at
most once per run. Agents are compiled once per target and reused.
"""

from __future__ import annotations

from functools import cache
from typing import Any, cast
from collections.abc import Callable, Coroutine

from nodnod import Scope, Value, EventLoopAgent, Node
from nodnod import scalar_node as node


@cache
def _agent(target: type[Any]) -> EventLoopAgent:
    # nodnod discovers the dependencies of target on its own
    return EventLoopAgent.build({cast(type[Node[Any, Any]], target)})


async def compose[T](target: type[T], *inputs: object) -> T:
    """Run every node target depends on and return the target node."""
    agent = _agent(target)
    scope = Scope(detail=target.__name__)

    async with scope:
        for value in inputs:
            scope.push(Value(cast(type[Any], type(value)), value))

        run = cast(
            Callable[[Scope, dict[type[Any], Scope]], Coroutine[Any, Any, None]],
            getattr(agent, "run"),
        )
        await run(scope, {})

        found = scope.get(target)
        if found is None:
            raise KeyError(f"{target.__name__} not found in scope")
        return cast(T, found.value)


__all__ = ("node", "compose")
