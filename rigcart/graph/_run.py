"""
Stage evaluation over nodnod.

A checkout stage is a node; evaluating one seeds a fresh scope with the
plain inputs (CheckoutInput, CustomerDetails, ...) and lets the agent
resolve every stage the target reaches through ``__compose__``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, cast

from kungfu import Some
from nodnod import Scope, EventLoopAgent, Node


type Seed = tuple[type[Any], Any]


# ═══════════════════════════════════════════════════════════════════════════════
# Evaluation
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class Evaluation[T]:
    """
    One pending evaluation of a stage.

        node = await Evaluation(QuoteNode).with_inputs(checkout)

    Inputs are seeded under their exact runtime type. Use ``seed_as`` when
    a stage depends on a base type.
    """
    target: type[T]
    seeds: tuple[Seed, ...] = ()
    label: str = "checkout"

    def with_inputs(self, *values: object) -> Evaluation[T]:
        return replace(self, seeds=(*self.seeds, *((type(v), v) for v in values)))

    def seed_as[V](self, typ: type[V], value: V) -> Evaluation[T]:
        return replace(self, seeds=(*self.seeds, (typ, value)))

    def labelled(self, label: str) -> Evaluation[T]:
        """Scope label, echoed by nodnod when a stage fails to resolve."""
        return replace(self, label=label)

    def __await__(self) -> Any:
        return self.resolve().__await__()

    async def resolve(self) -> T:
        agent = EventLoopAgent.build({cast(type[Node[Any, Any]], self.target)})

        async with Scope(detail=self.label) as scope:
            for typ, value in self.seeds:
                scope.inject(typ, value)
            await cast(Any, agent).run(scope, {})

            match scope.retrieve(self.target):
                case Some(produced):
                    return cast(T, produced.value)
                case _:
                    raise LookupError(f"stage {self.target.__name__} produced nothing in scope {self.label!r}")


async def compose[T](target: type[T], *inputs: object) -> T:
    """Evaluate ``target`` once with ``inputs`` seeded by type."""
    return await Evaluation(target).with_inputs(*inputs)


__all__ = ("Evaluation", "compose")
