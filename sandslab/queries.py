# sandslab/queries.py
"""
QUERIES: What Falls If a Brick Is Removed?
==========================================

Two read-only analyses over a SupportGraph.

REMOVABLE CHECK (single hop):
-----------------------------
A brick X is NOT safely removable if some brick Y rests on X alone,
i.e. supporters(Y) == {X}. Every other brick can be taken out without
anything losing its last support.

CASCADE COUNT (transitive):
---------------------------
Remove X and let the consequences propagate upward: a brick falls once
every one of its supporters has fallen. Bricks are visited bottom to top
(graph.order is a topological order), so when a brick is examined all
of its supporters have already been decided. Only the descendants of X
in the support graph (networkx.descendants) can fall, so the sweep is
restricted to them.

Example (the classic seven-brick stack):
    A holds B and C alone, B and C share D and E, D and E share F, F holds G.
    removable: B, C, D, E, G            -> 5
    cascade:   A -> 6, F -> 1, others 0 -> sum 7
"""

from typing import Dict, FrozenSet, Set

from .kernel.support import SupportGraph, as_brick_id


def critical_bricks(graph: SupportGraph) -> Set[int]:
    """Ids of bricks that are the only support of at least one other brick."""
    critical = set()
    for bid in graph.order:
        below = graph.supporters(bid)
        if len(below) == 1:
            critical |= below
    return critical


def is_removable(graph: SupportGraph, brick) -> bool:
    """True if no brick rests on this one alone."""
    bid = as_brick_id(brick)
    return all(graph.supporters(above) != {bid} for above in graph.supported(bid))


def count_removable(graph: SupportGraph) -> int:
    """Number of bricks that can be removed without anything else falling."""
    return len(graph) - len(critical_bricks(graph))


def cascade(graph: SupportGraph, brick) -> FrozenSet[int]:
    """
    Bricks that fall if the given brick alone is removed.

    The removed brick itself is not part of the result.
    """
    bid = as_brick_id(brick)
    fallen = {bid}
    for candidate in sorted(graph.resting_on(bid), key=graph.rank):
        if graph.supporters(candidate) <= fallen:
            fallen.add(candidate)

    fallen.discard(bid)
    return frozenset(fallen)


def cascade_count(graph: SupportGraph, brick) -> int:
    """How many other bricks fall if the given brick is removed."""
    return len(cascade(graph, brick))


def cascade_counts(graph: SupportGraph) -> Dict[int, int]:
    """Cascade count of every brick, keyed by id."""
    return {bid: cascade_count(graph, bid) for bid in graph.order}


def total_cascade(graph: SupportGraph) -> int:
    """Sum of cascade counts over all bricks."""
    return sum(cascade_counts(graph).values())
