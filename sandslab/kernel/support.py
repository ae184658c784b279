# sandslab/kernel/support.py
"""
SUPPORT GRAPH: Who Rests on Whom
================================

A directed networkx graph over settled bricks. An edge B -> A means brick A
rests directly on brick B (B supports A). Bricks lying on the ground hang off
a single GROUND node, so every brick is reachable from it:

    supporters(A)  bricks directly beneath A     (predecessors, minus GROUND)
    supported(B)   bricks directly above B       (successors)
    resting_on(B)  everything held up by B, directly or not (descendants)

Every supporter ends strictly below the bottom of the brick it holds up, so
the graph is acyclic and `order` (ids by non-decreasing bottom height) is a
topological order. The graph is frozen once built.
"""

from types import MappingProxyType
from typing import FrozenSet, Iterable, Iterator, List, Mapping, Tuple

import networkx as nx

from ..model import Brick
from .grid import OccupancyGrid
from .settle import SettleResult, settle_order, supporters_of

GROUND = 'ground'


def as_brick_id(brick) -> int:
    return brick.id if isinstance(brick, Brick) else int(brick)


class SupportGraph:
    """
    Immutable support relation between settled bricks.

    Parameters:
    -----------
    supporters : Mapping[int, Iterable[int]]
        Brick id -> ids of the bricks directly beneath it. Every brick must
        appear as a key, ground-resting bricks with an empty collection.
    order : Iterable[int]
        All brick ids in non-decreasing bottom height.

    Raises:
    -------
    KeyError
        A supporter is not itself a brick of the graph
    ValueError
        order does not list every brick once, or lists a brick before one
        of its supporters
    """

    def __init__(self, supporters: Mapping[int, Iterable[int]], order: Iterable[int]):
        g = nx.DiGraph()
        g.add_node(GROUND)
        g.add_nodes_from(supporters)
        for bid, ids in supporters.items():
            ids = list(ids)
            for sid in ids:
                if sid not in supporters:
                    raise KeyError(f"Supporter {sid} of brick {bid} is not in the graph")
                g.add_edge(sid, bid)
            if not ids:
                g.add_edge(GROUND, bid)

        self._order: Tuple[int, ...] = tuple(order)
        if sorted(self._order) != sorted(supporters):
            raise ValueError("order must list every brick in the graph exactly once")
        self._rank = MappingProxyType({bid: i for i, bid in enumerate(self._order)})

        for sid, bid in g.edges:
            if sid != GROUND and self._rank[sid] >= self._rank[bid]:
                raise ValueError(
                    f"order is not topological: brick {bid} comes before its supporter {sid}"
                )

        self._graph = nx.freeze(g)

    @classmethod
    def from_settle(cls, result: SettleResult) -> "SupportGraph":
        """Graph from the edges captured while bricks were landing."""
        return cls(result.supporters, result.order)

    @classmethod
    def from_grid(cls, bricks: Iterable[Brick], grid: OccupancyGrid) -> "SupportGraph":
        """Graph derived from final positions by looking under each brick."""
        ordered = settle_order(bricks)
        supporters = {b.id: supporters_of(b, grid) for b in ordered}
        return cls(supporters, [b.id for b in ordered])

    def _node(self, brick) -> int:
        bid = as_brick_id(brick)
        if bid not in self._rank:
            raise KeyError(f"Brick {bid} is not in the graph")
        return bid

    @property
    def digraph(self) -> nx.DiGraph:
        """The frozen networkx graph, GROUND node included."""
        return self._graph

    def supporters(self, brick) -> FrozenSet[int]:
        """Ids of the bricks directly beneath the brick (a Brick or an id)."""
        return frozenset(self._graph.predecessors(self._node(brick))) - {GROUND}

    def supported(self, brick) -> FrozenSet[int]:
        """Ids of the bricks resting directly on the brick (a Brick or an id)."""
        return frozenset(self._graph.successors(self._node(brick)))

    def resting_on(self, brick) -> FrozenSet[int]:
        """Ids of every brick above the brick along support edges."""
        return frozenset(nx.descendants(self._graph, self._node(brick)))

    def rank(self, brick) -> int:
        """Position of the brick in the bottom-to-top order."""
        return self._rank[self._node(brick)]

    @property
    def order(self) -> Tuple[int, ...]:
        return self._order

    def roots(self) -> List[int]:
        """Bricks with no supporters, i.e. resting on the ground."""
        return [bid for bid in self._order if self._graph.has_edge(GROUND, bid)]

    def edges(self) -> Iterator[Tuple[int, int]]:
        """(supporter, supported) pairs in bottom-to-top order."""
        for bid in self._order:
            for sid in sorted(self.supporters(bid)):
                yield sid, bid

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, brick) -> bool:
        return as_brick_id(brick) in self._rank

    def __iter__(self) -> Iterator[int]:
        return iter(self._order)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SupportGraph):
            return NotImplemented
        return (set(self._graph.nodes) == set(other._graph.nodes)
                and set(self._graph.edges) == set(other._graph.edges))

    def __repr__(self) -> str:
        n_edges = self._graph.number_of_edges() - self._graph.out_degree(GROUND)
        return f"SupportGraph(bricks={len(self)}, edges={n_edges})"
