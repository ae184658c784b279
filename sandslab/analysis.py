# sandslab/analysis.py
"""End-to-end pipeline: raw bricks -> settled stack -> support graph -> answers."""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .config import CONFIG, SlabConfig
from .kernel.settle import SettleResult, settle
from .kernel.support import SupportGraph
from .model import Brick
from .parse import parse_snapshot
from .queries import cascade_counts, count_removable

logger = logging.getLogger(__name__)


@dataclass
class SlabAnalysis:
    """
    Everything derived from one snapshot.

    Attributes:
    -----------
    bricks : List[Brick]
        Settled bricks in input order
    graph : SupportGraph
        Support relation between the settled bricks
    removable_count : int
        Bricks that can be removed without any other brick falling
    cascades : Dict[int, int]
        Brick id -> number of other bricks that fall if it is removed
    settle_result : SettleResult
        Raw output of the settling pass (grid, settle order, moved bricks)
    """
    bricks: List[Brick]
    graph: SupportGraph
    removable_count: int
    cascades: Dict[int, int]
    settle_result: Optional[SettleResult] = field(default=None, repr=False)

    @property
    def cascade_total(self) -> int:
        """Sum of cascade counts over all bricks."""
        return sum(self.cascades.values())


def analyze(records: Iterable, config: Optional[SlabConfig] = None) -> SlabAnalysis:
    """
    Settle a snapshot and answer both removal questions.

    Parameters:
    -----------
    records : Iterable
        Bricks or raw (start, end) endpoint pairs, in input order
    config : SlabConfig, optional
        Defaults to CONFIG

    Returns:
    --------
    SlabAnalysis

    Raises:
    -------
    MalformedInputError
        A record does not describe a straight brick
    CollisionError
        Two bricks would have to share a cell
    """
    cfg = config or CONFIG
    result = settle(records, cfg)
    graph = SupportGraph.from_settle(result)

    removable = count_removable(graph)
    cascades = cascade_counts(graph)
    logger.info("Analyzed %d bricks: %d removable, cascade total %d",
                len(graph), removable, sum(cascades.values()))

    return SlabAnalysis(
        bricks=result.bricks,
        graph=graph,
        removable_count=removable,
        cascades=cascades,
        settle_result=result,
    )


def analyze_text(text: str, config: Optional[SlabConfig] = None) -> SlabAnalysis:
    """Parse a snapshot in `x,y,z~x,y,z` lines and analyze it."""
    return analyze(parse_snapshot(text, config), config)
