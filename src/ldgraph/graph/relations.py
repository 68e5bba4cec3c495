"""Relations - Link types and weights.

This module defines the links between graph nodes:
- LinkWeight: The fixed weight classes a link can carry
- GraphLink: A directed, weighted, named link between two node ids
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

CONTAINS = "contains"


class LinkWeight(float, Enum):
    """Weight classes for links.

    Weights encode how strongly the target belongs to the source:
    - REFERENCE: Entity reference or parent/child containment
    - URL: Reference to an absolute URL leaf
    - TEXT: String literal leaf
    - SCALAR: Numeric or boolean literal leaf
    """

    REFERENCE = 1.0
    URL = 0.5
    TEXT = 0.3
    SCALAR = 0.2


@dataclass(frozen=True)
class GraphLink:
    """A link between two graph nodes, addressed by id.

    The graph is a multigraph, so two links with the same endpoints but
    different relations (or even identical links) may coexist.

    Attributes:
        source: Id of the node the link starts at.
        target: Id of the node the link points to.
        relation: Originating property name, or ``"contains"``.
        weight: One of the LinkWeight values.
    """

    source: str
    target: str
    relation: str
    weight: float = LinkWeight.REFERENCE.value

    @property
    def is_containment(self) -> bool:
        """True for parent-to-child containment links."""
        return self.relation == CONTAINS

    @property
    def is_self_loop(self) -> bool:
        """True if the link starts and ends at the same node."""
        return self.source == self.target

    def endpoints(self) -> tuple[str, str]:
        """Return (source, target)."""
        return self.source, self.target
