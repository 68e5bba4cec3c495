"""Community detection by greedy label propagation."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field

from ldgraph.analytics.adjacency import Adjacency

PASS_CEILING = 50


def community_pass_limit(node_count: int) -> int:
    """Pass ceiling for label propagation: min(50, ceil(10*ln N)), at least 1."""
    if node_count <= 1:
        return 1
    return max(1, min(PASS_CEILING, math.ceil(10 * math.log(node_count))))


@dataclass
class CommunityResult:
    labels: dict[str, int] = field(default_factory=dict)
    passes: int = 0
    converged: bool = True


def label_propagation(adjacency: Adjacency, max_passes: int | None = None) -> CommunityResult:
    """Assign community labels by label propagation.

    Every node starts in its own community (its index in graph order).
    Each pass visits nodes in graph order, tallies the labels of their
    neighbors, and moves a node to the most frequent neighbor label only
    when that label is strictly more frequent than the node's current
    label among its neighbors. Ties for most frequent go to the smallest
    label. Passes repeat until one makes no change, or until the pass
    ceiling is reached, in which case the result is flagged as not
    converged.

    Args:
        adjacency: The adjacency to label.
        max_passes: Pass ceiling; defaults to ``community_pass_limit(N)``.

    Returns:
        CommunityResult with labels, passes performed, and convergence flag.
    """
    order = adjacency.order
    labels = {node_id: index for index, node_id in enumerate(order)}
    if not order:
        return CommunityResult(labels=labels)

    limit = max_passes if max_passes else community_pass_limit(len(order))
    passes = 0
    converged = False

    while passes < limit:
        passes += 1
        changes = 0
        for node_id in order:
            neighbors = adjacency.neighbors[node_id]
            if not neighbors:
                continue
            tally = Counter(labels[neighbor] for neighbor in neighbors)
            current_count = tally.get(labels[node_id], 0)
            best_label, best_count = min(tally.items(), key=lambda item: (-item[1], item[0]))
            if best_count > current_count:
                labels[node_id] = best_label
                changes += 1
        if changes == 0:
            converged = True
            break

    return CommunityResult(labels=labels, passes=passes, converged=converged)
