"""
Route Strategy port interface.

Defines the objective contract the search engine is parameterised with.
The engine never depends on a concrete objective; it only builds nodes,
orders them, and compares metrics through this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from src.dijkstra.labels import SearchNode

if TYPE_CHECKING:
    from src.dijkstra.alg import SailingRecord

Metric = Tuple[float, ...]


class RouteStrategy(ABC):
    """
    Abstract interface for route objectives.

    Metrics are tuples compared lexicographically: the primary metric
    first, then any secondary tie-break. A smaller metric is better.

    Implementations:
    - CheapestRouteStrategy: total normalized cost
    - FastestRouteStrategy: elapsed days, then earliest arrival
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Strategy identifier (e.g., 'cheapest')."""
        ...

    @abstractmethod
    def direct_objective(self, sailing: SailingRecord) -> Optional[int]:
        """
        Primary objective of a single sailing, used by the direct finder.

        Returns:
            Metric value, or None if the sailing cannot be evaluated.
        """
        ...

    @abstractmethod
    def create_next_node(
        self, node: SearchNode, sailing: SailingRecord
    ) -> Optional[SearchNode]:
        """
        Build the successor reached from node by taking sailing.

        Returns:
            New SearchNode, or None to abandon this branch.
        """
        ...

    @abstractmethod
    def solution_metric(self, path: Sequence[SailingRecord]) -> Metric:
        """Metric of a complete itinerary; worst possible for an empty one."""
        ...

    @abstractmethod
    def node_metric(self, node: SearchNode) -> Metric:
        """Metric of a search node, comparable with solution_metric()."""
        ...

    def create_initial_node(self, origin: str) -> SearchNode:
        """Node at the origin with zero metric and no legs."""
        return SearchNode(port=origin, metric=0)

    def priority(self, node: SearchNode) -> Metric:
        """Heap ordering key within a tier."""
        return self.node_metric(node)

    def prune(self, node: SearchNode, best: Metric) -> bool:
        """True if node can no longer beat the best known solution."""
        return self.node_metric(node) >= best

    def is_better_solution(self, node: SearchNode, best: Metric) -> bool:
        """True if a node at the destination strictly improves on best."""
        return self.node_metric(node) < best
