from .shortest_path import INF, WeightedPosition, minimal_risk, shortest_distances

__all__ = ["INF", "WeightedPosition", "minimal_risk", "shortest_distances"]
