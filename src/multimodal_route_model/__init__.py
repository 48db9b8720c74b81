"""
Multimodal Route Model v1

Multi-criteria shortest path engine for transport and delivery networks.
Finds the optimal origin-destination route under time, cost, distance or
blended time/cost policies using Dijkstra or Bellman-Ford relaxation.
"""

__version__ = "1.0.0"
