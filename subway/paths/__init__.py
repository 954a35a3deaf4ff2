"""
Path Finding Module

This module answers shortest path queries over the subway network.
It includes:

- Network graph construction from line and station snapshots
- Shortest path search using Dijkstra's algorithm, by distance or duration
- Pluggable fare policies (flat, distance-tiered, line surcharge)

Key Components:
- graph.py: Multigraph representation and builder
- service.py: Path calculation and the query orchestration service
- fare_service.py: Fare policies
- router.py: FastAPI endpoints for path queries
- schemas.py: Network snapshots and response structures
"""

from .graph import NetworkGraph, NetworkGraphBuilder
from .service import PathService, PathCalculator, StationLookup, LineRepository
from .fare_service import (
    FarePolicy, FlatFarePolicy, DistanceFarePolicy, LineSurchargeFarePolicy,
    create_fare_policy
)
from .schemas import (
    Station, Section, Line, EdgeWeight, NetworkEdge, PathResult, PathResponse
)

__all__ = [
    "NetworkGraph",
    "NetworkGraphBuilder",
    "PathService",
    "PathCalculator",
    "StationLookup",
    "LineRepository",
    "FarePolicy",
    "FlatFarePolicy",
    "DistanceFarePolicy",
    "LineSurchargeFarePolicy",
    "create_fare_policy",
    "Station",
    "Section",
    "Line",
    "EdgeWeight",
    "NetworkEdge",
    "PathResult",
    "PathResponse"
]
