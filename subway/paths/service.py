from typing import Dict, List, Optional, Protocol, Sequence, Tuple, Union
import heapq
import logging

from subway.exceptions import DuplicateStationError, NoPathError, StationNotFoundError
from subway.paths.fare_service import FarePolicy, DistanceFarePolicy
from subway.paths.graph import NetworkGraph, NetworkGraphBuilder
from subway.paths.schemas import (
    EdgeWeight, Line, NetworkEdge, PathResponse, PathResult, Station
)

logger = logging.getLogger(__name__)

StationRef = Union[int, str]


class StationLookup(Protocol):
    """Resolves stations of the current station universe"""

    def get_station_by_id(self, station_id: int) -> Optional[Station]:
        ...

    def get_station_by_name(self, name: str) -> Optional[Station]:
        ...

    def get_all_stations(self) -> List[Station]:
        ...


class LineRepository(Protocol):
    """Returns every line currently known, with its sections"""

    def get_all_lines(self) -> List[Line]:
        ...


class PathCalculator:
    """Shortest path search using Dijkstra's algorithm"""

    def find_path(self, graph: NetworkGraph, source: Station, target: Station) -> PathResult:
        for station in (source, target):
            if not graph.has_node(station.id):
                raise StationNotFoundError(f"Station '{station.name}' is not part of the network")

        previous_edges = self._dijkstra(graph, source.id, target.id)
        if target.id != source.id and target.id not in previous_edges:
            raise NoPathError(f"No route between '{source.name}' and '{target.name}'")

        edges = self._reconstruct_edges(previous_edges, source.id, target.id)
        stations = [graph.nodes[source.id]] + [graph.nodes[edge.to_station_id] for edge in edges]

        line_ids: List[int] = []
        for edge in edges:
            if edge.section.line_id not in line_ids:
                line_ids.append(edge.section.line_id)

        # Totals come from the sections, whichever metric weighted the search
        return PathResult(
            stations=stations,
            edges=edges,
            distance=sum(edge.section.distance for edge in edges),
            duration=sum(edge.section.duration for edge in edges),
            line_ids=line_ids
        )

    def _dijkstra(self, graph: NetworkGraph, start_id: int, end_id: int) -> Dict[int, NetworkEdge]:
        """Return the edge used to reach each settled station"""
        # Priority queue: (cost, station_id)
        pq: List[Tuple[int, int]] = [(0, start_id)]
        distances: Dict[int, int] = {start_id: 0}
        previous_edges: Dict[int, NetworkEdge] = {}
        visited = set()

        while pq:
            current_cost, current_station = heapq.heappop(pq)

            if current_station in visited:
                continue
            visited.add(current_station)

            if current_station == end_id:
                break

            for edge in graph.get_neighbors(current_station):
                next_station = edge.to_station_id
                if next_station in visited:
                    continue

                new_cost = current_cost + edge.weight
                if next_station not in distances or new_cost < distances[next_station]:
                    distances[next_station] = new_cost
                    previous_edges[next_station] = edge
                    heapq.heappush(pq, (new_cost, next_station))

        return previous_edges

    @staticmethod
    def _reconstruct_edges(
        previous_edges: Dict[int, NetworkEdge],
        start_id: int,
        end_id: int
    ) -> List[NetworkEdge]:
        edges: List[NetworkEdge] = []
        current = end_id
        while current != start_id:
            edge = previous_edges[current]
            edges.append(edge)
            current = edge.from_station_id
        edges.reverse()
        return edges


class PathService:
    """Answers shortest path queries over the current network snapshot"""

    def __init__(
        self,
        station_lookup: StationLookup,
        line_repository: LineRepository,
        fare_policy: Optional[FarePolicy] = None,
        bidirectional: bool = False
    ):
        self.station_lookup = station_lookup
        self.line_repository = line_repository
        self.fare_policy = fare_policy or DistanceFarePolicy()
        self.bidirectional = bidirectional
        self.calculator = PathCalculator()

    def find_shortest_path(
        self,
        source_ref: StationRef,
        target_ref: StationRef,
        metric: EdgeWeight = EdgeWeight.DISTANCE
    ) -> PathResponse:
        if source_ref == target_ref:
            logger.warning(f"Rejected path query with identical endpoints: {source_ref}")
            raise DuplicateStationError(f"Source and target are the same station: {source_ref}")

        source = self._resolve(source_ref)
        target = self._resolve(target_ref)
        if source.id == target.id:
            logger.warning(f"Rejected path query: {source_ref} and {target_ref} are both '{source.name}'")
            raise DuplicateStationError(f"Source and target are the same station: {source.name}")

        logger.info(f"Path query: {source.name}({source.id}) -> {target.name}({target.id}), by {metric.value}")

        lines = self.line_repository.get_all_lines()
        stations = self.station_lookup.get_all_stations()
        graph = NetworkGraphBuilder.build(lines, stations, metric, bidirectional=self.bidirectional)

        path = self.calculator.find_path(graph, source, target)
        fare = self.fare_policy.calculate_fare(path.distance, self._lines_used(path, lines))

        logger.info(
            f"Path found: {' -> '.join(path.station_names)} "
            f"(distance={path.distance}, duration={path.duration}, fare={fare})"
        )

        return PathResponse(
            stations=path.stations,
            distance=path.distance,
            duration=path.duration,
            fare=fare
        )

    def _resolve(self, ref: StationRef) -> Station:
        if isinstance(ref, int):
            station = self.station_lookup.get_station_by_id(ref)
        else:
            station = self.station_lookup.get_station_by_name(ref)

        if station is None:
            raise StationNotFoundError(f"Station does not exist: {ref}")
        return station

    @staticmethod
    def _lines_used(path: PathResult, lines: Sequence[Line]) -> List[Line]:
        lines_by_id = {line.id: line for line in lines}
        return [lines_by_id[line_id] for line_id in path.line_ids if line_id in lines_by_id]
