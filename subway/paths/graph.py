from typing import Dict, Iterable, List
import logging

from subway.exceptions import StationNotFoundError
from subway.paths.schemas import EdgeWeight, Line, NetworkEdge, Station

logger = logging.getLogger(__name__)

class NetworkGraph:
    """Directed multigraph of the subway network keyed by station id"""

    def __init__(self):
        self.nodes: Dict[int, Station] = {}
        self.edges: Dict[int, List[NetworkEdge]] = {}

    def add_node(self, station: Station):
        """Add a station node to the graph"""
        self.nodes[station.id] = station
        if station.id not in self.edges:
            self.edges[station.id] = []

    def add_edge(self, edge: NetworkEdge):
        """Add a connection between stations, keeping parallel connections"""
        if edge.from_station_id not in self.edges:
            self.edges[edge.from_station_id] = []
        self.edges[edge.from_station_id].append(edge)

    def has_node(self, station_id: int) -> bool:
        return station_id in self.nodes

    def get_neighbors(self, station_id: int) -> List[NetworkEdge]:
        """Get all direct connections from a station"""
        return self.edges.get(station_id, [])

    def edges_between(self, from_station_id: int, to_station_id: int) -> List[NetworkEdge]:
        """Get every parallel edge from one station to another"""
        return [
            edge for edge in self.get_neighbors(from_station_id)
            if edge.to_station_id == to_station_id
        ]

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return sum(len(edges) for edges in self.edges.values())


class NetworkGraphBuilder:
    """Builds a fresh NetworkGraph from line and station snapshots"""

    @staticmethod
    def build(
        lines: Iterable[Line],
        stations: Iterable[Station],
        metric: EdgeWeight,
        bidirectional: bool = False
    ) -> NetworkGraph:
        graph = NetworkGraph()
        for station in stations:
            graph.add_node(station)

        for line in lines:
            for section in line.sections:
                NetworkGraphBuilder._require_station(graph, section.station_id, line)
                if section.pre_station_id is None:
                    continue
                NetworkGraphBuilder._require_station(graph, section.pre_station_id, line)

                weight = metric.weight_of(section)
                graph.add_edge(NetworkEdge(
                    from_station_id=section.pre_station_id,
                    to_station_id=section.station_id,
                    weight=weight,
                    section=section
                ))
                if bidirectional:
                    graph.add_edge(NetworkEdge(
                        from_station_id=section.station_id,
                        to_station_id=section.pre_station_id,
                        weight=weight,
                        section=section
                    ))

        logger.debug(
            f"Built network graph by {metric.value}: "
            f"{graph.node_count()} stations, {graph.edge_count()} edges"
        )
        return graph

    @staticmethod
    def _require_station(graph: NetworkGraph, station_id: int, line: Line):
        if not graph.has_node(station_id):
            raise StationNotFoundError(
                f"Line '{line.name}' references unknown station {station_id}"
            )
