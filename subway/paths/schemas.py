from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Tuple
from enum import Enum

from subway.exceptions import InvalidLineError, InvalidSectionError, StationNotFoundError

class Station(BaseModel):
    """Read-only snapshot of a station"""
    id: int
    name: str

    class Config:
        frozen = True
        from_attributes = True

class Section(BaseModel):
    """Link between two adjacent stations of one line.

    A section whose ``pre_station_id`` is None marks the first station of
    its line and does not connect anything.
    """
    line_id: int
    pre_station_id: Optional[int] = None
    station_id: int
    distance: int = Field(gt=0)
    duration: int = Field(gt=0)

    class Config:
        frozen = True
        from_attributes = True

class Line(BaseModel):
    """Read-only snapshot of a line and its chain of sections"""
    id: int
    name: str
    color: Optional[str] = None
    extra_fare: int = Field(0, ge=0)
    sections: Tuple[Section, ...] = ()

    class Config:
        frozen = True
        from_attributes = True

    def ordered_sections(self) -> List[Section]:
        """Sections in travel order, starting from the first station"""
        if not self.sections:
            return []

        heads = [section for section in self.sections if section.pre_station_id is None]
        if len(heads) != 1:
            raise InvalidLineError(
                f"Line '{self.name}' must have exactly one first station, found {len(heads)}"
            )

        next_by_pre: Dict[int, Section] = {}
        for section in self.sections:
            if section.pre_station_id is None:
                continue
            if section.pre_station_id in next_by_pre:
                raise InvalidLineError(
                    f"Line '{self.name}' branches after station {section.pre_station_id}"
                )
            next_by_pre[section.pre_station_id] = section

        ordered = [heads[0]]
        visited = {heads[0].station_id}
        while ordered[-1].station_id in next_by_pre:
            section = next_by_pre[ordered[-1].station_id]
            if section.station_id in visited:
                raise InvalidLineError(
                    f"Line '{self.name}' visits station {section.station_id} twice"
                )
            visited.add(section.station_id)
            ordered.append(section)

        if len(ordered) != len(self.sections):
            raise InvalidLineError(
                f"Line '{self.name}' has sections that cannot be reached from its first station"
            )
        return ordered

    def station_ids(self) -> List[int]:
        """Station ids in travel order"""
        return [section.station_id for section in self.ordered_sections()]

    def add_section(self, section: Section) -> "Line":
        """Return a copy of this line with ``section`` inserted.

        The section that used to follow ``section.pre_station_id`` is relinked
        to follow the new station instead, so inserting a section with no
        previous station makes it the new first station. In that case the
        old first section becomes the new-to-old link and takes the distance
        and duration of ``section``.
        """
        if section.line_id != self.id:
            raise InvalidSectionError(
                f"Section belongs to line {section.line_id}, not to line {self.id}"
            )

        station_ids = self.station_ids()
        if section.station_id in station_ids:
            raise InvalidSectionError(
                f"Station {section.station_id} is already on line '{self.name}'"
            )
        if section.pre_station_id is not None and section.pre_station_id not in station_ids:
            raise InvalidSectionError(
                f"Previous station {section.pre_station_id} is not on line '{self.name}'"
            )

        sections = []
        for existing in self.sections:
            if existing.pre_station_id == section.pre_station_id:
                relink = {"pre_station_id": section.station_id}
                if section.pre_station_id is None:
                    relink.update(distance=section.distance, duration=section.duration)
                existing = existing.model_copy(update=relink)
            sections.append(existing)
        sections.append(section)

        return self.model_copy(update={"sections": tuple(sections)})

    def remove_station(self, station_id: int) -> "Line":
        """Return a copy of this line without ``station_id``.

        The neighbours of a removed middle station are joined by one section
        covering the distance and duration of both.
        """
        ordered = self.ordered_sections()
        index = next(
            (i for i, section in enumerate(ordered) if section.station_id == station_id),
            None
        )
        if index is None:
            raise StationNotFoundError(f"Station {station_id} is not on line '{self.name}'")

        removed = ordered[index]
        sections = ordered[:index]

        if index + 1 < len(ordered):
            following = ordered[index + 1]
            if removed.pre_station_id is None:
                following = following.model_copy(update={"pre_station_id": None})
            else:
                following = following.model_copy(update={
                    "pre_station_id": removed.pre_station_id,
                    "distance": following.distance + removed.distance,
                    "duration": following.duration + removed.duration
                })
            sections.append(following)
            sections.extend(ordered[index + 2:])

        return self.model_copy(update={"sections": tuple(sections)})

class EdgeWeight(str, Enum):
    """Section attribute used as edge weight for one query"""
    DISTANCE = "DISTANCE"
    DURATION = "DURATION"

    def weight_of(self, section: Section) -> int:
        if self is EdgeWeight.DISTANCE:
            return section.distance
        return section.duration

class NetworkEdge(BaseModel):
    """Weighted edge of the network graph, keeping the section it came from"""
    from_station_id: int
    to_station_id: int
    weight: int
    section: Section

    class Config:
        frozen = True

class PathResult(BaseModel):
    """Shortest path found between two stations"""
    stations: List[Station]
    edges: List[NetworkEdge]
    distance: int
    duration: int
    line_ids: List[int] = []

    @property
    def station_names(self) -> List[str]:
        return [station.name for station in self.stations]

class PathResponse(BaseModel):
    """Response schema for a shortest path query"""
    stations: List[Station]
    distance: int
    duration: int
    fare: int
