from sqlalchemy.orm import Session, joinedload
from typing import List, Optional
from datetime import time
import logging

from subway import models
from subway.exceptions import (
    DuplicateLineNameError, LineNotFoundError, StationNotFoundError
)
from subway.paths.schemas import Line, Section

logger = logging.getLogger(__name__)

class LineService:
    """Line repository backed by the database.

    Reads return immutable ``Line`` snapshots. Edits go through the snapshot
    operations and then replace the line's stored sections.
    """
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_all_lines(self) -> List[Line]:
        """Get every line with its sections"""
        lines = self.db.query(models.Line).options(
            joinedload(models.Line.line_stations)
        ).order_by(models.Line.id).all()
        return [self._to_snapshot(line) for line in lines]
    
    def get_line(self, line_id: int) -> Line:
        """Get a single line with its sections"""
        return self._to_snapshot(self._get_line_row(line_id))
    
    def create_line(
        self,
        name: str,
        color: Optional[str] = None,
        start_time: Optional[time] = None,
        end_time: Optional[time] = None,
        interval_time: Optional[int] = None,
        extra_fare: int = 0
    ) -> Line:
        """Create a line without any station"""
        existing = self.db.query(models.Line).filter(models.Line.name == name).first()
        if existing:
            raise DuplicateLineNameError(f"Line '{name}' already exists")
        
        line = models.Line(
            name=name,
            color=color,
            start_time=start_time,
            end_time=end_time,
            interval_time=interval_time,
            extra_fare=extra_fare
        )
        self.db.add(line)
        self.db.commit()
        self.db.refresh(line)
        logger.info(f"Created line {line.name}({line.id})")
        return self._to_snapshot(line)
    
    def add_section(
        self,
        line_id: int,
        pre_station_id: Optional[int],
        station_id: int,
        distance: int,
        duration: int
    ) -> Line:
        """Insert a station after ``pre_station_id``, or as first station when it is None"""
        for referenced_id in (pre_station_id, station_id):
            if referenced_id is None:
                continue
            exists = self.db.query(models.Station.id).filter(models.Station.id == referenced_id).first()
            if not exists:
                raise StationNotFoundError(f"Station with ID {referenced_id} not found")
        
        line = self.get_line(line_id)
        updated = line.add_section(Section(
            line_id=line_id,
            pre_station_id=pre_station_id,
            station_id=station_id,
            distance=distance,
            duration=duration
        ))
        return self._replace_sections(updated)
    
    def remove_station(self, line_id: int, station_id: int) -> Line:
        """Take a station off a line, joining its neighbours"""
        line = self.get_line(line_id)
        return self._replace_sections(line.remove_station(station_id))
    
    def get_lines_with_station(self, station_id: int) -> List[Line]:
        """Get the lines that stop at a station"""
        return [
            line for line in self.get_all_lines()
            if any(section.station_id == station_id for section in line.sections)
        ]
    
    def _replace_sections(self, line: Line) -> Line:
        row = self._get_line_row(line.id)
        row.line_stations = [
            models.LineStation(
                pre_station_id=section.pre_station_id,
                station_id=section.station_id,
                distance=section.distance,
                duration=section.duration
            )
            for section in line.ordered_sections()
        ]
        self.db.commit()
        self.db.refresh(row)
        logger.info(f"Line {line.name}({line.id}) now has {len(row.line_stations)} stations")
        return self._to_snapshot(row)
    
    def _get_line_row(self, line_id: int) -> models.Line:
        line = self.db.query(models.Line).filter(models.Line.id == line_id).first()
        if not line:
            raise LineNotFoundError(f"Line with ID {line_id} not found")
        return line
    
    @staticmethod
    def _to_snapshot(line: models.Line) -> Line:
        return Line(
            id=line.id,
            name=line.name,
            color=line.color,
            extra_fare=line.extra_fare or 0,
            sections=tuple(
                Section(
                    line_id=line.id,
                    pre_station_id=line_station.pre_station_id,
                    station_id=line_station.station_id,
                    distance=line_station.distance,
                    duration=line_station.duration
                )
                for line_station in line.line_stations
            )
        )
