from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from subway import models
from subway.exceptions import DuplicateStationNameError, StationInUseError, StationNotFoundError
from subway.lines.service import LineService
from subway.paths.schemas import Station

logger = logging.getLogger(__name__)

class StationService:
    """Station lookup backed by the database, returning read-only snapshots"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_station_by_id(self, station_id: int) -> Optional[Station]:
        """Get station by ID"""
        station = self.db.query(models.Station).filter(models.Station.id == station_id).first()
        return Station.model_validate(station) if station else None
    
    def get_station_by_name(self, name: str) -> Optional[Station]:
        """Get station by its exact name"""
        station = self.db.query(models.Station).filter(models.Station.name == name).first()
        return Station.model_validate(station) if station else None
    
    def get_all_stations(self) -> List[Station]:
        """Get every station ordered by ID"""
        stations = self.db.query(models.Station).order_by(models.Station.id).all()
        return [Station.model_validate(station) for station in stations]
    
    def create_station(self, name: str) -> Station:
        """Create a station with a unique name"""
        existing = self.db.query(models.Station).filter(models.Station.name == name).first()
        if existing:
            raise DuplicateStationNameError(f"Station '{name}' already exists")
        
        station = models.Station(name=name)
        self.db.add(station)
        self.db.commit()
        self.db.refresh(station)
        logger.info(f"Created station {station.name}({station.id})")
        return Station.model_validate(station)
    
    def delete_station(self, station_id: int):
        """Delete a station that no line stops at"""
        station = self.db.query(models.Station).filter(models.Station.id == station_id).first()
        if not station:
            raise StationNotFoundError(f"Station with ID {station_id} not found")

        lines = LineService(self.db).get_lines_with_station(station_id)
        if lines:
            names = ", ".join(line.name for line in lines)
            raise StationInUseError(f"Station {station.name} is still used by: {names}")

        self.db.delete(station)
        self.db.commit()
        logger.info(f"Deleted station {station_id}")
