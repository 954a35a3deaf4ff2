from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import time

from subway.paths.schemas import Station

class LineCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    color: Optional[str] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    interval_time: Optional[int] = Field(None, gt=0)
    extra_fare: int = Field(0, ge=0)

class SectionCreate(BaseModel):
    """Request schema for adding a station to a line.

    With no ``pre_station_id`` the station becomes the new first station and
    ``distance``/``duration`` describe its link to the old first station.
    """
    pre_station_id: Optional[int] = None  # None inserts a new first station
    station_id: int
    distance: int = Field(..., gt=0)
    duration: int = Field(..., gt=0)

class LineResponse(BaseModel):
    id: int
    name: str
    color: Optional[str] = None
    extra_fare: int
    stations: List[Station]
