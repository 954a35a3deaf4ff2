from fastapi import APIRouter, Depends, status
from typing import List

from subway.dependencies import get_station_service, to_http_exception
from subway.exceptions import StationNotFoundError, SubwayException
from subway.paths.schemas import Station
from subway.stations.schemas import StationCreate
from subway.stations.service import StationService

router = APIRouter()

@router.get("/", response_model=List[Station])
def get_stations(station_service: StationService = Depends(get_station_service)):
    """Get all stations"""
    return station_service.get_all_stations()

@router.get("/{station_id}", response_model=Station)
def get_station(
    station_id: int,
    station_service: StationService = Depends(get_station_service)
):
    """Get a station by ID"""
    station = station_service.get_station_by_id(station_id)
    if not station:
        raise to_http_exception(StationNotFoundError(f"Station with ID {station_id} not found"))
    return station

@router.post("/", response_model=Station, status_code=status.HTTP_201_CREATED)
def create_station(
    request: StationCreate,
    station_service: StationService = Depends(get_station_service)
):
    """Create a new station"""
    try:
        return station_service.create_station(request.name)
    except SubwayException as e:
        raise to_http_exception(e)

@router.delete("/{station_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_station(
    station_id: int,
    station_service: StationService = Depends(get_station_service)
):
    """Delete a station that is not on any line"""
    try:
        station_service.delete_station(station_id)
    except SubwayException as e:
        raise to_http_exception(e)
