from fastapi import APIRouter, Depends, status
from typing import List

from subway.dependencies import get_line_service, get_station_service, to_http_exception
from subway.exceptions import SubwayException
from subway.lines.schemas import LineCreate, LineResponse, SectionCreate
from subway.lines.service import LineService
from subway.paths.schemas import Line
from subway.stations.service import StationService

router = APIRouter()

def _to_response(line: Line, station_service: StationService) -> LineResponse:
    stations = {station.id: station for station in station_service.get_all_stations()}
    return LineResponse(
        id=line.id,
        name=line.name,
        color=line.color,
        extra_fare=line.extra_fare,
        stations=[stations[station_id] for station_id in line.station_ids()]
    )

@router.get("/", response_model=List[LineResponse])
def get_lines(
    line_service: LineService = Depends(get_line_service),
    station_service: StationService = Depends(get_station_service)
):
    """Get all lines with their stations in travel order"""
    try:
        return [_to_response(line, station_service) for line in line_service.get_all_lines()]
    except SubwayException as e:
        raise to_http_exception(e)

@router.get("/{line_id}", response_model=LineResponse)
def get_line(
    line_id: int,
    line_service: LineService = Depends(get_line_service),
    station_service: StationService = Depends(get_station_service)
):
    """Get a line with its stations in travel order"""
    try:
        return _to_response(line_service.get_line(line_id), station_service)
    except SubwayException as e:
        raise to_http_exception(e)

@router.post("/", response_model=LineResponse, status_code=status.HTTP_201_CREATED)
def create_line(
    request: LineCreate,
    line_service: LineService = Depends(get_line_service),
    station_service: StationService = Depends(get_station_service)
):
    """Create a new line without stations"""
    try:
        line = line_service.create_line(**request.model_dump())
        return _to_response(line, station_service)
    except SubwayException as e:
        raise to_http_exception(e)

@router.post("/{line_id}/sections", response_model=LineResponse)
def add_section(
    line_id: int,
    request: SectionCreate,
    line_service: LineService = Depends(get_line_service),
    station_service: StationService = Depends(get_station_service)
):
    """Add a station to a line after the given previous station"""
    try:
        line = line_service.add_section(
            line_id,
            request.pre_station_id,
            request.station_id,
            request.distance,
            request.duration
        )
        return _to_response(line, station_service)
    except SubwayException as e:
        raise to_http_exception(e)

@router.delete("/{line_id}/stations/{station_id}", response_model=LineResponse)
def remove_station(
    line_id: int,
    station_id: int,
    line_service: LineService = Depends(get_line_service),
    station_service: StationService = Depends(get_station_service)
):
    """Take a station off a line"""
    try:
        line = line_service.remove_station(line_id, station_id)
        return _to_response(line, station_service)
    except SubwayException as e:
        raise to_http_exception(e)
