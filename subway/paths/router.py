from fastapi import APIRouter, Depends, Query

from subway.dependencies import get_path_service, to_http_exception
from subway.exceptions import SubwayException
from subway.paths.schemas import EdgeWeight, PathResponse
from subway.paths.service import PathService

router = APIRouter()

@router.get("", response_model=PathResponse)
def find_path(
    source: int = Query(..., description="Origin station ID"),
    target: int = Query(..., description="Destination station ID"),
    type: EdgeWeight = Query(EdgeWeight.DISTANCE, description="Metric to minimize"),
    path_service: PathService = Depends(get_path_service)
):
    """Find the shortest path between two stations given by ID"""
    try:
        return path_service.find_shortest_path(source, target, type)
    except SubwayException as e:
        raise to_http_exception(e)

@router.get("/by-name", response_model=PathResponse)
def find_path_by_name(
    source: str = Query(..., min_length=1, description="Origin station name"),
    target: str = Query(..., min_length=1, description="Destination station name"),
    type: EdgeWeight = Query(EdgeWeight.DISTANCE, description="Metric to minimize"),
    path_service: PathService = Depends(get_path_service)
):
    """Find the shortest path between two stations given by name"""
    try:
        return path_service.find_shortest_path(source, target, type)
    except SubwayException as e:
        raise to_http_exception(e)
