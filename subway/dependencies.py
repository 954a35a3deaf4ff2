from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from subway.config import settings
from subway.database import get_db
from subway.exceptions import LineNotFoundError, StationNotFoundError, SubwayException
from subway.lines.service import LineService
from subway.paths.fare_service import create_fare_policy
from subway.paths.service import PathService
from subway.stations.service import StationService

NOT_FOUND_ERRORS = (StationNotFoundError, LineNotFoundError)

def get_station_service(db: Session = Depends(get_db)) -> StationService:
    return StationService(db)

def get_line_service(db: Session = Depends(get_db)) -> LineService:
    return LineService(db)

def get_path_service(db: Session = Depends(get_db)) -> PathService:
    """Path service over the request's own database session"""
    return PathService(
        station_lookup=StationService(db),
        line_repository=LineService(db),
        fare_policy=create_fare_policy(settings.FARE_POLICY, settings),
        bidirectional=settings.BIDIRECTIONAL_SECTIONS
    )

def to_http_exception(error: SubwayException) -> HTTPException:
    """Translate a domain error into a 404 or 400 response"""
    status_code = (
        status.HTTP_404_NOT_FOUND
        if isinstance(error, NOT_FOUND_ERRORS)
        else status.HTTP_400_BAD_REQUEST
    )
    return HTTPException(
        status_code=status_code,
        detail={"code": error.code, "message": error.message}
    )
