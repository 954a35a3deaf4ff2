"""
Pytest configuration and shared fixtures
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from subway.database import Base, get_db
from subway.lines.service import LineService
from subway.main import app
from subway.paths.schemas import Line, Section, Station
from subway.stations.service import StationService


class InMemoryStationLookup:
    """Station lookup over a fixed list of snapshots"""

    def __init__(self, stations):
        self.stations = list(stations)

    def get_station_by_id(self, station_id):
        return next((s for s in self.stations if s.id == station_id), None)

    def get_station_by_name(self, name):
        return next((s for s in self.stations if s.name == name), None)

    def get_all_stations(self):
        return list(self.stations)


class InMemoryLineRepository:
    """Line repository over a fixed list of snapshots"""

    def __init__(self, lines):
        self.lines = list(lines)

    def get_all_lines(self):
        return list(self.lines)


@pytest.fixture
def stations():
    """Gangnam(1) .. Samseong(4) on line 2, Daegu(6) and Dongdaegu(7) on a separate line"""
    return [
        Station(id=1, name="Gangnam"),
        Station(id=2, name="Yeoksam"),
        Station(id=3, name="Seolleung"),
        Station(id=4, name="Samseong"),
        Station(id=6, name="Daegu"),
        Station(id=7, name="Dongdaegu"),
    ]


@pytest.fixture
def line_two():
    return Line(id=1, name="Line 2", sections=(
        Section(line_id=1, pre_station_id=None, station_id=1, distance=10, duration=10),
        Section(line_id=1, pre_station_id=1, station_id=2, distance=10, duration=10),
        Section(line_id=1, pre_station_id=2, station_id=3, distance=10, duration=10),
        Section(line_id=1, pre_station_id=3, station_id=4, distance=10, duration=10),
    ))


@pytest.fixture
def daegu_line():
    return Line(id=3, name="Daegu Line 1", sections=(
        Section(line_id=3, pre_station_id=None, station_id=6, distance=10, duration=10),
        Section(line_id=3, pre_station_id=6, station_id=7, distance=10, duration=10),
    ))


@pytest.fixture
def station_lookup(stations):
    return InMemoryStationLookup(stations)


@pytest.fixture
def line_repository(line_two, daegu_line):
    return InMemoryLineRepository([line_two, daegu_line])


@pytest.fixture
def db_session():
    """Session on a fresh in-memory SQLite database"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def seeded_db(db_session):
    """Database holding line 2 (Gangnam -> Samseong) and a disjoint Daegu line"""
    station_service = StationService(db_session)
    line_service = LineService(db_session)

    ids = {
        name: station_service.create_station(name).id
        for name in ["Gangnam", "Yeoksam", "Seolleung", "Samseong", "Daegu", "Dongdaegu"]
    }

    line = line_service.create_line(name="Line 2", color="bg-green-500")
    pre_station_id = None
    for name in ["Gangnam", "Yeoksam", "Seolleung", "Samseong"]:
        line_service.add_section(line.id, pre_station_id, ids[name], 10, 10)
        pre_station_id = ids[name]

    daegu = line_service.create_line(name="Daegu Line 1", color="bg-blue-600")
    line_service.add_section(daegu.id, None, ids["Daegu"], 10, 10)
    line_service.add_section(daegu.id, ids["Daegu"], ids["Dongdaegu"], 9, 6)

    return db_session, ids


@pytest.fixture
def client(seeded_db):
    """TestClient whose requests use the seeded database"""
    db, _ = seeded_db

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
