#!/usr/bin/env python3

from datetime import time

from subway.database import Base, SessionLocal, engine
from subway.models import LineStation, Line, Station
from subway.lines.service import LineService
from subway.stations.service import StationService

# (name, color, extra fare, [(station, distance from previous, duration from previous)])
SEED_LINES = [
    ("Line 2", "bg-green-500", 0, [
        ("Gangnam", 10, 10),
        ("Yeoksam", 10, 10),
        ("Seolleung", 10, 10),
        ("Samseong", 10, 10),
        ("Sports Complex", 12, 8),
    ]),
    ("Shinbundang Line", "bg-red-600", 900, [
        ("Gangnam", 10, 10),
        ("Yangjae", 12, 6),
        ("Yangjae Citizen's Forest", 14, 7),
    ]),
    ("Line 3", "bg-orange-500", 0, [
        ("Gyodae", 10, 10),
        ("Nambu Bus Terminal", 8, 4),
        ("Yangjae", 18, 9),
        ("Maebong", 6, 3),
    ]),
    ("Suin-Bundang Line", "bg-yellow-500", 0, [
        ("Seolleung", 10, 10),
        ("Seonjeongneung", 7, 5),
        ("Gangnam-gu Office", 8, 5),
    ]),
    ("Daegu Line 1", "bg-blue-600", 0, [
        ("Daegu", 10, 10),
        ("Dongdaegu", 9, 6),
    ]),
]

def create_seed_data():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    try:
        print("🚀 Creating seed data for the subway network...")

        # Clear existing data (in reverse dependency order)
        print("Clearing existing data...")
        db.query(LineStation).delete()
        db.query(Line).delete()
        db.query(Station).delete()
        db.commit()

        station_service = StationService(db)
        line_service = LineService(db)

        # 1. Create Stations
        print("Creating stations...")
        station_ids = {}
        for _, _, _, line_stations in SEED_LINES:
            for name, _, _ in line_stations:
                if name not in station_ids:
                    station_ids[name] = station_service.create_station(name).id

        # 2. Create Lines and their sections
        print("Creating lines...")
        for line_name, color, extra_fare, line_stations in SEED_LINES:
            line = line_service.create_line(
                name=line_name,
                color=color,
                start_time=time(5, 30),
                end_time=time(23, 30),
                interval_time=5,
                extra_fare=extra_fare
            )

            pre_station_id = None
            for name, distance, duration in line_stations:
                line_service.add_section(
                    line.id, pre_station_id, station_ids[name], distance, duration
                )
                pre_station_id = station_ids[name]

        print("✅ Successfully created seed data!")
        print(f"Created:")
        print(f"  - {len(station_ids)} stations")
        print(f"  - {len(SEED_LINES)} lines")

    except Exception as e:
        print(f"❌ Error creating seed data: {e}")
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == "__main__":
    create_seed_data()
