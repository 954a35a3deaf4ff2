from sqlalchemy import Column, Integer, String, DateTime, Time, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from subway.database import Base

# ================================
# Stations
# ================================
class Station(Base):
    __tablename__ = "stations"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    
    # Relationships
    line_stations = relationship(
        "LineStation", foreign_keys="LineStation.station_id", back_populates="station"
    )

# ================================
# Lines
# ================================
class Line(Base):
    __tablename__ = "lines"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False)
    color = Column(String(20))
    start_time = Column(Time)
    end_time = Column(Time)
    interval_time = Column(Integer)
    extra_fare = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    
    # Relationships
    line_stations = relationship(
        "LineStation",
        back_populates="line",
        cascade="all, delete-orphan",
        order_by="LineStation.id"
    )

# ================================
# Line Stations (sections between adjacent stations)
# ================================
class LineStation(Base):
    __tablename__ = "line_stations"
    
    id = Column(Integer, primary_key=True, index=True)
    line_id = Column(Integer, ForeignKey("lines.id"), nullable=False, index=True)
    pre_station_id = Column(Integer, ForeignKey("stations.id"), nullable=True)
    station_id = Column(Integer, ForeignKey("stations.id"), nullable=False, index=True)
    distance = Column(Integer, nullable=False)
    duration = Column(Integer, nullable=False)
    
    # Relationships
    line = relationship("Line", back_populates="line_stations")
    station = relationship("Station", foreign_keys=[station_id], back_populates="line_stations")
    pre_station = relationship("Station", foreign_keys=[pre_station_id])
