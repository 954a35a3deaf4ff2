from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from subway.config import settings

connect_args = {"check_same_thread": False} if settings.is_sqlite else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    """Yield a session per request and close it afterwards"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
