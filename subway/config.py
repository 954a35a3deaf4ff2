from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./subway.db"
    
    # Application
    PROJECT_NAME: str = "Subway Route Finder"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # Route planning
    BIDIRECTIONAL_SECTIONS: bool = False
    
    # Fare policy: "flat", "distance" or "line_surcharge"
    FARE_POLICY: str = "distance"
    FLAT_FARE: int = 1250
    BASE_FARE: int = 1250
    BASE_FARE_DISTANCE: int = 10
    MIDDLE_FARE_DISTANCE_LIMIT: int = 50
    MIDDLE_FARE_UNIT: int = 5
    LONG_FARE_UNIT: int = 8
    EXTRA_FARE_PER_UNIT: int = 100
    
    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")
    
    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
