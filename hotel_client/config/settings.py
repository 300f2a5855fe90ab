"""
Environment configuration for the hotel client.
Uses Pydantic's settings management to handle environment variables
with proper type validation and default values.
"""

import json
from typing import Any, Dict, Optional, Union
from pathlib import Path
from functools import lru_cache
from pydantic_settings import BaseSettings
from pydantic import validator
from dotenv import load_dotenv
from sqlalchemy.engine import URL, make_url

# Load environment variables from .env file if it exists
env_path = Path('.') / '.env'
load_dotenv(dotenv_path=env_path)


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Application configuration
    APP_NAME: str = "Hotel Client"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # Database configuration - support both individual fields and DATABASE_URL
    DATABASE_URL: Optional[str] = None
    DB_DRIVER: str = "postgresql+psycopg2"
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_NAME: str = "hotel"
    DB_ECHO: bool = False
    DB_CONNECT_ARGS: Dict[str, Any] = {}

    # Sequences backing generated identifiers
    USER_ID_SEQUENCE: str = "users_userid_seq"
    BOOKING_ID_SEQUENCE: str = "roombookings_bookingid_seq"
    REPAIR_ID_SEQUENCE: str = "roomrepairs_repairid_seq"

    # Business logic
    SEARCH_RADIUS: float = 30.0
    RECENT_LIMIT: int = 5
    PASSWORD_BCRYPT_ROUNDS: int = 12

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"

    @validator('DB_CONNECT_ARGS', pre=True)
    def parse_connect_args(cls, v: Union[str, Dict[str, Any]]) -> Dict[str, Any]:
        """Parse DB_CONNECT_ARGS from a JSON string"""
        if isinstance(v, str):
            return json.loads(v) if v.strip() else {}
        return v

    @validator('LOG_LEVEL')
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    def get_database_url(self) -> Union[str, URL]:
        """Construct database URL from components or use provided URL"""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        return URL.create(
            self.DB_DRIVER,
            username=self.DB_USER,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )

    def get_database_name(self) -> Optional[str]:
        """Database name for log and error messages"""
        if self.DATABASE_URL:
            return make_url(self.DATABASE_URL).database
        return self.DB_NAME

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.ENVIRONMENT == "production"

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.ENVIRONMENT == "development"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
