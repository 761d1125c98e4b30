"""
Core configuration for the Restaurant API
"""
from typing import List, Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # API Configuration
    PROJECT_NAME: str = "Restaurant API"
    API_V1_STR: str = "/api/v1"
    ACCESS_TOKEN_SECRET: str = "your-secret-key-here"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Database Configuration
    DB_USER: str = ""
    DB_PASS: str = ""
    DB_HOST: str = "cluster0.m81o4rz.mongodb.net"
    DB_NAME: str = "restaurantDb"
    MONGODB_URI: Optional[str] = None
    PURGE_ORPHANS_ON_STARTUP: bool = False

    # CORS Configuration
    ALLOWED_ORIGINS: List[str] = ["http://localhost:5173"]

    # Token cookie
    COOKIE_HTTPONLY: bool = True
    COOKIE_SECURE: bool = False
    COOKIE_SAMESITE: str = "lax"  # lax, strict, none

    # Server
    PORT: int = 5000

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def mongodb_uri(self) -> str:
        """Connection string, composed from the credentials unless MONGODB_URI is set"""
        if self.MONGODB_URI:
            return self.MONGODB_URI
        return (
            f"mongodb+srv://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASS)}"
            f"@{self.DB_HOST}/?retryWrites=true&w=majority"
        )


def get_settings() -> Settings:
    return Settings()
