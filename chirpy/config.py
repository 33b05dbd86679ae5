"""
Configuration settings for Chirpy (Pydantic v2 compatible)
"""

import os
from typing import List, Optional
from pydantic import BaseModel, Field


class Settings(BaseModel):
    """API settings loaded from environment variables"""

    # API settings
    api_title: str = Field(default_factory=lambda: os.getenv("API_TITLE", "Chirpy"))
    api_version: str = Field(
        default_factory=lambda: os.getenv("API_VERSION", "1.0.0")
    )

    # Database settings. Without DB_URL users and chirps live in memory only
    db_url: Optional[str] = Field(default_factory=lambda: os.getenv("DB_URL") or None)

    # "dev" allows /admin/reset to wipe users
    platform: str = Field(default_factory=lambda: os.getenv("PLATFORM", ""))

    # Directory served under /app/
    filepath_root: str = Field(
        default_factory=lambda: os.getenv("FILEPATH_ROOT", ".")
    )

    # Server settings
    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("PORT", "8080")))

    # CORS settings - comma-separated list of allowed origins
    cors_origins: str = Field(
        default_factory=lambda: os.getenv(
            "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
        )
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Convert comma-separated origins string to a list"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_dev(self) -> bool:
        return self.platform == "dev"

    # Load environment variables from .env file
    def __init__(self, **data):
        from dotenv import load_dotenv

        load_dotenv()
        super().__init__(**data)


# Create a global settings instance
settings = Settings()
