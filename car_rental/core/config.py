# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "Europe/Zurich")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Database Configuration
        self.database_url: Final[str] = os.getenv("DATABASE_URL", "sqlite:///./car_rental.db")
        self.database_echo: Final[bool] = _env_flag("DATABASE_ECHO", "false")
        self.database_auto_create: Final[bool] = _env_flag("DATABASE_AUTO_CREATE", "true")

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # GraphQL Configuration
        self.graphql_path: Final[str] = os.getenv("GRAPHQL_PATH", "/graphql")
        self.graphql_ide: Final[bool] = _env_flag("GRAPHQL_IDE", "true")

        # HTTP Server Configuration
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "4000"))

        # Password hashing cost for user accounts
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "12"))


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
