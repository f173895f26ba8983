# Standard library imports
import os
from pathlib import Path
from typing import Final, List, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    Relative directories are resolved against the current working directory.
    """

    def __init__(self) -> None:
        # Storage Configuration
        self.data_dir: Final[Path] = Path(os.getenv("NEXTRA_DATA_DIR", "data")).resolve()
        self.uploads_dir: Final[Path] = Path(os.getenv("NEXTRA_UPLOADS_DIR", "uploads")).resolve()
        self.logs_file_name: Final[str] = os.getenv("NEXTRA_LOGS_FILE", "logs.json")
        self.verified_file_name: Final[str] = os.getenv("NEXTRA_VERIFIED_FILE", "verified.json")

        # Upload Configuration
        self.upload_max_mb: Final[int] = int(os.getenv("NEXTRA_UPLOAD_MAX_MB", "10"))

        # Frontend Configuration
        self.frontend_dir: Final[Path] = Path(os.getenv("NEXTRA_FRONTEND_DIR", "frontend")).resolve()

        # Server Configuration
        self.host: Final[str] = os.getenv("NEXTRA_HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("NEXTRA_PORT", "3000"))
        self.log_level: Final[str] = os.getenv("NEXTRA_LOG_LEVEL", "INFO").upper()
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("NEXTRA_CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]

    @property
    def logs_file(self) -> Path:
        """Path of the JSON array holding detection log entries"""
        return self.data_dir / self.logs_file_name

    @property
    def verified_file(self) -> Path:
        """Path of the JSON array holding verified users"""
        return self.data_dir / self.verified_file_name


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
