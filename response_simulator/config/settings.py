"""Application configuration settings."""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Simulator settings and configuration."""

    # Server configuration
    HOST: str = os.getenv("SIMULATOR_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("SIMULATOR_PORT", "8080"))
    READ_HEADER_TIMEOUT: float = float(os.getenv("SIMULATOR_READ_HEADER_TIMEOUT", "5"))

    # Logging configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_JSON: bool = os.getenv("LOG_JSON", "true").lower() == "true"


settings = Settings()
