"""Application settings and environment variables."""

import os

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


class Settings:
    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_DATABASE: str = os.getenv("DB_NAME", "inventory_db")
    DB_USER: str = os.getenv("DB_USER", "user")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "password")

    # Document store settings
    STORE_BACKEND: str = os.getenv("STORE_BACKEND", "memory")  # memory, mysql
    STORE_TABLE: str = os.getenv("STORE_TABLE", "pds_documents")

    # Identifier sanitization: "ascii" lower-cases A-Z only, "unicode" applies full case folding
    SANITIZE_MODE: str = os.getenv("SANITIZE_MODE", "ascii")

    APP_TIMEZONE: str = os.getenv("APP_TIMEZONE", "UTC")

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL


settings = Settings()
