"""
Configuration management for TradeJournal.

Loads settings from environment variables and an optional JSON file.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Dict, Any

from dotenv import load_dotenv


@dataclass
class Config:
    """Application configuration."""

    # Database
    database_path: str = "data/trading_journal.db"

    # Logging
    log_level: str = "INFO"

    # Currency suggested when creating the profile
    default_currency: str = "USD"

    # Where CSV exports land when no path is given
    export_dir: str = "data"

    # Optional JSON override file
    config_file: Optional[str] = None

    @classmethod
    def _load_json(cls, json_path: Path) -> Dict[str, Any]:
        """Load JSON configuration file."""
        if not json_path.exists():
            raise FileNotFoundError(f"Config file not found: {json_path}")

        with open(json_path, 'r') as f:
            return json.load(f)

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Config":
        """
        Load configuration from environment variables.

        If TRADEJOURNAL_CONFIG points at a JSON file, its keys fill in
        anything the environment does not set.
        """
        if dotenv:
            load_dotenv()

        file_data: Dict[str, Any] = {}
        config_file = os.getenv("TRADEJOURNAL_CONFIG")
        if config_file:
            file_data = cls._load_json(Path(config_file))

        config = cls(
            database_path=os.getenv(
                "TRADEJOURNAL_DB_PATH",
                file_data.get("database_path", "data/trading_journal.db"),
            ),
            log_level=os.getenv(
                "TRADEJOURNAL_LOG_LEVEL", file_data.get("log_level", "INFO")
            ).upper(),
            default_currency=os.getenv(
                "TRADEJOURNAL_DEFAULT_CURRENCY",
                file_data.get("default_currency", "USD"),
            ).upper(),
            export_dir=os.getenv(
                "TRADEJOURNAL_EXPORT_DIR", file_data.get("export_dir", "data")
            ),
            config_file=config_file,
        )

        return config

    def configure_logging(self) -> None:
        """Set up root logging for scripts."""
        logging.basicConfig(
            level=getattr(logging, self.log_level, logging.INFO),
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def get_summary(self) -> str:
        """Get a summary of current settings."""
        return f"""Database: {self.database_path}
Log Level: {self.log_level}
Default Currency: {self.default_currency}
Export Directory: {self.export_dir}
Config File: {self.config_file or "-"}
"""
