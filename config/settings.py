"""
Configuration settings for the customer table.
Loads from environment variables (and a local .env file) with sensible defaults.
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_READ_URL = "http://api-react-db.test/get_data.php"
DEFAULT_WRITE_URL = "http://api-react-db.test/add_data.php"


@dataclass
class Settings:
    """Main application settings."""
    # Customers API
    read_url: str = DEFAULT_READ_URL
    write_url: str = DEFAULT_WRITE_URL
    timeout: Optional[float] = None  # Seconds; None waits indefinitely

    # Logging
    log_level: str = "INFO"
    log_file: str = "customer_table.log"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        load_dotenv()
        timeout = os.getenv("CUSTOMERS_API_TIMEOUT", "").strip()
        return cls(
            read_url=os.getenv("CUSTOMERS_API_READ_URL", DEFAULT_READ_URL),
            write_url=os.getenv("CUSTOMERS_API_WRITE_URL", DEFAULT_WRITE_URL),
            timeout=float(timeout) if timeout else None,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("LOG_FILE", "customer_table.log"),
        )
