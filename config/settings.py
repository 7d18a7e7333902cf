"""Configuration settings for the appointment calendar."""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration from environment variables."""

    # Logging Configuration
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FILE: str = os.getenv('LOG_FILE', 'logs/calendar.log')

    # Storage Configuration
    APPOINTMENTS_STORAGE_KEY: str = os.getenv('APPOINTMENTS_STORAGE_KEY', 'appointments')
    APPOINTMENTS_FILE: str = os.getenv('APPOINTMENTS_FILE', 'data/appointments.json')

    # Calendar Rules
    DATE_KEY_FORMAT: str = os.getenv('DATE_KEY_FORMAT', '{month}/{day}/{year}')

    @classmethod
    def validate(cls) -> bool:
        """Validate that the configured templates are usable."""
        try:
            cls.DATE_KEY_FORMAT.format(year=2024, month=1, day=1)
        except (KeyError, IndexError, ValueError) as e:
            print(f"ERROR: Invalid DATE_KEY_FORMAT {cls.DATE_KEY_FORMAT!r}: {e}")
            return False

        if not cls.APPOINTMENTS_STORAGE_KEY:
            print("ERROR: Missing required configuration: APPOINTMENTS_STORAGE_KEY")
            return False

        return True


# Global config instance
config = Config()
