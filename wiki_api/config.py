"""
Configuration management for the wiki API.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class ConfigurationError(Exception):
    """Raised when required configuration is missing or malformed."""
    pass


def _to_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == 'true'
    return bool(value)


class Config:
    """Configuration class for application settings."""

    # MongoDB Configuration
    MONGODB_URI = os.getenv('MONGODB_URI', 'mongodb://localhost:27017/')
    MONGODB_DB = os.getenv('MONGODB_DB', 'wikiDB')
    MONGODB_TIMEOUT_MS = os.getenv('MONGODB_TIMEOUT_MS', '5000')

    # Server Configuration
    WIKI_HOST = os.getenv('WIKI_HOST', '0.0.0.0')
    WIKI_PORT = os.getenv('WIKI_PORT', '3000')
    WIKI_DEBUG = _to_bool(os.getenv('WIKI_DEBUG', 'false'))

    # Use 404/500 instead of answering every request with 200
    WIKI_STRICT_STATUS = _to_bool(os.getenv('WIKI_STRICT_STATUS', 'false'))

    WIKI_LOG_FILE = os.getenv('WIKI_LOG_FILE')

    # Static files served at the URL root
    STATIC_FOLDER = os.path.join(os.path.dirname(__file__), 'public')

    @classmethod
    def as_dict(cls) -> dict:
        """Return the settings as a dict suitable for ``app.config.update``."""
        return {
            key: getattr(cls, key)
            for key in dir(cls)
            if key.isupper()
        }

    @staticmethod
    def validate(settings: dict) -> dict:
        """
        Validate settings and coerce numeric and boolean values.

        Args:
            settings: Mapping of configuration keys to raw values

        Returns:
            A copy of ``settings`` with numeric values converted to int
            and flags converted to bool

        Raises:
            ConfigurationError: If required configuration is missing or invalid
        """
        required_vars = ('MONGODB_URI', 'MONGODB_DB', 'WIKI_HOST', 'WIKI_PORT')
        missing = [var for var in required_vars if not settings.get(var)]

        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}. "
                f"Please check your .env file."
            )

        validated = dict(settings)
        for var in ('WIKI_PORT', 'MONGODB_TIMEOUT_MS'):
            try:
                validated[var] = int(settings[var])
            except (TypeError, ValueError):
                raise ConfigurationError(f"{var} must be an integer, got {settings.get(var)!r}")

        for var in ('WIKI_DEBUG', 'WIKI_STRICT_STATUS'):
            validated[var] = _to_bool(settings.get(var, False))

        return validated
