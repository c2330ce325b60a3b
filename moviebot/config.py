"""Configuration management for the movie catalog bot.

Handles all application configuration including environment variables, the
YAML catalog file and default settings. Provides structured configuration
classes for the Telegram side and the TMDB catalog side of the application.
"""

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from .exceptions import ConfigError

DEFAULT_LANGUAGES: Mapping[str, str] = MappingProxyType({
    "en": "English",
    "hi": "Hindi",
    "te": "Telugu",
    "ta": "Tamil",
    "kn": "Kannada",
    "ml": "Malayalam",
    "mr": "Marathi",
    "bn": "Bengali",
    "pa": "Punjabi",
})

DEFAULT_CATEGORIES: Mapping[str, str] = MappingProxyType({
    "bollywood": "hi",
    "hollywood": "en",
})


class BotConfig(BaseSettings):
    """Main Telegram bot configuration.

    Attributes:
        bot_token: Telegram bot API token from environment.
        port: Server port for webhook mode.
        railway_domain: Railway public domain for webhooks.
        railway_url: Railway URL for webhooks (fallback).
        listen_host: Interface the webhook server binds to.
        timeout: Telegram request timeout in seconds.
        log_level: Root logging level name.
    """
    bot_token: str = Field(..., min_length=1, validation_alias="BOT_TOKEN")
    port: int = Field(default=8000, validation_alias="PORT")
    railway_domain: str | None = Field(default=None, validation_alias="RAILWAY_PUBLIC_DOMAIN")
    railway_url: str | None = Field(default=None, validation_alias="RAILWAY_URL")
    listen_host: str = Field(default="127.0.0.1", validation_alias="BOT_LISTEN_HOST")
    timeout: float = Field(default=20.0, validation_alias="TELEGRAM_TIMEOUT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @property
    def webhook_domain(self) -> str | None:
        """Get webhook domain for Railway deployment.

        Returns:
            Domain string if available, None for polling mode.
        """
        return self.railway_domain or self.railway_url

    @property
    def use_webhook(self) -> bool:
        """Determine if webhook mode should be used.

        Returns:
            True if webhook domain is configured, False for polling mode.
        """
        return bool(self.webhook_domain)


class CatalogConfig(BaseSettings):
    """TMDB catalog access settings.

    Attributes:
        api_key: TMDB v3 API key from environment.
        base_url: TMDB REST API root.
        image_base: Prefix joined with poster paths to build photo URLs.
        timeout: Total timeout for one TMDB request in seconds.
        result_count: Maximum number of movies sent per category.
        page: Discover page requested for every category.
    """
    api_key: str = Field(..., min_length=1, validation_alias="TMDB_API_KEY")
    base_url: str = Field(default="https://api.themoviedb.org/3", validation_alias="TMDB_BASE_URL")
    image_base: str = Field(
        default="https://image.tmdb.org/t/p/w500", validation_alias="TMDB_IMAGE_BASE"
    )
    timeout: float = Field(default=10.0, gt=0, validation_alias="TMDB_TIMEOUT")
    result_count: int = Field(default=10, ge=1, validation_alias="CATALOG_RESULT_COUNT")
    page: int = Field(default=1, ge=1, validation_alias="CATALOG_PAGE")


def _describe_validation_error(error: ValidationError) -> str:
    """Summarise a settings validation error by environment variable name."""
    missing: list[str] = []
    invalid: list[str] = []
    for issue in error.errors():
        name = ".".join(str(part) for part in issue["loc"])
        if issue["type"] == "missing":
            missing.append(name)
        else:
            invalid.append(f"{name} ({issue['msg']})")

    parts = []
    if missing:
        parts.append("missing environment variables: " + ", ".join(missing))
    if invalid:
        parts.append("invalid values: " + ", ".join(invalid))
    return "; ".join(parts) or str(error)


def _load_table(data: dict, section: str, default: Mapping[str, str]) -> Mapping[str, str]:
    """Read a code -> name section from catalog YAML as a read-only mapping."""
    table = data.get(section) or default
    if not isinstance(table, Mapping):
        raise ConfigError(f"catalog.yml section {section!r} must be a mapping")
    return MappingProxyType({str(k).lower(): str(v) for k, v in table.items()})


class Config:
    """Application configuration manager.

    Centralizes loading of environment settings and the catalog YAML file.
    Provides typed access to configuration sections for different
    application components.
    """

    def __init__(self, config_dir: Path | None = None):
        """Initialize configuration manager.

        Args:
            config_dir: Path to configuration directory, defaults to moviebot/config.

        Raises:
            ConfigError: If a required secret is missing, a value is invalid
                or catalog.yml leaves a menu category without a language.
        """
        if config_dir is None:
            config_dir = Path(__file__).parent / "config"

        self.config_dir = Path(config_dir)

        problems: list[str] = []
        try:
            self.bot = BotConfig()
        except ValidationError as e:
            problems.append(_describe_validation_error(e))
        try:
            self.catalog = CatalogConfig()
        except ValidationError as e:
            problems.append(_describe_validation_error(e))
        if problems:
            raise ConfigError("Invalid configuration: " + "; ".join(problems))

        catalog_path = self.config_dir / "catalog.yml"
        catalog_data = {}
        if catalog_path.exists():
            with open(catalog_path, encoding="utf-8") as f:
                catalog_data = yaml.safe_load(f) or {}
            if not isinstance(catalog_data, dict):
                raise ConfigError(f"{catalog_path} must contain a mapping")

        self._languages = _load_table(catalog_data, "languages", DEFAULT_LANGUAGES)
        self._categories = _load_table(catalog_data, "categories", DEFAULT_CATEGORIES)

        # Every menu category needs a language filter
        missing = sorted(DEFAULT_CATEGORIES.keys() - self._categories.keys())
        if missing:
            raise ConfigError(
                f"{catalog_path.name} categories missing: " + ", ".join(missing)
            )

    @property
    def languages(self) -> Mapping[str, str]:
        """Read-only ISO 639-1 code to display name table."""
        return self._languages

    @property
    def categories(self) -> Mapping[str, str]:
        """Read-only menu category to original language table."""
        return self._categories


# Global configuration instance
config = Config()
