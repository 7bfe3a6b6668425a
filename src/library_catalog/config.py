"""Configuration management for the library catalog.

Settings are read from ``LIBRARY_CATALOG_*`` environment variables or a
``.env`` file and validated with Pydantic v2. They cover:
1. Server Metadata - Name and version announced by the MCP server
2. Catalog Behaviour - How removal interacts with the borrowed set
3. Demo Data - Optional faker-generated catalog at startup
4. Observability - Log level and logfire switches
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogConfig(BaseSettings):
    """Library catalog configuration.

    Every field has a working default, so ``CatalogConfig()`` is enough for
    local use and tests. Environment variables override the defaults.
    """

    model_config = SettingsConfigDict(
        # Use LIBRARY_CATALOG_ prefix for all env vars
        env_prefix="LIBRARY_CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Server Metadata ===

    server_name: str = Field(
        default="library-catalog",
        description="MCP server name used in protocol handshake",
        pattern=r"^[a-z0-9-]+$",
    )

    server_version: str = Field(
        default="0.1.0",
        description="Server version for capability negotiation",
        pattern=r"^\d+\.\d+\.\d+(-[a-zA-Z0-9.]+)?$",
    )

    transport: str = Field(
        default="stdio",
        description="Transport the MCP server listens on",
        pattern=r"^stdio$",
    )

    # === Catalog Behaviour ===

    clear_borrowed_on_remove: bool = Field(
        default=True,
        description=(
            "Clear a book's borrowed flag when it is removed from the catalog, so a "
            "re-added book with the same ISBN starts out available"
        ),
    )

    # === Demo Data ===

    seed_demo_data: bool = Field(
        default=False,
        description="Fill the catalog with generated books and patrons at startup",
    )

    seed_book_count: int = Field(
        default=50,
        description="Number of generated books",
        ge=0,
        le=10_000,
    )

    seed_patron_count: int = Field(
        default=10,
        description="Number of generated patrons",
        ge=0,
        le=1_000,
    )

    seed_random_seed: int = Field(
        default=42,
        description="Seed for the demo data generator",
    )

    # === Development Configuration ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    # === Observability ===

    logfire_enabled: bool = Field(
        default=True,
        description="Configure logfire spans around catalog operations",
    )

    logfire_send: bool = Field(
        default=False,
        description="Ship spans to the logfire backend (needs LOGFIRE_TOKEN)",
    )

    logfire_console: bool = Field(
        default=False,
        description="Echo logfire spans to the console",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any letter case."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("server_name")
    @classmethod
    def validate_server_name(cls, v: str) -> str:
        """Keep server names short and readable."""
        if len(v) < 3:
            raise ValueError("Server name must be at least 3 characters")
        if len(v) > 50:
            raise ValueError("Server name must not exceed 50 characters")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.debug or self.log_level == "DEBUG"

    @property
    def server_info(self) -> dict[str, str]:
        """Get server information for the MCP handshake."""
        return {
            "name": self.server_name,
            "version": self.server_version,
            "transport": self.transport,
        }


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: CatalogConfig | None = None


def get_config() -> CatalogConfig:
    """Get or create the global configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = CatalogConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
