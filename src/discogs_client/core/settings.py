from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

DISCOGS_API = "https://api.discogs.com"


class DiscogsSettings(BaseSettings):
    """Options for a Discogs client, using Pydantic v2.

    Only the values passed to the constructor are used; the environment is
    never read here. `DiscogsEnvSettings` loads ``DISCOGS_*`` variables and
    ``.env`` instead. Nothing here is checked for consistency;
    `discogs_client.core.validation` does that when a client is built.
    """

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="DISCOGS_", extra="ignore", env_file=".env"
    )

    url: str = DISCOGS_API
    currency: str = ""
    user_agent: str = ""

    # Either a personal access token, or a consumer key/secret pair
    token: str = ""
    key: str = ""
    secret: str = ""

    # None waits forever
    timeout_seconds: float | None = 5.0
    # None leaves the level of the discogs_client logger to the application
    log_level: str | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str | None:
        if v is not None and v not in logging._nameToLevel:  # noqa: SLF001
            msg = f"Invalid log level: {v}"
            raise ValueError(msg)
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings,)


class DiscogsEnvSettings(DiscogsSettings):
    """`DiscogsSettings` read from ``DISCOGS_*`` environment variables and ``.env``."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (init_settings, env_settings, dotenv_settings, file_secret_settings)
