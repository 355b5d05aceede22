"""Root settings model for lexintake configuration."""

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from lexintake.config.loader import config_files
from lexintake.config.models.observability import ObservabilityConfig
from lexintake.config.models.orchestrator import OrchestratorSettings


class Settings(BaseSettings):
    """Root configuration object.

    Configuration is loaded in this order:
    1. Pydantic model defaults (in code)
    2. config/default.toml (base configuration)
    3. config/{LEXINTAKE_ENV}.toml (environment overrides)
    4. LEXINTAKE_* environment variables (runtime overrides)
    """

    model_config = SettingsConfigDict(
        env_prefix="LEXINTAKE_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="lexintake", description="Application name for logging")

    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
        description="Observability configuration",
    )
    orchestrator: OrchestratorSettings = Field(
        default_factory=OrchestratorSettings,
        description="Intake orchestrator configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Put the TOML files under constructor arguments and env vars.

        One source per file, highest priority first, so nested tables from
        the environment file deep-merge over default.toml.
        """
        toml_sources = tuple(
            TomlConfigSettingsSource(settings_cls, toml_file=path)
            for path in reversed(config_files())
        )
        return (init_settings, env_settings, *toml_sources)
