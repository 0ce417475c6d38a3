import os
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

_CONFIG_PATH = os.getenv("MCPLAYER_CONFIG", "config.toml")
_ENV_PATH = os.getenv("MCPLAYER_ENV", ".env")

# Steve
DEFAULT_SKIN_URL = "http://textures.minecraft.net/texture/1a4af718455d4aab528e7a61f86fa25e6a369d1768dcb13f7df319a713eb810b"


class MojangSettings(BaseModel):
    api_url: str = "https://api.mojang.com"
    session_url: str = "https://sessionserver.mojang.com"
    request_timeout_seconds: float = Field(default=10.0, gt=0)
    default_skin_url: str = DEFAULT_SKIN_URL


class AvatarSettings(BaseModel):
    head_size: int = Field(default=200, ge=1)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MCPLAYER_",
        env_nested_delimiter="__",
        toml_file=_CONFIG_PATH,
        env_file=_ENV_PATH,
        extra="ignore",
    )

    mojang: MojangSettings = Field(default_factory=MojangSettings)
    avatar: AvatarSettings = Field(default_factory=AvatarSettings)

    logs_dir: Path = Field(default=Path("logs"))
    log_to_file: bool = False
    log_to_stdout: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Source order: init args > OS env > .env > config.toml > secrets
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


settings = Settings()
