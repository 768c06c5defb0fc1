from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    name: str = Field(default="flashcard-import", alias="APP_NAME")
    version: str = Field(default="v1", alias="API_VERSION")
    port: int = Field(default=9000, alias="APP_PORT")
    mode: str = Field(default="prod", alias="MODE")

    @computed_field
    def is_production(self) -> bool:
        return self.mode != "dev"


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    level: str = Field(default="INFO", alias="LOG_LEVEL")
    format: str = Field(
        default=(
            "%(asctime)s | %(levelname)s | %(name)s | "
            "%(import_format)s %(file_name)s | %(message)s"
        ),
        alias="LOG_FORMAT",
    )


class ImportSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    # Upper bound on raw text accepted by the HTTP and CLI surfaces
    max_text_chars: int = Field(default=2_000_000, alias="IMPORT_MAX_TEXT_CHARS")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    app: AppSettings = Field(default_factory=lambda: AppSettings())
    logging: LoggingSettings = Field(default_factory=lambda: LoggingSettings())
    imports: ImportSettings = Field(default_factory=lambda: ImportSettings())


settings = Settings()
