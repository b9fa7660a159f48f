import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    API_TITLE: str = "Rental Desk"
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # default backend for the command-line client
    API_URL: str = "http://localhost:8000"

    LOG_LEVEL: str = "INFO"
    SEED_SAMPLE_DATA: bool = True

    model_config = SettingsConfigDict(
        env_prefix="RENTAL_DESK_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
