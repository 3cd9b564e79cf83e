"""Application configuration via Pydantic Settings.

These settings drive the HTTP and CLI surfaces only. Scoring weights and
thresholds are not read from the environment; they live in
``devmatch.domain.value_objects.weights.MatchingConfig``.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        validation_alias="CORS_ORIGINS",
    )

    # CSV exports used by the CLI
    tickets_csv_path: str = Field(default="data/tickets.csv", validation_alias="TICKETS_CSV_PATH")
    developers_csv_path: str = Field(
        default="data/developers.csv",
        validation_alias="DEVELOPERS_CSV_PATH",
    )

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
