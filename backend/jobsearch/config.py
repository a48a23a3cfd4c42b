from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_path: Path = Path.home() / "JobSearch"
    api_prefix: str = "/api/v1"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    echo_sql: bool = False

    @property
    def db_path(self) -> Path:
        return self.data_path / "jobsearch.sqlite"

    model_config = {"env_prefix": "JOBSEARCH_"}


settings = Settings()
