from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    app_env: str = Field(default="development")
    log_level: str = Field(default="info")

    # Upstream blog posts API
    upstream_url: str = Field(default="https://api.hatchways.io/assessment/blog/posts")
    upstream_timeout_seconds: float = Field(default=10.0)

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


settings = Settings()
