from functools import lru_cache
from urllib.parse import urlparse

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BSH_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_env: str = "local"
    host: str = ""
    api_key: str = ""
    jwt_token: str = ""
    refresh_token: str = ""
    timeout_seconds: float = 30.0
    log_level: str = "INFO"

    @model_validator(mode="after")
    def validate_connection(self) -> "Settings":
        if self.timeout_seconds <= 0:
            raise ValueError("BSH_TIMEOUT_SECONDS must be greater than 0.")

        host = self.host.strip()
        if host:
            parsed = urlparse(host)
            if parsed.scheme not in {"http", "https"} or not parsed.hostname:
                raise ValueError("BSH_HOST must be an absolute http(s) URL.")
            self.host = host.rstrip("/")

        if self.app_env.lower() != "production":
            return self

        if not self.host:
            raise ValueError("Production requires BSH_HOST.")
        if urlparse(self.host).scheme != "https":
            raise ValueError("Production requires BSH_HOST to use https.")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
