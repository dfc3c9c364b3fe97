from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class Env(str, Enum):
    DEV = "dev"
    HML = "hml"
    PROD = "prod"


class Settings(BaseSettings):
    APP_ENV: Env = Env.DEV
    DEBUG: bool = False

    DATABASE_URL: str = "sqlite:///./students.db"

    LOG_JSON: bool = True
    LOG_LEVEL: str = "INFO"

    # Comma separated; each host is accepted over http and https
    ALLOWED_HOSTS: str = "localhost,127.0.0.1"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def allowed_origins(self) -> list[str]:
        origins: list[str] = []
        for host in self.ALLOWED_HOSTS.split(","):
            _host = host.strip()
            if not _host:
                continue
            if _host.startswith("http"):
                origins.append(_host)
            else:
                origins.append(f"http://{_host}")
                origins.append(f"https://{_host}")
        return origins


# cria instância global
settings = Settings()
