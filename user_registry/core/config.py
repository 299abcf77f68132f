# user_registry/core/config.py

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- Database Config ---
    DB_HOST: str
    DB_PORT: int = 5432
    DB_NAME: str
    DB_USER: str
    DB_PASS: str

    DB_POOL_MIN_SIZE: int = 5
    DB_POOL_MAX_SIZE: int = 20
    DB_TIMEOUT: int = 30

    # --- App Config ---
    LOG_LEVEL: str = "INFO"
    DEFAULT_MANAGER_COUNT: int = 2

    @property
    def asyncpg_url(self) -> str:
        return (
            f"postgresql://"
            f"{self.DB_USER}:{self.DB_PASS}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
