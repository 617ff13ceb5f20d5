from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+pysqlite:///./departments.db"
    DATABASE_ECHO: bool = False

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "[%(levelname)s] %(name)s: %(message)s"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

settings = Settings()
