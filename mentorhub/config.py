from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./mentorhub.db"

    # Session cookie (signed JWT carrying the user id)
    SECRET_KEY: str = "s3cr3t"
    ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "__session"
    SESSION_MAX_AGE_SECONDS: int = 60 * 60 * 24 * 7

    # Application
    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cookie_secure(self) -> bool:
        return self.APP_ENV.strip().lower() == "production"


settings = Settings()
