from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Registration API"
    API_PREFIX: str = "/api"
    DATABASE_URL: str = "sqlite+aiosqlite:///./users.db"
    DATABASE_ECHO: bool = False
    SECRET_KEY: str  # required, signs the session cookie
    SESSION_COOKIE: str = "session"
    SESSION_MAX_AGE: int = 14 * 24 * 60 * 60  # two weeks
    BCRYPT_ROUNDS: int = 12
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
