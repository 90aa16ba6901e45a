"""Application settings loaded from environment variables."""

from pydantic import model_validator
from pydantic_settings import BaseSettings

DEV_JWT_SECRET = "dev-secret-change-in-production"


class Settings(BaseSettings):
    # Server
    PORT: int = 5000
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Storage
    DATABASE_PATH: str = "./data/app.db"

    # JWT
    JWT_SECRET: str = DEV_JWT_SECRET
    JWT_EXPIRE_DAYS: int = 7

    # LLM
    LLM_PROVIDER: str = "groq"
    GROQ_API_KEY: str = ""
    GOOGLE_AI_API_KEY: str = ""
    DEFAULT_MODEL: str = "llama-3.3-70b-versatile"
    GOOGLE_MODEL: str = "gemini-1.5-flash"
    # 0 replays the whole conversation history into every guidance call
    GUIDANCE_MAX_CONTEXT_TOKENS: int = 0

    # CORS
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    @property
    def allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

    @model_validator(mode="after")
    def _require_secret_in_production(self) -> "Settings":
        if self.ENVIRONMENT == "production" and self.JWT_SECRET == DEV_JWT_SECRET:
            raise ValueError("JWT_SECRET must be set when ENVIRONMENT=production")
        return self

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}
