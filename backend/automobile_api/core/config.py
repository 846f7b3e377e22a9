from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # Application
    PROJECT_NAME: str = "Automobile API"
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = [
        "http://localhost",
        "http://localhost:3000",
        "*"  # For development only - restrict in production
    ]
    GRAPHIQL: bool = True

    # Database
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "postgres"

    # Full connection URL, takes precedence over the DB_* fields when set
    DATABASE_URL: Optional[str] = None

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    RELOAD: bool = False

    # Bulk loader
    LOADER_CSV_PATH: str = "Automobile_data.csv"

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    class Config:
        # This tells Pydantic to load the variables from a .env file
        env_file = ".env"
        extra = "ignore"

# Create a single settings instance to be used across the application
settings = Settings()
