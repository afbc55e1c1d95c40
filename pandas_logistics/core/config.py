import os
import json
from typing import List, Optional, Union

from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from pydantic import field_validator

project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
env_path = os.path.join(project_root, '.env')
load_dotenv(env_path)


class Settings(BaseSettings):
    # Basic settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "PANDAS Global Logistics"
    TAGLINE: str = "The Infrastructure of Trust"
    VERSION: str = "1.0.0"

    # Runtime environment, same variable name the deployment platform sets
    NODE_ENV: str = "development"

    # CORS settings
    CORS_ORIGINS: List[str] = ["*"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                if v.startswith("[") and v.endswith("]"):
                    v = v.strip("[]").strip()
                    if v:
                        return [i.strip().strip('"\'') for i in v.split(",")]
                    return []
                else:
                    return [i.strip() for i in v.split(",") if i.strip()]

        if isinstance(v, list):
            return v

        return []

    # Database settings
    DATABASE_URL: Optional[str] = None

    DB_DRIVER: str = "mysql+pymysql"
    DB_HOST: str = "localhost"
    DB_PORT: str = "3306"
    DB_USER: str = "root"
    DB_PASSWORD: str = "password"
    DB_NAME: str = "pandas_db"

    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_RECYCLE: int = 3600

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """
        Database URI, DATABASE_URL wins over the component settings.

        Heroku/Render style ``postgres://`` URLs are rewritten to the
        psycopg2 dialect name SQLAlchemy expects.
        """
        if self.DATABASE_URL:
            url = self.DATABASE_URL
            if url.startswith("postgres://"):
                url = "postgresql+psycopg2://" + url[len("postgres://"):]
            elif url.startswith("postgresql://"):
                url = "postgresql+psycopg2://" + url[len("postgresql://"):]
            return url

        return f"{self.DB_DRIVER}://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # Create missing tables at startup
    CREATE_TABLES: bool = True

    # Tracking lookups: "database" or "static"
    TRACKING_BACKEND: str = "database"

    # Waitlist signups are only logged unless this is switched on
    WAITLIST_PERSIST: bool = False

    USERS_LIST_LIMIT: int = 10

    # Server startup settings
    HOST: str = "0.0.0.0"
    PORT: int = 10000
    RELOAD: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    # Contact metadata shown on the welcome and info endpoints
    CONTACT_EMAIL: str = "sadick.faraji@pandas-global.com"
    WEBSITE_URL: str = "https://www.pandas-global.com"
    DOCUMENTATION_URL: str = "https://github.com/shiosamwanza-source/PANDAS-GLOBAL-LOGISTICS-LLC"

    @property
    def is_production(self) -> bool:
        return self.NODE_ENV.lower() == "production"

    class Config:
        case_sensitive = True
        env_file = ".env"
        extra = "ignore"


settings = Settings()
