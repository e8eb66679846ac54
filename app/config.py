# app/config.py
from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    ENV: str = "development"

    # Explicit async URL wins over everything below
    DATABASE_URL: Optional[str] = None

    # TiDB (used when host/db/user/password are all set)
    TIDB_HOST: Optional[str] = None
    TIDB_PORT: int = 4000
    TIDB_DB: Optional[str] = None
    TIDB_USER: Optional[str] = None
    TIDB_PASSWORD: Optional[str] = None
    TIDB_POOL_SIZE: int = 5
    TIDB_MAX_OVERFLOW: int = 10

    # 🔐 TLS (used in db.py)
    TIDB_SSL_CA: Optional[str] = None
    TIDB_SSL_VERIFY_CERT: bool = True
    TIDB_SSL_VERIFY_IDENTITY: bool = True

    # Local fallback
    SQLITE_PATH: str = "./students.db"
    SQL_ECHO: bool = False

    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: str = "*"

    class Config:
        env_file = ".env"

    @property
    def tidb_configured(self) -> bool:
        return all([self.TIDB_HOST, self.TIDB_DB, self.TIDB_USER, self.TIDB_PASSWORD])

    @property
    def allowed_origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()] or ["*"]

settings = Settings()
