# app/db.py
import ssl
import urllib.parse
from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession, AsyncEngine
from sqlalchemy.orm import DeclarativeBase
from app.config import Settings, settings

class Base(DeclarativeBase):
    pass

def _tidb_async_url(cfg: Settings) -> str:
    pwd = urllib.parse.quote_plus(cfg.TIDB_PASSWORD)
    return (
        f"mysql+asyncmy://{cfg.TIDB_USER}:{pwd}"
        f"@{cfg.TIDB_HOST}:{cfg.TIDB_PORT}/{cfg.TIDB_DB}"
        f"?charset=utf8mb4"
    )

def _tls_context(cfg: Settings) -> ssl.SSLContext:
    ctx = ssl.create_default_context()
    if cfg.TIDB_SSL_CA:
        ctx.load_verify_locations(cafile=cfg.TIDB_SSL_CA)
    ctx.check_hostname = bool(cfg.TIDB_SSL_VERIFY_IDENTITY)
    ctx.verify_mode = ssl.CERT_REQUIRED if cfg.TIDB_SSL_VERIFY_CERT else ssl.CERT_NONE
    return ctx

def database_url(cfg: Settings = settings) -> str:
    """
    DATABASE_URL if given, else TiDB when its TIDB_* vars are complete,
    else a local SQLite file.
    """
    if cfg.DATABASE_URL:
        return cfg.DATABASE_URL
    if cfg.tidb_configured:
        return _tidb_async_url(cfg)
    return f"sqlite+aiosqlite:///{cfg.SQLITE_PATH}"

def make_engine(url: Optional[str] = None, cfg: Settings = settings, **kwargs: Any) -> AsyncEngine:
    url = url or database_url(cfg)
    options: Dict[str, Any] = {"echo": cfg.SQL_ECHO}
    if url.startswith("mysql"):
        options.update(
            pool_pre_ping=True,
            pool_recycle=1800,
            pool_size=int(cfg.TIDB_POOL_SIZE),
            max_overflow=int(cfg.TIDB_MAX_OVERFLOW),
        )
        if cfg.tidb_configured and not cfg.DATABASE_URL:
            options["connect_args"] = {"ssl": _tls_context(cfg)}
    options.update(kwargs)
    return create_async_engine(url, **options)

def make_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

async def create_tables(engine: AsyncEngine) -> None:
    # quick start; no migrations
    from app import models  # noqa: F401  registers every table on Base.metadata

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
