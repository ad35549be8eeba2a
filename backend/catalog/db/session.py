"""Engine and session factory configuration."""

from collections.abc import Generator
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from catalog.core.config import get_settings
from catalog.db.base import Base

logger = logging.getLogger(__name__)

settings = get_settings()


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine tuned for the target database.

    SQLite is used for local runs and tests: an in-memory database must share
    a single connection, otherwise every session would see an empty schema.
    Server databases get a pre-pinged, recycled connection pool.
    """
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        in_memory = url.database in (None, "", ":memory:")
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool if in_memory else None,
        )

    connect_args = {}
    if url.get_driver_name() == "psycopg":
        connect_args = {
            "connect_timeout": 10,
            "keepalives": 1,
            "keepalives_idle": 30,
            "keepalives_interval": 10,
            "keepalives_count": 5,
        }

    return create_engine(
        url,
        echo=echo,
        poolclass=QueuePool,
        pool_pre_ping=True,  # Test connections before using
        pool_recycle=1800,  # Recycle connections after 30 minutes
        pool_size=5,
        max_overflow=10,
        connect_args=connect_args,
    )


engine = build_engine(settings.database_url, echo=settings.sql_echo)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def init_db(bind: Engine | None = None) -> None:
    """Create missing tables for every registered model."""
    # Importing the models registers them on Base.metadata
    import catalog.db.models  # noqa: F401

    target = bind or engine
    Base.metadata.create_all(bind=target)
    logger.info(f"Database schema ready on {target.url.render_as_string(hide_password=True)}")


def get_db() -> Generator[Session, None, None]:
    """Yield a transactional session for the request lifecycle."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
