# database.py
"""
SQLAlchemy database connection and session management.

This module provides:
- Database engine configuration (explicit DATABASE_URL, Azure SQL via pymssql, or local SQLite)
- Session factory for dependency injection
- Connection utilities

Usage:
     from database import get_session

     # In FastAPI routes:
     @router.get("/items")
     def get_items(db: Session = Depends(get_session)):
          return db.query(Item).all()
"""
from contextlib import contextmanager
from typing import Generator
from urllib.parse import quote_plus

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

import config
from utils.logger import get_logger

logger = get_logger(__name__)


def build_database_url() -> str:
     """
     Resolve the database URL.

     Priority: DATABASE_URL, then the DB_* variables (MS SQL Server via pymssql),
     then a SQLite file next to the app.
     """
     if config.DATABASE_URL:
          return config.DATABASE_URL
     if config.DB_SERVER:
          safe_user = quote_plus(config.DB_USER or "")
          safe_pass = quote_plus(config.DB_PASS or "")
          return (
               f"mssql+pymssql://{safe_user}:{safe_pass}@{config.DB_SERVER}:{config.DB_PORT}/{config.DB_NAME}"
          )
     logger.warning("No database configured, using SQLite fallback: ./gallery.db")
     return "sqlite:///./gallery.db"


def create_db_engine(url: str) -> Engine:
     if url.startswith("sqlite"):
          # In-memory databases must share one connection across threads
          in_memory = url in ("sqlite://", "sqlite:///:memory:")
          return create_engine(
               url,
               connect_args={"check_same_thread": False},
               poolclass=StaticPool if in_memory else None,
               echo=config.SQL_ECHO,
          )
     return create_engine(
          url,
          poolclass=QueuePool,
          pool_size=5,
          max_overflow=10,
          pool_timeout=30,
          pool_recycle=1800,  # Recycle connections after 30 minutes
          pool_pre_ping=True,
          echo=config.SQL_ECHO,
     )


DATABASE_URL = build_database_url()

engine = create_db_engine(DATABASE_URL)

# Session factory
SessionLocal = sessionmaker(
     bind=engine,
     autocommit=False,
     autoflush=False,
     expire_on_commit=False,
)


def get_session() -> Generator[Session, None, None]:
     """
     FastAPI dependency that provides a database session.

     Commits when the request handler returns, rolls back if it raised.

     Yields:
          Session: SQLAlchemy database session
     """
     session = SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


@contextmanager
def get_session_context() -> Generator[Session, None, None]:
     """
     Context manager for database sessions (for use outside FastAPI routes).

     Usage:
          with get_session_context() as db:
               users = db.query(User).all()
     """
     session = SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


def init_db() -> None:
     """
     Initialize database tables.

     Creates all tables defined in the models if they don't exist.
     For production, use Alembic migrations instead.
     """
     from models import Base
     Base.metadata.create_all(bind=engine)


def drop_db() -> None:
     from models import Base
     Base.metadata.drop_all(bind=engine)


def check_connection() -> bool:
     """
     Test database connectivity.

     Returns:
          bool: True if connection successful, False otherwise
     """
     try:
          with engine.connect() as conn:
               conn.execute(text("SELECT 1"))
          return True
     except Exception as e:
          logger.error("Database connection failed: %s", e)
          return False
