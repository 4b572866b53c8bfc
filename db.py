# db.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config import AppConfig

DB_URL = AppConfig.DB_URL


def make_engine(url: str):
    """Engine for ``url``; in-memory SQLite shares one connection across threads"""
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    if url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(url, echo=False, future=True,
                             connect_args=connect_args, poolclass=StaticPool)
    return create_engine(url, echo=False, future=True, connect_args=connect_args)


engine = make_engine(DB_URL)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

# Import AFTER engine so models bind to this MetaData one time
from models import Base  # noqa: E402


def get_session():
    return SessionLocal()


def make_session_factory(bind=None):
    """Session factory for another engine (tests, health check)"""
    return sessionmaker(bind=bind or engine, autoflush=False, autocommit=False, future=True)


def init_db(bind=None):
    Base.metadata.create_all(bind=bind or engine)
