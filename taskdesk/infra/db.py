from __future__ import annotations

from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker

from taskdesk.config import SETTINGS

Base = declarative_base()


def create_session_factory(database_url: str | None = None) -> sessionmaker:
    url = (database_url or SETTINGS.database_url).strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set. Create a .env file with your connection string.")
    engine = create_engine(url, pool_pre_ping=True)
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


def init_db(session_factory: sessionmaker) -> None:
    with session_factory() as session:
        session.execute(text("SELECT 1"))
