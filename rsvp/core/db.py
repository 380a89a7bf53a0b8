"""
Database engine, session factory and request-scoped session dependency
"""

from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

Base = declarative_base()

class Database:
    """Handle on the relational store.

    Owns the engine and the session factory. The application opens one at
    startup, keeps it on ``app.state.db`` and disposes it on shutdown.
    """

    def __init__(self, url: str):
        self.url = url
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        self.engine = create_engine(url, connect_args=connect_args)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self) -> None:
        """Create tables for every model registered on Base"""
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()

def get_db(request: Request) -> Iterator[Session]:
    """Yield a session bound to the application's store, closed after the request"""
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()
