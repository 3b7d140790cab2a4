"""Database engine, session factory and request-scoped session dependency.

Route handlers are ``async def`` and use these synchronous sessions directly,
so a request's reads and writes never interleave with another request's on the
event loop. This fits the default in-memory SQLite store, where every session
shares one connection. Against a server database each query blocks the loop
for its duration. Serving such a deployment with several worker processes
(``uvicorn --workers``) keeps requests flowing, and balance updates stay
guarded by the ``SELECT ... FOR UPDATE`` row locks the services take.
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def build_engine(database_url: str, *, echo: bool = False) -> Engine:
    """Create an engine, pinning in-memory SQLite to a single shared connection."""

    url = make_url(database_url)
    options = {"future": True, "echo": echo}
    if url.get_backend_name() == "sqlite":
        options["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            # every session must see the same in-memory database
            options["poolclass"] = StaticPool
    return create_engine(url, **options)


class Database:
    """Owns the engine and session factory for one application instance."""

    def __init__(self, database_url: str, *, echo: bool = False) -> None:
        self.engine = build_engine(database_url, echo=echo)
        self._session_factory = sessionmaker(bind=self.engine, autoflush=False, future=True)

    def create_all(self) -> None:
        # models must be imported so their tables are registered on Base
        from .. import models  # noqa: F401

        Base.metadata.create_all(self.engine)

    def session(self) -> Session:
        return self._session_factory()

    def dispose(self) -> None:
        self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[Session, None]:
    """Yield a database session for request lifetime."""

    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    finally:
        db.close()
