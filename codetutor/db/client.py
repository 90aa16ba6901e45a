"""Database handle: one engine per process, one session per request."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from codetutor.db.models import Base

logger = logging.getLogger(__name__)


class Database:
    def __init__(self, path: str):
        self.path = path
        self.ready = False
        self.engine = create_engine(
            f"sqlite:///{path}",
            connect_args={"check_same_thread": False},
        )
        event.listen(self.engine, "connect", _enable_foreign_keys)
        self._sessionmaker = sessionmaker(bind=self.engine, expire_on_commit=False)

    def init_schema(self) -> None:
        """Create the storage directory and tables if they do not exist yet."""
        if self.path != ":memory:":
            Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        Base.metadata.create_all(self.engine)
        self.ready = True
        logger.info("Database initialized at %s", self.path)

    def dispose(self) -> None:
        self.ready = False
        self.engine.dispose()

    @contextmanager
    def session(self) -> Iterator[Session]:
        session = self._sessionmaker()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


def _enable_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()
