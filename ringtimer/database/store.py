"""Preference store backed by the ``preferences`` table.

By default the table lives in ``ringtimer.db`` next to the JSON
preferences file; pass an engine to use any other database.
"""

from __future__ import annotations

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker

from ..storage import APP_SUPPORT_DIR
from .models import Base, Preference

DB_PATH = APP_SUPPORT_DIR / "ringtimer.db"


def open_database(url: str | None = None) -> Engine:
    """Engine for *url* (the on-disk file by default) with tables created."""
    if url is None:
        APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
        url = f"sqlite:///{DB_PATH}"
    engine = create_engine(url, echo=False)
    Base.metadata.create_all(engine)
    return engine


class DatabaseStore:
    """``get``/``set`` over SQLAlchemy; one row per key.

    Each call runs in its own transaction: committed when it returns,
    rolled back if it raises.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        self.engine = engine if engine is not None else open_database()
        self._sessions = sessionmaker(bind=self.engine, expire_on_commit=False)

    def get(self, key: str) -> str | None:
        with self._sessions.begin() as db:
            record = db.get(Preference, key)
            return record.value if record is not None else None

    def set(self, key: str, blob: str) -> None:
        with self._sessions.begin() as db:
            record = db.get(Preference, key)
            if record is None:
                db.add(Preference(key=key, value=blob))
            else:
                record.value = blob
