"""Session storage for the last form inputs and theme.

The web app remembers, per browser session, the last inputs a user typed and
the theme they picked. Storage is meant to last only as long as the process:
the default URL ``sqlite://`` is an in-memory SQLite database shared through a
single static connection, so everything is gone after a restart. Any
SQLAlchemy URL can be passed instead, but a file or server database makes the
data outlive the process, which is logged as a warning.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import Column, DateTime, String, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()

MEMORY_URL = "sqlite://"

STORED_FIELDS = ("principal", "interest_rate", "loan_term", "mortgage_type", "theme")


class SessionStateModel(Base):
    __tablename__ = "session_state"

    user_token = Column(String(64), primary_key=True)
    principal = Column(String(64), nullable=False, default="")
    interest_rate = Column(String(64), nullable=False, default="")
    loan_term = Column(String(64), nullable=False, default="")
    mortgage_type = Column(String(32), nullable=False, default="fixed")
    theme = Column(String(16), nullable=False, default="light")
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


def _is_memory_url(url: str) -> bool:
    return url in (MEMORY_URL, "sqlite:///:memory:")


class SessionStore:
    """Key-value store of form state keyed by user token."""

    def __init__(self, url: str = MEMORY_URL) -> None:
        if _is_memory_url(url):
            self._engine = create_engine(
                url,
                future=True,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            logger.warning("Session store at %s will persist beyond the process lifetime", url)
            self._engine = create_engine(url, future=True)
        Base.metadata.create_all(self._engine)
        self._session_factory = sessionmaker(self._engine, expire_on_commit=False, future=True)

    def save(self, user_token: str, record: Dict[str, Any]) -> None:
        if not user_token:
            return
        values = {field: str(record.get(field) or "") for field in STORED_FIELDS}
        with self._session_factory() as session:
            row = session.get(SessionStateModel, user_token)
            if row is None:
                row = SessionStateModel(user_token=user_token)
                session.add(row)
            for field, value in values.items():
                setattr(row, field, value)
            session.commit()
        logger.debug("Saved session state for %s", user_token)

    def load(self, user_token: str) -> Optional[Dict[str, str]]:
        if not user_token:
            return None
        with self._session_factory() as session:
            row = session.get(SessionStateModel, user_token)
            if row is None:
                return None
            return self._to_dict(row)

    def clear(self, user_token: str) -> None:
        if not user_token:
            return
        with self._session_factory() as session:
            row = session.get(SessionStateModel, user_token)
            if row is not None:
                session.delete(row)
                session.commit()

    @staticmethod
    def _to_dict(row: SessionStateModel) -> Dict[str, str]:
        return {field: getattr(row, field) for field in STORED_FIELDS}


def create_store_from_env(url: str | None) -> SessionStore:
    store = SessionStore(url or MEMORY_URL)
    logger.info("Session store ready (%s)", url or MEMORY_URL)
    return store
