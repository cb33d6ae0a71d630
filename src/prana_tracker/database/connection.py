from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool


@dataclass(frozen=True)
class DBConfig:
    url: str
    echo: bool = False


class DatabaseConnection:
    """Owns the SQLAlchemy engine for one database.

    Note: One instance is built per app (see container.py) and passed explicitly to
    every repository; there is no module-level handle.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._engine = self._create_engine(config)

    @staticmethod
    def _create_engine(config: DBConfig) -> Engine:
        url = make_url(config.url)
        kwargs: dict = {"echo": config.echo}

        if url.get_backend_name() == "sqlite":
            kwargs["connect_args"] = {"check_same_thread": False}
            if url.database in (None, "", ":memory:"):
                # In-memory SQLite lives only as long as its connection, share one.
                kwargs["poolclass"] = StaticPool

        return create_engine(url, **kwargs)

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def url(self) -> str:
        return self._engine.url.render_as_string(hide_password=True)

    def dispose(self) -> None:
        self._engine.dispose()
