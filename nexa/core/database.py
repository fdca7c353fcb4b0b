# nexa/core/database.py
from collections.abc import Sequence
from typing import Any

from sqlalchemy import bindparam, create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base
from nexa.core.config import get_settings

settings = get_settings()


def build_engine(url: str, echo: bool = False) -> Engine:
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args, echo=echo, pool_pre_ping=True)


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)

Base = declarative_base()


class Store:
    """Runs one parameterized SQL statement per call.

    Placeholders are positional, written ``:1``, ``:2`` ... and bound from
    ``params`` in order. Every call checks out its own pooled connection and
    commits before handing it back, so a single Store is safe to share
    between concurrent requests.
    """

    def __init__(self, bind: Engine):
        self.engine = bind

    def execute(self, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        stmt = text(sql).bindparams(
            *(bindparam(str(pos), value) for pos, value in enumerate(params, start=1))
        )
        with self.engine.begin() as conn:
            result = conn.execute(stmt)
            if not result.returns_rows:
                return []
            return [dict(row) for row in result.mappings()]

    def ping(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))


store = Store(engine)


# Common DB dependency
def get_store() -> Store:
    return store
