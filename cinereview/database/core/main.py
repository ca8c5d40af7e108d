# cinereview/database/core/main.py
"""
Declarative base, engine and session factory.

Tables live in the configured schema (default "cinereview"). Every pooled
connection puts that schema first on its search_path so raw SQL and the
pgcrypto functions in public both resolve.
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy import Column, MetaData, Table, create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from cinereview.common.settings import Settings, get_settings

_settings = get_settings()

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# ServiceObject columns lead every table that carries them
_LEADING_COLUMNS = ("id", "date_created", "last_updated")


def app_schema(settings: Settings) -> Optional[str]:
    """None when the app shares `public`."""
    schema = settings.db_schema
    if not schema or schema.lower() == "public":
        return None
    return schema


class Base(DeclarativeBase):
    metadata = MetaData(schema=app_schema(_settings), naming_convention=NAMING_CONVENTION)

    @classmethod
    def __table_cls__(cls, name, metadata_obj, *items, **kw):
        cols = [x for x in items if isinstance(x, Column)]
        others = [x for x in items if not isinstance(x, Column)]
        rank = {n: i for i, n in enumerate(_LEADING_COLUMNS)}
        # stable: non-leading columns keep declaration order
        ordered = sorted(enumerate(cols), key=lambda t: (rank.get(t[1].name, len(rank)), t[0]))
        return Table(name, metadata_obj, *(c for _, c in ordered), *others, **kw)


def build_engine(settings: Settings) -> Engine:
    eng = create_engine(
        settings.database_url,
        echo=settings.db.echo,
        pool_size=settings.db.pool_size,
        max_overflow=settings.db.max_overflow,
        pool_pre_ping=settings.db.pool_pre_ping,
        pool_recycle=settings.db.pool_recycle,
        future=True,
    )
    schema = app_schema(settings)
    if schema:
        @event.listens_for(eng, "connect")
        def _set_search_path(dbapi_conn, _record):
            with dbapi_conn.cursor() as cur:
                cur.execute(f'SET search_path TO "{schema}", public')
    return eng


engine = build_engine(_settings)

# autoflush off: repos flush explicitly where ordering matters
SessionLocal = sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)
