# cinereview/database/alembic/env.py
from __future__ import annotations

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool, text
from sqlalchemy.engine import Connection

from cinereview.common.settings import get_settings
from cinereview.database.core.main import app_schema
from cinereview.database.models import Base  # registers movie, review, user_profile

cfg = get_settings()
alembic_config = context.config

if alembic_config.config_file_name is not None:
    fileConfig(alembic_config.config_file_name)

target_metadata = Base.metadata
schema = app_schema(cfg)
version_table_schema = cfg.alembic_version_table_schema


def _database_url() -> str:
    # precedence: `alembic -x url=...` > DATABASE_URL > settings
    x_args = context.get_x_argument(as_dictionary=True)
    return x_args.get("url") or os.getenv("DATABASE_URL") or cfg.database_url


def include_object(object, name, type_, reflected, compare_to):
    """Autogenerate only looks at our own tables."""
    if type_ != "table":
        return True
    return getattr(object, "schema", None) in {None, schema, version_table_schema}


def _configure(**kw) -> None:
    context.configure(
        target_metadata=target_metadata,
        include_schemas=schema is not None,
        include_object=include_object,
        version_table_schema=version_table_schema,
        **kw,
    )


def run_migrations_offline() -> None:
    _configure(url=_database_url(), literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def _prepare(conn: Connection) -> None:
    if schema:
        conn.execute(text(f'CREATE SCHEMA IF NOT EXISTS "{schema}"'))
        conn.execute(text(f'SET search_path TO "{schema}", public'))
    conn.execute(text('CREATE EXTENSION IF NOT EXISTS "pgcrypto"'))  # gen_random_uuid()


def run_migrations_online() -> None:
    connectable = create_engine(_database_url(), poolclass=pool.NullPool, future=True)
    with connectable.connect() as connection:
        _prepare(connection)
        _configure(connection=connection, compare_type=True, compare_server_default=True)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
