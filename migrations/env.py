# migrations/env.py
from __future__ import annotations

import os
import sys
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

# --- Make project importable (run alembic from repo root) ---
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# --- Load env and inject DATABASE_URL into Alembic config ---
from dotenv import load_dotenv
load_dotenv()

from app.db.migration_config import ini_escape, load_migration_config  # noqa: E402

config = context.config
migration_config = load_migration_config()
db_url = migration_config.db_credentials.url
if db_url:
    config.set_main_option("sqlalchemy.url", ini_escape(db_url))

# --- Configure logging from alembic.ini ---
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

# --- Import Base + models so autogenerate can see tables ---
from app.db.base import Base  # noqa: E402
import app.models  # noqa: E402,F401

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode (no live DB connection)."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,  # detect type/nullable/length changes
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode (uses an Engine connection)."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,  # detect type/nullable/length changes
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
