# app/db/migration_config.py
"""
Where Alembic writes revisions, which models it diffs against, the target
dialect, and the connection string it migrates.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from alembic.config import Config

PROJECT_ROOT = Path(__file__).resolve().parents[2]

MIGRATIONS_OUT = "./migrations"
SCHEMA_PATH = "./app/models/user.py"
DIALECT = "postgresql"


def ini_escape(value: str) -> str:
    """ConfigParser interpolation: a literal "%" must be doubled."""
    return value.replace("%", "%%")


@dataclass(frozen=True)
class DbCredentials:
    url: str | None


@dataclass(frozen=True)
class MigrationConfig:
    out: str
    schema: str
    dialect: str
    db_credentials: DbCredentials

    def alembic_config(self, ini_path: str | os.PathLike | None = None) -> Config:
        """Alembic Config wired to this descriptor (paths resolve from the project root)."""
        ini = Path(ini_path) if ini_path else PROJECT_ROOT / "alembic.ini"
        cfg = Config(str(ini))
        cfg.set_main_option("script_location", str((PROJECT_ROOT / self.out).resolve()))
        if self.db_credentials.url:
            cfg.set_main_option("sqlalchemy.url", ini_escape(self.db_credentials.url))
        return cfg


def load_migration_config() -> MigrationConfig:
    return MigrationConfig(
        out=MIGRATIONS_OUT,
        schema=SCHEMA_PATH,
        dialect=DIALECT,
        db_credentials=DbCredentials(url=os.getenv("DATABASE_URL")),
    )
