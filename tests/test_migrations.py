"""Alembic revisions against a throwaway SQLite file."""

from pathlib import Path

import pytest
import sqlalchemy as sa
from alembic import command
from alembic.config import Config
from sqlalchemy.exc import IntegrityError

ROOT = Path(__file__).resolve().parent.parent


def alembic_config(url: str) -> Config:
    config = Config(str(ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT / "migrations"))
    config.set_main_option("sqlalchemy.url", url)
    config.attributes["configure_logger"] = False
    return config


def test_upgrade_head_creates_schema_with_unique_constraints(tmp_path):
    db_path = tmp_path / "wallets.db"
    command.upgrade(alembic_config(f"sqlite+aiosqlite:///{db_path}"), "head")

    engine = sa.create_engine(f"sqlite:///{db_path}")
    try:
        inspector = sa.inspect(engine)
        assert {"users", "wallets", "alembic_version"} <= set(inspector.get_table_names())

        wallet_uniques = {tuple(c["column_names"]) for c in inspector.get_unique_constraints("wallets")}
        assert ("name",) in wallet_uniques
        assert ("account_number",) in wallet_uniques

        user_indexes = {index["name"]: index for index in inspector.get_indexes("users")}
        assert user_indexes["ix_users_phone_number"]["unique"]

        wallet_indexes = {index["name"] for index in inspector.get_indexes("wallets")}
        assert {"ix_wallets_owner", "ix_wallets_created_at"} <= wallet_indexes

        with engine.begin() as conn:
            conn.execute(
                sa.text(
                    "INSERT INTO wallets (id, name, type, account_number, account_scheme, owner) "
                    "VALUES ('a', 'Main', 'Momo', '0551234567', 'MTN', '+233111')"
                )
            )
        with pytest.raises(IntegrityError), engine.begin() as conn:
            conn.execute(
                sa.text(
                    "INSERT INTO wallets (id, name, type, account_number, account_scheme, owner) "
                    "VALUES ('b', 'Other', 'Momo', '0551234567', 'MTN', '+233111')"
                )
            )
    finally:
        engine.dispose()


def test_downgrade_base_drops_tables(tmp_path):
    db_path = tmp_path / "wallets.db"
    config = alembic_config(f"sqlite+aiosqlite:///{db_path}")
    command.upgrade(config, "head")
    command.downgrade(config, "base")

    engine = sa.create_engine(f"sqlite:///{db_path}")
    try:
        tables = set(sa.inspect(engine).get_table_names())
    finally:
        engine.dispose()
    assert "users" not in tables
    assert "wallets" not in tables


def test_offline_upgrade_renders_sql(tmp_path, capsys):
    command.upgrade(alembic_config(f"sqlite+aiosqlite:///{tmp_path / 'unused.db'}"), "head", sql=True)

    output = capsys.readouterr().out
    assert "CREATE TABLE users" in output
    assert "CREATE TABLE wallets" in output
