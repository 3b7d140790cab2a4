from school_crm.core.config import Settings
from school_crm.core.database import build_engine
from sqlalchemy.pool import StaticPool


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("SCHOOLCRM_SEED_DEMO_DATA", "false")
    monkeypatch.setenv("SCHOOLCRM_LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.seed_demo_data is False
    assert settings.log_level == "DEBUG"
    assert settings.database_url.startswith("sqlite")


def test_in_memory_sqlite_shares_one_connection():
    engine = build_engine("sqlite+pysqlite:///:memory:")

    assert isinstance(engine.pool, StaticPool)
    engine.dispose()


def test_file_sqlite_uses_regular_pool(tmp_path):
    engine = build_engine(f"sqlite+pysqlite:///{tmp_path / 'crm.db'}")

    assert not isinstance(engine.pool, StaticPool)
    engine.dispose()
