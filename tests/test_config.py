from userdeck.config import PROJECT_ROOT, Settings
from userdeck.infrastructure.database import build_connect_args


def test_defaults(monkeypatch):
    for var in ("PORT", "STORAGE_PATH", "NODE_ENV", "MAX_UPLOAD_BYTES"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings(_env_file=None)

    assert settings.PORT == 3000
    assert settings.STORAGE_PATH == str(PROJECT_ROOT / "storage")
    assert PROJECT_ROOT.joinpath("userdeck", "config.py").is_file()
    assert settings.MAX_UPLOAD_BYTES == 5 * 1024 * 1024
    assert settings.is_production is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("STORAGE_PATH", "/var/lib/userdeck")
    monkeypatch.setenv("NODE_ENV", "production")

    settings = Settings(_env_file=None)

    assert settings.PORT == 8080
    assert settings.STORAGE_PATH == "/var/lib/userdeck"
    assert settings.is_production is True


def test_database_url_normalises_postgres_scheme():
    settings = Settings(_env_file=None, DATABASE_URL="postgres://u:p@db:5432/app")
    assert settings.database_url == "postgresql+psycopg2://u:p@db:5432/app"

    settings = Settings(_env_file=None, DATABASE_URL="postgresql://u:p@db:5432/app")
    assert settings.database_url == "postgresql+psycopg2://u:p@db:5432/app"


def test_connect_args_production_requires_tls_without_verification():
    settings = Settings(
        _env_file=None,
        DATABASE_URL="postgres://u:p@db/app",
        NODE_ENV="production",
        DATABASE_SSL_ROOT_CERT=None,
    )
    assert build_connect_args(settings) == {"sslmode": "require"}


def test_connect_args_development_has_no_tls():
    settings = Settings(
        _env_file=None,
        DATABASE_URL="postgres://u:p@db/app",
        NODE_ENV="development",
        DATABASE_SSL_ROOT_CERT=None,
    )
    assert build_connect_args(settings) == {}


def test_connect_args_root_cert_enables_verification():
    settings = Settings(
        _env_file=None,
        DATABASE_URL="postgres://u:p@db/app",
        NODE_ENV="production",
        DATABASE_SSL_ROOT_CERT="/etc/ssl/db-ca.pem",
    )
    assert build_connect_args(settings) == {
        "sslmode": "verify-full",
        "sslrootcert": "/etc/ssl/db-ca.pem",
    }


def test_connect_args_sqlite():
    settings = Settings(_env_file=None, DATABASE_URL="sqlite:///./local.db")
    assert build_connect_args(settings) == {"check_same_thread": False}
