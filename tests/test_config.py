import pytest

from app.core.config import Settings, validate_settings


def make_settings(**overrides):
    return Settings(_env_file=None, **overrides)


def test_database_url_from_parts():
    config = make_settings(
        DB_HOST="mysql.hostinger.com",
        DB_USER="contact",
        DB_PASS="p@ss word",
        DB_NAME="site",
    )
    url = config.database_url

    assert url.drivername == "mysql+pymysql"
    assert url.host == "mysql.hostinger.com"
    assert url.port == 3306
    assert url.username == "contact"
    assert url.password == "p@ss word"
    assert url.database == "site"


def test_database_url_override():
    config = make_settings(DATABASE_URL="sqlite:///contact.db")
    assert config.database_url.get_backend_name() == "sqlite"


def test_db_host_scheme_stripped():
    assert make_settings(DB_HOST="http://mysql.hostinger.com/").DB_HOST == "mysql.hostinger.com"


def test_sms_configured():
    assert not make_settings(SMS_USER_ID="u", SMS_API_KEY="k").sms_configured
    assert make_settings(SMS_USER_ID="u", SMS_API_KEY="k", SMS_SENDER_ID="s").sms_configured


def test_validate_settings_accepts_defaults():
    assert validate_settings(make_settings()) is True


def test_validate_settings_rejects_empty_pool():
    with pytest.raises(ValueError, match="DB_POOL_SIZE"):
        validate_settings(make_settings(DB_POOL_SIZE=0))


def test_validate_settings_requires_database_location():
    with pytest.raises(ValueError, match="DB_HOST"):
        validate_settings(make_settings(DB_HOST=None))
