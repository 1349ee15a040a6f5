from wallet_service.core.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.security.access_token_expire_minutes == 60
    assert settings.security.algorithm == "HS256"
    assert settings.wallets.max_wallets_per_owner == 5
    assert settings.wallets.card_prefix_length == 6
    assert settings.pagination.default_page_size == 10
    assert settings.api_prefix == "/api"


def test_nested_sections_read_from_environment(monkeypatch):
    monkeypatch.setenv("WALLETS__MAX_WALLETS_PER_OWNER", "3")
    monkeypatch.setenv("SECURITY__ISSUER", "issuer-from-env")
    monkeypatch.setenv("LOGGING__FORMAT", "json")

    settings = Settings(_env_file=None)

    assert settings.wallets.max_wallets_per_owner == 3
    assert settings.security.issuer == "issuer-from-env"
    assert settings.logging.format == "json"
