from config import Settings, _parse_cors_origins


def test_parse_cors_origins_unset(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    assert _parse_cors_origins() is None


def test_parse_cors_origins_comma_separated(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
    assert _parse_cors_origins() == ["https://a.example", "https://b.example"]


def test_parse_cors_origins_json(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["https://a.example"]')
    assert _parse_cors_origins() == ["https://a.example"]


def test_settings_defaults(monkeypatch):
    for name in ("MAX_DOCUMENT_CHARS", "RATE_LIMIT", "INTERNAL_POSTING_MARKER", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.max_document_chars == 50000
    assert s.rate_limit == "30/minute"
    assert s.internal_posting_marker == "[INTERNAL_POSTING]"
    assert s.debug is False


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("RATE_LIMIT", "5/minute")
    monkeypatch.setenv("MAX_DOCUMENT_CHARS", "1000")
    s = Settings(_env_file=None)
    assert s.rate_limit == "5/minute"
    assert s.max_document_chars == 1000
