"""Tests for the parser HTTP endpoints."""

import json

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from codesketch.__main__ import run_analyze
from codesketch.api.app import create_app
from codesketch.core.constants import (
    MESSAGE_NO_CODE,
    MESSAGE_NOTHING_DETECTED,
    MESSAGE_OK,
    MESSAGE_TOO_LARGE,
)
from codesketch.setting import ServerSettings, load_settings

JAVA_GETTER = "class Foo extends Bar { private int x; public int getX(int y) { return x; } }"

PYTHON_SHAPE = b"class Shape(Base):\n    def area(self):\n        pass\n"


@pytest.fixture
def client():
    return TestClient(create_app(ServerSettings()))


# =========================================================================
# Tests: POST /api/parse
# =========================================================================

class TestParseEndpoint:
    def test_inline_code(self, client):
        response = client.post("/api/parse", data={"code": JAVA_GETTER})
        assert response.status_code == 200

        body = response.json()
        assert body["success"] is True
        assert body["message"] == MESSAGE_OK
        assert body["languageDetected"] == "java"
        assert body["filename"] is None

        result = body["result"]
        assert [c["name"] for c in result["classes"]] == ["Foo"]
        assert result["classes"][0]["attributes"] == [
            {"name": "x", "type": "int", "visibility": "private"}
        ]
        assert result["classes"][0]["methods"] == [
            {"name": "getX", "params": "int y", "returns": "int", "visibility": "public"}
        ]
        assert result["functions"] == []
        assert result["relationships"] == [{"from": "Foo", "to": "Bar", "type": "extends"}]

    def test_blank_code_rejected(self, client):
        response = client.post("/api/parse", data={"code": "   \n"})
        body = response.json()
        assert body["success"] is False
        assert body["message"] == MESSAGE_NO_CODE
        assert body["result"] is None

    def test_upload_overrides_inline_code(self, client):
        response = client.post(
            "/api/parse",
            data={"code": "class Ignored {}"},
            files={"file": ("shape.py", PYTHON_SHAPE, "text/x-python")},
        )
        body = response.json()
        assert body["success"] is True
        assert body["filename"] == "shape.py"
        assert body["languageDetected"] == "python"
        assert [c["name"] for c in body["result"]["classes"]] == ["Shape"]
        assert body["result"]["classes"][0]["extends"] == "Base"

    def test_blank_upload_keeps_inline_code(self, client):
        response = client.post(
            "/api/parse",
            data={"code": "<?php\nfunction helper($a) {}\n", "language": " PHP "},
            files={"file": ("empty.php", b"  \n", "text/plain")},
        )
        body = response.json()
        assert body["success"] is True
        assert body["languageDetected"] == "php"
        assert body["result"]["functions"] == [{"name": "helper", "params": "$a", "returns": ""}]

    def test_nothing_detected_message(self, client):
        response = client.post("/api/parse", data={"code": "just some words"})
        body = response.json()
        assert body["success"] is True
        assert body["message"] == MESSAGE_NOTHING_DETECTED
        assert body["languageDetected"] is None
        assert body["result"] == {"classes": [], "functions": [], "relationships": []}

    def test_oversized_code_rejected(self):
        small = TestClient(create_app(ServerSettings(max_code_bytes=16)))
        response = small.post("/api/parse", data={"code": JAVA_GETTER})
        assert response.status_code == 413
        assert response.json()["success"] is False

    def test_oversized_upload_rejected(self):
        small = TestClient(create_app(ServerSettings(max_code_bytes=16)))
        response = small.post(
            "/api/parse",
            files={"file": ("big.java", b"x" * 1000, "text/plain")},
        )
        assert response.status_code == 413
        body = response.json()
        assert body["success"] is False
        assert body["message"] == MESSAGE_TOO_LARGE.format(limit=16)
        assert body["filename"] == "big.java"

    def test_oversized_upload_with_blank_prefix_rejected(self):
        # Only the first limit + 1 bytes are read, and those are blank
        small = TestClient(create_app(ServerSettings(max_code_bytes=16)))
        response = small.post(
            "/api/parse",
            data={"code": "class A {}"},
            files={"file": ("big.java", b" " * 64 + b"class B {}", "text/plain")},
        )
        assert response.status_code == 413

    def test_upload_at_limit_accepted(self):
        small = TestClient(create_app(ServerSettings(max_code_bytes=10)))
        response = small.post(
            "/api/parse",
            files={"file": ("a.java", b"class A {}", "text/plain")},
        )
        assert response.status_code == 200
        assert [c["name"] for c in response.json()["result"]["classes"]] == ["A"]


# =========================================================================
# Tests: CORS, pre-flight, health
# =========================================================================

class TestPlumbing:
    def test_options_returns_no_content(self, client):
        response = client.options("/api/parse")
        assert response.status_code == 204

    def test_cors_preflight(self, client):
        response = client.options(
            "/api/parse",
            headers={
                "Origin": "http://diagrams.example",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_cors_on_post(self, client):
        response = client.post(
            "/api/parse",
            data={"code": JAVA_GETTER},
            headers={"Origin": "http://diagrams.example"},
        )
        assert response.headers["access-control-allow-origin"] == "*"

    def test_health(self, client):
        assert client.get("/api/health").json() == {"status": "ok", "service": "codesketch"}


# =========================================================================
# Tests: POST /api/diagram
# =========================================================================

class TestDiagramEndpoint:
    def test_plantuml_returned(self, client):
        response = client.post("/api/diagram", data={"code": JAVA_GETTER})
        body = response.json()
        assert body["success"] is True
        assert body["languageDetected"] == "java"
        assert body["plantuml"].startswith("@startuml")
        assert 'class "Foo"' in body["plantuml"]

    def test_blank_code_rejected(self, client):
        body = client.post("/api/diagram", data={"code": ""}).json()
        assert body["success"] is False
        assert body["message"] == MESSAGE_NO_CODE
        assert body["plantuml"] is None
        assert "result" not in body

    def test_message_matches_parse_endpoint(self, client):
        for code in (JAVA_GETTER, "just some words"):
            parsed = client.post("/api/parse", data={"code": code}).json()
            drawn = client.post("/api/diagram", data={"code": code}).json()
            assert drawn["message"] == parsed["message"]
            assert drawn["languageDetected"] == parsed["languageDetected"]

    def test_nothing_detected_message(self, client):
        body = client.post("/api/diagram", data={"code": "just some words"}).json()
        assert body["success"] is True
        assert body["message"] == MESSAGE_NOTHING_DETECTED
        assert "No classes or functions detected" in body["plantuml"]

    def test_oversized_code_rejected(self):
        small = TestClient(create_app(ServerSettings(max_code_bytes=16)))
        response = small.post("/api/diagram", data={"code": JAVA_GETTER})
        assert response.status_code == 413
        assert response.json()["plantuml"] is None


# =========================================================================
# Tests: settings and command line
# =========================================================================

class TestSettings:
    def test_env_settings(self, monkeypatch):
        monkeypatch.setenv("CODESKETCH_CORS_ORIGINS", "http://a.test, http://b.test")
        monkeypatch.setenv("CODESKETCH_MAX_CODE_BYTES", "2048")
        settings = load_settings()
        assert settings.cors_origins == ["http://a.test", "http://b.test"]
        assert settings.max_code_bytes == 2048

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CODESKETCH_CORS_ORIGINS", raising=False)
        monkeypatch.delenv("CODESKETCH_MAX_CODE_BYTES", raising=False)
        monkeypatch.delenv("CODESKETCH_LOG_LEVEL", raising=False)
        settings = load_settings()
        assert settings.cors_origins == ["*"]
        assert settings.max_code_bytes == 1024 * 1024
        assert settings.log_level == "INFO"

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("CODESKETCH_LOG_LEVEL", " debug ")
        assert load_settings().log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("CODESKETCH_LOG_LEVEL", "trace")
        with pytest.raises(ValidationError):
            load_settings()

    def test_non_numeric_size_rejected(self, monkeypatch):
        monkeypatch.setenv("CODESKETCH_MAX_CODE_BYTES", "lots")
        with pytest.raises(ValidationError):
            load_settings()


class TestAnalyzeCommand:
    def test_analyze_file(self, tmp_path, capsys):
        source = tmp_path / "Foo.java"
        source.write_text(JAVA_GETTER)

        assert run_analyze(str(source)) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["languageDetected"] == "java"
        assert payload["filename"] == "Foo.java"
        assert payload["result"]["classes"][0]["name"] == "Foo"

    def test_missing_file(self, tmp_path):
        assert run_analyze(str(tmp_path / "missing.py")) == 1
