"""Tests for the FastAPI transcription API.

WHY: Host applications call the API instead of importing the package,
so every endpoint must return the same results as the library, and
errors must come back in the documented ErrorResponse shape.

HOW: FastAPI TestClient drives the app in-process. The worked example
from conftest.py gives the expected IPA and SSML; the full
transcription response is validated against the shipped JSON schema.

RULES:
- All tests use the FastAPI TestClient (synchronous)
- The input size limit is lowered with monkeypatch, never by env vars
- Tests cover: happy paths, 400 unknown format, 413 too long, 422 bad body
"""

from __future__ import annotations

import json

import jsonschema
import pytest
from fastapi.testclient import TestClient

from globasa_ipa import __version__
from globasa_ipa.formatters import FORMATTERS
from globasa_ipa.formatters.transcription_json import SCHEMA_PATH
from globasa_ipa.server.app import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def small_limit(monkeypatch):
    """Lower the input size limit to 10 characters."""
    monkeypatch.setattr("globasa_ipa.server.app.MAX_INPUT_CHARS", 10)


# ---------------------------------------------------------------------------
# POST /ipa and /ssml
# ---------------------------------------------------------------------------


class TestIPAEndpoint:

    def test_worked_example(self, client, sample_text, sample_expected):
        response = client.post("/ipa", json={"text": sample_text})
        assert response.status_code == 200
        assert response.json() == {"ipa": sample_expected["ipa"]}

    def test_empty_text(self, client):
        response = client.post("/ipa", json={"text": ""})
        assert response.status_code == 200
        assert response.json() == {"ipa": ""}

    def test_missing_text_is_422(self, client):
        response = client.post("/ipa", json={})
        assert response.status_code == 422

    def test_wrong_type_is_422(self, client):
        response = client.post("/ipa", json={"text": ["bon"]})
        assert response.status_code == 422

    def test_too_long_is_413(self, client, small_limit):
        response = client.post("/ipa", json={"text": "mo amiga mo amiga"})
        assert response.status_code == 413
        assert response.json()["detail"] == "Text too long (17 chars, max 10)"

    def test_at_limit_is_accepted(self, client, small_limit):
        response = client.post("/ipa", json={"text": "mo amiga!!"})
        assert response.status_code == 200


class TestSSMLEndpoint:

    def test_worked_example(self, client, sample_text, sample_expected):
        response = client.post("/ssml", json={"text": sample_text})
        assert response.status_code == 200
        assert response.json() == {"ssml": sample_expected["ssml"]}

    def test_empty_text(self, client):
        response = client.post("/ssml", json={"text": ""})
        assert response.json() == {"ssml": '<prosody rate="slow"></prosody>'}

    def test_too_long_is_413(self, client, small_limit):
        response = client.post("/ssml", json={"text": "x" * 11})
        assert response.status_code == 413


# ---------------------------------------------------------------------------
# POST /transcriptions
# ---------------------------------------------------------------------------


class TestTranscriptionEndpoint:

    def test_validates_against_schema(self, client, sample_text):
        response = client.post("/transcriptions", json={"text": sample_text})
        assert response.status_code == 200
        with open(SCHEMA_PATH, encoding="utf-8") as f:
            schema = json.load(f)
        jsonschema.validate(response.json(), schema)

    def test_fields(self, client, sample_text, sample_expected):
        data = client.post("/transcriptions", json={"text": sample_text}).json()
        assert data["source"] == sample_text
        assert data["stressed"] == sample_expected["stressed"]
        assert data["ipa"] == sample_expected["ipa"]
        assert data["ssml"] == sample_expected["ssml"]
        assert [w["text"] for w in data["words"]] == ["hej", "mo", "amiga"]
        assert [s["pause"] for s in data["sentences"]] == [False, True]

    def test_unstressed_word(self, client):
        data = client.post("/transcriptions", json={"text": "de"}).json()
        assert data["words"][0]["stress_index"] is None
        assert data["marker_count"] == 0


# ---------------------------------------------------------------------------
# POST /render/{format_key}
# ---------------------------------------------------------------------------


class TestRenderEndpoint:

    def test_ipa_file(self, client, sample_text, sample_expected):
        response = client.post("/render/ipa", json={"text": sample_text})
        assert response.status_code == 200
        assert response.text == sample_expected["ipa"] + "\n"
        assert response.headers["content-type"].startswith("text/plain")
        assert (
            response.headers["content-disposition"]
            == 'attachment; filename="transcription-ipa.txt"'
        )

    def test_ssml_file(self, client, sample_text, sample_expected):
        response = client.post("/render/ssml", json={"text": sample_text})
        assert response.text == sample_expected["ssml"]
        assert response.headers["content-type"].startswith("application/ssml+xml")

    def test_json_file(self, client, sample_text):
        response = client.post("/render/json", json={"text": sample_text})
        assert response.json()["source"] == sample_text

    def test_unknown_format_is_400(self, client):
        response = client.post("/render/mp3", json={"text": "bon"})
        assert response.status_code == 400
        assert "Unknown format 'mp3'" in response.json()["detail"]

    def test_too_long_is_413(self, client, small_limit):
        response = client.post("/render/ipa", json={"text": "x" * 11})
        assert response.status_code == 413


# ---------------------------------------------------------------------------
# GET /formats and /health
# ---------------------------------------------------------------------------


class TestFormatsEndpoint:

    def test_lists_every_formatter(self, client):
        response = client.get("/formats")
        assert response.status_code == 200
        keys = [item["key"] for item in response.json()]
        assert keys == sorted(FORMATTERS.keys())

    def test_suffixes(self, client):
        by_key = {item["key"]: item for item in client.get("/formats").json()}
        assert by_key["ipa"]["suffix"] == "-ipa.txt"
        assert by_key["ssml"]["suffix"] == "-speech.ssml"
        assert by_key["ssml"]["media_type"] == "application/ssml+xml"
        assert by_key["json"]["name"] == "Transcription JSON"


class TestHealthEndpoint:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": __version__}

    def test_openapi_schema_available(self, client):
        response = client.get("/openapi.json")
        assert response.status_code == 200
        assert "/transcriptions" in response.json()["paths"]
