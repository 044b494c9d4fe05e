"""Tests for the tokenization endpoint."""


def test_tokenize_with_defaults(client):
    response = client.post("/api/tokens", json={"text": "Hello world."})
    assert response.status_code == 200
    data = response.json()

    assert data["wordCount"] == 2
    assert [t["text"] for t in data["tokens"]] == ["Hello", "world."]
    first, second = data["tokens"]
    assert first["orpIndex"] == 1
    assert first["meta"]["sentenceStart"] is True
    assert second["meta"]["sentenceEnd"] is True
    assert second["meta"]["paragraphEnd"] is False
    # 220 ms + 660 ms at 300 WPM with adaptive timing
    assert data["totalDurationMs"] == 880
    assert data["formattedDuration"] == "1s"


def test_tokenize_with_settings(client):
    response = client.post(
        "/api/tokens",
        json={"text": "Hello world.", "settings": {"chunkSize": 2, "adaptiveTiming": False}},
    )
    assert response.status_code == 200
    data = response.json()

    assert [t["text"] for t in data["tokens"]] == ["Hello world."]
    assert data["tokens"][0]["index"] == 0
    assert data["totalDurationMs"] == 600
    assert data["wordCount"] == 2


def test_tokenize_empty_text(client):
    data = client.post("/api/tokens", json={"text": ""}).json()
    assert data["tokens"] == []
    assert data["totalDurationMs"] == 0
    assert data["formattedDuration"] == "0s"


def test_tokenize_invalid_settings(client):
    response = client.post("/api/tokens", json={"text": "Hi", "settings": {"wpm": 5000}})
    assert response.status_code == 422
    assert response.json()["error"] == "Invalid request body"


def test_tokenize_missing_text(client):
    response = client.post("/api/tokens", json={})
    assert response.status_code == 422
