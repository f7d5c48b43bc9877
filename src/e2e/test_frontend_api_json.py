from pathlib import Path
import pytest

from subtlex import Norms
from subtlex_web.web import app as flask_app


@pytest.fixture
def client(corpus_dir: Path):
    import subtlex_web.web as webmod
    norms = Norms(corpus_dir, store="memory://")
    webmod._norms = norms
    try:
        yield flask_app.test_client()
    finally:
        webmod._norms = None
        norms.close()


@pytest.mark.e2e
def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.get_json() == {"ok": True}


@pytest.mark.e2e
def test_word_endpoint(client):
    data = client.get("/api/word/the").get_json()
    assert data["exists"] is True
    assert data["frequency"] == 29449.18
    assert data["log_frequency"] == 6.1766
    assert data["zipf"] == 7.468
    assert data["part_of_speech"] == "Article"


@pytest.mark.e2e
def test_word_endpoint_absent_word(client):
    data = client.get("/api/word/zzz").get_json()
    assert data["exists"] is False
    assert data["frequency"] is None
    assert data["part_of_speech"] is None


@pytest.mark.e2e
def test_neighbors_endpoint(client):
    data = client.get("/api/neighbors/cat?limit=4").get_json()
    assert data["count"] == 3
    assert data["neighbors"] == ["cot", "cut", "hat"]
    assert data["frequency_max"] == 259.29
    assert data["mean_closest_distance"] == pytest.approx(0.75)

    none = client.get("/api/neighbors/fiji").get_json()
    assert none["count"] == 0
    assert none["frequency_mean"] is None


@pytest.mark.e2e
def test_list_endpoint(client):
    r = client.get("/api/list?length=4&onc=1:3")
    assert r.status_code == 200
    assert r.get_json() == ["fish", "fist", "frog", "from", "tide", "tile", "time", "tame"]
    assert client.get("/api/list?cv=CVCV&regex=%5Ef").get_json() == ["fiji", "fuse"]
    assert client.get("/api/list?zipf=:3.5").get_json() == ["cot", "fiji", "apes", "tile"]


@pytest.mark.e2e
def test_bad_arguments_are_400(client):
    r = client.get("/api/list?regex=(")
    assert r.status_code == 400
    assert "error" in r.get_json()
    assert client.get("/api/list?freq=a:b").status_code == 400
    assert client.get("/api/neighbors/cat?limit=0").status_code == 400


@pytest.mark.e2e
def test_random_and_home_page(client, corpus_words):
    rec = client.get("/api/random").get_json()
    assert rec["surface_form"] in corpus_words
    r = client.get("/")
    assert r.status_code == 200
    assert "subtlex" in r.data.decode("utf-8").lower()
