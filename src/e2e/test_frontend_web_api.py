import pytest

import frontend.web as webmod
from charselect import Engine, MAX_SCORE
from charselect.models import CharSelectGroup as G
from frontend.web import app as flask_app


def _rows():
    yield "grinning", 0x1F600, G.SMILEYS_AND_EMOTION
    yield "grin", 0x1F601, G.SMILEYS_AND_EMOTION
    yield "frown", 0x2639, G.PEOPLE_AND_BODY
    yield "flag: Japan", (0x1F1EF, 0x1F1F5), G.FLAGS


@pytest.fixture
def client(monkeypatch):
    eng = Engine(); eng.build(sources=[_rows])
    monkeypatch.setattr(webmod, "_engine", eng)
    yield flask_app.test_client()
    eng.shutdown()


@pytest.mark.e2e
def test_search_json(client):
    r = client.get("/api/search", query_string={"q": "grin"})
    assert r.status_code == 200
    data = r.get_json()
    assert [row["name"] for row in data] == ["grin", "grinning"]
    assert data[0]["score"] == MAX_SCORE
    assert data[0]["codepoints"] == "U+1F601"


@pytest.mark.e2e
def test_search_empty_query_browses_group(client):
    r = client.get("/api/search", query_string={"q": "", "group": "flags"})
    data = r.get_json()
    assert [row["glyph"] for row in data] == ["\U0001F1EF\U0001F1F5"]
    assert data[0]["codepoints"] == "U+1F1EF U+1F1F5"

    r = client.get("/api/search")
    assert [row["index"] for row in r.get_json()] == [0, 1]


@pytest.mark.e2e
def test_search_group_accepts_label(client):
    r = client.get("/api/search", query_string={"group": "People & Body"})
    assert [row["name"] for row in r.get_json()] == ["frown"]


@pytest.mark.e2e
def test_search_top_k(client):
    r = client.get("/api/search", query_string={"q": "gri", "k": 1})
    assert len(r.get_json()) == 1


@pytest.mark.e2e
def test_search_codepoint(client):
    r = client.get("/api/search", query_string={"q": "U+2639"})
    assert r.get_json()[0]["name"] == "frown"


@pytest.mark.e2e
def test_unknown_group_is_400(client):
    r = client.get("/api/search", query_string={"group": "nope"})
    assert r.status_code == 400
    assert "unknown group" in r.get_json()["error"]


@pytest.mark.e2e
def test_groups_listing(client):
    data = client.get("/api/groups").get_json()
    assert [g["value"] for g in data] == [g.value for g in G]
    assert data[0]["label"] == "Smileys & Emotion"


@pytest.mark.e2e
def test_health(client):
    data = client.get("/health").get_json()
    assert data == {"ok": True, "entries": 4}


@pytest.mark.e2e
def test_home_page_renders(client):
    r = client.get("/")
    assert r.status_code == 200
    assert b"Character Select" in r.data
    assert b"/api/search" in r.data


@pytest.mark.e2e
def test_search_before_build_is_503(monkeypatch):
    monkeypatch.setattr(webmod, "_engine", None)
    client = flask_app.test_client()
    assert client.get("/api/search", query_string={"q": "x"}).status_code == 503
    assert client.get("/health").get_json() == {"ok": False, "entries": 0}
