import json

import pytest

import charselect.catalog as catalog_mod
import frontend
from charselect.models import CharSelectGroup as G
from frontend.__main__ import main as cli_main


def _rows():
    yield "grinning", 0x1F600, G.SMILEYS_AND_EMOTION
    yield "grin", 0x1F601, G.SMILEYS_AND_EMOTION
    yield "frown", 0x2639, G.PEOPLE_AND_BODY


@pytest.fixture
def small_sources(monkeypatch):
    monkeypatch.setattr(catalog_mod, "DEFAULT_SOURCES", (_rows,))


def test_cli_json(small_sources, capsys):
    assert cli_main(["--q", "grin", "--json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert [r["name"] for r in rows] == ["grin", "grinning"]


def test_cli_table(small_sources, capsys):
    assert cli_main(["--group", "people_and_body"]) == 0
    out = capsys.readouterr().out
    assert "frown" in out
    assert "U+2639" in out
    assert "grin" not in out


def test_cli_no_matches(small_sources, capsys):
    cli_main(["--q", "zzz"])
    assert "(no matches)" in capsys.readouterr().out


def test_cli_top_k(small_sources, capsys):
    cli_main(["--q", "gri", "-k", "1", "--json"])
    assert len(json.loads(capsys.readouterr().out)) == 1


def test_cli_unknown_group_exits(small_sources):
    with pytest.raises(SystemExit) as exc:
        cli_main(["--group", "nope"])
    assert exc.value.code == 2


def test_module_api_initialize_is_idempotent(monkeypatch):
    monkeypatch.setattr(frontend, "_engine", None)
    with pytest.raises(RuntimeError):
        frontend.search("grin")
    eng = frontend.initialize(sources=[_rows])
    assert frontend.initialize(sources=[_rows]) is eng
    assert [r["name"] for r in frontend.search("grin", k=1)] == ["grin"]
