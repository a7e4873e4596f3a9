from __future__ import annotations

import json

import httpx
import pytest
import respx

from conftest import BASE_URL, make_post, make_user
from social_graph import __version__
from social_graph.cli.main import app


def run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc:
        app(argv)
    return exc.value.code


def test_version(capsys):
    assert run(["version"]) == 0
    assert capsys.readouterr().out.strip() == __version__


@respx.mock
def test_ingest_writes_graph_and_verifies(tmp_path, capsys):
    respx.get(f"{BASE_URL}/users").mock(return_value=httpx.Response(200, json=[make_user(1)]))
    respx.get(f"{BASE_URL}/posts").mock(
        return_value=httpx.Response(200, json=[make_post(10, 1), make_post(11, 99)])
    )
    out = tmp_path / "graph.json"

    rc = run(["ingest", "--base-url", BASE_URL, "--output", str(out), "--verify"])

    assert rc == 0
    graph = json.loads(out.read_text(encoding="utf-8"))
    assert [e["id"] for e in graph["entities"]] == ["user:1", "post:10", "post:11"]
    assert graph["relationships"] == [{"from": "user:1", "to": "post:10", "label": "HAS"}]
    assert "integrity: entities=3 relationships=1" in capsys.readouterr().out


@respx.mock
def test_ingest_fail_on_fetch_error():
    respx.get(f"{BASE_URL}/users").mock(return_value=httpx.Response(500))
    respx.get(f"{BASE_URL}/posts").mock(return_value=httpx.Response(200, json=[]))

    assert run(["ingest", "--base-url", BASE_URL]) == 0
    assert run(["ingest", "--base-url", BASE_URL, "--fail-on-fetch-error"]) == 1


@pytest.mark.parametrize("page_size", ["0", "-1"])
def test_ingest_rejects_bad_page_size(page_size, capsys):
    assert run(["ingest", "--base-url", BASE_URL, "--page-size", page_size]) == 2
    assert "page_size" in capsys.readouterr().err


@respx.mock
def test_ingest_strict_duplicate_exits_cleanly(caplog):
    respx.get(f"{BASE_URL}/users").mock(
        return_value=httpx.Response(200, json=[make_user(1), make_user(1)])
    )
    respx.get(f"{BASE_URL}/posts").mock(return_value=httpx.Response(200, json=[]))

    assert run(["ingest", "--base-url", BASE_URL, "--strict"]) == 1
    assert "Entity already exists: user:1" in caplog.text
