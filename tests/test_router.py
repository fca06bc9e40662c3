"""Tests router FastAPI — catalogue, définitions, création, parse, validation."""
import pytest
from fastapi.testclient import TestClient

from content_blocks import BLOCK_KINDS, SIMPLIFIED_BLOCK_KINDS
from content_blocks.api import create_app
from content_blocks.core.richtext import paragraph_doc


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c


def _kinds(catalog):
    return [b["type"] for category in catalog["categories"] for b in category["blocks"]]


# ── GET /blocks/catalog ──────────────────────────────────────────────────────

class TestCatalog:
    def test_lists_all_kinds(self, client):
        r = client.get("/blocks/catalog")
        assert r.status_code == 200
        data = r.json()
        assert len(data["categories"]) == 6
        assert sorted(_kinds(data)) == sorted(BLOCK_KINDS)

    def test_block_has_schema(self, client):
        data = client.get("/blocks/catalog").json()
        faq = next(b for c in data["categories"] for b in c["blocks"] if b["type"] == "faq")
        assert faq["labelSv"] == "Vanliga frågor"
        assert "items" in faq["schema"]["properties"]

    def test_post_context_simplified(self, client):
        data = client.get("/blocks/catalog", params={"context": "post"}).json()
        assert set(_kinds(data)) == set(SIMPLIFIED_BLOCK_KINDS)

    def test_search(self, client):
        data = client.get("/blocks/catalog", params={"q": "karta"}).json()
        assert _kinds(data) == ["map"]

    def test_unknown_context_400(self, client):
        assert client.get("/blocks/catalog", params={"context": "newsletter"}).status_code == 400


# ── GET /blocks/definitions/{kind} ───────────────────────────────────────────

def test_definition_found(client):
    r = client.get("/blocks/definitions/simpleTable")
    assert r.status_code == 200
    assert r.json()["category"] == "content"


def test_definition_unknown_404(client):
    r = client.get("/blocks/definitions/carousel3d")
    assert r.status_code == 404
    assert "error" in r.json()


# ── POST /blocks/new ─────────────────────────────────────────────────────────

class TestNewBlock:
    def test_simple_table_defaults(self, client):
        r = client.post("/blocks/new", json={"kind": "simpleTable"})
        assert r.status_code == 200
        data = r.json()
        assert data["id"]
        assert data["type"] == "simpleTable"
        assert data["headers"] == ["Kolumn 1", "Kolumn 2"]
        assert data["rows"] == [["", ""]]
        assert data["background"] == "white"

    def test_allowed_in_context(self, client):
        r = client.post("/blocks/new", json={"kind": "quote", "context": "post"})
        assert r.status_code == 200

    def test_not_allowed_in_context_403(self, client):
        r = client.post("/blocks/new", json={"kind": "hero", "context": "post"})
        assert r.status_code == 403

    def test_unknown_kind_404(self, client):
        assert client.post("/blocks/new", json={"kind": "carousel3d"}).status_code == 404


# ── POST /blocks/parse + /blocks/validate ────────────────────────────────────

def test_parse_normalizes_and_reports(client):
    r = client.post("/blocks/parse", json=[
        {"id": "a", "type": "hero", "description": "Hej"},
        {"id": "b", "type": "carousel3d"},
    ])
    assert r.status_code == 200
    data = r.json()
    assert [b["id"] for b in data["blocks"]] == ["a"]
    assert data["blocks"][0]["description"] == paragraph_doc("Hej")
    assert data["diagnostics"][0]["code"] == "unrecognized_kind"


def test_parse_non_list_gives_empty(client):
    r = client.post("/blocks/parse", json={"blocks": []})
    assert r.status_code == 200
    assert r.json()["blocks"] == []


def test_validate_ok(client):
    r = client.post("/blocks/validate", json=[{"id": "a", "type": "spacer"}, {"id": "b", "type": "divider"}])
    assert r.json() == {"valid": True, "diagnostics": []}


def test_validate_duplicate_ids(client):
    r = client.post("/blocks/validate", json=[{"id": "a", "type": "spacer"}, {"id": "a", "type": "divider"}])
    data = r.json()
    assert data["valid"] is False
    assert data["diagnostics"][0]["code"] == "duplicate_id"


# ── GET /blocks/form-presets ─────────────────────────────────────────────────

def test_form_presets(client):
    r = client.get("/blocks/form-presets")
    assert r.status_code == 200
    presets = r.json()["presets"]
    assert [p["preset"] for p in presets] == ["contact", "quote", "callback", "newsletter"]
    assert presets[1]["label"] == "Offertförfrågan"
    assert presets[3]["submitButtonText"] == "Prenumerera"
    assert len(presets[0]["fields"]) == 8
