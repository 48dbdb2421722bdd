import base64
import io

import pytest
from PIL import Image

from hasselattice.errors import RenderFailure
from webapp import create_app
from webapp.services import diagram_service


def _png(size=(30, 20)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, "white").save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def rendered(monkeypatch):
    calls = []

    def fake_render(description, output_format, config=None):
        calls.append((description, output_format, config))
        return _png()

    monkeypatch.setattr(diagram_service, "render_description", fake_render)
    return calls


@pytest.fixture
def client(tmp_path):
    app = create_app(
        {"TESTING": True, "LOG_DIR": tmp_path / "logs", "GRAPHVIZ_ENGINE": "dot", "MAX_ELEMENTS": 6}
    )
    return app.test_client()


def test_about(client, monkeypatch):
    monkeypatch.setattr("webapp.routes.routes.graphviz_version", lambda: "9.0.0")
    response = client.get("/about")
    assert response.status_code == 200
    assert response.get_json()["graphviz"] == "9.0.0"
    assert response.get_json()["engine"] == "dot"


def test_diagram_json(client, rendered):
    response = client.post("/diagram", json={"elements": "a,b", "spacing": 1.0})
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["subset_count"] == 4
    assert payload["edge_count"] == 4
    assert payload["format"] == "png"
    assert payload["mimetype"] == "image/png"
    assert (payload["width"], payload["height"]) == (30, 20)
    assert base64.b64decode(payload["image"]).startswith(b"\x89PNG")
    assert "ranksep=1.0" in payload["description"]
    assert rendered[0][2].engine == "dot"


def test_diagram_accepts_list_and_form(client, rendered):
    response = client.post("/diagram", json={"elements": ["x", "y", "z"]})
    assert response.get_json()["subset_count"] == 8

    response = client.post("/diagram", data={"elements": "p,q", "format": "PNG"})
    assert response.status_code == 200
    assert response.get_json()["elements"] == ["p", "q"]


def test_diagram_without_render(client, rendered):
    response = client.post("/diagram", json={"elements": "a", "render": False})
    payload = response.get_json()
    assert response.status_code == 200
    assert "image" not in payload
    assert rendered == []


@pytest.mark.parametrize(
    "body",
    [
        {"elements": ""},
        {"elements": []},
        {"elements": "a,b", "spacing": 0},
        {"elements": "a,b", "spacing": "wide"},
        {"elements": "a,b", "format": "gif"},
        {"elements": "a,b,c,d,e,f,g"},
        {"elements": None},
        {"elements": "a", "spacing": True},
        {"elements": "a", "spacing": None},
        {"elements": ["a", "b:c"]},
    ],
)
def test_diagram_bad_request(client, rendered, body):
    response = client.post("/diagram", json=body)
    assert response.status_code == 400
    assert response.get_json()["status"] == 400
    assert rendered == []


def test_render_failure_returns_description(client, monkeypatch):
    def broken(*args, **kwargs):
        raise RenderFailure("Graphviz command 'dot' not found. Please install Graphviz.")

    monkeypatch.setattr(diagram_service, "render_description", broken)
    response = client.post("/diagram", json={"elements": "a,b"})
    assert response.status_code == 502
    payload = response.get_json()
    assert "not found" in payload["error"]
    assert payload["description"].startswith("digraph")


def test_decode_failure_returns_502(client, monkeypatch):
    monkeypatch.setattr(diagram_service, "render_description", lambda *a, **k: b"junk")
    response = client.post("/diagram", json={"elements": "a"})
    assert response.status_code == 502
    assert response.get_json()["subset_count"] == 2


def test_image_download(client, rendered):
    response = client.get("/diagram/image?elements=a,b,c&format=png")
    assert response.status_code == 200
    assert response.mimetype == "image/png"
    assert "filename=hasse.png" in response.headers["Content-Disposition"]
    assert response.data.startswith(b"\x89PNG")


def test_image_download_render_failure(client, monkeypatch):
    def broken(*args, **kwargs):
        raise RenderFailure("boom")

    monkeypatch.setattr(diagram_service, "render_description", broken)
    assert client.get("/diagram/image?elements=a").status_code == 502


def test_dot_endpoint(client, rendered):
    response = client.get("/diagram/dot?elements=a,b&spacing=0.5")
    assert response.status_code == 200
    assert response.mimetype == "text/vnd.graphviz"
    assert response.headers["X-Subset-Count"] == "4"
    body = response.get_data(as_text=True)
    assert body.startswith("digraph")
    assert "graph [nodesep=0.5 ranksep=0.5]" in body
    assert rendered == []


def test_dot_endpoint_bad_spacing(client):
    assert client.get("/diagram/dot?elements=a&spacing=-2").status_code == 400


def test_diagram_null_elements_not_rendered_as_text(client, rendered):
    response = client.post("/diagram", json={"elements": None, "render": False})
    assert response.status_code == 400
    assert "None" not in response.get_json()["error"]


def test_run_overrides_engine_and_limit(monkeypatch, tmp_path):
    from webapp import run

    monkeypatch.setattr("webapp.config.Config.LOG_DIR", tmp_path / "logs")
    monkeypatch.setattr(run, "graphviz_version", lambda: None)
    args = run.build_parser().parse_args(["--engine", "neato", "--max-elements", "4"])
    app = run.app_from_args(args)
    assert app.config["GRAPHVIZ_ENGINE"] == "neato"
    assert app.config["MAX_ELEMENTS"] == 4


def test_run_rejects_unknown_engine():
    from webapp import run

    with pytest.raises(SystemExit) as excinfo:
        run.build_parser().parse_args(["--engine", "/opt/dot"])
    assert excinfo.value.code == 2
