import socket

import pytest

from blogservice.db import reset_connection
from blogservice.handler import BlogHandler
from blogservice.model import Blog
from blogservice.server import WEB_PORT, Server, create_app, new


class FakeStorage:
    def list(self):
        return []

    def get(self, blog_id):
        return Blog(id=int(blog_id), blog_name="Lorem ipsum dolor.")

    def create(self, post):
        raise RuntimeError("unused")

    def update(self, blog_id, post):
        raise RuntimeError("unused")

    def delete(self, blog_id):
        return "OK deleted"


@pytest.fixture
def server(tmp_path):
    reset_connection()
    srv = new(f"sqlite:///{tmp_path / 'blogs.db'}")
    yield srv
    reset_connection()


def test_new_announces_port(server, capsys):
    reset_connection()
    new(server.app.config.get("UNUSED") or "sqlite://")
    assert "****Server Started on 3000 ****" in capsys.readouterr().out
    assert server.addr == WEB_PORT


def test_integration_get_blog_posts(server):
    client = server.get_handler().test_client()
    created = client.post("/api/v1/blog", json={"blog_name": "Lorem ipsum dolor."})
    assert created.status_code == 200
    assert created.get_json()["data"]["message"] == "data saved"
    new_id = created.get_json()["data"]["blog"]["id"]

    resp = client.get(f"/api/v1/blog/{new_id}")
    assert resp.status_code == 200
    assert resp.get_json()["data"]["blog_name"] == "Lorem ipsum dolor."


def test_integration_missing_blog_is_404(server):
    resp = server.get_handler().test_client().get("/api/v1/blog/1")
    assert resp.status_code == 404
    assert resp.get_json()["status"]["code"] == 404


def test_integration_update_and_delete(server):
    client = server.get_handler().test_client()
    new_id = client.post("/api/v1/blog", json={"blog_name": "first"}).get_json()["data"]["blog"]["id"]

    updated = client.put(f"/api/v1/blog/{new_id}", json={"blog_name": "second"})
    assert updated.get_json()["data"]["message"] == "record updated successfully"
    assert client.get(f"/api/v1/blog/{new_id}").get_json()["data"]["blog_name"] == "second"

    removed = client.delete(f"/api/v1/blog/remove/{new_id}")
    assert removed.get_json()["data"] == "deleted successfully"
    assert client.get(f"/api/v1/blog/{new_id}").status_code == 404


def test_create_app_mounts_under_api_v1():
    app = create_app(BlogHandler(FakeStorage()))
    client = app.test_client()
    assert client.get("/api/v1/blog/1").status_code == 200
    assert client.get("/blog/1").status_code == 404


def test_get_handler_returns_app():
    app = create_app(BlogHandler(FakeStorage()))
    assert Server(app=app).get_handler() is app


def test_listen_fails_when_port_taken():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("0.0.0.0", 0))
        sock.listen()
        port = sock.getsockname()[1]
        srv = Server(app=create_app(BlogHandler(FakeStorage())), addr=str(port))
        with pytest.raises(SystemExit) as info:
            srv.listen_and_serve()
        assert info.value.code == 1