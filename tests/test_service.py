import pytest

from blogservice.db import RecordNotFoundError
from blogservice.model import Blog, BlogData
from blogservice.service import BlogStore, new_service


class RecordingClient:
    def __init__(self, fail=None):
        self.fail = fail
        self.calls = []

    def _check(self):
        if self.fail is not None:
            raise self.fail

    def get_all_blogs(self, blog_id):
        self.calls.append(("get", blog_id))
        self._check()
        return Blog(id=int(blog_id), blog_name="first")

    def create_blog_post(self, blog):
        self.calls.append(("create", blog))
        self._check()
        return BlogData(blog=blog, message="data saved")

    def update_blogs(self, blog_id, blog):
        self.calls.append(("update", blog_id, blog))
        self._check()
        return BlogData(blog=blog, message="record updated successfully")

    def delete_blog(self, blog_id):
        self.calls.append(("delete", blog_id))
        self._check()
        return "deleted successfully"


def test_new_service_wraps_client():
    client = RecordingClient()
    store = new_service(client)
    assert isinstance(store, BlogStore)
    assert store.sql_db is client


def test_list_is_empty():
    assert new_service(RecordingClient()).list() == []


def test_get_passes_id_and_returns_blog():
    client = RecordingClient()
    blog = new_service(client).get("3")
    assert blog == Blog(id=3, blog_name="first")
    assert client.calls == [("get", "3")]


def test_create_returns_client_result():
    client = RecordingClient()
    post = Blog(blog_name="new post")
    result = new_service(client).create(post)
    assert result == BlogData(blog=post, message="data saved")
    assert client.calls == [("create", post)]


def test_update_passes_id_and_post():
    client = RecordingClient()
    post = Blog(blog_name="renamed")
    result = new_service(client).update("5", post)
    assert result.message == "record updated successfully"
    assert result.blog is post
    assert client.calls == [("update", "5", post)]


def test_delete_returns_message():
    client = RecordingClient()
    assert new_service(client).delete("9") == "deleted successfully"
    assert client.calls == [("delete", "9")]


def test_get_propagates_not_found():
    store = new_service(RecordingClient(fail=RecordNotFoundError()))
    with pytest.raises(RecordNotFoundError):
        store.get("1")


@pytest.mark.parametrize(
    "operation",
    [
        lambda store: store.create(Blog()),
        lambda store: store.update("1", Blog()),
        lambda store: store.delete("1"),
    ],
)
def test_errors_propagate(operation):
    store = new_service(RecordingClient(fail=RuntimeError("boom")))
    with pytest.raises(RuntimeError, match="boom"):
        operation(store)