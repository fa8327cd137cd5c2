"""
Tests for the preview page and health check.
"""


class TestPreviewView:

    def test_renders_links(self, client):
        response = client.get("/links/preview/", {"text": "see www.a.io"})
        assert response.status_code == 200
        assert '<a class="link" target="_blank" href="https://www.a.io">www.a.io</a>' in response.content.decode()

    def test_plain_text_is_escaped(self, client):
        response = client.get("/links/preview/", {"text": "<script>alert(1)</script>"})
        assert response.status_code == 200
        body = response.content.decode()
        assert "<script>" not in body
        assert "&lt;script&gt;" in body

    def test_empty(self, client):
        response = client.get("/links/preview/")
        assert response.status_code == 200
        assert '<div class="preview"></div>' in response.content.decode()


class TestHealthz:

    def test_ok(self, client):
        response = client.get("/healthz/")
        assert response.status_code == 200
        assert response.content == b"ok"
