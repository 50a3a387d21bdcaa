import contextlib
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from krewkit.fetch_tag import FetchError, fetch_latest_tag


@contextlib.contextmanager
def _serve(body, status=200):
    payload = body.encode("utf-8")

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):
            self.send_response(status)
            self.send_header("Content-Length", str(len(payload)))
            self.end_headers()
            self.wfile.write(payload)

        def log_message(self, *args):
            pass

    server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}/"
    finally:
        server.shutdown()
        server.server_close()


def test_broken_json():
    with _serve('{"tag_name"::]') as url:
        with pytest.raises(FetchError):
            fetch_latest_tag(url)


def test_field_missing():
    with _serve("{}") as url:
        assert fetch_latest_tag(url) == ""


def test_correct_tag():
    with _serve('{"tag_name": "some_tag"}') as url:
        assert fetch_latest_tag(url) == "some_tag"


def test_non_ok_status():
    with _serve("not found", status=404) as url:
        with pytest.raises(FetchError, match="expected HTTP status 200 OK"):
            fetch_latest_tag(url)


def test_unreachable_server():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    with pytest.raises(FetchError, match="could not GET"):
        fetch_latest_tag(f"http://127.0.0.1:{port}/nirvana")


def test_non_object_response():
    with _serve("[1, 2]") as url:
        with pytest.raises(FetchError):
            fetch_latest_tag(url)