"""A one-shot local web server that captures the OAuth redirect URL."""

from __future__ import annotations

import socket
from typing import Callable

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8888

_READ_SIZE = 1000

SUCCESS_PAGE = (
    "<!DOCTYPE html>\n"
    "<html><head><title>Authenticated</title></head>\n"
    "<body><p>Authentication complete. You can close this window.</p></body></html>\n"
)


class RedirectError(Exception):
    """Raised when the redirect server cannot start or a request is unusable."""


def parse_request(data: bytes) -> str:
    """Return the request target (the second word) of a raw HTTP request."""
    try:
        request = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise RedirectError(f"Invalid UTF-8 sequence: {exc}") from exc
    words = request.split()
    if len(words) > 1:
        return words[1]
    raise RedirectError("Malformed request")


def _respond_with_success(conn: socket.socket) -> None:
    conn.sendall(f"HTTP/1.1 200 OK\r\n\r\n{SUCCESS_PAGE}".encode("utf-8"))


def _respond_with_error(message: str, conn: socket.socket) -> None:
    print(f"Error: {message}")
    response = f"HTTP/1.1 400 Bad Request\r\n\r\n400 - Bad Request - {message}"
    conn.sendall(response.encode("utf-8"))


def handle_connection(conn: socket.socket) -> str | None:
    """Read one request, answer it, and return its URL if it was well formed."""
    data = conn.recv(_READ_SIZE)
    try:
        url = parse_request(data)
    except RedirectError as exc:
        _respond_with_error(str(exc), conn)
        return None
    _respond_with_success(conn)
    return url


def redirect_uri_web_server(
    request_token: Callable[[], object],
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> str:
    """Listen locally, start the authorisation flow, and return the redirect URL.

    ``request_token`` is called once the server is listening; it should send the
    user to the authorisation page. Connections are served until one carries a
    well-formed request.
    """
    try:
        listener = socket.create_server((host, port))
    except OSError as exc:
        print(f"Error: {exc}")
        raise RedirectError(f"could not listen on {host}:{port}: {exc}") from exc

    with listener:
        request_token()
        while True:
            try:
                conn, _address = listener.accept()
            except OSError as exc:
                print(f"Error: {exc}")
                continue
            with conn:
                url = handle_connection(conn)
            if url is not None:
                return url