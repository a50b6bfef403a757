"""TCP service that sends back each client's string reversed."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import TextIO

DEFAULT_PORT = 8090
BUFFER_SIZE = 1024
MAX_INPUT = 99


def reverse_text(data: bytes) -> bytes:
    """Reverse ``data`` byte by byte, keeping only what precedes the first NUL."""
    return data[::-1].split(b"\0", 1)[0]


def _as_text(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def serve_once(sock: socket.socket, out: TextIO | None = None) -> bytes:
    """Accept one client on a listening socket, reply with its data reversed.

    Returns the bytes sent back.
    """
    out = out if out is not None else sys.stdout
    conn, _ = sock.accept()
    with conn:
        data = conn.recv(BUFFER_SIZE - 1)
        print(f"\nString sent by client: {_as_text(data)}", file=out, flush=True)
        reply = reverse_text(data)
        conn.sendall(reply)
        print("Reversed string sent back to client.", file=out, flush=True)
    return reply


def request_reverse(text: str, host: str = "127.0.0.1", port: int = DEFAULT_PORT) -> str:
    """Send ``text`` to a reversing server and return its answer."""
    with socket.create_connection((host, port)) as sock:
        sock.sendall(text.encode("utf-8"))
        reply = sock.recv(BUFFER_SIZE - 1)
    return _as_text(reply)


def _parser(prog: str, description: str, default_host: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("--host", default=default_host)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    return parser


def server_main(argv: list[str] | None = None) -> int:
    """Serve a single client, then exit."""
    args = _parser("netlab-reverse-server", "Reverse one client's string.", "").parse_args(argv)
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
            server.bind((args.host, args.port))
            server.listen(3)
            serve_once(server)
    except OSError as exc:
        print(f"Server failed: {exc}", file=sys.stderr)
        return 1
    return 0


def client_main(argv: list[str] | None = None) -> int:
    """Read a line, have the server reverse it, and print the result."""
    args = _parser("netlab-reverse-client", "Ask the server to reverse a string.", "127.0.0.1").parse_args(argv)
    try:
        text = input("Input the string: ")
    except EOFError:
        text = ""
    text = text.lstrip()[:MAX_INPUT]
    try:
        reply = request_reverse(text, args.host, args.port)
    except OSError as exc:
        print(f"Connection Failed: {exc}", file=sys.stderr)
        return 1
    print(f"Reversed string from server: {reply}")
    return 0


if __name__ == "__main__":
    sys.exit(client_main())