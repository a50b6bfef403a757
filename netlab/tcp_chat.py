"""Line-by-line TCP chat between one server and one client."""

from __future__ import annotations

import argparse
import socket
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

DEFAULT_PORT = 5000
BUFFER_SIZE = 1024
STOP_MESSAGE = "stop"


def _as_text(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _first_line(text: str) -> str:
    return text[: BUFFER_SIZE - 1].split("\n", 1)[0]


def server_session(
    conn: socket.socket,
    replies: Iterable[str],
    out: TextIO | None = None,
) -> list[str]:
    """Alternate receiving a client message and sending the next reply.

    Ends when the client disconnects, either side says ``stop`` or the
    replies run out. Returns the messages received from the client.
    """
    out = out if out is not None else sys.stdout
    pending = iter(replies)
    received: list[str] = []
    while True:
        print("Receiving message from client...", file=out, flush=True)
        data = conn.recv(BUFFER_SIZE - 1)
        if not data:
            break
        message = _as_text(data)
        received.append(message)
        print(f"Client: {message}", file=out, flush=True)
        if message == STOP_MESSAGE:
            break
        reply = next(pending, None)
        if reply is None:
            break
        reply = _first_line(reply)
        conn.sendall(reply.encode("utf-8"))
        if reply == STOP_MESSAGE:
            break
    return received


def client_session(
    sock: socket.socket,
    messages: Iterable[str],
    out: TextIO | None = None,
) -> list[str]:
    """Send each message and wait for the server's answer.

    Ends after sending ``stop``, on receiving ``stop``, or when the server
    disconnects. Returns the replies received.
    """
    out = out if out is not None else sys.stdout
    replies: list[str] = []
    for message in messages:
        message = _first_line(message)
        sock.sendall(message.encode("utf-8"))
        if message == STOP_MESSAGE:
            break
        data = sock.recv(BUFFER_SIZE - 1)
        if not data:
            print("Disconnected by server.", file=out, flush=True)
            break
        reply = _as_text(data)
        replies.append(reply)
        print(f"Received from server: {reply}", file=out, flush=True)
        if reply == STOP_MESSAGE:
            break
    return replies


def _stdin_lines(prompt: str) -> Iterator[str]:
    """Yield lines typed on stdin, prompting before each."""
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def _parser(prog: str, description: str, default_host: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("--host", default=default_host)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    return parser


def server_main(argv: list[str] | None = None) -> int:
    """Accept one client and chat with it from stdin."""
    args = _parser("netlab-chat-server", "TCP chat server.", "").parse_args(argv)
    print("Server side:", flush=True)
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
            try:
                server.bind((args.host, args.port))
            except OSError as exc:
                print(f"Bind failed: {exc}", file=sys.stderr)
                return 1
            server.listen(5)
            print("Waiting for connection...", flush=True)
            conn, _ = server.accept()
            with conn:
                print("Connection established!", flush=True)
                server_session(conn, _stdin_lines("Enter the message: "))
    except OSError as exc:
        print(f"Server failed: {exc}", file=sys.stderr)
        return 1
    return 0


def client_main(argv: list[str] | None = None) -> int:
    """Connect to the chat server and chat with it from stdin."""
    args = _parser("netlab-chat-client", "TCP chat client.", "127.0.0.1").parse_args(argv)
    print("Client side:", flush=True)
    try:
        with socket.create_connection((args.host, args.port)) as sock:
            client_session(sock, _stdin_lines("Sending message to server: "))
    except OSError as exc:
        print(f"Connection failed: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(client_main())