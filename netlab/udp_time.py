"""UDP time service: every datagram is answered with the server's clock time."""

from __future__ import annotations

import argparse
import socket
import sys
import threading
from collections.abc import Callable, Iterable, Iterator
from datetime import datetime
from typing import TextIO

DEFAULT_PORT = 5000
BUFFER_SIZE = 50
STOP_MESSAGE = "stop"


def _as_text(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def time_message(moment: datetime) -> str:
    """Format ``moment`` as the reply the server sends."""
    return f"Time is {moment:%H:%M:%S}"


def _send_time(
    sock: socket.socket,
    client: tuple,
    clock: Callable[[], datetime],
    out: TextIO,
    lock: threading.Lock,
) -> None:
    reply = time_message(clock()).encode("utf-8") + b"\0"
    sock.sendto(reply, client)
    with lock:
        print("Time sent to client...", file=out, flush=True)


def serve(
    sock: socket.socket,
    out: TextIO | None = None,
    clock: Callable[[], datetime] | None = None,
) -> list[str]:
    """Answer datagrams on a bound socket with the time until ``stop`` arrives.

    Each reply is sent from its own worker; the ``stop`` message is answered
    too. Returns every message received, ``stop`` included.
    """
    out = out if out is not None else sys.stdout
    clock = clock if clock is not None else datetime.now
    lock = threading.Lock()
    workers: list[threading.Thread] = []
    received: list[str] = []
    try:
        while True:
            data, client = sock.recvfrom(BUFFER_SIZE - 1)
            message = _as_text(data)
            received.append(message)
            with lock:
                print(f"Message from client: {message}", file=out, flush=True)
            worker = threading.Thread(
                target=_send_time, args=(sock, client, clock, out, lock), daemon=True
            )
            worker.start()
            workers.append(worker)
            if message == STOP_MESSAGE:
                break
    finally:
        for worker in workers:
            worker.join()
    return received


def client_session(
    sock: socket.socket,
    messages: Iterable[str],
    address: tuple[str, int] = ("127.0.0.1", DEFAULT_PORT),
    out: TextIO | None = None,
) -> list[str]:
    """Send each message and collect the replies, stopping at ``stop``.

    The ``stop`` message itself is not sent.
    """
    out = out if out is not None else sys.stdout
    replies: list[str] = []
    for message in messages:
        if message == STOP_MESSAGE:
            break
        sock.sendto(message.encode("utf-8") + b"\0", address)
        data, _ = sock.recvfrom(BUFFER_SIZE - 1)
        reply = _as_text(data)
        replies.append(reply)
        print(f"Received from server: {reply}", file=out, flush=True)
    return replies


def _stdin_words(prompt: str) -> Iterator[str]:
    """Yield whitespace-separated words from stdin, prompting before each."""
    pending: list[str] = []
    while True:
        print(prompt, end="", flush=True)
        while not pending:
            line = sys.stdin.readline()
            if not line:
                return
            pending = line.split()
        yield pending.pop(0)


def _parser(prog: str, description: str, default_host: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("--host", default=default_host)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    return parser


def server_main(argv: list[str] | None = None) -> int:
    """Run the time server until a client sends ``stop``."""
    args = _parser("netlab-time-server", "UDP time server.", "").parse_args(argv)
    print("Server Side !!!", flush=True)
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            try:
                sock.bind((args.host, args.port))
            except OSError as exc:
                print(f"Bind failed: {exc}", file=sys.stderr)
                return 1
            print("Connection established...", flush=True)
            serve(sock)
    except OSError as exc:
        print(f"Server failed: {exc}", file=sys.stderr)
        return 1
    return 0


def client_main(argv: list[str] | None = None) -> int:
    """Read words from stdin, send each, and print the server's replies."""
    args = _parser("netlab-time-client", "Ask the UDP time server.", "127.0.0.1").parse_args(argv)
    print("Client 1 Side !!!", flush=True)
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            client_session(sock, _stdin_words("Enter message for server: "), (args.host, args.port))
    except OSError as exc:
        print(f"Exchange with server failed: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(client_main())