"""UDP server that acknowledges every datagram, and a one-shot client."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import TextIO

DEFAULT_PORT = 12345
BUF_SIZE = 1024
RESPONSE = b"Message received"
EXIT_MESSAGE = "exit"


class EmptyMessageError(ValueError):
    """Raised when there is nothing to send."""


def _as_text(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def serve(sock: socket.socket, out: TextIO | None = None) -> list[str]:
    """Acknowledge datagrams on a bound socket until ``exit`` arrives.

    Returns every message received, the final ``exit`` included.
    """
    out = out if out is not None else sys.stdout
    received: list[str] = []
    while True:
        try:
            data, client = sock.recvfrom(BUF_SIZE - 1)
        except ConnectionError as exc:
            print(f"recvfrom failed: {exc}", file=sys.stderr)
            continue
        message = _as_text(data)
        received.append(message)
        print(f"Received from client: {message}", file=out, flush=True)
        if message == EXIT_MESSAGE:
            print("Exit signal received. Shutting down.", file=out, flush=True)
            break
        sock.sendto(RESPONSE, client)
    return received


def send_message(
    message: str,
    host: str = "127.0.0.1",
    port: int = DEFAULT_PORT,
    timeout: float | None = None,
) -> str:
    """Send the first line of ``message`` and return the server's reply."""
    message = message.split("\n", 1)[0]
    if not message:
        raise EmptyMessageError("No message entered.")
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.settimeout(timeout)
        sock.sendto(message.encode("utf-8"), (host, port))
        data, _ = sock.recvfrom(BUF_SIZE - 1)
    return _as_text(data)


def server_main(argv: list[str] | None = None) -> int:
    """Run the acknowledging server until a client sends ``exit``."""
    parser = argparse.ArgumentParser(prog="netlab-udp-server", description="UDP acknowledging server.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.bind((args.host, args.port))
            print(f"UDP Server listening on port {args.port}...", flush=True)
            serve(sock)
    except OSError as exc:
        print(f"Bind failed: {exc}", file=sys.stderr)
        return 1
    return 0


def client_main(argv: list[str] | None = None) -> int:
    """Read a message, send it, and print the server's reply."""
    parser = argparse.ArgumentParser(prog="netlab-udp-client", description="Send one UDP message.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--timeout", type=float, default=None)
    args = parser.parse_args(argv)
    try:
        message = input("Enter message to send to server: ")
    except EOFError:
        message = ""
    try:
        reply = send_message(message, args.host, args.port, args.timeout)
    except EmptyMessageError:
        print("No message entered. Exiting.")
        return 1
    except OSError as exc:
        print(f"Exchange with server failed: {exc}", file=sys.stderr)
        return 1
    print("Message sent to server")
    print(f"Server response: {reply}")
    return 0


if __name__ == "__main__":
    sys.exit(client_main())