import io
import socket
import threading
from datetime import datetime

import pytest

from netlab.udp_time import client_session, serve, time_message

FIXED = datetime(2024, 1, 2, 3, 4, 5)


def _fixed_clock():
    return FIXED


@pytest.fixture
def server_sock():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(5)
    yield sock
    sock.close()


@pytest.fixture
def client_sock():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.settimeout(5)
    yield sock
    sock.close()


def _start_server(sock, out):
    result = {}

    def run():
        result["received"] = serve(sock, out, _fixed_clock)

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return thread, result


def test_time_message_format():
    assert time_message(FIXED) == "Time is 03:04:05"


def test_time_message_pads_fields():
    text = time_message(datetime(2024, 5, 6, 23, 59, 0))
    assert text.startswith("Time is ")
    assert text.endswith("23:59:00")


def test_serve_replies_with_time_and_stops(server_sock, client_sock):
    out = io.StringIO()
    thread, result = _start_server(server_sock, out)
    address = server_sock.getsockname()

    client_sock.sendto(b"hello\0", address)
    data, _ = client_sock.recvfrom(64)
    assert data == time_message(FIXED).encode() + b"\0"

    client_sock.sendto(b"stop\0", address)
    data, _ = client_sock.recvfrom(64)
    assert data.rstrip(b"\0").decode() == time_message(FIXED)

    thread.join(5)
    assert result["received"] == ["hello", "stop"]
    assert "Message from client: hello" in out.getvalue()
    assert out.getvalue().count("Time sent to client...") == 2


def test_client_session_stops_before_sending_stop(server_sock, client_sock):
    out = io.StringIO()
    thread, result = _start_server(server_sock, out)
    address = server_sock.getsockname()

    client_out = io.StringIO()
    replies = client_session(client_sock, ["a", "b", "stop", "c"], address, client_out)
    assert replies == [time_message(FIXED)] * 2
    assert client_out.getvalue().count("Received from server: ") == 2

    client_sock.sendto(b"stop\0", address)
    client_sock.recvfrom(64)
    thread.join(5)
    assert result["received"] == ["a", "b", "stop"]


def test_client_session_with_no_messages(client_sock):
    assert client_session(client_sock, [], ("127.0.0.1", 9), io.StringIO()) == []