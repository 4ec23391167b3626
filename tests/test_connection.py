import socket
import struct

import pytest

from paquetes.connection import (
    create_connection,
    receive_buffer,
    receive_message,
    receive_operation,
    receive_packet,
    send_message,
    send_packet,
    start_server,
    wait_for_client,
)
from paquetes.protocol import OpCode, Packet


@pytest.fixture
def pair():
    left, right = socket.socketpair()
    yield left, right
    left.close()
    right.close()


def test_message_over_socket(pair):
    left, right = pair
    send_message("hola", left)
    assert receive_operation(right) == OpCode.MESSAGE
    assert receive_message(right) == "hola"


def test_packet_over_socket(pair):
    left, right = pair
    packet = Packet()
    packet.add("a")
    packet.add("bcd")
    send_packet(packet, left)
    assert receive_operation(right) == OpCode.PACKAGE
    assert receive_packet(right) == ["a", "bcd"]


def test_unknown_operation_returned_as_int(pair):
    left, right = pair
    left.sendall(struct.pack("<i", 7))
    assert receive_operation(right) == 7


def test_disconnect_returns_none_and_closes(pair):
    left, right = pair
    left.close()
    assert receive_operation(right) is None
    assert right.fileno() == -1


def test_truncated_buffer_raises(pair):
    left, right = pair
    left.sendall(struct.pack("<i", 10) + b"abc")
    left.close()
    with pytest.raises(ConnectionError):
        receive_buffer(right)


def test_server_and_client_loopback():
    with start_server("127.0.0.1", 0) as server:
        port = server.getsockname()[1]
        with create_connection("127.0.0.1", str(port)) as client:
            with wait_for_client(server) as accepted:
                send_message("ping", client)
                assert receive_operation(accepted) == OpCode.MESSAGE
                assert receive_message(accepted) == "ping"