"""Socket operations for sending and receiving frames."""

from __future__ import annotations

import logging
import socket

from .protocol import OpCode, Packet, decode_message, decode_values, encode_message

PORT = "4444"

_log = logging.getLogger(__name__)
_INT_SIZE = 4


def create_connection(ip: str, port: str | int) -> socket.socket:
    """Open a TCP connection to the server."""
    family, socktype, proto, _, address = socket.getaddrinfo(
        ip, port, socket.AF_INET, socket.SOCK_STREAM
    )[0]
    sock = socket.socket(family, socktype, proto)
    try:
        sock.connect(address)
    except OSError:
        sock.close()
        raise
    return sock


def send_message(message: str | bytes, sock: socket.socket) -> None:
    """Send a single message frame."""
    sock.sendall(encode_message(message))


def send_packet(packet: Packet, sock: socket.socket) -> None:
    """Send a packet frame."""
    sock.sendall(packet.serialize())


def start_server(host: str | None = None, port: str | int = PORT) -> socket.socket:
    """Create a listening socket bound to the given address."""
    family, socktype, proto, _, address = socket.getaddrinfo(
        host or None, port, socket.AF_INET, socket.SOCK_STREAM, 0, socket.AI_PASSIVE
    )[0]
    server = socket.socket(family, socktype, proto)
    try:
        if hasattr(socket, "SO_REUSEPORT"):
            server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEPORT, 1)
        server.bind(address)
        server.listen(socket.SOMAXCONN)
    except OSError:
        server.close()
        raise
    _log.debug("Listo para escuchar a mi cliente")
    return server


def wait_for_client(server: socket.socket) -> socket.socket:
    """Accept one client connection."""
    client, _ = server.accept()
    _log.info("Se conecto un cliente!")
    return client


def _recv_exact(sock: socket.socket, size: int) -> bytes:
    data = bytearray()
    while len(data) < size:
        chunk = sock.recv(size - len(data))
        if not chunk:
            break
        data += chunk
    return bytes(data)


def receive_operation(sock: socket.socket) -> OpCode | int | None:
    """Read an operation code; close the socket and return None on disconnect."""
    header = _recv_exact(sock, _INT_SIZE)
    if len(header) < _INT_SIZE:
        sock.close()
        return None
    value = int.from_bytes(header, "little", signed=True)
    try:
        return OpCode(value)
    except ValueError:
        return value


def receive_buffer(sock: socket.socket) -> bytes:
    """Read a size-prefixed payload."""
    header = _recv_exact(sock, _INT_SIZE)
    if len(header) < _INT_SIZE:
        raise ConnectionError("connection closed while reading payload size")
    size = int.from_bytes(header, "little", signed=True)
    if size < 0:
        raise ValueError(f"invalid payload size {size}")
    data = _recv_exact(sock, size)
    if len(data) < size:
        raise ConnectionError(f"connection closed after {len(data)} of {size} bytes")
    return data


def receive_message(sock: socket.socket) -> str:
    """Read the payload of a message frame."""
    return decode_message(receive_buffer(sock))


def receive_packet(sock: socket.socket) -> list[str]:
    """Read the payload of a packet frame and return its values."""
    return decode_values(receive_buffer(sock))