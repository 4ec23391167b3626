"""Server: accepts one client and logs every frame it receives."""

from __future__ import annotations

import argparse
import logging
import socket
import sys
from pathlib import Path

from .connection import (
    PORT,
    receive_message,
    receive_operation,
    receive_packet,
    start_server,
    wait_for_client,
)
from .protocol import OpCode

DEFAULT_LOG = "log.log"
_FORMAT = "[%(levelname)s] %(asctime)s %(name)s/(%(process)d:%(thread)d): %(message)s"


def start_logger(path: str | Path = DEFAULT_LOG) -> logging.Logger:
    """Return the server logger writing to the given file and to stdout."""
    logger = logging.getLogger("Servidor")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter(_FORMAT)
    for handler in (logging.FileHandler(path, encoding="utf-8"), logging.StreamHandler(sys.stdout)):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def serve_client(sock: socket.socket, logger: logging.Logger) -> None:
    """Log frames from the client until it disconnects."""
    try:
        while True:
            opcode = receive_operation(sock)
            if opcode is None:
                logger.error("el cliente se desconecto. Terminando servidor")
                return
            if opcode == OpCode.MESSAGE:
                logger.info("Me llego el mensaje %s", receive_message(sock))
            elif opcode == OpCode.PACKAGE:
                values = receive_packet(sock)
                logger.info("Me llegaron los siguientes valores:\n")
                for value in values:
                    logger.info("%s", value)
            else:
                logger.warning("Operacion desconocida. No quieras meter la pata")
    except ConnectionError:
        sock.close()
        logger.error("el cliente se desconecto. Terminando servidor")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Receive messages and packets from one client.")
    parser.add_argument("--host", default="", help="address to listen on")
    parser.add_argument("--port", default=PORT, help="port to listen on")
    parser.add_argument("--log", default=DEFAULT_LOG, help="log file")
    args = parser.parse_args(argv)

    logger = start_logger(args.log)
    with start_server(args.host or None, args.port) as server:
        logger.info("Servidor listo para recibir al cliente")
        client = wait_for_client(server)
        serve_client(client, logger)
    return 1


if __name__ == "__main__":
    sys.exit(main())