"""Client: logs console input, then sends a message and a packet to the server."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path

from .config import load_config
from .connection import create_connection, send_message, send_packet
from .protocol import Packet

DEFAULT_LOG = "tp0.log"
DEFAULT_CONFIG = "cliente.config"
_FORMAT = "[%(levelname)s] %(asctime)s %(name)s/(%(process)d:%(thread)d): %(message)s"


def start_logger(path: str | Path = DEFAULT_LOG) -> logging.Logger:
    """Return the client logger writing to the given file and to stdout."""
    logger = logging.getLogger("LOG_TP0")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.INFO)
    formatter = logging.Formatter(_FORMAT)
    for handler in (logging.FileHandler(path, encoding="utf-8"), logging.StreamHandler(sys.stdout)):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def read_lines(prompt: str = "> ") -> Iterator[str]:
    """Yield lines typed at the console until an empty line or end of input."""
    while True:
        try:
            line = input(prompt)
        except EOFError:
            return
        if line == "":
            return
        yield line


def log_console(logger: logging.Logger, lines: Iterable[str]) -> list[str]:
    """Log every line, then the empty line that ended the input; return the lines."""
    logged = []
    for line in lines:
        logger.info(">> %s", line)
        logged.append(line)
    logger.info(">> %s", "")
    return logged


def build_packet(lines: Iterable[str]) -> Packet:
    """Build a packet holding each line as a value."""
    packet = Packet()
    for line in lines:
        packet.add(line)
    return packet


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Send console input to the server.")
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="configuration file")
    parser.add_argument("--log", default=DEFAULT_LOG, help="log file")
    args = parser.parse_args(argv)

    logger = start_logger(args.log)
    logger.info("Hola! Soy un log")

    try:
        config = load_config(args.config)
        value, ip, port = config["CLAVE"], config["IP"], config["PUERTO"]
    except OSError as exc:
        logger.error("No se pudo leer la config %s: %s", args.config, exc)
        return 1
    except KeyError as exc:
        logger.error("Falta la clave %s en la config", exc)
        return 1

    logger.info("%s", value)
    log_console(logger, read_lines())

    try:
        with create_connection(ip, port) as sock:
            send_message(value, sock)
            send_packet(build_packet(read_lines()), sock)
    except OSError as exc:
        logger.error("No se pudo conectar a %s:%s: %s", ip, port, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())