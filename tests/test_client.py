import logging

from paquetes.client import build_packet, log_console, main, read_lines, start_logger
from paquetes.connection import (
    receive_message,
    receive_operation,
    receive_packet,
    start_server,
    wait_for_client,
)
from paquetes.protocol import OpCode, decode_values


def _feed(monkeypatch, lines):
    values = iter(lines)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(values))


def test_read_lines_stops_at_empty(monkeypatch):
    _feed(monkeypatch, ["a", "b", "", "c"])
    assert list(read_lines()) == ["a", "b"]


def test_read_lines_stops_at_eof(monkeypatch):
    def raise_eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)
    assert list(read_lines()) == []


def test_log_console(caplog):
    logger = logging.getLogger("test.client.console")
    caplog.set_level(logging.INFO)
    assert log_console(logger, ["uno", "dos"]) == ["uno", "dos"]
    assert [r.getMessage() for r in caplog.records] == [">> uno", ">> dos", ">> "]


def test_build_packet_round_trip():
    packet = build_packet(["x", "yz"])
    assert packet.opcode == OpCode.PACKAGE
    assert decode_values(bytes(packet.payload)) == ["x", "yz"]


def test_start_logger_writes_file(tmp_path):
    path = tmp_path / "client.log"
    logger = start_logger(path)
    logger.info("mensaje de prueba")
    for handler in logger.handlers:
        handler.flush()
    assert "mensaje de prueba" in path.read_text(encoding="utf-8")


def test_main_sends_message_and_packet(tmp_path, monkeypatch):
    with start_server("127.0.0.1", 0) as server:
        port = server.getsockname()[1]
        config = tmp_path / "cliente.config"
        config.write_text(f"CLAVE=hola\nIP=127.0.0.1\nPUERTO={port}\n", encoding="utf-8")
        _feed(monkeypatch, ["consola", "", "uno", "dos", ""])
        assert main(["--config", str(config), "--log", str(tmp_path / "c.log")]) == 0
        with wait_for_client(server) as client:
            assert receive_operation(client) == OpCode.MESSAGE
            assert receive_message(client) == "hola"
            assert receive_operation(client) == OpCode.PACKAGE
            assert receive_packet(client) == ["uno", "dos"]


def test_main_missing_config(tmp_path):
    args = ["--config", str(tmp_path / "none.config"), "--log", str(tmp_path / "c.log")]
    assert main(args) == 1