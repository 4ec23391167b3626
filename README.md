# paquetes

A small TCP client and server pair that talk through a simple binary
protocol. Each frame begins with an operation code and a payload size,
both 32-bit little-endian signed integers, and then the payload:

- **MESSAGE** (`OpCode.MESSAGE`, 0): the payload is a single
  NUL-terminated UTF-8 string.
- **PACKAGE** (`OpCode.PACKAGE`, 1): the payload is a series of values.
  Each value is a 4-byte length followed by that many bytes.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
paquetes-server
```

Options:

- `--host`: address to listen on (all addresses by default)
- `--port`: port to listen on (default `4444`)
- `--log`: log file (default `log.log`)

The server accepts one client. It logs every message it gets, and every
value in every packet it gets, to standard output and to the log file.
A frame with an unknown operation code is logged as a warning. When the
client disconnects the server logs an error and exits with status 1.

## Running the client

The client reads its settings from a configuration file of `KEY=VALUE`
lines. Lines starting with `#` and lines without `=` are ignored:

```
IP=127.0.0.1
PUERTO=4444
CLAVE=hello
```

Start it with:

```
paquetes-client
```

Options:

- `--config`: configuration file (default `cliente.config`)
- `--log`: log file (default `tp0.log`)

Make sure the server is already running. The client works in these steps:

1. It logs a greeting and the value of `CLAVE` to standard output and to
   the log file.
2. It reads lines from the console at a `> ` prompt and logs each one. An
   empty line or end of input ends this step.
3. It connects to `IP`:`PUERTO` and sends `CLAVE` as a message.
4. It reads more lines at the prompt until an empty line or end of input,
   then sends them all to the server as one packet.

If the configuration file cannot be read, lacks one of the three keys, or
the connection fails, the client logs an error and exits with status 1.

## Using the library

```python
from paquetes.protocol import Packet, OpCode, encode_message, decode_values

packet = Packet()
packet.add("first")      # strings are sent as UTF-8 with a trailing NUL
packet.add(b"second\0")  # bytes are sent as given
frame = packet.serialize()

encode_message("hello")  # a complete MESSAGE frame
decode_values(bytes(packet.payload))  # ["first", "second"]
```

`paquetes.connection` has the socket helpers: `create_connection`,
`send_message` and `send_packet` for the client side, and `start_server`,
`wait_for_client`, `receive_operation`, `receive_buffer`,
`receive_message` and `receive_packet` for the server side.
`paquetes.config` has `parse_config` and `load_config` for the
configuration format above.

## Limits

The server serves a single client and then stops; it does not handle
several clients at once or accept new ones after the first disconnects.
Frames are neither encrypted nor authenticated.