# mosslib

A small utility library with three modules:

- `mosslib.bimap`: `BiMap` is an ordered list of pairs that can be searched from either side.
- `mosslib.debug`: debug printing, switched on by an environment variable.
- `mosslib.network`: `TCPClient` is a TCP client that queues outgoing messages. It sends each one only after the server has sent a ready packet.

The library has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## BiMap

```python
from mosslib.bimap import BiMap, NoValueError

words = BiMap([("Hello", 1), ("how", 2)])
words.append(("you", 3)).extend([("today", 4)])

words.second_for("Hello")   # 1
words.first_for(2)          # "how"
words["you"]                # 3
words[4]                    # "today"

for first, second in words:
    print(first, second)

len(words)                  # 4

try:
    words.second_for("missing")
except NoValueError:
    ...
```

Pairs are kept in insertion order, and duplicates are allowed.

- Lookups return the match from the first matching pair.
- `words[key]` first searches the first elements. If nothing matches there, it searches the second elements. When a value could appear on either side, a match on the first side wins.
- If no pair matches, `NoValueError` is raised. It is a subclass of `KeyError`.
- `append` and `extend` return the map, so calls can be chained.
- Each pair must have exactly two items. Otherwise `ValueError` is raised.

## Debug printing

```python
from mosslib.debug import debug_enabled, debug_print

debug_print("connecting...")                  # newline=True, env_var="DEBUG"
debug_print("no newline", False, "MY_DEBUG")
```

A message is written to standard output only when the named environment variable is set to `true` or `True`. The default variable is `DEBUG`. `debug_enabled(env_var)` reports whether that is the case.

## TCP client

```python
from mosslib.network import TCPClient, EXIT_PACKET

with TCPClient("127.0.0.1", 1234) as client:
    client.send("hello").send(EXIT_PACKET)
    reply = client.receive(timeout=5.0)
```

### Connecting

Connecting resolves the address as IPv4 and makes up to five attempts. The outcomes are:

- An address that cannot be resolved raises `SocketAddressError`.
- A socket that cannot be created raises `SocketCreationError`.
- If every attempt fails, `SocketConnectionError` is raised.

`construct_connection(address, port, retries=5)` returns a connected `socket.socket` without starting the background thread.

### Background thread

A background thread handles the connection:

- **Ready packet.** When the server sends the ready packet `CMD_^[READY]`, the client is allowed to write the next message. The packet text is removed from the incoming data.
- **Writing.** Each ready packet lets exactly one queued message be written. The message is encoded as UTF-8 and followed by a NUL byte. Empty messages are discarded.
- **Reading.** Other incoming data is decoded as UTF-8 and cut at the first NUL byte. It is then stored in the read buffer. Each new chunk replaces whatever was there before.

### Methods and constants

- `send(data)` queues a message and returns the client.
- `receive(timeout=None)` waits for the read buffer to fill, returns its contents and empties it. On timeout it raises `TimeoutError`. If the connection was closed, it raises `SocketConnectionError`.
- `has_readable_data()` returns how many bytes are currently waiting on the socket. If the socket cannot be queried, it raises `SocketOtherError`.
- `close()` stops the background thread and closes the socket. Leaving a `with` block calls it.
- `READY_PACKET`, `EXIT_PACKET` (`CMD_^[EXIT]`) and `STOP_PACKET` (`CMD_^[STOP]`) are available as module constants.

All socket errors derive from `SocketError`:

- `SocketCreationError`
- `SocketAddressError`
- `SocketConnectionError`
- `SocketOtherError`

## What the package does not do

`mosslib.network` provides only the client side. It has no server to listen for connections or send ready packets. Nothing in the package acts on `EXIT_PACKET` or `STOP_PACKET` either; it is up to the server you connect to. The package also installs no command-line tools.