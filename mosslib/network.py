"""A TCP client that sends queued messages when the server signals readiness."""

import collections
import select
import socket
import threading

from .debug import debug_print

READY_PACKET = "CMD_^[READY]"
EXIT_PACKET = "CMD_^[EXIT]"
STOP_PACKET = "CMD_^[STOP]"

_BUFFER_SIZE = 65535
_POLL_SECONDS = 0.05


class SocketError(Exception):
    """Base class for socket and TCP connection errors."""

    default_message = "Error: Unspecified error!"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class SocketCreationError(SocketError):
    default_message = "Error: Could not create socket!"


class SocketAddressError(SocketError):
    default_message = "Error: Unsupported or invalid address!"


class SocketConnectionError(SocketError):
    default_message = "Error: Could not connect!"


class SocketOtherError(SocketError):
    default_message = "Error: Unspecified error!"


def construct_connection(address, port, retries=5):
    """Connect to ``address``:``port``, trying up to ``retries`` times."""
    try:
        infos = socket.getaddrinfo(address, port, socket.AF_INET, socket.SOCK_STREAM)
    except (socket.gaierror, UnicodeError, OverflowError, TypeError) as exc:
        raise SocketAddressError() from exc
    sockaddr = infos[0][4]

    for _ in range(retries):
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            raise SocketCreationError() from exc
        debug_print("Client:\tSocket successfully created..")
        try:
            sock.connect(sockaddr)
        except OSError:
            sock.close()
            continue
        debug_print("Client:\tConnected to the server...")
        return sock
    raise SocketConnectionError()


class TCPClient:
    """A connection whose writes wait for the server's ready packet."""

    def __init__(self, address, port):
        debug_print("Constructing TCP client...")
        self._sock = construct_connection(address, port, 5)
        self._cond = threading.Condition()
        self._running = True
        self._server_ready = False
        self._peer_closed = False
        self._write_queue = collections.deque()
        self._read_buffer = ""
        debug_print("Client:\tStarting listener...")
        self._listener = threading.Thread(target=self._listen, daemon=True)
        self._listener.start()

    def _mark_peer_closed(self):
        with self._cond:
            self._peer_closed = True
            self._cond.notify_all()

    def _handle_chunk(self, chunk):
        text = chunk.decode("utf-8", "replace").split("\0", 1)[0]
        ready = READY_PACKET in text
        if ready:
            text = text.replace(READY_PACKET, "")
            debug_print("Client:\tServer is ready!")
        with self._cond:
            if ready:
                self._server_ready = True
            if text:
                debug_print("Client:\tRecieved readable data: ", False)
                debug_print(text)
                self._read_buffer = text
            self._cond.notify_all()

    def _next_outgoing(self):
        with self._cond:
            if not self._running:
                raise _Stop
            while self._write_queue and not self._write_queue[0]:
                self._write_queue.popleft()
            if self._server_ready and self._write_queue:
                self._server_ready = False
                return self._write_queue.popleft()
        return None

    def _listen(self):
        while True:
            try:
                outgoing = self._next_outgoing()
            except _Stop:
                return
            try:
                if outgoing is not None:
                    debug_print("Client:\tServer is ready and we have data to send!")
                    self._sock.sendall(outgoing.encode("utf-8") + b"\0")
                readable, _, _ = select.select([self._sock], [], [], _POLL_SECONDS)
                if not readable:
                    continue
                chunk = self._sock.recv(_BUFFER_SIZE)
            except (OSError, ValueError):
                self._mark_peer_closed()
                return
            if not chunk:
                self._mark_peer_closed()
                return
            self._handle_chunk(chunk)

    def has_readable_data(self):
        """Return how many bytes can be read from the socket right now."""
        try:
            readable, _, _ = select.select([self._sock], [], [], 0)
            if not readable:
                return 0
            return len(self._sock.recv(_BUFFER_SIZE, socket.MSG_PEEK))
        except (OSError, ValueError) as exc:
            raise SocketOtherError() from exc

    def send(self, data):
        """Queue ``data`` to be written once the server is ready; returns the client."""
        with self._cond:
            self._write_queue.append(str(data))
            self._cond.notify_all()
        return self

    def receive(self, timeout=None):
        """Wait for data from the server and return it, emptying the read buffer."""
        debug_print("Client:\tAwaiting buffer to fill for a read")
        with self._cond:
            arrived = self._cond.wait_for(
                lambda: self._read_buffer or self._peer_closed or not self._running,
                timeout,
            )
            if self._read_buffer:
                debug_print("Client:\tAttempting a read of buffer data")
                data, self._read_buffer = self._read_buffer, ""
                return data
            if not arrived:
                raise TimeoutError("no data received before the timeout")
            raise SocketConnectionError("Error: Connection closed!")

    def close(self):
        """Stop the listener thread and close the socket."""
        with self._cond:
            if not self._running:
                return
            debug_print("Deconstructing TCP client...")
            self._running = False
            self._cond.notify_all()
        if self._listener is not threading.current_thread():
            self._listener.join()
        self._sock.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class _Stop(Exception):
    """Internal signal that the listener should end."""