import socket
import threading

from logging import Logger

from .dispatch import ThreadPerConnection
from .errors import (MonitorError, Result, SOCKET_CREATE_ERROR, BIND_ERROR,
                     LISTEN_ERROR, ACCEPT_ERROR, READ_ERROR)

DEFAULT_HOST = '0.0.0.0'
DEFAULT_BACKLOG = 10
BUFFER_SIZE = 1024


class Server:
    """
    Accepts heartbeat connections and appends each message to the
    injected log sink.

    Every accepted connection is handed to the dispatcher straight
    away, and the accept loop never waits for a handler to finish.
    A handler does a single read of up to `buffer_size` bytes and
    treats whatever arrived as the whole message.
    """

    def __init__(self, port: int,
                 sink,
                 logger: Logger,
                 host: str = DEFAULT_HOST,
                 backlog: int = DEFAULT_BACKLOG,
                 buffer_size: int = BUFFER_SIZE,
                 dispatcher=None):
        self.port = port
        self.sink = sink
        self.logger = logger
        self.host = host
        self.backlog = backlog
        self.buffer_size = buffer_size
        self.dispatcher = dispatcher or ThreadPerConnection()
        self._sock = None
        self._running = threading.Event()
        self._listening = threading.Event()

    @property
    def address(self):
        if self._sock is None:
            return None
        return self._sock.getsockname()

    def wait_listening(self, timeout: float = None) -> bool:
        return self._listening.wait(timeout)

    def setup(self) -> Result:
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as err:
            return Result.failure(MonitorError(
                SOCKET_CREATE_ERROR, f'Failed to create socket: {err}'))

        try:
            sock.bind((self.host, self.port))
        except OSError as err:
            sock.close()
            return Result.failure(MonitorError(
                BIND_ERROR, f'Failed to bind {self.host}:{self.port}: {err}'))

        try:
            sock.listen(self.backlog)
        except OSError as err:
            sock.close()
            return Result.failure(MonitorError(
                LISTEN_ERROR, f'Failed to listen: {err}'))

        return Result.success(sock)

    def start(self) -> Result:
        result = self.setup()
        if not result.ok:
            self.logger.error(f'Server error: {result.error}')
            return result

        self._sock = result.value
        self._running.set()
        self.logger.info(f'Server listening on port {self.address[1]}')
        self._listening.set()
        try:
            self.accept_connections(self._sock)
        finally:
            self._sock.close()
            self.dispatcher.shutdown()
            self.logger.info('Server stopped')
        return Result.success()

    def accept_connections(self, sock: socket.socket):
        while self._running.is_set():
            result = self.accept(sock)
            if not self._running.is_set():
                if result.ok:
                    result.value[0].close()
                break
            if not result.ok:
                self.logger.error(f'Server error: {result.error}')
                continue
            conn, addr = result.value
            self.logger.debug(f'Connection from {addr}')
            try:
                self.dispatcher.dispatch(self.handle, conn, addr)
            except Exception:
                conn.close()
                raise

    def accept(self, sock: socket.socket) -> Result:
        try:
            return Result.success(sock.accept())
        except OSError as err:
            return Result.failure(MonitorError(
                ACCEPT_ERROR, f'Failed to accept connection: {err}'))

    def read(self, conn: socket.socket) -> Result:
        try:
            return Result.success(conn.recv(self.buffer_size))
        except OSError as err:
            return Result.failure(MonitorError(
                READ_ERROR, f'Failed to read from client socket: {err}'))

    def handle(self, conn: socket.socket, addr=None) -> Result:
        try:
            result = self.read(conn)
            if result.ok:
                result = self.sink.append(result.value)
            if not result.ok:
                self.logger.error(f'Client handling error: {result.error}')
            else:
                self.logger.info(f'Received heartbeat from {addr}: '
                                 f'{result.value!r}')
            return result
        finally:
            conn.close()

    def stop(self):
        """Ends the accept loop. The blocked accept is woken with a
        throwaway connection."""
        if not self._running.is_set():
            return
        self._running.clear()
        address = self.address
        if address is None:
            return
        host = '127.0.0.1' if address[0] == DEFAULT_HOST else address[0]
        try:
            with socket.create_connection((host, address[1]), timeout=1):
                pass
        except OSError as err:
            self.logger.debug(f'Could not wake accept loop: {err}')
