import socket
import time

from logging import Logger

from .errors import (MonitorError, Result, SOCKET_CREATE_ERROR,
                     CONNECT_ERROR, SEND_ERROR)
from .heartbeat import Heartbeat

DEFAULT_HOST = '127.0.0.1'


class Client:
    """
    Sends one heartbeat per fresh connection, then sleeps `period`
    seconds. The first failure ends the loop; a failed cycle is
    never retried.
    """

    def __init__(self, name: str,
                 port: int,
                 period: float,
                 logger: Logger,
                 host: str = DEFAULT_HOST,
                 sleep=time.sleep,
                 max_cycles: int = None):
        self.name = name
        self.port = port
        self.period = period
        self.logger = logger
        self.host = host
        self.sleep = sleep
        self.max_cycles = max_cycles

    def start(self) -> Result:
        cycles = 0
        while self.max_cycles is None or cycles < self.max_cycles:
            result = self.send_heartbeat()
            if not result.ok:
                self.logger.error(f'Client error: {result.error}')
                return result
            cycles += 1
            self.sleep(self.period)
        return Result.success(cycles)

    def send_heartbeat(self) -> Result:
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as err:
            return Result.failure(MonitorError(
                SOCKET_CREATE_ERROR, f'Socket creation error: {err}'))

        with sock:
            try:
                sock.connect((self.host, self.port))
            except OSError as err:
                return Result.failure(MonitorError(
                    CONNECT_ERROR,
                    f'Connection to {self.host}:{self.port} failed: {err}'))

            heartbeat = Heartbeat.now(self.name)
            try:
                sock.sendall(heartbeat.encode())
            except OSError as err:
                return Result.failure(MonitorError(
                    SEND_ERROR, f'Failed to send message: {err}'))

        self.logger.debug(f'Sent heartbeat {heartbeat}')
        return Result.success(heartbeat)
