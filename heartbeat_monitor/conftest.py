import logging
import socket
import threading
import time

import pytest

from .log_sink import FileLogSink
from .server import Server


def wait_for(predicate, timeout=5.0, interval=0.01):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(interval)
    return predicate()


def read_lines(path):
    try:
        with open(path, 'rb') as fhandle:
            return fhandle.read().split(b'\n')[:-1]
    except FileNotFoundError:
        return []


def closed_port():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(('127.0.0.1', 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


def send_raw(port, payload: bytes):
    with socket.create_connection(('127.0.0.1', port), timeout=5) as sock:
        sock.sendall(payload)


@pytest.fixture
def logger():
    test_logger = logging.getLogger('monitor_test')
    test_logger.setLevel(logging.DEBUG)
    return test_logger


@pytest.fixture
def log_path(tmp_path):
    return str(tmp_path / 'log.txt')


@pytest.fixture
def running_server(log_path, logger):
    server = Server(0, FileLogSink(log_path), logger, host='127.0.0.1')
    thread = threading.Thread(target=server.start, daemon=True)
    thread.start()
    assert server.wait_listening(5)
    yield server
    server.stop()
    thread.join(5)
