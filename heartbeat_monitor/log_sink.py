import threading

from .errors import MonitorError, Result, LOG_WRITE_ERROR

DEFAULT_LOG_FILE = 'log.txt'


def _as_bytes(line) -> bytes:
    if isinstance(line, str):
        return line.encode('utf-8')
    return bytes(line)


class FileLogSink:
    """
    Append-only heartbeat log shared by every connection handler.

    Each append is a full open/write/close cycle done while holding
    the sink's lock, so lines from concurrent handlers never
    interleave. Received bytes are written as-is followed by a
    newline.
    """

    def __init__(self, path: str = DEFAULT_LOG_FILE,
                 lock: threading.Lock = None):
        self.path = path
        self.lock = lock or threading.Lock()

    def append(self, line) -> Result:
        data = _as_bytes(line)
        with self.lock:
            try:
                with open(self.path, 'ab') as fhandle:
                    fhandle.write(data + b'\n')
            except OSError as err:
                return Result.failure(MonitorError(
                    LOG_WRITE_ERROR,
                    f'Failed to open log file {self.path}: {err}'))
        return Result.success(data)


class MemoryLogSink:
    """Keeps appended lines in memory, same locking as FileLogSink."""

    def __init__(self, lock: threading.Lock = None):
        self.lock = lock or threading.Lock()
        self._lines = []

    def append(self, line) -> Result:
        data = _as_bytes(line)
        with self.lock:
            self._lines.append(data)
        return Result.success(data)

    @property
    def lines(self) -> list:
        with self.lock:
            return list(self._lines)
