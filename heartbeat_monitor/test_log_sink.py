import threading

from .conftest import read_lines
from .errors import LOG_WRITE_ERROR
from .log_sink import FileLogSink, MemoryLogSink


def test_append_creates_file_and_adds_newline(log_path):
    sink = FileLogSink(log_path)
    assert sink.append(b'2024-01-02 03:04:05.007 alpha').ok
    assert sink.append('2024-01-02 03:04:06.010 beta').ok

    with open(log_path, 'rb') as fhandle:
        assert fhandle.read() == (b'2024-01-02 03:04:05.007 alpha\n'
                                  b'2024-01-02 03:04:06.010 beta\n')


def test_append_writes_bytes_unchanged(log_path):
    payload = 'café ❤'.encode('utf-8') + b'\xff'
    FileLogSink(log_path).append(payload)
    assert read_lines(log_path) == [payload]


def test_concurrent_appends_never_interleave(log_path):
    sink = FileLogSink(log_path)
    barrier = threading.Barrier(100)
    messages = [(f'2024-01-02 03:04:05.{i:03d} client-{i} ' + 'x' * 200).encode()
                for i in range(100)]

    def worker(message):
        barrier.wait()
        assert sink.append(message).ok

    threads = [threading.Thread(target=worker, args=(m,)) for m in messages]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    lines = read_lines(log_path)
    assert len(lines) == 100
    assert sorted(lines) == sorted(messages)


def test_unopenable_log_is_a_write_error(tmp_path):
    result = FileLogSink(str(tmp_path)).append(b'alpha')
    assert not result.ok
    assert result.error.kind == LOG_WRITE_ERROR


def test_memory_sink_shares_interface():
    sink = MemoryLogSink()
    assert sink.append('alpha').ok
    assert sink.append(b'beta').ok
    assert sink.lines == [b'alpha', b'beta']
