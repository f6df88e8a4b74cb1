import json
import socket

import pytest

from .__main__ import main
from .conftest import closed_port
from .config import load_config


@pytest.fixture
def no_sockets(monkeypatch):
    created = []

    def fail(*args, **kwargs):
        created.append(args)
        raise AssertionError('socket created')

    monkeypatch.setattr(socket, 'socket', fail)
    return created


@pytest.mark.parametrize('argv', [
    [],
    ['server'],
    ['server', 'notaport'],
    ['server', '70000'],
    ['client', 'alpha', '9000'],
    ['client', 'alpha', '9000', 'soon'],
    ['client', 'two words', '9000', '1'],
    ['monitor', '9000'],
])
def test_invalid_arguments_are_usage_errors(argv, no_sockets, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv)

    assert exc.value.code != 0
    assert 'usage:' in capsys.readouterr().err
    assert no_sockets == []


def test_client_exits_with_failure_when_server_is_down(tmp_path):
    config = str(tmp_path / 'missing.json')
    assert main(['--config', config, 'client', 'alpha',
                 str(closed_port()), '1']) == 1


def test_server_exits_with_failure_when_port_is_taken(tmp_path):
    occupied = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    occupied.bind(('0.0.0.0', 0))
    occupied.listen(1)
    config = str(tmp_path / 'missing.json')
    try:
        assert main(['--config', config, 'server',
                     str(occupied.getsockname()[1])]) == 1
    finally:
        occupied.close()


def test_init_writes_default_config(tmp_path):
    config = tmp_path / 'config.json'
    assert main(['--config', str(config), 'init']) == 0

    with open(config) as fhandle:
        written = json.load(fhandle)
    assert written['server']['log_file'] == 'log.txt'
    assert written['server']['backlog'] == 10


def test_load_config_overlays_defaults(tmp_path):
    config = tmp_path / 'config.json'
    config.write_text(json.dumps({'server': {'max_handlers': 8}}))

    loaded = load_config(str(config))

    assert loaded['server']['max_handlers'] == 8
    assert loaded['server']['buffer_size'] == 1024
    assert loaded['client']['host'] == '127.0.0.1'
    assert load_config(str(tmp_path / 'absent.json'))['server']['host'] == '0.0.0.0'


def test_bad_max_handlers_is_a_config_error(tmp_path, capsys):
    config = tmp_path / 'config.json'
    config.write_text(json.dumps({'server': {'max_handlers': '8'}}))

    with pytest.raises(SystemExit) as exc:
        main(['--config', str(config), 'server', '9000'])

    assert exc.value.code == 2
    assert 'max_handlers' in capsys.readouterr().err
