from logging import Logger

from .client import Client
from .config import load_config
from .dispatch import get_dispatcher
from .errors import MonitorError, Result
from .heartbeat import Heartbeat, format_timestamp
from .log_sink import FileLogSink, MemoryLogSink
from .logger import get_logger
from .server import Server


def run_server(params: dict, port: int, logger: Logger = None) -> Result:
    server_params = params.get('server', {})
    if logger is None:
        logger = get_logger(params.get('log'))

    dispatcher = get_dispatcher(server_params.get('max_handlers'))
    sink = FileLogSink(server_params.get('log_file') or 'log.txt')
    server = Server(port, sink, logger,
                    host=server_params.get('host', '0.0.0.0'),
                    backlog=server_params.get('backlog', 10),
                    buffer_size=server_params.get('buffer_size', 1024),
                    dispatcher=dispatcher)
    return server.start()


def run_client(params: dict,
               name: str,
               port: int,
               period: float,
               logger: Logger = None) -> Result:
    client_params = params.get('client', {})
    if logger is None:
        logger = get_logger(params.get('log'))

    client = Client(name, port, period, logger,
                    host=client_params.get('host', '127.0.0.1'))
    logger.info(f'Client {name} sending to port {port} every {period}s')
    return client.start()
