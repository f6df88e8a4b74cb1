import threading

from concurrent.futures import ThreadPoolExecutor


class ThreadPerConnection:
    """
    Starts one detached daemon thread per accepted connection.
    There is no limit on how many handlers run at once.
    """

    def dispatch(self, handler, *args):
        thread = threading.Thread(target=handler, args=args, daemon=True)
        thread.start()
        return thread

    def shutdown(self):
        pass


class BoundedPool:
    """
    Runs handlers on a fixed number of worker threads. Connections
    beyond `max_workers` wait in the executor queue.
    """

    def __init__(self, max_workers: int):
        if max_workers < 1:
            raise ValueError('max_workers must be at least 1')
        self.max_workers = max_workers
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix='heartbeat-handler')

    def dispatch(self, handler, *args):
        return self._executor.submit(handler, *args)

    def shutdown(self):
        self._executor.shutdown(wait=False)


def get_dispatcher(max_handlers: int = None):
    if max_handlers is None:
        return ThreadPerConnection()
    if isinstance(max_handlers, bool) or not isinstance(max_handlers, int) \
            or max_handlers < 1:
        raise ValueError('server.max_handlers must be a positive integer '
                         f'or null, got {max_handlers!r}')
    return BoundedPool(max_handlers)
