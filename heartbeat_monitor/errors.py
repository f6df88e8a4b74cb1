SOCKET_CREATE_ERROR = 'SocketCreateError'
BIND_ERROR = 'BindError'
LISTEN_ERROR = 'ListenError'
ACCEPT_ERROR = 'AcceptError'
READ_ERROR = 'ReadError'
CONNECT_ERROR = 'ConnectError'
SEND_ERROR = 'SendError'
LOG_WRITE_ERROR = 'LogWriteError'


class MonitorError(Exception):
    """
    The one error kind used across the monitor. `kind` names the
    failing stage, the message is what gets printed.
    """

    def __init__(self, kind: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f'MonitorError({self.kind!r}, {self.message!r})'


class Result:
    """
    Outcome of a socket or sink operation: either a value
    or a MonitorError. Callers decide whether a failure
    ends their loop.
    """

    __slots__ = ('_value', '_error')

    def __init__(self, value=None, error: MonitorError = None):
        self._value = value
        self._error = error

    @classmethod
    def success(cls, value=None):
        return cls(value=value)

    @classmethod
    def failure(cls, error: MonitorError):
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self._error is None

    @property
    def value(self):
        return self._value

    @property
    def error(self) -> MonitorError:
        return self._error

    def __repr__(self) -> str:
        if self.ok:
            return f'Result.success({self._value!r})'
        return f'Result.failure({self._error!r})'
