from datetime import datetime

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'
ENCODING = 'utf-8'


def format_timestamp(now: datetime = None) -> str:
    if now is None:
        now = datetime.now()
    # milliseconds come from the same instant as the seconds
    return f'{now.strftime(TIMESTAMP_FORMAT)}.{now.microsecond // 1000:03d}'


class Heartbeat:
    """
    A single liveness announcement, sent on the wire as
    "<timestamp> <client_name>" with no terminator.
    """

    __slots__ = ('_timestamp', '_client_name')

    def __init__(self, timestamp: str, client_name: str):
        if not client_name or any(ch.isspace() for ch in client_name):
            raise ValueError(f'Client name must be a single token: {client_name!r}')
        self._timestamp = timestamp
        self._client_name = client_name

    @classmethod
    def now(cls, client_name: str):
        return cls(format_timestamp(), client_name)

    @classmethod
    def decode(cls, data):
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode(ENCODING)
        timestamp, sep, client_name = data.rpartition(' ')
        if not sep:
            raise ValueError(f'Badly formed heartbeat: {data!r}')
        return cls(timestamp, client_name)

    @property
    def timestamp(self) -> str:
        return self._timestamp

    @property
    def client_name(self) -> str:
        return self._client_name

    def encode(self) -> bytes:
        return str(self).encode(ENCODING)

    def __str__(self) -> str:
        return f'{self._timestamp} {self._client_name}'

    def __repr__(self) -> str:
        return f'Heartbeat({self._timestamp!r}, {self._client_name!r})'

    def __eq__(self, other) -> bool:
        if not isinstance(other, Heartbeat):
            return NotImplemented
        return (self._timestamp, self._client_name) == \
            (other._timestamp, other._client_name)

    def __hash__(self) -> int:
        return hash((self._timestamp, self._client_name))
