import logging
import time

from typing import TYPE_CHECKING, Any


try:
    from redis import Redis
except ImportError as e:
    raise ImportError(
        'RedisSessionManager requires the redis package. '
        "Install with: 'pip install webcontext[redis]'"
    ) from e

from webcontext.server.session.inmemory_session_manager import (
    generate_session_id,
)
from webcontext.server.session.session_manager import Session, SessionManager
from webcontext.utils.constants import (
    DEFAULT_MAX_INACTIVE_INTERVAL,
    DEFAULT_REDIS_KEY_PREFIX,
)
from webcontext.utils.serialization import SerializationHelper


if TYPE_CHECKING:
    from webcontext.server.exchange import HttpExchange
    from webcontext.types import SessionConfig


logger = logging.getLogger(__name__)

_CREATED_FIELD = '__created__'
_TTL_FIELD = '__ttl__'
_ATTRIBUTE_PREFIX = 'attr:'


def _decode(value: bytes | str) -> str:
    if isinstance(value, bytes):
        return value.decode('utf-8')
    return value


class RedisSession(Session):
    """A session stored as a Redis hash.

    Attribute values are pickled and base64 encoded, so anything stored
    must be picklable. Reads go straight to Redis; nothing is cached.
    """

    def __init__(
        self,
        manager: 'RedisSessionManager',
        session_id: str,
        ttl: int = DEFAULT_MAX_INACTIVE_INTERVAL,
        config: 'SessionConfig | None' = None,
    ):
        self._manager = manager
        self._id = session_id
        self._ttl = ttl
        self.config = config

    @property
    def id(self) -> str:
        return self._id

    @property
    def _key(self) -> str:
        return self._manager.session_key(self._id)

    @property
    def _redis(self) -> Redis:
        return self._manager.redis

    @property
    def _serializer(self) -> SerializationHelper:
        return self._manager.serializer

    def get_attribute(self, name: str) -> Any:
        raw = self._redis.hget(self._key, _ATTRIBUTE_PREFIX + name)
        if raw is None:
            return None
        return self._serializer.deserialize_from_base64(_decode(raw))

    def set_attribute(self, name: str, value: Any) -> Any:
        previous = self.get_attribute(name)
        # A write never leaves a hash without an expiry, even when the
        # session expired since it was looked up.
        pipe = self._redis.pipeline()
        pipe.hset(
            self._key,
            _ATTRIBUTE_PREFIX + name,
            self._serializer.serialize_to_base64(value),
        )
        pipe.expire(self._key, self._ttl)
        pipe.execute()
        return previous

    def remove_attribute(self, name: str) -> Any:
        previous = self.get_attribute(name)
        self._redis.hdel(self._key, _ATTRIBUTE_PREFIX + name)
        return previous

    def get_attribute_names(self) -> set[str]:
        names = set()
        for field in self._redis.hkeys(self._key):
            field = _decode(field)
            if field.startswith(_ATTRIBUTE_PREFIX):
                names.add(field[len(_ATTRIBUTE_PREFIX) :])
        return names

    def invalidate(self, exchange: 'HttpExchange | None' = None) -> None:
        self._manager.invalidate(self._id)
        if exchange is not None and self.config is not None:
            self.config.clear_session(exchange, self._id)


class RedisSessionManager(SessionManager):
    """This implements the `SessionManager` interface using Redis hashes.

    Each session is a hash under `key_prefix + session_id` that expires
    after the configured inactivity interval. Every successful lookup
    pushes the expiry back.

    Args:
        redis_client(Redis): synchronous redis connection.
        key_prefix(str): prefix for session hash keys.
        serializer(SerializationHelper): codec for attribute values.
    """

    def __init__(
        self,
        redis_client: Redis,
        key_prefix: str = DEFAULT_REDIS_KEY_PREFIX,
        serializer: SerializationHelper | None = None,
    ):
        self._redis = redis_client
        self._key_prefix = key_prefix
        self._serializer = serializer or SerializationHelper()

    @property
    def redis(self) -> Redis:
        return self._redis

    @property
    def serializer(self) -> SerializationHelper:
        return self._serializer

    def session_key(self, session_id: str) -> str:
        return self._key_prefix + session_id

    def create_session(
        self, exchange: 'HttpExchange', config: 'SessionConfig'
    ) -> RedisSession:
        session_id = generate_session_id()
        key = self.session_key(session_id)
        ttl = config.max_inactive_interval
        pipe = self._redis.pipeline()
        pipe.hset(
            key,
            mapping={_CREATED_FIELD: str(time.time()), _TTL_FIELD: str(ttl)},
        )
        pipe.expire(key, ttl)
        pipe.execute()
        config.set_session_id(exchange, session_id)
        logger.debug('Created redis session %s', session_id)
        return RedisSession(self, session_id, ttl, config)

    def get_session(
        self, exchange: 'HttpExchange', config: 'SessionConfig'
    ) -> RedisSession | None:
        session_id = config.find_session_id(exchange)
        if session_id is None:
            return None
        session = self.get_session_by_id(session_id)
        if session is not None:
            session.config = config
        return session

    def get_session_by_id(self, session_id: str) -> RedisSession | None:
        key = self.session_key(session_id)
        raw_ttl = self._redis.hget(key, _TTL_FIELD)
        if raw_ttl is None:
            return None
        ttl = int(_decode(raw_ttl)) or DEFAULT_MAX_INACTIVE_INTERVAL
        self._redis.expire(key, ttl)
        return RedisSession(self, session_id, ttl)

    def invalidate(self, session_id: str) -> None:
        self._redis.delete(self.session_key(session_id))
