import dataclasses

import pytest

from fakeredis import FakeRedis

from webcontext.server.exchange import HttpExchange
from webcontext.server.session.redis_session_manager import (
    RedisSessionManager,
)
from webcontext.types import SessionConfig


@dataclasses.dataclass
class Profile:
    user_id: str
    roles: list[str]


class TestRedisSessionManager:
    @pytest.fixture
    def redis(self):
        return FakeRedis()

    @pytest.fixture
    def manager(self, redis):
        return RedisSessionManager(redis, key_prefix='test.session.')

    @pytest.fixture
    def config(self):
        return SessionConfig(max_inactive_interval=120)

    def test_create_session(self, manager, redis, config, make_request):
        exchange = HttpExchange(make_request())
        session = manager.create_session(exchange, config)

        key = 'test.session.' + session.id
        assert redis.exists(key) == 1
        assert 0 < redis.ttl(key) <= 120
        assert exchange.response_cookies['SESSIONID'].value == session.id

    def test_attributes_round_trip(self, manager, config, make_request):
        session = manager.create_session(HttpExchange(make_request()), config)
        profile = Profile(user_id='u-1', roles=['admin', 'dev'])

        assert session.set_attribute('profile', profile) is None
        session.set_attribute('count', 3)

        again = manager.get_session_by_id(session.id)
        assert again.get_attribute('profile') == profile
        assert again.get_attribute('count') == 3
        assert again.get_attribute_names() == {'profile', 'count'}
        assert again.remove_attribute('count') == 3
        assert again.get_attribute('count') is None

    def test_get_session_from_cookie(self, manager, config, make_request):
        session = manager.create_session(HttpExchange(make_request()), config)
        session.set_attribute('user', 'alice')

        exchange = HttpExchange(
            make_request(headers={'cookie': f'SESSIONID={session.id}'})
        )
        found = manager.get_session(exchange, config)

        assert found is not None
        assert found.id == session.id
        assert found.get_attribute('user') == 'alice'

    def test_unknown_session(self, manager):
        assert manager.get_session_by_id('missing') is None

    def test_lookup_refreshes_ttl(self, manager, redis, config, make_request):
        session = manager.create_session(HttpExchange(make_request()), config)
        key = 'test.session.' + session.id
        redis.expire(key, 5)

        manager.get_session_by_id(session.id)

        assert redis.ttl(key) > 5

    def test_write_after_expiry_keeps_a_ttl(
        self, manager, redis, config, make_request
    ):
        session = manager.create_session(HttpExchange(make_request()), config)
        key = 'test.session.' + session.id
        redis.delete(key)

        session.set_attribute('user', 'alice')

        assert 0 < redis.ttl(key) <= 120
        assert manager.get_session_by_id(session.id) is None

    def test_write_keeps_lookup_ttl(self, manager, redis, make_request):
        config = SessionConfig(max_inactive_interval=300)
        session = manager.create_session(HttpExchange(make_request()), config)
        key = 'test.session.' + session.id
        found = manager.get_session_by_id(session.id)
        redis.expire(key, 5)

        found.set_attribute('user', 'alice')

        assert redis.ttl(key) > 5

    def test_invalidate(self, manager, redis, config, make_request):
        exchange = HttpExchange(make_request())
        session = manager.create_session(exchange, config)

        session.invalidate(exchange)

        assert redis.exists('test.session.' + session.id) == 0
        assert manager.get_session(exchange, config) is None
        assert exchange.response_cookies['SESSIONID'].max_age == 0

    def test_decoded_responses_client(self, config, make_request):
        manager = RedisSessionManager(FakeRedis(decode_responses=True))
        session = manager.create_session(HttpExchange(make_request()), config)
        session.set_attribute('user', 'alice')

        assert manager.get_session_by_id(session.id).get_attribute_names() == {
            'user'
        }
