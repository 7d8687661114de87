"""
Premium caching around the quote endpoint.
Redis is replaced by an AsyncMock; quote ids and timestamps are never cached.
"""

import pytest

from rating_api.api.quotes import _generate_cache_key
from rating_api.services.pricing import validate_quote_request
from rating_api.services.quote_ids import QUOTE_ID_PATTERN


class TestPremiumCache:

    @pytest.mark.cache
    @pytest.mark.asyncio
    async def test_cache_miss_stores_premium(self, test_client, fake_redis, valid_quote_data, app_settings):
        response = await test_client.post("/", json=valid_quote_data)

        assert response.status_code == 200
        assert response.json()["premium"] == 1500.0

        fake_redis.set.assert_awaited_once()
        key, value = fake_redis.set.call_args.args
        assert key.startswith("premium:")
        assert float(value) == 1500.0
        assert fake_redis.set.call_args.kwargs["ex"] == app_settings.PREMIUM_CACHE_TTL

    @pytest.mark.cache
    @pytest.mark.asyncio
    async def test_cache_hit_skips_store(self, test_client, fake_redis, valid_quote_data):
        fake_redis.get.return_value = "1500.0"

        response = await test_client.post("/", json=valid_quote_data)

        assert response.status_code == 200
        data = response.json()
        assert data["premium"] == 1500.0
        assert QUOTE_ID_PATTERN.match(data["quoteId"])
        fake_redis.set.assert_not_awaited()

    @pytest.mark.cache
    @pytest.mark.asyncio
    async def test_cache_hits_still_issue_fresh_ids(self, test_client, fake_redis, valid_quote_data):
        fake_redis.get.return_value = "1500.0"

        first = await test_client.post("/", json=valid_quote_data)
        second = await test_client.post("/", json=valid_quote_data)

        assert first.json()["quoteId"] != second.json()["quoteId"]

    @pytest.mark.cache
    @pytest.mark.asyncio
    async def test_cache_read_failure_falls_back(self, test_client, fake_redis, valid_quote_data):
        fake_redis.get.side_effect = ConnectionError("redis down")

        response = await test_client.post("/", json=valid_quote_data)

        assert response.status_code == 200
        assert response.json()["premium"] == 1500.0

    @pytest.mark.cache
    @pytest.mark.asyncio
    async def test_cache_write_failure_ignored(self, test_client, fake_redis, valid_quote_data):
        fake_redis.set.side_effect = ConnectionError("redis down")

        response = await test_client.post("/", json=valid_quote_data)

        assert response.status_code == 200
        assert response.json()["premium"] == 1500.0

    @pytest.mark.cache
    @pytest.mark.asyncio
    async def test_rejected_quotes_never_touch_cache(self, test_client, fake_redis):
        response = await test_client.post("/", json={"revenue": -1, "state": "CA", "business": "retail"})

        assert response.status_code == 400
        fake_redis.get.assert_not_awaited()
        fake_redis.set.assert_not_awaited()


class TestCacheKey:

    def test_key_ignores_input_case(self):
        lower = validate_quote_request({"revenue": 50000, "state": "ca", "business": "retail"})
        upper = validate_quote_request({"revenue": 50000, "state": "CA", "business": "RETAIL"})
        assert _generate_cache_key(lower) == _generate_cache_key(upper)

    def test_key_differs_by_input(self):
        ca = validate_quote_request({"revenue": 50000, "state": "CA", "business": "retail"})
        tx = validate_quote_request({"revenue": 50000, "state": "TX", "business": "retail"})
        assert _generate_cache_key(ca) != _generate_cache_key(tx)
