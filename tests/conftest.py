"""Pytest fixtures for testing"""

import pytest

from fio_client.helpers.rate_limiter import RateLimiter
from fio_client.token import AccessToken
from fio_client.urls import UrlBuilder

from fakes import TOKEN, FakeClock


@pytest.fixture
def token() -> AccessToken:
    return AccessToken.create(TOKEN).unwrap()


@pytest.fixture
def url_builder(token: AccessToken) -> UrlBuilder:
    return UrlBuilder(token, "https://fio.test/v1/rest")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def limiter(clock: FakeClock) -> RateLimiter:
    """30 second limiter driven by the fake clock"""
    return RateLimiter(30, 1, clock=clock, sleep=clock.sleep)
