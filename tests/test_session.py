import pytest

from spotify_tui.session import SCOPES, scope_string, search_limits, token_expiry


def test_scope_string_joins_all_scopes():
    text = scope_string()
    assert text.split(" ") == list(SCOPES)
    assert "user-read-recently-played" in text.split(" ")
    assert text.startswith("playlist-read-collaborative ")


def test_scope_count():
    assert len(scope_string().split()) == 11


@pytest.mark.parametrize("expires_in", [0, 10, 3600])
def test_token_expiry_is_early_by_margin(expires_in):
    now = 1000.0
    assert token_expiry(expires_in, now) - now == expires_in - 10


def test_token_expiry_uses_clock_when_now_missing():
    first = token_expiry(3600)
    second = token_expiry(3600)
    assert second >= first


@pytest.mark.parametrize("height", [13, 20, 40, 63, 100, 500])
def test_search_limits_bounds(height):
    large, small = search_limits(height)
    max_limit = min(height - 13, 50)
    assert 0 <= large <= max_limit
    assert 0 <= small <= max_limit // 2
    assert small <= large


def test_search_limits_cap_on_tall_terminal():
    assert search_limits(500) == (50, 25)


def test_search_limits_minimum_height():
    assert search_limits(13) == (0, 0)


def test_search_limits_monotonic():
    previous = search_limits(13)
    for height in range(14, 200):
        current = search_limits(height)
        assert current[0] >= previous[0]
        assert current[1] >= previous[1]
        previous = current


def test_search_limits_too_short():
    with pytest.raises(ValueError):
        search_limits(12)