"""Tests for crypto_advisor.recommend.policy."""

from __future__ import annotations

import pytest

from crypto_advisor.errors import PolicyConfigurationError
from crypto_advisor.recommend.policy import (
    RISK_LEVELS,
    momentum_band,
    sentiment_filter,
)


@pytest.mark.parametrize(
    "level, inside, outside",
    [
        (1, [1, 10], [11, 50]),
        (2, [11, 30], [10, 31]),
        (3, [31, 70], [30, 71]),
        (4, [71, 150], [70, 151]),
        (5, [151, 5000], [150, 1]),
    ],
)
def test_momentum_band_edges(level, inside, outside):
    band = momentum_band(level)
    for rank in inside:
        assert band.contains(rank)
    for rank in outside:
        assert not band.contains(rank)


def test_momentum_bands_partition_ranks():
    for rank in range(1, 400):
        matches = [lvl for lvl in RISK_LEVELS if momentum_band(lvl).contains(rank)]
        assert len(matches) == 1, rank


def test_unranked_asset_matches_no_band():
    assert all(not momentum_band(lvl).contains(None) for lvl in RISK_LEVELS)


@pytest.mark.parametrize("bad", [0, 6, -1, 2.5, "3", None, True])
def test_policies_reject_unknown_levels(bad):
    with pytest.raises(PolicyConfigurationError):
        momentum_band(bad)
    with pytest.raises(PolicyConfigurationError):
        sentiment_filter(bad)


@pytest.mark.parametrize(
    "level, max_rank, min_sentiment",
    [(1, 10, 0.5), (2, 20, 0.3), (3, 100, 0.0), (4, None, -0.2), (5, None, -0.5)],
)
def test_sentiment_filter_table(level, max_rank, min_sentiment):
    f = sentiment_filter(level)
    assert f.max_rank == max_rank
    assert f.min_sentiment == min_sentiment


def test_sentiment_filter_level1_needs_rank_and_sentiment():
    f = sentiment_filter(1)
    assert f.passes(10, 0.5)
    assert not f.passes(11, 0.9)
    assert not f.passes(5, 0.49)
    assert not f.passes(None, 0.9)


def test_sentiment_filter_level5_only_floor_applies():
    f = sentiment_filter(5)
    assert f.passes(9999, -0.5)
    assert f.passes(None, 0.0)
    assert not f.passes(1, -0.51)


def test_sentiment_filter_level3_example():
    f = sentiment_filter(3)
    assert f.passes(50, 0.1)
    assert not f.passes(50, -0.1)
