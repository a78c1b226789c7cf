from __future__ import annotations

from datetime import timedelta

from tests import NOW, complete_fields, make_listing
from vitrina.models import ListingFilters
from vitrina.ranking import ListingRanker, rank_listings


def _ids(ranked) -> list[str]:
    return [r.listing.id for r in ranked]


def test_orders_by_score_descending() -> None:
    old = make_listing(id="old", created_at=(NOW - timedelta(days=20)).isoformat())
    fresh = make_listing(id="fresh")
    popular = make_listing(id="popular", view_count=500, **complete_fields())

    ranked = rank_listings([old, fresh, popular], now=NOW)

    assert _ids(ranked) == ["popular", "fresh", "old"]
    assert [r.score for r in ranked] == [100, 70, 40]


def test_hides_pending_and_expired_by_default() -> None:
    listings = [
        make_listing(id="active"),
        make_listing(id="pending", status="pending", payment_status="pending"),
        make_listing(id="expired", expires_at=(NOW - timedelta(minutes=1)).isoformat()),
    ]

    assert _ids(rank_listings(listings, now=NOW)) == ["active"]
    assert set(_ids(rank_listings(listings, now=NOW, only_visible=False))) == {
        "active",
        "pending",
        "expired",
    }


def test_applies_filters() -> None:
    listings = [
        make_listing(id="one", bhk="1BHK", rent=8000),
        make_listing(id="two", bhk="2BHK", rent=12000),
    ]
    ranked = rank_listings(listings, now=NOW, filters=ListingFilters(bhk=["1BHK"]))
    assert _ids(ranked) == ["one"]


def test_ties_default_to_newest_then_id() -> None:
    # Mismo tramo de frescura (<= 3 días) y mismo puntaje
    listings = [
        make_listing(id="b", created_at=(NOW - timedelta(days=2)).isoformat()),
        make_listing(id="c", created_at=(NOW - timedelta(days=1)).isoformat()),
        make_listing(id="a", created_at=(NOW - timedelta(days=2)).isoformat()),
    ]
    ranked = rank_listings(listings, now=NOW)

    assert len({r.score for r in ranked}) == 1
    assert _ids(ranked) == ["c", "a", "b"]


def test_custom_tie_break() -> None:
    listings = [
        make_listing(id="x", rent=15000),
        make_listing(id="y", rent=9000),
        make_listing(id="z", rent=11000),
    ]
    cheapest_first = ListingRanker(tie_break=lambda listing: listing.rent)
    assert _ids(cheapest_first.rank(listings, now=NOW)) == ["y", "z", "x"]

    by_id_desc = rank_listings(
        listings, now=NOW, tie_break=lambda listing: [-ord(c) for c in listing.id]
    )
    assert _ids(by_id_desc) == ["z", "y", "x"]


def test_ranking_is_deterministic() -> None:
    listings = [
        make_listing(id=f"l{i}", view_count=i * 3, created_at=(NOW - timedelta(days=i)).isoformat())
        for i in range(10)
    ]
    first = _ids(rank_listings(listings, now=NOW))
    second = _ids(rank_listings(list(reversed(listings)), now=NOW))
    assert first == second


def test_empty_input() -> None:
    assert rank_listings([], now=NOW) == []


def test_breakdown_is_exposed() -> None:
    ranked = rank_listings([make_listing(view_count=30)], now=NOW)
    breakdown = ranked[0].breakdown
    assert (breakdown.freshness, breakdown.paid_boost, breakdown.engagement) == (40, 30, 6)
    assert ranked[0].score == breakdown.total
