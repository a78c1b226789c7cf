"""
Ranking de anuncios.

Puntaje puro por anuncio y motor que filtra y ordena la portada.
"""

from vitrina.ranking.score import (
    ScoreBreakdown,
    compute_listing_score,
    completeness_score,
    engagement_score,
    freshness_score,
    paid_boost_score,
    score_breakdown,
)
from vitrina.ranking.engine import ListingRanker, RankedListing, rank_listings

__all__ = [
    "compute_listing_score",
    "score_breakdown",
    "ScoreBreakdown",
    "freshness_score",
    "paid_boost_score",
    "engagement_score",
    "completeness_score",
    "ListingRanker",
    "RankedListing",
    "rank_listings",
]
