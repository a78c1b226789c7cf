"""
Motor de ranking de anuncios.

Filtra los anuncios visibles para el inquilino y los ordena por puntaje
con un desempate determinístico.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Optional

import structlog

from vitrina.models import Listing, ListingFilters
from vitrina.models.listing import as_utc
from vitrina.ranking.score import ScoreBreakdown, score_breakdown

logger = structlog.get_logger()

TieBreak = Callable[[Listing], Any]


@dataclass
class RankedListing:
    """Resultado de ranking para un anuncio."""

    listing: Listing
    breakdown: ScoreBreakdown

    @property
    def score(self) -> int:
        return self.breakdown.total


def newest_first(listing: Listing) -> tuple:
    """Desempate por defecto: más reciente primero, luego por id."""
    return (-listing.created_at.timestamp(), listing.id)


class ListingRanker:
    """
    Ranking de anuncios para la portada.

    Flujo:
    1. Descartar anuncios no visibles (pendientes de pago o vencidos)
    2. Aplicar filtros del inquilino
    3. Calcular el puntaje de cada anuncio con un mismo `now`
    4. Ordenar por puntaje descendente y desempatar
    """

    def __init__(self, tie_break: Optional[TieBreak] = None):
        self.tie_break = tie_break or newest_first

    def rank(
        self,
        listings: Iterable[Listing],
        now: Optional[datetime] = None,
        filters: Optional[ListingFilters] = None,
        only_visible: bool = True,
        tie_break: Optional[TieBreak] = None,
    ) -> list[RankedListing]:
        """
        Ordena anuncios por puntaje.

        Args:
            listings: Anuncios a rankear
            now: Momento de evaluación (UTC actual si no se indica)
            filters: Filtros del inquilino (opcional)
            only_visible: Si es False incluye pendientes y vencidos
            tie_break: Clave de desempate ascendente (reemplaza la del ranker)

        Returns:
            Lista de RankedListing de mayor a menor puntaje
        """
        now = as_utc(now) if now is not None else datetime.now(timezone.utc)
        tie_key = tie_break or self.tie_break

        candidates = []
        total = 0
        for listing in listings:
            total += 1
            if only_visible and not listing.is_visible(now):
                continue
            if filters is not None and not filters.matches(listing):
                continue
            candidates.append(listing)

        ranked = [
            RankedListing(listing=listing, breakdown=score_breakdown(listing, now))
            for listing in candidates
        ]
        ranked.sort(key=lambda r: (-r.score, tie_key(r.listing)))

        logger.info(
            "Anuncios rankeados",
            total=total,
            ranked=len(ranked),
            filtered_out=total - len(ranked),
        )
        return ranked


def rank_listings(
    listings: Iterable[Listing],
    now: Optional[datetime] = None,
    filters: Optional[ListingFilters] = None,
    only_visible: bool = True,
    tie_break: Optional[TieBreak] = None,
) -> list[RankedListing]:
    """Atajo para rankear con un ListingRanker por defecto."""
    return ListingRanker().rank(
        listings,
        now=now,
        filters=filters,
        only_visible=only_visible,
        tie_break=tie_break,
    )
