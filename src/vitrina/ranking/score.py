"""
Puntaje de ranking de anuncios (máximo 100 pts).

| Componente         | Máx | Lógica                                 |
|--------------------|-----|----------------------------------------|
| Frescura           |  40 | Antigüedad en días desde la publicación |
| Pago               |  30 | payment_status == paid                 |
| Interacción        |  20 | view_count / 5 (tope 20)               |
| Perfil completo    |  10 | Campos opcionales cargados             |

Funciones puras: reciben el snapshot y `now` explícito, sin estado ni I/O.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from vitrina.models.listing import ListingSnapshot, PaymentStatus, as_utc

SECONDS_PER_DAY = 24 * 60 * 60

# (antigüedad máxima en días, puntos); límites inclusivos
FRESHNESS_TIERS = (
    (3, 40),
    (7, 30),
    (14, 20),
    (30, 10),
)

PAID_BOOST = 30

VIEWS_PER_POINT = 5
ENGAGEMENT_CAP = 20


@dataclass(frozen=True)
class ScoreBreakdown:
    """Detalle del puntaje por componente."""

    freshness: int
    paid_boost: int
    engagement: int
    completeness: int

    @property
    def total(self) -> int:
        return self.freshness + self.paid_boost + self.engagement + self.completeness


def _resolve_now(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    return as_utc(now)


def listing_age_days(snapshot: ListingSnapshot, now: datetime) -> float:
    """Antigüedad continua en días de 24h (no días de calendario)."""
    return (as_utc(now) - snapshot.created_at).total_seconds() / SECONDS_PER_DAY


def freshness_score(snapshot: ListingSnapshot, now: datetime) -> int:
    """Decae por escalones a medida que el anuncio envejece (0-40)."""
    age_days = listing_age_days(snapshot, now)
    for max_age, points in FRESHNESS_TIERS:
        if age_days <= max_age:
            return points
    return 0


def paid_boost_score(snapshot: ListingSnapshot) -> int:
    """Bonus fijo para anuncios con pago confirmado (0 o 30)."""
    return PAID_BOOST if snapshot.payment_status == PaymentStatus.PAID else 0


def engagement_score(snapshot: ListingSnapshot) -> int:
    """1 punto cada 5 vistas, con tope de 20. Nunca negativo."""
    views = snapshot.view_count if snapshot.view_count is not None else 0
    return max(0, min(ENGAGEMENT_CAP, views // VIEWS_PER_POINT))


def completeness_score(snapshot: ListingSnapshot) -> int:
    """Suma puntos por cada campo opcional cargado (0-10)."""
    points = 0

    if len(snapshot.images) > 0:
        points += 2  # las fotos pesan más
    if len(snapshot.amenities) > 0:
        points += 1
    if snapshot.area is not None:
        points += 1
    if snapshot.furnishing is not None:
        points += 1
    if snapshot.preferred_tenants is not None:
        points += 1
    if snapshot.floor is not None and snapshot.total_floors is not None:
        points += 1
    if snapshot.available_from is not None:
        points += 1
    if snapshot.is_pet_friendly is not None:
        points += 1
    if snapshot.latitude is not None and snapshot.longitude is not None:
        points += 1

    return points


def score_breakdown(
    snapshot: ListingSnapshot, now: Optional[datetime] = None
) -> ScoreBreakdown:
    """
    Calcula cada componente del puntaje.

    Args:
        snapshot: Estado del anuncio
        now: Momento de evaluación (UTC actual si no se indica)

    Returns:
        ScoreBreakdown con los cuatro componentes
    """
    now = _resolve_now(now)
    return ScoreBreakdown(
        freshness=freshness_score(snapshot, now),
        paid_boost=paid_boost_score(snapshot),
        engagement=engagement_score(snapshot),
        completeness=completeness_score(snapshot),
    )


def compute_listing_score(
    snapshot: ListingSnapshot, now: Optional[datetime] = None
) -> int:
    """Puntaje total del anuncio, entre 0 y 100."""
    return score_breakdown(snapshot, now).total
