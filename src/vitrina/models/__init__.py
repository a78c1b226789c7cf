"""
Modelos de datos del sistema.

- ListingSnapshot: entrada del cálculo de ranking
- Listing: anuncio completo de la tabla 'properties'
- ListingFilters: filtros de búsqueda del inquilino
"""

from vitrina.models.listing import (
    Furnishing,
    Listing,
    ListingSnapshot,
    ListingStatus,
    PaymentStatus,
    PreferredTenants,
)
from vitrina.models.filters import ListingFilters

__all__ = [
    # Anuncios
    "Listing",
    "ListingSnapshot",
    "ListingStatus",
    "PaymentStatus",
    "Furnishing",
    "PreferredTenants",
    # Búsqueda
    "ListingFilters",
]
