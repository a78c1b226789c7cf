"""
Filtros de búsqueda del lado del inquilino.

Replican la barra de filtros de la portada: texto libre, tipología,
rango de alquiler, zona, amoblamiento, comodidades y categorías rápidas.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from vitrina.config import AMENITY_OPTIONS, BHK_TYPES, QUICK_CATEGORIES, get_settings
from vitrina.models.listing import Furnishing, Listing


class ListingFilters(BaseModel):
    """
    Criterios excluyentes: un anuncio que no cumple alguno se descarta.
    Las listas vacías significan "cualquiera".
    """

    search_query: Optional[str] = Field(
        None, description="Texto a buscar en título o zona"
    )
    bhk: list[str] = Field(default_factory=list, description="Tipologías aceptadas")
    rent_min: float = Field(default=0, ge=0, description="Alquiler mínimo")
    rent_max: float = Field(
        default_factory=lambda: get_settings().rent_range_max,
        ge=0,
        description="Alquiler máximo",
    )
    locations: list[str] = Field(default_factory=list, description="Zonas aceptadas")
    furnishing: list[Furnishing] = Field(
        default_factory=list, description="Amoblamientos aceptados"
    )
    amenities: list[str] = Field(
        default_factory=list, description="Comodidades requeridas (todas)"
    )
    category: Optional[str] = Field(None, description="Categoría rápida")

    @field_validator("bhk")
    @classmethod
    def check_bhk(cls, value: list[str]) -> list[str]:
        unknown = [v for v in value if v not in BHK_TYPES]
        if unknown:
            raise ValueError(
                f"Tipología desconocida {unknown}. Opciones: {', '.join(BHK_TYPES)}"
            )
        return value

    @field_validator("amenities")
    @classmethod
    def check_amenities(cls, value: list[str]) -> list[str]:
        unknown = [v for v in value if v not in AMENITY_OPTIONS]
        if unknown:
            raise ValueError(
                f"Comodidad desconocida {unknown}. "
                f"Opciones: {', '.join(AMENITY_OPTIONS)}"
            )
        return value

    @field_validator("category")
    @classmethod
    def check_category(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value not in QUICK_CATEGORIES:
            raise ValueError(
                f"Categoría desconocida '{value}'. "
                f"Opciones: {', '.join(QUICK_CATEGORIES)}"
            )
        return value

    @model_validator(mode="after")
    def check_rent_range(self) -> "ListingFilters":
        if self.rent_min > self.rent_max:
            raise ValueError("rent_min no puede ser mayor que rent_max")
        return self

    @property
    def has_active_filters(self) -> bool:
        """True si algún filtro difiere de su valor por defecto."""
        return bool(
            self.search_query
            or self.bhk
            or self.locations
            or self.furnishing
            or self.amenities
            or self.category
            or self.rent_min > 0
            or self.rent_max < get_settings().rent_range_max
        )

    def matches(self, listing: Listing) -> bool:
        """Evalúa todos los filtros contra un anuncio."""
        if self.search_query:
            query = self.search_query.lower()
            if query not in listing.title.lower() and query not in listing.location.lower():
                return False

        if self.bhk and listing.bhk not in self.bhk:
            return False

        if listing.rent < self.rent_min or listing.rent > self.rent_max:
            return False

        if self.locations and listing.location not in self.locations:
            return False

        if self.furnishing and listing.furnishing not in self.furnishing:
            return False

        if self.amenities and not set(self.amenities).issubset(listing.amenities):
            return False

        if self.category is not None:
            bhk, rent_below = QUICK_CATEGORIES[self.category]
            if bhk is not None and listing.bhk != bhk:
                return False
            if rent_below is not None and listing.rent >= rent_below:
                return False

        return True
