"""
Modelos de anuncio.

- ListingSnapshot: vista de solo lectura con los campos que usa el ranking
- Listing: registro completo de la tabla 'properties'
"""

from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vitrina.config import get_settings


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


class ListingStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    EXPIRED = "expired"


class Furnishing(str, Enum):
    FULLY_FURNISHED = "Fully Furnished"
    SEMI_FURNISHED = "Semi Furnished"
    UNFURNISHED = "Unfurnished"


class PreferredTenants(str, Enum):
    FAMILY = "Family"
    BACHELOR = "Bachelor"
    ANY = "Any"


def as_utc(value: datetime) -> datetime:
    """Normaliza un datetime a UTC. Los naive se interpretan como UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Columnas opcionales donde un string vacío equivale a "sin dato"
_BLANK_AS_ABSENT = (
    "furnishing",
    "preferred_tenants",
    "available_from",
    "expires_at",
    "area",
    "floor",
    "total_floors",
    "latitude",
    "longitude",
    "view_count",
    "is_pet_friendly",
)


class ListingSnapshot(BaseModel):
    """
    Estado de un anuncio al momento de evaluarlo.

    Todos los campos opcionales distinguen "ausente" (None) de valores
    falsy con significado: is_pet_friendly=False cuenta como dato cargado.
    """

    model_config = ConfigDict(frozen=True)

    created_at: datetime = Field(..., description="Fecha de publicación")
    payment_status: PaymentStatus = Field(
        default=PaymentStatus.PENDING, description="pending o paid"
    )
    view_count: Optional[int] = Field(
        None, description="Vistas de la página de detalle"
    )

    images: list[str] = Field(default_factory=list, description="URLs de imágenes")
    amenities: list[str] = Field(default_factory=list, description="Comodidades")

    area: Optional[float] = Field(None, description="Superficie en sq ft")
    furnishing: Optional[Furnishing] = Field(None, description="Amoblamiento")
    preferred_tenants: Optional[PreferredTenants] = Field(
        None, description="Inquilinos preferidos"
    )
    floor: Optional[int] = Field(None, description="Piso")
    total_floors: Optional[int] = Field(None, description="Pisos del edificio")
    available_from: Optional[date] = Field(None, description="Disponible desde")
    is_pet_friendly: Optional[bool] = Field(None, description="Acepta mascotas")
    latitude: Optional[float] = Field(None, description="Latitud")
    longitude: Optional[float] = Field(None, description="Longitud")

    @field_validator("created_at")
    @classmethod
    def normalize_created_at(cls, value: datetime) -> datetime:
        return as_utc(value)

    @field_validator("available_from", mode="before")
    @classmethod
    def parse_available_from(cls, value):
        # La app guarda available_from como timestamp ISO completo
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and "T" in value:
            return value.split("T", 1)[0]
        return value


class Listing(ListingSnapshot):
    """
    Anuncio completo tal como lo guarda la tabla 'properties'.

    Extiende el snapshot con los datos que se muestran al inquilino
    y el estado de publicación.
    """

    # Identificación
    id: str = Field(..., description="UUID del anuncio")

    # Contenido
    title: str = Field(..., description="Título del anuncio")
    description: str = Field(default="", description="Descripción completa")
    bhk: str = Field(..., description="Tipología: 1BHK, 2BHK, ...")
    location: str = Field(..., description="Zona o barrio")

    # Precio
    rent: float = Field(..., ge=0, description="Alquiler mensual")
    deposit: float = Field(default=0, ge=0, description="Depósito")

    # Dueño
    owner_id: str = Field(default="", description="UUID del dueño")
    owner_name: str = Field(default="", description="Nombre del dueño")
    owner_phone: str = Field(default="", description="Teléfono de contacto")

    # Publicación
    status: ListingStatus = Field(
        default=ListingStatus.PENDING, description="pending, active o expired"
    )
    expires_at: Optional[datetime] = Field(None, description="Fin de la publicación")

    @field_validator("expires_at")
    @classmethod
    def normalize_expires_at(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value) if value is not None else None

    @classmethod
    def from_db_row(cls, row: dict) -> "Listing":
        """
        Construye un Listing desde una fila de Supabase.

        Las listas nulas pasan a vacías y los strings vacíos en columnas
        opcionales se toman como ausentes. Si falta expires_at se asume
        la duración estándar de publicación desde created_at.

        Raises:
            pydantic.ValidationError: Si la fila no es un anuncio válido
            ValueError: Si created_at no admite sumar la duración de publicación
        """
        data = dict(row)
        data["images"] = data.get("images") or []
        data["amenities"] = data.get("amenities") or []

        for column in _BLANK_AS_ABSENT:
            value = data.get(column)
            if isinstance(value, str) and not value.strip():
                data[column] = None

        listing = cls.model_validate(data)

        if listing.expires_at is None:
            duration = timedelta(days=get_settings().listing_duration_days)
            try:
                expires_at = listing.created_at + duration
            except OverflowError as e:
                raise ValueError(
                    f"created_at fuera de rango para calcular expires_at: {listing.created_at}"
                ) from e
            listing = listing.model_copy(update={"expires_at": expires_at})

        return listing

    def to_snapshot(self) -> ListingSnapshot:
        """Extrae el subconjunto de campos que usa el ranking."""
        return ListingSnapshot.model_validate(
            self.model_dump(include=set(ListingSnapshot.model_fields))
        )

    def is_expired(self, now: datetime) -> bool:
        """True si la publicación venció (por estado o por fecha)."""
        if self.status == ListingStatus.EXPIRED:
            return True
        return self.expires_at is not None and self.expires_at <= as_utc(now)

    def is_visible(self, now: datetime) -> bool:
        """Solo los anuncios activos y vigentes se muestran a inquilinos."""
        return self.status == ListingStatus.ACTIVE and not self.is_expired(now)
