"""
Configuración centralizada del sistema.
Carga variables de entorno y define settings globales.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Encontrar la raíz del proyecto (donde está el .env)
# config.py -> vitrina/ -> src/ -> raíz del proyecto
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Configuración principal de la aplicación."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Publicación
    listing_duration_days: int = Field(
        30, ge=1, description="Días que un anuncio permanece activo tras el pago"
    )

    # Filtros
    rent_range_max: float = Field(
        25000.0, gt=0, description="Tope por defecto del rango de alquiler"
    )

    # Entrada del script de ranking
    listings_file: Optional[str] = Field(
        None, description="JSON exportado de la tabla properties"
    )

    # Logging
    log_level: str = Field("INFO", description="Nivel de logging")


@lru_cache
def get_settings() -> Settings:
    """Obtiene la configuración cacheada."""
    return Settings()


# Constantes del sistema
BHK_TYPES = ["1BHK", "2BHK", "3BHK", "4BHK"]

AMENITY_OPTIONS = [
    "Parking",
    "WiFi",
    "AC",
    "Geyser",
    "Power Backup",
    "Lift",
    "Security",
    "Gym",
    "Swimming Pool",
    "Water Supply",
]

# Categorías rápidas de la portada: etiqueta -> (bhk exacto, alquiler máximo exclusivo)
QUICK_CATEGORIES = {
    "1BHK": ("1BHK", None),
    "2BHK": ("2BHK", None),
    "Under ₹10k": (None, 10000),
    "Under ₹15k": (None, 15000),
}
