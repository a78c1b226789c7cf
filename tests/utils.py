from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Any

from vitrina.models import Listing, ListingSnapshot

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def make_snapshot(**overrides: Any) -> ListingSnapshot:
    """Snapshot mínimo (sin campos opcionales) publicado en NOW."""
    data: dict[str, Any] = {"created_at": NOW, "payment_status": "pending"}
    data.update(overrides)
    return ListingSnapshot(**data)


def complete_fields() -> dict[str, Any]:
    """Los nueve grupos de campos opcionales cargados."""
    return {
        "images": ["a.jpg"],
        "amenities": ["WiFi"],
        "area": 500,
        "furnishing": "Semi Furnished",
        "preferred_tenants": "Any",
        "floor": 2,
        "total_floors": 4,
        "available_from": date(2024, 7, 1),
        "is_pet_friendly": False,
        "latitude": 12.9,
        "longitude": 77.6,
    }


def make_row(**overrides: Any) -> dict[str, Any]:
    """Fila de la tabla properties tal como la devuelve Supabase."""
    row: dict[str, Any] = {
        "id": "listing-1",
        "title": "Cozy 2BHK near metro",
        "rent": 12000,
        "deposit": 24000,
        "bhk": "2BHK",
        "location": "Indiranagar",
        "description": "Bright flat close to the metro station.",
        "images": [],
        "amenities": [],
        "owner_id": "owner-1",
        "owner_name": "Owner",
        "owner_phone": "+91 90000 00000",
        "status": "active",
        "payment_status": "paid",
        "created_at": NOW.isoformat(),
        "expires_at": (NOW + timedelta(days=30)).isoformat(),
        "view_count": 0,
    }
    row.update(overrides)
    return row


def make_listing(**overrides: Any) -> Listing:
    return Listing.from_db_row(make_row(**overrides))
