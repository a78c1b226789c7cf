"""
Script para rankear anuncios exportados de la tabla properties.

Lee un JSON con un array de filas, descarta las inválidas, aplica
los filtros del inquilino y muestra los anuncios ordenados por puntaje.

Uso:
    python -m vitrina.scripts.run_ranking --input properties.json
    python -m vitrina.scripts.run_ranking --input properties.json --bhk 1BHK,2BHK --max-rent 15000
    python -m vitrina.scripts.run_ranking --input properties.json --now 2024-06-01T00:00:00+00:00 --json
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Optional

import structlog
from pydantic import TypeAdapter, ValidationError

from vitrina.config import get_settings
from vitrina.models import Listing, ListingFilters
from vitrina.ranking import RankedListing, rank_listings

# Configurar logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


def load_listings(path: Path) -> tuple[list[Listing], int]:
    """
    Carga anuncios desde un export JSON.

    Args:
        path: Archivo con un array de filas de properties

    Returns:
        (anuncios válidos, cantidad de filas descartadas)

    Raises:
        FileNotFoundError: Si el archivo no existe
        ValueError: Si el contenido no es un array JSON
    """
    with open(path, encoding="utf-8") as f:
        rows = json.load(f)

    if not isinstance(rows, list):
        raise ValueError(f"Se esperaba un array de filas en {path}")

    listings = []
    skipped = 0
    for index, row in enumerate(rows):
        try:
            listings.append(Listing.from_db_row(row))
        except (ValueError, TypeError) as e:
            skipped += 1
            logger.warning(
                "Fila descartada",
                index=index,
                listing_id=row.get("id") if isinstance(row, dict) else None,
                error=str(e),
            )

    logger.info("Anuncios cargados", valid=len(listings), skipped=skipped)
    return listings, skipped


def format_table(ranked: list[RankedListing]) -> str:
    """Tabla de texto: puesto, puntaje, desglose, id y título."""
    lines = [f"{'#':>3}  {'score':>5}  {'F/P/E/C':<12}  {'id':<36}  title"]
    for position, item in enumerate(ranked, start=1):
        b = item.breakdown
        detail = f"{b.freshness}/{b.paid_boost}/{b.engagement}/{b.completeness}"
        lines.append(
            f"{position:>3}  {item.score:>5}  {detail:<12}  "
            f"{item.listing.id:<36}  {item.listing.title}"
        )
    return "\n".join(lines)


def to_json(ranked: list[RankedListing]) -> str:
    payload = [
        {
            "rank": position,
            "id": item.listing.id,
            "title": item.listing.title,
            "location": item.listing.location,
            "rent": item.listing.rent,
            "score": item.score,
            **asdict(item.breakdown),
        }
        for position, item in enumerate(ranked, start=1)
    ]
    return json.dumps(payload, ensure_ascii=False, indent=2)


_DATETIME = TypeAdapter(datetime)


def parse_now(value: str) -> datetime:
    """Parsea --now con pydantic (acepta sufijo Z en cualquier versión de Python)."""
    return _DATETIME.validate_python(value)


def _split(value: Optional[str]) -> list[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Ranking de anuncios de alquiler"
    )
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="JSON exportado de properties (default: LISTINGS_FILE)",
    )
    parser.add_argument(
        "--now",
        type=parse_now,
        default=None,
        help="Momento de evaluación ISO 8601 (default: ahora, UTC)",
    )
    parser.add_argument("--search", type=str, default=None, help="Texto en título o zona")
    parser.add_argument(
        "--bhk", type=str, default=None, help="Tipologías separadas por coma (ej: 1BHK,2BHK)"
    )
    parser.add_argument("--min-rent", type=float, default=0, help="Alquiler mínimo")
    parser.add_argument("--max-rent", type=float, default=None, help="Alquiler máximo")
    parser.add_argument(
        "--locations", type=str, default=None, help="Zonas separadas por coma"
    )
    parser.add_argument(
        "--furnishing", type=str, default=None, help="Amoblamientos separados por coma"
    )
    parser.add_argument(
        "--amenities", type=str, default=None, help="Comodidades requeridas separadas por coma"
    )
    parser.add_argument("--category", type=str, default=None, help="Categoría rápida")
    parser.add_argument(
        "--all",
        action="store_true",
        help="Incluir anuncios pendientes de pago y vencidos",
    )
    parser.add_argument("--limit", type=int, default=None, help="Máximo de resultados")
    parser.add_argument("--json", action="store_true", help="Salida en JSON")
    return parser


def main(argv: Optional[list[str]] = None):
    """Entry point del script."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(message)s",
        force=True,
    )

    parser = build_parser()
    args = parser.parse_args(argv)

    input_path = args.input or settings.listings_file
    if not input_path:
        parser.error("--input es requerido (o configurar LISTINGS_FILE)")

    filter_args = {
        "search_query": args.search,
        "bhk": _split(args.bhk),
        "rent_min": args.min_rent,
        "locations": _split(args.locations),
        "furnishing": _split(args.furnishing),
        "amenities": _split(args.amenities),
        "category": args.category,
    }
    if args.max_rent is not None:
        filter_args["rent_max"] = args.max_rent
    try:
        filters = ListingFilters(**filter_args)
    except ValidationError as e:
        parser.error(f"Filtros inválidos: {e}")

    try:
        listings, skipped = load_listings(Path(input_path))
        ranked = rank_listings(
            listings,
            now=args.now,
            filters=filters,
            only_visible=not args.all,
        )
        if args.limit is not None:
            ranked = ranked[: args.limit]

        print(to_json(ranked) if args.json else format_table(ranked))

        sys.exit(0 if skipped == 0 else 1)

    except KeyboardInterrupt:
        logger.info("Ranking interrumpido por usuario")
        sys.exit(130)
    except (OSError, ValueError) as e:
        logger.error("Error fatal en ranking", input=input_path, error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
