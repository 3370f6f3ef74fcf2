"""Seed data for the catalog.

The built-in seed is compiled into the package. An alternative seed can be
supplied as a YAML file:

    categories: [Парки, ...]
    places:
      - {id: 1, name: ..., category: Парки, description: ..., image: ..., rating: 4.5}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError

from lisbon_guide.core.errors import CatalogError

from .model import Place


BUILTIN_CATEGORIES: tuple[str, ...] = ("Достопримечательности", "Парки", "Рестораны")

BUILTIN_PLACES: tuple[Place, ...] = (
    Place(
        id=1,
        name="Башня Белен",
        category="Достопримечательности",
        description=(
            "Башня Торре-де-Белен — укреплённое сооружение на острове в реке Тежу в одноимённом "
            "районе Лиссабона. Построена в 1515—1521 годах Франсишку де Аррудой в честь открытия "
            "Васко да Гама морского пути в Индию и служила поочерёдно небольшой оборонительной "
            "крепостью, пороховым складом, тюрьмой и таможней."
        ),
        image="tower",
        rating=4.8,
    ),
    Place(
        id=2,
        name="Парк Эдуарда VII",
        category="Парки",
        description=(
            "Парк Эдуарда VII - общественный парк в Лиссабоне, Португалия. Парк занимает площадь в "
            "26 гектаров (64 акра) к северу от Авениды да Либердаде и площади Маркиза Помбала в "
            "центре Лиссабона. Парк назван в честь короля Великобритании Эдуарда VII, который "
            "посетил Португалию в 1903 году, чтобы укрепить отношения между двумя странами и "
            "подтвердить англо-португальский союз. Лиссабонская книжная ярмарка ежегодно "
            "проводится в парке Эдуарду VII."
        ),
        image="eduardo_park",
        rating=4.5,
    ),
    Place(
        id=3,
        name="Ресторан Ramiro",
        category="Рестораны",
        description=(
            "Прекрасное место, чтобы отведать вкуснейшие и свежайшие морепродукты. Очень "
            "популярное место, время ожидания на входе может занять до часа"
        ),
        image="ramiro_restaurants",
        rating=4.7,
    ),
)


class _SeedPlace(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: PositiveInt
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    description: str = ""
    image: str = ""
    rating: float = 0.0


class _SeedFile(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    categories: list[str] = Field(min_length=1)
    places: list[_SeedPlace] = Field(default_factory=list)


def _format_validation_error(e: ValidationError) -> str:
    parts: list[str] = []
    for err in e.errors():
        where = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{where}: {err.get('msg')}")
    return "; ".join(parts)


def load_seed_file(path: str | Path) -> tuple[tuple[str, ...], tuple[Place, ...]]:
    """Read categories and places from a YAML seed file.

    Raises:
        CatalogError: If the file is missing, unparsable, or fails validation.
    """

    seed_path = Path(path)
    if not seed_path.exists():
        raise CatalogError(f"Seed file not found: {seed_path}")

    try:
        raw: Any = yaml.safe_load(seed_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise CatalogError(f"Failed to read seed file {seed_path}: {e}") from e

    if not isinstance(raw, dict):
        raise CatalogError(f"Seed root must be a mapping/dict: {seed_path}")

    try:
        parsed = _SeedFile.model_validate(raw)
    except ValidationError as e:
        raise CatalogError(f"Invalid seed file {seed_path}: {_format_validation_error(e)}") from e

    places = tuple(
        Place(
            id=p.id,
            name=p.name,
            category=p.category,
            description=p.description,
            image=p.image,
            rating=p.rating,
        )
        for p in parsed.places
    )
    return tuple(parsed.categories), places
