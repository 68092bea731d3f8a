from __future__ import annotations

import json
import logging
from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from jsonschema import ValidationError, validate

from hovenier.domain.errors import ReferenceDataError

from .models import NEUTRAL, Normuur, Product, ReferenceData

D = Decimal

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_DATA_DIR = PACKAGE_DIR / "data"
SCHEMA_DIR = PACKAGE_DIR / "schemas"

TABLES = ("normuren", "correctiefactoren", "producten")


def _dec(value: Any) -> D:
    # via str: YAML floats (0.15) exact als Decimal("0.15")
    return D(str(value))


def _load_table(data_dir: Path, name: str) -> Dict[str, Any]:
    path = data_dir / f"{name}.yaml"
    if not path.exists():
        raise ReferenceDataError(f"reference table missing: {path}")

    with path.open("r", encoding="utf-8") as f:
        d = yaml.safe_load(f)

    with (SCHEMA_DIR / f"{name}.schema.json").open("r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        validate(instance=d, schema=schema)
    except ValidationError as exc:
        raise ReferenceDataError(f"{name}.yaml: {exc.message}", meta={"path": list(exc.absolute_path)}) from exc
    return d


def parse_normuren(rows: List[Dict[str, Any]]) -> List[Normuur]:
    out: List[Normuur] = []
    seen = set()
    for row in rows:
        n = Normuur(
            scope=str(row["scope"]),
            activiteit=str(row["activiteit"]),
            normuur_per_eenheid=_dec(row["normuur_per_eenheid"]),
            eenheid=str(row["eenheid"]),
            omschrijving=row.get("omschrijving"),
        )
        if n.key in seen:
            raise ReferenceDataError(f"duplicate normuur: {n.scope}/{n.activiteit}")
        seen.add(n.key)
        out.append(n)
    return out


def parse_correctiefactoren(table: Dict[str, Dict[str, Any]]) -> Dict[str, Dict[str, D]]:
    out: Dict[str, Dict[str, D]] = {}
    for categorie, levels in table.items():
        parsed = {str(level): _dec(value) for level, value in levels.items()}
        if NEUTRAL not in parsed.values():
            raise ReferenceDataError(f"correction category '{categorie}' has no neutral (1.0) level")
        out[str(categorie)] = parsed
    return out


def parse_producten(rows: List[Dict[str, Any]]) -> List[Product]:
    return [
        Product(
            productnaam=str(row["productnaam"]),
            categorie=str(row["categorie"]),
            verkoopprijs=_dec(row["verkoopprijs"]),
            eenheid=str(row["eenheid"]),
            inkoopprijs=_dec(row.get("inkoopprijs", 0)),
            verliespercentage=_dec(row.get("verliespercentage", 0)),
            actief=bool(row.get("actief", True)),
        )
        for row in rows
    ]


def load_reference_data(data_dir: Optional[Union[str, Path]] = None) -> ReferenceData:
    """
    Laad + valideer de drie referentietabellen (YAML + JSON schema).
    Fail-fast: een kapotte tabel geeft ReferenceDataError, geen halve dataset.
    """
    base = Path(data_dir) if data_dir else DEFAULT_DATA_DIR

    normuren = parse_normuren(_load_table(base, "normuren")["normuren"])
    factoren = parse_correctiefactoren(_load_table(base, "correctiefactoren")["correctiefactoren"])
    producten = parse_producten(_load_table(base, "producten")["producten"])

    logger.info(
        "reference data loaded from %s (%d normuren, %d factor categories, %d products)",
        base,
        len(normuren),
        len(factoren),
        len(producten),
    )
    return ReferenceData(normuren=tuple(normuren), correctiefactoren=factoren, producten=tuple(producten))


@lru_cache
def get_reference_data(data_dir: Optional[str] = None) -> ReferenceData:
    return load_reference_data(data_dir)
