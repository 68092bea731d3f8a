from decimal import Decimal
from pathlib import Path

import pytest
import yaml

from hovenier.domain.errors import ReferenceDataError
from hovenier.reference.loader import DEFAULT_DATA_DIR, load_reference_data

D = Decimal


def test_bundled_tables_load(reference):
    assert reference.normuren
    assert reference.producten
    assert reference.factor("bereikbaarheid", "goed") == D("1.0")


def test_values_are_exact_decimals(reference):
    n = reference.find_normuur("heggen", "heg snoeien beide")
    assert n is not None
    assert n.normuur_per_eenheid == D("0.5")
    assert reference.find_normuur("gras_onderhoud", "kanten steken").normuur_per_eenheid == D("0.01")


def test_normuur_lookup_is_case_insensitive_and_exact(reference):
    assert reference.find_normuur("heggen", "HEG SNOEIEN BEIDE") is not None
    assert reference.find_normuur("heggen", "heg snoeien") is None
    assert reference.find_normuur("onbekend", "maaien") is None


def test_product_lookup_partial_first_active(reference):
    p = reference.find_product("hoogwerker", "machine")
    assert p is not None
    assert p.verkoopprijs == D("185.00")
    assert reference.find_product("hoogwerker", "grond") is None


def _copy_tables(tmp_path: Path) -> Path:
    for name in ("normuren", "correctiefactoren", "producten"):
        (tmp_path / f"{name}.yaml").write_text(
            (DEFAULT_DATA_DIR / f"{name}.yaml").read_text(encoding="utf-8"), encoding="utf-8"
        )
    return tmp_path


def test_missing_table_fails_fast(tmp_path):
    _copy_tables(tmp_path)
    (tmp_path / "producten.yaml").unlink()
    with pytest.raises(ReferenceDataError):
        load_reference_data(tmp_path)


def test_schema_violation_fails_fast(tmp_path):
    _copy_tables(tmp_path)
    (tmp_path / "normuren.yaml").write_text(
        yaml.safe_dump({"version": 1, "normuren": [{"scope": "heggen", "activiteit": "x"}]}),
        encoding="utf-8",
    )
    with pytest.raises(ReferenceDataError):
        load_reference_data(tmp_path)


def test_category_without_neutral_level_is_rejected(tmp_path):
    _copy_tables(tmp_path)
    (tmp_path / "correctiefactoren.yaml").write_text(
        yaml.safe_dump({"version": 1, "correctiefactoren": {"bereikbaarheid": {"beperkt": 1.2, "slecht": 1.5}}}),
        encoding="utf-8",
    )
    with pytest.raises(ReferenceDataError):
        load_reference_data(tmp_path)
