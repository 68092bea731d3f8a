from decimal import Decimal

import pytest

from hovenier.calculators import calculate_scope
from hovenier.calculators.base import calculator_registry
from hovenier.domain.enums import Scope
from hovenier.domain.errors import ScopeValidationError, UnknownScopeError
from hovenier.domain.scopes import HeggenInput, parse_scope

D = Decimal


def test_present_hedge_without_width_is_rejected():
    with pytest.raises(ScopeValidationError) as exc:
        parse_scope({"scope": "heggen", "lengte": 10, "hoogte": 2, "breedte": 0})
    assert exc.value.code == "SCOPE_INVALID"
    assert exc.value.errors


def test_absent_scope_needs_no_dimensions():
    inp = parse_scope({"scope": "heggen", "aanwezig": False})
    assert isinstance(inp, HeggenInput)
    assert inp.aanwezig is False


def test_unknown_scope_and_extra_fields_are_rejected():
    with pytest.raises(ScopeValidationError):
        parse_scope({"scope": "vijver", "oppervlakte": 10})
    with pytest.raises(ScopeValidationError):
        parse_scope({"scope": "gras_onderhoud", "oppervlakte": 10, "kleur": "groen"})


def test_paving_requires_base_layer():
    with pytest.raises(ScopeValidationError):
        parse_scope({"scope": "bestrating", "oppervlakte": 10})


def test_negative_values_are_rejected():
    with pytest.raises(ScopeValidationError):
        parse_scope({"scope": "grondwerk", "oppervlakte": -1})


def test_frequency_bounds():
    with pytest.raises(ScopeValidationError):
        parse_scope({"scope": "heggen", "lengte": 1, "hoogte": 1, "breedte": 1, "frequentie": 13})


def test_missing_calculator_is_zero_unless_strict(ctx, monkeypatch):
    monkeypatch.delitem(calculator_registry, Scope.HEGGEN)
    inp = HeggenInput(lengte=D("10"), hoogte=D("1"), breedte=D("1"))

    assert calculate_scope(inp, ctx).is_empty
    with pytest.raises(UnknownScopeError):
        calculate_scope(inp, ctx, strict=True)
