import random
from decimal import Decimal

from hovenier.calculators import calculate_scope
from hovenier.config import CalculationConfig
from hovenier.domain.enums import RegelType
from hovenier.domain.scopes import parse_scope
from hovenier.engine.offerte import calculate_offerte, calculate_results
from hovenier.engine.quote_aggregator import (
    OfferteRegel,
    QuoteAggregator,
    calculate_totalen,
    effective_marge,
    regels_for_scope,
)

D = Decimal

SCOPES = [
    {"scope": "grondwerk", "oppervlakte": 20, "afvoer_grond": True},
    {"scope": "bestrating", "oppervlakte": 25, "onderbouw": {"laag": "zandbed", "opsluitbanden": True}},
    {"scope": "borders", "oppervlakte": 12, "afwerking": "schors"},
    {"scope": "heggen", "lengte": 30, "hoogte": "4.5", "breedte": 1},
    {"scope": "bemesting", "oppervlakte": 200},
    {"scope": "gras_onderhoud", "oppervlakte": 300, "maaien": True},
]


def _regel(scope, totaal, type_, marge=None):
    return OfferteRegel("x", scope, "test", "vast", D("1"), D(totaal), D(totaal), type_, marge)


def test_labor_line_uses_quarter_hours_and_rate(ctx):
    res = calculate_scope(parse_scope({"scope": "gras_onderhoud", "oppervlakte": 50, "kanten_steken": True}), ctx)
    (regel,) = regels_for_scope(res, ctx.config)

    assert regel.id == "regel_gras_onderhoud_001"
    assert regel.eenheid == "uur"
    assert regel.hoeveelheid == D("0.25")
    assert regel.totaal == D("11.25")


def test_material_line_includes_loss(ctx):
    res = calculate_scope(parse_scope({"scope": "gras", "oppervlakte": 100}), ctx)
    zaad = [r for r in regels_for_scope(res, ctx.config) if r.type == RegelType.MATERIAAL][0]
    # 3.5 kg x 1.10 verlies = 3.85 kg x 12.00
    assert zaad.hoeveelheid == D("3.85")
    assert zaad.totaal == D("46.20")


def test_margin_precedence():
    regel_override = _regel("bemesting", "100", RegelType.ARBEID, marge=D("70"))
    plain = _regel("heggen", "100", RegelType.ARBEID)

    assert effective_marge(regel_override, D("20"), {"bemesting": D("50")}) == D("70")
    assert effective_marge(plain, D("20"), {"heggen": D("35")}) == D("35")
    assert effective_marge(plain, D("20"), {}) == D("20")


def test_totals_with_mixed_margins():
    regels = [
        _regel("bemesting", "100", RegelType.MATERIAAL, marge=D("70")),
        _regel("heggen", "100", RegelType.ARBEID),
        _regel("heggen", "50", RegelType.MACHINE),
    ]
    t = calculate_totalen(regels, CalculationConfig(), {"heggen": D("10")})

    assert t.materiaalkosten == D("100.00")
    assert t.machinekosten == D("50.00")
    assert t.marge == D("85.00")  # 70 + 10 + 5
    assert t.marge_percentage == D("34.00")


def test_empty_quote_totals_are_zero():
    t = calculate_totalen([], CalculationConfig())
    assert t.subtotaal == D("0.00")
    assert t.totaal_incl_btw == D("0.00")
    assert t.marge_percentage == D("20.00")


def test_regels_follow_scope_order_not_input_order(reference):
    berekening = calculate_offerte(list(reversed(SCOPES)), reference)
    scopes_in_order = list(dict.fromkeys(r.scope for r in berekening.regels))
    assert scopes_in_order == ["grondwerk", "bestrating", "borders", "gras_onderhoud", "heggen", "bemesting"]


def test_same_input_same_output(reference):
    a = calculate_offerte(SCOPES, reference)
    b = calculate_offerte(SCOPES, reference)
    assert a.regels == b.regels
    assert a.totalen == b.totalen
    assert a.uren_per_scope == b.uren_per_scope


def test_shuffled_input_gives_same_totals(reference, ctx):
    baseline = calculate_offerte(SCOPES, reference)
    rng = random.Random(20260318)
    for _ in range(5):
        shuffled = SCOPES[:]
        rng.shuffle(shuffled)
        out = QuoteAggregator(ctx.config).aggregate(calculate_results(shuffled, ctx))
        assert out.totalen == baseline.totalen
        assert out.regels == baseline.regels


def test_duplicate_scope_ids_are_renumbered(reference):
    berekening = calculate_offerte(
        [
            {"scope": "heggen", "lengte": 10, "hoogte": 1, "breedte": 1},
            {"scope": "heggen", "lengte": 5, "hoogte": 1, "breedte": 1},
        ],
        reference,
    )
    assert [r.id for r in berekening.regels] == ["regel_heggen_001", "regel_heggen_002"]
    assert berekening.uren_per_scope == {"heggen": D("7.50")}


def test_overhead_and_guarantee_lines(reference):
    berekening = calculate_offerte(
        [{"scope": "gras_onderhoud", "oppervlakte": 100, "maaien": True}],
        reference,
        include_overhead=True,
        garantiepakket={"naam": "Plantgarantie 1 jaar", "prijs": "95"},
    )
    extra = {r.scope: r for r in berekening.regels[-2:]}
    assert extra["algemeen"].totaal == D("200.00")
    assert extra["garantie"].type == RegelType.MATERIAAL
    # overhead telt niet als uren
    assert berekening.totalen.totaal_uren == D("2.00")


def test_absent_scope_changes_nothing(reference):
    base = calculate_offerte(SCOPES, reference)
    with_absent = calculate_offerte(SCOPES + [{"scope": "bomen", "aanwezig": False}], reference)
    assert with_absent.totalen == base.totalen
