from decimal import Decimal

from hovenier.engine.correction import CorrectionFactorEngine, FactorSelection, ResolvedFactor

D = Decimal


def test_no_selection_is_neutral(reference):
    out = CorrectionFactorEngine(reference).apply(D("10"), FactorSelection())
    assert out.uren == D("10")
    assert out.factoren == ()


def test_factors_multiply_in_fixed_order(reference):
    sel = FactorSelection(bereikbaarheid="beperkt", achterstalligheid="gemiddeld", complexiteit="hoog")
    out = CorrectionFactorEngine(reference).apply(D("10"), sel)

    # 10 x 1.2 x 1.3 x 1.3
    assert out.uren == D("20.280")
    assert [f.categorie for f in out.factoren] == ["bereikbaarheid", "achterstalligheid", "complexiteit"]
    assert out.total_factor == D("2.028")


def test_unknown_level_falls_back_to_neutral(reference):
    sel = FactorSelection(bereikbaarheid="onbekend")
    out = CorrectionFactorEngine(reference).apply(D("4"), sel)
    assert out.uren == D("4")
    assert out.factoren[0].factor == D("1.0")


def test_extra_and_toeslagen_come_after_generic(reference):
    sel = FactorSelection(bereikbaarheid="slecht").with_extra(("haagsoort", "taxus"), ("ondergrond", None))
    toeslag = ResolvedFactor("hoogtetoeslag", "> 2 m", D("1.3"))
    out = CorrectionFactorEngine(reference).apply(D("2"), sel, toeslagen=[toeslag])

    assert [f.categorie for f in out.factoren] == ["bereikbaarheid", "haagsoort", "hoogtetoeslag"]
    # 2 x 1.5 x 1.3 x 1.3
    assert out.uren == D("5.070")


def test_describe_shows_delta():
    f = ResolvedFactor("bereikbaarheid", "beperkt", D("1.2"))
    assert f.describe() == "bereikbaarheid beperkt x1.2 (+20%)"
    assert ResolvedFactor("intensiteit", "weinig", D("0.8")).describe() == "intensiteit weinig x0.8 (-20%)"


def test_user_factor_overrides(reference):
    custom = reference.with_factor_overrides({"bereikbaarheid": {"beperkt": "1.25"}})
    out = CorrectionFactorEngine(custom).apply(D("8"), FactorSelection(bereikbaarheid="beperkt"))
    assert out.uren == D("10.00")
    # origineel ongewijzigd
    assert reference.factor("bereikbaarheid", "beperkt") == D("1.2")
