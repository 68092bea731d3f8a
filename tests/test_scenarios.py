"""Vaste rekenvoorbeelden, end-to-end door de engine."""
from datetime import date
from decimal import Decimal

from hovenier.config import CalculationConfig
from hovenier.domain.enums import DeviationStatus, RegelType
from hovenier.engine.offerte import calculate_offerte
from hovenier.engine.quote_aggregator import OfferteRegel, calculate_totalen
from hovenier.nacalculatie.deviation import calculate_nacalculatie
from hovenier.nacalculatie.models import UrenRegistratie
from hovenier.planning.sizer import days_for_hours
from hovenier.planning.voorcalculatie import VoorcalculatieData

D = Decimal


def test_hedge_scenario(reference):
    berekening = calculate_offerte(
        [{"scope": "heggen", "lengte": 10, "hoogte": "2.5", "breedte": "0.6", "snoei": "beide"}],
        reference,
    )
    assert berekening.uren_per_scope == {"heggen": D("9.75")}
    regel = berekening.regels[0]
    assert regel.hoeveelheid == D("9.75")
    assert regel.totaal == D("438.75")  # 9.75 x 45


def test_lawn_scenario(reference):
    berekening = calculate_offerte(
        [{"scope": "gras_onderhoud", "oppervlakte": 50, "maaien": True, "kanten_steken": True}],
        reference,
    )
    assert [r.hoeveelheid for r in berekening.regels] == [D("1.00"), D("0.25")]
    assert berekening.totalen.totaal_uren == D("1.25")


def test_aggregation_scenario():
    regels = [
        OfferteRegel("r1", "bestrating", "Materiaal", "stuk", D("1"), D("1000"), D("1000.00"), RegelType.MATERIAAL),
        OfferteRegel("r2", "bestrating", "Arbeid", "vast", D("1"), D("500"), D("500.00"), RegelType.ARBEID),
    ]
    t = calculate_totalen(regels, CalculationConfig())

    assert t.subtotaal == D("1500.00")
    assert t.marge == D("300.00")
    assert t.totaal_ex_btw == D("1800.00")
    assert t.btw == D("378.00")
    assert t.totaal_incl_btw == D("2178.00")
    assert t.marge_percentage == D("20.00")


def test_deviation_scenario():
    voorcalc = VoorcalculatieData(
        norm_uren_totaal=D("40"), geschatte_dagen=D("4"), norm_uren_per_scope={"heggen": D("40")}
    )
    uren = [
        UrenRegistratie(date(2026, 3, 2), "jan", D("23"), scope="heggen"),
        UrenRegistratie(date(2026, 3, 3), "piet", D("23"), scope="heggen"),
    ]
    result = calculate_nacalculatie(voorcalc, uren)

    assert result.afwijking_percentage == D("15.0")
    assert result.status == DeviationStatus.WARNING


def test_planning_scenario():
    assert days_for_hours(D("100"), 2, D("6")) == D("8.33")
