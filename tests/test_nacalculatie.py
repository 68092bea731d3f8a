import random
from datetime import date
from decimal import Decimal

import pytest

from hovenier.domain.enums import DeviationStatus, InsightType, RegelType
from hovenier.engine.quote_aggregator import OfferteRegel
from hovenier.nacalculatie.deviation import (
    DeviationThresholds,
    calculate_nacalculatie,
    deviation_percentage,
    get_deviation_status,
    werkelijke_uren_per_scope,
)
from hovenier.nacalculatie.models import MachineGebruik, UrenRegistratie
from hovenier.planning.voorcalculatie import VoorcalculatieData

D = Decimal


@pytest.mark.parametrize(
    "pct, expected",
    [
        ("0", DeviationStatus.GOOD),
        ("5", DeviationStatus.GOOD),
        ("-5", DeviationStatus.GOOD),
        ("5.1", DeviationStatus.WARNING),
        ("15", DeviationStatus.WARNING),
        ("-15", DeviationStatus.WARNING),
        ("15.1", DeviationStatus.CRITICAL),
        ("-40", DeviationStatus.CRITICAL),
    ],
)
def test_status_boundaries_are_inclusive(pct, expected):
    assert get_deviation_status(D(pct)) == expected


def test_custom_thresholds():
    strict = DeviationThresholds(good=D("2"), warning=D("8"))
    assert get_deviation_status(D("5"), strict) == DeviationStatus.WARNING
    assert get_deviation_status(D("9"), strict) == DeviationStatus.CRITICAL


def test_deviation_percentage_edge_cases():
    assert deviation_percentage(D("40"), D("46")) == D("15.0")
    assert deviation_percentage(D("0"), D("3")) == D("100")
    assert deviation_percentage(D("0"), D("0")) == D("0")
    assert deviation_percentage(D("30"), D("20")) == D("-33.3")


def _voorcalc():
    return VoorcalculatieData(
        norm_uren_totaal=D("40"),
        geschatte_dagen=D("4"),
        norm_uren_per_scope={"heggen": D("30"), "gras_onderhoud": D("10")},
    )


def _uren():
    return [
        UrenRegistratie(date(2026, 4, 1), "jan", D("8"), scope="heggen"),
        UrenRegistratie(date(2026, 4, 1), "piet", D("8"), scope="heggen"),
        UrenRegistratie(date(2026, 4, 2), "jan", D("8"), scope="heggen"),
        UrenRegistratie(date(2026, 4, 2), "piet", D("6"), scope="gras_onderhoud"),
        UrenRegistratie(date(2026, 4, 3), "jan", D("2")),
    ]


def test_totals_and_per_scope():
    result = calculate_nacalculatie(_voorcalc(), _uren())

    assert result.werkelijke_uren == D("32")
    assert result.afwijking_uren == D("-8.00")
    assert result.afwijking_percentage == D("-20.0")
    assert result.status == DeviationStatus.CRITICAL
    assert result.werkelijke_dagen == 3
    assert result.aantal_medewerkers == 2
    assert result.aantal_registraties == 5
    # registratie zonder scope telt alleen in het totaal
    assert result.werkelijke_uren_per_scope == {"gras_onderhoud": D("6"), "heggen": D("24")}


def test_scope_deviations_sorted_by_size():
    result = calculate_nacalculatie(_voorcalc(), _uren())
    assert [a.scope for a in result.afwijkingen_per_scope] == ["gras_onderhoud", "heggen"]
    gras = result.afwijkingen_per_scope[0]
    assert gras.afwijking_percentage == D("-40.0")
    assert gras.status == DeviationStatus.CRITICAL


def test_unplanned_scope_is_full_overrun():
    uren = [UrenRegistratie(date(2026, 4, 1), "jan", D("3"), scope="bomen")]
    result = calculate_nacalculatie(_voorcalc(), uren)
    bomen = [a for a in result.afwijkingen_per_scope if a.scope == "bomen"][0]
    assert bomen.afwijking_percentage == D("100")


def test_machine_costs_against_quote():
    regels = [OfferteRegel("r", "heggen", "Hoogwerker", "dag", D("2"), D("185"), D("370.00"), RegelType.MACHINE)]
    machines = [MachineGebruik(date(2026, 4, 1), D("8"), D("185")), MachineGebruik(date(2026, 4, 2), D("8"), D("300"))]
    result = calculate_nacalculatie(_voorcalc(), _uren(), machines, offerte_regels=regels)

    assert result.geplande_machine_kosten == D("370.00")
    assert result.afwijking_machine_kosten == D("115.00")
    assert result.afwijking_machine_kosten_percentage == D("31.1")
    assert any(i.title == "Hogere machinekosten" for i in result.insights)


def test_no_registrations():
    result = calculate_nacalculatie(_voorcalc(), [])
    assert result.werkelijke_uren == D("0")
    assert result.afwijking_percentage == D("-100.0")
    assert result.werkelijke_dagen == 0


def test_log_order_does_not_matter():
    baseline = calculate_nacalculatie(_voorcalc(), _uren())
    rng = random.Random(7)
    for _ in range(5):
        shuffled = _uren()
        rng.shuffle(shuffled)
        assert calculate_nacalculatie(_voorcalc(), shuffled) == baseline


def test_per_scope_sum_helper():
    assert werkelijke_uren_per_scope(_uren())["heggen"] == D("24")


def test_insights_for_good_project():
    uren = [UrenRegistratie(date(2026, 4, d), "jan", D("10"), scope="heggen") for d in range(1, 5)]
    result = calculate_nacalculatie(_voorcalc(), uren)

    assert result.status == DeviationStatus.GOOD
    assert result.insights[0].type == InsightType.SUCCESS
    assert result.insights[0].title == "Uitstekende planning"


def test_insights_for_overrun_name_scopes():
    uren = [
        UrenRegistratie(date(2026, 4, d), "jan", D("12"), scope="heggen") for d in range(1, 8)
    ]
    result = calculate_nacalculatie(_voorcalc(), uren)

    titles = [i.title for i in result.insights]
    assert titles[0] == "Significante overschrijding"
    assert "Meer dagen nodig" in titles
    assert "heggen: Onderschatting" in titles
    assert "gras_onderhoud: Overschatting" in titles
