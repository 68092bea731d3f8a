from decimal import Decimal

import pytest

from hovenier.config import CalculationConfig
from hovenier.domain.enums import Scope, TaakStatus
from hovenier.engine.context import LaborItem, ScopeResult
from hovenier.engine.offerte import calculate_offerte
from hovenier.engine.quote_aggregator import QuoteAggregator
from hovenier.planning.sizer import (
    TaskNotFoundError,
    add_task,
    days_for_hours,
    reorder_tasks,
    size_planning,
    summarize_tasks,
    update_task_status,
)
from hovenier.planning.voorcalculatie import (
    VoorcalculatieData,
    build_voorcalculatie,
    duration_with_buffer,
    voorcalculatie_for_offerte,
    voorcalculatie_from_hours,
    werkdagen,
)

D = Decimal


def test_days_scale_with_team_size():
    assert days_for_hours(D("100"), 2, D("6")) == D("8.33")
    assert days_for_hours(D("100"), 4, D("6")) == D("4.17")
    assert days_for_hours(D("100"), 2, D("0")) == D("0")


def test_tasks_from_templates_split_hours_evenly():
    result = size_planning({"heggen": D("9"), "grondwerk": D("12")}, 2, D("6"))

    assert [t.id for t in result.taken] == [
        "taak_grondwerk_1",
        "taak_grondwerk_2",
        "taak_grondwerk_3",
        "taak_heggen_1",
        "taak_heggen_2",
    ]
    assert [t.volgorde for t in result.taken] == [0, 1, 2, 3, 4]
    assert result.taken[0].norm_uren == D("4.00")
    assert result.taken[3].norm_uren == D("4.50")
    assert result.totaal_dagen == D("1.75")  # 21 / 12


def test_unknown_scope_gets_default_task_and_zero_is_skipped():
    result = size_planning({"vijver": D("6"), "bomen": D("0")}, 2, D("6"))
    assert [t.taak_naam for t in result.taken] == ["Werkzaamheden uitvoeren"]


def test_task_status_and_summary():
    taken = size_planning({"heggen": D("12")}, 2, D("6")).taken
    taken = update_task_status(taken, "taak_heggen_1", TaakStatus.AFGEROND)
    taken = update_task_status(taken, "taak_heggen_2", TaakStatus.GESTART)

    summary = summarize_tasks(taken)
    assert summary.afgerond_taken == 1
    assert summary.gestart_taken == 1
    assert summary.voortgang == 50
    assert summary.per_scope["heggen"].uren == D("12.00")


def test_update_unknown_task_raises():
    with pytest.raises(TaskNotFoundError):
        update_task_status([], "taak_x_1", TaakStatus.AFGEROND)


def test_reorder_and_add():
    taken = size_planning({"heggen": D("4")}, 2, D("6")).taken
    taken = reorder_tasks(taken, {"taak_heggen_1": 5, "onbekend": 0})
    assert [t.id for t in taken] == ["taak_heggen_2", "taak_heggen_1"]

    taken = add_task(taken, "heggen", "Extra ronde", D("2"), D("0.17"))
    assert taken[-1].volgorde == 6
    assert taken[-1].id == "taak_heggen_extra_6"


def test_summary_of_empty_planning():
    summary = summarize_tasks([])
    assert summary.voortgang == 0
    assert summary.totaal_taken == 0


def test_voorcalculatie_from_offerte(reference):
    berekening = calculate_offerte(
        [
            {"scope": "heggen", "lengte": 10, "hoogte": "2.5", "breedte": "0.6"},
            {"scope": "gras_onderhoud", "oppervlakte": 50, "maaien": True, "kanten_steken": True},
        ],
        reference,
    )
    data = voorcalculatie_for_offerte(berekening, CalculationConfig(team_grootte=3))

    assert data.norm_uren_per_scope == {"gras_onderhoud": D("1.25"), "heggen": D("9.75")}
    assert data.norm_uren_totaal == D("11.00")
    assert data.geschatte_dagen == D("1")  # ceil(11 / 18)
    assert data.team_grootte == 3


def test_voorcalculatie_rejects_invalid_team():
    with pytest.raises(ValueError):
        VoorcalculatieData(norm_uren_totaal=D("1"), geschatte_dagen=D("1"), team_grootte=5)


def test_voorcalculatie_skips_zero_scopes():
    data = voorcalculatie_from_hours({"heggen": D("0"), "bomen": D("6")})
    assert data.norm_uren_per_scope == {"bomen": D("6.00")}
    assert data.geschatte_dagen == D("1")


def test_duration_with_buffer():
    assert duration_with_buffer(D("8.33"), D("10")) == 10
    assert duration_with_buffer(D("2"), D("0")) == 2
    assert duration_with_buffer(D("0"), D("10")) == 0


def test_voorcalculatie_counts_whole_working_days():
    data = voorcalculatie_from_hours({"bestrating": D("13")}, CalculationConfig())
    # 13 / 12 -> 2 werkdagen, met 10% buffer 3
    assert data.geschatte_dagen == D("2")
    assert duration_with_buffer(data.geschatte_dagen, D("10")) == 3


def test_werkdagen_without_capacity_is_zero():
    assert werkdagen(D("13"), 2, D("0")) == D("0")
    assert werkdagen(D("12"), 2, D("6")) == D("1")


def test_voorcalculatie_uses_quoted_hours(ctx):
    # drie regels van 0.37 uur: per regel 0.25 op de offerte, samen 1.00 als scope-som
    res = ScopeResult(
        scope=Scope.OVERIG,
        labor=tuple(
            LaborItem(f"klus {i}", "vrije uren", D("0.37"), "uur", D("1"), D("0.37"), D("0.37")) for i in range(3)
        ),
    )
    assert res.rounded_hours == D("1.00")

    berekening = QuoteAggregator(ctx.config).aggregate([res])
    data = build_voorcalculatie(berekening.results, berekening.regels, ctx.config)

    assert berekening.uren_per_scope == {"overig": D("0.75")}
    assert data.norm_uren_per_scope == {"overig": D("0.75")}
