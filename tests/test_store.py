from datetime import date
from decimal import Decimal

from hovenier.engine.offerte import calculate_offerte
from hovenier.nacalculatie.models import MachineGebruik, UrenRegistratie
from hovenier.planning.sizer import size_planning
from hovenier.store.contracts import ActualsLog, ReferenceSource, ResultStore

D = Decimal


def test_memory_store_satisfies_contracts(store):
    assert isinstance(store, ReferenceSource)
    assert isinstance(store, ActualsLog)
    assert isinstance(store, ResultStore)


def test_logs_are_append_only_copies(store):
    store.append_uren("p1", UrenRegistratie(date(2026, 5, 1), "jan", D("8")))
    store.append_machine("p1", MachineGebruik(date(2026, 5, 1), D("4"), D("80")))

    uren = store.uren("p1")
    uren.clear()
    assert len(store.uren("p1")) == 1
    assert len(store.machines("p1")) == 1
    assert store.uren("onbekend") == []


def test_offerte_link_and_planning_replace(store, reference):
    berekening = calculate_offerte([{"scope": "bemesting", "oppervlakte": 100}], reference)
    store.save_offerte("o1", berekening)
    store.link_offerte("p1", "o1")

    assert store.offerte_for_project("p1") == "o1"
    assert store.get_offerte("o1") is berekening
    assert store.get_offerte("o2") is None

    store.save_planning("p1", size_planning({"heggen": D("4")}, 2, D("6")).taken)
    store.save_planning("p1", size_planning({"bomen": D("4")}, 2, D("6")).taken)
    assert {t.scope for t in store.get_planning("p1")} == {"bomen"}
