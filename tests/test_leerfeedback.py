from decimal import Decimal

from hovenier.domain.enums import Betrouwbaarheid
from hovenier.nacalculatie.leerfeedback import (
    NacalculatieDataPoint,
    analyze_nacalculaties,
    apply_suggestion,
    calculate_suggestion_impact,
    confidence_level,
    get_suggestion_priority,
    validate_suggestion,
)

D = Decimal


def _points():
    out = []
    for i in range(1, 4):
        out.append(
            NacalculatieDataPoint(
                project_id=f"p{i}",
                project_naam=f"Project {i}",
                afwijkingen_per_scope={"heggen": D("6"), "bomen": D("1")},
                geplande_uren_per_scope={"heggen": D("30"), "bomen": D("10")},
            )
        )
    # gras_onderhoud maar in twee projecten
    for i in (4, 5):
        out.append(
            NacalculatieDataPoint(
                project_id=f"p{i}",
                project_naam="",
                afwijkingen_per_scope={"gras_onderhoud": D("-5")},
                geplande_uren_per_scope={"gras_onderhoud": D("10")},
            )
        )
    return out


def test_confidence_levels():
    assert confidence_level(3) == Betrouwbaarheid.LAAG
    assert confidence_level(5) == Betrouwbaarheid.GEMIDDELD
    assert confidence_level(10) == Betrouwbaarheid.HOOG


def test_analysis_only_suggests_with_enough_data(reference):
    analyse = analyze_nacalculaties(_points(), reference.normuren)

    assert analyse.totaal_geanalyseerde_projecten == 5
    assert analyse.scopes_met_voldoende_data == 2
    assert analyse.scopes_zonder_suggestie == ["bomen", "gras_onderhoud"]

    (s,) = analyse.suggesties
    assert s.id == "suggestie_heggen"
    assert s.type == "onderschatting"
    assert s.gemiddelde_afwijking_percentage == D("20.0")
    assert s.bron_projecten == ["p1", "p2", "p3"]
    assert s.reden == "Gemiddelde onderschatting van 20% over 3 projecten"

    beide = [a for a in s.activiteiten if a.activiteit == "heg snoeien beide"][0]
    assert beide.gesuggereerde_waarde == D("0.600")
    assert beide.wijziging_percentage == D("20.0")


def test_empty_input():
    analyse = analyze_nacalculaties([], [])
    assert analyse.suggesties == []
    assert analyse.totaal_geanalyseerde_projecten == 0


def test_priority_and_warnings(reference):
    (s,) = analyze_nacalculaties(_points(), reference.normuren).suggesties
    assert get_suggestion_priority(s) == "laag"
    assert validate_suggestion(s) == ["Lage betrouwbaarheid: gebaseerd op slechts 3 projecten"]


def test_impact(reference):
    (s,) = analyze_nacalculaties(_points(), reference.normuren).suggesties
    impact = calculate_suggestion_impact(s, D("90"), uurtarief=D("45"))
    assert impact.uren_verschil == D("6.0")
    assert impact.kosten_verschil == D("270.00")


def test_apply_is_explicit_and_scoped(reference):
    (s,) = analyze_nacalculaties(_points(), reference.normuren).suggesties
    updated = apply_suggestion(reference.normuren, s)

    lookup = {(n.scope, n.activiteit): n.normuur_per_eenheid for n in updated}
    assert lookup[("heggen", "heg snoeien beide")] == D("0.600")
    assert lookup[("gras_onderhoud", "maaien")] == D("0.02")
    # referentietabel zelf blijft ongewijzigd
    assert reference.find_normuur("heggen", "heg snoeien beide").normuur_per_eenheid == D("0.5")
