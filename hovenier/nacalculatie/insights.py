from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from hovenier.domain.enums import DeviationStatus, InsightType
from hovenier.explain.formatter import format_number

from .models import NacalculatieInsight, NacalculatieResult

if TYPE_CHECKING:
    from .deviation import DeviationThresholds

D = Decimal

MACHINE_KOSTEN_DREMPEL = D("20")
DAGEN_DREMPEL = D("2")
MAX_SCOPE_INSIGHTS = 2


def generate_insights(
    result: NacalculatieResult,
    thresholds: Optional["DeviationThresholds"] = None,
) -> List[NacalculatieInsight]:
    """
    Vaste volgorde: totaal, machinekosten, dagen, kritieke scopes,
    daarna max. twee onderschatte en twee overschatte scopes.
    Leest alleen het afwijkingsrecord zelf.
    """
    good = thresholds.good if thresholds else D("5")
    warning = thresholds.warning if thresholds else D("15")
    out: List[NacalculatieInsight] = []

    pct = result.afwijking_percentage
    if abs(pct) <= good:
        out.append(
            NacalculatieInsight(
                InsightType.SUCCESS,
                "Uitstekende planning",
                f"De werkelijke uren wijken slechts {format_number(abs(pct))}% af van de planning.",
            )
        )
    elif pct > warning:
        out.append(
            NacalculatieInsight(
                InsightType.CRITICAL,
                "Significante overschrijding",
                f"Er is {format_number(pct)}% meer tijd besteed dan gepland. "
                "Controleer de normuren voor betrokken scopes.",
            )
        )
    elif pct < -warning:
        out.append(
            NacalculatieInsight(
                InsightType.WARNING,
                "Onder budget",
                f"Er is {format_number(abs(pct))}% minder tijd besteed dan gepland. "
                "Controleer of alle werk correct is geregistreerd.",
            )
        )

    machine_pct = result.afwijking_machine_kosten_percentage
    if abs(machine_pct) > MACHINE_KOSTEN_DREMPEL:
        hoger = machine_pct > 0
        out.append(
            NacalculatieInsight(
                InsightType.WARNING if hoger else InsightType.INFO,
                "Hogere machinekosten" if hoger else "Lagere machinekosten",
                f"De machinekosten wijken {format_number(abs(machine_pct))}% af van de planning.",
            )
        )

    dagen = result.afwijking_dagen
    if dagen > DAGEN_DREMPEL:
        out.append(
            NacalculatieInsight(
                InsightType.WARNING,
                "Meer dagen nodig",
                f"Het project duurde {format_number(dagen)} dagen langer dan gepland.",
            )
        )
    elif dagen < -DAGEN_DREMPEL:
        out.append(
            NacalculatieInsight(
                InsightType.SUCCESS,
                "Sneller afgerond",
                f"Het project is {format_number(abs(dagen))} dagen eerder afgerond dan gepland.",
            )
        )

    kritiek = [a.scope for a in result.afwijkingen_per_scope if a.status == DeviationStatus.CRITICAL]
    if kritiek:
        out.append(
            NacalculatieInsight(
                InsightType.CRITICAL,
                "Aandachtspunten per scope",
                f"De volgende scopes hebben significante afwijkingen: {', '.join(kritiek)}. "
                "Overweeg normuur aanpassingen.",
            )
        )

    onderschat = [a for a in result.afwijkingen_per_scope if a.afwijking_percentage > warning]
    for a in onderschat[:MAX_SCOPE_INSIGHTS]:
        out.append(
            NacalculatieInsight(
                InsightType.WARNING,
                f"{a.scope}: Onderschatting",
                f"{format_number(a.werkelijke_uren)} uur nodig vs {format_number(a.geplande_uren)} uur gepland "
                f"(+{format_number(a.afwijking_percentage)}%)",
                scope=a.scope,
            )
        )

    overschat = [a for a in result.afwijkingen_per_scope if a.afwijking_percentage < -warning]
    for a in overschat[:MAX_SCOPE_INSIGHTS]:
        out.append(
            NacalculatieInsight(
                InsightType.INFO,
                f"{a.scope}: Overschatting",
                f"{format_number(a.werkelijke_uren)} uur nodig vs {format_number(a.geplande_uren)} uur gepland "
                f"({format_number(a.afwijking_percentage)}%)",
                scope=a.scope,
            )
        )

    return out
