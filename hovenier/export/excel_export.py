from __future__ import annotations

from io import BytesIO
from typing import Dict, List, Optional

from openpyxl import Workbook

from hovenier.engine.quote_aggregator import OfferteBerekening
from hovenier.explain.formatter import format_deviation, format_steps_newlines, scope_display_name
from hovenier.nacalculatie.models import NacalculatieResult


def _to_bytes(wb: Workbook) -> bytes:
    buf = BytesIO()
    wb.save(buf)
    return buf.getvalue()


def export_offerte_to_excel(
    berekening: OfferteBerekening,
    offerte_id: str = "",
    breakdown: Optional[Dict[str, List[str]]] = None,
) -> bytes:
    """
    Offerte als xlsx: blad "Offerte" met regels + totalen, blad "Uitleg" met de
    berekeningsstappen per scope. Bedragen als getal (float), niet als tekst.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = "Offerte"

    ws.append(["offerte_id", offerte_id])
    ws.append([])

    ws.append(["Regel", "Scope", "Omschrijving", "Eenheid", "Hoeveelheid", "Prijs/eenheid", "Totaal", "Type"])
    for r in berekening.regels:
        ws.append(
            [
                r.id,
                scope_display_name(r.scope),
                r.omschrijving,
                r.eenheid,
                float(r.hoeveelheid),
                float(r.prijs_per_eenheid),
                float(r.totaal),
                r.type.value,
            ]
        )

    ws.append([])
    t = berekening.totalen
    for label, value in (
        ("Materiaalkosten", t.materiaalkosten),
        ("Arbeidskosten", t.arbeidskosten),
        ("Machinekosten", t.machinekosten),
        ("Totaal uren", t.totaal_uren),
        ("Subtotaal", t.subtotaal),
        ("Marge", t.marge),
        ("Marge %", t.marge_percentage),
        ("Totaal ex btw", t.totaal_ex_btw),
        ("Btw", t.btw),
        ("Totaal incl btw", t.totaal_incl_btw),
    ):
        ws.append([label, float(value)])

    if berekening.notes:
        ws.append([])
        ws.append(["Opmerkingen"])
        for n in berekening.notes:
            ws.append([n.code, n.message])

    if breakdown:
        ws2 = wb.create_sheet("Uitleg")
        ws2.append(["Scope", "Berekening"])
        for scope, steps in breakdown.items():
            ws2.append([scope_display_name(scope), format_steps_newlines(steps)])

    return _to_bytes(wb)


def export_nacalculatie_to_excel(result: NacalculatieResult, project_id: str = "") -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = "Nacalculatie"

    ws.append(["project_id", project_id])
    ws.append(["status", result.status.value])
    ws.append([])

    ws.append(["", "Gepland", "Werkelijk", "Afwijking", "Afwijking %"])
    ws.append(
        [
            "Uren",
            float(result.geplande_uren),
            float(result.werkelijke_uren),
            float(result.afwijking_uren),
            format_deviation(result.afwijking_percentage),
        ]
    )
    ws.append(["Dagen", float(result.geplande_dagen), result.werkelijke_dagen, float(result.afwijking_dagen), ""])
    ws.append(
        [
            "Machinekosten",
            float(result.geplande_machine_kosten),
            float(result.werkelijke_machine_kosten),
            float(result.afwijking_machine_kosten),
            format_deviation(result.afwijking_machine_kosten_percentage),
        ]
    )

    ws.append([])
    ws.append(["Scope", "Gepland", "Werkelijk", "Afwijking", "Afwijking %", "Status"])
    for a in result.afwijkingen_per_scope:
        ws.append(
            [
                scope_display_name(a.scope),
                float(a.geplande_uren),
                float(a.werkelijke_uren),
                float(a.afwijking_uren),
                format_deviation(a.afwijking_percentage),
                a.status.value,
            ]
        )

    if result.insights:
        ws.append([])
        ws.append(["Inzichten"])
        for i in result.insights:
            ws.append([i.type.value, i.title, i.description])

    return _to_bytes(wb)
