from datetime import date
from decimal import Decimal
from io import BytesIO

from openpyxl import load_workbook

from hovenier.engine.offerte import calculate_offerte
from hovenier.export.excel_export import export_nacalculatie_to_excel, export_offerte_to_excel
from hovenier.nacalculatie.deviation import calculate_nacalculatie
from hovenier.nacalculatie.models import UrenRegistratie
from hovenier.planning.voorcalculatie import VoorcalculatieData

D = Decimal


def test_offerte_export_has_lines_and_totals(reference):
    berekening = calculate_offerte(
        [{"scope": "heggen", "lengte": 10, "hoogte": "2.5", "breedte": "0.6"}],
        reference,
    )
    wb = load_workbook(BytesIO(export_offerte_to_excel(berekening, offerte_id="o-9")))
    ws = wb["Offerte"]

    rows = [list(r) for r in ws.iter_rows(values_only=True)]
    assert rows[0][:2] == ["offerte_id", "o-9"]
    assert rows[2][0] == "Regel"
    assert rows[3][0] == "regel_heggen_001"
    assert rows[3][6] == 438.75

    totals = {r[0]: r[1] for r in rows if r and r[0] == "Totaal incl btw"}
    assert totals["Totaal incl btw"] == float(berekening.totalen.totaal_incl_btw)
    assert wb.sheetnames == ["Offerte"]


def test_nacalculatie_export(tmp_path):
    voorcalc = VoorcalculatieData(norm_uren_totaal=D("10"), geschatte_dagen=D("1"), norm_uren_per_scope={"bomen": D("10")})
    result = calculate_nacalculatie(voorcalc, [UrenRegistratie(date(2026, 7, 1), "jan", D("12"), scope="bomen")])

    path = tmp_path / "nacalculatie.xlsx"
    path.write_bytes(export_nacalculatie_to_excel(result, project_id="p-9"))

    ws = load_workbook(path)["Nacalculatie"]
    values = [c for row in ws.iter_rows(values_only=True) for c in row if c is not None]
    assert "critical" in values
    assert "+20%" in values
