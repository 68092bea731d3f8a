from decimal import Decimal
from io import BytesIO

from openpyxl import load_workbook

import hovenier.__main__ as hovenier_main
from hovenier.config import get_settings

D = Decimal

HEG = {"scope": "heggen", "lengte": 10, "hoogte": "2.5", "breedte": "0.6", "snoei": "beide"}
GRAS = {"scope": "gras_onderhoud", "oppervlakte": 50, "maaien": True, "kanten_steken": True}


def _calculate(client, **extra):
    body = {"scopes": [HEG, GRAS], **extra}
    r = client.post("/api/offertes/calculate", json=body)
    assert r.status_code == 200, r.text
    return r.json()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_calculate_offerte(client):
    out = _calculate(client, offerte_id="o-1")

    assert out["version"] == "v1"
    assert out["offerte_id"] == "o-1"
    assert {k: D(v) for k, v in out["uren_per_scope"].items()} == {"gras_onderhoud": D("1.25"), "heggen": D("9.75")}
    assert D(out["totalen"]["totaal_uren"]) == D("11.00")
    assert [n["code"] for n in out["notes"]] == ["HEG_HOOGTE_TOESLAG"]
    assert "heggen" in out["breakdown"]


def test_overrides_change_price(client):
    base = _calculate(client)
    duurder = _calculate(client, uurtarief="50.00", scope_marges={"heggen": 0})
    assert D(duurder["totalen"]["arbeidskosten"]) > D(base["totalen"]["arbeidskosten"])


def test_invalid_scope_is_422(client):
    body = {"scopes": [{"scope": "heggen", "lengte": 10, "hoogte": 2, "breedte": 0}]}
    assert client.post("/api/offertes/calculate", json=body).status_code == 422

    body = {"scopes": [GRAS], "onbekend_veld": 1}
    assert client.post("/api/offertes/calculate", json=body).status_code == 422


def test_get_and_export_offerte(client):
    _calculate(client, offerte_id="o-2")

    assert client.get("/api/offertes/o-2").json()["offerte_id"] == "o-2"
    assert client.get("/api/offertes/bestaat-niet").status_code == 404

    r = client.get("/api/offertes/o-2/export/xlsx")
    assert r.status_code == 200
    wb = load_workbook(BytesIO(r.content))
    assert wb.sheetnames == ["Offerte", "Uitleg"]


def test_project_flow(client):
    _calculate(client, offerte_id="o-3", project_id="p-3")

    r = client.post("/api/projecten/p-3/voorcalculatie", json={"offerte_id": "o-3"})
    assert r.status_code == 200, r.text
    voorcalc = r.json()
    assert D(voorcalc["norm_uren_totaal"]) == D("11.00")
    assert D(voorcalc["geschatte_dagen"]) == D("1")
    assert voorcalc["dagen_met_buffer"] == 2

    planning = client.post("/api/projecten/p-3/planning").json()
    assert planning["summary"]["totaal_taken"] == 5
    first = planning["taken"][0]["id"]

    r = client.patch(f"/api/projecten/p-3/planning/{first}", json={"status": "afgerond"})
    assert r.json()["summary"]["afgerond_taken"] == 1
    assert client.patch("/api/projecten/p-3/planning/taak_x_9", json={"status": "afgerond"}).status_code == 404

    for dag in ("2026-06-01", "2026-06-02"):
        r = client.post(
            "/api/projecten/p-3/uren",
            json={"datum": dag, "medewerker": "jan", "uren": "6", "scope": "heggen"},
        )
        assert r.status_code == 201
    client.post("/api/projecten/p-3/machinegebruik", json={"datum": "2026-06-01", "uren": "2", "kosten": "40"})

    nacalc = client.get("/api/projecten/p-3/nacalculatie").json()
    assert D(nacalc["werkelijke_uren"]) == D("12")
    assert nacalc["aantal_registraties"] == 2
    assert nacalc["status"] in {"good", "warning", "critical"}

    r = client.get("/api/projecten/p-3/nacalculatie/export/xlsx")
    assert load_workbook(BytesIO(r.content)).sheetnames == ["Nacalculatie"]


def test_voorcalculatie_requires_offerte(client):
    r = client.post("/api/projecten/p-x/voorcalculatie", json={"offerte_id": "nope"})
    assert r.status_code == 404
    assert client.get("/api/projecten/p-x/nacalculatie").status_code == 404


def test_invalid_team_size_is_422(client):
    _calculate(client, offerte_id="o-4")
    r = client.post("/api/projecten/p-4/voorcalculatie", json={"offerte_id": "o-4", "team_grootte": 5})
    assert r.status_code == 422


def test_leerfeedback_analyse(client):
    body = {
        "nacalculaties": [
            {
                "project_id": f"p{i}",
                "afwijkingen_per_scope": {"heggen": "6"},
                "geplande_uren_per_scope": {"heggen": "30"},
            }
            for i in range(3)
        ]
    }
    out = client.post("/api/leerfeedback/analyse", json=body).json()

    (s,) = out["suggesties"]
    assert s["scope"] == "heggen"
    assert s["prioriteit"] == "laag"
    assert s["waarschuwingen"]


def test_runner_serves_app_with_settings(monkeypatch):
    calls = {}
    monkeypatch.setattr(hovenier_main.uvicorn, "run", lambda app, **kw: calls.update(app=app, **kw))

    hovenier_main.main()

    settings = get_settings()
    assert calls["app"] == "hovenier.main:app"
    assert calls["host"] == settings.host
    assert calls["port"] == settings.port
