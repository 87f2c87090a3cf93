import pytest

from budgetly import api
from budgetly.engine.state import CalculationState, DraftState, WhatIfState


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(api, "calculation_state", CalculationState(str(tmp_path / "calculations.json")))
    monkeypatch.setattr(api, "whatif_state", WhatIfState(str(tmp_path / "whatif.json")))
    monkeypatch.setattr(api, "draft_state", DraftState(str(tmp_path / "drafts.json")))
    api.app.config["TESTING"] = True
    with api.app.test_client() as test_client:
        yield test_client


def test_health(client):
    response = client.get("/api/health")

    assert response.get_json() == {"status": "ok"}
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_schema_lists_steps_and_scenarios(client):
    payload = client.get("/api/schema").get_json()

    assert [step["name"] for step in payload["steps"]] == ["academic", "expenses", "income"]
    assert payload["optionDefaults"]["applyTax"] is False
    assert {kind["value"] for kind in payload["scenarioKinds"]} == {
        "tuition-increase",
        "more-summer-hours",
        "higher-rent",
        "more-scholarship",
    }


def test_calculate(client, working_form):
    response = client.post("/api/calculate", json={"inputs": working_form, "asOf": "2026-10-19"})

    payload = response.get_json()
    assert response.status_code == 200
    assert [p["semesterLabel"] for p in payload["periods"]] == ["Fall 2026", "Winter 2027"]
    assert [p["balance"] for p in payload["periods"]] == [-1600, -3200]
    assert payload["summary"]["finalBalance"] == -3200
    assert payload["shortfallPeriod"] == "Fall 2026"
    assert payload["status"] == "critical"


def test_calculate_with_tax(client, working_form):
    body = {"inputs": working_form, "options": {"applyTax": True, "taxRate": 10}, "asOf": "2026-10-19"}

    payload = client.post("/api/calculate", json=body).get_json()

    assert payload["periods"][0]["income"] == pytest.approx(2160)
    assert payload["options"]["taxRate"] == pytest.approx(0.1)


def test_calculate_zero_semesters(client, base_form):
    base_form["remainingSemesters"] = "0"

    payload = client.post("/api/calculate", json={"inputs": base_form}).get_json()

    assert payload["periods"] == []
    assert payload["summary"]["finalBalance"] == 0
    assert "semestersLeft" in payload["errors"]


def test_calculate_huge_semester_count_stays_bounded(client, base_form):
    base_form["remainingSemesters"] = "1e9"
    payload = client.post("/api/calculate", json={"inputs": base_form, "asOf": "2026-10-19"}).get_json()
    assert [p["semesterLabel"] for p in payload["periods"]] == ["Fall 2026"]
    assert "semestersLeft" in payload["errors"]

    base_form["remainingSemesters"] = 10**9
    payload = client.post("/api/calculate", json={"inputs": base_form, "asOf": "2026-10-19"}).get_json()
    assert payload["summary"]["totalSemesters"] == 8


def test_export_csv(client, base_form):
    response = client.post("/api/export", json={"inputs": base_form, "asOf": "2026-10-19"})

    assert response.mimetype == "text/csv"
    assert "budget-forecast-2026-10-19.csv" in response.headers["Content-Disposition"]
    text = response.get_data(as_text=True)
    assert "Winter 2027,5000.00,0.00,0.00,-5000.00,0.00,-10000.00" in text


def test_validate(client):
    payload = client.post("/api/validate", json={"inputs": {"semestersLeft": "3", "tuition": "abc"}}).get_json()

    assert payload["valid"] is False
    assert payload["errors"] == {"tuition": "Tuition per Year must be a number"}


def test_compare_scenario(client, working_form):
    body = {
        "inputs": working_form,
        "scenario": {"kind": "more-scholarship", "value": "500"},
        "asOf": "2026-10-19",
    }

    payload = client.post("/api/scenarios/compare", json=body).get_json()

    assert payload["balanceChange"] == pytest.approx(1000)
    assert payload["modified"]["summary"]["finalBalance"] == pytest.approx(-2200)


def test_compare_unknown_scenario(client, working_form):
    body = {"inputs": working_form, "scenario": {"kind": "bogus", "value": 1}}

    response = client.post("/api/scenarios/compare", json=body)

    assert response.status_code == 400
    assert "bogus" in response.get_json()["error"]


def test_calculation_lifecycle(client, working_form):
    saved = client.post("/api/users/u1/calculations", json={"inputs": working_form, "asOf": "2026-10-19"})
    assert saved.status_code == 201
    record = saved.get_json()["calculation"]
    assert record["projectedBalance"] == -3200
    assert record["formInputs"] == working_form
    assert len(record["semesterData"]) == 2

    assert client.get("/api/users/u1/calculations/latest").get_json()["id"] == record["id"]
    assert client.get(f"/api/users/u1/calculations/{record['id']}").status_code == 200
    assert len(client.get("/api/users/u1/calculations").get_json()["calculations"]) == 1

    assert client.delete(f"/api/users/u1/calculations/{record['id']}").status_code == 200
    assert client.delete(f"/api/users/u1/calculations/{record['id']}").status_code == 404
    assert client.get("/api/users/u1/calculations/latest").status_code == 404


def test_save_calculation_requires_inputs(client):
    response = client.post("/api/users/u1/calculations", json={})

    assert response.status_code == 400


def test_whatif_lifecycle(client, working_form):
    client.post("/api/users/u1/calculations", json={"inputs": working_form, "asOf": "2026-10-19"})

    created = client.post(
        "/api/users/u1/whatif",
        json={
            "name": "Campus job",
            "monthlyIncomeChange": 200,
            "oneTimeEvent": {"name": "Laptop", "amount": 1200, "effect": "expense", "semester": "Winter 2027"},
        },
    )
    assert created.status_code == 201
    plan = created.get_json()["plan"]
    # baseline -3200, two periods = 8 months
    assert plan["projectedBalance"] == pytest.approx(-3200 + 1600 - 1200)
    assert plan["series"][-1]["scenario"] == pytest.approx(plan["projectedBalance"])

    updated = client.put(f"/api/users/u1/whatif/{plan['id']}", json={"oneTimeEvent": None})
    assert updated.get_json()["plan"]["projectedBalance"] == pytest.approx(-1600)

    client.post("/api/users/u1/whatif", json={"name": "Extra rent", "monthlyExpenseChange": 100})
    listing = client.get("/api/users/u1/whatif").get_json()
    assert listing["baselineBalance"] == -3200
    assert listing["bestPlanId"] == plan["id"]
    assert len(listing["plans"]) == 2

    assert client.delete(f"/api/users/u1/whatif/{plan['id']}").status_code == 200
    assert client.put(f"/api/users/u1/whatif/{plan['id']}", json={}).status_code == 404


def test_whatif_event_without_semester_agrees_with_series(client, working_form):
    client.post("/api/users/u1/calculations", json={"inputs": working_form, "asOf": "2026-10-19"})

    body = {"name": "Car", "oneTimeEvent": {"name": "car", "amount": "500"}}
    plan = client.post("/api/users/u1/whatif", json=body).get_json()["plan"]

    assert plan["projectedBalance"] == pytest.approx(-3200)
    assert plan["series"][-1]["scenario"] == pytest.approx(plan["projectedBalance"])


def test_whatif_requires_name(client):
    assert client.post("/api/users/u1/whatif", json={"monthlyIncomeChange": 5}).status_code == 400


def test_whatif_rejects_bad_event(client):
    body = {"name": "x", "oneTimeEvent": {"name": "y", "amount": 5, "effect": "windfall"}}

    assert client.post("/api/users/u1/whatif", json=body).status_code == 400


def test_draft_cycle(client, base_form):
    assert client.get("/api/users/u1/draft").get_json() == {"inputs": {}}

    client.post("/api/users/u1/draft", json={"inputs": base_form})
    assert client.get("/api/users/u1/draft").get_json()["inputs"] == base_form

    client.delete("/api/users/u1/draft")
    assert client.get("/api/users/u1/draft").get_json() == {"inputs": {}}
