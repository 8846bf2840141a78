import pytest

from swasth_khet.api.farmer.carbon import get_emission_factors
from swasth_khet.main import app
from swasth_khet.services.farmer.emission_factors import DEFAULT_EMISSION_FACTORS

from conftest import create_farm, make_token


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_request_id_header(client):
    resp = client.get("/health")
    assert resp.headers.get("x-request-id")


# ==================== AUTH ====================

def test_calculate_requires_token(client, mixed_farm_payload):
    resp = client.post("/farmer/carbon/calculate", json=mixed_farm_payload)
    assert resp.status_code in (401, 403)


def test_calculate_rejects_bad_token(client, mixed_farm_payload):
    headers = {"Authorization": f"Bearer {make_token('farmer-x', secret='wrong-secret-key-for-swasth-khet-suite-0123456789')}"}
    resp = client.post("/farmer/carbon/calculate", json=mixed_farm_payload, headers=headers)
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid token"


def test_calculate_rejects_expired_token(client, mixed_farm_payload):
    headers = {"Authorization": f"Bearer {make_token('farmer-x', expires_in=-60)}"}
    resp = client.post("/farmer/carbon/calculate", json=mixed_farm_payload, headers=headers)
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Token expired"


def test_legacy_id_claim_accepted(client, mixed_farm_payload):
    headers = {"Authorization": f"Bearer {make_token('farmer-x', claim='id')}"}
    resp = client.post("/farmer/carbon/calculate", json=mixed_farm_payload, headers=headers)
    assert resp.status_code == 200


# ==================== CALCULATE ====================

def test_calculate(client, auth_headers, mixed_farm_payload):
    resp = client.post("/farmer/carbon/calculate", json=mixed_farm_payload, headers=auth_headers)
    assert resp.status_code == 200

    data = resp.json()
    assert data["baselineFootprint"] == 538.6
    assert data["ecofriendlyFootprint"] == 50.0
    assert data["reductionPercent"] == 91
    assert data["sustainabilityScore"] == 60
    assert data["creditPotential"] == {"reductionTons": 0.49, "valueEstimate": 195.44, "currency": "INR"}
    assert data["breakdown"]["fuel"] == 53.6

    priorities = [r["priority"] for r in data["recommendations"]]
    assert priorities[:3] == ["high", "high", "high"]
    assert data["recommendations"][0]["savings"] == 370.0


def test_calculate_minimal_payload(client, auth_headers):
    resp = client.post("/farmer/carbon/calculate", json={"areaHectares": 1}, headers=auth_headers)
    assert resp.status_code == 200
    data = resp.json()
    assert data["baselineFootprint"] == 0
    assert data["reductionPercent"] == 0
    practices = [r["practice"] for r in data["recommendations"]]
    assert "Practice crop rotation" in practices
    assert "Adopt conservation agriculture" in practices


def test_calculate_validation(client, auth_headers):
    bad_payloads = [
        {"areaHectares": 0},
        {"areaHectares": 1, "fertilizerUsage": {"synthetic": -5}},
        {"areaHectares": 1, "irrigationType": "canal"},
        {"areaHectares": 1, "transportMethod": "helicopter"},
        {"fertilizerUsage": {"synthetic": 5}},
    ]
    for payload in bad_payloads:
        resp = client.post("/farmer/carbon/calculate", json=payload, headers=auth_headers)
        assert resp.status_code == 422, payload


def test_calculate_very_large_quantities(client, auth_headers):
    resp = client.post(
        "/farmer/carbon/calculate",
        json={"areaHectares": 1, "fertilizerUsage": {"synthetic": 1e27}},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    assert resp.json()["baselineFootprint"] == pytest.approx(4.5e27)


def test_calculate_uses_injected_factor_table(client, auth_headers):
    custom = DEFAULT_EMISSION_FACTORS.with_overrides(
        {("fertilizer", "synthetic"): 5.0}, credit_price_per_ton=1000.0
    )
    app.dependency_overrides[get_emission_factors] = lambda: custom
    try:
        resp = client.post(
            "/farmer/carbon/calculate",
            json={"areaHectares": 1, "fertilizerUsage": {"synthetic": 200}},
            headers=auth_headers,
        )
    finally:
        app.dependency_overrides.pop(get_emission_factors, None)

    data = resp.json()
    assert data["baselineFootprint"] == 1000.0
    assert data["creditPotential"]["valueEstimate"] == 1000.0


# ==================== STORED ASSESSMENTS ====================

def test_create_and_list_assessments(client, auth_headers, mixed_farm_payload):
    north_id = create_farm(client, auth_headers, name="North")["id"]
    south_id = create_farm(client, auth_headers, name="South")["id"]

    payload = dict(mixed_farm_payload, farmId=north_id)
    resp = client.post("/farmer/carbon/assessments", json=payload, headers=auth_headers)
    assert resp.status_code == 201

    body = resp.json()
    assessment = body["assessment"]
    assert assessment["farmId"] == north_id
    assert assessment["baselineFootprint"] == 538.6
    assert assessment["creditValue"] == 195.44
    assert body["result"]["sustainabilityScore"] == 60

    client.post("/farmer/carbon/assessments", json={"areaHectares": 1, "farmId": south_id}, headers=auth_headers)

    history = client.get("/farmer/carbon/history", headers=auth_headers).json()
    assert len(history) == 2
    assert {h["farmId"] for h in history} == {north_id, south_id}

    north = client.get("/farmer/carbon/history", params={"farm_id": north_id}, headers=auth_headers).json()
    assert [h["id"] for h in north] == [assessment["id"]]

    fetched = client.get(f"/farmer/carbon/assessments/{assessment['id']}", headers=auth_headers)
    assert fetched.status_code == 200
    assert fetched.json()["reductionPercent"] == 91


def test_history_limit(client, auth_headers):
    for _ in range(3):
        client.post("/farmer/carbon/assessments", json={"areaHectares": 1}, headers=auth_headers)
    history = client.get("/farmer/carbon/history", params={"limit": 2}, headers=auth_headers).json()
    assert len(history) == 2


def test_assessments_are_private(client, auth_headers):
    created = client.post("/farmer/carbon/assessments", json={"areaHectares": 1}, headers=auth_headers).json()
    other = {"Authorization": f"Bearer {make_token('someone-else')}"}

    resp = client.get(f"/farmer/carbon/assessments/{created['assessment']['id']}", headers=other)
    assert resp.status_code == 404
    assert all(h["id"] != created["assessment"]["id"] for h in client.get("/farmer/carbon/history", headers=other).json())


def test_assessment_for_unknown_farm_rejected(client, auth_headers):
    resp = client.post(
        "/farmer/carbon/assessments",
        json={"areaHectares": 1, "farmId": "no-such-farm"},
        headers=auth_headers,
    )
    assert resp.status_code == 404


def test_assessment_for_other_users_farm_rejected(client, auth_headers):
    farm = create_farm(client, auth_headers)
    other = {"Authorization": f"Bearer {make_token('someone-else')}"}

    resp = client.post(
        "/farmer/carbon/assessments",
        json={"areaHectares": 1, "farmId": farm["id"]},
        headers=other,
    )
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Farm not found"
    assert all(h["farmId"] != farm["id"] for h in client.get("/farmer/carbon/history", headers=other).json())


def test_unknown_assessment(client, auth_headers):
    resp = client.get("/farmer/carbon/assessments/does-not-exist", headers=auth_headers)
    assert resp.status_code == 404


# ==================== REFERENCE DATA ====================

def test_general_recommendations(client, auth_headers):
    data = client.get("/farmer/carbon/recommendations", headers=auth_headers).json()
    assert len(data) == 5
    assert data[0]["category"] == "Fertilizer Management"


def test_emission_factors(client, auth_headers):
    data = client.get("/farmer/carbon/emission-factors", headers=auth_headers).json()
    assert data["factors"]["fertilizer"]["synthetic"] == 4.5
    assert data["factors"]["irrigation"]["drip"] == 0.15
    assert data["defaultIrrigationFactor"] == 0.5
    assert data["creditPricePerTon"] == 400.0
