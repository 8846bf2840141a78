def test_list_crops(client):
    crops = client.get("/marketplace/pricing/crops").json()["crops"]
    assert "wheat" in crops
    assert crops == sorted(crops)


def test_price_suggestion(client):
    resp = client.get("/marketplace/pricing/wheat", params={"quantity": 50})
    assert resp.status_code == 200
    data = resp.json()
    assert data["dynamic_price"] == 1785
    assert data["range"]["min_price"] == 1700
    assert data["range"]["max_price"] == 2500


def test_price_suggestion_options(client):
    resp = client.get(
        "/marketplace/pricing/tomato",
        params={"quantity": 600, "quality": "premium", "organic": True, "days_to_harvest": 10},
    )
    assert resp.json()["dynamic_price"] == 47


def test_price_suggestion_rejects_unknown_quality(client):
    resp = client.get("/marketplace/pricing/wheat", params={"quality": "gold"})
    assert resp.status_code == 422


def test_unknown_crop(client):
    assert client.get("/marketplace/pricing/quinoa").status_code == 404
    assert client.get("/marketplace/pricing/quinoa/alert", params={"price": 10}).status_code == 404


def test_price_alert(client):
    data = client.get("/marketplace/pricing/wheat/alert", params={"price": 2400}).json()
    assert data["type"] == "overpriced"
    assert data["market_price"] == 2000


def test_compare(client):
    payload = {"listings": [{"crop": "Wheat", "price": 1900}, {"crop": "wheat", "price": 2100}]}
    data = client.post("/marketplace/pricing/compare", json=payload).json()
    assert data["wheat"]["listing_count"] == 2
    assert data["wheat"]["average"] == 2000


def test_trend(client):
    data = client.post("/marketplace/pricing/trend", json={"crop": "wheat", "historical_prices": [1700, 1800]}).json()
    assert data["trend"] == "rising"
