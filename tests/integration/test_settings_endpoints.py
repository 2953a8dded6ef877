def test_green_card_date_round_trip(client, auth_headers):
    r = client.get("/settings/green-card-date", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["data"]["green_card_date"] is None

    r = client.put("/settings/green-card-date", json={"green_card_date": "2023-08-13"}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["data"]["green_card_date"] == "2023-08-13"

    r = client.put("/settings/green-card-date", json={"green_card_date": "2022-01-05"}, headers=auth_headers)
    assert r.status_code == 200

    r = client.get("/settings/green-card-date", headers=auth_headers)
    assert r.json()["data"]["green_card_date"] == "2022-01-05"


def test_invalid_green_card_date(client, auth_headers):
    r = client.put("/settings/green-card-date", json={"green_card_date": "08/13/2023"}, headers=auth_headers)
    assert r.status_code == 422
    assert r.json()["error_code"] == "VALIDATION_ERROR"


def test_settings_require_auth(client):
    assert client.get("/settings/green-card-date").status_code == 401
