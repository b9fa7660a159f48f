import pytest
from fastapi.testclient import TestClient

from rental_desk.config import Settings
from rental_desk.main import create_app


pytestmark = pytest.mark.api


class TestVehicles:

    def test_list_all(self, client):
        response = client.get("/vehicles")

        assert response.status_code == 200
        assert [v["id"] for v in response.json()] == [1, 2, 3]

    def test_list_available(self, client):
        response = client.get("/vehicles", params={"available": "true"})

        assert [v["id"] for v in response.json()] == [1, 2]

    def test_add_vehicle(self, client):
        response = client.post("/vehicles", json={
            "make": "Yamaha",
            "model": "MT-07",
            "licensePlate": "MC-1",
            "dailyRate": "25.50",
            "vehicleType": "Motorcycle",
        })

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 4
        assert body["available"] is True
        assert body["vehicleType"] == "Motorcycle"

    def test_add_vehicle_is_always_available(self, client):
        response = client.post("/vehicles", json={
            "make": "Ford",
            "model": "Transit",
            "licensePlate": "VAN-2",
            "dailyRate": "60.00",
            "vehicleType": "Van",
            "available": False,
        })

        assert response.status_code == 201
        assert response.json()["available"] is True
        available = client.get("/vehicles", params={"available": "true"}).json()
        assert response.json()["id"] in [v["id"] for v in available]

    def test_add_vehicle_negative_rate(self, client):
        response = client.post("/vehicles", json={
            "make": "Yamaha",
            "model": "MT-07",
            "licensePlate": "MC-1",
            "dailyRate": "-1",
        })

        assert response.status_code == 422

    def test_get_unknown_vehicle(self, client):
        response = client.get("/vehicles/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "Error: vehicle 999 not found"


class TestCustomers:

    def test_list(self, client):
        assert [c["id"] for c in client.get("/customers").json()] == [101, 102]

    def test_get(self, client):
        body = client.get("/customers/102").json()

        assert body["email"] == "jane.smith@example.com"

    def test_get_unknown(self, client):
        assert client.get("/customers/7").status_code == 404

    def test_add(self, client):
        response = client.post("/customers", json={
            "firstName": "Grace",
            "lastName": "Hopper",
            "email": "grace@example.com",
            "phone": "555-0300",
        })

        assert response.status_code == 201
        assert response.json()["id"] == 103

    def test_history(self, client):
        body = client.get("/customers/102/rentals").json()

        assert [r["id"] for r in body] == [2]


class TestRentals:

    def test_rent_and_return(self, client):
        response = client.post("/rentals", json={
            "vehicleId": 1,
            "customerId": 101,
            "startDate": "2024-02-01",
            "endDate": "2024-02-05",
        })

        assert response.status_code == 201
        rental = response.json()
        assert rental["id"] == 3
        assert rental["totalCost"] == "140.00"
        assert rental["status"] == "Active"
        assert client.get("/vehicles/1").json()["available"] is False

        response = client.post(f"/rentals/{rental['id']}/return")

        assert response.status_code == 200
        assert response.json()["status"] == "Returned"
        assert client.get("/vehicles/1").json()["available"] is True

    def test_rent_unavailable_vehicle(self, client):
        response = client.post("/rentals", json={
            "vehicleId": 3,
            "customerId": 101,
            "startDate": "2024-02-01",
            "endDate": "2024-02-05",
        })

        assert response.status_code == 409
        assert len(client.get("/rentals").json()) == 2

    def test_rent_unknown_vehicle(self, client):
        response = client.post("/rentals", json={
            "vehicleId": 999,
            "customerId": 101,
            "startDate": "2024-02-01",
            "endDate": "2024-02-05",
        })

        assert response.status_code == 404
        assert len(client.get("/rentals").json()) == 2

    def test_rent_with_end_before_start(self, client):
        response = client.post("/rentals", json={
            "vehicleId": 1,
            "customerId": 101,
            "startDate": "2024-02-05",
            "endDate": "2024-02-01",
        })

        assert response.status_code == 400
        assert client.get("/vehicles/1").json()["available"] is True

    def test_return_unknown_rental(self, client):
        assert client.post("/rentals/999/return").status_code == 404

    def test_list_by_status(self, client):
        body = client.get("/rentals", params={"status": "Returned"}).json()

        assert [r["id"] for r in body] == [1]

    def test_get_rental(self, client):
        body = client.get("/rentals/2").json()

        assert body["vehicleId"] == 3
        assert body["totalCost"] == "225.00"


def test_default_app_seeds_sample_data():
    with TestClient(create_app(app_settings=Settings(SEED_SAMPLE_DATA=True))) as client:
        assert len(client.get("/vehicles").json()) == 3


def test_default_app_without_seed_is_empty():
    with TestClient(create_app(app_settings=Settings(SEED_SAMPLE_DATA=False))) as client:
        assert client.get("/vehicles").json() == []
        assert client.get("/rentals").json() == []
