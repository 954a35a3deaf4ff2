"""
HTTP endpoint tests
"""

import pytest

API = "/api/v1"


class TestPathEndpoints:

    def test_find_path_by_id(self, client, seeded_db):
        _, ids = seeded_db

        response = client.get(
            f"{API}/paths",
            params={"source": ids["Gangnam"], "target": ids["Samseong"], "type": "DISTANCE"},
        )

        assert response.status_code == 200
        body = response.json()
        assert [s["name"] for s in body["stations"]] == ["Gangnam", "Yeoksam", "Seolleung", "Samseong"]
        assert body["distance"] == 30
        assert body["duration"] == 30
        assert body["fare"] == 1650

    def test_find_path_by_name(self, client):
        response = client.get(
            f"{API}/paths/by-name",
            params={"source": "Daegu", "target": "Dongdaegu", "type": "DURATION"},
        )

        assert response.status_code == 200
        body = response.json()
        assert [s["name"] for s in body["stations"]] == ["Daegu", "Dongdaegu"]
        assert body["distance"] == 9
        assert body["duration"] == 6
        assert body["fare"] == 1250

    def test_same_station_is_bad_request(self, client, seeded_db):
        _, ids = seeded_db

        response = client.get(f"{API}/paths", params={"source": ids["Gangnam"], "target": ids["Gangnam"]})

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "DUPLICATE_STATION"

    def test_unknown_station_is_not_found(self, client):
        response = client.get(f"{API}/paths/by-name", params={"source": "Gangnam", "target": "Nowhere"})

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "STATION_NOT_FOUND"

    def test_unreachable_station_is_bad_request(self, client):
        response = client.get(f"{API}/paths/by-name", params={"source": "Gangnam", "target": "Daegu"})

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "NO_PATH"

    def test_unknown_metric_is_rejected(self, client, seeded_db):
        _, ids = seeded_db

        response = client.get(
            f"{API}/paths",
            params={"source": ids["Gangnam"], "target": ids["Yeoksam"], "type": "FARE"},
        )

        assert response.status_code == 422


class TestStationEndpoints:

    def test_list_stations(self, client):
        response = client.get(f"{API}/stations/")

        assert response.status_code == 200
        assert len(response.json()) == 6

    def test_get_unknown_station(self, client):
        response = client.get(f"{API}/stations/999")

        assert response.status_code == 404

    def test_create_station(self, client):
        response = client.post(f"{API}/stations/", json={"name": "Yangjae"})

        assert response.status_code == 201
        station_id = response.json()["id"]
        assert client.get(f"{API}/stations/{station_id}").json()["name"] == "Yangjae"

    def test_create_duplicate_station(self, client):
        response = client.post(f"{API}/stations/", json={"name": "Gangnam"})

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "DUPLICATE_STATION_NAME"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_create_blank_station_is_rejected(self, client, name):
        response = client.post(f"{API}/stations/", json={"name": name})

        assert response.status_code == 422
        assert len(client.get(f"{API}/stations/").json()) == 6

    def test_delete_station(self, client):
        station_id = client.post(f"{API}/stations/", json={"name": "Yangjae"}).json()["id"]

        response = client.delete(f"{API}/stations/{station_id}")

        assert response.status_code == 204
        assert client.get(f"{API}/stations/{station_id}").status_code == 404

    def test_delete_station_on_a_line_is_bad_request(self, client, seeded_db):
        _, ids = seeded_db
        before = client.get(f"{API}/lines/").json()

        response = client.delete(f"{API}/stations/{ids['Dongdaegu']}")

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "STATION_IN_USE"
        assert client.get(f"{API}/lines/").json() == before
        assert client.get(f"{API}/stations/{ids['Dongdaegu']}").status_code == 200


class TestLineEndpoints:

    def test_list_lines_in_travel_order(self, client):
        response = client.get(f"{API}/lines/")

        assert response.status_code == 200
        lines = response.json()
        assert [line["name"] for line in lines] == ["Line 2", "Daegu Line 1"]
        assert [s["name"] for s in lines[0]["stations"]] == ["Gangnam", "Yeoksam", "Seolleung", "Samseong"]

    def test_create_line_and_add_sections(self, client, seeded_db):
        _, ids = seeded_db

        created = client.post(f"{API}/lines/", json={"name": "Shinbundang Line", "extra_fare": 900})
        assert created.status_code == 201
        line_id = created.json()["id"]
        assert created.json()["stations"] == []

        client.post(
            f"{API}/lines/{line_id}/sections",
            json={"pre_station_id": None, "station_id": ids["Samseong"], "distance": 5, "duration": 5},
        )
        response = client.post(
            f"{API}/lines/{line_id}/sections",
            json={"pre_station_id": ids["Samseong"], "station_id": ids["Daegu"], "distance": 5, "duration": 5},
        )

        assert response.status_code == 200
        assert [s["name"] for s in response.json()["stations"]] == ["Samseong", "Daegu"]

        path = client.get(f"{API}/paths/by-name", params={"source": "Gangnam", "target": "Dongdaegu"})
        assert path.status_code == 200
        assert path.json()["distance"] == 44

    def test_add_section_twice_is_bad_request(self, client, seeded_db):
        _, ids = seeded_db
        line_id = client.get(f"{API}/lines/").json()[0]["id"]

        response = client.post(
            f"{API}/lines/{line_id}/sections",
            json={"pre_station_id": ids["Samseong"], "station_id": ids["Yeoksam"], "distance": 5, "duration": 5},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "INVALID_SECTION"

    def test_new_first_station_uses_request_distance(self, client):
        station_id = client.post(f"{API}/stations/", json={"name": "Gyodae"}).json()["id"]
        line_id = client.get(f"{API}/lines/").json()[0]["id"]

        response = client.post(
            f"{API}/lines/{line_id}/sections",
            json={"pre_station_id": None, "station_id": station_id, "distance": 4, "duration": 3},
        )
        assert response.status_code == 200

        path = client.get(f"{API}/paths/by-name", params={"source": "Gyodae", "target": "Gangnam"})
        assert path.status_code == 200
        assert path.json()["distance"] == 4
        assert path.json()["duration"] == 3

    def test_remove_station_from_line(self, client, seeded_db):
        _, ids = seeded_db
        line_id = client.get(f"{API}/lines/").json()[0]["id"]

        response = client.delete(f"{API}/lines/{line_id}/stations/{ids['Yeoksam']}")

        assert response.status_code == 200
        assert [s["name"] for s in response.json()["stations"]] == ["Gangnam", "Seolleung", "Samseong"]

    def test_unknown_line(self, client):
        response = client.get(f"{API}/lines/999")

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "LINE_NOT_FOUND"


class TestHealth:

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}
