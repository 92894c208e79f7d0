from __future__ import annotations

import pytest

from staff_directory.services.directory_client import FetchError, SubmissionRejected
from staff_directory.services.location_service import LocationError, LocationErrorReason


def test_directory_mounts_and_renders_table(client, api_client):
    response = client.get("/api/v1/directory")
    assert response.status_code == 200
    data = response.json()
    assert data["load_state"] == "loaded"
    assert data["view_mode"] == "table"
    assert data["employee_count"] == 3
    assert data["notification"]["message"] == "Data loaded successfully!"
    assert data["content"]["kind"] == "table"

    client.get("/api/v1/directory")
    assert api_client.list_employees.await_count == 1


def test_directory_fetch_failure(client, api_client):
    api_client.list_employees.side_effect = FetchError("down")

    response = client.get("/api/v1/directory")
    assert response.status_code == 200
    data = response.json()
    assert data["load_state"] == "errored"
    assert data["employee_count"] == 0
    assert data["notification"]["severity"] == "error"
    assert data["content"] == {
        "kind": "empty",
        "message": "No Data Found",
        "table": None,
        "map": None,
        "form": None,
    }


def test_select_map_view(client):
    response = client.put("/api/v1/directory/view", json={"mode": "map"})
    assert response.status_code == 200
    data = response.json()
    assert data["view_mode"] == "map"
    assert len(data["content"]["map"]["markers"]) == 2


def test_select_invalid_view(client):
    response = client.put("/api/v1/directory/view", json={"mode": "chart"})
    assert response.status_code == 422


def test_dismiss_notification_ignores_clickaway(client):
    client.get("/api/v1/directory")

    response = client.post("/api/v1/directory/notification/dismiss", json={"reason": "clickaway"})
    assert response.json()["dismissed"] is False

    response = client.post("/api/v1/directory/notification/dismiss", json={})
    assert response.json()["dismissed"] is True
    assert response.json()["notification"] is None


def test_table_search_sort_and_paging(client):
    response = client.post("/api/v1/employees/table/search", json={"term": "example.com"})
    assert response.json()["total_count"] == 3

    response = client.post("/api/v1/employees/table/sort", json={"column": "city"})
    data = response.json()
    assert [row["values"]["city"] for row in data["rows"]] == ["Berlin", "Lisbon", "Paris"]

    response = client.post("/api/v1/employees/table/sort", json={"column": "city"})
    data = response.json()
    assert data["sort_direction"] == "desc"
    assert [row["values"]["city"] for row in data["rows"]] == ["Paris", "Lisbon", "Berlin"]

    response = client.post("/api/v1/employees/table/page", json={"page_index": 4})
    assert response.json()["page_index"] == 0


def test_table_search_without_matches(client):
    response = client.post("/api/v1/employees/table/search", json={"term": "nobody"})
    data = response.json()
    assert data["is_empty"] is True
    assert data["empty_message"] == 'No results found for "nobody"'


def test_table_after_fetch_failure_reports_no_data(client, api_client):
    api_client.list_employees.side_effect = FetchError("down")

    response = client.get("/api/v1/employees/table")
    assert response.status_code == 200
    data = response.json()
    assert data["is_empty"] is True
    assert data["rows"] == []
    assert data["empty_message"] == "No Data Found"


def test_table_rejects_unknown_sort_column(client):
    response = client.post("/api/v1/employees/table/sort", json={"column": "salary"})
    assert response.status_code == 400


def test_table_rejects_unsupported_page_size(client):
    response = client.post("/api/v1/employees/table/page-size", json={"page_size": 7})
    assert response.status_code == 400

    response = client.post("/api/v1/employees/table/page-size", json={"page_size": 25})
    assert response.status_code == 200
    assert response.json()["page_size"] == 25


def test_map_endpoint(client):
    response = client.get("/api/v1/employees/map")
    assert response.status_code == 200
    data = response.json()
    assert [m["id"] for m in data["markers"]] == ["HT-1", "HT-3"]
    assert data["bounds"] is not None


def test_form_field_flow(client):
    response = client.get("/api/v1/form")
    data = response.json()
    assert data["values"]["latitude"] == "12.000000"
    assert data["submit_enabled"] is False
    assert data["errors"] == {}

    response = client.patch("/api/v1/form/fields", json={"field": "phoneNumber", "value": "123"})
    assert response.json()["errors"] == {}

    response = client.post("/api/v1/form/fields/phoneNumber/blur")
    assert response.json()["errors"] == {"phoneNumber": "Enter a valid phone number (10-15 digits)"}


def test_form_rejects_coordinate_edit(client):
    response = client.patch("/api/v1/form/fields", json={"field": "latitude", "value": "0"})
    assert response.status_code == 400


def test_form_rejects_unknown_field(client):
    response = client.post("/api/v1/form/fields/nickname/blur")
    assert response.status_code == 400


def _fill_form(client) -> None:
    for field, value in {
        "firstName": "A",
        "lastName": "B",
        "email": "a@b.com",
        "phoneNumber": "1234567890",
        "employeeID": "E1",
        "city": "X",
        "country": "Y",
    }.items():
        client.patch("/api/v1/form/fields", json={"field": field, "value": value})


def test_form_submit_creates_employee(client):
    _fill_form(client)

    response = client.post("/api/v1/form/submit")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "created"
    assert data["confirmation_id"] == "HT-99"
    assert data["form"]["values"]["firstName"] == ""
    assert data["form"]["values"]["latitude"] == "12.000000"

    response = client.get("/api/v1/directory")
    assert response.json()["employee_count"] == 4


def test_form_submit_invalid(client, api_client):
    response = client.post("/api/v1/form/submit")
    data = response.json()
    assert data["status"] == "invalid"
    assert len(data["form"]["touched"]) == 9
    api_client.create_employee.assert_not_awaited()


def test_form_submit_rejected(client, api_client):
    api_client.create_employee.side_effect = SubmissionRejected("no marker")
    _fill_form(client)

    response = client.post("/api/v1/form/submit")
    data = response.json()
    assert data["status"] == "failed"
    assert data["form"]["values"]["firstName"] == "A"


@pytest.mark.anyio
async def test_form_retry_location(async_client, locator):
    locator.get_current_position.side_effect = [
        LocationError(LocationErrorReason.DENIED),
        (10.5, 20.25),
    ]

    response = await async_client.get("/api/v1/form")
    data = response.json()
    assert data["location"]["reason"] == "denied"
    assert data["submit_enabled"] is False

    response = await async_client.post("/api/v1/form/location/retry")
    data = response.json()
    assert data["location"]["error"] is None
    assert data["values"]["latitude"] == "10.500000"
    assert data["values"]["longitude"] == "20.250000"
