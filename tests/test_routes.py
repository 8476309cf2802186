"""
HTTP-level tests for the canchas API: status codes, payload shapes and
error mapping.
"""

from datetime import date, timedelta

import pytest

API = "/api"


@pytest.fixture
def tomorrow_iso():
    return (date.today() + timedelta(days=1)).isoformat()


@pytest.fixture
def field_id(client):
    response = client.post(f"{API}/canchas/", json={"name": "Cancha 1", "description": "Sector 1"})
    assert response.status_code == 201
    return response.json()["id"]


def _reservation_body(field_id, target_date, start="14:00", end="16:00", **overrides):
    body = {
        "student_group": "Grupo de Ingeniería",
        "contact_name": "Juan Pérez",
        "contact_phone": "7890-1234",
        "date": target_date,
        "start_time": start,
        "end_time": end,
        "field_id": field_id,
    }
    body.update(overrides)
    return body


# ============================================================================
# System
# ============================================================================


def test_health(client):
    response = client.get(f"{API}/health")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "API is running"
    assert "timestamp" in data


def test_init_data_seeds_once(client):
    first = client.post(f"{API}/init-data")
    second = client.post(f"{API}/init-data")

    assert first.json()["created"] == 4
    assert second.json()["created"] == 0
    assert len(client.get(f"{API}/canchas/").json()) == 4


# ============================================================================
# Fields
# ============================================================================


def test_create_and_get_field(client, field_id):
    response = client.get(f"{API}/canchas/{field_id}")

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Cancha 1"
    assert data["capacity"] == 22
    assert data["active"] is True


def test_create_field_without_name(client):
    response = client.post(f"{API}/canchas/", json={"description": "Sin nombre"})

    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"


def test_create_field_duplicate_name(client, field_id):
    response = client.post(f"{API}/canchas/", json={"name": "Cancha 1"})

    assert response.status_code == 409
    assert response.json()["error"] == "conflict"


def test_create_field_with_invalid_capacity(client):
    response = client.post(f"{API}/canchas/", json={"name": "Cancha X", "capacity": 0})

    assert response.status_code == 400


def test_get_missing_field(client):
    response = client.get(f"{API}/canchas/999")

    assert response.status_code == 404
    assert response.json() == {"detail": "Field 999 not found", "error": "not_found"}


def test_update_field(client, field_id):
    response = client.put(f"{API}/canchas/{field_id}", json={"name": "Cancha Principal", "capacity": 18})

    assert response.status_code == 200
    assert response.json()["name"] == "Cancha Principal"
    assert response.json()["capacity"] == 18
    assert response.json()["description"] == "Sector 1"


def test_deactivate_then_activate(client, field_id):
    deactivated = client.put(f"{API}/canchas/{field_id}/deactivate")
    assert deactivated.status_code == 200
    assert deactivated.json()["field"]["active"] is False
    assert client.get(f"{API}/canchas/").json() == []

    again = client.put(f"{API}/canchas/{field_id}/deactivate")
    assert again.status_code == 400

    activated = client.put(f"{API}/canchas/{field_id}/activate")
    assert activated.status_code == 200
    assert activated.json()["field"]["active"] is True


def test_deactivate_blocked_until_reservation_cancelled(client, field_id, tomorrow_iso):
    created = client.post(f"{API}/reservas/", json=_reservation_body(field_id, tomorrow_iso))
    reservation_id = created.json()["id"]

    blocked = client.put(f"{API}/canchas/{field_id}/deactivate")
    assert blocked.status_code == 409
    assert blocked.json()["active_reservations"] == 1

    client.put(f"{API}/reservas/{reservation_id}/cancel")
    assert client.put(f"{API}/canchas/{field_id}/deactivate").status_code == 200


def test_delete_field(client, field_id, tomorrow_iso):
    other = client.post(f"{API}/canchas/", json={"name": "Cancha 2"}).json()["id"]
    client.post(f"{API}/reservas/", json=_reservation_body(field_id, tomorrow_iso))

    blocked = client.delete(f"{API}/canchas/{field_id}")
    assert blocked.status_code == 409
    assert blocked.json()["associated_reservations"] == 1

    deleted = client.delete(f"{API}/canchas/{other}")
    assert deleted.status_code == 200
    assert deleted.json()["deleted_field"] == {"id": other, "name": "Cancha 2"}
    assert client.get(f"{API}/canchas/{other}").status_code == 404


def test_usage_statistics(client, field_id, tomorrow_iso):
    client.post(f"{API}/reservas/", json=_reservation_body(field_id, tomorrow_iso))

    response = client.get(f"{API}/canchas/stats/usage")

    assert response.status_code == 200
    assert response.json()[0]["total_reservations"] == 1
    assert response.json()[0]["active_reservations"] == 1


# ============================================================================
# Reservations
# ============================================================================


def test_create_reservation(client, field_id, tomorrow_iso):
    response = client.post(f"{API}/reservas/", json=_reservation_body(field_id, tomorrow_iso))

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "active"
    assert data["start_time"] == "14:00:00"
    assert data["field"] == {"id": field_id, "name": "Cancha 1"}


def test_create_reservation_missing_fields(client, field_id):
    response = client.post(f"{API}/reservas/", json={"field_id": field_id})

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "validation_error"
    assert "contact_name" in data["missing_fields"]


def test_create_reservation_malformed_date(client, field_id):
    body = _reservation_body(field_id, "not-a-date")

    response = client.post(f"{API}/reservas/", json=body)

    assert response.status_code == 400


def test_create_reservation_unknown_field(client, tomorrow_iso):
    response = client.post(f"{API}/reservas/", json=_reservation_body(999, tomorrow_iso))

    assert response.status_code == 404


def test_double_booking_is_rejected(client, field_id, tomorrow_iso):
    client.post(f"{API}/reservas/", json=_reservation_body(field_id, tomorrow_iso))

    response = client.post(
        f"{API}/reservas/", json=_reservation_body(field_id, tomorrow_iso, "15:00", "17:00")
    )

    assert response.status_code == 409
    assert response.json()["conflicts"] == 1


def test_check_availability(client, field_id, tomorrow_iso):
    client.post(f"{API}/reservas/", json=_reservation_body(field_id, tomorrow_iso, "10:00", "11:00"))

    free = client.post(
        f"{API}/reservas/check-availability",
        json={"field_id": field_id, "date": tomorrow_iso, "start_time": "11:00", "end_time": "12:00"},
    )
    busy = client.post(
        f"{API}/reservas/check-availability",
        json={"field_id": field_id, "date": tomorrow_iso, "start_time": "10:30", "end_time": "11:30"},
    )

    assert free.json() == {"available": True, "conflicts": 0}
    assert busy.json() == {"available": False, "conflicts": 1}


def test_check_availability_inverted_window(client, field_id, tomorrow_iso):
    response = client.post(
        f"{API}/reservas/check-availability",
        json={"field_id": field_id, "date": tomorrow_iso, "start_time": "12:00", "end_time": "11:00"},
    )

    assert response.status_code == 400


def test_list_and_filter_by_date(client, field_id, tomorrow_iso):
    later_iso = (date.today() + timedelta(days=2)).isoformat()
    client.post(f"{API}/reservas/", json=_reservation_body(field_id, later_iso, "08:00", "09:00"))
    client.post(f"{API}/reservas/", json=_reservation_body(field_id, tomorrow_iso, "16:00", "17:00"))
    client.post(f"{API}/reservas/", json=_reservation_body(field_id, tomorrow_iso, "09:00", "10:00"))

    everything = client.get(f"{API}/reservas/").json()
    on_date = client.get(f"{API}/reservas/date/{tomorrow_iso}").json()

    assert [(r["date"], r["start_time"]) for r in everything] == [
        (tomorrow_iso, "09:00:00"),
        (tomorrow_iso, "16:00:00"),
        (later_iso, "08:00:00"),
    ]
    assert [r["start_time"] for r in on_date] == ["09:00:00", "16:00:00"]


def test_get_reservation_includes_field_description(client, field_id, tomorrow_iso):
    reservation_id = client.post(
        f"{API}/reservas/", json=_reservation_body(field_id, tomorrow_iso)
    ).json()["id"]

    response = client.get(f"{API}/reservas/{reservation_id}")

    assert response.status_code == 200
    assert response.json()["field"] == {"id": field_id, "name": "Cancha 1", "description": "Sector 1"}


def test_update_reservation_same_window(client, field_id, tomorrow_iso):
    reservation_id = client.post(
        f"{API}/reservas/", json=_reservation_body(field_id, tomorrow_iso)
    ).json()["id"]

    response = client.put(
        f"{API}/reservas/{reservation_id}",
        json=_reservation_body(field_id, tomorrow_iso, contact_name="Otra Persona"),
    )

    assert response.status_code == 200
    assert response.json()["contact_name"] == "Otra Persona"


def test_update_missing_reservation(client, field_id, tomorrow_iso):
    response = client.put(f"{API}/reservas/999", json=_reservation_body(field_id, tomorrow_iso))

    assert response.status_code == 404


def test_cancel_complete_and_delete(client, field_id, tomorrow_iso):
    first = client.post(
        f"{API}/reservas/", json=_reservation_body(field_id, tomorrow_iso, "08:00", "09:00")
    ).json()["id"]
    second = client.post(
        f"{API}/reservas/", json=_reservation_body(field_id, tomorrow_iso, "09:00", "10:00")
    ).json()["id"]

    cancelled = client.put(f"{API}/reservas/{first}/cancel")
    assert cancelled.status_code == 200
    assert cancelled.json()["reservation"]["status"] == "cancelled"
    assert client.put(f"{API}/reservas/{first}/cancel").status_code == 200
    assert client.put(f"{API}/reservas/{first}/complete").status_code == 409

    completed = client.put(f"{API}/reservas/{second}/complete")
    assert completed.json()["reservation"]["status"] == "completed"

    assert client.delete(f"{API}/reservas/{first}").json() == {"message": "Reservation deleted"}
    assert client.get(f"{API}/reservas/{first}").status_code == 404
    assert client.delete(f"{API}/reservas/{first}").status_code == 404


def test_update_field_cannot_deactivate_with_upcoming_reservation(client, field_id, tomorrow_iso):
    client.post(f"{API}/reservas/", json=_reservation_body(field_id, tomorrow_iso))

    response = client.put(f"{API}/canchas/{field_id}", json={"name": "Cancha 1", "active": False})

    assert response.status_code == 409
    assert response.json()["active_reservations"] == 1
    assert client.get(f"{API}/canchas/{field_id}").json()["active"] is True


# ============================================================================
# Routing errors
# ============================================================================


def test_unknown_path_uses_error_payload(client):
    response = client.get(f"{API}/desconocido")

    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found", "error": "not_found"}


def test_wrong_method_uses_error_payload(client, field_id):
    response = client.patch(f"{API}/canchas/{field_id}", json={"name": "Otra"})

    assert response.status_code == 405
    assert response.json()["error"] == "method_not_allowed"
    assert "allow" in response.headers
