"""Case tools."""

from __future__ import annotations

import pytest

from lar_mcp.core.errors import ValidationError
from lar_mcp.operations import cases

from .conftest import USER_ID, FakeBackend

CURRENT_CASE = {
    "id": 11,
    "title": "Despido",
    "description": "Despido disciplinario",
    "status": "Pending",
    "clientId": 3,
    "assignedUserId": "user-7",
    "courtDate": "2025-03-10T09:00:00.000Z",
}


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2025-03-10", "2025-03-10T00:00:00.000Z"),
        ("2025-03-10T11:30:00+02:00", "2025-03-10T09:30:00.000Z"),
        ("2025-03-10T09:30:00Z", "2025-03-10T09:30:00.000Z"),
        (None, None),
        ("", None),
    ],
)
def test_parse_court_date(value, expected) -> None:
    assert cases.parse_court_date(value) == expected


def test_parse_court_date_rejects_garbage() -> None:
    with pytest.raises(ValidationError):
        cases.parse_court_date("10/03/2025")


class TestCreate:
    async def test_status_defaults_to_open(self, fake_backend: FakeBackend) -> None:
        fake_backend.add("POST", "/api/cases", status=201, json={"id": 20, "status": "Open"})

        result = await cases.create_case(title="Reclamación de cantidad", client_id=3)

        assert result.text == "Caso creado correctamente."
        assert result.data == {"case": {"id": 20, "status": "Open"}}
        assert fake_backend.last_json("POST", "/api/cases") == {
            "title": "Reclamación de cantidad",
            "assignedUserId": USER_ID,
            "clientId": 3,
            "status": "Open",
        }

    async def test_optional_fields(self, fake_backend: FakeBackend) -> None:
        fake_backend.add("POST", "/api/cases", json={"id": 21})

        await cases.create_case(
            title="Herencia",
            client_id=3,
            description="Partición de herencia",
            status="Pending",
            court_date="2025-06-01T10:00:00+02:00",
        )

        body = fake_backend.last_json("POST", "/api/cases")
        assert body["description"] == "Partición de herencia"
        assert body["status"] == "Pending"
        assert body["courtDate"] == "2025-06-01T08:00:00.000Z"

    async def test_invalid_date_makes_no_calls(self, fake_backend: FakeBackend) -> None:
        result = await cases.create_case(title="Herencia", client_id=3, court_date="mañana")

        assert result.text == cases.INVALID_DATE
        assert fake_backend.requests == []

    async def test_unknown_status(self, fake_backend: FakeBackend) -> None:
        result = await cases.create_case(title="Herencia", client_id=3, status="Archived")

        assert result.is_error
        assert result.text.startswith("Error en el proceso: ")

    async def test_create_failure(self, fake_backend: FakeBackend) -> None:
        fake_backend.add("POST", "/api/cases", status=400, text='{"error":"client not found"}')

        result = await cases.create_case(title="Herencia", client_id=999)

        assert result.text == 'Error al crear el caso: 400 - {"error":"client not found"}'


class TestDelete:
    async def test_deletes(self, fake_backend: FakeBackend) -> None:
        fake_backend.add("DELETE", "/api/cases/11", status=204)

        result = await cases.delete_case(case_id=11)

        assert result.text == "Caso con ID 11 eliminado correctamente."

    async def test_not_found(self, fake_backend: FakeBackend) -> None:
        fake_backend.add("DELETE", "/api/cases/11", status=404, text="Case not found")

        result = await cases.delete_case(case_id=11)

        assert result.text == "No se encontró ningún caso con el ID 11."

    async def test_other_failure(self, fake_backend: FakeBackend) -> None:
        fake_backend.add("DELETE", "/api/cases/11", status=403, text="Forbidden")

        result = await cases.delete_case(case_id=11)

        assert result.text == "Error al eliminar el caso: 403 - Forbidden"


class TestEdit:
    async def test_without_fields_keeps_case_and_assigns_caller(self, fake_backend: FakeBackend) -> None:
        fake_backend.add("GET", "/api/cases/11", json=CURRENT_CASE)
        fake_backend.add("PUT", "/api/cases/11", json={"id": 11})

        result = await cases.edit_case(case_id=11)

        assert result.text == "Caso con ID 11 actualizado correctamente."
        assert result.data == {"case": {"id": 11}}
        assert fake_backend.last_json("PUT", "/api/cases/11") == {
            "title": "Despido",
            "description": "Despido disciplinario",
            "status": "Pending",
            "clientId": 3,
            "assignedUserId": USER_ID,
            "courtDate": "2025-03-10T09:00:00.000Z",
        }

    async def test_explicit_fields_override(self, fake_backend: FakeBackend) -> None:
        fake_backend.add("GET", "/api/cases/11", json=CURRENT_CASE)
        fake_backend.add("PUT", "/api/cases/11", json={"id": 11})

        await cases.edit_case(
            case_id=11,
            status="Closed",
            description="",
            court_date="2025-04-01",
            client_id=4,
            assigned_user_id=9,
        )

        body = fake_backend.last_json("PUT", "/api/cases/11")
        assert body["status"] == "Closed"
        assert body["description"] == ""
        assert body["courtDate"] == "2025-04-01T00:00:00.000Z"
        assert body["clientId"] == 4
        assert body["assignedUserId"] == 9
        assert fake_backend.calls("GET", "/api/auth/user-id") == []

    async def test_zero_values_fall_back(self, fake_backend: FakeBackend) -> None:
        fake_backend.add("GET", "/api/cases/11", json=CURRENT_CASE)
        fake_backend.add("PUT", "/api/cases/11", json={"id": 11})

        await cases.edit_case(case_id=11, title="", client_id=0, assigned_user_id=0)

        body = fake_backend.last_json("PUT", "/api/cases/11")
        assert body["title"] == "Despido"
        assert body["clientId"] == 3
        assert body["assignedUserId"] == USER_ID

    async def test_case_without_court_date(self, fake_backend: FakeBackend) -> None:
        fake_backend.add("GET", "/api/cases/11", json={**CURRENT_CASE, "courtDate": None})
        fake_backend.add("PUT", "/api/cases/11", json={"id": 11})

        await cases.edit_case(case_id=11)

        assert "courtDate" not in fake_backend.last_json("PUT", "/api/cases/11")

    async def test_missing_case_stops_before_write(self, fake_backend: FakeBackend) -> None:
        fake_backend.add("GET", "/api/cases/11", status=404, text="Case not found")

        result = await cases.edit_case(case_id=11, title="Nuevo")

        assert result.text == "Error al obtener el caso para editar: 404 - Case not found"
        assert fake_backend.calls("PUT", "/api/cases/11") == []

    async def test_invalid_date(self, fake_backend: FakeBackend) -> None:
        result = await cases.edit_case(case_id=11, court_date="2025-13-45")

        assert result.text == cases.INVALID_DATE
        assert fake_backend.requests == []


class TestList:
    async def test_lists_cases(self, fake_backend: FakeBackend) -> None:
        fake_backend.add("GET", "/api/cases", json=[CURRENT_CASE])

        result = await cases.list_cases()

        assert result.data == {"cases": [CURRENT_CASE]}
        assert '"title": "Despido"' in result.text

    @pytest.mark.parametrize("payload", [[], {"items": []}])
    async def test_no_cases(self, fake_backend: FakeBackend, payload) -> None:
        fake_backend.add("GET", "/api/cases", json=payload)

        result = await cases.list_cases()

        assert result.text == "No hay casos disponibles en el sistema."
        assert result.data == {}

    async def test_malformed_json_means_no_cases(self, fake_backend: FakeBackend) -> None:
        fake_backend.add("GET", "/api/cases", text="[{broken")

        result = await cases.list_cases()

        assert result.text == "No hay casos disponibles en el sistema."
