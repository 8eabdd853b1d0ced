"""Tests for table API endpoints."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from tests.conftest import create_test_column, create_test_directory, create_test_table


@pytest.fixture
def columns(client: TestClient) -> dict[str, dict]:
    """Columns a, b, c and d in one directory, plus another "a" elsewhere."""
    directory = create_test_directory(client, "data")
    other = create_test_directory(client, "other")
    created = {
        name: create_test_column(client, name, directory["id"], [float(i)])
        for i, name in enumerate("abcd")
    }
    created["a2"] = create_test_column(client, "a", other["id"], [9.0])
    return created


def column_names(table: dict) -> list[str]:
    return [column["name"] for column in table["columns"]]


class TestCreateTable:
    """Test suite for POST /tables endpoint."""

    def test_create_table(self, client: TestClient, columns: dict[str, dict]) -> None:
        response = client.post(
            "/api/v1/tables",
            json={"name": " results ", "column_ids": [columns["b"]["id"], columns["a"]["id"]]},
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["name"] == "results"
        assert column_names(data) == ["b", "a"]
        assert data["columns"][0]["cells"] == columns["b"]["cells"]

    def test_create_without_columns(self, client: TestClient) -> None:
        response = client.post("/api/v1/tables", json={"name": "t", "column_ids": []})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_with_unknown_column(
        self, client: TestClient, columns: dict[str, dict]
    ) -> None:
        response = client.post(
            "/api/v1/tables", json={"name": "t", "column_ids": [columns["a"]["id"], "999"]}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_create_with_duplicated_names(
        self, client: TestClient, columns: dict[str, dict]
    ) -> None:
        response = client.post(
            "/api/v1/tables",
            json={"name": "t", "column_ids": [columns["a"]["id"], columns["a2"]["id"]]},
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert client.get("/api/v1/tables").json() == []

    def test_create_with_long_name(self, client: TestClient, columns: dict[str, dict]) -> None:
        response = client.post(
            "/api/v1/tables", json={"name": "t" * 101, "column_ids": [columns["a"]["id"]]}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestTableLifecycle:
    """Test suite for listing, reading, renaming and deleting tables."""

    def test_list_tables(self, client: TestClient, columns: dict[str, dict]) -> None:
        table = create_test_table(client, "t", [columns["a"]["id"], columns["b"]["id"]])

        response = client.get("/api/v1/tables")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == [
            {
                "id": table["id"],
                "name": "t",
                "column_ids": [columns["a"]["id"], columns["b"]["id"]],
            }
        ]

    def test_rename_table(self, client: TestClient, columns: dict[str, dict]) -> None:
        table = create_test_table(client, "t", [columns["a"]["id"]])

        response = client.patch(f"/api/v1/tables/{table['id']}", json={"name": "renamed"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "renamed"
        assert client.get(f"/api/v1/tables/{table['id']}").json()["name"] == "renamed"

    def test_delete_table_keeps_columns(
        self, client: TestClient, columns: dict[str, dict]
    ) -> None:
        table = create_test_table(client, "t", [columns["a"]["id"]])

        response = client.delete(f"/api/v1/tables/{table['id']}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/api/v1/tables/{table['id']}").status_code == 404
        assert client.get(f"/api/v1/columns/{columns['a']['id']}").status_code == 200

    def test_unknown_table(self, client: TestClient) -> None:
        assert client.get("/api/v1/tables/999").status_code == status.HTTP_404_NOT_FOUND
        assert client.delete("/api/v1/tables/999").status_code == status.HTTP_404_NOT_FOUND

    def test_deleting_a_column_updates_its_tables(
        self, client: TestClient, columns: dict[str, dict]
    ) -> None:
        both = create_test_table(client, "both", [columns["a"]["id"], columns["b"]["id"]])
        only_a = create_test_table(client, "only a", [columns["a"]["id"]])

        client.delete(f"/api/v1/columns/{columns['a']['id']}")

        assert column_names(client.get(f"/api/v1/tables/{both['id']}").json()) == ["b"]
        assert client.get(f"/api/v1/tables/{only_a['id']}").status_code == 404


class TestTableColumns:
    """Test suite for the /tables/{id}/columns endpoints."""

    @pytest.fixture
    def table(self, client: TestClient, columns: dict[str, dict]) -> dict:
        ids = [columns[name]["id"] for name in "abc"]
        return create_test_table(client, "t", ids)

    def test_move_in_front_of(
        self, client: TestClient, columns: dict[str, dict], table: dict
    ) -> None:
        response = client.post(
            f"/api/v1/tables/{table['id']}/columns/move",
            json={"column_id": columns["c"]["id"], "destination_id": columns["a"]["id"]},
        )

        assert response.status_code == status.HTTP_200_OK
        assert column_names(response.json()) == ["c", "a", "b"]

    def test_move_behind(self, client: TestClient, columns: dict[str, dict], table: dict) -> None:
        response = client.post(
            f"/api/v1/tables/{table['id']}/columns/move",
            json={
                "column_id": columns["a"]["id"],
                "destination_id": columns["c"]["id"],
                "position": "behind",
            },
        )

        assert response.status_code == status.HTTP_200_OK
        assert column_names(response.json()) == ["b", "c", "a"]

    def test_move_column_not_in_table(
        self, client: TestClient, columns: dict[str, dict], table: dict
    ) -> None:
        response = client.post(
            f"/api/v1/tables/{table['id']}/columns/move",
            json={"column_id": columns["d"]["id"], "destination_id": columns["a"]["id"]},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_move_with_invalid_position(
        self, client: TestClient, columns: dict[str, dict], table: dict
    ) -> None:
        response = client.post(
            f"/api/v1/tables/{table['id']}/columns/move",
            json={
                "column_id": columns["a"]["id"],
                "destination_id": columns["c"]["id"],
                "position": "sideways",
            },
        )

        assert response.status_code == 422

    def test_insert_column(self, client: TestClient, columns: dict[str, dict], table: dict) -> None:
        response = client.post(
            f"/api/v1/tables/{table['id']}/columns",
            json={"column_id": columns["d"]["id"], "destination_id": columns["a"]["id"]},
        )

        assert response.status_code == status.HTTP_200_OK
        assert column_names(response.json()) == ["a", "d", "b", "c"]

    def test_insert_duplicated_name(
        self, client: TestClient, columns: dict[str, dict], table: dict
    ) -> None:
        response = client.post(
            f"/api/v1/tables/{table['id']}/columns",
            json={"column_id": columns["a2"]["id"], "destination_id": columns["c"]["id"]},
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert column_names(client.get(f"/api/v1/tables/{table['id']}").json()) == [
            "a",
            "b",
            "c",
        ]

    def test_remove_column(self, client: TestClient, columns: dict[str, dict], table: dict) -> None:
        response = client.delete(f"/api/v1/tables/{table['id']}/columns/{columns['b']['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert column_names(response.json()) == ["a", "c"]

    def test_remove_last_column(self, client: TestClient, columns: dict[str, dict]) -> None:
        table = create_test_table(client, "single", [columns["a"]["id"]])

        response = client.delete(f"/api/v1/tables/{table['id']}/columns/{columns['a']['id']}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert column_names(client.get(f"/api/v1/tables/{table['id']}").json()) == ["a"]
