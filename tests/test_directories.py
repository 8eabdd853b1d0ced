"""Tests for directory API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient

from tests.conftest import create_test_column, create_test_directory, create_test_table


class TestCreateDirectory:
    """Test suite for POST /directories endpoint."""

    def test_create_root_directory(self, client: TestClient) -> None:
        response = client.post("/api/v1/directories", json={"name": "  Experiments "})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["name"] == "Experiments"
        assert data["parent_id"] is None
        assert isinstance(data["id"], str)

    def test_create_sub_directory(self, client: TestClient) -> None:
        root = create_test_directory(client, "root")

        response = client.post(
            "/api/v1/directories", json={"name": "child", "parent_id": root["id"]}
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["parent_id"] == root["id"]

    def test_create_under_unknown_parent(self, client: TestClient) -> None:
        response = client.post("/api/v1/directories", json={"name": "child", "parent_id": "999"})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_create_with_blank_name(self, client: TestClient) -> None:
        response = client.post("/api/v1/directories", json={"name": "   "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_without_name(self, client: TestClient) -> None:
        response = client.post("/api/v1/directories", json={})

        assert response.status_code == 422


class TestBrowseDirectories:
    """Test suite for listing directories and their contents."""

    def test_list_roots(self, client: TestClient) -> None:
        first = create_test_directory(client, "first")
        create_test_directory(client, "nested", first["id"])
        second = create_test_directory(client, "second")

        response = client.get("/api/v1/directories")

        assert response.status_code == status.HTTP_200_OK
        assert [d["id"] for d in response.json()] == [first["id"], second["id"]]

    def test_contents(self, client: TestClient) -> None:
        root = create_test_directory(client, "root")
        child = create_test_directory(client, "child", root["id"])
        column = create_test_column(client, "height", root["id"], [1.5, None])
        create_test_column(client, "deep", child["id"])

        response = client.get(f"/api/v1/directories/{root['id']}/contents")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["directory"]["id"] == root["id"]
        assert [d["id"] for d in data["directories"]] == [child["id"]]
        assert [c["id"] for c in data["columns"]] == [column["id"]]
        assert data["columns"][0]["cell_ids"] == [cell["id"] for cell in column["cells"]]

    def test_contents_of_unknown_directory(self, client: TestClient) -> None:
        response = client.get("/api/v1/directories/999/contents")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestUpdateDirectory:
    """Test suite for PATCH /directories/{id} endpoint."""

    def test_rename_keeps_parent(self, client: TestClient) -> None:
        root = create_test_directory(client, "root")
        child = create_test_directory(client, "child", root["id"])

        response = client.patch(f"/api/v1/directories/{child['id']}", json={"name": "renamed"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"id": child["id"], "name": "renamed", "parent_id": root["id"]}

    def test_explicit_null_parent_moves_to_top_level(self, client: TestClient) -> None:
        root = create_test_directory(client, "root")
        child = create_test_directory(client, "child", root["id"])

        response = client.patch(f"/api/v1/directories/{child['id']}", json={"parent_id": None})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["parent_id"] is None
        roots = client.get("/api/v1/directories").json()
        assert {d["id"] for d in roots} == {root["id"], child["id"]}

    def test_move_under_descendant_is_rejected(self, client: TestClient) -> None:
        root = create_test_directory(client, "root")
        child = create_test_directory(client, "child", root["id"])

        response = client.patch(
            f"/api/v1/directories/{root['id']}", json={"parent_id": child["id"]}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        roots = client.get("/api/v1/directories").json()
        assert [d["id"] for d in roots] == [root["id"]]

    def test_update_unknown_directory(self, client: TestClient) -> None:
        response = client.patch("/api/v1/directories/999", json={"name": "x"})

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteDirectory:
    """Test suite for DELETE /directories/{id} endpoint."""

    def test_delete_cascades_and_cleans_tables(self, client: TestClient) -> None:
        root = create_test_directory(client, "root")
        doomed = create_test_directory(client, "doomed", root["id"])
        nested = create_test_directory(client, "nested", doomed["id"])
        kept = create_test_column(client, "kept", root["id"], [1.0])
        gone = create_test_column(client, "gone", nested["id"], [2.0])
        mixed = create_test_table(client, "mixed", [kept["id"], gone["id"]])
        only_gone = create_test_table(client, "only gone", [gone["id"]])

        response = client.delete(f"/api/v1/directories/{doomed['id']}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/api/v1/directories/{nested['id']}/contents").status_code == 404
        assert client.get(f"/api/v1/columns/{gone['id']}").status_code == 404
        assert client.get(f"/api/v1/columns/{kept['id']}").status_code == 200
        table = client.get(f"/api/v1/tables/{mixed['id']}").json()
        assert [c["id"] for c in table["columns"]] == [kept["id"]]
        assert client.get(f"/api/v1/tables/{only_gone['id']}").status_code == 404

    def test_delete_unknown_directory(self, client: TestClient) -> None:
        response = client.delete("/api/v1/directories/999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
