import uuid

from fastapi import status


class TestGenreEndpoints:
    """Test genre management endpoints."""

    def test_create_genre_success(self, test_client, auth_headers):
        response = test_client.post("/genre", json={"name": "  Databases "}, headers=auth_headers)

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["success"] is True
        assert body["data"]["name"] == "Databases"
        assert "createdAt" in body["data"]

    def test_create_genre_requires_auth(self, test_client):
        response = test_client.post("/genre", json={"name": "Databases"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["message"] == "Access token is required"

    def test_create_genre_blank_name(self, test_client, auth_headers):
        response = test_client.post("/genre", json={"name": "   "}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "name cannot be empty" in response.text

    def test_create_duplicate_genre(self, test_client, auth_headers):
        test_client.post("/genre", json={"name": "Networking"}, headers=auth_headers)
        response = test_client.post("/genre", json={"name": "Networking"}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["type"] == "conflict"
        assert response.json()["message"] == "Genre already exists"

    def test_genre_names_case_sensitive(self, test_client, auth_headers):
        test_client.post("/genre", json={"name": "Networking"}, headers=auth_headers)
        response = test_client.post("/genre", json={"name": "networking"}, headers=auth_headers)

        assert response.status_code == status.HTTP_201_CREATED

    def test_list_genres_sorted(self, test_client, auth_headers):
        for name in ("Security", "AI", "Mobile"):
            test_client.post("/genre", json={"name": name}, headers=auth_headers)

        response = test_client.get("/genre")

        assert response.status_code == status.HTTP_200_OK
        assert [g["name"] for g in response.json()["data"]] == ["AI", "Mobile", "Security"]

    def test_genre_detail_with_books(self, test_client, sample_genre, sample_book):
        response = test_client.get(f"/genre/{sample_genre['id']}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["name"] == sample_genre["name"]
        assert [b["id"] for b in data["books"]] == [sample_book["id"]]
        assert data["books"][0]["stock"] == 5

    def test_genre_detail_not_found(self, test_client):
        response = test_client.get(f"/genre/{uuid.uuid4()}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == "Genre not found"

    def test_update_genre(self, test_client, sample_genre, auth_headers):
        response = test_client.patch(
            f"/genre/{sample_genre['id']}", json={"name": "Renamed"}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"]["name"] == "Renamed"

    def test_update_genre_duplicate_name(self, test_client, sample_genre, auth_headers):
        test_client.post("/genre", json={"name": "Taken"}, headers=auth_headers)
        response = test_client.patch(
            f"/genre/{sample_genre['id']}", json={"name": "Taken"}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Genre name already exists"

    def test_update_genre_same_name(self, test_client, sample_genre, auth_headers):
        response = test_client.patch(
            f"/genre/{sample_genre['id']}", json={"name": sample_genre["name"]}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_200_OK

    def test_update_genre_not_found(self, test_client, auth_headers):
        response = test_client.patch(
            f"/genre/{uuid.uuid4()}", json={"name": "Anything"}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_genre_without_books(self, test_client, sample_genre, auth_headers):
        response = test_client.delete(f"/genre/{sample_genre['id']}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Genre deleted successfully"
        assert test_client.get(f"/genre/{sample_genre['id']}").status_code == status.HTTP_404_NOT_FOUND

    def test_delete_genre_with_books(self, test_client, sample_genre, sample_book, auth_headers):
        response = test_client.delete(f"/genre/{sample_genre['id']}", headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["type"] == "conflict"
        assert response.json()["message"] == "Cannot delete genre with existing books"
        assert test_client.get(f"/genre/{sample_genre['id']}").status_code == status.HTTP_200_OK

    def test_delete_genre_not_found(self, test_client, auth_headers):
        response = test_client.delete(f"/genre/{uuid.uuid4()}", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_genre_requires_auth(self, test_client, sample_genre):
        response = test_client.delete(f"/genre/{sample_genre['id']}")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
