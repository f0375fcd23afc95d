# tests/test_validation_api.py

"""
Tests for the /validation endpoints.
"""

from unittest.mock import patch

from fastapi.testclient import TestClient

from models.validation import FileUploadOptions


def test_list_forms(client: TestClient):
    response = client.get("/validation/forms")

    assert response.status_code == 200
    assert "maintenance" in response.json()["forms"]


def test_valid_maintenance_request(client: TestClient):
    response = client.post("/validation/forms/maintenance", json={
        "renterId": "r-1",
        "roomId": "room-7",
        "title": "Leaking tap",
        "description": "Kitchen tap drips all night long.",
        "category": "plumbing",
        "priority": "medium",
    })

    assert response.status_code == 200
    assert response.json() == {"is_valid": True, "errors": []}


def test_invalid_maintenance_request(client: TestClient):
    response = client.post("/validation/forms/maintenance", json={
        "renterId": "r-1",
        "roomId": "room-7",
        "title": "Tap",
        "description": "Drips",
        "category": "plumbing",
    })

    assert response.status_code == 200
    assert response.json() == {
        "is_valid": False,
        "errors": [
            {"field": "description", "message": "description must be at least 10 characters long"},
            {"field": "priority", "message": "priority is required"},
        ],
    }


def test_unknown_form(client: TestClient):
    response = client.post("/validation/forms/buildings", json={})

    assert response.status_code == 404


def test_files_within_limits(client: TestClient):
    response = client.post(
        "/validation/files",
        files=[("files", ("lease.pdf", b"%PDF-1.4", "application/pdf"))],
    )

    assert response.status_code == 200
    assert response.json() == []


def test_files_wrong_type(client: TestClient):
    options = FileUploadOptions(allowed_types=["image/jpeg"])
    with patch("routers.validation.upload_options", return_value=options):
        response = client.post(
            "/validation/files",
            files=[
                ("files", ("photo.jpg", b"jpeg-bytes", "image/jpeg")),
                ("files", ("notes.txt", b"hello", "text/plain")),
            ],
        )

    assert response.status_code == 200
    assert response.json() == [
        {"field": "file_1", "message": "File 2: File type must be one of: image/jpeg"},
    ]


def test_too_many_files(client: TestClient):
    options = FileUploadOptions(max_files=2)
    with patch("routers.validation.upload_options", return_value=options):
        response = client.post(
            "/validation/files",
            files=[("files", (f"f{i}.txt", b"x", "text/plain")) for i in range(3)],
        )

    assert response.json() == [{"field": "files", "message": "Maximum 2 files allowed"}]
