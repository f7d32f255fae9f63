import io

import pytest

from menu_admin.config import Config


def _upload(client, data: bytes, filename: str = "dish.png", content_type: str = "image/png"):
    return client.post(
        "/api/upload",
        data={"image": (io.BytesIO(data), filename, content_type)},
        content_type="multipart/form-data",
    )


@pytest.mark.integration
class TestUploadRoutes:
    """Tests for POST /api/upload and DELETE /api/upload/<filename>."""

    def test_upload_png(self, client, app, sample_png):
        """Test that an uploaded PNG is stored and its URL returned."""
        response = _upload(client, sample_png)

        assert response.status_code == 200
        data = response.get_json()
        assert data["success"] is True
        assert data["imageUrl"] == f"/uploads/{data['filename']}"
        assert data["filename"].startswith("image-")
        assert (app.config["UPLOAD_DIR"] / data["filename"]).read_bytes() == sample_png

    def test_uploaded_file_is_served(self, client, sample_png):
        """Test that the returned imageUrl serves the stored bytes."""
        data = _upload(client, sample_png).get_json()

        response = client.get(data["imageUrl"])

        assert response.status_code == 200
        assert response.data == sample_png
        response.close()

    def test_upload_without_file(self, client):
        """Test POST /api/upload with no file part."""
        response = client.post("/api/upload", data={}, content_type="multipart/form-data")

        assert response.status_code == 400
        assert response.get_json() == {"error": "No file uploaded"}

    def test_upload_wrong_field_name(self, client, sample_png):
        """Test that a file sent under another field name counts as missing."""
        response = client.post(
            "/api/upload",
            data={"file": (io.BytesIO(sample_png), "dish.png", "image/png")},
            content_type="multipart/form-data",
        )

        assert response.status_code == 400

    def test_upload_rejects_text_file(self, client, app):
        """Test that a non-image upload is rejected and nothing is stored."""
        response = _upload(client, b"just text", "notes.txt", "text/plain")

        assert response.status_code == 400
        assert "image" in response.get_json()["error"].lower()
        assert list(app.config["UPLOAD_DIR"].iterdir()) == []

    def test_upload_rejects_oversized_file(self, client, app):
        """Test that a file one byte over the upload limit is rejected with 413."""
        too_big = b"\0" * (app.config["MAX_UPLOAD_BYTES"] + 1)

        response = _upload(client, too_big, "huge.png", "image/png")

        assert response.status_code == 413
        assert list(app.config["UPLOAD_DIR"].iterdir()) == []

    def test_request_body_cap_covers_one_upload(self, app):
        """Test that the request cap leaves room for one full upload and its framing."""
        assert app.config["MAX_CONTENT_LENGTH"] == Config.MAX_UPLOAD_BYTES + 64 * 1024
        assert app.config["MAX_CONTENT_LENGTH"] > app.config["MAX_UPLOAD_BYTES"]

    def test_oversized_request_body_is_refused(self, client, app):
        """Test that a body over MAX_CONTENT_LENGTH gets a JSON 413 before it is parsed."""
        app.config["MAX_CONTENT_LENGTH"] = 1024

        response = _upload(client, b"\0" * 4096, "huge.png", "image/png")

        assert response.status_code == 413
        assert "Request body exceeds" in response.get_json()["error"]
        assert list(app.config["UPLOAD_DIR"].iterdir()) == []

    def test_oversized_json_body_is_refused(self, client, app):
        """Test that the request cap applies to JSON endpoints too."""
        app.config["MAX_CONTENT_LENGTH"] = 64

        response = client.put("/api/menu", json={"categories": ["x" * 200], "dishes": []})

        assert response.status_code == 413
        assert not (app.config["DATA_DIR"] / "menu.json").exists()

    def test_upload_write_failure(self, client, mocker, sample_png):
        """Test that a disk error while saving answers 500."""
        mocker.patch("menu_admin.storage.uploads.Path.write_bytes", side_effect=OSError("disk full"))

        response = _upload(client, sample_png)

        assert response.status_code == 500

    def test_delete_upload_twice(self, client, app, sample_png):
        """Test that the first delete succeeds and the second answers 404."""
        filename = _upload(client, sample_png).get_json()["filename"]

        first = client.delete(f"/api/upload/{filename}")
        second = client.delete(f"/api/upload/{filename}")

        assert first.status_code == 200
        assert first.get_json() == {"success": True, "message": "File deleted"}
        assert not (app.config["UPLOAD_DIR"] / filename).exists()
        assert second.status_code == 404
        assert second.get_json() == {"error": "File not found"}

    def test_delete_does_not_leave_upload_dir(self, client, app):
        """Test that an encoded ../ filename answers 404 and deletes nothing."""
        collection_file = app.config["DATA_DIR"] / "outside.json"
        collection_file.write_text("[]")

        response = client.delete("/api/upload/..%2Fdata%2Foutside.json")

        assert response.status_code == 404
        assert response.get_json() == {"error": "File not found"}
        assert collection_file.exists()

    def test_delete_nested_filename(self, client, app, sample_png):
        """Test that a filename with a slash reaches the handler and is refused."""
        nested = app.config["UPLOAD_DIR"] / "sub"
        nested.mkdir()
        (nested / "dish.png").write_bytes(sample_png)

        response = client.delete("/api/upload/sub/dish.png")

        assert response.status_code == 404
        assert response.get_json() == {"error": "File not found"}
        assert (nested / "dish.png").exists()
