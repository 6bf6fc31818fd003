"""
Tests for the /bills endpoints (dashboard bill upload for a logged-in user).
"""

from credit_assist.flows.errors import UpstreamUnavailableError


def _upload(client, headers, data, filename="bill.png", content_type="image/png", category=None):
    form = {"category": category} if category else None
    return client.post(
        "/bills/image",
        headers=headers,
        files={"image": (filename, data, content_type)},
        data=form,
    )


class TestBillUpload:
    def test_requires_session(self, client, png_bytes):
        response = client.post("/bills/image", files={"image": ("bill.png", png_bytes, "image/png")})

        assert response.status_code == 401

    def test_select_image(self, client, beneficiary_headers, png_bytes):
        response = _upload(client, beneficiary_headers, png_bytes)

        assert response.status_code == 200
        data = response.json()
        assert data["state"] == "image_selected"
        assert data["preview_data_uri"].startswith("data:image/png;base64,")

    def test_file_too_large_returns_413(self, client, beneficiary_headers, oversized_png_bytes):
        response = _upload(client, beneficiary_headers, oversized_png_bytes)

        assert response.status_code == 413
        assert response.json()["error"] == "file_too_large"
        assert "File too large" in response.json()["details"]

        status = client.get("/bills", headers=beneficiary_headers).json()
        assert status["state"] == "idle"

    def test_unsupported_type_returns_415(self, client, beneficiary_headers):
        response = _upload(client, beneficiary_headers, b"%PDF-1.4", filename="bill.pdf", content_type="application/pdf")

        assert response.status_code == 415
        assert response.json()["error"] == "invalid_file_type"

    def test_pdf_sent_as_png_returns_415(self, client, fake_model_client, beneficiary_headers):
        response = _upload(client, beneficiary_headers, b"%PDF-1.4\n%fake bill\n")

        assert response.status_code == 415
        assert response.json()["error"] == "invalid_file_type"
        assert client.get("/bills", headers=beneficiary_headers).json()["state"] == "idle"
        assert fake_model_client.calls == []

    def test_invalid_category_returns_422(self, client, beneficiary_headers, png_bytes):
        response = _upload(client, beneficiary_headers, png_bytes, category="Groceries")

        assert response.status_code == 422


class TestBillReviewCycle:
    def test_parse_confirm_with_override(
        self, client, fake_model_client, beneficiary_headers, png_bytes, bill_result_payload
    ):
        fake_model_client.queue_json(bill_result_payload)
        _upload(client, beneficiary_headers, png_bytes)

        parsed = client.post("/bills/parse", headers=beneficiary_headers)
        assert parsed.status_code == 200
        assert parsed.json()["vendorName"] == "Sharma Kirana Store"
        assert client.get("/bills", headers=beneficiary_headers).json()["state"] == "pending_review"

        confirmed = client.post("/bills/confirm", headers=beneficiary_headers, json={"category": "Healthcare"})
        assert confirmed.status_code == 200
        data = confirmed.json()
        assert data["confirmed_count"] == 1
        assert data["bill"]["category"] == "Healthcare"
        assert data["bill"]["detectedCategory"] == "Essential"
        assert data["bill"]["totalAmount"] == 450.0

        status = client.get("/bills", headers=beneficiary_headers).json()
        assert status["state"] == "idle"
        assert len(status["confirmed_bills"]) == 1

    def test_confirm_without_body_uses_detected_category(
        self, client, fake_model_client, beneficiary_headers, png_bytes, bill_result_payload
    ):
        fake_model_client.queue_json(bill_result_payload)
        _upload(client, beneficiary_headers, png_bytes)
        client.post("/bills/parse", headers=beneficiary_headers)

        response = client.post("/bills/confirm", headers=beneficiary_headers)

        assert response.status_code == 200
        assert response.json()["bill"]["category"] == "Essential"

    def test_cancel_discards_pending(
        self, client, fake_model_client, beneficiary_headers, png_bytes, bill_result_payload
    ):
        fake_model_client.queue_json(bill_result_payload)
        _upload(client, beneficiary_headers, png_bytes)
        client.post("/bills/parse", headers=beneficiary_headers)

        response = client.post("/bills/cancel", headers=beneficiary_headers)

        assert response.status_code == 200
        assert response.json()["state"] == "idle"
        assert response.json()["confirmed_bills"] == []

    def test_parse_failure_keeps_image(self, client, fake_model_client, beneficiary_headers, png_bytes):
        fake_model_client.queue(UpstreamUnavailableError("network down"))
        _upload(client, beneficiary_headers, png_bytes)

        response = client.post("/bills/parse", headers=beneficiary_headers)

        assert response.status_code == 503
        status = client.get("/bills", headers=beneficiary_headers).json()
        assert status["state"] == "image_selected"
        assert status["selected_filename"] == "bill.png"
        assert status["last_error"]

    def test_parse_without_image_returns_400(self, client, beneficiary_headers):
        response = client.post("/bills/parse", headers=beneficiary_headers)

        assert response.status_code == 400
        assert response.json()["error"] == "missing_selection"

    def test_confirm_without_pending_returns_409(self, client, beneficiary_headers):
        response = client.post("/bills/confirm", headers=beneficiary_headers)

        assert response.status_code == 409
        assert response.json()["error"] == "invalid_transition"

    def test_bills_are_per_session(
        self, client, fake_model_client, beneficiary_headers, png_bytes, bill_result_payload
    ):
        fake_model_client.queue_json(bill_result_payload)
        _upload(client, beneficiary_headers, png_bytes)
        client.post("/bills/parse", headers=beneficiary_headers)
        client.post("/bills/confirm", headers=beneficiary_headers)

        other = client.post("/auth/login", json={"email": "sunita.d@example.com"}).json()
        other_headers = {"Authorization": f"Bearer {other['session_token']}"}

        assert client.get("/bills", headers=other_headers).json()["confirmed_bills"] == []
