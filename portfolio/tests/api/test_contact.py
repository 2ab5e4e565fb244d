import pytest
from portfolio.tests.constants.contact import (
    VALID_CONTACT_PAYLOAD,
    SUCCESS_RESPONSE,
    FIELDS_REQUIRED_RESPONSE,
    INVALID_EMAIL_RESPONSE,
    SUBMISSION_ERROR_RESPONSE,
    TOO_MANY_REQUESTS_RESPONSE,
)


@pytest.mark.asyncio
class TestSubmitFormEndpoint:
    async def test_submit_form_json_success(self, client, mock_accept_hook):
        """A valid JSON submission is accepted and echoed without the message."""
        response = client.post("/submit-form", json=VALID_CONTACT_PAYLOAD)

        assert response.status_code == 200
        assert response.json() == SUCCESS_RESPONSE
        assert "message" not in response.json()["data"]

        mock_accept_hook.assert_awaited_once()
        submission = mock_accept_hook.await_args.args[0]
        assert submission.message == "Hello"

    async def test_submit_form_urlencoded_success(self, client, mock_accept_hook):
        """Form-encoded submissions from the contact page are accepted too."""
        response = client.post("/submit-form", data=VALID_CONTACT_PAYLOAD)

        assert response.status_code == 200
        assert response.json() == SUCCESS_RESPONSE
        mock_accept_hook.assert_awaited_once()

    @pytest.mark.parametrize("missing_field", ["name", "email", "subject", "message"])
    async def test_submit_form_missing_field(self, client, mock_accept_hook, missing_field):
        payload = {k: v for k, v in VALID_CONTACT_PAYLOAD.items() if k != missing_field}

        response = client.post("/submit-form", json=payload)

        assert response.status_code == 400
        assert response.json() == FIELDS_REQUIRED_RESPONSE
        mock_accept_hook.assert_not_awaited()

    async def test_submit_form_empty_field(self, client, mock_accept_hook):
        response = client.post(
            "/submit-form", data={**VALID_CONTACT_PAYLOAD, "subject": ""}
        )

        assert response.status_code == 400
        assert response.json() == FIELDS_REQUIRED_RESPONSE

    async def test_submit_form_invalid_email(self, client, mock_accept_hook):
        response = client.post(
            "/submit-form", json={**VALID_CONTACT_PAYLOAD, "email": "ada@example"}
        )

        assert response.status_code == 400
        assert response.json() == INVALID_EMAIL_RESPONSE
        mock_accept_hook.assert_not_awaited()

    async def test_submit_form_without_body(self, client):
        response = client.post("/submit-form")

        assert response.status_code == 400
        assert response.json() == FIELDS_REQUIRED_RESPONSE

    async def test_submit_form_malformed_json(self, client):
        response = client.post(
            "/submit-form",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == FIELDS_REQUIRED_RESPONSE

    async def test_submit_form_accept_failure(self, client, mock_accept_hook):
        """Failures after validation surface only as the generic error."""
        mock_accept_hook.side_effect = RuntimeError("mail relay refused connection")

        response = client.post("/submit-form", json=VALID_CONTACT_PAYLOAD)

        assert response.status_code == 500
        assert response.json() == SUBMISSION_ERROR_RESPONSE
        assert "mail relay" not in response.text

    async def test_submit_form_malformed_multipart(self, client, mock_accept_hook):
        """A multipart body without a boundary is a client fault, not a server error."""
        response = client.post(
            "/submit-form",
            content=b"garbage",
            headers={"Content-Type": "multipart/form-data"},
        )

        assert response.status_code == 400
        assert response.json() == FIELDS_REQUIRED_RESPONSE
        mock_accept_hook.assert_not_awaited()


@pytest.mark.asyncio
class TestSubmitFormRateLimit:
    async def test_sixth_submission_is_rejected(self, client, mock_accept_hook):
        for _ in range(5):
            response = client.post("/submit-form", json=VALID_CONTACT_PAYLOAD)
            assert response.status_code == 200

        response = client.post("/submit-form", json=VALID_CONTACT_PAYLOAD)

        assert response.status_code == 429
        assert response.json() == TOO_MANY_REQUESTS_RESPONSE
        assert mock_accept_hook.await_count == 5

    async def test_rejected_submissions_count_towards_limit(self, client, mock_accept_hook):
        """Invalid payloads use up the allowance and a valid one is then refused."""
        for _ in range(5):
            response = client.post("/submit-form", json={})
            assert response.status_code == 400

        response = client.post("/submit-form", json=VALID_CONTACT_PAYLOAD)

        assert response.status_code == 429
        mock_accept_hook.assert_not_awaited()

    async def test_contact_limit_does_not_affect_other_routes(self, client):
        for _ in range(6):
            client.post("/submit-form", json=VALID_CONTACT_PAYLOAD)

        response = client.get("/api/health")

        assert response.status_code == 200
