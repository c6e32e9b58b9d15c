"""
Modrinth verification tests - confirmed, rejected and fail-open outcomes.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from modtags.intake.verify import ModrinthVerifier, VerificationStatus


def _response(status_code, payload=None, json_error=False):
    response = MagicMock()
    response.status_code = status_code
    if json_error:
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def verifier():
    return ModrinthVerifier(api_base="https://api.modrinth.test/v2", timeout=5)


class TestModrinthVerifier:
    """Test remote project verification."""

    @patch('modtags.intake.verify.requests.get')
    def test_absent_id_skips_lookup(self, mock_get, verifier):
        result = verifier.verify(None)
        assert result.valid
        assert result.status == VerificationStatus.UNKNOWN
        assert result.data is None
        mock_get.assert_not_called()

    @patch('modtags.intake.verify.requests.get')
    def test_confirmed_project(self, mock_get, verifier):
        mock_get.return_value = _response(200, {
            "title": "Sodium",
            "slug": "sodium",
            "id": "AANobbMI",
            "client_side": "required",
            "server_side": "unsupported",
            "downloads": 1000
        })

        result = verifier.verify("sodium")

        assert result.valid
        assert result.status == VerificationStatus.CONFIRMED
        assert result.data == {
            "name": "Sodium",
            "slug": "sodium",
            "id": "AANobbMI",
            "client_side": "required",
            "server_side": "unsupported"
        }

    @patch('modtags.intake.verify.requests.get')
    def test_request_shape(self, mock_get, verifier):
        """Test URL encoding, user agent and the bounded timeout."""
        mock_get.return_value = _response(200, {})
        verifier.verify("my mod")

        args, kwargs = mock_get.call_args
        assert args[0] == "https://api.modrinth.test/v2/project/my%20mod"
        assert kwargs["timeout"] == 5
        assert "User-Agent" in kwargs["headers"]

    @patch('modtags.intake.verify.requests.get')
    def test_not_found_rejects(self, mock_get, verifier):
        mock_get.return_value = _response(404)
        result = verifier.verify("missing-mod")
        assert not result.valid
        assert result.status == VerificationStatus.REJECTED
        assert result.error == 'Modrinth project "missing-mod" not found'

    @pytest.mark.parametrize("status_code", [410, 429, 500, 503])
    @patch('modtags.intake.verify.requests.get')
    def test_other_status_fails_open(self, mock_get, status_code, verifier):
        mock_get.return_value = _response(status_code)
        result = verifier.verify("sodium")
        assert result.valid
        assert result.status == VerificationStatus.UNKNOWN
        assert result.data is None

    @pytest.mark.parametrize("exc", [
        requests.Timeout("timed out"),
        requests.ConnectionError("dns failure"),
    ])
    @patch('modtags.intake.verify.requests.get')
    def test_transport_failure_fails_open(self, mock_get, exc, verifier):
        mock_get.side_effect = exc
        result = verifier.verify("sodium")
        assert result.valid
        assert result.status == VerificationStatus.UNKNOWN

    @patch('modtags.intake.verify.requests.get')
    def test_malformed_body_fails_open(self, mock_get, verifier):
        mock_get.return_value = _response(200, json_error=True)
        result = verifier.verify("sodium")
        assert result.valid
        assert result.status == VerificationStatus.UNKNOWN

    def test_default_timeout_from_config(self):
        assert ModrinthVerifier().timeout == 5
