"""Tests for the fail-soft metadata fetcher."""

from unittest.mock import MagicMock

import requests

from constants import Constants
from metadata.fetcher import fetch_metadata

from conftest import BASE_URL, ROOT_METADATA

METADATA_URL = f"{BASE_URL}/com/acme/foo/maven-metadata.xml"


class TestFetchMetadata:
    """Test fetch_metadata."""

    def test_fetches_and_parses(self, fake_repo):
        """Successful fetch returns the parsed document."""
        fake_repo.serve(METADATA_URL, ROOT_METADATA.format(artifact="foo"))

        metadata = fetch_metadata(METADATA_URL)

        assert metadata.versions == ["3.6", "3.7", "3.8-SNAPSHOT"]
        assert metadata.release == "3.7"
        assert not metadata.failed

    def test_sends_headers_and_timeout(self, fake_repo):
        """Auth headers are forwarded and a timeout is always set."""
        fake_repo.serve(METADATA_URL, ROOT_METADATA.format(artifact="foo"))

        fetch_metadata(METADATA_URL, headers={"Authorization": "Basic abc"})

        assert fake_repo.calls[0]["headers"] == {"Authorization": "Basic abc"}
        assert fake_repo.calls[0]["timeout"] == Constants.REQUEST_TIMEOUT

    def test_single_attempt_per_call(self, fake_repo):
        """Failures are not retried."""
        fetch_metadata(METADATA_URL)

        assert len(fake_repo.calls) == 1

    def test_connection_error_yields_diagnostic(self, fake_repo):
        """Transport errors degrade to one diagnostic version entry."""
        fake_repo.error = requests.ConnectionError("Connection refused")

        metadata = fetch_metadata(METADATA_URL)

        assert metadata.failed
        assert metadata.versions == ["<ConnectionError: Connection refused>"]
        assert metadata.error == metadata.versions[0]

    def test_timeout_yields_diagnostic(self, fake_repo):
        fake_repo.error = requests.Timeout("read timed out")

        metadata = fetch_metadata(METADATA_URL)

        assert metadata.versions == ["<Timeout: read timed out>"]

    def test_http_error_yields_diagnostic(self, fake_repo):
        """A 404 is a failure, not an empty version list."""
        metadata = fetch_metadata(METADATA_URL)

        assert metadata.failed
        assert len(metadata.versions) == 1
        assert metadata.versions[0].startswith("<HTTPError: 404")
        assert fake_repo.responses[0].closed

    def test_malformed_xml_yields_diagnostic(self, fake_repo):
        """Parse errors degrade the same way as transport errors."""
        fake_repo.serve(METADATA_URL, "<metadata><versioning>")

        metadata = fetch_metadata(METADATA_URL)

        assert metadata.failed
        assert metadata.versions[0].startswith("<ParseError:")
        assert fake_repo.responses[0].closed

    def test_response_closed_on_success(self, fake_repo):
        fake_repo.serve(METADATA_URL, ROOT_METADATA.format(artifact="foo"))

        fetch_metadata(METADATA_URL)

        assert fake_repo.responses[0].closed

    def test_uses_supplied_session(self):
        """A caller-supplied session is used as the transport."""
        session = MagicMock()
        response = MagicMock()
        response.text = ROOT_METADATA.format(artifact="foo")
        session.get.return_value = response

        metadata = fetch_metadata(METADATA_URL, session=session)

        assert metadata.latest == "3.8-SNAPSHOT"
        session.get.assert_called_once()
        assert session.get.call_args[0][0] == METADATA_URL
        response.close.assert_called_once()
