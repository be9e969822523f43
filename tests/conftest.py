"""Shared fixtures: a fake Maven repository served through a patched requests.get."""

from unittest.mock import patch

import pytest
import requests

BASE_URL = "http://repo.example.test/maven2"

ROOT_METADATA = """<?xml version="1.0" encoding="UTF-8"?>
<metadata>
  <groupId>com.acme</groupId>
  <artifactId>{artifact}</artifactId>
  <versioning>
    <latest>3.8-SNAPSHOT</latest>
    <release>3.7</release>
    <versions>
      <version>3.6</version>
      <version>3.7</version>
      <version>3.8-SNAPSHOT</version>
    </versions>
    <lastUpdated>20140919030038</lastUpdated>
  </versioning>
</metadata>
"""

TIMESTAMPED_SNAPSHOT_METADATA = """<?xml version="1.0" encoding="UTF-8"?>
<metadata modelVersion="1.1.0">
  <groupId>com.acme</groupId>
  <artifactId>timestamped</artifactId>
  <version>3.8-SNAPSHOT</version>
  <versioning>
    <snapshot>
      <timestamp>20140919.030038</timestamp>
      <buildNumber>76</buildNumber>
    </snapshot>
    <lastUpdated>20140919030038</lastUpdated>
  </versioning>
</metadata>
"""

SINGLE_SNAPSHOT_METADATA = """<?xml version="1.0" encoding="UTF-8"?>
<metadata>
  <groupId>com.acme</groupId>
  <artifactId>single</artifactId>
  <version>3.8-SNAPSHOT</version>
  <versioning>
    <snapshot>
      <localCopy>true</localCopy>
    </snapshot>
    <lastUpdated>20140919030038</lastUpdated>
  </versioning>
</metadata>
"""


class MockResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text
        self.ok = 200 <= status_code < 300
        self.closed = False

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Client Error", response=self)

    def close(self):
        self.closed = True


class FakeRepository:
    """Serves registered documents by exact URL; anything else is a 404."""

    def __init__(self):
        self.documents = {}
        self.calls = []
        self.responses = []
        self.error = None

    def serve(self, url, text, status_code=200):
        self.documents[url] = (status_code, text)

    def get(self, url, headers=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "headers": dict(headers or {}), "timeout": timeout})
        if self.error is not None:
            raise self.error
        status_code, text = self.documents.get(url, (404, "Not Found"))
        response = MockResponse(status_code, text)
        self.responses.append(response)
        return response

    @property
    def urls(self):
        return [call["url"] for call in self.calls]


@pytest.fixture
def fake_repo():
    """Patch requests.get with an empty FakeRepository."""
    repo = FakeRepository()
    with patch("common.http_client.requests.get", side_effect=repo.get):
        yield repo


@pytest.fixture
def acme_repo(fake_repo):
    """FakeRepository holding com.acme:timestamped and com.acme:single."""
    for artifact in ("timestamped", "single"):
        fake_repo.serve(
            f"{BASE_URL}/com/acme/{artifact}/maven-metadata.xml",
            ROOT_METADATA.format(artifact=artifact),
        )
    fake_repo.serve(
        f"{BASE_URL}/com/acme/timestamped/3.8-SNAPSHOT/maven-metadata.xml",
        TIMESTAMPED_SNAPSHOT_METADATA,
    )
    fake_repo.serve(
        f"{BASE_URL}/com/acme/single/3.8-SNAPSHOT/maven-metadata.xml",
        SINGLE_SNAPSHOT_METADATA,
    )
    return fake_repo
