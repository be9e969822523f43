"""Tests for metadata and artifact URL composition."""

from metadata.models import RepositoryCoordinate
from metadata.urls import artifact_file_name, artifact_url, group_path, metadata_url

BASE = "https://repo.example.com/releases"


def _coord(packaging="jar", classifier=""):
    return RepositoryCoordinate(BASE, "com.acme", "foo", packaging, classifier)


def test_group_path():
    assert group_path("org.apache.commons") == "org/apache/commons"


def test_artifact_url_without_classifier():
    url = artifact_url(_coord(), "1.0", "1.0")
    assert url == f"{BASE}/com/acme/foo/1.0/foo-1.0.jar"


def test_artifact_url_with_classifier():
    url = artifact_url(_coord(classifier="classes"), "1.0", "1.0")
    assert url.endswith("/com/acme/foo/1.0/foo-1.0-classes.jar")


def test_blank_packaging_defaults_to_jar():
    assert artifact_file_name(_coord(packaging="  "), "1.0") == "foo-1.0.jar"
    assert artifact_file_name(RepositoryCoordinate(BASE, "com.acme", "foo", None, None), "1.0") == "foo-1.0.jar"


def test_snapshot_directory_uses_requested_version():
    url = artifact_url(_coord(packaging="war"), "3.8-SNAPSHOT", "3.8-20140919.030038-76")
    assert url == f"{BASE}/com/acme/foo/3.8-SNAPSHOT/foo-3.8-20140919.030038-76.war"


def test_resolved_version_defaults_to_version():
    assert artifact_url(_coord(), "2.0").endswith("/2.0/foo-2.0.jar")


def test_trailing_slash_removed_from_base():
    coord = RepositoryCoordinate(BASE + "/", "com.acme", "foo")
    assert artifact_url(coord, "1.0") == f"{BASE}/com/acme/foo/1.0/foo-1.0.jar"


def test_metadata_urls():
    assert metadata_url(_coord()) == f"{BASE}/com/acme/foo/maven-metadata.xml"
    assert metadata_url(_coord(), "3.8-SNAPSHOT") == f"{BASE}/com/acme/foo/3.8-SNAPSHOT/maven-metadata.xml"
