"""Parsing utilities for maven-metadata.xml documents and coordinate tokens."""

import xml.etree.ElementTree as ET
from typing import Optional, Tuple

from .models import SnapshotInfo, VersioningMetadata


def _strip_namespaces(root: ET.Element) -> ET.Element:
    """Drop ``{ns}`` prefixes so lookups work for namespaced 1.1.0 documents."""
    for elem in root.iter():
        if isinstance(elem.tag, str) and elem.tag.startswith("{"):
            elem.tag = elem.tag.split("}", 1)[1]
    return root


def _text(parent: Optional[ET.Element], path: str) -> str:
    if parent is None:
        return ""
    node = parent.find(path)
    if node is None or node.text is None:
        return ""
    return node.text.strip()


def parse_metadata(text: str) -> VersioningMetadata:
    """Parse a maven-metadata.xml body.

    Versions keep their declaration order. Missing elements become empty
    strings; a missing ``snapshot`` block leaves ``snapshot`` as None.

    Raises:
        xml.etree.ElementTree.ParseError: When the body is not well-formed XML.
    """
    root = _strip_namespaces(ET.fromstring(text))
    versioning = root.find("versioning")

    versions = []
    if versioning is not None:
        versions_elem = versioning.find("versions")
        if versions_elem is not None:
            for version_elem in versions_elem.findall("version"):
                if version_elem.text and version_elem.text.strip():
                    versions.append(version_elem.text.strip())

    snapshot = None
    snapshot_elem = versioning.find("snapshot") if versioning is not None else None
    if snapshot_elem is not None:
        snapshot = SnapshotInfo(
            timestamp=_text(snapshot_elem, "timestamp"),
            build_number=_text(snapshot_elem, "buildNumber"),
        )

    return VersioningMetadata(
        latest=_text(versioning, "latest"),
        release=_text(versioning, "release"),
        versions=versions,
        snapshot=snapshot,
    )


def parse_coordinate_token(token: str) -> Tuple[str, str, str, str]:
    """Split ``group:artifact[:packaging[:classifier]]`` into its four parts.

    Missing trailing parts come back as empty strings.

    Raises:
        ValueError: When group or artifact is missing.
    """
    parts = [p.strip() for p in token.strip().split(":")]
    if len(parts) < 2 or len(parts) > 4 or not parts[0] or not parts[1]:
        raise ValueError(f"Expected group:artifact[:packaging[:classifier]], got '{token}'")
    parts += [""] * (4 - len(parts))
    return parts[0], parts[1], parts[2], parts[3]
