"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    NO_DEFAULT = 3


class SortOrder(Enum):
    """Orders a version list can be presented in.

    ASC keeps the order the repository declares; DESC reverses it.
    """

    ASC = "ASC"
    DESC = "DESC"


class DefaultSelection(Enum):
    """Symbolic default-value tokens understood by the default selector.

    Args:
        Enum (string): Token as typed in the configuration.
    """

    FIRST = "FIRST"
    LAST = "LAST"
    LATEST = "LATEST"
    RELEASE = "RELEASE"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    METADATA_FILE = "maven-metadata.xml"
    DEFAULT_PACKAGING = "jar"
    SNAPSHOT_MARKER = "SNAPSHOT"
    SORT_ORDERS = [SortOrder.DESC.value, SortOrder.ASC.value]

    DEFAULT_ARTIFACT_INFO_LABEL = "Currently used artifact"
    ARTIFACT_INFO_REQUEST_FAILED = "(Request failed)"

    GROUP_ID_SUFFIX = "_GROUP_ID"
    ARTIFACT_ID_SUFFIX = "_ARTIFACT_ID"
    VERSION_SUFFIX = "_VERSION"
    PACKAGING_SUFFIX = "_PACKAGING"
    CLASSIFIER_SUFFIX = "_CLASSIFIER"
    ARTIFACT_URL_SUFFIX = "_ARTIFACT_URL"

    CONFIG_VERSION = 2
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "MVNMETA_LOG_LEVEL"
    DEFAULT_REQUEST_TIMEOUT = 30
    REQUEST_TIMEOUT = DEFAULT_REQUEST_TIMEOUT  # Timeout in seconds for all HTTP requests
