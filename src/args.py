"""Argument parsing functionality for mvnmeta."""

import argparse
from constants import Constants

ACTIONS = ["versions", "default", "resolve", "info"]


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="mvnmeta",
        description=(
            "mvnmeta - List published versions from maven-metadata.xml and resolve artifact URLs"
        ),
        add_help=True,
    )

    parser.add_argument("action",
                        help="versions: list versions, default: print the default version, "
                             "resolve: resolve a version to its artifact URL, info: probe the current artifact",
                        choices=ACTIONS)
    parser.add_argument("version",
                        help="Version to resolve (resolve only; defaults to the configured default)",
                        nargs="?")

    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to parameter configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("-r", "--repo",
                        dest="REPO_URL",
                        help="Repository base URL, e.g. https://repo1.maven.org/maven2",
                        action="store", type=str)
    parser.add_argument("--coordinate",
                        dest="COORDINATE",
                        help="Coordinate as group:artifact[:packaging[:classifier]]",
                        action="store", type=str)
    parser.add_argument("-g", "--group",
                        dest="GROUP_ID",
                        help="Group id, e.g. org.apache.commons",
                        action="store", type=str)
    parser.add_argument("-a", "--artifact",
                        dest="ARTIFACT_ID",
                        help="Artifact id",
                        action="store", type=str)
    parser.add_argument("--packaging",
                        dest="PACKAGING",
                        help=f"Packaging / file extension (default: {Constants.DEFAULT_PACKAGING})",
                        action="store", type=str)
    parser.add_argument("--classifier",
                        dest="CLASSIFIER",
                        help="Classifier, e.g. sources",
                        action="store", type=str)
    parser.add_argument("-n", "--name",
                        dest="NAME",
                        help="Parameter name used as prefix of the env output",
                        action="store", type=str)

    parser.add_argument("--filter",
                        dest="VERSION_FILTER",
                        help="Regular expression versions must fully match",
                        action="store", type=str)
    parser.add_argument("--sort",
                        dest="SORT_ORDER",
                        help="Sort order of the version list (default: DESC)",
                        action="store",
                        type=str.upper,
                        choices=Constants.SORT_ORDERS)
    parser.add_argument("--default",
                        dest="DEFAULT_VALUE",
                        help="Default version: FIRST, LAST, LATEST, RELEASE or a literal version",
                        action="store", type=str)
    parser.add_argument("--max",
                        dest="MAX_VERSIONS",
                        help="Maximum number of versions to list",
                        action="store", type=str)

    parser.add_argument("--credentials-file",
                        dest="CREDENTIALS_FILE",
                        help="YAML or JSON file mapping credential ids to username/password",
                        action="store", type=str)
    parser.add_argument("--credentials-id",
                        dest="CREDENTIALS_ID",
                        help="Id of the credentials to use from the credentials file",
                        action="store", type=str)
    parser.add_argument("-u", "--username",
                        dest="USERNAME",
                        help="Repository username",
                        action="store", type=str)
    parser.add_argument("-p", "--password",
                        dest="PASSWORD",
                        help="Repository password",
                        action="store", type=str)

    parser.add_argument("--info-url",
                        dest="INFO_URL",
                        help="URL exposing the currently deployed artifact",
                        action="store", type=str)
    parser.add_argument("--info-label",
                        dest="INFO_LABEL",
                        help=f"Label of the info line (default: {Constants.DEFAULT_ARTIFACT_INFO_LABEL})",
                        action="store", type=str)
    parser.add_argument("--info-pattern",
                        dest="INFO_PATTERN",
                        help="Regular expression extracting the value from the info page",
                        action="store", type=str)

    parser.add_argument("--timeout",
                        dest="TIMEOUT",
                        help=f"Request timeout in seconds (default: {Constants.DEFAULT_REQUEST_TIMEOUT})",
                        action="store", type=float)
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format of resolve (json or env; default: json)",
                        action="store",
                        type=str.lower,
                        default="json",
                        choices=["json", "env"])
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='WARNING')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
