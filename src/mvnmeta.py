"""mvnmeta - pick a published Maven artifact version and resolve its download URL.

    Returns:
        int: Exit code
"""
import json
import logging
import sys

from constants import ExitCodes
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from args import parse_args
from cli_config import ConfigError, load_parameter
from credentials.migration import credentials_id_for
from credentials.store import Credential, InMemoryCredentialStore, load_credentials_file

logger = logging.getLogger(__name__)


def build_store(args) -> InMemoryCredentialStore:
    """Credential store from --credentials-file plus --username/--password.

    CLI username/password are registered under the id derived from the
    repository URL and selected unless --credentials-id names another one.

    Raises:
        OSError: When the credentials file cannot be read.
        ValueError: When the credentials file cannot be parsed.
    """
    if getattr(args, "CREDENTIALS_FILE", None):
        store = load_credentials_file(args.CREDENTIALS_FILE)
    else:
        store = InMemoryCredentialStore()

    if getattr(args, "USERNAME", None):
        if getattr(args, "REPO_URL", None):
            credentials_id = credentials_id_for(args.REPO_URL, args.USERNAME)
        else:
            credentials_id = f"{args.USERNAME}@cli"
        store.add(credentials_id, Credential(args.USERNAME, args.PASSWORD or ""))
        if not getattr(args, "CREDENTIALS_ID", None):
            args.CREDENTIALS_ID = credentials_id
    return store


def print_descriptor(descriptor, output_format: str) -> None:
    if output_format == "env":
        for key, value in descriptor.to_env().items():
            print(f"{key}={value}")
    else:
        print(json.dumps(descriptor.to_dict(), indent=2))


def main(argv=None) -> int:
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action=args.action)
        )

    try:
        store = build_store(args)
    except (OSError, ValueError) as e:
        logging.error("Cannot load credentials file: %s, aborting", e)
        return ExitCodes.FILE_ERROR.value

    try:
        parameter = load_parameter(args.CONFIG, args, store)
    except ConfigError as e:
        logging.error("%s", e)
        return ExitCodes.FILE_ERROR.value

    if args.action == "versions":
        for version in parameter.get_versions(store):
            print(version)
        return ExitCodes.SUCCESS.value

    if args.action == "info":
        print(parameter.current_artifact_info())
        return ExitCodes.SUCCESS.value

    if args.action == "default":
        version = parameter.get_default_version(store)
        if version is None:
            logging.warning("No default version available.")
            return ExitCodes.NO_DEFAULT.value
        print(version)
        return ExitCodes.SUCCESS.value

    # resolve
    if args.version:
        descriptor = parameter.create_value(args.version, store)
    else:
        descriptor = parameter.get_default_value(store)
        if descriptor is None:
            logging.warning("No version given and no default version available.")
            return ExitCodes.NO_DEFAULT.value
    print_descriptor(descriptor, args.OUTPUT_FORMAT)
    return ExitCodes.SUCCESS.value


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
