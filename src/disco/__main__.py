# Copyright (c) 2024 - 2025, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This is the main entrypoint to run disco."""

import argparse
import json
import logging
import os
import sys
from enum import Enum
from importlib import metadata as importlib_metadata
from typing import TypeVar

from disco.adapters import SOURCE_ADAPTERS, get_adapter, load_adapter_defaults
from disco.adapters.base import Payload, PayloadKind, SourceAdapter
from disco.classification.dimensions import (
    Architecture,
    ArchiveType,
    Bitness,
    OperatingSystem,
    PackageType,
    ReleaseStatus,
    TermOfSupport,
)
from disco.config.defaults import create_defaults, load_defaults
from disco.discovery import discover, fetch_payload
from disco.errors import ConfigurationError, InvalidHTTPResponseError, InvalidPayloadError, UnknownDistributionError
from disco.filters import FilterSpecification, PriorRecords
from disco.json_tools import load_json_text
from disco.record import PackageRecord
from disco.version.version_number import VersionNumber

logger: logging.Logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

#: The name of the file the records of the ``parse`` and ``fetch`` commands are written to.
RECORDS_FILE_NAME = "records.json"


class FilterArgumentError(Exception):
    """Happens when a filter option of the command line cannot be understood."""


def _dimension(enum_type: type[E], text: str | None) -> E:
    """Return the member of a dimension named by a command line option, NONE when the option is absent.

    Raises
    ------
    FilterArgumentError
        If the option value is not a known member or synonym.
    """
    if not text:
        return enum_type["NONE"]
    member = enum_type.from_text(text)  # type: ignore[attr-defined]
    if member is enum_type["NOT_FOUND"]:
        raise FilterArgumentError(f"Unknown {enum_type.__name__} value: {text}.")
    return member  # type: ignore[no-any-return]


def build_filters(args: argparse.Namespace) -> FilterSpecification:
    """Create the filter specification from the filter options of a command.

    Raises
    ------
    FilterArgumentError
        If one of the options cannot be understood.
    """
    version = VersionNumber()
    if args.java_version:
        version = VersionNumber.parse(args.java_version)
        if version.is_empty():
            raise FilterArgumentError(f"Invalid version number: {args.java_version}.")

    return FilterSpecification(
        version=version,
        latest=args.latest,
        operating_system=_dimension(OperatingSystem, args.operating_system),
        architecture=_dimension(Architecture, args.architecture),
        bitness=_dimension(Bitness, args.bitness),
        archive_type=_dimension(ArchiveType, args.archive_type),
        package_type=_dimension(PackageType, args.package_type),
        javafx_bundled=args.javafx,
        release_status=_dimension(ReleaseStatus, args.release_status),
        term_of_support=_dimension(TermOfSupport, args.term_of_support),
        only_new=getattr(args, "only_new", False),
    )


def write_records(records: list[PackageRecord], output_dir: str) -> None:
    """Print the records as JSON and store them in the output directory."""
    content = json.dumps([record.to_json() for record in records], indent=4)
    records_path = os.path.join(output_dir, RECORDS_FILE_NAME)
    with open(records_path, "w", encoding="utf-8") as records_file:
        records_file.write(content)
    print(content)  # noqa: T201
    logger.info("Stored %s records in %s.", len(records), os.path.relpath(records_path, os.getcwd()))


def read_payload(path: str, payload_kind: PayloadKind) -> Payload:
    """Read a payload file.

    Raises
    ------
    OSError
        If the file cannot be read.
    InvalidPayloadError
        If a JSON payload cannot be decoded.
    """
    with open(path, encoding="utf-8") as payload_file:
        text = payload_file.read()
    if payload_kind is PayloadKind.JSON:
        return load_json_text(text)
    return text


def list_adapters() -> int:
    """Print the supported distributions and whether they are enabled."""
    for adapter in SOURCE_ADAPTERS:
        state = "enabled" if adapter.enabled else "disabled"
        print(f"{adapter.distro.value:<20} {adapter.name:<20} {state}")  # noqa: T201
    return os.EX_OK


def locate(adapter: SourceAdapter, filters: FilterSpecification) -> int:
    """Print the locator of the payload for the filters."""
    locator = adapter.locator_for(filters)
    if locator is None:
        logger.error("%s does not serve the requested version.", adapter.name)
        return os.EX_DATAERR
    print(f"{locator.payload_kind.value} {locator.url}")  # noqa: T201
    return os.EX_OK


def parse_payload_file(adapter: SourceAdapter, filters: FilterSpecification, args: argparse.Namespace) -> int:
    """Parse a payload file and write the records."""
    payload_kind = PayloadKind(args.payload_kind) if args.payload_kind else _guess_payload_kind(args.payload)
    try:
        payload = read_payload(args.payload, payload_kind)
    except OSError as error:
        logger.error("Cannot read the payload file: %s", error)
        return os.EX_NOINPUT
    except InvalidPayloadError as error:
        logger.error(error)
        return os.EX_DATAERR

    prior = None
    if args.prior:
        try:
            prior = PriorRecords.from_json(read_payload(args.prior, PayloadKind.JSON))
        except OSError as error:
            logger.error("Cannot read the prior records file: %s", error)
            return os.EX_NOINPUT
        except InvalidPayloadError as error:
            logger.error(error)
            return os.EX_DATAERR
        logger.info("Loaded %s prior records.", len(prior))

    write_records(discover(adapter, payload, filters, prior), args.output_dir)
    return os.EX_OK


def fetch(adapter: SourceAdapter, filters: FilterSpecification, output_dir: str) -> int:
    """Fetch the payload of the locator, parse it and write the records."""
    locator = adapter.locator_for(filters)
    if locator is None:
        logger.error("%s does not serve the requested version.", adapter.name)
        return os.EX_DATAERR
    try:
        payload = fetch_payload(locator)
    except (InvalidHTTPResponseError, InvalidPayloadError) as error:
        logger.error(error)
        return os.EX_DATAERR

    write_records(discover(adapter, payload, filters), output_dir)
    return os.EX_OK


def _guess_payload_kind(path: str) -> PayloadKind:
    return PayloadKind.JSON if path.endswith(".json") else PayloadKind.HTML


def perform_action(action_args: argparse.Namespace) -> None:
    """Perform the indicated action of disco."""
    match action_args.action:
        case "dump-defaults":
            # Create the defaults.ini file in the output dir and exit.
            if not create_defaults(action_args.output_dir, os.getcwd()):
                sys.exit(os.EX_CANTCREAT)
            sys.exit(os.EX_OK)

        case "list" | "locate" | "parse" | "fetch":
            try:
                load_adapter_defaults()
            except ConfigurationError as error:
                logger.error(error)
                sys.exit(os.EX_USAGE)

            if action_args.action == "list":
                sys.exit(list_adapters())

            try:
                adapter = get_adapter(action_args.distro)
                filters = build_filters(action_args)
            except (UnknownDistributionError, FilterArgumentError) as error:
                logger.error(error)
                sys.exit(os.EX_USAGE)

            if not adapter.enabled:
                logger.error("%s is disabled in the defaults configuration.", adapter.name)
                sys.exit(os.EX_USAGE)

            match action_args.action:
                case "locate":
                    sys.exit(locate(adapter, filters))
                case "parse":
                    sys.exit(parse_payload_file(adapter, filters, action_args))
                case _:
                    sys.exit(fetch(adapter, filters, action_args.output_dir))

        case _:
            logger.error("disco does not support command option %s.", action_args.action)
            sys.exit(os.EX_USAGE)


def _add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-d",
        "--distro",
        required=True,
        type=str,
        help="The distribution name, e.g. temurin, zulu or corretto.",
    )
    parser.add_argument("-jv", "--java-version", default="", help="The version to look for, e.g. 17 or 17.0.2.")
    parser.add_argument(
        "--latest",
        action="store_true",
        help="Only compare the feature version of --java-version.",
    )
    parser.add_argument("--os", dest="operating_system", default="", help="The operating system, e.g. linux.")
    parser.add_argument("--arch", dest="architecture", default="", help="The architecture, e.g. x64 or aarch64.")
    parser.add_argument("--bitness", default="", help="The bitness, 32 or 64.")
    parser.add_argument("--archive-type", default="", help="The archive type, e.g. tar.gz or msi.")
    parser.add_argument("--package-type", default="", help="The package type, jdk or jre.")
    parser.add_argument(
        "--javafx",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Whether JavaFX must (or must not) be bundled.",
    )
    parser.add_argument("--release-status", default="", help="The release status, ga or ea.")
    parser.add_argument("--term-of-support", default="", help="The term of support, sts, mts or lts.")


def main(argv: list[str] | None = None) -> None:
    """Execute disco as a standalone command-line tool.

    Parameters
    ----------
    argv: list[str] | None
        Command-line arguments.
        If ``argv`` is ``None``, argparse automatically looks at ``sys.argv``.
        Hence, we set ``argv = None`` by default.
    """
    main_parser = argparse.ArgumentParser(prog="disco")

    main_parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {importlib_metadata.version('disco')}",
        help="Show disco's version number and exit",
    )

    main_parser.add_argument(
        "-v",
        "--verbose",
        help="Run disco with more debug logs",
        action="store_true",
    )

    main_parser.add_argument(
        "-o",
        "--output-dir",
        default=os.path.join(os.getcwd(), "output"),
        help="The output destination path for disco",
    )

    main_parser.add_argument(
        "-dp",
        "--defaults-path",
        default="",
        help="The path to the defaults configuration file.",
    )

    # Add sub parsers for each action.
    sub_parser = main_parser.add_subparsers(dest="action", help="Run disco <action> --help for help")

    sub_parser.add_parser(name="list", description="Lists the supported distributions.")

    locate_parser = sub_parser.add_parser(
        name="locate", description="Prints the request target of a distribution for the filters."
    )
    _add_filter_arguments(locate_parser)

    parse_parser = sub_parser.add_parser(name="parse", description="Parses an already fetched payload.")
    _add_filter_arguments(parse_parser)
    parse_parser.add_argument("-p", "--payload", required=True, type=str, help="Path to the payload file.")
    parse_parser.add_argument(
        "-pk",
        "--payload-kind",
        choices=[kind.value for kind in PayloadKind],
        default=None,
        help="The kind of the payload. Files ending with .json are JSON, anything else is HTML.",
    )
    parse_parser.add_argument(
        "--prior",
        default="",
        type=str,
        help="Path to the records of an earlier parse, used with --only-new.",
    )
    parse_parser.add_argument(
        "--only-new",
        action="store_true",
        help="Drop the records already present in the --prior records.",
    )

    fetch_parser = sub_parser.add_parser(name="fetch", description="Fetches and parses the payload of a distribution.")
    _add_filter_arguments(fetch_parser)

    # Dump the default values.
    sub_parser.add_parser(name="dump-defaults", description="Dumps the defaults.ini file to the output directory.")

    args = main_parser.parse_args(argv)

    if not args.action:
        main_parser.print_help()
        sys.exit(os.EX_USAGE)

    if args.verbose:
        log_level = logging.DEBUG
        log_format = "%(asctime)s [%(name)s:%(funcName)s:%(lineno)d] [%(levelname)s] %(message)s"
    else:
        log_level = logging.INFO
        log_format = "%(asctime)s [%(levelname)s] %(message)s"

    # Set global logging config. We need the stream handler for the initial
    # output directory checking log messages.
    st_handler = logging.StreamHandler(sys.stdout)
    logging.basicConfig(format=log_format, handlers=[st_handler], force=True, level=log_level)

    # Set the output directory.
    if not args.output_dir:
        logger.error("The output path cannot be empty. Exiting ...")
        sys.exit(os.EX_USAGE)

    if os.path.isfile(args.output_dir):
        logger.error("The output directory already exists. Exiting ...")
        sys.exit(os.EX_USAGE)

    if os.path.isdir(args.output_dir):
        logger.info("Setting the output directory to %s", os.path.relpath(args.output_dir, os.getcwd()))
    else:
        logger.info("No directory at %s. Creating one ...", os.path.relpath(args.output_dir, os.getcwd()))
        os.makedirs(args.output_dir)

    # Add file handler to the root logger. Remove stream handler from the
    # root logger to prevent dependencies printing logs to stdout.
    debug_log_path = os.path.join(args.output_dir, "debug.log")
    log_file_handler = logging.FileHandler(debug_log_path, "w")
    log_file_handler.setFormatter(logging.Formatter(log_format))
    logging.getLogger().removeHandler(st_handler)
    logging.getLogger().addHandler(log_file_handler)

    # Add StreamHandler to the disco logger only.
    disco_logger = logging.getLogger("disco")
    disco_logger.addHandler(st_handler)

    logger.info("The logs will be stored in debug.log")

    # Load the default values from defaults.ini files.
    if not load_defaults(args.defaults_path):
        logger.error("Exiting because the defaults configuration could not be loaded.")
        sys.exit(os.EX_NOINPUT)

    perform_action(args)


if __name__ == "__main__":
    main()
