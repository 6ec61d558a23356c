"""
CLI: check identifiers and validate AnonCreds documents loaded from files.
"""
import argparse
import logging
import sys
from typing import List, Optional, Sequence
from anoncreds_validation.config import LOG_FILE, LOG_LEVEL, LOG_LEVELS, resolve_log_level
from anoncreds_validation.core.exceptions import AnonCredsCliError, ValidationError
from anoncreds_validation.core.io import ConsoleIO
from anoncreds_validation.core.models import (
    AnonCredsSchema,
    CredentialDefinition,
    load_validated,
)
from anoncreds_validation.core.patterns import is_legacy_identifier, is_uri_identifier
from .logs import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)

KINDS = ("any", "uri", "legacy")

EXIT_OK = 0
EXIT_INVALID = 1


def classify(identifier: str) -> str:
    """
    Name the format an identifier matches.

    Args:
        identifier: Candidate string.

    Returns:
        "uri", "legacy" or "invalid".
    """
    if is_uri_identifier(identifier):
        return "uri"
    if is_legacy_identifier(identifier):
        return "legacy"
    return "invalid"


def check_identifier(identifier: str, kind: str = "any") -> bool:
    """True if the identifier is of an accepted format for ``kind``."""
    found = classify(identifier)
    if found == "invalid":
        return False
    return kind == "any" or kind == found


def _read_file(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise AnonCredsCliError(f"Cannot read {path}: {e}") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="anoncreds-validate",
        description="Validate AnonCreds identifiers and documents",
    )
    parser.add_argument("identifiers", nargs="*", help="Identifiers to check")
    parser.add_argument("--kind", choices=KINDS, default="any", help="Identifier format to accept")
    parser.add_argument("--schema", action="append", default=[], metavar="FILE",
                        help="Schema JSON file to validate (repeatable)")
    parser.add_argument("--cred-def", action="append", default=[], metavar="FILE",
                        help="Credential definition JSON file to validate (repeatable)")
    parser.add_argument("--log-level", default=resolve_log_level(LOG_LEVEL), choices=LOG_LEVELS)
    parser.add_argument("--log-file", default=LOG_FILE or None, help="Also log to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None, io: Optional[ConsoleIO] = None) -> int:
    """
    Entry point for the CLI.

    Returns:
        Process exit status: 0 when everything is valid, 1 otherwise.
    """
    io = io or ConsoleIO()
    parser = build_parser()
    args = parser.parse_args(argv)
    if not (args.identifiers or args.schema or args.cred_def):
        parser.error("nothing to validate: pass identifiers, --schema or --cred-def")

    setup_logging(args.log_level, args.log_file)
    failures: List[str] = []
    try:
        for identifier in args.identifiers:
            found = classify(identifier)
            if check_identifier(identifier, args.kind):
                io.print(f"{identifier}: {found}")
            else:
                io.print(f"{identifier}: invalid")
                failures.append(identifier)

        documents = [(AnonCredsSchema, p) for p in args.schema]
        documents += [(CredentialDefinition, p) for p in args.cred_def]
        for model_cls, path in documents:
            try:
                load_validated(model_cls, _read_file(path))
            except (ValidationError, AnonCredsCliError) as e:
                logger.info("Validation of %s failed", path)
                io.print(f"{path}: invalid ({str(e) or 'no details'})")
                failures.append(path)
            else:
                io.print(f"{path}: valid {model_cls.__name__}")
    finally:
        shutdown_logging()

    if failures:
        io.error(f"{len(failures)} item(s) failed validation")
        return EXIT_INVALID
    return EXIT_OK


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
