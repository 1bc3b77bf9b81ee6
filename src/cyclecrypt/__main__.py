"""Command-line entry point: ``python -m cyclecrypt``."""

import argparse
import logging
import secrets
import sys

from pydantic import ValidationError

from cyclecrypt.cipher import StringEncryptor
from cyclecrypt.exceptions import ConfigurationError, FormatError, IntegrityError
from cyclecrypt.logging import configure_logging
from cyclecrypt.settings import get_settings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_BAD_TOKEN = 3

_SECRET_BYTES = 32


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cyclecrypt", description="Encrypt and decrypt strings with ENCRYPTION_SECRET.")
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encrypt", help="Encrypt a value and print the hex token")
    enc.add_argument("value", nargs="?", help="Plaintext (read from stdin when omitted)")

    dec = sub.add_parser("decrypt", help="Decrypt a hex token and print the plaintext")
    dec.add_argument("token", nargs="?", help="Token (read from stdin when omitted)")

    sub.add_parser("check", help="Verify ENCRYPTION_SECRET is configured and usable")
    sub.add_parser("generate-secret", help="Print a random value suitable for ENCRYPTION_SECRET")
    return parser


def _read_input(value: str | None) -> str:
    """Return the positional argument, or stdin with the trailing newline removed."""
    if value is not None:
        return value
    return sys.stdin.read().removesuffix("\n")


def _check(encryptor: StringEncryptor) -> None:
    probe = secrets.token_hex(8)
    if encryptor.decrypt(encryptor.encrypt(probe)) != probe:
        raise IntegrityError()


def main(argv: list[str] | None = None) -> int:
    """Run the command-line tool and return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as exc:
        configure_logging()
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors())
        logger.error(
            "Invalid configuration: %s", fields, extra={"operation": args.command, "error": "ValidationError"}
        )
        return EXIT_CONFIG_ERROR
    configure_logging(settings.LOG_LEVEL)

    if args.command == "generate-secret":
        print(secrets.token_urlsafe(_SECRET_BYTES))
        return EXIT_OK

    try:
        encryptor = StringEncryptor(settings.encryption_secret)
        if args.command == "encrypt":
            print(encryptor.encrypt(_read_input(args.value)))
        elif args.command == "decrypt":
            print(encryptor.decrypt(_read_input(args.token)))
        else:
            _check(encryptor)
            logger.info("Encryption secret is configured", extra={"operation": "check"})
    except ConfigurationError as exc:
        logger.error("%s", exc, extra={"operation": args.command, "error": type(exc).__name__})
        return EXIT_CONFIG_ERROR
    except (FormatError, IntegrityError) as exc:
        logger.error("%s", exc, extra={"operation": args.command, "error": type(exc).__name__})
        return EXIT_BAD_TOKEN
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
