"""Device Registration database management CLI.

Provides commands to create and drop the registration schema and to inspect
registered devices.

Usage:
    python src/manage.py setup-db                 # Create tables
    python src/manage.py drop-db                  # Drop tables
    python src/manage.py list-devices --count 20  # Print up to 20 tokens
"""

import argparse
import json
import sys


def setup_database():
    """Create the registration schema."""
    from registration.domain import registration
    from registration.utils.db import setup_db

    print("Initializing registration domain...")
    registration.init()
    print("Creating registration database schema...")
    setup_db(registration)
    print("Done.")


def drop_database():
    """Drop the registration schema."""
    from registration.domain import registration
    from registration.utils.db import drop_db

    print("Initializing registration domain...")
    registration.init()
    print("Dropping registration database schema...")
    drop_db(registration)
    print("Done.")


def list_devices(count):
    """Print up to ``count`` registered devices as JSON lines.

    Stdout carries only the JSON lines so the output can be piped; logging
    goes to stderr.
    """
    from registration.utils.logging import configure_logging

    configure_logging(stream=sys.stderr)

    from registration.device.directory import RegistrationDirectory
    from registration.device.repository import build_store
    from registration.domain import registration

    registration.init()
    with registration.domain_context():
        directory = RegistrationDirectory(build_store(registration))
        for record in directory.list(count):
            print(json.dumps(record.to_wire()))


def non_negative_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def main(argv=None):
    parser = argparse.ArgumentParser(description="Device Registration database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    list_parser = subparsers.add_parser("list-devices", help="Print registered devices")
    list_parser.add_argument(
        "--count",
        type=non_negative_int,
        default=20,
        help="Maximum devices to print (default: 20)",
    )

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "list-devices":
        list_devices(args.count)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
