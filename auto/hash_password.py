#!/usr/bin/env python3
"""
Hash Admin Password Script.

Prints the ``ADMIN_HASHED_PASSWORD`` line for ``.env``. The admin identity is
configured, not stored, so this is the only setup step for credentials.

Usage:
    uv run python auto/hash_password.py
    uv run python auto/hash_password.py --password Secret123 --level high

Interactive Mode (no --password):
    Script prompts for the password twice without echoing it.
"""

from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter
from getpass import getpass
from sys import exit as sys_exit

from blog_cms.configs.settings import MIN_PASSWORD_LENGTH
from blog_cms.managers.password_manager import PasswordHasher


def parse_args() -> Namespace:
    parser = ArgumentParser(
        description="Hash the admin password for ADMIN_HASHED_PASSWORD.",
        formatter_class=RawDescriptionHelpFormatter,
    )
    parser.add_argument("--password", help="Password to hash (prompted when omitted)")
    parser.add_argument(
        "--level",
        choices=["low", "medium", "high"],
        default=None,
        help="Argon2 cost level (defaults to PASSWORD_SECURITY_LEVEL)",
    )
    return parser.parse_args()


def input_password() -> str:
    """Prompt until a long-enough, confirmed password is entered."""
    while True:
        password = getpass("Enter password: ")
        if len(password) < MIN_PASSWORD_LENGTH:
            print(f"❌ Password must be at least {MIN_PASSWORD_LENGTH} characters.")
            continue
        if getpass("Confirm password: ") != password:
            print("❌ Passwords do not match.")
            continue
        return password


def main() -> int:
    args = parse_args()
    password = args.password or input_password()
    if len(password) < MIN_PASSWORD_LENGTH:
        print(f"❌ Password must be at least {MIN_PASSWORD_LENGTH} characters.")
        return 1

    hashed = PasswordHasher(args.level).hash(password)
    print("\n✅ Add this line to your .env:")
    print(f"ADMIN_HASHED_PASSWORD='{hashed}'")
    return 0


if __name__ == "__main__":
    sys_exit(main())
