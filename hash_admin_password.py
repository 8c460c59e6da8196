#!/usr/bin/env python3
"""
Generate the administrator password hash for the StreamStore API.

The script prints a PBKDF2-HMAC-SHA256 hash in the "salthex$hashhex"
format expected by the ADMIN_PASSWORD_HASH environment variable.  The
password itself is never stored.

Usage:
    python hash_admin_password.py --password "NewStrongPass!234"
    python hash_admin_password.py --env   # prints ADMIN_PASSWORD_HASH=...

If --password is omitted, you will be prompted to enter it securely.
"""

import argparse
import getpass
import sys

from streamstore_api.app.core.security import hash_password, verify_password


def main():
    ap = argparse.ArgumentParser(description="Hash the StreamStore admin password.")
    ap.add_argument("--password", help="New password. If omitted, you'll be prompted securely.")
    ap.add_argument("--env", action="store_true", help="Print as an ADMIN_PASSWORD_HASH=... line")
    args = ap.parse_args()

    new_password = args.password
    if not new_password:
        new_password = getpass.getpass("Enter NEW admin password: ")
        if new_password and getpass.getpass("Repeat password: ") != new_password:
            print("[!] Passwords do not match.", file=sys.stderr)
            sys.exit(1)
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        sys.exit(1)

    hashed = hash_password(new_password)
    if not verify_password(new_password, hashed):
        print("[!] Hash verification failed.", file=sys.stderr)
        sys.exit(2)

    if args.env:
        print(f"ADMIN_PASSWORD_HASH={hashed}")
    else:
        print(hashed)


if __name__ == "__main__":
    main()
