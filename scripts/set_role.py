#!/usr/bin/env python3
"""
Change a user's role directly in the users file.

The HTTP API only ever registers volunteers; promoting someone to organizer
is an administrative step done with this script.

Usage:
  python scripts/set_role.py --email ana@example.com [--role organizer] [--file data/users.json]
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Make the api package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core.config import get_settings  # noqa: E402
from api.core.logging_config import setup_logging  # noqa: E402
from api.domain.records import ORGANIZER_ROLE, User  # noqa: E402
from api.repositories.json_storage import JsonStore  # noqa: E402

logger = logging.getLogger("set_role")


def set_role(store: JsonStore, email: str, role: str) -> User:
    """Rewrite the role of the user with exactly this email."""
    with store.edit() as records:
        for record in records:
            if isinstance(record, dict) and record.get("email") == email:
                record["role"] = role
                return User.from_dict(record)
        raise LookupError(f"User '{email}' does not exist")


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Change the role of a user")
    ap.add_argument("--email", required=True, help="User email (exact match)")
    ap.add_argument("--role", default=ORGANIZER_ROLE, help="New role (default: organizer)")
    ap.add_argument("--file", help="Users file (default: USERS_FILE)")
    args = ap.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    email = (args.email or "").strip()
    role = (args.role or "").strip()
    if not email or not role:
        raise SystemExit("Email and role are required")

    store = JsonStore(args.file or settings.users_file)
    user = set_role(store, email, role)
    logger.info("%s is now %s (%s)", user.email, user.role, store.path)


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
