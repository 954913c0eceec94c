"""Utility script for inserting administrator accounts."""

from __future__ import annotations

import argparse
import getpass
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.security import create_password_hash
from app.db import SessionLocal
from app.models.admin import Administrator
from app.repositories.admin import AdministratorRepository

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_PASSWORD = "admin123"


def create_admin_user(session: Session, *, username: str, password: str) -> Administrator:
    """Persist an administrator with a securely hashed password."""

    repository = AdministratorRepository()
    normalized_username = username.strip()
    if not normalized_username:
        raise ValueError("Username must not be empty")
    existing = repository.get_by_username(session, normalized_username)
    if existing is not None:
        raise ValueError(f"An administrator named {normalized_username!r} already exists")

    admin = Administrator(
        username=normalized_username,
        hashed_password=create_password_hash(password),
    )
    repository.add(session, admin)
    session.commit()
    session.refresh(admin)
    return admin


def ensure_default_admin(
    session: Session, *, username: str, password: str
) -> Administrator | None:
    """Create the bootstrap administrator unless any administrator exists.

    Returns the new account, or ``None`` when nothing had to be created.
    """

    repository = AdministratorRepository()
    if repository.count(session) > 0:
        logger.info("Administrator account present; skipping bootstrap")
        return None

    try:
        admin = create_admin_user(session, username=username, password=password)
    except IntegrityError:
        # Another worker bootstrapped concurrently
        session.rollback()
        logger.info("Administrator bootstrapped by another process")
        return None

    logger.info("Default administrator %r created", admin.username)
    if password == DEFAULT_ADMIN_PASSWORD:
        logger.warning(
            "Default administrator uses the well-known default password; change "
            "EMS_BOOTSTRAP_ADMIN_PASSWORD before exposing the service"
        )
    return admin


def _resolve_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create an administrator account")
    parser.add_argument("--username", help="Username for the administrator")
    parser.add_argument(
        "--password",
        help="Password for the administrator (omit to securely prompt)",
    )
    parser.add_argument(
        "--prompt",
        action="store_true",
        help="Force interactive prompts for username and password",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _resolve_cli_args(argv)

    username = args.username
    password = args.password

    if args.prompt or not username:
        username = input("Admin username: ").strip()
    if not username:
        raise SystemExit("Username must be provided")

    if args.prompt or password is None:
        password = getpass.getpass("Admin password: ")
    if not password:
        raise SystemExit("Password must be provided")

    with SessionLocal() as session:
        try:
            admin = create_admin_user(session, username=username, password=password)
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc
        except IntegrityError as exc:
            session.rollback()
            raise SystemExit("Failed to create administrator due to database constraint") from exc

    print(f"Administrator created with id={admin.id}")
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation only
    raise SystemExit(main())
