#!/usr/bin/env python3
"""Create an admin account.

Usage:
    python scripts/create_admin.py --email admin@example.com --name Admin

The password is read from --password or prompted for.
"""

import argparse
import asyncio
import getpass
import sys

import logfire

from blog.config import Settings
from blog.domain.error import ConflictError
from blog.domain.service import AuthService
from blog.domain.value import Email, UserRole
from blog.persistence.database import create_engine, create_session_factory
from blog.persistence.repository import (
    PostgresLoginAttemptRepository,
    PostgresUserRepository,
)
from blog.util.observability import configure_logfire
from blog.util.password import check_password_length


async def create_admin(settings: Settings, email: str, name: str, password: str) -> int:
    engine = create_engine(settings)
    session_factory = create_session_factory(engine)
    try:
        async with session_factory() as session:
            auth_service = AuthService(
                user_repository=PostgresUserRepository(session),
                login_attempt_repository=PostgresLoginAttemptRepository(
                    session_factory
                ),
                auth_settings=settings.auth,
            )
            try:
                user = await auth_service.register(
                    email=Email(email), password=password, name=name, role=UserRole.ADMIN
                )
            except ConflictError as e:
                logfire.error("Admin not created", error=str(e))
                return 1
            await session.commit()
            logfire.info("Admin created", user_id=str(user.id), email=email)
            return 0
    finally:
        await engine.dispose()


def main() -> int:
    parser = argparse.ArgumentParser(description="Create an admin account")
    parser.add_argument("--email", required=True)
    parser.add_argument("--name", required=True)
    parser.add_argument("--password", help="Prompted for when omitted")
    args = parser.parse_args()

    password = args.password or getpass.getpass("Password: ")
    if len(password) < 8:
        parser.error("password must be at least 8 characters")
    try:
        check_password_length(password)
    except ValueError as e:
        parser.error(str(e))

    settings = Settings()
    configure_logfire(settings)
    return asyncio.run(create_admin(settings, args.email, args.name, password))


if __name__ == "__main__":
    sys.exit(main())
