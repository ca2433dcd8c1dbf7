#!/usr/bin/env python3
"""Provision a profile and print a session token for it.

Operator tool for bootstrapping administrators and for environments
without an external identity provider. The token is signed with the
configured ``jwt_secret`` and is sent by clients as the ``auth_token``
cookie.
"""

import argparse
import asyncio
import sys
from uuid import UUID, uuid4

import logfire

from linkboard.config import Settings
from linkboard.domain.service import JWTService, ProfileService
from linkboard.domain.value import UserId
from linkboard.util.di.container import create_container
from linkboard.util.logging import setup_logging
from linkboard.util.observability import configure_logfire


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("display_name", help="Public name for the profile")
    parser.add_argument(
        "--user-id",
        type=UUID,
        default=None,
        help="Identity to provision (a new one is generated when omitted)",
    )
    parser.add_argument(
        "--admin",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Grant or revoke moderation rights (unchanged when omitted)",
    )
    return parser.parse_args(argv)


async def issue_token(user_id: UUID, display_name: str, is_admin: bool | None) -> str:
    """Save the profile and sign a session token for it."""
    container = create_container()
    try:
        async with container() as request_container:
            profile_service = await request_container.get(ProfileService)
            jwt_service = await request_container.get(JWTService)

            profile = await profile_service.save_profile(
                UserId(user_id), display_name, is_admin=is_admin
            )
            return jwt_service.create_token(str(profile.id))
    finally:
        await container.close()


def main() -> int:
    """Provision the profile and write its token to stdout."""
    args = parse_args()
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    user_id = args.user_id or uuid4()

    try:
        token = asyncio.run(issue_token(user_id, args.display_name, args.admin))
    except Exception as e:
        logfire.error(
            "Token issuance failed",
            user_id=str(user_id),
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    logfire.info("Session token issued", user_id=str(user_id))
    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
