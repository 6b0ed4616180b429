"""Login, register and recover commands."""

import asyncio
import sys

from socialid.cli.console import get_console
from socialid.cli.session import login as run_login
from socialid.cli.session import open_session
from socialid.domain.shared.error import SocialIdError
from socialid.domain.social.model.profile import AuthProfile, UserProfile
from socialid.domain.social.model.value import BuiltinProvider


def login(*, username: str, password: str) -> None:
    """Log in on the identity service.

    Args:
        username: Account identifier
        password: Account password
    """
    asyncio.run(_login(AuthProfile(identifier=username, password=password)))


async def _login(profile: AuthProfile) -> None:
    console = get_console()
    async with open_session() as (orchestrator, _, _):
        try:
            with console.status("Logging in..."):
                result = await run_login(orchestrator, BuiltinProvider.NATIVE, profile)
        except SocialIdError as e:
            console.error(e.message)
            sys.exit(1)
    if result.error is not None:
        console.error(result.error.message, hint=f"code: {result.error.code}")
        sys.exit(1)
    console.success("Logged in")
    console.identity(result.unwrap())


def register(
    *,
    username: str,
    password: str,
    name: str | None = None,
    email: str | None = None,
) -> None:
    """Create an account on the identity service.

    Args:
        username: Account identifier
        password: Account password
        name: Display name
        email: Contact email
    """
    auth_profile = AuthProfile(identifier=username, password=password)
    user_profile = UserProfile(display_name=name, email=email)
    asyncio.run(_register(auth_profile, user_profile))


async def _register(auth_profile: AuthProfile, user_profile: UserProfile) -> None:
    console = get_console()
    async with open_session() as (orchestrator, _, _):
        try:
            with console.status("Registering..."):
                profile = await orchestrator.register(auth_profile, user_profile)
        except SocialIdError as e:
            console.error(e.message, hint=f"code: {e.code}")
            sys.exit(1)
    console.success("Registered")
    console.profile(profile)


def recover() -> None:
    """Fire the recovery hook once and wait for the silent login."""
    asyncio.run(_recover())


async def _recover() -> None:
    console = get_console()
    async with open_session() as (_, host, lifecycle):
        lifecycle.fire()
        pending = host.pending
        await host.drain()
    if pending:
        console.success("Recovery login attempted")
    else:
        console.info("Nothing to recover")
