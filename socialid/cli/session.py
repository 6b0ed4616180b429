"""Runs CLI commands against a container-built orchestrator."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from socialid.application.di import create_container
from socialid.config import Config, configure_logging
from socialid.domain.social.model.profile import AuthProfile, IdentifiedUser
from socialid.domain.social.model.result import AuthResult
from socialid.domain.social.model.value import ProviderId
from socialid.domain.social.service.orchestrator import AuthenticationOrchestrator
from socialid.infrastructure.social.host import AsyncioHostContext, InProcessLifecycleHook


@asynccontextmanager
async def open_session() -> AsyncIterator[
    tuple[AuthenticationOrchestrator, AsyncioHostContext, InProcessLifecycleHook]
]:
    config = Config()
    configure_logging(config.logging)
    container = create_container(config)
    try:
        orchestrator = await container.get(AuthenticationOrchestrator)
        host = await container.get(AsyncioHostContext)
        lifecycle = await container.get(InProcessLifecycleHook)
        yield orchestrator, host, lifecycle
        await host.drain()
    finally:
        await container.close()


async def login(
    orchestrator: AuthenticationOrchestrator,
    provider_id: ProviderId,
    auth_profile: AuthProfile | None = None,
) -> AuthResult[IdentifiedUser]:
    """Log in and wait for the callback."""
    future: asyncio.Future[AuthResult[IdentifiedUser]] = asyncio.get_running_loop().create_future()
    orchestrator.login_with_identity(provider_id, auth_profile, future.set_result)
    return await future
