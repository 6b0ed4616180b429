"""DI provider for social infrastructure."""

from collections.abc import AsyncIterator, Iterator

import httpx
from dishka import Scope, alias, from_context, provide

from socialid.application.builder import Builder
from socialid.config import Config
from socialid.domain.social.port.host import HostContext, LifecycleHook
from socialid.domain.social.port.identity_gateway import IdentityGateway
from socialid.domain.social.service.orchestrator import AuthenticationOrchestrator
from socialid.infrastructure.social.gateway import HttpIdentityGateway
from socialid.infrastructure.social.host import AsyncioHostContext, InProcessLifecycleHook
from socialid.util.di.base import Provider


class SocialInfraProvider(Provider):
    """DI provider for the orchestrator and its adapters."""

    config = from_context(provides=Config, scope=Scope.APP)

    lifecycle = provide(InProcessLifecycleHook)
    lifecycle_port = alias(source=InProcessLifecycleHook, provides=LifecycleHook)
    host_port = alias(source=AsyncioHostContext, provides=HostContext)

    @provide
    async def get_http_client(self, config: Config) -> AsyncIterator[httpx.AsyncClient]:
        """Shared HTTP client for identity service calls (connection pooling)."""
        client = httpx.AsyncClient(timeout=httpx.Timeout(config.backend.timeout))
        yield client
        await client.aclose()

    @provide
    def get_host_context(self, config: Config) -> AsyncioHostContext:
        return AsyncioHostContext(device_alias=config.device_alias)

    @provide
    def get_identity_gateway(
        self, config: Config, http_client: httpx.AsyncClient
    ) -> IdentityGateway:
        return HttpIdentityGateway(config.backend, http_client)

    @provide
    def get_orchestrator(
        self,
        config: Config,
        host: HostContext,
        gateway: IdentityGateway,
        lifecycle: LifecycleHook,
    ) -> Iterator[AuthenticationOrchestrator]:
        """Build the orchestrator from config; providers are released on close."""
        orchestrator = Builder.from_config(config, host, gateway, lifecycle).build()
        yield orchestrator
        orchestrator.release()
