from dishka import AsyncContainer, make_async_container

from socialid.config import Config
from socialid.infrastructure.social.di import SocialInfraProvider


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_async_container(
        SocialInfraProvider(),
        context={Config: config},
    )
