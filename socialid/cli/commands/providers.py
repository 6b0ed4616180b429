"""Providers command for listing configured providers."""

import asyncio

import cyclopts

from socialid.cli.console import get_console
from socialid.cli.session import open_session
from socialid.domain.social.model.value import BuiltinProvider

app = cyclopts.App(name="providers", help="List configured providers")


@app.default
def providers() -> None:
    """Show every registered provider and whether it can be used."""
    asyncio.run(_providers())


async def _providers() -> None:
    console = get_console()
    async with open_session() as (orchestrator, _, _):
        rows = []
        for provider_id in orchestrator.registry.provider_ids():
            try:
                name = BuiltinProvider(provider_id).name.lower()
            except ValueError:
                name = "custom"
            available = orchestrator.is_available(provider_id)
            rows.append({
                "id": provider_id,
                "name": name,
                "available": "[green]yes[/green]" if available else "[red]no[/red]",
            })
    if not rows:
        console.info("No providers configured")
        return
    console.table(rows, [("id", "Id"), ("name", "Provider"), ("available", "Available")])
