"""Main CLI application using Cyclopts.

The CLI builds an orchestrator from Config and talks to the identity
service configured under SOCIALID_BACKEND__URL.
"""

import cyclopts
import logfire

from socialid.cli.commands import account, providers

logfire.instrument_httpx()

app = cyclopts.App(
    name="socialid",
    help="Social authentication - CLI",
)

app.command(providers.app, name="providers")
app.command(account.login, name="login")
app.command(account.register, name="register")
app.command(account.recover, name="recover")
