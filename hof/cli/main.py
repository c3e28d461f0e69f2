"""Main CLI application using Cyclopts."""

import cyclopts

from hof.cli.commands import admin, serve

app = cyclopts.App(
    name="hof",
    help="Hall of Fame - security reporter acknowledgements",
)

app.command(serve.app, name="serve")
app.command(admin.app, name="admin")
