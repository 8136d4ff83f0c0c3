"""CLI entry point: registers all subcommands."""

import typer

app = typer.Typer(
    name="event-fields",
    help="event-fields - Field model inference for event interfaces",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .infer import infer as _infer, version as _version  # noqa: F401, E402


def main() -> None:
    app()
