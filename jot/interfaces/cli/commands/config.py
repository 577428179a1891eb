"""Show and change the saved jot configuration."""

from typing import Optional

import typer

from jot.global_config import get_config_dir, get_global_config, save_global_config


def config(
    name: Optional[str] = typer.Option(None, "--name", help="What jot calls itself"),
    data_file: Optional[str] = typer.Option(
        None, "--set-data-file", help="Default task file for future runs"
    ),
    log_dir: Optional[str] = typer.Option(None, "--set-log-dir", help="Directory for jot.log"),
) -> None:
    """Print the configuration, saving any values given first."""
    current = get_global_config()
    changes = {
        key: value
        for key, value in (
            ("assistant_name", name),
            ("data_file", data_file),
            ("log_dir", log_dir),
        )
        if value is not None
    }
    if changes:
        current = current.model_copy(update=changes)
        save_global_config(current)

    typer.echo(f"Config directory: {get_config_dir()}")
    for key, value in current.model_dump().items():
        typer.echo(f"  {key}: {value or '(default)'}")


def register(app: typer.Typer) -> None:
    app.command("config")(config)
