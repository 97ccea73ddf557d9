"""Configuration inspection commands."""

from __future__ import annotations

from typing import Any

import typer

from core.config import Settings, get_settings
from .shared import emit_json


app = typer.Typer(
    help="Show effective configuration",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
    no_args_is_help=True,
)


def _env_name(field_name: str) -> str:
    alias = Settings.model_fields[field_name].validation_alias
    return alias if isinstance(alias, str) else field_name.upper()


@app.command("show", help="Show current settings and the resolved extension list")
def show_config(
    json_out: bool = typer.Option(True, "--json/--no-json", help="Output JSON"),
) -> None:
    settings = get_settings()
    payload = settings.model_dump()
    if json_out:
        payload["extensions"] = list(settings.extensions)
        emit_json(payload)
        return
    for key, value in payload.items():
        typer.echo(f"{_env_name(key)}={'' if value is None else value}")


@app.command("diff", help="Show settings that differ from defaults")
def diff_config() -> None:
    current = get_settings().model_dump()
    diff: dict[str, dict[str, Any]] = {}
    for name, field in Settings.model_fields.items():
        value = current.get(name)
        if value != field.default:
            diff[name] = {"env": _env_name(name), "value": value, "default": field.default}
    emit_json(diff)


__all__ = ["app"]
