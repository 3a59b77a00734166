"""Command: bind FIELD=VALUE pairs onto a freshly constructed model."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any

import click

from formbind.commands._base import FormbindCommand

if TYPE_CHECKING:
    from formbind.commands._context import AppContext


def load_model_class(target: str) -> type:
    """Import ``package.module:ClassName`` and return the class."""
    module_name, sep, class_name = target.partition(":")
    if not sep or not module_name or not class_name:
        raise click.BadParameter("expected 'package.module:ClassName'", param_hint="TARGET")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise click.BadParameter(f"cannot import '{module_name}': {exc}") from exc
    obj: Any = module
    for part in class_name.split("."):
        obj = getattr(obj, part, None)
        if obj is None:
            raise click.BadParameter(f"'{module_name}' has no attribute '{class_name}'")
    if not isinstance(obj, type):
        raise click.BadParameter(f"'{target}' is not a class")
    return obj


def parse_fields(pairs: tuple[str, ...]) -> dict[str, Any]:
    """Turn ``FIELD=VALUE`` arguments into a submission mapping.

    Repeated fields collect into a list, like repeated form inputs.
    """
    fields: dict[str, Any] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise click.BadParameter(f"expected FIELD=VALUE, got '{pair}'", param_hint="FIELDS")
        if name in fields:
            existing = fields[name]
            fields[name] = [*existing, value] if isinstance(existing, list) else [existing, value]
        else:
            fields[name] = value
    return fields


@click.command(
    cls=FormbindCommand,
    examples="""\
  formbind bind myapp.forms:Signup name=Ada age=36
  formbind bind myapp.forms:Signup --strict --bind name name=Ada age=36
  formbind bind myapp.forms:Filters tags=red tags=blue
  formbind bind myapp.forms:Settings --web _newsletter=on
  formbind --json bind myapp.forms:Signup age=abc""",
)
@click.argument("target")
@click.argument("fields", nargs=-1)
@click.option(
    "--strict/--optimistic",
    default=None,
    help="Strict binds only --bind paths; optimistic creates bindings on demand.",
)
@click.option(
    "--bind",
    "explicit",
    multiple=True,
    help="Configure an explicit binding for a property path (repeatable).",
)
@click.option(
    "--web", is_flag=True, help="Apply HTML form conventions (_field markers, !defaults)."
)
@click.pass_obj
def bind(
    app: AppContext,
    target: str,
    fields: tuple[str, ...],
    strict: bool | None,
    explicit: tuple[str, ...],
    web: bool,
) -> None:
    """Bind FIELD=VALUE pairs onto a new TARGET instance and show the results."""
    from formbind.binding import BindingConfiguration, GenericBinder, WebBinder
    from formbind.domain.errors import InvalidPropertyPathError

    model_cls = load_model_class(target)
    try:
        model = model_cls()
    except Exception as exc:
        raise click.ClickException(
            f"Cannot construct {model_cls.__name__}() without arguments: {exc}"
        ) from exc

    binder_cls = WebBinder if web else GenericBinder
    binder = binder_cls.from_settings(model, app.settings, registry=app.registry)
    if strict is not None:
        binder.set_strict(strict)

    for path in explicit:
        try:
            binder.configure_binding(BindingConfiguration(path))
        except InvalidPropertyPathError as exc:
            raise click.ClickException(str(exc)) from exc

    submission = parse_fields(fields)
    results = binder.bind(binder.create_user_values(submission))
    app.emit(results, model=model)
