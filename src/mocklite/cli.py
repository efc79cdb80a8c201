from __future__ import annotations

import importlib
import logging
from typing import Annotated, Any

import typer

from .core import mock
from .defaults import empty_value_for, resolve_return_type
from .errors import MockCreationError
from .parser.logger import LoggerParser
from .proxy import iter_methods, target_of
from .types import MethodSignature

app = typer.Typer(
    name="mocklite",
    no_args_is_help=True,
    help="Inspect mock stand-ins and run the mocklite demo scenario.",
)

Verbosity = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase log verbosity (repeat for more detail).",
    ),
]


def _configure_logging(verbose: int) -> logging.Logger:
    logger = LoggerParser().convert(verbose, None, None)
    if not logging.getLogger().handlers:
        logging.basicConfig(format="%(name)s %(levelname)s: %(message)s")
    return logger


def _import_target(path: str) -> Any:
    module_name, sep, attr_path = path.partition(":")
    if not sep or not attr_path:
        raise typer.BadParameter(
            f"expected 'package.module:ClassName', got {path!r}", param_hint="TARGET"
        )
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise typer.BadParameter(str(exc), param_hint="TARGET") from exc
    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise typer.BadParameter(
                f"{module_name!r} has no attribute {attr_path!r}", param_hint="TARGET"
            ) from exc
    return target


@app.command()
def describe(
    target: Annotated[str, typer.Argument(help="Class to mock, as module:ClassName.")],
    verbose: Verbosity = 0,
) -> None:
    """List the methods a mock of TARGET intercepts and their unstubbed results."""

    _configure_logging(verbose)
    target_type = _import_target(target)
    try:
        stand_in = mock(target_type)
    except MockCreationError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"{stand_in!r} ({target_of(stand_in).__qualname__})")
    for name, owner, func in iter_methods(target_type):
        signature = MethodSignature.from_function(
            owner, name, func, return_type=resolve_return_type(func)
        )
        default = empty_value_for(signature.return_type)
        typer.echo(f"  {signature} -> {default!r}")


@app.command()
def demo(verbose: Verbosity = 0) -> None:
    """Run the registry caching scenario against a mock registry."""

    from .demo import run_demo

    _configure_logging(verbose)
    if not run_demo(typer.echo):
        raise typer.Exit(code=1)


def main() -> None:  # pragma: no cover - console script entry
    app()
