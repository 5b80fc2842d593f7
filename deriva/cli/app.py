"""
Aplicación CLI de deriva.

Solo compone comandos; la lógica vive en core y providers.
"""

import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from deriva import __version__
from deriva.core.diff import Comparator, DiffCommand
from deriva.core.errors import DerivaError, MaskingContractError
from deriva.core.infra.contracts import LiveStore
from deriva.core.loader import load_resources
from deriva.core.settings import DiffSettings, load_settings
from deriva.providers import HttpStore, SnapshotStore

# Códigos de salida: 10 = diferencias encontradas (no es un fallo operativo)
EXIT_FAILURE = 1
EXIT_DIFF_FOUND = 10

app = typer.Typer(
    name="deriva",
    help="deriva - Detecta drift entre recursos declarados y el estado real",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    root = logging.getLogger("deriva")
    root.handlers.clear()
    handler = RichHandler(console=err_console, show_time=False, show_path=False)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False


def build_store(settings: DiffSettings) -> LiveStore:
    """Elige el store: snapshot en disco o API HTTP."""
    if settings.snapshot_dir is not None:
        return SnapshotStore.from_path(settings.snapshot_dir, default_namespace=settings.default_namespace)
    if settings.store_url:
        return HttpStore(
            settings.store_url,
            token=settings.store_token,
            timeout=settings.store_timeout,
            verify=settings.store_verify,
        )
    raise DerivaError("No hay store configurado: usa --snapshot o --server (o DERIVA_SNAPSHOT_DIR / DERIVA_STORE_URL)")


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]❌ {escape(message)}[/red]")
    raise typer.Exit(EXIT_FAILURE)


@app.command()
def diff(
    paths: List[Path] = typer.Argument(..., help="Archivos o directorios con recursos declarados (YAML/JSON)"),
    diff_strategy: Optional[str] = typer.Option(None, "--diff-strategy", help="all | subset"),
    omit_secrets: bool = typer.Option(False, "--omit-secrets", help="Oculta el contenido de los Secret"),
    omit_same: bool = typer.Option(False, "--omit-same", help="No muestra recursos sin cambios"),
    color: Optional[bool] = typer.Option(None, "--color/--no-color", help="Colorea el diff (por defecto: si es terminal)"),
    namespace: Optional[str] = typer.Option(None, "--namespace", "-n", help="Namespace por defecto"),
    jobs: Optional[int] = typer.Option(None, "--jobs", "-j", help="Comparaciones en paralelo"),
    snapshot: Optional[Path] = typer.Option(None, "--snapshot", help="Snapshot del estado real (archivo o directorio)"),
    server: Optional[str] = typer.Option(None, "--server", help="URL base del API remoto"),
    token: Optional[str] = typer.Option(None, "--token", help="Bearer token del API remoto"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Archivo de configuración YAML"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Muestra trazas de depuración"),
):
    """Compara los recursos declarados contra el estado real y muestra las diferencias."""
    # .env del directorio actual: DERIVA_* para la configuración
    env_file = Path.cwd() / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    _setup_logging(verbose)

    try:
        settings = load_settings(config, overrides={
            "strategy": diff_strategy,
            "omit_secrets": omit_secrets or None,
            "omit_same": omit_same or None,
            "color_output": color,
            "default_namespace": namespace,
            "jobs": jobs,
            "snapshot_dir": snapshot,
            "store_url": server,
            "store_token": token,
        })
        resources = load_resources(paths)
        store = build_store(settings)
    except DerivaError as e:
        _fail(str(e))

    use_color = settings.color_output if settings.color_output is not None else console.is_terminal
    command = DiffCommand(
        Comparator(
            store,
            strategy=settings.strategy,
            default_namespace=settings.default_namespace,
            omit_secrets=settings.omit_secrets,
            color=use_color,
        ),
        omit_same=settings.omit_same,
        jobs=settings.jobs,
    )

    try:
        diff_found = command.run(resources, sys.stdout)
    except MaskingContractError as e:
        _fail(f"Error interno al enmascarar campos: {e}")

    sys.stdout.flush()
    if diff_found:
        raise typer.Exit(EXIT_DIFF_FOUND)


@app.command()
def version():
    """Muestra la versión de deriva"""
    console.print(Panel.fit(
        "[bold cyan]deriva[/bold cyan]\n"
        "[dim]Detector de drift: config declarado vs estado real[/dim]\n\n"
        f"[bold]Versión:[/bold] {__version__}",
        border_style="cyan"
    ))


def main():
    app()
