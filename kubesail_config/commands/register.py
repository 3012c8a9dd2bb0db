import logging
import webbrowser
from pathlib import Path
from typing import Optional

import typer

from kubesail_config.commands import fatal
from kubesail_config.config import Config
from kubesail_config.errors import ConfigWriteFailed, FatalConfigError
from kubesail_config.listener import CallbackListener
from kubesail_config.store import ConfigStore, kubesail_contexts
from kubesail_config.utils.kube import verify_kubeconfig

logger = logging.getLogger(__name__)


def register(
    ctx: typer.Context,
    kubeconfig: Optional[Path] = typer.Option(None, "--kubeconfig", help="Kubeconfig to update (default: ~/.kube/config)"),
    www_host: str = typer.Option(Config.KUBESAIL_WWW_HOST, "--www-host", help="KubeSail web host"),
    port: int = typer.Option(Config.CALLBACK_PORT, "--port", help="Local callback port (0 picks a free one)"),
    no_browser: bool = typer.Option(False, "--no-browser", help="Print the registration URL instead of opening it"),
):
    """Register with KubeSail and add the returned cluster to your kubeconfig."""
    debug = bool(ctx.obj and ctx.obj.get("debug"))
    store = ConfigStore(kubeconfig)
    logger.debug(f"Using kubeconfig {store.path}")

    try:
        document = store.load()
        store.ensure_parent_directory()
    except FatalConfigError as e:
        fatal(e)

    if kubesail_contexts(document):
        typer.echo("  You already have a Kubesail context. Attempting to update.")

    try:
        listener = CallbackListener(store, document, port=port, debug=debug, www_host=www_host)
    except OSError as e:
        fatal(f"Could not listen on {Config.CALLBACK_HOST}:{port}: {e.strerror or e}")

    url = listener.registration_url
    if no_browser:
        typer.echo(f"  Open this URL to continue: {url}")
    else:
        typer.echo(f"  Opening {url}")
        if not webbrowser.open(url):
            typer.echo(f"  Could not open a browser, visit {url} manually.")

    try:
        context = listener.serve()
    except ConfigWriteFailed as e:
        fatal(e)

    if context is None:
        typer.secho(">> Stopped before KubeSail sent any credentials", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=130)

    typer.secho(f"  Added Kubesail config to {store.path}", err=True, fg=typer.colors.BRIGHT_BLACK)
    verify_kubeconfig(store.path, context)
