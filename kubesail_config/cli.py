import logging
import typer

from kubesail_config.commands import register, status
from kubesail_config.logging import setup_logging

app = typer.Typer(help="Fetch KubeSail credentials and merge them into your kubeconfig.")

app.command("register")(register.register)
app.command("status")(status.status)


# Global options callback
@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """kubesail-config - KubeSail kubeconfig helper."""
    ctx.obj = {"debug": debug}
    setup_logging(debug)
    if debug:
        logging.debug("Debug mode enabled")


if __name__ == "__main__":
    app()
