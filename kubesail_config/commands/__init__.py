import typer


def fatal(error) -> None:
    """Report ``error`` on stderr and stop with exit code 1."""
    typer.secho(f">> {error}", err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)
