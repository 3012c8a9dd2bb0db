from pathlib import Path
from typing import Optional

import typer

from kubesail_config.commands import fatal
from kubesail_config.errors import ConfigUnreadable
from kubesail_config.models import ClusterEntry
from kubesail_config.store import ConfigStore, kubesail_contexts


def status(
    kubeconfig: Optional[Path] = typer.Option(None, "--kubeconfig", help="Kubeconfig to inspect (default: ~/.kube/config)"),
):
    """Show the KubeSail contexts in your kubeconfig."""
    store = ConfigStore(kubeconfig)
    try:
        document = store.load()
    except ConfigUnreadable as e:
        fatal(e)

    names = kubesail_contexts(document)
    if not names:
        typer.echo(f"No KubeSail contexts in {store.path}")
        return

    clusters = {entry.get("name"): ClusterEntry.from_dict(entry) for entry in document.clusters}
    for name in names:
        context = document.find_context(name)
        cluster = clusters.get(context.cluster)
        marker = "*" if name == document.current_context else " "
        server = cluster.server if cluster else "<missing cluster>"
        typer.echo(f"{marker} {name}  {server}  namespace={context.namespace}")
