"""
Merging KubeSail credentials into a kubeconfig document.

Every payload produces one cluster, one user and one context, all named
``kubesail-<username>``. Entries are matched by name only: a match is
replaced in place, anything else is appended, and entries with other names
are never touched.
"""
import copy
import logging
from typing import Any, Dict, List

from .config import Config
from .models import ClusterEntry, ConfigDocument, ContextEntry, UserEntry
from .payload import CredentialPayload

logger = logging.getLogger(__name__)


def entry_name(username: str) -> str:
    """Name shared by the cluster, user and context of ``username``."""
    return f"{Config.ENTRY_PREFIX}-{username}"


def upsert_by_name(entries: List[Dict[str, Any]], entry: Dict[str, Any]) -> bool:
    """Replace the first entry named like ``entry``, or append it.

    Returns:
        True if an existing entry was replaced
    """
    for index, existing in enumerate(entries):
        if existing.get("name") == entry["name"]:
            entries[index] = entry
            return True
    entries.append(entry)
    return False


def merge(document: ConfigDocument, payload: CredentialPayload) -> ConfigDocument:
    """Return a copy of ``document`` with the credentials of ``payload`` merged in.

    ``current-context`` is only set when the document has none, so an
    existing active context is never switched.
    """
    name = entry_name(payload.username)
    merged = copy.deepcopy(document)

    cluster = ClusterEntry(
        name=name,
        certificate_authority_data=payload.cert,
        server=payload.cluster_address,
    )
    user = UserEntry(name=name, client_key_data=payload.cert, token=payload.token)
    context = ContextEntry(name=name, cluster=name, namespace=payload.namespace, user=name)

    for list_name, entry in (("clusters", cluster), ("users", user), ("contexts", context)):
        replaced = upsert_by_name(getattr(merged, list_name), entry.to_dict())
        logger.debug(f"{'Replaced' if replaced else 'Added'} {list_name[:-1]} {name}")

    if not merged.current_context:
        merged.current_context = name
        logger.info(f"🔀 Active context set to {name}")
    elif merged.current_context != name:
        logger.info(f"Keeping active context {merged.current_context}")

    return merged
