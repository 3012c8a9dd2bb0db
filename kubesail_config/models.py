"""
Data models for kubeconfig documents.

Cluster, user and context entries are modelled as small dataclasses that know
how to render themselves in kubeconfig shape. A ConfigDocument keeps the three
lists as the raw mappings read from disk so fields it does not model survive
a load/merge/save cycle.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Lists of named entries held by a kubeconfig
ENTRY_LISTS = ("clusters", "users", "contexts")


def default_source() -> Dict[str, Any]:
    """Top-level layout of a freshly created kubeconfig."""
    return {
        "kind": "Config",
        "apiVersion": "v1",
        "preferences": {},
        "current-context": None,
        "clusters": [],
        "contexts": [],
        "users": [],
    }


@dataclass
class ClusterEntry:
    """A named API server endpoint and the CA that signs it."""
    name: str
    certificate_authority_data: str
    server: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "cluster": {
                "certificate-authority-data": self.certificate_authority_data,
                "server": self.server,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClusterEntry":
        cluster = data.get("cluster")
        if not isinstance(cluster, dict):
            cluster = {}
        return cls(
            name=data.get("name", ""),
            certificate_authority_data=cluster.get("certificate-authority-data", ""),
            server=cluster.get("server", ""),
        )


@dataclass
class UserEntry:
    """A named set of client credentials."""
    name: str
    client_key_data: str
    token: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "user": {
                "client-key-data": self.client_key_data,
                "token": self.token,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserEntry":
        user = data.get("user")
        if not isinstance(user, dict):
            user = {}
        return cls(
            name=data.get("name", ""),
            client_key_data=user.get("client-key-data", ""),
            token=user.get("token", ""),
        )


@dataclass
class ContextEntry:
    """A named (cluster, user, namespace) triple."""
    name: str
    cluster: str
    namespace: str
    user: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "context": {
                "cluster": self.cluster,
                "namespace": self.namespace,
                "user": self.user,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContextEntry":
        context = data.get("context")
        if not isinstance(context, dict):
            context = {}
        return cls(
            name=data.get("name", ""),
            cluster=context.get("cluster", ""),
            namespace=context.get("namespace", ""),
            user=context.get("user", ""),
        )


@dataclass
class ConfigDocument:
    """An in-memory kubeconfig.

    ``source`` holds every top-level key as it was read, in file order. The
    managed keys (``current-context``, ``preferences`` and the three entry
    lists) are written back over it by :meth:`to_dict`, so unknown keys such
    as ``kind`` or ``extensions`` keep their value and position.
    """
    current_context: Optional[str] = None
    clusters: List[Dict[str, Any]] = field(default_factory=list)
    users: List[Dict[str, Any]] = field(default_factory=list)
    contexts: List[Dict[str, Any]] = field(default_factory=list)
    preferences: Optional[Dict[str, Any]] = field(default_factory=dict)
    source: Dict[str, Any] = field(default_factory=default_source)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConfigDocument":
        """Build a document from a parsed kubeconfig mapping.

        Missing or ``null`` entry lists become empty lists. Shape checks are
        the caller's job (see ``ConfigStore.load``).
        """
        return cls(
            current_context=data.get("current-context") or None,
            clusters=list(data.get("clusters") or []),
            users=list(data.get("users") or []),
            contexts=list(data.get("contexts") or []),
            preferences=data.get("preferences", {}),
            source=dict(data),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Render the document as a kubeconfig mapping ready for YAML."""
        data = dict(self.source)
        data["preferences"] = self.preferences
        data["current-context"] = self.current_context
        data["clusters"] = self.clusters
        data["contexts"] = self.contexts
        data["users"] = self.users
        return data

    def names(self, list_name: str) -> List[str]:
        """Names of the entries in ``clusters``, ``users`` or ``contexts``."""
        return [entry.get("name") for entry in getattr(self, list_name)]

    def find_context(self, name: str) -> Optional[ContextEntry]:
        for entry in self.contexts:
            if entry.get("name") == name:
                return ContextEntry.from_dict(entry)
        return None
