"""Exceptions raised while provisioning KubeSail credentials."""
from pathlib import Path
from typing import List, Union


class KubesailConfigError(Exception):
    """Base class for every error raised by kubesail_config."""
    pass


class FatalConfigError(KubesailConfigError):
    """Errors that abort the whole run with a non-zero exit code."""
    pass


class ConfigUnreadable(FatalConfigError):
    """The kubeconfig exists but cannot be read or is not a valid document."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        message = (
            f"It seems you have a Kubernetes config file at {self.path}, "
            "but it is not valid yaml, or unreadable!"
        )
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class DirectoryCreateFailed(FatalConfigError):
    """The directory holding the kubeconfig could not be created."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        super().__init__(
            f"Error creating {self.path}. You can try manually creating it."
            + (f" ({reason})" if reason else "")
        )


class ConfigWriteFailed(FatalConfigError):
    """The merged kubeconfig could not be written to disk."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        super().__init__(
            f"Failed to write Kubernetes config to {self.path}"
            + (f": {reason}" if reason else "")
        )


class PayloadError(KubesailConfigError):
    """A callback request carried unusable data. Reported to the caller only."""
    pass


class PayloadMalformed(PayloadError):
    """The ``data`` query parameter is absent or is not a JSON object."""

    def __init__(self, reason: str = "error parsing data"):
        self.reason = reason
        super().__init__(reason)


class PayloadIncomplete(PayloadError):
    """One or more required credential fields are missing or empty."""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(f"Kube config is missing data: {', '.join(self.missing)}")
