"""Loading and saving the kubeconfig file."""
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Union

import yaml

from .config import Config
from .errors import ConfigUnreadable, ConfigWriteFailed, DirectoryCreateFailed
from .models import ENTRY_LISTS, ConfigDocument

logger = logging.getLogger(__name__)


class ConfigStore:
    """Reads and writes the kubeconfig at a single well-known path."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(os.path.expanduser(str(path))) if path else Config.KUBECONFIG_PATH

    def load(self) -> ConfigDocument:
        """Load the kubeconfig, or a default document when there is none yet.

        Returns:
            The parsed document

        Raises:
            ConfigUnreadable: If the file exists but is not a readable kubeconfig
        """
        if not self.path.exists():
            logger.debug(f"No kubeconfig at {self.path}, starting from an empty one")
            return ConfigDocument()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise ConfigUnreadable(self.path, "invalid YAML") from e
        except OSError as e:
            raise ConfigUnreadable(self.path, e.strerror or str(e)) from e

        if data is None:
            logger.debug(f"{self.path} is empty, starting from an empty kubeconfig")
            return ConfigDocument()
        if not isinstance(data, dict):
            raise ConfigUnreadable(self.path, "top level is not a mapping")

        for list_name in ENTRY_LISTS:
            entries = data.get(list_name)
            if entries is None:
                continue
            if not isinstance(entries, list):
                raise ConfigUnreadable(self.path, f"'{list_name}' is not a list")
            if not all(isinstance(entry, dict) for entry in entries):
                raise ConfigUnreadable(self.path, f"'{list_name}' contains a non-mapping entry")

        preferences = data.get("preferences")
        if preferences is not None and not isinstance(preferences, dict):
            raise ConfigUnreadable(self.path, "'preferences' is not a mapping")

        document = ConfigDocument.from_dict(data)
        logger.debug(
            f"Loaded {self.path}: {len(document.clusters)} clusters, "
            f"{len(document.users)} users, {len(document.contexts)} contexts"
        )
        return document

    def ensure_parent_directory(self) -> Path:
        """Create the directory that holds the kubeconfig if it is missing.

        Raises:
            DirectoryCreateFailed: If the directory cannot be created
        """
        parent = self.path.parent
        if parent.is_dir():
            return parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateFailed(parent, e.strerror or str(e)) from e
        logger.info(f"📁 Created {parent}")
        return parent

    def save(self, document: ConfigDocument) -> Path:
        """Write ``document`` over the kubeconfig.

        The YAML is written to a temporary file next to the target and moved
        into place, so a failed write never leaves a truncated kubeconfig.

        Raises:
            ConfigWriteFailed: If the file cannot be written
        """
        rendered = yaml.safe_dump(document.to_dict(), default_flow_style=False, sort_keys=False)
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(rendered)
            if self.path.exists():
                os.chmod(tmp_name, self.path.stat().st_mode & 0o777)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise ConfigWriteFailed(self.path, e.strerror or str(e)) from e

        logger.debug(f"Wrote {len(rendered)} bytes to {self.path}")
        return self.path


def kubesail_contexts(document: ConfigDocument) -> List[str]:
    """Names of the contexts previously written by this tool."""
    prefix = f"{Config.ENTRY_PREFIX}-"
    return [name for name in document.names("contexts") if isinstance(name, str) and prefix in name]
