import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from kubernetes import config

logger = logging.getLogger(__name__)


def list_contexts(path: Union[str, Path]) -> Tuple[List[str], Optional[str]]:
    """
    Read a kubeconfig the way kubectl-compatible clients do.
    Returns the context names and the name of the active context.
    """
    contexts, active_context = config.list_kube_config_contexts(config_file=str(path))
    return [c["name"] for c in contexts], active_context["name"] if active_context else None


def verify_kubeconfig(path: Union[str, Path], expected_context: str) -> bool:
    """
    Check that the kubernetes client can load the written kubeconfig and
    sees ``expected_context``. Problems are logged, never raised.
    """
    try:
        names, active = list_contexts(path)
    except Exception as e:
        logger.warning(f"⚠️  Kubernetes client could not read {path}: {e}")
        return False

    if expected_context not in names:
        logger.warning(f"⚠️  Context {expected_context} not visible in {path}")
        return False

    logger.debug(f"Kubeconfig {path} has {len(names)} contexts, active: {active}")
    return True
