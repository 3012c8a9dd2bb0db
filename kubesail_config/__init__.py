"""kubesail-config: fetch KubeSail credentials and merge them into a local kubeconfig."""

__version__ = "0.1.0"
