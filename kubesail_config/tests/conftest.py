import pytest
import yaml


@pytest.fixture
def alice():
    return {
        "username": "alice",
        "token": "t1",
        "cert": "c1",
        "clusterAddress": "https://a.example:6443",
        "namespace": "default",
    }


@pytest.fixture
def kubeconfig_path(tmp_path):
    return tmp_path / ".kube" / "config"


@pytest.fixture
def existing_kubeconfig(kubeconfig_path):
    """A kubeconfig with one unrelated cluster, user and context."""
    kubeconfig_path.parent.mkdir(parents=True)
    kubeconfig_path.write_text(yaml.safe_dump({
        "apiVersion": "v1",
        "kind": "Config",
        "preferences": {"colors": True},
        "current-context": "minikube",
        "clusters": [{
            "name": "minikube",
            "cluster": {"server": "https://192.168.49.2:8443", "certificate-authority": "/home/me/.minikube/ca.crt"},
        }],
        "users": [{
            "name": "minikube",
            "user": {"client-certificate": "/home/me/.minikube/client.crt", "client-key": "/home/me/.minikube/client.key"},
        }],
        "contexts": [{
            "name": "minikube",
            "context": {"cluster": "minikube", "user": "minikube", "namespace": "default"},
        }],
        "extensions": [{"name": "ctx-info", "extension": {"provider": "minikube.sigs.k8s.io"}}],
    }, sort_keys=False))
    return kubeconfig_path
