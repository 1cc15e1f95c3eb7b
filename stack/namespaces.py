"""
Namespaces
"""
import pulumi_kubernetes as k8s
from typing import Dict

from .provider import resource_options


def create_namespace(name: str, provider: k8s.Provider) -> Dict[str, any]:
    """Create a namespace named exactly `name`"""
    namespace = k8s.core.v1.Namespace(name,
        metadata=k8s.meta.v1.ObjectMetaArgs(
            name=name,
            labels={"name": name, "managed-by": "pulumi"},
        ),
        opts=resource_options(provider))

    return {
        "namespace": namespace,
        "namespace_name": namespace.metadata.name,
    }
