"""
Kubernetes Provider
Connection context for the cluster's control plane
"""
import pulumi
import pulumi_kubernetes as k8s
from typing import Dict, List, Optional


def create_k8s_provider(name: str, cluster_info: Dict[str, any]) -> k8s.Provider:
    """
    Create a provider bound to the cluster's kubeconfig

    The kubeconfig is an input of the provider, so a replaced cluster or
    rotated credentials produce a new provider configuration instead of a
    stale one.
    """
    return k8s.Provider(name,
        kubeconfig=cluster_info["kubeconfig_json"],
        opts=pulumi.ResourceOptions(depends_on=[cluster_info["cluster"]]))


def resource_options(provider: k8s.Provider,
                     depends_on: Optional[List[pulumi.Resource]] = None) -> pulumi.ResourceOptions:
    """Options targeting the cluster behind `provider`"""
    return pulumi.ResourceOptions(provider=provider, depends_on=depends_on or [])
