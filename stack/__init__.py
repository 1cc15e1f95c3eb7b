"""
Prometheus + Grafana on EKS
Each module declares one part of the deployment and returns a dict of its
resources and outputs
"""

from .network import create_network
from .cluster import create_cluster
from .provider import create_k8s_provider
from .namespaces import create_namespace
from .canary import create_canary, create_canary_service
from .monitoring import create_monitoring, create_monitoring_service
from .dashboard import create_dashboard, create_dashboard_service, resolve_admin_password
from .graph import DeploymentGraph, NodeKind

__all__ = [
    "create_network",
    "create_cluster",
    "create_k8s_provider",
    "create_namespace",
    "create_canary",
    "create_canary_service",
    "create_monitoring",
    "create_monitoring_service",
    "create_dashboard",
    "create_dashboard_service",
    "resolve_admin_password",
    "DeploymentGraph",
    "NodeKind",
]
