"""
Dashboard Workload
Grafana via Helm plus a LoadBalancer in front of its web UI
"""
import pulumi
import pulumi_kubernetes as k8s
import pulumi_random as random
from typing import Dict, Optional

from .provider import resource_options
from .selectors import grafana_selector

RELEASE_NAME = "grafana"
CHART_NAME = "grafana"
SERVICE_PORT = 80
GRAFANA_PORT = 3000


def resolve_admin_password(configured: Optional[pulumi.Output[str]]) -> pulumi.Output[str]:
    """Use the configured secret, otherwise generate one"""
    if configured is not None:
        return pulumi.Output.secret(configured)

    pulumi.log.info("No grafana_admin_password configured, generating one")
    password = random.RandomPassword("grafana-admin-password",
        length=24,
        special=False)
    return password.result


def create_dashboard(namespace: Dict[str, any], provider: k8s.Provider,
                     admin_password: pulumi.Output[str],
                     version: Optional[str] = None,
                     repo: str = "https://grafana.github.io/helm-charts") -> Dict[str, any]:
    """
    Install the grafana chart

    Args:
        namespace: Result of create_namespace for the grafana namespace
        provider: Kubernetes provider
        admin_password: Secret admin password
        version: Chart version, latest when None
        repo: Chart repository URL

    Returns:
        Dict with the helm release, its namespace, the grafana pod selector
        and the admin password
    """
    if version is None:
        pulumi.log.warn(f"{CHART_NAME} chart version is not pinned, tracking latest")

    release = k8s.helm.v3.Release(RELEASE_NAME,
        name=RELEASE_NAME,
        chart=CHART_NAME,
        version=version,
        namespace=namespace["namespace_name"],
        repository_opts=k8s.helm.v3.RepositoryOptsArgs(
            repo=repo,
        ),
        values={
            "adminPassword": admin_password,
        },
        opts=resource_options(provider, depends_on=[namespace["namespace"]]))

    return {
        "release": release,
        "namespace_name": namespace["namespace_name"],
        "selector": grafana_selector(RELEASE_NAME),
        "admin_password": admin_password,
    }


def create_dashboard_service(dashboard: Dict[str, any], provider: k8s.Provider) -> Dict[str, any]:
    """Expose the grafana UI on port 80 through a load balancer"""
    service = k8s.core.v1.Service("grafana-service",
        metadata=k8s.meta.v1.ObjectMetaArgs(
            namespace=dashboard["namespace_name"],
        ),
        spec=k8s.core.v1.ServiceSpecArgs(
            type="LoadBalancer",
            selector=dashboard["selector"].labels,
            ports=[k8s.core.v1.ServicePortArgs(
                name="http",
                port=SERVICE_PORT,
                target_port=GRAFANA_PORT,
                protocol="TCP",
            )],
        ),
        opts=resource_options(provider, depends_on=[dashboard["release"]]))

    return {
        "service": service,
        "port": SERVICE_PORT,
    }
