"""
Monitoring Workload
kube-prometheus via Helm plus a LoadBalancer in front of the Prometheus UI
"""
import pulumi
import pulumi_kubernetes as k8s
from typing import Dict

from .provider import resource_options
from .selectors import kube_prometheus_selector

RELEASE_NAME = "prometheus"
CHART_NAME = "kube-prometheus"
PROMETHEUS_PORT = 9090


def create_monitoring(namespace: Dict[str, any], provider: k8s.Provider,
                      version: str = "8.17.1",
                      repo: str = "https://charts.bitnami.com/bitnami") -> Dict[str, any]:
    """
    Install the kube-prometheus chart

    Args:
        namespace: Result of create_namespace for the prometheus namespace
        provider: Kubernetes provider
        version: Chart version
        repo: Chart repository URL

    Returns:
        Dict with the helm release, its namespace and the Prometheus pod selector
    """
    release = k8s.helm.v3.Release(RELEASE_NAME,
        name=RELEASE_NAME,
        chart=CHART_NAME,
        version=version,
        namespace=namespace["namespace_name"],
        repository_opts=k8s.helm.v3.RepositoryOptsArgs(
            repo=repo,
        ),
        opts=resource_options(provider, depends_on=[namespace["namespace"]]))

    pulumi.log.info(f"Declared {CHART_NAME} {version} from {repo}")

    return {
        "release": release,
        "namespace_name": namespace["namespace_name"],
        # Must track the chart's pod labels for the pinned version
        "selector": kube_prometheus_selector(RELEASE_NAME),
    }


def create_monitoring_service(monitoring: Dict[str, any], provider: k8s.Provider) -> Dict[str, any]:
    """Expose Prometheus on port 9090 through a load balancer"""
    service = k8s.core.v1.Service("prometheus-service",
        metadata=k8s.meta.v1.ObjectMetaArgs(
            namespace=monitoring["namespace_name"],
        ),
        spec=k8s.core.v1.ServiceSpecArgs(
            type="LoadBalancer",
            selector=monitoring["selector"].labels,
            ports=[k8s.core.v1.ServicePortArgs(
                name="http",
                port=PROMETHEUS_PORT,
                target_port=PROMETHEUS_PORT,
                protocol="TCP",
            )],
        ),
        opts=resource_options(provider, depends_on=[monitoring["release"]]))

    return {
        "service": service,
        "port": PROMETHEUS_PORT,
    }
