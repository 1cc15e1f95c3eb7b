"""
Canary Workload
Small nginx deployment behind a load balancer, proves the cluster takes
workloads and Services end to end
"""
import pulumi
import pulumi_kubernetes as k8s
from typing import Dict

from .provider import resource_options
from .selectors import canary_selector

CANARY_NAME = "nginx-deployment"
CONTAINER_PORT_NAME = "http"
SERVICE_PORT = 80


def create_canary(provider: k8s.Provider, replicas: int = 2, image: str = "nginx") -> Dict[str, any]:
    """
    Create the canary deployment

    Args:
        provider: Kubernetes provider
        replicas: Number of nginx pods
        image: Container image

    Returns:
        Dict with the deployment and the selector its Service must use
    """
    if not isinstance(replicas, int) or isinstance(replicas, bool) or replicas < 1:
        raise ValueError(f"canary replicas must be a positive integer, got {replicas!r}")

    selector = canary_selector()

    deployment = k8s.apps.v1.Deployment(CANARY_NAME,
        metadata=k8s.meta.v1.ObjectMetaArgs(
            labels=selector.merged(**{"managed-by": "pulumi"}),
        ),
        spec=k8s.apps.v1.DeploymentSpecArgs(
            replicas=replicas,
            selector=k8s.meta.v1.LabelSelectorArgs(
                match_labels=selector.labels,
            ),
            template=k8s.core.v1.PodTemplateSpecArgs(
                metadata=k8s.meta.v1.ObjectMetaArgs(
                    labels=selector.labels,
                ),
                spec=k8s.core.v1.PodSpecArgs(
                    containers=[k8s.core.v1.ContainerArgs(
                        name=CANARY_NAME,
                        image=image,
                        ports=[k8s.core.v1.ContainerPortArgs(
                            name=CONTAINER_PORT_NAME,
                            container_port=80,
                        )],
                    )],
                ),
            ),
        ),
        opts=resource_options(provider))

    pulumi.log.info(f"Declared canary {CANARY_NAME} with {replicas} replicas of {image}")

    return {
        "deployment": deployment,
        "selector": selector,
    }


def create_canary_service(canary: Dict[str, any], provider: k8s.Provider) -> Dict[str, any]:
    """
    Create the LoadBalancer service in front of the canary pods

    The service is tied to the deployment by its selector only.
    """
    selector = canary["selector"]

    service = k8s.core.v1.Service("nginx-service",
        metadata=k8s.meta.v1.ObjectMetaArgs(
            labels=selector.merged(**{"managed-by": "pulumi"}),
        ),
        spec=k8s.core.v1.ServiceSpecArgs(
            type="LoadBalancer",
            ports=[k8s.core.v1.ServicePortArgs(
                port=SERVICE_PORT,
                target_port=CONTAINER_PORT_NAME,
            )],
            selector=selector.labels,
        ),
        opts=resource_options(provider))

    return {
        "service": service,
        "port": SERVICE_PORT,
    }
