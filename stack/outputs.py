"""
Stack Outputs
Load balancer addresses are assigned after a Service is created. Every
helper here treats a missing or empty ingress list as "pending" instead of
indexing into it.
"""
import pulumi
import pulumi_kubernetes as k8s
from typing import Any, Optional

WAIT = "wait"
FAIL = "fail"


class EndpointPending(Exception):
    """Raised when a Service has no load balancer ingress and the policy is fail"""

    def __init__(self, service_name: str):
        self.service_name = service_name
        super().__init__(f"service {service_name} has no load balancer ingress yet")


def _field(obj: Any, name: str, camel_name: Optional[str] = None) -> Any:
    """Read `name` from a dict (raw API shape) or an SDK output object"""
    if obj is None:
        return None
    if isinstance(obj, dict):
        value = obj.get(name)
        if value is None and camel_name:
            value = obj.get(camel_name)
        return value
    return getattr(obj, name, None)


def first_ingress_address(status: Any) -> Optional[str]:
    """
    Hostname of the first load balancer ingress, or its IP when the provider
    hands out IPs. None while the load balancer is still pending.
    """
    load_balancer = _field(status, "load_balancer", "loadBalancer")
    ingress = _field(load_balancer, "ingress") or []
    if not ingress:
        return None
    entry = ingress[0]
    return _field(entry, "hostname") or _field(entry, "ip")


def require_address(status: Any, service_name: str) -> str:
    address = first_ingress_address(status)
    if address is None:
        raise EndpointPending(service_name)
    return address


def endpoint_url(address: Optional[str], port: int, scheme: str = "http") -> Optional[str]:
    if address is None:
        return None
    return f"{scheme}://{address}:{port}"


def _resolve_address(status: Any, service_name: str, policy: str) -> Optional[str]:
    if policy == FAIL:
        return require_address(status, service_name)
    address = first_ingress_address(status)
    if address is None:
        pulumi.log.warn(f"Service {service_name} has no load balancer address yet, output left pending")
    return address


def service_hostname(service: k8s.core.v1.Service, policy: str = WAIT) -> pulumi.Output[Optional[str]]:
    """External address of a LoadBalancer service"""
    return pulumi.Output.all(service.metadata.name, service.status).apply(
        lambda args: _resolve_address(args[1], args[0], policy))


def service_url(service: k8s.core.v1.Service, port: int, policy: str = WAIT,
                scheme: str = "http") -> pulumi.Output[Optional[str]]:
    """External URL of a LoadBalancer service on `port`"""
    return service_hostname(service, policy).apply(
        lambda address: endpoint_url(address, port, scheme))


def cluster_ip_url(service: k8s.core.v1.Service, port: int, scheme: str = "http") -> pulumi.Output[str]:
    """In-cluster URL built from the service's cluster IP"""
    return pulumi.Output.concat(scheme, "://", service.spec.cluster_ip, ":", str(port))
