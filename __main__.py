"""
Prometheus + Grafana on EKS
VPC -> EKS -> namespaces -> canary, kube-prometheus and grafana, each behind
a load balancer
"""
import pulumi
from config import get_config
from stack import (
    DeploymentGraph,
    NodeKind,
    create_network,
    create_cluster,
    create_k8s_provider,
    create_namespace,
    create_canary,
    create_canary_service,
    create_monitoring,
    create_monitoring_service,
    create_dashboard,
    create_dashboard_service,
    resolve_admin_password,
)
from stack.outputs import service_url, service_hostname, cluster_ip_url

config = get_config()
tags = config.common_tags
charts = config.chart_settings()

graph = DeploymentGraph()

# 1. Network
graph.add("network", NodeKind.NETWORK,
    lambda deps: create_network(config.vpc_name,
        cidr_block=config.vpc_cidr,
        availability_zone_count=config.availability_zone_count,
        tags=tags))

# 2. EKS cluster, nodes without public IPs
graph.add("cluster", NodeKind.CLUSTER,
    lambda deps: create_cluster(config.cluster_name, deps["network"],
        version=config.cluster_version,
        instance_type=config.node_instance_type,
        tags=tags,
        **config.node_group_sizing),
    depends_on=["network"])

# 3. Kubernetes provider from the cluster's kubeconfig
graph.add("eks-provider", NodeKind.PROVIDER,
    lambda deps: create_k8s_provider("eks-provider", deps["cluster"]),
    depends_on=["cluster"])

# 4. Namespaces
graph.add("grafana-namespace", NodeKind.NAMESPACE,
    lambda deps: create_namespace("grafana", deps["eks-provider"]),
    depends_on=["eks-provider"])
graph.add("prometheus-namespace", NodeKind.NAMESPACE,
    lambda deps: create_namespace("prometheus", deps["eks-provider"]),
    depends_on=["eks-provider"])

# 5. Canary, its service selects the pods by label only
graph.add("canary", NodeKind.WORKLOAD,
    lambda deps: create_canary(deps["eks-provider"],
        replicas=config.canary_replicas,
        image=config.canary_image),
    depends_on=["eks-provider"])
graph.add("nginx-service", NodeKind.SERVICE,
    lambda deps: create_canary_service(deps["canary"], deps["eks-provider"]),
    depends_on=["canary", "eks-provider"])

# 6. Prometheus
graph.add("monitoring", NodeKind.CHART_INSTALL,
    lambda deps: create_monitoring(deps["prometheus-namespace"], deps["eks-provider"],
        **charts["prometheus"]),
    depends_on=["prometheus-namespace", "eks-provider"])
graph.add("prometheus-service", NodeKind.SERVICE,
    lambda deps: create_monitoring_service(deps["monitoring"], deps["eks-provider"]),
    depends_on=["monitoring", "eks-provider"])

# 7. Grafana
graph.add("dashboard", NodeKind.CHART_INSTALL,
    lambda deps: create_dashboard(deps["grafana-namespace"], deps["eks-provider"],
        admin_password=resolve_admin_password(config.grafana_admin_password),
        **charts["grafana"]),
    depends_on=["grafana-namespace", "eks-provider"])
graph.add("grafana-service", NodeKind.SERVICE,
    lambda deps: create_dashboard_service(deps["dashboard"], deps["eks-provider"]),
    depends_on=["dashboard", "eks-provider"])

# 8. Outputs
graph.add("outputs", NodeKind.OUTPUT,
    lambda deps: {
        "prometheusUrl": service_url(deps["prometheus-service"]["service"], deps["prometheus-service"]["port"],
            policy=config.ingress_policy),
        "grafanaUrl": service_url(deps["grafana-service"]["service"], deps["grafana-service"]["port"],
            policy=config.ingress_policy),
        "prometheusLocalUrl": cluster_ip_url(deps["prometheus-service"]["service"],
            deps["prometheus-service"]["port"]),
        "nginxUrl": service_hostname(deps["nginx-service"]["service"], policy=config.ingress_policy),
        "kubeconfig": pulumi.Output.secret(deps["cluster"]["kubeconfig"]),
        "eksClusterName": deps["cluster"]["cluster_name"],
        "grafanaAdminPassword": pulumi.Output.secret(deps["dashboard"]["admin_password"]),
    },
    depends_on=["cluster", "dashboard", "nginx-service", "prometheus-service", "grafana-service"])

deployment = graph.build()

# Exports
for name, value in deployment["outputs"].items():
    pulumi.export(name, value)
