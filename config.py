"""
Configuration management for the Prometheus + Grafana EKS deployment
"""

import pulumi
from typing import Dict, Any, Optional

INGRESS_POLICIES = ("wait", "fail")

DEFAULT_PROMETHEUS_CHART_VERSION = "8.17.1"
DEFAULT_PROMETHEUS_CHART_REPO = "https://charts.bitnami.com/bitnami"
DEFAULT_GRAFANA_CHART_REPO = "https://grafana.github.io/helm-charts"


class Config:
    """Centralized configuration management for the deployment"""

    def __init__(self):
        self.config = pulumi.Config()

        # Network Configuration
        self.vpc_name = self.config.get("vpc_name") or "prometheus-grafana"
        self.vpc_cidr = self.config.get("vpc_cidr")
        self.availability_zone_count = self.config.get_int("availability_zone_count")

        # Cluster Configuration
        self.cluster_name = self.config.get("cluster_name") or "cluster"
        self.cluster_version = self.config.get("cluster_version")
        self.node_instance_type = self.config.get("node_instance_type")
        self.node_desired_size = self.config.get_int("node_desired_size")
        self.node_min_size = self.config.get_int("node_min_size")
        self.node_max_size = self.config.get_int("node_max_size")

        # Canary Configuration
        self.canary_replicas = self.config.get_int("canary_replicas")
        if self.canary_replicas is None:
            self.canary_replicas = 2
        self.canary_image = self.config.get("canary_image") or "nginx"

        # Charts - both versions are pinnable, grafana tracks latest when unset
        self.prometheus_chart_version = self.config.get("prometheus_chart_version") or DEFAULT_PROMETHEUS_CHART_VERSION
        self.prometheus_chart_repo = self.config.get("prometheus_chart_repo") or DEFAULT_PROMETHEUS_CHART_REPO
        self.grafana_chart_version = self.config.get("grafana_chart_version")
        self.grafana_chart_repo = self.config.get("grafana_chart_repo") or DEFAULT_GRAFANA_CHART_REPO
        self.grafana_admin_password = self.config.get_secret("grafana_admin_password")

        # Output behaviour when a load balancer has no ingress yet
        self.ingress_policy = self.config.get("ingress_policy") or "wait"
        if self.ingress_policy not in INGRESS_POLICIES:
            raise ValueError(
                f"ingress_policy must be one of {', '.join(INGRESS_POLICIES)}, got '{self.ingress_policy}'")

        # Additional tags
        self.additional_tags = self.config.get_object("tags") or {}

    @property
    def common_tags(self) -> Dict[str, str]:
        """Get common tags for all resources"""
        base_tags = {
            "Project": "prometheus-grafana",
            "Stack": pulumi.get_stack(),
            "ManagedBy": "pulumi",
        }
        base_tags.update(self.additional_tags)
        return base_tags

    @property
    def node_group_sizing(self) -> Dict[str, Optional[int]]:
        """Node group sizing, None entries fall back to the cluster defaults"""
        return {
            "desired_size": self.node_desired_size,
            "min_size": self.node_min_size,
            "max_size": self.node_max_size,
        }

    def chart_settings(self) -> Dict[str, Any]:
        return {
            "prometheus": {
                "version": self.prometheus_chart_version,
                "repo": self.prometheus_chart_repo,
            },
            "grafana": {
                "version": self.grafana_chart_version,
                "repo": self.grafana_chart_repo,
            },
        }


def get_config() -> Config:
    """Get the global configuration instance"""
    return Config()
