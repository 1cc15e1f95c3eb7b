"""
Unit tests for stack configuration
"""

import unittest
from unittest.mock import Mock, patch
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import get_config
from stack.canary import create_canary


def fake_pulumi_config(values):
    """pulumi.Config stand-in backed by a dict"""
    cfg = Mock()
    cfg.get.side_effect = values.get
    cfg.get_int.side_effect = values.get
    cfg.get_bool.side_effect = values.get
    cfg.get_object.side_effect = values.get
    cfg.get_secret.side_effect = values.get
    return cfg


class TestConfig(unittest.TestCase):

    def load(self, values):
        with patch('config.pulumi') as mock_pulumi:
            mock_pulumi.Config.return_value = fake_pulumi_config(values)
            mock_pulumi.get_stack.return_value = "dev"
            config = get_config()
            tags = config.common_tags
        return config, tags

    def test_defaults(self):
        config, tags = self.load({})

        self.assertEqual(config.vpc_name, "prometheus-grafana")
        self.assertEqual(config.cluster_name, "cluster")
        self.assertEqual(config.canary_replicas, 2)
        self.assertEqual(config.canary_image, "nginx")
        self.assertEqual(config.prometheus_chart_version, "8.17.1")
        self.assertEqual(config.prometheus_chart_repo, "https://charts.bitnami.com/bitnami")
        self.assertIsNone(config.grafana_chart_version)
        self.assertEqual(config.grafana_chart_repo, "https://grafana.github.io/helm-charts")
        self.assertIsNone(config.grafana_admin_password)
        self.assertEqual(config.ingress_policy, "wait")
        self.assertEqual(tags, {"Project": "prometheus-grafana", "Stack": "dev", "ManagedBy": "pulumi"})

    def test_both_chart_versions_configurable(self):
        config, _ = self.load({"prometheus_chart_version": "9.0.0", "grafana_chart_version": "8.5.0"})

        charts = config.chart_settings()
        self.assertEqual(charts["prometheus"]["version"], "9.0.0")
        self.assertEqual(charts["grafana"]["version"], "8.5.0")
        self.assertEqual(charts["grafana"]["repo"], "https://grafana.github.io/helm-charts")

    def test_node_group_sizing(self):
        config, _ = self.load({"node_desired_size": 3, "node_max_size": 5})

        self.assertEqual(config.node_group_sizing, {"desired_size": 3, "min_size": None, "max_size": 5})

    def test_additional_tags_merged(self):
        _, tags = self.load({"tags": {"Owner": "platform", "ManagedBy": "ops"}})

        self.assertEqual(tags["Owner"], "platform")
        self.assertEqual(tags["ManagedBy"], "ops")

    def test_zero_replicas_kept(self):
        config, _ = self.load({"canary_replicas": 0})

        self.assertEqual(config.canary_replicas, 0)

    def test_zero_replicas_rejected_by_canary(self):
        config, _ = self.load({"canary_replicas": 0})

        with patch('stack.canary.k8s'), patch('stack.canary.resource_options'):
            with self.assertRaises(ValueError):
                create_canary(Mock(), replicas=config.canary_replicas)

    def test_fail_policy_accepted(self):
        config, _ = self.load({"ingress_policy": "fail"})

        self.assertEqual(config.ingress_policy, "fail")

    def test_invalid_ingress_policy(self):
        with self.assertRaises(ValueError):
            self.load({"ingress_policy": "retry"})


if __name__ == "__main__":
    unittest.main()
