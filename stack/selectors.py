"""
Label selectors
A workload's pod labels and the Service selecting it are built from the same
Selector, so the two can never drift apart.
"""
from typing import Dict, Mapping


class Selector:
    """Immutable set of labels shared by a workload and its Service"""

    def __init__(self, labels: Mapping[str, str]):
        if not labels:
            raise ValueError("a selector needs at least one label")
        self._labels = tuple(sorted(labels.items()))

    @property
    def labels(self) -> Dict[str, str]:
        return dict(self._labels)

    def matches(self, pod_labels: Mapping[str, str]) -> bool:
        """True when every selector label is present on the pod with the same value"""
        return all(pod_labels.get(key) == value for key, value in self._labels)

    def merged(self, **extra: str) -> Dict[str, str]:
        """Selector labels plus extra metadata labels, selector keys win"""
        labels = dict(extra)
        labels.update(self._labels)
        return labels

    def __eq__(self, other):
        if not isinstance(other, Selector):
            return NotImplemented
        return self._labels == other._labels

    def __hash__(self):
        return hash(self._labels)

    def __repr__(self):
        return f"Selector({self.labels!r})"


def canary_selector() -> Selector:
    return Selector({"appClass": "nginx-deployment"})


def kube_prometheus_selector(release: str) -> Selector:
    """Labels the kube-prometheus chart puts on its Prometheus server pods"""
    return Selector({
        "app.kubernetes.io/name": "prometheus",
        "prometheus": f"{release}-kube-prometheus-prometheus",
    })


def grafana_selector(release: str) -> Selector:
    """Labels the grafana chart puts on its pods"""
    return Selector({
        "app.kubernetes.io/instance": release,
        "app.kubernetes.io/name": "grafana",
    })
