"""
EKS Cluster
Managed control plane and node group inside the VPC, nodes get no public IP
"""
import pulumi
import pulumi_eks as eks
from typing import Dict, Optional


def create_cluster(name: str, network: Dict[str, any],
                   version: Optional[str] = None,
                   instance_type: Optional[str] = None,
                   desired_size: Optional[int] = None,
                   min_size: Optional[int] = None,
                   max_size: Optional[int] = None,
                   tags: Dict[str, str] = None) -> Dict[str, any]:
    """
    Create the EKS cluster and its default node group

    Args:
        name: Cluster resource name
        network: Result of create_network
        version: Kubernetes version, EKS default when None
        instance_type: Worker instance type
        desired_size: Desired number of nodes
        min_size: Minimum number of nodes
        max_size: Maximum number of nodes
        tags: Additional tags

    Returns:
        Dict with the cluster, its kubeconfig and the EKS cluster name
    """
    tags = tags or {}

    optional_args = {
        "version": version,
        "instance_type": instance_type,
        "desired_capacity": desired_size,
        "min_size": min_size,
        "max_size": max_size,
    }
    cluster_args = {key: value for key, value in optional_args.items() if value is not None}

    cluster = eks.Cluster(name,
        vpc_id=network["vpc_id"],
        public_subnet_ids=network["public_subnet_ids"],
        private_subnet_ids=network["private_subnet_ids"],
        # Inbound traffic only arrives through load balancers
        node_associate_public_ip_address=False,
        tags=tags,
        **cluster_args)

    pulumi.log.info(f"Declared EKS cluster {name}")

    return {
        "cluster": cluster,
        "kubeconfig": cluster.kubeconfig,
        "kubeconfig_json": cluster.kubeconfig_json,
        "cluster_name": cluster.eks_cluster.name,
    }
