"""
Network Infrastructure
Dedicated VPC with public and private subnets in every AZ
"""
import pulumi
import pulumi_aws as aws
import pulumi_awsx as awsx
from typing import Dict, List, Optional


def pick_availability_zones(count: int) -> List[str]:
    """First `count` available AZs in the current region"""
    azs = aws.get_availability_zones(state="available")
    if count > len(azs.names):
        raise ValueError(f"requested {count} availability zones, region only has {len(azs.names)}")
    return azs.names[:count]


def create_network(name: str, cidr_block: Optional[str] = None,
                   availability_zone_count: Optional[int] = None,
                   tags: Dict[str, str] = None) -> Dict[str, any]:
    """
    Create the VPC the cluster lives in

    Subnet sizes, NAT gateways and route tables follow the awsx defaults
    unless a CIDR block or AZ count is given.

    Args:
        name: VPC name
        cidr_block: Optional VPC CIDR block
        availability_zone_count: Optional number of AZs to span
        tags: Additional tags

    Returns:
        Dict with vpc resource and subnet id outputs
    """
    tags = tags or {}

    vpc_args = {}
    if cidr_block:
        vpc_args["cidr_block"] = cidr_block
    if availability_zone_count:
        vpc_args["availability_zone_names"] = pick_availability_zones(availability_zone_count)

    vpc = awsx.ec2.Vpc(name,
        subnet_specs=[
            # Role tags let Kubernetes place LoadBalancer services
            awsx.ec2.SubnetSpecArgs(
                type=awsx.ec2.SubnetType.PUBLIC,
                tags={**tags, "kubernetes.io/role/elb": "1"},
            ),
            awsx.ec2.SubnetSpecArgs(
                type=awsx.ec2.SubnetType.PRIVATE,
                tags={**tags, "kubernetes.io/role/internal-elb": "1"},
            ),
        ],
        tags={**tags, "Name": name},
        **vpc_args)

    pulumi.log.info(f"Declared VPC {name} ({cidr_block or 'default CIDR'})")

    return {
        "vpc": vpc,
        "vpc_id": vpc.vpc_id,
        "public_subnet_ids": vpc.public_subnet_ids,
        "private_subnet_ids": vpc.private_subnet_ids,
    }
