"""
core/services/operator_roles.py - Operator Role 계획

클러스터 버전에 필요한 Operator마다 IAM Role ARN을 계산하고,
그 이름이 AWS에서 아직 사용되지 않았는지 확인합니다.

ARN 형식:
    arn:aws:iam::<account-id>:role/<prefix>-<namespace>-<name>
    (role/ 뒤 이름은 최대 64자)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from core.aws.roles import CREDENTIAL_REQUESTS, MAX_ROLE_NAME_LENGTH, Operator
from core.ocm.types import OperatorIAMRole
from core.ocm.versions import check_supported_version, get_version_minor, random_label

if TYPE_CHECKING:
    from core.aws.client import AWSClient

logger = logging.getLogger(__name__)

# 클러스터 이름 뒤에 붙는 랜덤 라벨 길이
ROLE_PREFIX_LABEL_SIZE = 4


def get_operator_roles_prefix(cluster_name: str) -> str:
    """``<cluster>-<랜덤 4자>``"""
    return f"{cluster_name}-{random_label(ROLE_PREFIX_LABEL_SIZE)}"


def get_operator_role_arn(prefix: str, operator: Operator, account_id: str) -> str:
    role_name = f"{prefix}-{operator.namespace}-{operator.name}"[:MAX_ROLE_NAME_LENGTH]
    return f"arn:aws:iam::{account_id}:role/{role_name}"


def plan_operator_roles(
    prefix: str,
    version: str,
    account_id: str,
    operators: Mapping[str, Operator] | None = None,
) -> list[OperatorIAMRole]:
    """클러스터 버전에 필요한 Operator Role 목록

    Args:
        prefix: Operator Role 접두사
        version: 클러스터 버전 (예: "4.9", "4.10.3")
        account_id: AWS 계정 ID
        operators: Operator 카탈로그 (기본: CREDENTIAL_REQUESTS)

    Raises:
        VersionError: 버전 문자열을 비교할 수 없는 경우
    """
    if operators is None:
        operators = CREDENTIAL_REQUESTS

    minor = get_version_minor(version)
    roles: list[OperatorIAMRole] = []

    for operator in operators.values():
        if operator.min_version and not check_supported_version(minor, operator.min_version):
            logger.debug("%s/%s: %s 미만 버전, 건너뜀", operator.namespace, operator.name, operator.min_version)
            continue

        roles.append(
            OperatorIAMRole(
                name=operator.name,
                namespace=operator.namespace,
                role_arn=get_operator_role_arn(prefix, operator, account_id),
            )
        )

    return roles


def validate_operator_roles(aws_client: AWSClient, roles: Iterable[OperatorIAMRole]) -> None:
    """모든 Operator Role 이름이 사용 가능한지 확인

    Raises:
        RoleNameCollisionError: 이미 존재하는 Role이 있는 경우 (첫 번째에서 중단)
        APICallError: IAM 호출 실패
    """
    for role in roles:
        aws_client.validate_role_name_available(role.role_name)
