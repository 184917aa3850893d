"""
core/services/account_roles.py - Account Role 탐색

Installer Role을 먼저 찾고, 그 이름에서 얻은 접두사로 나머지 3개
(Support, ControlPlane, Worker) Role을 찾습니다.

선택 규칙:
    - 0개: 에러 (rosa create account-roles 안내), 나머지 Role은 조회하지 않음
    - 1개: 그대로 사용
    - 여러 개: ``ManagedOpenShift-Installer-Role``을 포함한 Role 우선 (여럿이면 마지막), 없으면 첫 번째 (경고)

Usage:
    from core.services.account_roles import resolve_account_roles

    resolution = resolve_account_roles(aws_client, "4.9")
    print(resolution.prefix, resolution.installer_role_arn)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from core.aws.roles import (
    ACCOUNT_ROLES,
    CONTROL_PLANE_ACCOUNT_ROLE,
    DEFAULT_PREFIX,
    INSTALLER_ACCOUNT_ROLE,
    SUPPORT_ACCOUNT_ROLE,
    WORKER_ACCOUNT_ROLE,
    AccountRole,
)
from core.exceptions import RoleResolutionError

if TYPE_CHECKING:
    from core.aws.client import AWSClient

logger = logging.getLogger(__name__)

CREATE_ACCOUNT_ROLES_HINT = "You will need to run 'rosa create account-roles' to create them first."


@dataclass
class AccountRoleResolution:
    """Account Role 탐색 결과

    Attributes:
        prefix: Installer Role에서 추출한 Role 접두사
        role_arns: Role 타입별 ARN
        messages: 사용자에게 보여줄 정보 메시지
        warnings: 경고 메시지
        failures: 찾지 못한 Role별 에러 메시지
    """

    prefix: str = ""
    role_arns: dict[str, str] = field(default_factory=dict)
    messages: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    failures: list[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.failures and all(self.role_arns.get(role_type) for role_type in ACCOUNT_ROLES)

    @property
    def installer_role_arn(self) -> str:
        return self.role_arns.get(INSTALLER_ACCOUNT_ROLE, "")

    @property
    def support_role_arn(self) -> str:
        return self.role_arns.get(SUPPORT_ACCOUNT_ROLE, "")

    @property
    def control_plane_role_arn(self) -> str:
        return self.role_arns.get(CONTROL_PLANE_ACCOUNT_ROLE, "")

    @property
    def worker_role_arn(self) -> str:
        return self.role_arns.get(WORKER_ACCOUNT_ROLE, "")


def _last_match(role_arns: list[str], suffix: str, default: str = "") -> str:
    """suffix를 포함한 ARN 중 마지막 것 (없으면 default)"""
    selected = default
    for arn in role_arns:
        if suffix in arn:
            selected = arn
    return selected


def select_installer_role_arn(role_arns: list[str], role: AccountRole) -> tuple[str, str | None]:
    """Installer Role 후보 중 하나 선택

    Returns:
        (선택된 ARN, 경고 메시지 또는 None)

    Raises:
        RoleResolutionError: 후보가 없는 경우
    """
    if not role_arns:
        raise RoleResolutionError(f"No account roles found. {CREATE_ACCOUNT_ROLES_HINT}")

    if len(role_arns) == 1:
        return role_arns[0], None

    # 기본 접두사 Role 우선
    selected = _last_match(role_arns, role.role_suffix(DEFAULT_PREFIX), default=role_arns[0])
    return selected, f"More than one {role.name} role found, going with {selected}"


def get_account_role_prefix(role_arn: str, role: AccountRole) -> str:
    """Role ARN에서 ``-<Name>-Role`` 접미사를 뗀 Role 이름

    Examples:
        arn:aws:iam::123456789012:role/team-a-Installer-Role -> team-a

    Raises:
        RoleResolutionError: ARN 형식이 아닌 경우
    """
    parts = role_arn.split(":", 5)
    if len(parts) != 6 or parts[0] != "arn" or "/" not in parts[5]:
        raise RoleResolutionError(f"Failed to find prefix from {role.name} account role")

    role_name = parts[5].split("/", 1)[1]
    suffix = f"-{role.name}-Role"
    if role_name.endswith(suffix):
        return role_name[: -len(suffix)]
    return role_name


def resolve_account_roles(aws_client: AWSClient, version: str) -> AccountRoleResolution:
    """4종 Account Role ARN 탐색

    Args:
        aws_client: AWS 클라이언트
        version: 클러스터 minor 버전 (예: "4.9")

    Returns:
        모든 Role을 찾은 AccountRoleResolution

    Raises:
        RoleResolutionError: Installer Role이 없거나 나머지 Role 중 하나라도 찾지 못한 경우
        APICallError: IAM 호출 실패
    """
    resolution = AccountRoleResolution()
    installer = ACCOUNT_ROLES[INSTALLER_ACCOUNT_ROLE]

    installer_arns = aws_client.find_role_arns(INSTALLER_ACCOUNT_ROLE, version)
    installer_arn, warning = select_installer_role_arn(installer_arns, installer)
    if warning:
        resolution.warnings.append(warning)
    else:
        resolution.messages.append(f"Using {installer_arn} for the {installer.name} role")
    resolution.role_arns[INSTALLER_ACCOUNT_ROLE] = installer_arn

    resolution.prefix = get_account_role_prefix(installer_arn, installer)
    logger.debug("Using '%s' as the role prefix", resolution.prefix)

    for role_type, role in ACCOUNT_ROLES.items():
        if role_type == INSTALLER_ACCOUNT_ROLE:
            continue

        suffix = role.role_suffix(resolution.prefix)
        candidates = aws_client.find_role_arns(role_type, version)
        selected = _last_match(candidates, suffix)
        if not selected:
            resolution.failures.append(f"No {role.name} account roles found. {CREATE_ACCOUNT_ROLES_HINT}")
            continue

        resolution.messages.append(f"Using {selected} for the {role.name} role")
        resolution.role_arns[role_type] = selected

    if not resolution.complete:
        raise RoleResolutionError("Please create the above roles to continue", failures=resolution.failures)

    return resolution
