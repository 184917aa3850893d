"""
core/services/create.py - 관리형 서비스 생성 요청 구성

생성 워크플로우의 각 단계는 CreateManagedServiceArgs를 받아 필드를 채운
새 값을 반환합니다. 전역 상태 없이 단계 사이에 값을 넘깁니다.

단계:
    1. with_account_roles: Account Role 4종
    2. with_operator_roles: Operator Role 목록
    3. with_aws_identity: 계정 ID, 리전
    4. with_addon_parameters: Add-on 파라미터 중 CLI 플래그로 받은 값
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import replace

from core.exceptions import RoleResolutionError
from core.ocm.types import AddOn, CreateManagedServiceArgs, OperatorIAMRole
from core.services.account_roles import AccountRoleResolution


def with_account_roles(args: CreateManagedServiceArgs, resolution: AccountRoleResolution) -> CreateManagedServiceArgs:
    """Account Role ARN 설정

    Raises:
        RoleResolutionError: 4종 중 하나라도 비어 있는 경우
    """
    updated = replace(
        args,
        aws_role_arn=resolution.installer_role_arn,
        aws_support_role_arn=resolution.support_role_arn,
        aws_control_plane_role_arn=resolution.control_plane_role_arn,
        aws_worker_role_arn=resolution.worker_role_arn,
    )
    if not updated.has_account_roles:
        raise RoleResolutionError("Please create the above roles to continue", failures=resolution.failures)
    return updated


def with_operator_roles(args: CreateManagedServiceArgs, roles: Sequence[OperatorIAMRole]) -> CreateManagedServiceArgs:
    return replace(args, aws_operator_iam_role_list=list(roles))


def with_aws_identity(args: CreateManagedServiceArgs, account_id: str, region: str) -> CreateManagedServiceArgs:
    return replace(args, aws_account_id=account_id, aws_region=region)


def with_addon_parameters(
    args: CreateManagedServiceArgs,
    addon: AddOn | None,
    flags: Mapping[str, str],
) -> CreateManagedServiceArgs:
    """Add-on 파라미터 ID와 같은 이름의 플래그 값을 복사

    파라미터가 없는 플래그는 무시하고, 플래그가 없는 파라미터는 비워 둡니다.
    addon이 None이면 (조회 실패) 파라미터 없이 진행합니다.
    """
    parameters = dict(args.parameters)
    if addon is not None:
        for param in addon.parameters:
            if param.id in flags:
                parameters[param.id] = flags[param.id]
    return replace(args, parameters=parameters)


def follow_up_commands(cluster_name: str) -> list[str]:
    """서비스 생성 후 사용자가 실행해야 하는 명령"""
    return [
        f"rosa create operator-roles --cluster {cluster_name}",
        f"rosa create oidc-provider --cluster {cluster_name}",
    ]


def parse_extra_flags(extra_args: Sequence[str]) -> dict[str, str]:
    """``--key=value`` / ``--key value`` 형식의 남은 인자를 딕셔너리로

    값 없이 끝나거나 다음 인자가 플래그인 경우 "true"로 취급합니다.
    """
    flags: dict[str, str] = {}
    index = 0
    while index < len(extra_args):
        token = extra_args[index]
        index += 1
        if not token.startswith("--") or token == "--":
            continue

        name = token[2:]
        if "=" in name:
            name, value = name.split("=", 1)
        elif index < len(extra_args) and not extra_args[index].startswith("--"):
            value = extra_args[index]
            index += 1
        else:
            value = "true"
        flags[name] = value

    return flags
