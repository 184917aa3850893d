# core/services/__init__.py
"""
관리형 서비스 생성 워크플로우 구성 요소

- account_roles: Account Role 탐색 (Installer → 접두사 → 나머지 3종)
- operator_roles: Operator Role ARN 계산 및 이름 사용 가능 여부 확인
- create: 생성 요청 단계별 구성
"""

from .account_roles import AccountRoleResolution, resolve_account_roles
from .create import (
    follow_up_commands,
    parse_extra_flags,
    with_account_roles,
    with_addon_parameters,
    with_aws_identity,
    with_operator_roles,
)
from .operator_roles import get_operator_roles_prefix, plan_operator_roles, validate_operator_roles

__all__: list[str] = [
    "AccountRoleResolution",
    "resolve_account_roles",
    "follow_up_commands",
    "parse_extra_flags",
    "with_account_roles",
    "with_addon_parameters",
    "with_aws_identity",
    "with_operator_roles",
    "get_operator_roles_prefix",
    "plan_operator_roles",
    "validate_operator_roles",
]
