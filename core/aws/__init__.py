# core/aws/__init__.py
"""
AWS IAM/STS 연동

- client: boto3 기반 Role 탐색, 이름 확인, 호출자 조회
- roles: Account Role / Operator 카탈로그와 태그 키
"""

from .client import AWSClient, Creator
from .roles import (
    ACCOUNT_ROLES,
    CREDENTIAL_REQUESTS,
    DEFAULT_PREFIX,
    INSTALLER_ACCOUNT_ROLE,
    MAX_ROLE_NAME_LENGTH,
    AccountRole,
    Operator,
)

__all__: list[str] = [
    "AWSClient",
    "Creator",
    "ACCOUNT_ROLES",
    "CREDENTIAL_REQUESTS",
    "DEFAULT_PREFIX",
    "INSTALLER_ACCOUNT_ROLE",
    "MAX_ROLE_NAME_LENGTH",
    "AccountRole",
    "Operator",
]
