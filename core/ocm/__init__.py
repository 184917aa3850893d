# core/ocm/__init__.py
"""
OpenShift Cluster Manager (OCM) API 클라이언트

- paths: 리소스 경로 빌더 (parent_path/segment)
- connection: requests 기반 인증 연결
- client: 이 도구가 쓰는 리소스 작업 (add-on 조회, 관리형 서비스 생성/목록)
- types: 요청/응답 dataclass
- versions: OpenShift 버전 비교
"""

from .client import OCMClient
from .connection import Connection
from .paths import ADDONS, AWS_INQUIRIES, ROOT, SERVICES, ResourcePath
from .types import AddOn, AddOnParameter, CreateManagedServiceArgs, ManagedService, OperatorIAMRole
from .versions import check_supported_version, get_version_minor, random_label

__all__: list[str] = [
    "OCMClient",
    "Connection",
    "ResourcePath",
    "ROOT",
    "ADDONS",
    "AWS_INQUIRIES",
    "SERVICES",
    "AddOn",
    "AddOnParameter",
    "CreateManagedServiceArgs",
    "ManagedService",
    "OperatorIAMRole",
    "check_supported_version",
    "get_version_minor",
    "random_label",
]
