# core/__init__.py
"""
core - rosa-services 인프라

명령 핸들러가 사용하는 설정, 예외, 원격 API 클라이언트를 포함하는 최상위 패키지입니다.

아키텍처:
    core/
    ├── aws/            # IAM/STS 클라이언트, Role 카탈로그
    ├── ocm/            # OCM REST 클라이언트 (경로 빌더, 연결, 타입)
    ├── services/       # 관리형 서비스 생성 워크플로우 단계
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    from core.config import load_ocm_settings
    from core.exceptions import RosaError
    from core.ocm import OCMClient

    with OCMClient.build(load_ocm_settings()) as client:
        services = client.list_managed_services(1000)
"""

from core import aws, config, exceptions, ocm, services

__all__: list[str] = [
    # 서브패키지
    "aws",
    "ocm",
    "services",
    # 모듈
    "config",
    "exceptions",
]
