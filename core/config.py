"""
core/config.py - 중앙 설정 관리

버전 정보, OCM 연결 설정, 명령에서 공통으로 쓰는 상수를 제공합니다.

OCM 설정 우선순위 (높은 순):
    1. 환경 변수 (OCM_URL, OCM_ACCESS_TOKEN, OCM_TOKEN)
    2. OCM CLI 설정 파일 ($OCM_CONFIG 또는 ~/.config/ocm/ocm.json)
    3. 기본값

Usage:
    from core.config import load_ocm_settings

    settings = load_ocm_settings()
    print(settings.url)  # https://api.openshift.com
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# =============================================================================
# 상수
# =============================================================================

PACKAGE_NAME = "rosa-services"

DEFAULT_OCM_URL = "https://api.openshift.com"
DEFAULT_TOKEN_URL = "https://sso.redhat.com/auth/realms/redhat-external/protocol/openid-connect/token"
DEFAULT_CLIENT_ID = "cloud-services"

# 클러스터 버전은 아직 옵션으로만 바꿀 수 있음
DEFAULT_OPENSHIFT_VERSION = "4.9"

# list services는 페이지네이션 없이 한 번만 조회
MANAGED_SERVICES_PAGE_SIZE = 1000

# HTTP 요청 타임아웃 (초)
REQUEST_TIMEOUT = 30

_PROJECT_ROOT = Path(__file__).resolve().parent.parent


def get_version() -> str:
    """버전 문자열 반환

    설치된 배포판 메타데이터를 우선 사용하고, 소스 트리에서 실행 중이면
    version.txt를 읽습니다.
    """
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        pass

    version_file = _PROJECT_ROOT / "version.txt"
    if version_file.exists():
        return version_file.read_text(encoding="utf-8").strip()
    return "0.0.0"


# =============================================================================
# OCM 설정
# =============================================================================


@dataclass
class OCMSettings:
    """OCM API 연결 설정

    Attributes:
        url: API 게이트웨이 URL
        token_url: SSO 토큰 교환 URL
        client_id: SSO 클라이언트 ID
        access_token: 바로 사용할 access token (선택)
        refresh_token: access token 교환용 offline/refresh token (선택)
        insecure: TLS 검증 비활성화 여부
    """

    url: str = DEFAULT_OCM_URL
    token_url: str = DEFAULT_TOKEN_URL
    client_id: str = DEFAULT_CLIENT_ID
    access_token: str | None = None
    refresh_token: str | None = None
    insecure: bool = False

    @property
    def has_credentials(self) -> bool:
        return bool(self.access_token or self.refresh_token)


def get_ocm_config_path() -> Path:
    """OCM CLI 설정 파일 경로"""
    env_path = os.environ.get("OCM_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".config" / "ocm" / "ocm.json"


def _read_config_file(path: Path) -> dict:
    if not path.exists():
        logger.debug("OCM 설정 파일 없음: %s", path)
        return {}

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(str(path), f"Can't load OCM config file '{path}'", cause=e) from e

    if not isinstance(data, dict):
        raise ConfigError(str(path), f"OCM config file '{path}' must contain a JSON object")
    return data


def load_ocm_settings(path: Path | None = None) -> OCMSettings:
    """OCM 설정 로드

    Args:
        path: 설정 파일 경로 (None이면 get_ocm_config_path())

    Returns:
        OCMSettings 인스턴스

    Raises:
        ConfigError: 설정 파일을 읽을 수 없는 경우
    """
    data = _read_config_file(path or get_ocm_config_path())

    settings = OCMSettings(
        url=data.get("url") or DEFAULT_OCM_URL,
        token_url=data.get("token_url") or DEFAULT_TOKEN_URL,
        client_id=data.get("client_id") or DEFAULT_CLIENT_ID,
        access_token=data.get("access_token") or None,
        refresh_token=data.get("refresh_token") or None,
        insecure=bool(data.get("insecure", False)),
    )

    # 환경 변수 오버라이드
    if os.environ.get("OCM_URL"):
        settings.url = os.environ["OCM_URL"]
    if os.environ.get("OCM_ACCESS_TOKEN"):
        settings.access_token = os.environ["OCM_ACCESS_TOKEN"]
    if os.environ.get("OCM_TOKEN"):
        settings.refresh_token = os.environ["OCM_TOKEN"]
        # 새 offline token이 주어지면 파일에 남은 access token은 무시
        if not os.environ.get("OCM_ACCESS_TOKEN"):
            settings.access_token = None

    return settings
