"""
core/ocm/client.py - OCM API 클라이언트

이 도구가 사용하는 OCM 리소스 작업을 메서드 하나씩으로 제공합니다.

Usage:
    from core.ocm import OCMClient

    with OCMClient.build() as client:
        for service in client.list_managed_services(1000):
            print(service.id, service.service, service.state)
"""

from __future__ import annotations

import logging

from core.config import OCMSettings, load_ocm_settings
from core.ocm.connection import Connection
from core.ocm.paths import ADDONS, SERVICES
from core.ocm.types import AddOn, CreateManagedServiceArgs, ManagedService

logger = logging.getLogger(__name__)


class OCMClient:
    """OCM clusters_mgmt / service_mgmt 클라이언트"""

    def __init__(self, connection: Connection) -> None:
        self._connection = connection

    @classmethod
    def build(cls, settings: OCMSettings | None = None) -> OCMClient:
        """설정 파일/환경 변수로 연결을 열어 클라이언트 생성

        Raises:
            ConfigError: 설정 파일을 읽을 수 없는 경우
            ConnectionSetupError: 연결 생성 실패
        """
        settings = settings or load_ocm_settings()
        logger.debug("OCM 연결 생성: %s", settings.url)
        return cls(Connection.from_settings(settings))

    def get_addon(self, addon_id: str) -> AddOn:
        """Add-on 조회 (파라미터 스키마 포함)"""
        data = self._connection.get(ADDONS.addon(addon_id))
        return AddOn.from_dict(data)

    def create_managed_service(self, args: CreateManagedServiceArgs) -> ManagedService:
        """관리형 서비스 생성"""
        data = self._connection.post(SERVICES, args.to_body())
        return ManagedService.from_dict(data)

    def list_managed_services(self, size: int) -> list[ManagedService]:
        """관리형 서비스 목록 (최대 size개, 단일 페이지)"""
        data = self._connection.get(SERVICES, params={"size": size})
        return [ManagedService.from_dict(item) for item in data.get("items") or []]

    def close(self) -> None:
        self._connection.close()

    def __enter__(self) -> OCMClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
