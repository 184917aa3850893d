"""
cli/commands/common.py - 명령 공통 헬퍼

OCM 연결은 명령 시작 시 열고, 종료 시 닫습니다.
"""

from __future__ import annotations

from cli.i18n import t
from cli.ui.console import print_error
from core.exceptions import RosaError
from core.ocm import OCMClient


def open_ocm_client() -> OCMClient | None:
    """OCM 연결 생성 (실패 시 에러 출력 후 None)"""
    try:
        return OCMClient.build()
    except RosaError as e:
        print_error(t("service.ocm_connection_failed", error=e))
        return None


def close_ocm_client(ocm_client: OCMClient) -> None:
    """연결 종료 (실패해도 종료 코드는 바꾸지 않음)"""
    try:
        ocm_client.close()
    except Exception as e:
        print_error(t("service.ocm_close_failed", error=e))
