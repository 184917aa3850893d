"""
core/ocm/connection.py - OCM API 연결

requests.Session 위에 bearer token 인증을 얹은 얇은 연결 객체입니다.

토큰 우선순위:
    1. access_token이 있으면 그대로 사용
    2. refresh_token(offline token)이 있으면 SSO 토큰 URL에서 access token으로 교환

Usage:
    from core.config import load_ocm_settings
    from core.ocm.connection import Connection

    connection = Connection.from_settings(load_ocm_settings())
    try:
        data = connection.get(SERVICES, params={"size": 10})
    finally:
        connection.close()
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from core.config import REQUEST_TIMEOUT, OCMSettings
from core.exceptions import ConnectionSetupError, OCMAPIError
from core.ocm.paths import ResourcePath

logger = logging.getLogger(__name__)


def _error_reason(response: requests.Response) -> str:
    """OCM 에러 응답에서 reason 추출

    OCM 에러 본문 형식: {"kind": "Error", "id": "404", "reason": "..."}
    """
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or response.reason or ""

    if isinstance(body, dict):
        return body.get("reason") or body.get("error_description") or body.get("error") or ""
    return ""


class Connection:
    """OCM API 연결

    Attributes:
        url: API 게이트웨이 URL
    """

    def __init__(
        self,
        url: str,
        access_token: str,
        session: requests.Session | None = None,
        verify: bool = True,
        timeout: int = REQUEST_TIMEOUT,
    ) -> None:
        self.url = url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.verify = verify
        self._session.headers.update(
            {
                "Authorization": f"Bearer {access_token}",
                "Accept": "application/json",
            }
        )
        self._closed = False

    @classmethod
    def from_settings(
        cls,
        settings: OCMSettings,
        session: requests.Session | None = None,
    ) -> Connection:
        """설정으로부터 연결 생성

        Raises:
            ConnectionSetupError: 토큰이 없거나 토큰 교환에 실패한 경우
        """
        if not settings.has_credentials:
            raise ConnectionSetupError("Not logged in, run the 'ocm login' command or set the OCM_TOKEN variable")

        session = session or requests.Session()
        access_token = settings.access_token
        if not access_token:
            access_token = exchange_refresh_token(settings, session)

        return cls(settings.url, access_token, session=session, verify=not settings.insecure)

    # -------------------------------------------------------------------------
    # HTTP
    # -------------------------------------------------------------------------

    def request(
        self,
        method: str,
        path: ResourcePath | str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """API 호출 후 JSON 본문 반환

        Raises:
            OCMAPIError: 전송 실패 또는 2xx 이외의 응답
        """
        operation = f"{method} {path}"
        url = f"{self.url}{path}"
        logger.debug("OCM 요청: %s params=%s", operation, params)

        try:
            response = self._session.request(method, url, params=params, json=body, timeout=self._timeout)
        except requests.RequestException as e:
            raise OCMAPIError(operation, cause=e) from e

        logger.debug("OCM 응답: %s -> %s", operation, response.status_code)

        if not response.ok:
            raise OCMAPIError(operation, status=response.status_code, reason=_error_reason(response))

        if not response.content:
            return {}
        return response.json()

    def get(self, path: ResourcePath | str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return self.request("GET", path, params=params)

    def post(self, path: ResourcePath | str, body: dict[str, Any]) -> dict[str, Any]:
        return self.request("POST", path, body=body)

    def close(self) -> None:
        """세션 해제"""
        if self._closed:
            return
        self._session.close()
        self._closed = True


def exchange_refresh_token(settings: OCMSettings, session: requests.Session) -> str:
    """offline/refresh token을 access token으로 교환

    Raises:
        ConnectionSetupError: SSO 서버가 토큰을 발급하지 않은 경우
    """
    logger.debug("refresh token 교환: %s", settings.token_url)

    try:
        response = session.post(
            settings.token_url,
            data={
                "grant_type": "refresh_token",
                "client_id": settings.client_id,
                "refresh_token": settings.refresh_token,
            },
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        raise ConnectionSetupError("Can't request access token", cause=e) from e

    if not response.ok:
        raise ConnectionSetupError(f"Can't get access token ({response.status_code}): {_error_reason(response)}")

    token = response.json().get("access_token")
    if not token:
        raise ConnectionSetupError("Token response doesn't contain an access token")
    return token
