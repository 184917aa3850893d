"""
core/exceptions.py - 통합 예외 계층 구조

애플리케이션 전체에서 사용되는 예외 클래스들을 정의합니다.
명령 핸들러는 RosaError를 캐치하여 reporter로 출력한 뒤 종료 코드 1로 종료합니다.

예외 계층 구조:
    RosaError (베이스)
    ├── ConfigError (설정 관련)
    ├── ConnectionSetupError (OCM 연결 생성 실패)
    ├── OCMAPIError (OCM API 호출 실패)
    ├── APICallError (AWS API 호출 실패)
    ├── RoleResolutionError (Account Role 탐색 실패)
    ├── RoleNameCollisionError (Operator Role 이름 충돌)
    └── VersionError (버전 호환성 검사 실패)

Usage:
    from core.exceptions import APICallError

    try:
        iam.get_role(RoleName=name)
    except ClientError as e:
        raise APICallError.from_client_error("iam", "get_role", e)
"""

from typing import Any, Dict, List, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class RosaError(Exception):
    """rosa-services 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 설정 / 연결 관련 예외
# =============================================================================


class ConfigError(RosaError):
    """설정 관련 예외"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause)
        self.config_key = key
        self.details["config_key"] = key


class ConnectionSetupError(RosaError):
    """OCM 연결 생성 실패"""

    pass


class OCMAPIError(RosaError):
    """OCM REST API 호출 실패

    2xx 이외의 응답을 래핑합니다. OCM 에러 응답 본문의 reason 필드를 메시지로 사용합니다.
    """

    def __init__(
        self,
        operation: str,
        status: Optional[int] = None,
        reason: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        message = operation
        if status is not None:
            message = f"{message} ({status})"
        if reason:
            message = f"{message}: {reason}"

        super().__init__(message, cause)
        self.operation = operation
        self.status = status
        self.reason = reason
        self.details.update(
            {
                "operation": operation,
                "status": status,
            }
        )


class APICallError(RosaError):
    """AWS API 호출 관련 예외

    boto3/botocore의 ClientError를 래핑하여 일관된 예외 처리를 제공합니다.
    """

    def __init__(
        self,
        service: str,
        operation: str,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        message = f"{service}.{operation}"
        if error_code:
            message = f"{message} failed ({error_code})"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message)
        self.cause = cause
        self.service = service
        self.operation = operation
        self.error_code = error_code
        self.error_message = error_message
        self.details.update(
            {
                "service": service,
                "operation": operation,
                "error_code": error_code,
            }
        )

    @classmethod
    def from_client_error(
        cls,
        service: str,
        operation: str,
        client_error: Exception,
    ) -> "APICallError":
        """botocore 예외로부터 생성

        ClientError는 Error.Code / Error.Message를 사용하고, 응답이 없는
        BotoCoreError (자격 증명 없음, 연결 실패 등)는 예외 메시지를 사용합니다.
        """
        response = getattr(client_error, "response", None)
        if response is None:
            return cls(service=service, operation=operation, error_message=str(client_error), cause=client_error)

        error_info = response.get("Error", {})
        return cls(
            service=service,
            operation=operation,
            error_code=error_info.get("Code"),
            error_message=error_info.get("Message"),
            cause=client_error,
        )


# =============================================================================
# Role 관련 예외
# =============================================================================


class RoleResolutionError(RosaError):
    """Account Role 탐색 실패

    찾지 못한 Role마다 하나씩 failures에 메시지가 쌓입니다.
    """

    def __init__(
        self,
        message: str,
        failures: Optional[List[str]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause)
        self.failures = failures or []
        self.details["failures"] = self.failures


class RoleNameCollisionError(RosaError):
    """Operator Role 이름이 이미 사용 중인 경우"""

    def __init__(self, role_name: str):
        super().__init__(f"Role '{role_name}' already exists")
        self.role_name = role_name
        self.details["role_name"] = role_name


class VersionError(RosaError):
    """버전 문자열 파싱/비교 실패"""

    def __init__(
        self,
        version: str,
        cause: Optional[Exception] = None,
    ):
        super().__init__(f"Invalid version '{version}'", cause)
        self.version = version
        self.details["version"] = version


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================


def _error_code(error: Exception) -> str:
    if isinstance(error, APICallError):
        return error.error_code or ""
    if hasattr(error, "response"):
        return error.response.get("Error", {}).get("Code", "")
    return ""


def is_not_found(error: Exception) -> bool:
    """리소스를 찾을 수 없는 오류인지 확인

    IAM get_role은 존재하지 않는 Role에 대해 NoSuchEntity를 반환합니다.
    """
    return _error_code(error) in {
        "ResourceNotFoundException",
        "NotFoundException",
        "NoSuchEntity",
    }
