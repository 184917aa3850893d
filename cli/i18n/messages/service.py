"""
cli/i18n/messages/service.py - Managed Service Command Messages

Contains translations for the create/list service commands.
"""

from __future__ import annotations

SERVICE_MESSAGES = {
    # =========================================================================
    # Connection
    # =========================================================================
    "ocm_connection_failed": {
        "ko": "OCM 연결 생성 실패: {error}",
        "en": "Failed to create OCM connection: {error}",
    },
    "ocm_close_failed": {
        "ko": "OCM 연결 종료 실패: {error}",
        "en": "Failed to close OCM connection: {error}",
    },
    "aws_client_failed": {
        "ko": "AWS 클라이언트 생성 실패: {error}",
        "en": "Failed to create AWS client: {error}",
    },
    # =========================================================================
    # create service
    # =========================================================================
    "role_prefix": {
        "ko": "Role 접두사로 '{prefix}' 사용",
        "en": "Using '{prefix}' as the role prefix",
    },
    "find_role_failed": {
        "ko": "Account Role 조회 실패: {error}",
        "en": "Failed to find account roles: {error}",
    },
    "credentials_failed": {
        "ko": "IAM 자격 증명을 가져올 수 없습니다: {error}",
        "en": "Unable to get IAM credentials: {error}",
    },
    "operator_version_failed": {
        "ko": "Operator Role 버전 검증 오류: {error}",
        "en": "Error validating operator role version: {error}",
    },
    "validate_role_failed": {
        "ko": "Role 검증 오류: {error}",
        "en": "Error validating role: {error}",
    },
    "region_failed": {
        "ko": "리전 조회 오류: {error}",
        "en": "Error getting region: {error}",
    },
    "using_region": {
        "ko": "AWS 리전: {region}",
        "en": "Using AWS region: {region}",
    },
    "parameters_failed": {
        "ko": "서비스 파라미터 처리 실패: {error}",
        "en": "Failed to process service parameters: {error}",
    },
    "create_failed": {
        "ko": "관리형 서비스 생성 실패: {error}",
        "en": "Failed to create managed service: {error}",
    },
    "follow_up": {
        "ko": "클러스터 생성을 계속하려면 다음 명령을 실행하세요:",
        "en": "Run the following commands to continue the cluster creation:",
    },
    "missing_option": {
        "ko": "필수 옵션 누락: --{name}",
        "en": "Missing required option: --{name}",
    },
    # =========================================================================
    # list services
    # =========================================================================
    "list_failed": {
        "ko": "관리형 서비스 목록 조회 실패: {error}",
        "en": "Failed to retrieve list of managed services: {error}",
    },
}
