"""
core/aws/client.py - AWS IAM/STS 클라이언트

ROSA Account Role 탐색, Role 이름 사용 가능 여부 확인, 호출자 식별 정보 조회를
담당합니다. IAM은 글로벌 서비스이므로 리전은 STS/리전 조회에만 사용됩니다.

Usage:
    from core.aws import AWSClient

    aws = AWSClient.create(profile="my-profile", region="us-east-1")
    arns = aws.find_role_arns("installer", "4.9")
    creator = aws.get_creator()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from core.aws.roles import ACCOUNT_ROLES, TAG_OPENSHIFT_VERSION, TAG_ROLE_TYPE
from core.exceptions import APICallError, ConfigError, RoleNameCollisionError, VersionError, is_not_found
from core.ocm.versions import check_supported_version

if TYPE_CHECKING:
    from mypy_boto3_iam import IAMClient
    from mypy_boto3_sts import STSClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Creator:
    """AWS 호출자 식별 정보

    Attributes:
        account_id: AWS 계정 ID
        arn: 호출자 ARN
        is_sts: assumed-role(STS) 자격 증명 여부
    """

    account_id: str
    arn: str
    is_sts: bool = False


class AWSClient:
    """ROSA 작업용 AWS 클라이언트"""

    def __init__(self, session: boto3.Session, region: str | None = None) -> None:
        self._session = session
        self._region = region or session.region_name
        self._iam: IAMClient = session.client("iam")
        self._sts: STSClient = session.client("sts")

    @classmethod
    def create(cls, profile: str | None = None, region: str | None = None) -> AWSClient:
        """프로파일/리전으로 boto3 세션을 만들어 클라이언트 생성

        Raises:
            ConfigError: 프로파일을 찾을 수 없는 경우
        """
        try:
            session = boto3.Session(profile_name=profile, region_name=region)
            return cls(session, region=region)
        except BotoCoreError as e:
            raise ConfigError("profile", f"Failed to create AWS session for profile '{profile}'", cause=e) from e

    # -------------------------------------------------------------------------
    # 리전 / 호출자
    # -------------------------------------------------------------------------

    @property
    def region(self) -> str | None:
        return self._region

    def get_region(self) -> str:
        """사용할 리전 반환

        Raises:
            ConfigError: 옵션, 환경 변수, 프로파일 어디에도 리전이 없는 경우
        """
        if not self._region:
            raise ConfigError(
                "region",
                "Region is not set. Use --region to set the region or set the AWS_DEFAULT_REGION environment variable",
            )
        return self._region

    def get_creator(self) -> Creator:
        """STS get_caller_identity로 호출자 정보 조회"""
        try:
            identity = self._sts.get_caller_identity()
        except (ClientError, BotoCoreError) as e:
            raise APICallError.from_client_error("sts", "get_caller_identity", e) from e

        arn = identity["Arn"]
        return Creator(
            account_id=identity["Account"],
            arn=arn,
            is_sts=":assumed-role/" in arn,
        )

    # -------------------------------------------------------------------------
    # IAM Role
    # -------------------------------------------------------------------------

    def list_roles(self) -> list[dict[str, Any]]:
        """계정의 모든 IAM Role"""
        roles: list[dict[str, Any]] = []
        try:
            paginator = self._iam.get_paginator("list_roles")
            for page in paginator.paginate():
                roles.extend(page.get("Roles", []))
        except (ClientError, BotoCoreError) as e:
            raise APICallError.from_client_error("iam", "list_roles", e) from e
        return roles

    def _list_role_tags(self, role_name: str) -> dict[str, str]:
        try:
            response = self._iam.list_role_tags(RoleName=role_name)
        except (ClientError, BotoCoreError) as e:
            raise APICallError.from_client_error("iam", "list_role_tags", e) from e
        return {tag["Key"]: tag["Value"] for tag in response.get("Tags", [])}

    def find_role_arns(self, role_type: str, version: str) -> list[str]:
        """Role 타입과 최소 클러스터 버전에 맞는 Account Role ARN 목록

        Role 이름에 카테고리 이름이 포함되어 있고, rosa_role_type 태그가 role_type과 같고,
        rosa_openshift_version 태그가 version 이상인 Role만 반환합니다.
        """
        role_name_part = ACCOUNT_ROLES[role_type].name
        role_arns: list[str] = []

        for role in self.list_roles():
            role_name = role["RoleName"]
            if role_name_part not in role_name:
                continue

            tags = self._list_role_tags(role_name)
            if tags.get(TAG_ROLE_TYPE) != role_type:
                continue

            tagged_version = tags.get(TAG_OPENSHIFT_VERSION)
            if tagged_version and version:
                try:
                    if not check_supported_version(tagged_version, version):
                        logger.debug("%s: 버전 %s < %s, 제외", role_name, tagged_version, version)
                        continue
                except VersionError:
                    logger.debug("%s: 버전 태그 '%s' 파싱 실패, 제외", role_name, tagged_version)
                    continue

            role_arns.append(role["Arn"])

        logger.debug("%s Role %d개 발견", role_type, len(role_arns))
        return role_arns

    def validate_role_name_available(self, role_name: str) -> None:
        """Role 이름이 아직 사용되지 않았는지 확인

        Raises:
            RoleNameCollisionError: 같은 이름의 Role이 이미 있는 경우
            APICallError: NoSuchEntity 이외의 IAM 오류, 자격 증명/네트워크 오류
        """
        try:
            self._iam.get_role(RoleName=role_name)
        except (ClientError, BotoCoreError) as e:
            if is_not_found(e):
                return
            raise APICallError.from_client_error("iam", "get_role", e) from e

        raise RoleNameCollisionError(role_name)
