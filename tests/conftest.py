"""
tests/conftest.py - pytest 공통 픽스처

AWS/OCM 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(moto_iam, fake_ocm_client):
        # moto_iam: moto로 모킹한 IAM 클라이언트
        # fake_ocm_client: OCMClient 대역
        pass
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


ACCOUNT_ID = "123456789012"

TRUST_POLICY = json.dumps(
    {
        "Version": "2012-10-17",
        "Statement": [
            {
                "Effect": "Allow",
                "Principal": {"Service": "ec2.amazonaws.com"},
                "Action": "sts:AssumeRole",
            }
        ],
    }
)


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """테스트 환경 설정

    실제 OCM 설정 파일과 AWS 프로파일을 읽지 않도록 격리합니다.
    """
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("OCM_CONFIG", str(tmp_path / "ocm.json"))
    for name in ("AWS_PROFILE", "OCM_URL", "OCM_TOKEN", "OCM_ACCESS_TOKEN"):
        monkeypatch.delenv(name, raising=False)

    yield


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


@pytest.fixture
def moto_aws():
    """moto 전체 모킹 컨텍스트"""
    from moto import mock_aws

    with mock_aws():
        yield


@pytest.fixture
def moto_iam(moto_aws):
    """moto를 사용한 IAM 클라이언트"""
    import boto3

    yield boto3.client("iam", region_name="us-east-1")


def create_account_role(
    iam,
    name: str,
    role_type: str,
    version: Optional[str] = "4.9",
) -> str:
    """ROSA 태그가 붙은 Account Role 생성 후 ARN 반환"""
    tags = [{"Key": "rosa_role_type", "Value": role_type}]
    if version:
        tags.append({"Key": "rosa_openshift_version", "Value": version})
    response = iam.create_role(
        RoleName=name,
        AssumeRolePolicyDocument=TRUST_POLICY,
        Tags=tags,
    )
    return response["Role"]["Arn"]


def create_account_roles(iam, prefix: str = "ManagedOpenShift", version: str = "4.9") -> Dict[str, str]:
    """4종 Account Role 생성"""
    return {
        "installer": create_account_role(iam, f"{prefix}-Installer-Role", "installer", version),
        "support": create_account_role(iam, f"{prefix}-Support-Role", "support", version),
        "instance_controlplane": create_account_role(
            iam, f"{prefix}-ControlPlane-Role", "instance_controlplane", version
        ),
        "instance_worker": create_account_role(iam, f"{prefix}-Worker-Role", "instance_worker", version),
    }


def role_arn(name: str, account_id: str = ACCOUNT_ID) -> str:
    return f"arn:aws:iam::{account_id}:role/{name}"


class FakeAWSClient:
    """AWSClient 대역

    role_type별 ARN 목록을 돌려주고, 호출 기록을 남깁니다.
    """

    def __init__(
        self,
        role_arns: Optional[Dict[str, List[str]]] = None,
        existing_roles: Optional[List[str]] = None,
        account_id: str = ACCOUNT_ID,
        region: Optional[str] = "us-east-1",
    ):
        self.role_arns = role_arns or {}
        self.existing_roles = set(existing_roles or [])
        self.account_id = account_id
        self.region = region
        self.find_calls: List[str] = []
        self.validated: List[str] = []

    def find_role_arns(self, role_type: str, version: str) -> List[str]:
        self.find_calls.append(role_type)
        return list(self.role_arns.get(role_type, []))

    def validate_role_name_available(self, role_name: str) -> None:
        from core.exceptions import RoleNameCollisionError

        self.validated.append(role_name)
        if role_name in self.existing_roles:
            raise RoleNameCollisionError(role_name)

    def get_creator(self):
        from core.aws import Creator

        return Creator(account_id=self.account_id, arn=f"arn:aws:iam::{self.account_id}:user/test-user")

    def get_region(self) -> str:
        from core.exceptions import ConfigError

        if not self.region:
            raise ConfigError("region", "Region is not set")
        return self.region


def complete_role_arns(prefix: str = "ManagedOpenShift") -> Dict[str, List[str]]:
    """4종 Role이 모두 있는 role_arns"""
    return {
        "installer": [role_arn(f"{prefix}-Installer-Role")],
        "support": [role_arn(f"{prefix}-Support-Role")],
        "instance_controlplane": [role_arn(f"{prefix}-ControlPlane-Role")],
        "instance_worker": [role_arn(f"{prefix}-Worker-Role")],
    }


@pytest.fixture
def fake_aws_client():
    """4종 Role을 모두 찾을 수 있는 AWSClient 대역"""
    return FakeAWSClient(role_arns=complete_role_arns())


# =============================================================================
# OCM 모킹 픽스처
# =============================================================================


def make_response(
    status: int = 200,
    body: Optional[Any] = None,
    text: str = "",
) -> MagicMock:
    """requests.Response 대역"""
    response = MagicMock()
    response.status_code = status
    response.ok = 200 <= status < 300
    response.reason = "OK" if response.ok else "Error"
    if body is None:
        response.content = text.encode()
        response.text = text
        response.json.side_effect = ValueError("No JSON")
    else:
        response.content = b"{...}"
        response.text = ""
        response.json.return_value = body
    return response


@pytest.fixture
def mock_http_session():
    """requests.Session 대역"""
    session = MagicMock()
    session.headers = {}
    return session


@pytest.fixture
def fake_ocm_client():
    """OCMClient 대역"""
    from core.ocm import AddOn, ManagedService

    client = MagicMock()
    client.get_addon.return_value = AddOn(id="s1")
    client.create_managed_service.return_value = ManagedService(id="svc-1", service="s1", state="pending")
    client.list_managed_services.return_value = []
    return client


def create_mock_client_error(
    error_code: str,
    error_message: str = "Test error",
    operation: str = "TestOperation",
) -> Exception:
    """ClientError 생성 헬퍼"""
    from botocore.exceptions import ClientError

    return ClientError(
        {
            "Error": {
                "Code": error_code,
                "Message": error_message,
            }
        },
        operation,
    )
