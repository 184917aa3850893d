"""
core/ocm/types.py - OCM 요청/응답 데이터 타입

관리형 서비스 생성 요청과 OCM 응답 레코드를 dataclass로 정의합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class OperatorIAMRole:
    """Operator 하나에 할당될 IAM Role

    Attributes:
        name: Operator credential 이름 (예: "ebs-cloud-credentials")
        namespace: Operator 네임스페이스
        role_arn: 대상 IAM Role ARN
    """

    name: str
    namespace: str
    role_arn: str

    @property
    def role_name(self) -> str:
        """ARN의 ``role/`` 뒤 부분"""
        return self.role_arn.split("/", 1)[1]

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "namespace": self.namespace,
            "role_arn": self.role_arn,
        }


@dataclass
class CreateManagedServiceArgs:
    """관리형 서비스 생성 요청

    생성 워크플로우의 각 단계가 필드를 채운 새 값을 반환하고,
    마지막에 한 번만 전송됩니다.
    """

    service_name: str
    cluster_name: str
    aws_role_arn: str = ""
    aws_support_role_arn: str = ""
    aws_control_plane_role_arn: str = ""
    aws_worker_role_arn: str = ""
    aws_account_id: str = ""
    aws_region: str = ""
    aws_operator_iam_role_list: list[OperatorIAMRole] = field(default_factory=list)
    parameters: dict[str, str] = field(default_factory=dict)

    @property
    def has_account_roles(self) -> bool:
        return all(
            (
                self.aws_role_arn,
                self.aws_support_role_arn,
                self.aws_control_plane_role_arn,
                self.aws_worker_role_arn,
            )
        )

    def to_body(self) -> dict[str, Any]:
        """service_mgmt API 요청 본문"""
        return {
            "service": self.service_name,
            "parameters": [{"id": key, "value": value} for key, value in self.parameters.items()],
            "cluster": {
                "name": self.cluster_name,
                "region": {"id": self.aws_region},
                "aws": {
                    "account_id": self.aws_account_id,
                    "sts": {
                        "role_arn": self.aws_role_arn,
                        "support_role_arn": self.aws_support_role_arn,
                        "instance_iam_roles": {
                            "master_role_arn": self.aws_control_plane_role_arn,
                            "worker_role_arn": self.aws_worker_role_arn,
                        },
                        "operator_iam_roles": [role.to_dict() for role in self.aws_operator_iam_role_list],
                    },
                },
            },
        }


@dataclass(frozen=True)
class ManagedService:
    """service_mgmt API의 관리형 서비스 레코드"""

    id: str
    service: str
    state: str
    cluster_name: str = ""
    href: str = ""
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ManagedService:
        cluster = data.get("cluster") or {}
        return cls(
            id=data.get("id", ""),
            service=data.get("service", ""),
            state=data.get("service_state", ""),
            cluster_name=cluster.get("name", ""),
            href=data.get("href", ""),
            raw=data,
        )

    def __str__(self) -> str:
        text = f"Service '{self.service}' ({self.id}) is {self.state or 'pending'}"
        if self.cluster_name:
            text = f"{text} on cluster '{self.cluster_name}'"
        return text


@dataclass(frozen=True)
class AddOnParameter:
    """Add-on 파라미터 스키마 항목"""

    id: str
    name: str = ""
    value_type: str = "string"
    required: bool = False
    default_value: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AddOnParameter:
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            value_type=data.get("value_type", "string"),
            required=bool(data.get("required", False)),
            default_value=data.get("default_value"),
        )


@dataclass(frozen=True)
class AddOn:
    """clusters_mgmt API의 Add-on 레코드"""

    id: str
    name: str = ""
    parameters: list[AddOnParameter] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AddOn:
        # 파라미터 목록은 {"items": [...]} 형태로 내려옴
        items = (data.get("parameters") or {}).get("items") or []
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            parameters=[AddOnParameter.from_dict(item) for item in items],
        )
