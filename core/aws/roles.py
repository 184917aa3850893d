"""
core/aws/roles.py - ROSA IAM Role 카탈로그

Account Role 4종과 클러스터 Operator 목록, Role 태그 키를 정의합니다.

Account Role 이름 규칙:
    <prefix>-<RoleName>-Role   (예: ManagedOpenShift-Installer-Role)

Operator Role 이름 규칙:
    <cluster>-<label>-<namespace>-<name>   (64자 초과 시 잘림)
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PREFIX = "ManagedOpenShift"

# IAM Role 이름 최대 길이
MAX_ROLE_NAME_LENGTH = 64

# Role 태그 키
TAG_ROLE_TYPE = "rosa_role_type"
TAG_OPENSHIFT_VERSION = "rosa_openshift_version"

# Role 타입 (rosa_role_type 태그 값)
INSTALLER_ACCOUNT_ROLE = "installer"
SUPPORT_ACCOUNT_ROLE = "support"
CONTROL_PLANE_ACCOUNT_ROLE = "instance_controlplane"
WORKER_ACCOUNT_ROLE = "instance_worker"


@dataclass(frozen=True)
class AccountRole:
    """Account Role 카테고리"""

    name: str
    min_version: str = ""

    def role_suffix(self, prefix: str) -> str:
        """``<prefix>-<Name>-Role``"""
        return f"{prefix}-{self.name}-Role"


@dataclass(frozen=True)
class Operator:
    """자체 IAM Role이 필요한 클러스터 Operator"""

    name: str
    namespace: str
    min_version: str = ""


# 순서 유지: installer를 먼저 찾고 나머지는 그 접두사로 찾음
ACCOUNT_ROLES: dict[str, AccountRole] = {
    INSTALLER_ACCOUNT_ROLE: AccountRole(name="Installer"),
    SUPPORT_ACCOUNT_ROLE: AccountRole(name="Support"),
    CONTROL_PLANE_ACCOUNT_ROLE: AccountRole(name="ControlPlane"),
    WORKER_ACCOUNT_ROLE: AccountRole(name="Worker"),
}

CREDENTIAL_REQUESTS: dict[str, Operator] = {
    "ingress": Operator(
        name="cloud-credentials",
        namespace="openshift-ingress-operator",
    ),
    "image_registry": Operator(
        name="installer-cloud-credentials",
        namespace="openshift-image-registry",
    ),
    "ebs": Operator(
        name="ebs-cloud-credentials",
        namespace="openshift-cluster-csi-drivers",
    ),
    "cloud_network_config": Operator(
        name="cloud-credentials",
        namespace="openshift-cloud-network-config-controller",
        min_version="4.10",
    ),
    "machine_api": Operator(
        name="aws-cloud-credentials",
        namespace="openshift-machine-api",
    ),
}
