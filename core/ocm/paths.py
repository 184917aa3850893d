"""
core/ocm/paths.py - OCM 리소스 경로 빌더

OCM API의 모든 리소스는 상위 경로에 세그먼트를 하나씩 붙여 만든 경로로
식별됩니다 (``parent_path/segment``). 리소스마다 클라이언트 클래스를 두는 대신
불변 경로 객체 하나에 이름 있는 접근자를 둡니다.

Usage:
    from core.ocm.paths import ROOT

    ROOT.clusters_mgmt().v1().addons().addon("my-addon")
    # /api/clusters_mgmt/v1/addons/my-addon

    ROOT / "service_mgmt" / "v1" / "services"
    # /api/service_mgmt/v1/services
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from urllib.parse import quote


def _quote_id(resource_id: str) -> str:
    """사용자 입력 ID를 단일 세그먼트로 (앞뒤 '/' 제거, 나머지는 URL 인코딩)"""
    return quote(resource_id.strip("/"), safe="")


@dataclass(frozen=True)
class ResourcePath:
    """OCM 리소스 경로"""

    path: str = "/api"

    def segment(self, name: str) -> ResourcePath:
        """하위 리소스 경로 반환

        세그먼트가 '/'로 시작해도 상위 경로를 유지하고, 결과는 정규화합니다
        (중복 '/', '.', '..' 정리).
        """
        return ResourcePath(posixpath.normpath(posixpath.join(self.path, name.lstrip("/"))))

    def __truediv__(self, name: str) -> ResourcePath:
        return self.segment(name)

    def __str__(self) -> str:
        return self.path

    # -------------------------------------------------------------------------
    # 서비스 / 버전
    # -------------------------------------------------------------------------

    def clusters_mgmt(self) -> ResourcePath:
        return self.segment("clusters_mgmt")

    def service_mgmt(self) -> ResourcePath:
        return self.segment("service_mgmt")

    def v1(self) -> ResourcePath:
        return self.segment("v1")

    # -------------------------------------------------------------------------
    # clusters_mgmt/v1
    # -------------------------------------------------------------------------

    def addons(self) -> ResourcePath:
        return self.segment("addons")

    def addon(self, addon_id: str) -> ResourcePath:
        return self.segment(_quote_id(addon_id))

    def aws_inquiries(self) -> ResourcePath:
        """AWS 조회 리소스

        sts_policies / regions / vpcs 접근자는 OCM SDK의 aws_inquiries 클라이언트 경로를
        그대로 옮긴 것으로, 현재 명령(create/list service)에서는 호출하지 않습니다.
        """
        return self.segment("aws_inquiries")

    def sts_policies(self) -> ResourcePath:
        """AWS STS 정책 조회 리소스"""
        return self.segment("sts_policies")

    def regions(self) -> ResourcePath:
        """사용 가능한 리전 조회 리소스"""
        return self.segment("regions")

    def vpcs(self) -> ResourcePath:
        """VPC 조회 리소스"""
        return self.segment("vpcs")

    # -------------------------------------------------------------------------
    # service_mgmt/v1
    # -------------------------------------------------------------------------

    def services(self) -> ResourcePath:
        return self.segment("services")

    def service(self, service_id: str) -> ResourcePath:
        return self.segment(_quote_id(service_id))


ROOT = ResourcePath()

ADDONS = ROOT.clusters_mgmt().v1().addons()
AWS_INQUIRIES = ROOT.clusters_mgmt().v1().aws_inquiries()
SERVICES = ROOT.service_mgmt().v1().services()
