"""
core/ocm/versions.py - OpenShift 버전 유틸리티

클러스터 버전 비교와 Operator Role 접두사용 랜덤 라벨 생성을 담당합니다.
"""

from __future__ import annotations

import secrets
import string

from core.exceptions import VersionError

_LABEL_ALPHABET = string.ascii_lowercase + string.digits


def get_version_minor(version: str) -> str:
    """major.minor 부분만 반환

    Examples:
        >>> get_version_minor("4.9.12")
        '4.9'
        >>> get_version_minor("4.10")
        '4.10'
    """
    parts = version.strip().split(".")
    return ".".join(parts[:2])


def parse_version(version: str) -> tuple[int, ...]:
    """점으로 구분된 숫자 버전을 튜플로 변환

    Raises:
        VersionError: 숫자가 아닌 파트가 있는 경우
    """
    try:
        return tuple(int(part) for part in version.strip().split("."))
    except ValueError as e:
        raise VersionError(version, cause=e) from e


def check_supported_version(cluster_version: str, min_version: str) -> bool:
    """cluster_version이 min_version 이상인지 확인

    자릿수가 다르면 부족한 쪽을 0으로 채워 비교합니다 ("4.10" == "4.10.0").
    """
    current = parse_version(cluster_version)
    minimum = parse_version(min_version)

    width = max(len(current), len(minimum))
    current += (0,) * (width - len(current))
    minimum += (0,) * (width - len(minimum))
    return current >= minimum


def random_label(size: int) -> str:
    """소문자와 숫자로 된 랜덤 문자열"""
    return "".join(secrets.choice(_LABEL_ALPHABET) for _ in range(size))
