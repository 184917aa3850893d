"""
cli/ui/console.py - Rich 콘솔 유틸리티 (reporter)

명령 진행 메시지는 stderr 콘솔로, 명령 결과(표, JSON)는 stdout으로 나갑니다.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

# botocore 노이즈 로그 제한
logging.getLogger("botocore.credentials").setLevel(logging.WARNING)
logging.getLogger("botocore.loaders").setLevel(logging.WARNING)
logging.getLogger("urllib3.connectionpool").setLevel(logging.WARNING)

# --debug로 DEBUG 레벨이 되는 로거
APP_LOGGERS = ("core", "cli")


def get_console() -> Console:
    """stderr로 출력하는 Rich Console 인스턴스를 생성하고 반환합니다."""
    return Console(
        stderr=True,
        color_system="auto",
        highlight=True,
        soft_wrap=True,
        markup=True,
    )


# 전역 콘솔 인스턴스
console = get_console()


def get_logger(name: str = "rosa") -> logging.Logger:
    """Rich 핸들러가 설정된 logger를 반환합니다.

    Args:
        name: logger 이름 (기본값: "rosa")

    Returns:
        logging.Logger: 설정된 logger 인스턴스
    """
    logger = logging.getLogger(name)

    # 이미 핸들러가 설정되어 있으면 반환
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    handler = RichHandler(console=console, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


# 전역 logger 인스턴스
logger = get_logger()


def enable_debug() -> None:
    """--debug: 앱 로거를 DEBUG로 올리고 Rich 핸들러로 출력"""
    logger.setLevel(logging.DEBUG)
    for name in APP_LOGGERS:
        app_logger = logging.getLogger(name)
        app_logger.setLevel(logging.DEBUG)
        if not app_logger.handlers:
            app_logger.addHandler(logger.handlers[0])
            app_logger.propagate = False


# =============================================================================
# 표준 출력 스타일
# =============================================================================

# 상태 심볼
SYMBOL_SUCCESS = "✓"  # 완료
SYMBOL_ERROR = "✗"  # 에러
SYMBOL_WARNING = "!"  # 경고
SYMBOL_INFO = "•"  # 정보


def print_success(message: str) -> None:
    """성공 메시지 출력 (초록색 체크마크)

    Args:
        message: 출력할 메시지
    """
    console.print(f"{SYMBOL_SUCCESS} {message}", style="green", markup=False)


def print_error(message: str) -> None:
    """에러 메시지 출력 (빨간색 X)

    Args:
        message: 출력할 메시지
    """
    console.print(f"{SYMBOL_ERROR} {message}", style="red", markup=False)


def print_warning(message: str) -> None:
    """경고 메시지 출력 (노란색 경고)

    Args:
        message: 출력할 메시지
    """
    console.print(f"{SYMBOL_WARNING} {message}", style="yellow", markup=False)


def print_info(message: str) -> None:
    """정보 메시지 출력 (파란색 정보)

    Args:
        message: 출력할 메시지
    """
    console.print(f"{SYMBOL_INFO} {message}", style="blue", markup=False)


def print_debug(message: str) -> None:
    """디버그 메시지 (--debug일 때만)"""
    logger.debug(message)


# =============================================================================
# 탭 정렬 표
# =============================================================================


def format_tab_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """탭 정렬 표 문자열

    마지막 열을 제외한 각 열은 (가장 긴 셀 + padding) 폭으로 공백 채움합니다.

    Example:
        >>> print(format_tab_table(["ID", "STATE"], [["abc", "ready"]]))
        ID   STATE
        abc  ready
    """
    table = [headers, *rows]
    widths = [max(len(row[col]) for row in table) + padding for col in range(len(headers) - 1)]

    lines = []
    for row in table:
        cells = [cell.ljust(widths[col]) for col, cell in enumerate(row[:-1])]
        cells.append(row[-1])
        lines.append("".join(cells))
    return "\n".join(lines)
