# cli/ui - 콘솔 출력 (rich)
"""
CLI 출력 컴포넌트 모듈

진행 메시지(reporter)와 탭 정렬 표 출력
"""

from .console import (
    SYMBOL_ERROR,
    SYMBOL_INFO,
    SYMBOL_SUCCESS,
    SYMBOL_WARNING,
    console,
    enable_debug,
    format_tab_table,
    get_console,
    get_logger,
    logger,
    print_debug,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__: list[str] = [
    "console",
    "logger",
    "get_console",
    "get_logger",
    "enable_debug",
    # 표준 출력 심볼
    "SYMBOL_SUCCESS",
    "SYMBOL_ERROR",
    "SYMBOL_WARNING",
    "SYMBOL_INFO",
    # 메시지 출력
    "print_success",
    "print_error",
    "print_warning",
    "print_info",
    "print_debug",
    "format_tab_table",
]
