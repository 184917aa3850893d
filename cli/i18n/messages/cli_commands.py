"""
cli/i18n/messages/cli_commands.py - CLI Command Messages

Contains translations for Click CLI group help text and option help.
"""

from __future__ import annotations

CLI_MESSAGES = {
    # =========================================================================
    # CLI Help Text
    # =========================================================================
    "help_intro": {
        "ko": "AWS 위의 관리형 OpenShift 서비스를 생성하고 조회하는 CLI 도구입니다.",
        "en": "A CLI tool to create and inspect managed OpenShift services on AWS.",
    },
    "help_basic_usage": {
        "ko": "[기본 사용법]",
        "en": "[Basic Usage]",
    },
    "help_create_service": {
        "ko": "관리형 서비스 생성",
        "en": "Create a managed service",
    },
    "help_list_services": {
        "ko": "관리형 서비스 목록",
        "en": "List managed services",
    },
    "help_addon_parameters": {
        "ko": "Add-on 파라미터는 --<파라미터 ID>=<값> 형식으로 전달합니다.",
        "en": "Add-on parameters are passed as --<parameter id>=<value>.",
    },
    # =========================================================================
    # Groups / Options
    # =========================================================================
    "group_create": {
        "ko": "리소스 생성",
        "en": "Create a resource",
    },
    "group_list": {
        "ko": "리소스 목록",
        "en": "List resources",
    },
    "option_debug": {
        "ko": "디버그 로그 출력",
        "en": "Enable debug mode.",
    },
    "option_lang": {
        "ko": "UI 언어 설정 (en: English, ko: 한국어)",
        "en": "UI language (en: English, ko: Korean)",
    },
}
