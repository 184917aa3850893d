"""
cli/i18n/__init__.py - Internationalization (i18n) Module

English (en) is the default language, Korean (ko) is selected with ``--lang ko``.

Messages live in ``cli.i18n.messages`` under ``<namespace>.<key>`` (cli, service).
The active language is kept in a context variable so that command output
follows the ``--lang`` option of the current invocation.

Usage:
    from cli.i18n import t, use_lang

    t("service.ocm_connection_failed", error="timeout")
    # "Failed to create OCM connection: timeout"

    with use_lang("ko"):
        t("service.list_failed", error="boom")
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

logger = logging.getLogger(__name__)

SUPPORTED_LANGS = ("en", "ko")
DEFAULT_LANG = "en"

_current_lang: ContextVar[str] = ContextVar("lang", default=DEFAULT_LANG)


def _normalize(lang: str | None) -> str:
    return lang if lang in SUPPORTED_LANGS else DEFAULT_LANG


def get_lang() -> str:
    return _current_lang.get()


def set_lang(lang: str) -> None:
    """현재 언어 설정 (지원하지 않는 코드는 기본 언어로)"""
    _current_lang.set(_normalize(lang))


@contextmanager
def use_lang(lang: str) -> Iterator[str]:
    """블록 안에서만 언어 변경"""
    token = _current_lang.set(_normalize(lang))
    try:
        yield _current_lang.get()
    finally:
        _current_lang.reset(token)


def t(key: str, lang: str | None = None, **kwargs: Any) -> str:
    """메시지 키를 현재 언어로 번역

    Args:
        key: ``namespace.key`` 형식 (예: "service.list_failed")
        lang: 언어 지정 (None이면 현재 언어)
        **kwargs: 메시지 포맷 인자

    Returns:
        번역된 문자열. 등록되지 않은 키는 키 그대로 반환
    """
    from cli.i18n.messages import MESSAGES

    translations = MESSAGES.get(key)
    if translations is None:
        logger.debug("등록되지 않은 메시지 키: %s", key)
        return key

    text = translations.get(_normalize(lang or get_lang())) or translations[DEFAULT_LANG]
    if not kwargs:
        return text

    try:
        return text.format(**kwargs)
    except (KeyError, IndexError) as e:
        logger.debug("메시지 포맷 실패 (%s): %s", key, e)
        return text


__all__ = [
    "t",
    "get_lang",
    "set_lang",
    "use_lang",
    "SUPPORTED_LANGS",
    "DEFAULT_LANG",
]
