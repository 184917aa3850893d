"""
tests/cli/test_i18n.py - 메시지 번역 테스트
"""

from cli.i18n import DEFAULT_LANG, get_lang, t, use_lang
from cli.i18n.messages import MESSAGES


class TestTranslate:
    """t() 테스트"""

    def test_default_english(self):
        assert t("service.list_failed", error="boom") == "Failed to retrieve list of managed services: boom"

    def test_korean(self):
        with use_lang("ko"):
            assert t("service.list_failed", error="boom") == "관리형 서비스 목록 조회 실패: boom"

        assert get_lang() == DEFAULT_LANG

    def test_lang_argument(self):
        assert t("service.using_region", lang="ko", region="us-east-1") == "AWS 리전: us-east-1"

    def test_unknown_lang_falls_back(self):
        with use_lang("fr") as lang:
            assert lang == DEFAULT_LANG

    def test_unknown_key(self):
        assert t("service.does_not_exist") == "service.does_not_exist"

    def test_missing_format_argument(self):
        assert t("service.list_failed") == "Failed to retrieve list of managed services: {error}"
        assert t("service.list_failed", other="x") == "Failed to retrieve list of managed services: {error}"


class TestMessages:
    def test_every_message_has_both_languages(self):
        for key, translations in MESSAGES.items():
            assert translations.get("en"), key
            assert translations.get("ko"), key
