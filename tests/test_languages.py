"""Tests for the supported language table."""
import pytest

from translator.languages import AUTO_DETECT, LANGUAGES, get_code, get_language_name, is_supported, target_languages


@pytest.mark.parametrize(
    "desired, expected",
    [
        ("fr", "fr"),
        ("FR", "fr"),
        ("French", "fr"),
        (" japanese ", "ja"),
        ("zh-cn", "zh-CN"),
        ("auto", "auto"),
        ("klingon", None),
        ("", None),
        (None, None),
    ],
)
def test_get_code(desired, expected):
    assert get_code(desired) == expected


def test_is_supported():
    assert is_supported("de")
    assert not is_supported("xx")


def test_get_language_name():
    assert get_language_name("es") == "Spanish"
    assert get_language_name("xx") is None


def test_target_languages_exclude_auto():
    targets = target_languages()

    assert AUTO_DETECT not in targets
    assert len(targets) == len(LANGUAGES) - 1
