from __future__ import annotations

import pytest

from casing.words import capitalize, is_acronym, split_words, tokenize


@pytest.mark.parametrize(
    "text, expected",
    [
        ("fooXML", ["foo", "XML"]),
        ("parseXML", ["parse", "XML"]),
        ("HTTPServer", ["HTTP", "Server"]),
        ("ID42Parser", ["ID", "42", "Parser"]),
        ("hello__world--ID42Parser", ["hello", "world", "ID", "42", "Parser"]),
        ("HTTPServer2FA", ["HTTP", "Server", "2", "FA"]),
        ("helloWorld", ["hello", "World"]),
        ("HELLO_WORLD", ["HELLO", "WORLD"]),
        ("hello@world", ["hello", "world"]),
        ("hello world 123", ["hello", "world", "123"]),
        ("HelloWorld123_test-case!", ["Hello", "World", "123", "test", "case"]),
        ("v2Beta", ["v", "2", "Beta"]),
        ("ABC", ["ABC"]),
        ("A", ["A"]),
    ],
)
def test_tokenize_examples(text: str, expected: list[str]) -> None:
    assert tokenize(text) == expected


def test_tokenize_empty_inputs() -> None:
    assert tokenize(None) == []
    assert tokenize("") == []
    assert tokenize("   ") == []
    assert tokenize("--__!!  ..") == []


def test_uncased_letters_split_before_cased_letters() -> None:
    assert tokenize("中文测试 Mixed123字符") == ["中文测试", "Mixed", "123", "字符"]
    assert tokenize("测试Mixed") == ["测试", "Mixed"]
    assert tokenize("字符mixed") == ["字符", "mixed"]
    assert tokenize("\u409f\u0131") == ["\u409f", "\u0131"]
    # Cased followed by uncased stays one word.
    assert tokenize("Tokyo日本") == ["Tokyo日本"]


def test_non_ascii_case_transitions() -> None:
    assert tokenize("straßeÜber") == ["straße", "Uber"]
    assert tokenize("ΑθήναΠόλη") == ["Αθηνα", "Πολη"]


def test_diacritics_folded_before_splitting() -> None:
    assert tokenize("crème brûlée café") == ["creme", "brulee", "cafe"]


def test_format_characters_are_separators() -> None:
    assert tokenize("a\u200db") == ["a", "b"]
    assert tokenize("foo\ud800bar") == ["foo", "bar"]


def test_split_words_does_not_normalize() -> None:
    assert split_words("café") == ["café"]
    assert split_words("") == []


def test_is_acronym() -> None:
    assert is_acronym("ID")
    assert is_acronym("XML")
    assert is_acronym("2FA")
    assert is_acronym("B2B")
    assert not is_acronym("A")
    assert not is_acronym("A1")
    assert not is_acronym("Hello")
    assert not is_acronym("42")
    assert not is_acronym("")
    # Titlecase letters are not uppercase.
    assert not is_acronym("\u01c5A")


def test_capitalize() -> None:
    assert capitalize("hello") == "Hello"
    assert capitalize("WORLD") == "World"
    assert capitalize("javaScript") == "Javascript"
    assert capitalize("XML") == "XML"
    assert capitalize("HTTP") == "HTTP"
    assert capitalize("HTTPS") == "Https"
    assert capitalize("42") == "42"
    assert capitalize("") == ""


def test_capitalize_uses_single_code_point_title_case() -> None:
    assert capitalize("\u01c6ungla") == "\u01c5ungla"
    assert capitalize("ßtraße") == "ßtraße"
    assert capitalize("éCOLE") == "École"
