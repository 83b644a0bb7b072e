"""Tests for the pure string helpers."""

import pytest

from tipwrap.errors import DecodeDidNotConvergeError, InvalidArgumentError
from tipwrap.strings import (
    camel_to_sentence,
    contains,
    decode_unicode_characters,
    html_decode,
    looks_like_email,
    new_lines_to_break_lines,
    remove_project_local_path,
    to_lower_camel,
    to_title_case,
)


def test_html_decode_repeats_until_stable():
    assert html_decode("&amp;lt;b&amp;gt;") == "<b>"


@pytest.mark.parametrize("text", [
    "plain",
    "&amp;amp;amp;quot;",
    "Tom &amp; Jerry &lt;3",
    "&#38;#60;",
    "&unknown; &",
])
def test_html_decode_is_idempotent(text):
    once = html_decode(text)
    assert html_decode(once) == once


def test_html_decode_fails_closed_past_iteration_cap():
    with pytest.raises(DecodeDidNotConvergeError) as exc:
        html_decode("&amp;amp;amp;lt;", max_iterations=2)
    assert exc.value.iterations == 2
    assert exc.value.text == "&amp;lt;"


def test_html_decode_reaching_fixed_point_on_last_pass_succeeds():
    assert html_decode("&lt;", max_iterations=1) == "<"


def test_html_decode_argument_checks():
    with pytest.raises(InvalidArgumentError):
        html_decode(None)
    with pytest.raises(InvalidArgumentError):
        html_decode("x", max_iterations=0)


@pytest.mark.parametrize("address", [
    "david.jones@proseware.com",
    "d.j@server1.proseware.com",
    "jones@ms1.proseware.com",
    "js#internal@proseware.com",
    "j_9@[129.126.118.1]",
    '"quoted name"@example.org',
])
def test_looks_like_email_accepts(address):
    assert looks_like_email(address)


@pytest.mark.parametrize("address", [
    "",
    "j.@server1.proseware.com",
    "j..s@proseware.com",
    "js*@proseware.com",
    "js@proseware..com",
    "js@proseware.com9",
    "no-at-sign.example.org",
    "trailing@example.com\n",
])
def test_looks_like_email_rejects(address):
    assert not looks_like_email(address)


def test_looks_like_email_none_is_false():
    assert looks_like_email(None) is False


def test_to_lower_camel():
    assert to_lower_camel("UpperCamel") == "upperCamel"
    assert to_lower_camel("") == ""


def test_camel_to_sentence():
    assert camel_to_sentence("  UpperCamelCase ") == "Upper Camel Case"
    assert camel_to_sentence("SkillPoints") == "Skill Points"


def test_to_title_case():
    assert to_title_case("hello WORLD") == "Hello World"
    assert to_title_case("a  b") == "A  B"
    assert to_title_case("") == ""


@pytest.mark.parametrize("fn", [to_lower_camel, camel_to_sentence, to_title_case,
                                decode_unicode_characters, new_lines_to_break_lines])
def test_converters_reject_none(fn):
    with pytest.raises(InvalidArgumentError):
        fn(None)


def test_new_lines_to_break_lines():
    assert new_lines_to_break_lines("a\\nb", "\n") == "a<br>b"
    assert new_lines_to_break_lines("a\r\nb\n", "\n") == "a<br>b"
    assert new_lines_to_break_lines("a\n\n", "\n") == "a<br>"
    assert new_lines_to_break_lines("  ", "\n") == "  "


def test_decode_unicode_characters():
    assert decode_unicode_characters("caf\\u00e9") == "café"
    assert decode_unicode_characters("\\uZZZZ") == "\\uZZZZ"


def test_contains():
    assert not contains("Hello", "hell")
    assert contains("Hello", "hell", ignore_case=True)
    assert contains("Hello", "ell")


def test_remove_project_local_path():
    line = r"at Foo() in C:\Users\dev\src\EVEMon\Common\Foo.cs:line 3"
    assert remove_project_local_path(line, "EVEMon") == r"at Foo() in EVEMon\Common\Foo.cs:line 3"
    assert remove_project_local_path(line, "evemon").endswith(r"EVEMon\Common\Foo.cs:line 3")
