"""Data classification and log-value encoding.

Includes randomised inputs for the encoder fast path and escaping rules.
"""

from __future__ import annotations

from collections import OrderedDict

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lib_catalog_log.application.arguments import classify_data, encode_log_value, merge_data, render_data
from lib_catalog_log.domain.errors import InvalidDataTail

SAFE_TEXT = st.text(alphabet=st.sampled_from(list("abcXYZ019/\\=:;-_.äß€😀")), max_size=30)


def test_empty_tail_is_no_data() -> None:
    assert classify_data([]) is None
    assert classify_data(()) is None


def test_pairs_become_mapping() -> None:
    assert classify_data(["A", 1, "B", "foo"]) == {"A": 1, "B": "foo"}


def test_single_mapping_is_used_directly() -> None:
    data = {"user": "ada"}
    assert classify_data([data]) is data


def test_single_empty_mapping_is_no_data() -> None:
    assert classify_data([{}]) is None


def test_nested_sequences_are_unwrapped() -> None:
    assert classify_data([[("k", "v")]]) == {"k": "v"}


@pytest.mark.parametrize("tail", [["A", 1, "B"], ["lonely"], [42]])
def test_odd_tail_is_a_defect(tail: list[object]) -> None:
    with pytest.raises(InvalidDataTail, match="multiple of two"):
        classify_data(tail)


def test_non_text_key_is_a_defect() -> None:
    with pytest.raises(InvalidDataTail, match="bad argument 2: expected str, found int"):
        classify_data(["A", 1, 2, "B"])


def test_merge_data_explicit_overrides() -> None:
    assert merge_data({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}
    assert merge_data({"a": 1}, None) == {"a": 1}
    assert merge_data(None, {}) is None


def test_merge_data_rejects_scalars() -> None:
    with pytest.raises(InvalidDataTail):
        merge_data(None, "oops")


def test_render_data_in_iteration_order() -> None:
    data = OrderedDict([("z", 1), ("a", "two words"), ("q", None)])
    assert render_data(data) == " z=1 a=two words q=None"
    assert render_data(None) == ""


@given(SAFE_TEXT)
def test_encoder_is_noop_without_whitespace_or_quotes(text: str) -> None:
    assert encode_log_value(text) == text


def test_encoder_escapes_quotes() -> None:
    assert encode_log_value('He said "hi"') == 'He said \\"hi\\"'


def test_encoder_escapes_backslashes_when_triggered() -> None:
    assert encode_log_value("C:\\temp dir") == "C:\\\\temp dir"


def test_encoder_leaves_forward_slashes_alone() -> None:
    assert encode_log_value("a/b c") == "a/b c"


def test_encoder_handles_full_codepoints() -> None:
    assert encode_log_value('grüße "😀"\tok') == 'grüße \\"😀\\"\tok'


@given(st.text(max_size=30))
def test_encoder_only_grows_by_escapes(text: str) -> None:
    encoded = encode_log_value(text)
    if encoded != text:
        assert len(encoded) == len(text) + text.count('"') + text.count("\\")
