"""Property-based tests for EnumMapper."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from enummapper import CaseHasNoValue, CaseIsNotEnum, EnumMapper, PlainCase, ValuedCase

names = st.text(min_size=1, max_size=12)
scalars = st.one_of(st.text(max_size=12), st.integers())

plain_cases = st.builds(PlainCase, name=names)
valued_cases = st.builds(ValuedCase, name=names, value=scalars)
any_cases = st.lists(st.one_of(plain_cases, valued_cases), max_size=20)
non_cases = st.one_of(st.text(), st.integers(), st.none(), st.floats(allow_nan=False))


def _key(case):
    return case.value if isinstance(case, ValuedCase) else case.name


@given(items=any_cases)
def test_keys_follow_case_kind(items):
    result = EnumMapper.key_values(items)

    assert set(result) == {_key(case) for case in items}


@given(items=any_cases)
def test_default_label_is_last_name_for_each_key(items):
    result = EnumMapper.key_values(items)

    expected = {}
    for case in items:
        expected[_key(case)] = case.name
    assert result == expected


@given(items=any_cases, suffix=st.text(max_size=5))
def test_label_callable_overrides_name(items, suffix):
    result = EnumMapper.key_values(items, lambda case: case.name + suffix)

    for key, label in result.items():
        last = [case for case in items if _key(case) == key][-1]
        assert label == last.name + suffix


@given(items=st.lists(valued_cases, max_size=20))
def test_keys_returns_every_value_in_order(items):
    assert EnumMapper.keys(items) == [case.value for case in items]


@given(
    items=st.lists(valued_cases, max_size=10),
    plain=plain_cases,
    position=st.integers(min_value=0, max_value=10),
)
def test_keys_fails_when_any_case_is_plain(items, plain, position):
    items.insert(min(position, len(items)), plain)

    with pytest.raises(CaseHasNoValue):
        EnumMapper.keys(items)


@given(
    items=any_cases,
    intruder=non_cases,
    position=st.integers(min_value=0, max_value=20),
)
def test_key_values_rejects_non_cases_anywhere(items, intruder, position):
    items.insert(min(position, len(items)), intruder)

    with pytest.raises(CaseIsNotEnum):
        EnumMapper.key_values(items)


@given(
    items=st.lists(valued_cases, max_size=20),
    intruder=non_cases,
    position=st.integers(min_value=0, max_value=20),
)
def test_keys_rejects_non_cases_anywhere(items, intruder, position):
    items.insert(min(position, len(items)), intruder)

    with pytest.raises(CaseIsNotEnum):
        EnumMapper.keys(items)
