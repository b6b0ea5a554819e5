import pytest
from primkit.functional.mappings import (
    get_or_default,
    invert,
    is_null_or_empty,
    keys_list,
    lower_case_keys,
    map_keys,
    map_values,
    merge,
    omit,
    pick,
    update_or_add,
    values_list,
)


@pytest.fixture
def sample():
    return {"a": 1, "b": 2, "c": 3}


def test_get_or_default(sample):
    assert get_or_default(sample, "a", 0) == 1
    assert get_or_default(sample, "z", 0) == 0
    # Present keys win even when their value is None
    assert get_or_default({"a": None}, "a", 5) is None


def test_merge_right_wins(sample):
    merged = merge(sample, {"c": 30, "d": 4})
    assert merged == {"a": 1, "b": 2, "c": 30, "d": 4}
    assert sample == {"a": 1, "b": 2, "c": 3}


def test_pick_ignores_missing_keys(sample):
    assert pick(sample, ["a", "b"]) == {"a": 1, "b": 2}
    assert pick(sample, ["a", "zz"]) == {"a": 1}
    assert pick(sample, []) == {}


def test_omit(sample):
    assert omit(sample, ["a", "b"]) == {"c": 3}
    assert omit(sample, ["zz"]) == sample


@pytest.mark.parametrize("keys", [[], ["a"], ["a", "c"], ["a", "b", "c"]])
def test_pick_and_omit_cover_all_keys(sample, keys):
    picked = pick(sample, keys)
    omitted = omit(sample, keys)

    assert set(picked) | set(omitted) == set(sample)
    assert not set(picked) & set(omitted)
    assert {**picked, **omitted} == sample


def test_map_values(sample):
    assert map_values(sample, lambda v: v * 2) == {"a": 2, "b": 4, "c": 6}


def test_map_keys(sample):
    assert map_keys(sample, str.upper) == {"A": 1, "B": 2, "C": 3}


def test_map_keys_collision_last_wins():
    assert map_keys({"a": 1, "A": 2}, str.lower) == {"a": 2}


def test_invert(sample):
    assert invert(sample) == {1: "a", 2: "b", 3: "c"}


def test_invert_collision_last_wins():
    assert invert({"x": 1, "y": 1}) == {1: "y"}


def test_keys_and_values_list(sample):
    assert keys_list(sample) == ["a", "b", "c"]
    assert values_list(sample) == [1, 2, 3]


def test_is_null_or_empty(sample):
    assert is_null_or_empty(None) is True
    assert is_null_or_empty({}) is True
    assert is_null_or_empty(sample) is False


def test_update_or_add_in_place(sample):
    assert update_or_add(sample, "a", lambda v: v + 1, if_absent=0) == 2
    assert update_or_add(sample, "d", lambda v: v + 1, if_absent=10) == 10
    assert sample == {"a": 2, "b": 2, "c": 3, "d": 10}


def test_update_or_add_counts():
    counts = {}
    for word in ["x", "y", "x"]:
        update_or_add(counts, word, lambda v: v + 1, if_absent=1)
    assert counts == {"x": 2, "y": 1}


def test_lower_case_keys():
    assert lower_case_keys({"A": 1, "bC": 2}) == {"a": 1, "bc": 2}


def test_lower_case_keys_rejects_non_string_keys():
    with pytest.raises(TypeError):
        lower_case_keys({1: "a", 2: "b"})
    with pytest.raises(TypeError):
        lower_case_keys({"a": 1, 2: "b"})
