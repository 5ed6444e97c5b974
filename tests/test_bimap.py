import pytest

from mosslib.bimap import BiMap, NoValueError


def test_string_and_char_lookup_both_ways():
    test1 = BiMap()
    test1.append(("test", "h"))
    assert test1["test"] == "h"
    assert test1["h"] == "test"


def test_int_and_float_lookup_both_ways():
    test2 = BiMap()
    test2.append((0, 0.12345))
    assert test2[0] == 0.12345
    assert test2[0.12345] == 0


def test_range_based_iteration():
    test3 = BiMap()
    test3.extend([("Hello", "world"), ("how", "are"), ("you", "?")])
    to_check = "".join(f"{first} {second} " for first, second in test3)
    assert to_check == "Hello world how are you ? "


def test_traditional_iteration_on_copy():
    test3 = BiMap([("Hello", "world"), ("how", "are"), ("you", "?")])
    test4 = BiMap(test3)
    to_check = ""
    for first, second in test4:
        if second != "?":
            to_check += f"{first} {second} "
        else:
            to_check += f"{first}{second}"
    assert to_check == "Hello world how are you?"
    assert len(test4) == len(test3) == 3


def test_missing_key_raises():
    test1 = BiMap([("test", "h")])
    with pytest.raises(NoValueError, match="No associated value!!!") as info:
        test1["missing"]
    assert info.value.key == "missing"
    assert test1["test"] == "h"
    assert len(test1) == 1


def test_no_value_error_is_a_key_error():
    with pytest.raises(KeyError):
        BiMap().second_for("anything")


def test_explicit_side_lookups():
    pairs = BiMap([("a", 1), ("b", 2)])
    assert pairs.second_for("b") == 2
    assert pairs.first_for(1) == "a"
    with pytest.raises(NoValueError):
        pairs.first_for("a")
    with pytest.raises(NoValueError):
        pairs.second_for(1)


def test_first_match_wins():
    pairs = BiMap([("a", 1), ("a", 2), ("b", 1)])
    assert pairs["a"] == 1
    assert pairs[1] == "a"


def test_append_and_extend_chain_and_keep_order():
    pairs = BiMap()
    result = pairs.append(("x", 1)).extend([("y", 2), ("z", 3)])
    assert result is pairs
    assert list(pairs) == [("x", 1), ("y", 2), ("z", 3)]


def test_constructor_copies_input():
    source = [("x", 1)]
    pairs = BiMap(source)
    source.append(("y", 2))
    assert list(pairs) == [("x", 1)]


def test_rejects_non_pairs():
    with pytest.raises(ValueError):
        BiMap().append(("a", 1, 2))