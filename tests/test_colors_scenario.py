"""End-to-end checks on the sample Colors enumeration.

Colors declares red, green and blue in ``sample_enums.colors``; yellow is
added from ``sample_enums.colors_extension``.
"""

from sample_enums import Color, Colors


def test_all_keys_sorted_and_include_extension():
    assert Colors.all_keys() == ["blue", "green", "red", "yellow"]


def test_count_matches_keys():
    assert Colors.count == 4
    assert len(Colors) == len(Colors.all_keys())


def test_value_for_name_returns_declared_values():
    assert Colors.value_for_name("yellow") == Color(255, 255, 0)
    assert Colors.value_for_name("red") == Color(255, 0, 0)
    assert Colors.value_for_name("purple") is None


def test_every_key_resolves_to_its_value():
    mapping = Colors.all_keys_and_values()
    for name in Colors.all_keys():
        assert Colors.value_for_name(name) == mapping[name]


def test_all_values_ordered_like_keys():
    values = Colors.all_values()
    assert values == [Colors.value_for_name(name) for name in Colors.all_keys()]
    assert values[0] == Color(0, 0, 255)


def test_case_name_reverse_lookup():
    assert Colors(Color(0, 255, 0)).case_name == "green"
    assert Colors(Color(1, 2, 3)).case_name is None


def test_filter_single_channel_colors():
    pure = Colors.all.filter(lambda _name, color: color.channels.count(255) == 1)
    assert pure.keys == ["blue", "green", "red"]
    assert pure.count == 3


def test_class_attributes_remain_plain_payloads():
    assert Colors.red == Color(255, 0, 0)
    assert Colors.yellow == Color(255, 255, 0)


def test_subscript_lookup():
    assert Colors["green"] == Color(0, 255, 0)
    assert Colors["purple"] is None


def test_idempotent_discovery():
    first = Colors.all_keys_and_values()
    second = Colors.all_keys_and_values()
    assert first == second
    assert first is not second
