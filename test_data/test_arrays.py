import pytest

from jsonsource.infer.arrays import resolve_array
from jsonsource.infer.kinds import ValueKind, classify
from jsonsource.infer.schema import ArrayKind


@pytest.mark.parametrize("values, expected", [
    (["a", 2], ArrayKind.STRING),
    ([1, "a"], ArrayKind.NUMBER),
    ([1.5], ArrayKind.NUMBER),
    ([True, "x"], ArrayKind.STRING),
    ([None, 3], ArrayKind.NUMBER),
    ([], ArrayKind.UNSUPPORTED),
    ([True, False], ArrayKind.UNSUPPORTED),
    ([[1], [2]], ArrayKind.UNSUPPORTED),
    ([{"a": 1}], ArrayKind.UNSUPPORTED),
])
def test_first_scalar_element_wins(values, expected):
    node = resolve_array("Tags", values)
    assert node.element == expected
    assert node.supported == (expected != ArrayKind.UNSUPPORTED)


def test_classify_bool_before_number():
    assert classify(True) == ValueKind.TRUE
    assert classify(False) == ValueKind.FALSE
    assert classify(0) == ValueKind.NUMBER
    assert classify(None) == ValueKind.NULL
    assert classify({}) == ValueKind.OBJECT
    assert classify([]) == ValueKind.ARRAY
