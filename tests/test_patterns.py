import pytest

from analyzer import pattern_names


def _ident(name):
    return {"type": "Identifier", "name": name}


def test_identifier():
    assert pattern_names(_ident("x")) == ["x"]


def test_array_pattern_skips_holes():
    pattern = {"type": "ArrayPattern", "elements": [None, _ident("a"), None, _ident("b")]}
    assert pattern_names(pattern) == ["a", "b"]


def test_object_pattern_uses_property_values():
    pattern = {
        "type": "ObjectPattern",
        "properties": [
            {"type": "Property", "key": _ident("source"), "value": _ident("target")},
            {"type": "RestElement", "argument": _ident("others")},
        ],
    }
    assert pattern_names(pattern) == ["target", "others"]


def test_defaults_only_bind_the_left_side():
    pattern = {
        "type": "AssignmentPattern",
        "left": _ident("a"),
        "right": {"type": "ArrowFunctionExpression", "params": [_ident("unused")]},
    }
    assert pattern_names(pattern) == ["a"]


def test_deeply_nested_patterns_keep_source_order():
    # [a, {b: [c, ...d], e = 1}, ...[f]]
    pattern = {
        "type": "ArrayPattern",
        "elements": [
            _ident("a"),
            {
                "type": "ObjectPattern",
                "properties": [
                    {
                        "type": "Property",
                        "key": _ident("b"),
                        "value": {
                            "type": "ArrayPattern",
                            "elements": [
                                _ident("c"),
                                {"type": "RestElement", "argument": _ident("d")},
                            ],
                        },
                    },
                    {
                        "type": "Property",
                        "key": _ident("e"),
                        "value": {
                            "type": "AssignmentPattern",
                            "left": _ident("e"),
                            "right": {"type": "Literal", "value": 1},
                        },
                    },
                ],
            },
            {
                "type": "RestElement",
                "argument": {"type": "ArrayPattern", "elements": [_ident("f")]},
            },
        ],
    }
    assert pattern_names(pattern) == ["a", "c", "d", "e", "f"]


@pytest.mark.parametrize(
    "pattern",
    [
        None,
        "x",
        {},
        {"type": "MemberExpression", "object": _ident("a"), "property": _ident("b")},
        {"type": "Identifier"},
        {"type": "ArrayPattern"},
        {"type": "ObjectPattern", "properties": [None, 3]},
    ],
)
def test_unsupported_shapes_bind_nothing(pattern):
    assert pattern_names(pattern) == []
