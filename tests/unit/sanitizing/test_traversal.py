"""Unit tests for structural traversal – ArraySanitizer and ObjectSanitizer."""

from __future__ import annotations

import dataclasses
from collections import namedtuple

import pytest

from mp_sanitizer.sanitizing.detectors import (
    CircularReferenceDetector,
    SensitiveKeyDetector,
    SensitivePatternDetector,
)
from mp_sanitizer.sanitizing.services import (
    ArraySanitizer,
    CredentialPhraseSanitizer,
    ObjectSanitizer,
    SensitivePatternSanitizer,
    StringSanitizer,
)

HALT = {"[SANITIZATION_HALTED]": "MAX_DEPTH_REACHED"}
CIRCULAR = {"[CIRCULAR_REFERENCE_DETECTED]": True}


def _strings(keys: SensitiveKeyDetector) -> StringSanitizer:
    return StringSanitizer(
        SensitivePatternSanitizer(SensitivePatternDetector()),
        CredentialPhraseSanitizer(keys),
    )


def _arrays(max_depth: int = 10) -> ArraySanitizer:
    keys = SensitiveKeyDetector()
    return ArraySanitizer(_strings(keys), keys, "[MASKED]", max_depth)


def _objects(max_depth: int = 10) -> ObjectSanitizer:
    keys = SensitiveKeyDetector()
    return ObjectSanitizer(_strings(keys), keys, "[MASKED]", max_depth)


def _nest(levels: int) -> dict:
    value: dict = {"leaf": "value"}
    for _ in range(levels):
        value = {"child": value}
    return value


@dataclasses.dataclass
class Credentials:
    username: str
    password: str


class Profile:
    def __init__(self) -> None:
        self.name = "Alice"
        self.email = "alice@example.com"
        self._internal = "hidden"


class Opaque:
    def __init__(self) -> None:
        self._secret = "x"


class Point:
    __slots__ = ("x", "y")

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


class Node:
    def __init__(self, name: str) -> None:
        self.name = name
        self.children: list[Node] = []
        self.parent: Node | None = None


class Link:
    def __init__(self, nxt: Link | None = None) -> None:
        self.next = nxt


Pair = namedtuple("Pair", "key token")


# ---------------------------------------------------------------------------
# ArraySanitizer – entry rules
# ---------------------------------------------------------------------------


class TestArraySanitizerEntries:
    def test_sensitive_key_masked(self) -> None:
        assert _arrays().sanitize({"password": "secret123"}) == {"password": "[MASKED]"}

    def test_sensitive_key_masks_any_value_type(self) -> None:
        result = _arrays().sanitize({"token": {"a": 1}, "cpf": 123, "senha": None})
        assert result == {"token": "[MASKED]", "cpf": "[MASKED]", "senha": "[MASKED]"}

    def test_nested_mapping(self) -> None:
        result = _arrays().sanitize({"user": {"name": "alice", "senha": "x"}})
        assert result == {"user": {"name": "alice", "senha": "[MASKED]"}}

    def test_strings_in_list(self) -> None:
        result = _arrays().sanitize(["hello", "CPF: 12345678900"])
        assert result == ["hello", "CPF: [MASKED]"]

    def test_scalars_pass_through(self) -> None:
        data = {"count": 3, "ok": True, "none": None, "ratio": 1.5, "raw": b"12345678900"}
        assert _arrays().sanitize(data) == data

    def test_non_string_keys(self) -> None:
        assert _arrays().sanitize({1: "12345678900", 2: "x"}) == {1: "[MASKED]", 2: "x"}

    def test_tuple_kind_kept(self) -> None:
        assert _arrays().sanitize(("a", "12345678900")) == ("a", "[MASKED]")

    def test_set_kind_kept(self) -> None:
        assert _arrays().sanitize({"12345678900", "x"}) == {"[MASKED]", "x"}

    def test_frozenset_kind_kept(self) -> None:
        result = _arrays().sanitize(frozenset({"x"}))
        assert isinstance(result, frozenset)

    def test_input_not_mutated(self) -> None:
        data = {"password": "p", "items": ["12345678900"]}
        _arrays().sanitize(data)
        assert data == {"password": "p", "items": ["12345678900"]}

    def test_per_call_token(self) -> None:
        assert _arrays().sanitize({"token": "t"}, "[GONE]") == {"token": "[GONE]"}

    def test_object_value_tagged(self) -> None:
        result = _arrays().sanitize({"login": Credentials("alice", "hunter2")})
        assert result == {
            "login": {"__type__": "Credentials", "username": "alice", "password": "[MASKED]"}
        }


# ---------------------------------------------------------------------------
# ArraySanitizer – depth limit
# ---------------------------------------------------------------------------


class TestArraySanitizerDepth:
    @pytest.mark.parametrize("levels", [3, 4, 10, 50])
    def test_truncated_at_max_depth(self, levels: int) -> None:
        result = _arrays(max_depth=3).sanitize(_nest(levels))
        assert result == {"child": {"child": {"child": HALT}}}

    def test_shallow_structure_untouched(self) -> None:
        assert _arrays(max_depth=3).sanitize(_nest(2)) == _nest(2)

    def test_zero_depth_halts_root(self) -> None:
        assert _arrays(max_depth=0).sanitize({"a": 1}) == HALT

    def test_depth_counted_across_objects(self) -> None:
        result = _arrays(max_depth=2).sanitize({"obj": Link(Link())})
        assert result == {"obj": {"__type__": "Link", "next": HALT}}


# ---------------------------------------------------------------------------
# ArraySanitizer – circular references
# ---------------------------------------------------------------------------


class TestArraySanitizerCycles:
    def test_self_referencing_mapping(self) -> None:
        data: dict = {"name": "x"}
        data["self"] = data
        assert _arrays().sanitize(data) == {"name": "x", "self": CIRCULAR}

    def test_self_referencing_list(self) -> None:
        data: list = [1]
        data.append(data)
        assert _arrays().sanitize(data) == [1, CIRCULAR]

    def test_transitive_cycle(self) -> None:
        a: dict = {"b": {}}
        a["b"]["a"] = a
        assert _arrays().sanitize(a) == {"b": {"a": CIRCULAR}}

    def test_long_ring_terminates(self) -> None:
        nodes: list[dict] = [{} for _ in range(50)]
        for i, node in enumerate(nodes):
            node["next"] = nodes[(i + 1) % 50]
        result = _arrays(max_depth=100).sanitize(nodes[0])
        for _ in range(50):
            result = result["next"]
        assert result == CIRCULAR

    def test_equal_but_distinct_containers(self) -> None:
        result = _arrays().sanitize({"a": {"v": 1}, "b": {"v": 1}})
        assert result == {"a": {"v": 1}, "b": {"v": 1}}

    def test_shared_reference_marked_on_second_visit(self) -> None:
        shared = {"v": 1}
        assert _arrays().sanitize({"a": shared, "b": shared}) == {"a": {"v": 1}, "b": CIRCULAR}

    def test_fresh_state_per_outermost_call(self) -> None:
        sanitizer = _arrays()
        data = {"a": [1, 2]}
        assert sanitizer.sanitize(data) == sanitizer.sanitize(data) == {"a": [1, 2]}

    def test_explicit_state_is_shared(self) -> None:
        data = {"a": 1}
        state = CircularReferenceDetector()
        state.mark_seen(data)
        assert _arrays().sanitize(data, state=state) == CIRCULAR


# ---------------------------------------------------------------------------
# ObjectSanitizer
# ---------------------------------------------------------------------------


class TestObjectSanitizer:
    def test_dataclass_fields(self) -> None:
        result = _objects().sanitize(Credentials("alice", "hunter2"))
        assert result == {"__type__": "Credentials", "username": "alice", "password": "[MASKED]"}

    def test_type_tag_first(self) -> None:
        result = _objects().sanitize(Credentials("alice", "hunter2"))
        assert list(result)[0] == "__type__"

    def test_public_attributes_only(self) -> None:
        result = _objects().sanitize(Profile())
        assert result == {"__type__": "Profile", "name": "Alice", "email": "[MASKED]"}

    def test_private_fields_only(self) -> None:
        assert _objects().sanitize(Opaque()) == {"__type__": "Opaque (private fields)"}

    def test_slots(self) -> None:
        assert _objects().sanitize(Point(1, 2)) == {"__type__": "Point", "x": 1, "y": 2}

    def test_namedtuple(self) -> None:
        result = _objects().sanitize(Pair("k", "abc"))
        assert result == {"__type__": "Pair", "key": "k", "token": "[MASKED]"}

    def test_exception_args(self) -> None:
        result = _objects().sanitize(ValueError("cpf 12345678900"))
        assert result == {"__type__": "ValueError", "args": ("cpf [MASKED]",)}

    def test_object_graph_with_back_reference(self) -> None:
        root = Node("root")
        child = Node("child")
        child.parent = root
        root.children.append(child)
        assert _objects().sanitize(root) == {
            "__type__": "Node",
            "name": "root",
            "children": [
                {"__type__": "Node", "name": "child", "children": [], "parent": CIRCULAR}
            ],
            "parent": None,
        }

    def test_depth_limit(self) -> None:
        result = _objects(max_depth=2).sanitize(Link(Link(Link())))
        assert result == {"__type__": "Link", "next": {"__type__": "Link", "next": HALT}}

    def test_self_reference(self) -> None:
        link = Link()
        link.next = link
        assert _objects().sanitize(link) == {"__type__": "Link", "next": CIRCULAR}

    def test_shares_container_sanitizer_when_bound(self) -> None:
        keys = SensitiveKeyDetector()
        objects = ObjectSanitizer(_strings(keys), keys, "[MASKED]", 10)
        ArraySanitizer(_strings(keys), keys, "[MASKED]", 10, object_sanitizer=objects)
        node = Node("n")
        node.children = [{"token": "t"}]
        result = objects.sanitize(node)
        assert result["children"] == [{"token": "[MASKED]"}]
