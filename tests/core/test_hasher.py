"""Tests for hasher.py - Content hashing utilities."""

from ldgraph.utilities.hasher import (
    calculate_hash,
    canonical_json,
    literal_key,
    shallow_fingerprint,
    synthetic_id,
)


class TestCanonicalJson:
    def test_key_order_irrelevant(self):
        assert canonical_json({"b": 1, "a": 2}) == canonical_json({"a": 2, "b": 1})

    def test_compact_separators(self):
        assert canonical_json({"a": [1, 2]}) == '{"a":[1,2]}'

    def test_non_ascii_kept(self):
        assert canonical_json("café") == '"café"'


class TestCalculateHash:
    """Tests for calculate_hash function."""

    def test_default_sha256_12chars(self):
        hash_val = calculate_hash("Test content")
        assert len(hash_val) == 12
        assert all(c in "0123456789abcdef" for c in hash_val)

    def test_custom_length(self):
        assert len(calculate_hash("Test content", length=16)) == 16

    def test_deterministic(self):
        assert calculate_hash("Test content") == calculate_hash("Test content")

    def test_different_content_different_hash(self):
        assert calculate_hash("Content A") != calculate_hash("Content B")

    def test_known_digest(self):
        # sha256("abc")
        assert calculate_hash("abc", length=16) == "ba7816bf8f01cfea"


class TestShallowFingerprint:
    def test_containers_summarized(self):
        fingerprint = shallow_fingerprint({"name": "x", "child": {"a": 1, "b": 2}, "tags": [1, 2, 3]})
        assert fingerprint == '{"child":"<dict:2>","name":"x","tags":"<list:3>"}'

    def test_nested_content_ignored(self):
        assert shallow_fingerprint({"child": {"a": 1}}) == shallow_fingerprint({"child": {"a": 2}})

    def test_deep_document(self):
        entity = {"name": "leaf"}
        for _ in range(5000):
            entity = {"child": entity}
        assert shallow_fingerprint(entity) == '{"child":"<dict:1>"}'

    def test_non_object(self):
        assert shallow_fingerprint("x") == '"x"'


class TestSyntheticId:
    def test_prefix_and_length(self):
        node_id = synthetic_id({"name": "x"}, 0)
        assert node_id.startswith("_:b")
        assert len(node_id) == len("_:b") + 12

    def test_custom_prefix(self):
        assert synthetic_id({"name": "x"}, 0, prefix="node-").startswith("node-")

    def test_stable(self):
        assert synthetic_id({"a": 1, "b": 2}, 3) == synthetic_id({"b": 2, "a": 1}, 3)

    def test_position_distinguishes(self):
        assert synthetic_id({"name": "x"}, 0) != synthetic_id({"name": "x"}, 1)

    def test_content_distinguishes(self):
        assert synthetic_id({"name": "x"}, 0) != synthetic_id({"name": "y"}, 0)


class TestLiteralKey:
    def test_triple_distinguishes(self):
        base = literal_key("a", "color", "red")
        assert base == literal_key("a", "color", "red")
        assert base != literal_key("b", "color", "red")
        assert base != literal_key("a", "hue", "red")
        assert base != literal_key("a", "color", "blue")

    def test_type_distinguishes(self):
        assert literal_key("a", "n", 1) != literal_key("a", "n", "1")
