"""Tests for path tokenization, caching and low-level traversal."""

import threading
from collections import OrderedDict, defaultdict

import pytest
from chz.util import MISSING as CHZ_MISSING

from pathget.paths import (
    PATH_CACHE,
    PATH_MISSING,
    UNDEFINED,
    PathCache,
    is_blocked_key,
    is_traversable,
    is_undefined,
    lookup,
    parse_index,
    parse_path,
    tokenize_path,
)


@pytest.mark.parametrize(
    "path",
    ["a.b[0].c", "a.b.0.c", "a['b'][0].c", 'a["b"][0].c', "a..b.[0]..c."],
)
def test_tokenize_path_normalizes_brackets_and_quotes(path: str) -> None:
    assert tokenize_path(path) == ("a", "b", "0", "c")


def test_tokenize_path_drops_empty_segments() -> None:
    assert tokenize_path("") == ()
    assert tokenize_path("...") == ()
    assert tokenize_path("[]") == ()


def test_parse_path_caches_by_literal_string() -> None:
    """Textually different paths are cached separately even if they normalize alike."""

    assert "user.tags[1]" not in PATH_CACHE

    first = parse_path("user.tags[1]")
    second = parse_path("user.tags[1]")
    parse_path("user.tags.1")

    assert first == ("user", "tags", "1")
    assert second is first
    assert "user.tags[1]" in PATH_CACHE
    assert "user.tags.1" in PATH_CACHE
    assert len(PATH_CACHE) == 2
    assert PATH_CACHE.misses == 2
    assert PATH_CACHE.hits == 1


def test_path_cache_clear_resets_entries_and_counters() -> None:
    cache = PathCache()
    cache.get_or_parse("a.b")
    cache.get_or_parse("a.b")

    cache.clear()

    assert len(cache) == 0
    assert cache.hits == 0
    assert cache.misses == 0


def test_path_cache_tolerates_concurrent_inserts() -> None:
    cache = PathCache()
    paths = [f"items[{i % 7}].name" for i in range(200)]
    results: list[tuple[str, ...]] = []
    lock = threading.Lock()

    def worker() -> None:
        for path in paths:
            keys = cache.get_or_parse(path)
            with lock:
                results.append(keys)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(cache) == 7
    assert len(results) == 8 * len(paths)
    for keys in results:
        assert keys[0] == "items"
        assert keys[2] == "name"


@pytest.mark.parametrize(
    ("key", "expected"),
    [("0", 0), ("7", 7), ("12", 12), ("01", None), ("+2", None), ("-1", None),
     (" 1", None), ("1.0", None), ("²", None), ("", None)],
)
def test_parse_index_accepts_canonical_decimal_only(key: str, expected: int | None) -> None:
    assert parse_index(key) == expected


def test_is_blocked_key_covers_object_model_names() -> None:
    for key in ("__proto__", "constructor", "prototype", "__class__", "__dict__"):
        assert is_blocked_key(key)
    for key in ("proto", "_private", "__", "____", "name__", "__name"):
        assert not is_blocked_key(key)


def test_is_traversable_excludes_strings_and_bytes() -> None:
    assert is_traversable({})
    assert is_traversable(OrderedDict())
    assert is_traversable([])
    assert is_traversable(())
    for value in ("abc", b"abc", bytearray(b"abc"), 1, 1.5, True, None, object()):
        assert not is_traversable(value)


def test_is_undefined_recognizes_sentinels() -> None:
    assert is_undefined(UNDEFINED)
    assert is_undefined(CHZ_MISSING)
    assert not is_undefined(None)
    assert not is_undefined(PATH_MISSING)


def test_lookup_walks_mappings_and_sequences() -> None:
    doc = {"deps": [{"name": "a"}, {"name": "b"}], "pair": ("x", "y")}

    assert lookup(doc, ("deps", "1", "name")) == "b"
    assert lookup(doc, ("deps", "0")) == {"name": "a"}
    assert lookup(doc, ("pair", "1")) == "y"
    assert lookup(doc, ()) is doc


def test_lookup_returns_missing_for_unavailable_keys() -> None:
    doc = {"values": [10, 20], "config": {"seed": 42}}

    assert lookup(doc, ("values", "two")) is PATH_MISSING
    assert lookup(doc, ("values", "10")) is PATH_MISSING
    assert lookup(doc, ("config", "seed", "unit")) is PATH_MISSING
    assert lookup(doc, ("config", "__class__")) is PATH_MISSING


def test_lookup_does_not_mutate_defaultdict() -> None:
    doc = defaultdict(dict, {"present": 1})

    assert lookup(doc, ("absent",)) is PATH_MISSING
    assert "absent" not in doc


def test_lookup_matches_mapping_keys_as_strings_only() -> None:
    assert lookup({0: "zero"}, ("0",)) is PATH_MISSING
