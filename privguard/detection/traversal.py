import json
from collections.abc import Mapping
from typing import Any, Iterator, List, Set, Tuple

from privguard.errors import CyclicPayloadError

SEQUENCE_TYPES = (list, tuple)
SCALAR_TYPES = (str, int, float, bool, type(None))
KEY_TYPES = (str, int, float, bool, type(None))

# Stack marker: leaving a container, drop it from the current path
_EXIT = object()


def _child_path(parent: str, key: Any) -> str:
    if isinstance(key, int) and not isinstance(key, bool):
        return f"{parent}[{key}]"
    return f"{parent}.{key}"


def _children(path: str, node: Any) -> List[Tuple[str, Any]]:
    if isinstance(node, Mapping):
        return [(_child_path(path, k), v) for k, v in node.items()]
    return [(f"{path}[{i}]", v) for i, v in enumerate(node)]


def iter_nodes(payload: Any) -> Iterator[Tuple[str, Any]]:
    """
    Pre-order, depth-first walk yielding (path, node) for every node.

    Uses an explicit stack, so nesting depth is bounded by memory rather
    than by the interpreter's recursion limit. Mapping keys keep insertion
    order, sequences keep index order. Re-entering a container that is
    already on the current path raises CyclicPayloadError.
    """
    stack: List[Tuple[Any, Any]] = [("$", payload)]
    on_path: Set[int] = set()

    while stack:
        path, node = stack.pop()
        if path is _EXIT:
            on_path.discard(node)
            continue

        yield path, node

        if isinstance(node, str) or not isinstance(node, (Mapping,) + SEQUENCE_TYPES):
            continue

        marker = id(node)
        if marker in on_path:
            raise CyclicPayloadError(f"Container re-entered at {path}")
        on_path.add(marker)

        stack.append((_EXIT, marker))
        stack.extend(reversed(_children(path, node)))


def iter_string_leaves(payload: Any) -> Iterator[Tuple[str, str]]:
    """
    Yield (path, text) for every non-empty string leaf.
    Mapping keys are not scanned.
    """
    for path, node in iter_nodes(payload):
        if isinstance(node, str) and node:
            yield path, node


def _encoded_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _scalar_size(node: Any) -> int:
    return _encoded_len(json.dumps(node, ensure_ascii=False, allow_nan=False))


def _key_size(key: Any) -> int:
    if not isinstance(key, KEY_TYPES):
        raise TypeError(f"keys must be str, int, float, bool or None, not {type(key).__name__}")
    text = key if isinstance(key, str) else json.dumps(key, allow_nan=False)
    # quoted key plus the ':' separator
    return _scalar_size(text) + 1


def canonical_size(payload: Any) -> int:
    """
    Byte length of the compact UTF-8 JSON rendering of `payload`
    (separators "," and ":", no ASCII escaping), computed without recursion.

    Raises CyclicPayloadError on cycles, TypeError on values with no JSON
    rendering (sets, bytes, arbitrary objects) and ValueError on NaN/Infinity.
    """
    size = 0
    for _, node in iter_nodes(payload):
        if isinstance(node, Mapping):
            size += 2 + max(len(node) - 1, 0)
            size += sum(_key_size(k) for k in node)
        elif isinstance(node, SEQUENCE_TYPES):
            size += 2 + max(len(node) - 1, 0)
        elif isinstance(node, SCALAR_TYPES):
            size += _scalar_size(node)
        else:
            raise TypeError(f"Object of type {type(node).__name__} is not JSON serializable")
    return size
