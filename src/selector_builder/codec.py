"""JSON encoding and schema-driven decoding.

Decoding never patches types onto parsed data: the JSON text is parsed into
plain values first, then the requested schema is constructed from them
explicitly (dataclass fields as keyword arguments, selectors through the
builder, anything else by calling the schema with the parsed value).

Selector description format::

    {"element": "a", "attributes": ["href$=\\".png\\""], "pseudo_classes": ["focus"]}
    {"left": {...}, "combinator": "+", "right": {...}}
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Callable, TypeVar

from selector_builder.builder import SelectorBuilder, css_selector_builder
from selector_builder.errors import CodecError
from selector_builder.selector import CombinedSelector, Selector, SimpleSelector

__all__ = ["encode", "decode", "selector_to_dict", "selector_from_dict"]

T = TypeVar("T")

# Description keys of a simple selector, in canonical part order.
_SINGLE_KEYS = ("element", "id")
_REPEATED_KEYS = ("classes", "attributes", "pseudo_classes")
_SIMPLE_KEYS = frozenset({*_SINGLE_KEYS, *_REPEATED_KEYS, "pseudo_element"})
_COMBINED_KEYS = frozenset({"left", "combinator", "right"})


# ---------------------------------------------------------------------------
# Selector descriptions
# ---------------------------------------------------------------------------


def selector_to_dict(selector: Selector) -> dict[str, Any]:
    """Describe *selector* as plain JSON-compatible data.

    The tree is walked with an explicit stack, so arbitrarily deep
    combinations are described without recursion.
    """
    done: list[dict[str, Any]] = []
    stack: list[tuple[Selector, bool]] = [(selector, False)]
    while stack:
        node, operands_done = stack.pop()
        if not isinstance(node, CombinedSelector):
            done.append(_simple_to_dict(node))
        elif operands_done:
            right = done.pop()
            left = done.pop()
            done.append(
                {"left": left, "combinator": node.combinator.value, "right": right}
            )
        else:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))
    return done[0]


def _simple_to_dict(selector: Selector) -> dict[str, Any]:
    if isinstance(selector, SimpleSelector):
        data: dict[str, Any] = {}
        if selector.tag_name is not None:
            data["element"] = selector.tag_name
        if selector.id_name is not None:
            data["id"] = selector.id_name
        if selector.classes:
            data["classes"] = list(selector.classes)
        if selector.attributes:
            data["attributes"] = list(selector.attributes)
        if selector.pseudo_classes:
            data["pseudo_classes"] = list(selector.pseudo_classes)
        if selector.pseudo_element_name is not None:
            data["pseudo_element"] = selector.pseudo_element_name
        return data
    raise CodecError(f"Cannot describe selector of type {type(selector).__name__}")


def _string(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise CodecError(f"Selector key {key!r} must be a string, got {type(value).__name__}")
    return value


def _strings(data: dict[str, Any], key: str) -> list[str]:
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise CodecError(f"Selector key {key!r} must be a list of strings")
    return value


def selector_from_dict(
    data: Any, builder: SelectorBuilder | None = None
) -> SimpleSelector | CombinedSelector:
    """Rebuild a selector from its description using *builder*.

    Parts are appended in canonical order, so a description never trips the
    builder's order check. Duplicate-free by construction; combinator symbols
    are still validated by :meth:`SelectorBuilder.combine`.
    """
    builder = builder or css_selector_builder
    done: list[SimpleSelector | CombinedSelector] = []
    stack: list[tuple[Any, bool]] = [(data, False)]
    while stack:
        node, operands_done = stack.pop()
        if operands_done:
            right = done.pop()
            left = done.pop()
            done.append(builder.combine(left, node["combinator"], right))
            continue
        if not isinstance(node, dict):
            raise CodecError(
                f"Selector description must be an object, got {type(node).__name__}"
            )
        if "combinator" not in node:
            done.append(_simple_from_dict(node, builder))
            continue
        unknown = sorted(set(node) - _COMBINED_KEYS)
        if unknown:
            raise CodecError(f"Unknown combined selector key(s): {', '.join(unknown)}")
        missing = [k for k in ("left", "right") if k not in node]
        if missing:
            raise CodecError(f"Combined selector is missing: {', '.join(missing)}")
        stack.append((node, True))
        stack.append((node["right"], False))
        stack.append((node["left"], False))
    return done[0]


def _simple_from_dict(data: dict[str, Any], builder: SelectorBuilder) -> SimpleSelector:
    unknown = sorted(set(data) - _SIMPLE_KEYS)
    if unknown:
        raise CodecError(f"Unknown selector key(s): {', '.join(unknown)}")

    selector = SimpleSelector(config=builder.config)
    if "element" in data:
        selector = selector.element(_string(data, "element"))
    if "id" in data:
        selector = selector.id(_string(data, "id"))
    for name in _strings(data, "classes") if "classes" in data else []:
        selector = selector.class_(name)
    for raw in _strings(data, "attributes") if "attributes" in data else []:
        selector = selector.attr(raw)
    for name in _strings(data, "pseudo_classes") if "pseudo_classes" in data else []:
        selector = selector.pseudo_class(name)
    if "pseudo_element" in data:
        selector = selector.pseudo_element(_string(data, "pseudo_element"))
    return selector


# ---------------------------------------------------------------------------
# Generic JSON helpers
# ---------------------------------------------------------------------------


def _to_plain(obj: Any) -> Any:
    """``json.dumps`` fallback for selectors and dataclass instances."""
    if isinstance(obj, (SimpleSelector, CombinedSelector)):
        return selector_to_dict(obj)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def encode(value: Any) -> str:
    """Return the compact JSON representation of *value*."""
    try:
        return json.dumps(value, default=_to_plain, separators=(",", ":"))
    except (TypeError, ValueError, RecursionError) as exc:
        raise CodecError(f"Cannot encode value: {exc}", cause=exc) from exc


def _construct_dataclass(schema: type[T], data: Any) -> T:
    if not isinstance(data, dict):
        raise CodecError(f"{schema.__name__} expects a JSON object, got {type(data).__name__}")
    names = {f.name for f in dataclasses.fields(schema) if f.init}  # type: ignore[arg-type]
    unknown = sorted(set(data) - names)
    if unknown:
        raise CodecError(f"Unknown field(s) for {schema.__name__}: {', '.join(unknown)}")
    try:
        return schema(**data)
    except TypeError as exc:
        raise CodecError(f"Cannot construct {schema.__name__}: {exc}", cause=exc) from exc


def decode(schema: type[T] | Callable[[Any], T], text: str) -> T:
    """Parse *text* and construct an instance of *schema* from it.

    - Selector classes are rebuilt through the default builder.
    - Dataclasses receive the JSON object's keys as keyword arguments.
    - Any other callable is called with the parsed value.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CodecError(f"Invalid JSON: {exc.msg}", cause=exc) from exc
    except RecursionError as exc:
        raise CodecError("JSON document is nested too deeply", cause=exc) from exc

    if isinstance(schema, type) and issubclass(schema, (SimpleSelector, CombinedSelector)):
        selector = selector_from_dict(data)
        if not isinstance(selector, schema):
            raise CodecError(
                f"Expected {schema.__name__}, description is a {type(selector).__name__}"
            )
        return selector  # type: ignore[return-value]
    if isinstance(schema, type) and dataclasses.is_dataclass(schema):
        return _construct_dataclass(schema, data)
    try:
        return schema(data)
    except (TypeError, ValueError) as exc:
        name = getattr(schema, "__name__", repr(schema))
        raise CodecError(f"Cannot construct {name}: {exc}", cause=exc) from exc
