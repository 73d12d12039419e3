"""
Object helpers: structural copying, dotted method dispatch and JSON
serialization of object graphs that repeat (or loop back to) themselves.
"""

import json
import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence, Set

from keyqueue.errors import MethodDispatchError

logger = logging.getLogger("keyqueue.objects")


def is_object(value: Any) -> bool:
    """Returns True if value is a plain dict."""
    return type(value) is dict


def is_array(value: Any) -> bool:
    """Returns True if value is a plain list."""
    return type(value) is list


def deep_copy(value: Any, memo: Optional[Dict[int, Any]] = None) -> Any:
    """
    Deep copy of plain dicts and lists.

    Anything else, including tuples, datetimes, callables, futures and dict or
    list subclasses, is returned as the same object. Cyclic input recurses
    forever unless a memo dict is passed, in which case containers already
    copied are reused.
    """
    if not (is_object(value) or is_array(value)):
        return value

    if memo is not None and id(value) in memo:
        return memo[id(value)]

    if is_object(value):
        result: Any = {}
        if memo is not None:
            memo[id(value)] = result
        for k, v in value.items():
            result[k] = deep_copy(v, memo)
    else:
        result = []
        if memo is not None:
            memo[id(value)] = result
        for item in value:
            result.append(deep_copy(item, memo))
    return result


def _member(context: Any, name: str) -> Any:
    if isinstance(context, Mapping) and name in context:
        return context[name]
    return getattr(context, name, None)


def execute_method(function_name: str, context: Any, args: Sequence[Any] = ()) -> Any:
    """
    Call a method on an object by dotted path.

    Args:
        function_name: Path such as "client.session.close"; each part is a
            key when the current object is a mapping holding it, an attribute otherwise
        context: Object the path starts from
        args: Positional arguments for the call

    Returns:
        Whatever the method returns

    Raises:
        MethodDispatchError: If the path cannot be resolved to a callable
    """
    *namespaces, func_name = function_name.split(".")
    for namespace in namespaces:
        context = _member(context, namespace)
        if context is None:
            raise MethodDispatchError(function_name)

    func = _member(context, func_name)
    if func is None or not callable(func):
        raise MethodDispatchError(function_name)
    return func(*args)


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _exclude_seen(value: Any, seen: Dict[int, Any], open_lists: Set[int]) -> Any:
    if is_object(value):
        seen[id(value)] = value
        result = {}
        for k, v in value.items():
            if is_object(v) and id(v) in seen:
                continue
            result[k] = _exclude_seen(v, seen, open_lists)
        return result
    if isinstance(value, (list, tuple)):
        # Lists are not excluded when repeated, only when they contain themselves
        if id(value) in open_lists:
            raise ValueError("Circular reference detected")
        open_lists.add(id(value))
        try:
            return [
                None if is_object(v) and id(v) in seen else _exclude_seen(v, seen, open_lists)
                for v in value
            ]
        finally:
            open_lists.discard(id(value))
    return value


def stringify_exclude_seen(value: Any, **dumps_kwargs: Any) -> str:
    """
    JSON-serialize value, skipping any dict that was already emitted.

    A repeated dict is dropped from its parent dict and becomes null inside a
    list. This is a basic way of serializing self-referencing structures such
    as ORM results. A list that contains itself raises ValueError, as json.dumps
    does. Extra keyword arguments are passed to json.dumps.
    """
    dumps_kwargs.setdefault("default", _json_default)
    return json.dumps(_exclude_seen(value, {}, set()), **dumps_kwargs)
