"""
georecords.decoder
~~~~~~~~~~~~~~~~~~

This module binds records returned by the MaxMind DB reader, which are
nested dicts and lists, to the dataclasses in :mod:`georecords.models`.

"""

from __future__ import annotations

import dataclasses
import functools
import typing
from typing import Any

from georecords.errors import DecodeError
from georecords.types import RawRecord


def _decode_boolean(value: Any, path: tuple) -> bool:
    if not isinstance(value, bool):
        raise DecodeError(_mismatch("boolean", value), path)
    return value


def _decode_double(value: Any, path: tuple) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(_mismatch("double", value), path)
    return float(value)


def _decode_uint(value: Any, path: tuple) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(_mismatch("unsigned integer", value), path)
    if value < 0:
        raise DecodeError(f"cannot store negative value {value} in an unsigned field", path)
    return value


def _decode_utf8_string(value: Any, path: tuple) -> str:
    if not isinstance(value, str):
        raise DecodeError(_mismatch("string", value), path)
    return value


_type_decoder = {
    bool: _decode_boolean,
    float: _decode_double,
    int: _decode_uint,
    str: _decode_utf8_string,
}


def _mismatch(expected: str, value: Any) -> str:
    return f"expected {expected}, got {type(value).__name__} {value!r}"


@functools.lru_cache(maxsize=None)
def _fields_for(cls: type) -> tuple[tuple[str, str, Any, int | None], ...]:
    """Return (attribute, database key, type, maximum) for each decoded field
    of cls"""
    hints = typing.get_type_hints(cls)
    return tuple(
        (
            f.name,
            f.metadata.get("key", f.name),
            hints[f.name],
            f.metadata.get("maximum"),
        )
        for f in dataclasses.fields(cls)
        if f.metadata.get("decode", True)
    )


def decode_into(raw: RawRecord, target: Any) -> None:
    """Fill target in place from a record returned by the MaxMind DB reader

    Arguments:
    raw -- the record as returned by ``maxminddb.Reader.get``
    target -- a dataclass instance from georecords.models

    On a DecodeError the exception's ``record`` attribute is target, holding
    whatever was bound before the failure.
    """
    try:
        _bind(raw, target, ())
    except DecodeError as ex:
        ex.record = target
        raise


def _bind(raw: RawRecord, target: Any, path: tuple) -> None:
    if not isinstance(raw, dict):
        raise DecodeError(_mismatch("map", raw), path)

    for name, key, hint, maximum in _fields_for(type(target)):
        value = raw.get(key)
        if value is None:
            continue
        key_path = path + (key,)

        if dataclasses.is_dataclass(hint):
            # Bind into the default instance so a failure deeper down still
            # leaves everything before it visible on target.
            _bind(value, getattr(target, name), key_path)
        elif typing.get_origin(hint) is list:
            if not isinstance(value, list):
                raise DecodeError(_mismatch("array", value), key_path)
            (item_type,) = typing.get_args(hint)
            items: list = []
            setattr(target, name, items)
            for index, item in enumerate(value):
                element = item_type()
                items.append(element)
                _bind(item, element, key_path + (index,))
        else:
            try:
                decoder = _type_decoder[hint]
            except KeyError:
                raise TypeError(
                    f"{type(target).__name__}.{name} has an unsupported type {hint!r}"
                ) from None
            decoded = decoder(value, key_path)
            if maximum is not None and decoded > maximum:
                raise DecodeError(
                    f"value {decoded} is out of range, the maximum is {maximum}",
                    key_path,
                )
            setattr(target, name, decoded)
