# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Weaver: per-instance classes carrying intercepted field descriptors."""

from __future__ import annotations

import contextlib
import types
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from fieldfly.kernel.exceptions import InterceptionNotSupportedException

if TYPE_CHECKING:
    from fieldfly.intercept.interceptor import FieldInterceptor

FIELDS_ATTR = "__fieldfly_fields__"

MISSING = object()


class InterceptedAttribute:
    """Data descriptor routing ``obj.name`` reads and writes through a FieldInterceptor.

    Being a data descriptor, it takes precedence over the instance
    ``__dict__`` and over any accessor defined further up the MRO.
    """

    __slots__ = ("name", "interceptor")

    def __init__(self, name: str, interceptor: FieldInterceptor) -> None:
        self.name = name
        self.interceptor = interceptor

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return self.interceptor.read(instance, self.name)

    def __set__(self, instance: Any, value: Any) -> None:
        self.interceptor.write(instance, self.name, value)

    def __delete__(self, instance: Any) -> None:
        raise AttributeError(f"cannot delete intercepted field '{self.name}'")

    def __repr__(self) -> str:
        return f"<InterceptedAttribute {self.name!r}>"


def weave_instance(obj: Any) -> type:
    """Give *obj* its own subclass of its current class and return it.

    The woven class keeps the original ``__name__``, ``__qualname__`` and
    ``__module__`` and declares ``__slots__ = ()`` so the instance layout is
    unchanged. Calling this again on an already woven object is a no-op.

    Copying and pickling reduce against the original class, so a copy comes
    back as a plain instance carrying the current field values and shares no
    interception state. A base class ``__eq__`` is likewise run against the
    original class, so equal instances stay equal once one is intercepted.

    Raises:
        InterceptionNotSupportedException: if the class cannot be subclassed
            or the instance's ``__class__`` cannot be reassigned (builtins,
            instances of C types).
    """
    cls = type(obj)
    if FIELDS_ATTR in vars(cls):
        return cls

    def __reduce_ex__(self: Any, protocol: int) -> Any:
        with unwoven(self):
            return cls.__reduce_ex__(self, protocol)

    def __eq__(self: Any, other: Any) -> Any:
        with contextlib.ExitStack() as stack:
            stack.enter_context(unwoven(self))
            if other is not self:
                stack.enter_context(unwoven(other))
            return cls.__eq__(self, other)

    def exec_body(ns: dict[str, Any]) -> None:
        ns["__slots__"] = ()
        ns["__module__"] = cls.__module__
        ns["__qualname__"] = cls.__qualname__
        ns["__reduce_ex__"] = __reduce_ex__
        if cls.__eq__ is not object.__eq__:
            ns["__eq__"] = __eq__
            ns["__hash__"] = cls.__hash__
        ns[FIELDS_ATTR] = {}

    try:
        woven = types.new_class(cls.__name__, (cls,), exec_body=exec_body)
        object.__setattr__(obj, "__class__", woven)
    except TypeError as exc:
        raise InterceptionNotSupportedException(
            f"cannot intercept fields of {cls.__qualname__} instances: {exc}",
            code="INTERCEPT_UNSUPPORTED",
            context={"type": cls.__qualname__},
        ) from exc
    return woven


@contextlib.contextmanager
def unwoven(obj: Any) -> Iterator[type]:
    """Temporarily restore *obj* to the class it had before weaving.

    Cached values of slot-backed fields are written to their slots first, so
    code running inside the block sees current values without triggering
    hooks. Values held in ``__dict__`` are already kept current. Objects
    that are not woven are left alone.
    """
    woven = type(obj)
    table = vars(woven).get(FIELDS_ATTR)
    if table is None:
        yield woven
        return

    base = woven.__base__
    for name, record in table.items():
        backing = class_attribute(base, name)
        if isinstance(backing, types.MemberDescriptorType):
            backing.__set__(obj, record.cached_value)

    object.__setattr__(obj, "__class__", base)
    try:
        yield base
    finally:
        object.__setattr__(obj, "__class__", woven)


def class_attribute(cls: type, name: str) -> Any:
    """Look *name* up in the MRO of *cls* without invoking descriptors."""
    for klass in cls.__mro__:
        if name in vars(klass):
            return vars(klass)[name]
    return MISSING
