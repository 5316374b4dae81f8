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
"""FieldInterceptor: installs hook chains on object fields and runs them.

Three hook points are supported, each taking ``handler(obj, field, value)``:

* **after-get** handlers transform the value a read returns. They run in
  registration order and the result is stored back as the cached value, so
  the next read starts from the transformed value.
* **before-set** handlers transform or veto an incoming value. The most
  recently registered runs first. Raising from one aborts the write.
* **after-set** handlers observe a committed value, in registration order,
  and only when the commit changed the value.

Hooks run synchronously inside the attribute access that triggered them.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fieldfly.config.properties.intercept import InterceptProperties
from fieldfly.core.config import Config
from fieldfly.intercept.equality import values_differ
from fieldfly.intercept.registry import FieldRegistry
from fieldfly.intercept.types import Handler, InterceptedField, NotApplicable
from fieldfly.intercept.weaver import MISSING, InterceptedAttribute, class_attribute

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Capture:
    """A field's state as found just before interception."""

    value: Any
    prior_reader: Callable[[], Any] | None
    mirrors_instance_dict: bool


class FieldInterceptor:
    """Installs and runs field hook chains.

    Usage::

        interceptor = FieldInterceptor()
        interceptor.after_get(account, "balance", lambda obj, field, v: round(v, 2))
        interceptor.before_set(account, "balance", reject_negative)
        interceptor.after_set(account, "balance", lambda obj, field, v: audit.append(v))

    Every install returns *obj* so calls can be chained. ``before_set`` and
    ``after_set`` return a falsy :class:`NotApplicable` instead when the
    field currently holds a callable.
    """

    def __init__(
        self,
        properties: InterceptProperties | None = None,
        registry: FieldRegistry | None = None,
    ) -> None:
        self.properties = properties if properties is not None else InterceptProperties()
        self._registry = registry if registry is not None else FieldRegistry()

    @classmethod
    def from_config(cls, config: Config) -> FieldInterceptor:
        """Build an interceptor from the ``fieldfly.intercept`` config section."""
        return cls(properties=config.bind(InterceptProperties))

    def configure(self, config: Config) -> None:
        """Rebind properties from *config*; already intercepted fields pick them up."""
        self.properties = config.bind(InterceptProperties)

    # ------------------------------------------------------------------
    # Installation
    # ------------------------------------------------------------------

    def after_get(self, obj: Any, field: str, callback: Handler) -> Any:
        """Append *callback* to the after-get chain of ``obj.field``."""
        record = self._ensure(obj, field)
        record.after_get_chain.append(callback)
        self._log_installed("after_get", obj, record)
        return obj

    def before_set(self, obj: Any, field: str, callback: Handler) -> Any:
        """Put *callback* at the front of the before-set chain of ``obj.field``."""
        refused, capture = self._guard_callable(obj, field)
        if refused is not None:
            return refused
        record = self._ensure(obj, field, capture)
        record.before_set_chain.insert(0, callback)
        self._log_installed("before_set", obj, record)
        return obj

    def after_set(self, obj: Any, field: str, callback: Handler) -> Any:
        """Append *callback* to the after-set chain of ``obj.field``."""
        refused, capture = self._guard_callable(obj, field)
        if refused is not None:
            return refused
        record = self._ensure(obj, field, capture)
        record.after_set_chain.append(callback)
        self._log_installed("after_set", obj, record)
        return obj

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def read(self, obj: Any, field: str) -> Any:
        """Resolve ``obj.field`` through its after-get chain."""
        record = self._registry.lookup(obj, field)
        if not record.seeded:
            if record.prior_reader is not None:
                record.cached_value = record.prior_reader()
            record.seeded = True

        value = record.cached_value
        for handler in record.after_get_chain:
            value = handler(obj, field, value)

        self._store(obj, record, value)
        if self.properties.trace_accesses:
            logger.debug("Read %s.%s", type(obj).__qualname__, field)
        return value

    def write(self, obj: Any, field: str, value: Any) -> Any:
        """Commit *value* to ``obj.field`` through its before-set and after-set chains.

        An exception from a before-set handler propagates before the commit
        and leaves the cached value untouched. After-set handlers run only if
        the committed value differs from the previous one under the
        configured change detection.
        """
        record = self._registry.lookup(obj, field)
        original = record.cached_value

        for handler in record.before_set_chain:
            value = handler(obj, field, value)

        self._store(obj, record, value)
        record.seeded = True

        changed = values_differ(value, original, self.properties.change_detection)
        if self.properties.trace_accesses:
            logger.debug("Wrote %s.%s (changed=%s)", type(obj).__qualname__, field, changed)
        if changed:
            for handler in record.after_set_chain:
                handler(obj, field, value)
        elif record.after_set_chain and self.properties.trace_accesses:
            logger.debug("Skipped after-set handlers for %s.%s: value unchanged", type(obj).__qualname__, field)
        return value

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _ensure(self, obj: Any, field: str, capture: _Capture | None = None) -> InterceptedField:
        """Return the record for ``obj.field``, installing its accessor on first use."""
        record = self._registry.find(obj, field)
        if record is not None:
            return record

        if capture is None:
            capture = self._capture(obj, field)
        record, _ = self._registry.get_or_create(obj, field)
        record.cached_value = capture.value
        record.prior_reader = capture.prior_reader
        record.mirrors_instance_dict = capture.mirrors_instance_dict
        setattr(type(obj), field, InterceptedAttribute(field, self))

        logger.debug(
            "Intercepted %s.%s (prior accessor: %s)",
            type(obj).__qualname__,
            field,
            capture.prior_reader is not None,
        )
        return record

    def _capture(self, obj: Any, field: str) -> _Capture:
        cls = type(obj)
        static = class_attribute(cls, field)
        has_accessor = _is_data_descriptor(static)
        try:
            value = getattr(obj, field)
        except AttributeError:
            value, prior_reader = None, None
        else:
            prior_reader = functools.partial(static.__get__, obj, cls) if has_accessor else None
        instance_dict = getattr(obj, "__dict__", None)
        own_slot = isinstance(instance_dict, dict) and (field in instance_dict or static is MISSING)
        return _Capture(value=value, prior_reader=prior_reader, mirrors_instance_dict=own_slot)

    def _guard_callable(self, obj: Any, field: str) -> tuple[NotApplicable | None, _Capture | None]:
        """Refuse write interception on callable fields, returning what was captured."""
        record = self._registry.find(obj, field)
        capture = None
        if record is not None:
            current = record.cached_value
        else:
            capture = self._capture(obj, field)
            current = capture.value

        if callable(current):
            logger.debug("Refused write interception on %s.%s: value is callable", type(obj).__qualname__, field)
            reason = f"'{field}' holds a callable; write interception would break method semantics"
            return NotApplicable(obj=obj, field=field, reason=reason), None
        return None, capture

    def _store(self, obj: Any, record: InterceptedField, value: Any) -> None:
        record.cached_value = value
        if record.mirrors_instance_dict:
            vars(obj)[record.name] = value

    def _log_installed(self, hook: str, obj: Any, record: InterceptedField) -> None:
        logger.debug(
            "Installed %s handler on %s.%s (chains: get=%d before=%d after=%d)",
            hook,
            type(obj).__qualname__,
            record.name,
            len(record.after_get_chain),
            len(record.before_set_chain),
            len(record.after_set_chain),
        )


def _is_data_descriptor(attr: Any) -> bool:
    kind = type(attr)
    return hasattr(kind, "__get__") and (hasattr(kind, "__set__") or hasattr(kind, "__delete__"))


# ---------------------------------------------------------------------------
# Module-level API bound to a shared interceptor
# ---------------------------------------------------------------------------

_default_interceptor = FieldInterceptor()


def get_default_interceptor() -> FieldInterceptor:
    """Return the interceptor behind the module-level install functions."""
    return _default_interceptor


def install_after_get(obj: Any, field: str, callback: Handler) -> Any:
    """Append an after-get handler to ``obj.field``; returns *obj*."""
    return _default_interceptor.after_get(obj, field, callback)


def install_before_set(obj: Any, field: str, callback: Handler) -> Any:
    """Prepend a before-set handler to ``obj.field``; returns *obj* or NotApplicable."""
    return _default_interceptor.before_set(obj, field, callback)


def install_after_set(obj: Any, field: str, callback: Handler) -> Any:
    """Append an after-set handler to ``obj.field``; returns *obj* or NotApplicable."""
    return _default_interceptor.after_set(obj, field, callback)
