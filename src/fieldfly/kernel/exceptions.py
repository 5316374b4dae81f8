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
"""Exception hierarchy for fieldfly.

All library exceptions inherit from FieldFlyException, so callers can catch
the base class to handle every library error or a subclass for targeted
handling.

Categories:
- InterceptionException: failures raised around field interception
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class FieldFlyException(Exception):
    """Base exception for all fieldfly errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "INTERCEPT_VETO").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Interception Exceptions
# =============================================================================


class InterceptionException(FieldFlyException):
    """Errors raised while installing or running field interceptors."""


class WriteVetoedException(InterceptionException):
    """Raised by a before-set handler to reject an incoming value.

    Any exception raised from a before-set handler aborts the write; this
    type exists so validation layers have a conventional one to raise.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        rejected_value: object = None,
        code: str | None = "INTERCEPT_VETO",
        context: dict | None = None,
    ) -> None:
        ctx = dict(context or {})
        if field is not None:
            ctx.setdefault("field", field)
        super().__init__(message, code=code, context=ctx)
        self.field = field
        self.rejected_value = rejected_value


class InterceptionNotSupportedException(InterceptionException, TypeError):
    """The target object's class cannot be rewoven to carry interceptors."""


class NotApplicableException(InterceptionException):
    """Raised by the decorator forms when an install returns NotApplicable."""
