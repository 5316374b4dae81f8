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
"""Tests for change detection predicates."""

from __future__ import annotations

import pytest

from fieldfly.intercept.equality import strict_equals, values_differ


class TestStrictEquals:
    @pytest.mark.parametrize(
        ("a", "b"),
        [
            (1, 1),
            (10**30, 10**30),
            (1, 1.0),
            ("abc", "ab" + "c"),
            (b"x", b"x"),
            (None, None),
            (True, True),
        ],
    )
    def test_equal_scalars(self, a, b) -> None:
        assert strict_equals(a, b)

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            (True, 1),
            (0, False),
            ("1", 1),
            ("x", b"x"),
            (None, 0),
            ([1], [1]),
            ({"a": 1}, {"a": 1}),
        ],
    )
    def test_unequal_values(self, a, b) -> None:
        assert not strict_equals(a, b)

    def test_nan_never_equals_itself(self) -> None:
        nan = float("nan")
        assert not strict_equals(nan, nan)

    def test_same_container_is_equal(self) -> None:
        items = [1, 2]
        assert strict_equals(items, items)


class TestValuesDiffer:
    def test_default_mode_is_strict(self) -> None:
        assert values_differ([1], [1]) is True
        assert values_differ(2, 2) is False

    def test_identity_mode(self) -> None:
        obj = object()
        assert values_differ(obj, obj, "identity") is False
        assert values_differ(object(), object(), "identity") is True

    def test_equality_mode(self) -> None:
        assert values_differ([1], [1], "equality") is False
        assert values_differ([1], [2], "equality") is True
