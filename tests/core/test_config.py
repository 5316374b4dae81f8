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
"""Tests for the configuration system."""

from dataclasses import dataclass
from pathlib import Path

import pytest
from pydantic import BaseModel

from fieldfly.core.config import Config, config_properties


class TestConfig:
    def test_load_from_dict(self):
        config = Config({"app": {"name": "inventory", "port": 8080}})
        assert config.get("app.name") == "inventory"
        assert config.get("app.port") == 8080

    def test_get_with_default(self):
        config = Config({})
        assert config.get("missing.key", "default") == "default"

    def test_get_through_non_dict_returns_default(self):
        config = Config({"app": {"name": "inventory"}})
        assert config.get("app.name.first", "n/a") == "n/a"

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("FIELDFLY_INTERCEPT_TRACE_ACCESSES", "true")
        config = Config({"fieldfly": {"intercept": {"trace-accesses": False}}})
        assert config.get("fieldfly.intercept.trace-accesses") == "true"

    def test_get_section(self):
        config = Config({"fieldfly": {"logging": {"level": {"root": "DEBUG"}}}})
        assert config.get_section("fieldfly.logging.level") == {"root": "DEBUG"}
        assert config.get_section("fieldfly.missing") == {}

    def test_to_dict_is_a_copy(self):
        config = Config({"a": 1})
        data = config.to_dict()
        data["a"] = 2
        assert config.get("a") == 1


class TestPlaceholders:
    def test_resolves_config_reference(self):
        config = Config({"base": "x", "derived": "${base}-y"})
        assert config.get("derived") == "x-y"

    def test_resolves_env_var(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("FIELDFLY_TEST_MODE", "equality")
        config = Config({"mode": "${FIELDFLY_TEST_MODE}"})
        assert config.get("mode") == "equality"

    def test_uses_default(self):
        config = Config({"mode": "${NOT_SET_ANYWHERE_123:strict}"})
        assert config.get("mode") == "strict"

    def test_unresolvable_raises(self):
        config = Config({"mode": "${NOT_SET_ANYWHERE_123}"})
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            config.get("mode")

    def test_circular_reference_raises(self):
        config = Config({"a": "${b}", "b": "${a}"})
        with pytest.raises(ValueError, match="Max recursion depth"):
            config.get("a")


class TestFromSources:
    def test_loads_packaged_defaults(self, tmp_path: Path):
        config = Config.from_sources(tmp_path)
        assert config.get("fieldfly.intercept.change-detection") == "strict"
        assert config.loaded_sources == ["fieldfly-defaults.yaml (defaults)"]

    def test_yaml_overrides_defaults(self, tmp_path: Path):
        (tmp_path / "fieldfly.yaml").write_text("fieldfly:\n  intercept:\n    change-detection: identity\n")
        config = Config.from_sources(tmp_path)
        assert config.get("fieldfly.intercept.change-detection") == "identity"
        assert config.get("fieldfly.intercept.trace-accesses") is False

    def test_toml_source(self, tmp_path: Path):
        (tmp_path / "fieldfly.toml").write_text('[fieldfly.intercept]\nchange-detection = "equality"\n')
        config = Config.from_sources(tmp_path, load_defaults=False)
        assert config.get("fieldfly.intercept.change-detection") == "equality"
        assert config.loaded_sources == [str(tmp_path / "fieldfly.toml")]

    def test_profile_overlay_wins(self, tmp_path: Path):
        (tmp_path / "fieldfly.yaml").write_text("app:\n  port: 8080\n  host: localhost\n")
        (tmp_path / "fieldfly-dev.yaml").write_text("app:\n  port: 9090\n")
        config = Config.from_sources(tmp_path, active_profiles=["dev"], load_defaults=False)
        assert config.get("app.port") == 9090
        assert config.get("app.host") == "localhost"


@config_properties(prefix="shop.cart")
@dataclass
class CartProperties:
    max_items: int = 10
    discount: float = 0.0
    enabled: bool = True


@config_properties(prefix="shop.checkout")
class CheckoutProperties(BaseModel):
    currency: str = "EUR"
    retries: int = 3


class TestBind:
    def test_bind_dataclass_defaults(self):
        props = Config({}).bind(CartProperties)
        assert props.max_items == 10

    def test_bind_dataclass_coerces_strings(self):
        config = Config({"shop": {"cart": {"max-items": "25", "discount": "0.5", "enabled": "no"}}})
        props = config.bind(CartProperties)
        assert props.max_items == 25
        assert props.discount == 0.5
        assert props.enabled is False

    def test_bind_pydantic_model(self):
        config = Config({"shop": {"checkout": {"currency": "USD"}}})
        props = config.bind(CheckoutProperties)
        assert props.currency == "USD"
        assert props.retries == 3

    def test_bind_env_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("FIELDFLY_SHOP_CHECKOUT_RETRIES", "7")
        props = Config({}).bind(CheckoutProperties)
        assert props.retries == 7

    def test_bind_invalid_value_fails_fast(self):
        config = Config({"shop": {"checkout": {"retries": "many"}}})
        with pytest.raises(ValueError, match="Configuration validation failed"):
            config.bind(CheckoutProperties)

    def test_bind_undecorated_class_raises(self):
        @dataclass
        class Plain:
            x: int = 0

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)
