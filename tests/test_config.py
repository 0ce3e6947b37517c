"""Unit tests for Config and related Pydantic models (rainsrc.config).

Tests cover:
- PromptDefaults defaults and validation
- ScaffoldRequest validation, whitespace stripping and immutability
- Config defaults and from_env
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from rainsrc.config import Config, PromptDefaults
from rainsrc.scaffolder.models import PackageManager, ScaffoldRequest


# ---------------------------------------------------------------------------
# PromptDefaults
# ---------------------------------------------------------------------------


class TestPromptDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        defaults = PromptDefaults()
        assert defaults.project_name == "rainsrc"
        assert defaults.main_file_name == "main"
        assert defaults.package_manager is PackageManager.NPM

    @pytest.mark.unit
    def test_empty_project_name_rejected(self):
        with pytest.raises(ValidationError):
            PromptDefaults(project_name="")

    @pytest.mark.unit
    def test_package_manager_from_string(self):
        assert PromptDefaults(package_manager="pnpm").package_manager is PackageManager.PNPM


# ---------------------------------------------------------------------------
# ScaffoldRequest
# ---------------------------------------------------------------------------


class TestScaffoldRequest:
    @pytest.mark.unit
    def test_valid(self):
        request = ScaffoldRequest(
            project_name="demo", package_manager="yarn", main_file_name="app"
        )
        assert request.package_manager is PackageManager.YARN

    @pytest.mark.unit
    def test_strips_whitespace(self):
        request = ScaffoldRequest(
            project_name="  demo ", package_manager="npm", main_file_name=" app "
        )
        assert request.project_name == "demo"
        assert request.main_file_name == "app"

    @pytest.mark.unit
    @pytest.mark.parametrize("field", ["project_name", "main_file_name"])
    def test_blank_fields_rejected(self, field):
        kwargs = {"project_name": "demo", "package_manager": "npm", "main_file_name": "main"}
        kwargs[field] = "   "
        with pytest.raises(ValidationError):
            ScaffoldRequest(**kwargs)

    @pytest.mark.unit
    @pytest.mark.parametrize("field", ["project_name", "main_file_name"])
    @pytest.mark.parametrize("value", ["/tmp/elsewhere/proj", "nested/proj", "a\\b", ".", ".."])
    def test_path_like_names_rejected(self, field, value):
        kwargs = {"project_name": "demo", "package_manager": "npm", "main_file_name": "main"}
        kwargs[field] = value
        with pytest.raises(ValidationError, match="plain name"):
            ScaffoldRequest(**kwargs)

    @pytest.mark.unit
    def test_unknown_package_manager_rejected(self):
        with pytest.raises(ValidationError):
            ScaffoldRequest(project_name="demo", package_manager="bun", main_file_name="main")

    @pytest.mark.unit
    def test_frozen(self):
        request = ScaffoldRequest(project_name="demo", package_manager="npm", main_file_name="main")
        with pytest.raises(ValidationError):
            request.project_name = "other"


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class TestConfig:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.profile == "dotenv"
        assert config.init_timeout is None
        assert config.defaults == PromptDefaults()

    @pytest.mark.unit
    def test_init_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            Config(init_timeout=0)

    @pytest.mark.unit
    def test_from_env_empty(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()
        assert config == Config()

    @pytest.mark.unit
    def test_from_env_all_variables(self):
        env = {
            "RAINSRC_PROFILE": "legacy",
            "RAINSRC_PROJECT_NAME": "my-api",
            "RAINSRC_MAIN_FILE": "server",
            "RAINSRC_PACKAGE_MANAGER": "pnpm",
            "RAINSRC_INIT_TIMEOUT": "45",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()

        assert config.profile == "legacy"
        assert config.defaults.project_name == "my-api"
        assert config.defaults.main_file_name == "server"
        assert config.defaults.package_manager is PackageManager.PNPM
        assert config.init_timeout == 45

    @pytest.mark.unit
    def test_from_env_invalid_package_manager(self):
        with patch.dict(os.environ, {"RAINSRC_PACKAGE_MANAGER": "bun"}, clear=True):
            with pytest.raises(ValidationError):
                Config.from_env()

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["abc", "0", "-5"])
    def test_from_env_invalid_timeout(self, value):
        with patch.dict(os.environ, {"RAINSRC_INIT_TIMEOUT": value}, clear=True):
            with pytest.raises(ValidationError):
                Config.from_env()
