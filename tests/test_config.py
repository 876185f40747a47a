"""
Tests for settings loading.
"""

import pytest

from divmap.config import (
    CONFIG_ENV_VAR,
    DEFAULT_SETTINGS,
    EvaluatorSettings,
    list_profiles,
    load_settings,
)
from divmap.validation import InvalidParameterError


class TestLoadSettings:

    def test_packaged_defaults(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        settings = load_settings()
        assert settings == EvaluatorSettings(negative_policy="clamp", check_finite=True)

    def test_strict_profile(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert load_settings('strict').negative_policy == "reject"

    def test_fast_profile_keeps_default_policy(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        settings = load_settings('fast')
        assert settings.check_finite is False
        assert settings.negative_policy == "clamp"

    def test_unknown_profile(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        with pytest.raises(InvalidParameterError, match="strict"):
            load_settings('paranoid')

    def test_list_profiles(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert list_profiles() == ['fast', 'strict']

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("defaults:\n  negative_policy: reject\n")
        assert load_settings(path=path).negative_policy == "reject"

    def test_env_var_path(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text(
            "defaults:\n  check_finite: false\n"
            "profiles:\n  lab:\n    negative_policy: reject\n"
        )
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        settings = load_settings('lab')
        assert settings == EvaluatorSettings(negative_policy="reject", check_finite=False)

    def test_missing_file_uses_defaults(self, tmp_path):
        assert load_settings(path=tmp_path / "missing.yaml") == DEFAULT_SETTINGS

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("")
        assert load_settings(path=path) == DEFAULT_SETTINGS

    def test_bad_policy(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("defaults:\n  negative_policy: ignore\n")
        with pytest.raises(InvalidParameterError):
            load_settings(path=path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("defaults:\n  retries: 3\n")
        with pytest.raises(InvalidParameterError, match="retries"):
            load_settings(path=path)


class TestEvaluatorSettings:

    def test_bad_policy_rejected(self):
        with pytest.raises(InvalidParameterError):
            EvaluatorSettings(negative_policy="abs")

    def test_to_dict(self):
        assert DEFAULT_SETTINGS.to_dict() == {'negative_policy': 'clamp', 'check_finite': True}
