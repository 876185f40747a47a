"""
Tests for the kind registry.
"""

import pytest

from divmap.core.base import KindConfig
from divmap.core.kinds import KullbackLeibler, Renyi
from divmap.core.registry import KindRegistry, get_registry, reset_registry


@pytest.fixture
def registry():
    reset_registry()
    yield get_registry()
    reset_registry()


class TestKindRegistry:

    def test_discovers_all_kinds(self, registry):
        assert registry.list_kinds() == [
            'bhattacharyya', 'kullback_leibler', 'least_squares', 'renyi',
        ]

    def test_has_kind(self, registry):
        assert registry.has_kind('renyi')
        assert not registry.has_kind('hellinger')

    def test_get_config(self, registry):
        config = registry.get_config('renyi')
        assert isinstance(config, KindConfig)
        assert config.parameters == {'alpha': 1.5}

    def test_unknown_kind_lists_available(self, registry):
        with pytest.raises(KeyError, match="bhattacharyya"):
            registry.get_config('hellinger')

    def test_create_with_defaults(self, registry):
        kl = registry.create('kullback_leibler')
        assert isinstance(kl, KullbackLeibler)
        assert kl.epsilon == 1e-12

    def test_create_with_params(self, registry):
        r = registry.create('renyi', alpha=0.5)
        assert isinstance(r, Renyi)
        assert r.alpha == 0.5

    def test_factory_cached(self, registry):
        assert registry.get_factory('renyi') is registry.get_factory('renyi')

    def test_get_defaults_is_copy(self, registry):
        defaults = registry.get_defaults('renyi')
        defaults['alpha'] = 9.0
        assert registry.get_defaults('renyi') == {'alpha': 1.5}

    def test_global_registry_singleton(self, registry):
        assert get_registry() is registry

    def test_custom_directory_skips_private(self, tmp_path):
        (tmp_path / "renyi.yaml").write_text("kind: renyi\nparameters:\n  alpha: 3.0\n")
        (tmp_path / "_draft.yaml").write_text("kind: draft\n")
        reg = KindRegistry(tmp_path)
        assert reg.list_kinds() == ['renyi']
        assert reg.get_defaults('renyi') == {'alpha': 3.0}
