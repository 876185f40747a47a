"""
Kind Registry - discovers and loads all available divergence kinds.

The registry provides:
1. Auto-discovery of kinds with a <kind>.yaml file
2. Lazy loading of kind factories
3. Evaluator construction by kind name
"""

import importlib
import logging
from pathlib import Path
from typing import Dict, List, Optional, Callable

from .base import KINDS_DIR, KindConfig, DivergenceKind, load_kind_config

logger = logging.getLogger(__name__)


class KindRegistry:
    """
    Registry of available divergence kinds.

    Discovers kinds by scanning for .yaml files in the kinds directory.
    Provides lazy loading of kind factory functions.
    """

    def __init__(self, kinds_dir: Optional[Path] = None):
        if kinds_dir is None:
            kinds_dir = KINDS_DIR

        self.kinds_dir = kinds_dir
        self._configs: Dict[str, KindConfig] = {}
        self._factories: Dict[str, Callable[..., DivergenceKind]] = {}

        self._discover_kinds()

    def _discover_kinds(self):
        """Find all kinds with .yaml config files."""
        for config_path in sorted(self.kinds_dir.glob("*.yaml")):
            kind_name = config_path.stem
            if kind_name.startswith("_"):
                continue

            config = load_kind_config(config_path)
            if config.name != kind_name:
                logger.warning(
                    "Kind config %s declares kind '%s', registering as '%s'",
                    config_path.name, config.name, kind_name,
                )
            self._configs[kind_name] = config

        logger.debug("Discovered kinds: %s", ", ".join(self._configs))

    def list_kinds(self) -> List[str]:
        """List all available kind names."""
        return sorted(self._configs.keys())

    def has_kind(self, kind_name: str) -> bool:
        """Check if kind exists in registry."""
        return kind_name in self._configs

    def get_config(self, kind_name: str) -> KindConfig:
        """Get configuration for a kind."""
        if kind_name not in self._configs:
            available = ", ".join(self.list_kinds())
            raise KeyError(
                f"Unknown divergence kind: '{kind_name}'. Available: {available}"
            )
        return self._configs[kind_name]

    def get_factory(self, kind_name: str) -> Callable[..., DivergenceKind]:
        """
        Get factory function for a kind.

        Lazily imports the kind module on first access.
        """
        self.get_config(kind_name)

        if kind_name not in self._factories:
            try:
                module = importlib.import_module(
                    f"divmap.core.kinds.{kind_name}"
                )
                self._factories[kind_name] = module.create
            except (ImportError, AttributeError) as e:
                raise ImportError(
                    f"Could not load factory for kind '{kind_name}': {e}"
                ) from e

        return self._factories[kind_name]

    def create(self, kind_name: str, **params) -> DivergenceKind:
        """Build a kind instance; omitted parameters use the YAML defaults."""
        return self.get_factory(kind_name)(**params)

    def get_defaults(self, kind_name: str) -> Dict[str, object]:
        """Get default parameters for a kind."""
        return dict(self.get_config(kind_name).parameters)


# Global registry instance (lazy initialized)
_registry: Optional[KindRegistry] = None


def get_registry() -> KindRegistry:
    """Get or create global kind registry."""
    global _registry
    if _registry is None:
        _registry = KindRegistry()
    return _registry


def reset_registry():
    """Reset the global registry (for testing)."""
    global _registry
    _registry = None
