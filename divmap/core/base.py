"""
Base divergence kind with self-configuration.

Kinds own their configuration (parameter defaults, description, version)
in a YAML file next to the kind module. The evaluator only needs the two
methods every kind implements: pixel_terms() and combine().
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional

import numpy as np
import yaml


KINDS_DIR = Path(__file__).parent / "kinds"


@dataclass
class KindConfig:
    """Full kind configuration loaded from <kind>.yaml."""
    name: str
    version: str
    description: str = ""
    parameters: Dict[str, Any] = field(default_factory=dict)
    metadata: Dict[str, Any] = field(default_factory=dict)


def load_kind_config(config_path: Path) -> KindConfig:
    """Load kind configuration from YAML file."""
    with open(config_path) as f:
        raw = yaml.safe_load(f)

    return KindConfig(
        name=raw['kind'],
        version=str(raw.get('version', '1.0')),
        description=raw.get('description', '').strip(),
        parameters=raw.get('parameters', {}) or {},
        metadata=raw.get('metadata', {}) or {},
    )


class DivergenceKind(ABC):
    """
    Base class for all divergence kinds.

    Subclasses must:
    1. Define kind_name property
    2. Implement pixel_terms() and combine()
    3. Have a <kind_name>.yaml in the kinds directory
    """

    _config: Optional[KindConfig] = None

    @property
    @abstractmethod
    def kind_name(self) -> str:
        """Return kind name (must match the YAML 'kind' field)."""
        pass

    @property
    def config(self) -> KindConfig:
        """Get or load kind configuration."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def _load_config(self) -> KindConfig:
        config_path = KINDS_DIR / f"{self.kind_name}.yaml"

        if not config_path.exists():
            raise FileNotFoundError(
                f"Kind config not found for '{self.kind_name}'. "
                f"Expected at: {config_path}"
            )

        return load_kind_config(config_path)

    def default(self, parameter: str) -> Any:
        """Default value of a kind parameter, as declared in its YAML."""
        return self.config.parameters[parameter]

    @property
    def parameters(self) -> Dict[str, Any]:
        """Parameter values this instance was built with."""
        return {}

    @abstractmethod
    def pixel_terms(self, p: np.ndarray, q: np.ndarray) -> np.ndarray:
        """
        Per-pixel divergence terms.

        Args:
            p: Normalized reference samples (1D, row-major order)
            q: Rendered model samples (1D, same order)

        Returns:
            Array of per-pixel terms, summed by the evaluator
        """
        pass

    @abstractmethod
    def combine(self, total: float, flux: float) -> float:
        """
        Turn the summed pixel terms into the divergence value.

        Args:
            total: Sum of pixel_terms()
            flux: Total rendered model flux

        Returns:
            Divergence value
        """
        pass

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in self.parameters.items())
        return f"{type(self).__name__}({params})"
