"""JSON adapter – MaskingModule."""
from __future__ import annotations

from fieldmask.config.masking import MaskingConfig
from fieldmask.config.validation import ConfigError


class MaskingModule:
    """Carries a scope-local :class:`MaskingConfig` for one serializer.

    Register it on a :class:`~fieldmask.adapters.json.MaskingJSONSerializer`
    to shadow the process-wide config for everything that serializer
    writes::

        per_tenant = MaskingConfig.create(default_mask_char="#")
        serializer = MaskingJSONSerializer()
        serializer.register_module(MaskingModule(per_tenant))

    Raises
    ------
    ConfigError
        When *config* is ``None`` or not a :class:`MaskingConfig`.
    """

    name = "fieldmask"

    def __init__(self, config: MaskingConfig) -> None:
        if config is None:
            raise ConfigError("MaskingConfig must not be None")
        if not isinstance(config, MaskingConfig):
            raise ConfigError(f"Expected MaskingConfig, got {type(config).__name__}")
        self._config = config

    @property
    def config(self) -> MaskingConfig:
        return self._config

    def __repr__(self) -> str:
        return f"MaskingModule({self._config!r})"


__all__ = ["MaskingModule"]
