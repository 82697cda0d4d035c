"""
Address configurers and the factory selecting one by hosting type.

Re-exports:
    from vipfailover.configurer import AddressConfigurer, HetznerConfigurer
"""

from vipfailover.config import VipConfig, config
from vipfailover.configurer.base import AddressConfigurer
from vipfailover.configurer.hetzner import DEFAULT_STATUS_TTL, HetznerConfigurer
from vipfailover.exceptions import ConfigError
from vipfailover.models.enums import ConfigurerKind


def create_configurer(cfg: VipConfig | None = None) -> AddressConfigurer:
    """
    Create the configurer for the configured hosting type.

    Args:
        cfg: Configuration to use (defaults to the global config)

    Raises:
        ConfigError: Invalid configuration, or a hosting type whose
            configurer is not part of this package.
    """
    cfg = cfg or config
    cfg.validate()

    match ConfigurerKind(cfg.HOSTING_TYPE):
        case ConfigurerKind.HETZNER:
            return HetznerConfigurer.from_config(cfg)
        case kind:
            raise ConfigError(
                f"Hosting type '{kind.value}' is not provided by vipfailover"
            )


__all__ = [
    "AddressConfigurer",
    "HetznerConfigurer",
    "DEFAULT_STATUS_TTL",
    "create_configurer",
]
