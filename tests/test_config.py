import ipaddress
import sys

import pytest
from loguru import logger

from vipfailover.config import VipConfig
from vipfailover.configurer import HetznerConfigurer, create_configurer
from vipfailover.exceptions import ConfigError
from vipfailover.models.enums import ConfigurerKind, LogLevel
from vipfailover.utils.logger import configure_logging, format_traceback, get_logger


def _hetzner_config(**overrides) -> VipConfig:
    cfg = VipConfig(
        VIP="198.51.100.7",
        HETZNER_USER="robot-user",
        HETZNER_PASSWORD="s3cret-pass",
    )
    for key, value in overrides.items():
        setattr(cfg, key, value)
    return cfg


def test_defaults():
    cfg = VipConfig()
    assert cfg.HOSTING_TYPE == ConfigurerKind.HETZNER
    assert cfg.STATUS_CACHE_TTL_SECONDS == 3600
    assert cfg.API_TIMEOUT_SECONDS > 0


def test_failover_url():
    cfg = _hetzner_config(HETZNER_API_URL="https://robot.example/")
    assert cfg.get_vip() == ipaddress.IPv4Address("198.51.100.7")
    assert cfg.get_failover_url() == "https://robot.example/failover/198.51.100.7"


@pytest.mark.parametrize(
    "overrides",
    [
        {"VIP": ""},
        {"VIP": "not-an-ip"},
        {"HETZNER_USER": ""},
        {"HETZNER_PASSWORD": ""},
        {"HOSTING_TYPE": "openstack"},
        {"API_TIMEOUT_SECONDS": 0},
    ],
)
def test_validate_rejects(overrides):
    with pytest.raises(ConfigError):
        _hetzner_config(**overrides).validate()


def test_basic_hosting_needs_no_credentials():
    cfg = VipConfig(VIP="198.51.100.7", HOSTING_TYPE=ConfigurerKind.BASIC)
    cfg.validate()


def test_create_hetzner_configurer():
    cfg = _hetzner_config(STATUS_CACHE_TTL_SECONDS=600, VERBOSE=True)
    configurer = create_configurer(cfg)

    assert isinstance(configurer, HetznerConfigurer)
    assert configurer.ttl_seconds == 600
    assert configurer.client.verbose is True
    assert configurer.client.endpoint == cfg.get_failover_url()


def test_create_configurer_rejects_local_variant():
    cfg = VipConfig(VIP="198.51.100.7", HOSTING_TYPE=ConfigurerKind.BASIC)
    with pytest.raises(ConfigError):
        create_configurer(cfg)


def test_configure_logging_to_file(tmp_path):
    log_file = tmp_path / "vipfailover.log"
    configure_logging(LogLevel.DEBUG, str(log_file))
    try:
        get_logger("tests").debug("written to file")
        raise ValueError("boom")
    except ValueError as e:
        rendered = format_traceback(e)
    finally:
        logger.remove()
        logger.add(sys.stderr)

    assert "ValueError: boom" in rendered
    assert "Traceback" in rendered
    content = log_file.read_text()
    assert "written to file" in content
    assert "tests" in content


def test_ipv6_vip():
    cfg = _hetzner_config(VIP="2a01:4f8:fff0:53::")
    cfg.validate()

    assert cfg.get_vip() == ipaddress.IPv6Address("2a01:4f8:fff0:53::")
    assert cfg.get_failover_url() == (
        "https://robot-ws.your-server.de/failover/2a01:4f8:fff0:53::"
    )
    assert create_configurer(cfg).client.endpoint == cfg.get_failover_url()


def test_import_leaves_loguru_extra_untouched():
    messages = []
    handler_id = logger.add(messages.append, format="{extra}")
    try:
        logger.info("from the embedding program")
    finally:
        logger.remove(handler_id)

    assert messages == ["{}\n"]


def test_unbound_records_fall_back_to_module_name(tmp_path):
    log_file = tmp_path / "vipfailover.log"
    configure_logging(LogLevel.INFO, str(log_file))
    try:
        logger.info("plain loguru call")
    finally:
        logger.remove()
        logger.add(sys.stderr)

    line = log_file.read_text().strip()
    assert line.endswith(f"| {__name__} | plain loguru call")
