"""Router configuration.

Values come from three sources, highest priority first:
1. Explicit command-line values
2. A TOML config file
3. Built-in defaults

Config file format:

    [network]
    rpc_url = "https://api.devnet.solana.com"
    network = "devnet"

    [routing]
    max_hops = 2
    default_strategy = "all"

    [execution]
    dry_run = true
    slippage_bps = 100
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, Field, ValidationError, model_validator

from liqrouter.constants import BPS_DENOMINATOR, DEFAULT_SLIPPAGE_BPS, MAX_HOPS, MIN_HOPS
from liqrouter.errors import ConfigError
from liqrouter.routing.router import Strategy

logger = structlog.get_logger()

DEFAULT_NETWORK = "devnet"

RPC_URLS = {
    "devnet": "https://api.devnet.solana.com",
    "testnet": "https://api.testnet.solana.com",
    "mainnet": "https://api.mainnet-beta.solana.com",
    "mainnet-beta": "https://api.mainnet-beta.solana.com",
}


def default_rpc_url(network: str) -> str:
    """RPC URL for a well-known network; anything else is taken as a custom URL."""
    return RPC_URLS.get(network, network)


class NetworkSection(BaseModel):
    rpc_url: str | None = None
    network: str | None = None


class RoutingSection(BaseModel):
    max_hops: int | None = None
    default_strategy: str | None = None


class ExecutionSection(BaseModel):
    dry_run: bool | None = None
    slippage_bps: int | None = None


class ConfigFile(BaseModel):
    """Contents of a TOML config file; every table and key is optional."""

    network: NetworkSection = Field(default_factory=NetworkSection)
    routing: RoutingSection = Field(default_factory=RoutingSection)
    execution: ExecutionSection = Field(default_factory=ExecutionSection)


class RouterConfig(BaseModel):
    """Validated router configuration."""

    network: str = DEFAULT_NETWORK
    rpc_url: str | None = None
    strategy: Strategy = Strategy.ALL
    max_hops: int = Field(default=2, ge=MIN_HOPS, le=MAX_HOPS)
    dry_run: bool = True
    slippage_bps: int = Field(default=DEFAULT_SLIPPAGE_BPS, ge=0, le=BPS_DENOMINATOR)
    verbose: bool = False

    @model_validator(mode="after")
    def _fill_rpc_url(self) -> RouterConfig:
        if self.rpc_url is None:
            self.rpc_url = default_rpc_url(self.network)
        return self

    @classmethod
    def from_sources(
        cls,
        cli: dict[str, Any] | None = None,
        config_file: ConfigFile | None = None,
    ) -> RouterConfig:
        """Merge CLI values over file values over defaults.

        Args:
            cli: Values given on the command line; None means "not given"
            config_file: Parsed config file, if any

        Raises:
            ConfigError: If the merged values are invalid
        """
        cli = {key: value for key, value in (cli or {}).items() if value is not None}
        file = config_file or ConfigFile()

        from_file = {
            "rpc_url": file.network.rpc_url,
            "network": file.network.network,
            "max_hops": file.routing.max_hops,
            "strategy": file.routing.default_strategy,
            "dry_run": file.execution.dry_run,
            "slippage_bps": file.execution.slippage_bps,
        }
        values = {key: value for key, value in from_file.items() if value is not None}
        values.update(cli)

        try:
            return cls.model_validate(values)
        except ValidationError as err:
            raise ConfigError(f"Invalid configuration: {err}") from err


def load_config_file(path: str | Path) -> ConfigFile:
    """Read and parse a TOML config file.

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as err:
        raise ConfigError(f"Failed to read config file {path}: {err}") from err
    except tomllib.TOMLDecodeError as err:
        raise ConfigError(f"Failed to parse config file {path}: {err}") from err

    try:
        return ConfigFile.model_validate(data)
    except ValidationError as err:
        raise ConfigError(f"Invalid config file {path}: {err}") from err


def load_config(
    config_path: str | Path | None = None,
    cli: dict[str, Any] | None = None,
) -> RouterConfig:
    """Build the effective configuration from a config file and CLI values.

    Raises:
        ConfigError: If the file is unusable or the merged values are invalid
    """
    config_file = load_config_file(config_path) if config_path is not None else None
    config = RouterConfig.from_sources(cli=cli, config_file=config_file)
    logger.debug(
        "config_loaded",
        config_path=str(config_path) if config_path is not None else None,
        network=config.network,
        strategy=config.strategy.value,
        max_hops=config.max_hops,
        dry_run=config.dry_run,
    )
    return config


__all__ = [
    "ConfigFile",
    "RouterConfig",
    "default_rpc_url",
    "load_config",
    "load_config_file",
]
