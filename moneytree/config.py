"""Network settings read from the environment (and a local ``.env``)."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError

load_dotenv()

DEFAULT_NETWORK = "mainnet"

# Uniswap V2 deployments. Any of these can be overridden per network with
# UNISWAP_V2_ROUTER_<NET>, UNISWAP_V2_FACTORY_<NET> and WETH_<NET>.
NETWORKS = {
    "mainnet": {
        "chain_id": 1,
        "infura": "https://mainnet.infura.io/v3/{key}",
        "router": "0x7a250d5630B4cF539739dF2C5dAcb4c659F2488D",
        "factory": "0x5C69bEe701ef814a2B6a3EDD4B1652CB9cc5aA6f",
        "weth": "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
        "explorer": "https://etherscan.io/tx/",
    },
    "sepolia": {
        "chain_id": 11155111,
        "infura": "https://sepolia.infura.io/v3/{key}",
        "router": "0xC532a74256D3Db42D0Bf7a0400fEFDbad7694008",
        "factory": "0x7E0987E5b3a30e3f2828572Bb659A548460a3003",
        "weth": "0x7b79995e5f793A07Bc00c21412e50Ecae098E7f9",
        "explorer": "https://sepolia.etherscan.io/tx/",
    },
}


@dataclass(frozen=True)
class Settings:
    network: str
    chain_id: int
    rpc_url: str
    private_key: str
    router: str
    factory: str
    weth: str
    explorer_url: str
    artifacts_dir: str = "artifacts"
    max_attempts: int = 10
    retry_delay: float = 1.0
    swap_max_attempts: Optional[int] = 10
    swap_retry_delay: float = 5.0

    def tx_url(self, tx_hash: str) -> str:
        return f"{self.explorer_url}{tx_hash}"


def resolve_network(choice: Optional[str]) -> str:
    """Map an operator answer to a known network; blank means mainnet."""
    name = (choice or "").strip().lower()
    if not name:
        return DEFAULT_NETWORK
    if name not in NETWORKS:
        raise ConfigError(
            f"Invalid network choice '{choice}'! Please choose one of: {', '.join(NETWORKS)}."
        )
    return name


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None


def load_settings(network: Optional[str] = None, require_key: bool = True) -> Settings:
    """Build :class:`Settings` for ``network`` from the environment.

    ``require_key=False`` allows read-only scripts to run without a private
    key; they still get a settings object, with an empty ``private_key``.
    """
    name = resolve_network(network)
    defaults = NETWORKS[name]
    suffix = name.upper()

    private_key = os.getenv("PRIVATE_KEY", "").strip()
    if require_key and (not private_key or private_key == "0x" + "0" * 64):
        raise ConfigError("Missing PRIVATE_KEY in the environment or .env file.")

    rpc_url = os.getenv(f"RPC_URL_{suffix}", "").strip()
    if not rpc_url:
        api_key = os.getenv("INFURA_API_KEY", "").strip()
        if not api_key:
            raise ConfigError(
                f"Missing INFURA_API_KEY (or RPC_URL_{suffix}) in the environment or .env file."
            )
        rpc_url = defaults["infura"].format(key=api_key)

    max_attempts = _env_int("MONEYTREE_MAX_ATTEMPTS", 10)
    if max_attempts < 1:
        raise ConfigError(f"MONEYTREE_MAX_ATTEMPTS must be at least 1, got {max_attempts}")
    swap_attempts = _env_int("MONEYTREE_SWAP_MAX_ATTEMPTS", 10)

    return Settings(
        network=name,
        chain_id=defaults["chain_id"],
        rpc_url=rpc_url,
        private_key=private_key,
        router=os.getenv(f"UNISWAP_V2_ROUTER_{suffix}", defaults["router"]),
        factory=os.getenv(f"UNISWAP_V2_FACTORY_{suffix}", defaults["factory"]),
        weth=os.getenv(f"WETH_{suffix}", defaults["weth"]),
        explorer_url=os.getenv(f"EXPLORER_URL_{suffix}", defaults["explorer"]),
        artifacts_dir=os.getenv("ARTIFACTS_DIR", "artifacts"),
        max_attempts=max_attempts,
        retry_delay=_env_float("MONEYTREE_RETRY_DELAY", 1.0),
        swap_max_attempts=swap_attempts if swap_attempts > 0 else None,
        swap_retry_delay=_env_float("MONEYTREE_SWAP_RETRY_DELAY", 5.0),
    )
