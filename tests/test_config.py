import pytest

from moneytree.config import NETWORKS, load_settings, resolve_network
from moneytree.errors import ConfigError

ENV_KEYS = [
    "INFURA_API_KEY", "PRIVATE_KEY", "RPC_URL_MAINNET", "RPC_URL_SEPOLIA",
    "UNISWAP_V2_ROUTER_SEPOLIA", "UNISWAP_V2_FACTORY_SEPOLIA", "WETH_SEPOLIA",
    "EXPLORER_URL_SEPOLIA", "ARTIFACTS_DIR", "MONEYTREE_MAX_ATTEMPTS",
    "MONEYTREE_RETRY_DELAY", "MONEYTREE_SWAP_MAX_ATTEMPTS", "MONEYTREE_SWAP_RETRY_DELAY",
]

KEY = "0x" + "12" * 32


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("INFURA_API_KEY", "abc123")
    monkeypatch.setenv("PRIVATE_KEY", KEY)


@pytest.mark.parametrize("answer, expected", [
    ("", "mainnet"), (None, "mainnet"), ("mainnet", "mainnet"), (" Sepolia ", "sepolia"),
])
def test_resolve_network(answer, expected):
    assert resolve_network(answer) == expected


def test_unknown_network():
    with pytest.raises(ConfigError, match="Invalid network choice"):
        resolve_network("goerli")


def test_defaults_for_sepolia():
    settings = load_settings("sepolia")

    assert settings.chain_id == 11155111
    assert settings.rpc_url == "https://sepolia.infura.io/v3/abc123"
    assert settings.router == NETWORKS["sepolia"]["router"]
    assert settings.private_key == KEY
    assert settings.max_attempts == 10
    assert settings.retry_delay == 1.0
    assert settings.swap_max_attempts == 10
    assert settings.swap_retry_delay == 5.0
    assert settings.tx_url("0xabc") == "https://sepolia.etherscan.io/tx/0xabc"


def test_blank_network_is_mainnet():
    settings = load_settings("")
    assert settings.network == "mainnet"
    assert settings.chain_id == 1


def test_missing_private_key(monkeypatch):
    monkeypatch.delenv("PRIVATE_KEY")
    with pytest.raises(ConfigError, match="PRIVATE_KEY"):
        load_settings("sepolia")
    assert load_settings("sepolia", require_key=False).private_key == ""


def test_placeholder_private_key_is_rejected(monkeypatch):
    monkeypatch.setenv("PRIVATE_KEY", "0x" + "0" * 64)
    with pytest.raises(ConfigError):
        load_settings("mainnet")


def test_missing_api_key(monkeypatch):
    monkeypatch.delenv("INFURA_API_KEY")
    with pytest.raises(ConfigError, match="INFURA_API_KEY"):
        load_settings("mainnet")


def test_rpc_url_overrides_infura(monkeypatch):
    monkeypatch.delenv("INFURA_API_KEY")
    monkeypatch.setenv("RPC_URL_SEPOLIA", "http://127.0.0.1:8545")
    assert load_settings("sepolia").rpc_url == "http://127.0.0.1:8545"


def test_overrides(monkeypatch):
    monkeypatch.setenv("WETH_SEPOLIA", "0x" + "22" * 20)
    monkeypatch.setenv("MONEYTREE_MAX_ATTEMPTS", "4")
    monkeypatch.setenv("MONEYTREE_SWAP_RETRY_DELAY", "0.5")
    monkeypatch.setenv("ARTIFACTS_DIR", "build")

    settings = load_settings("sepolia")

    assert settings.weth == "0x" + "22" * 20
    assert settings.max_attempts == 4
    assert settings.swap_retry_delay == 0.5
    assert settings.artifacts_dir == "build"


def test_zero_swap_attempts_means_unbounded(monkeypatch):
    monkeypatch.setenv("MONEYTREE_SWAP_MAX_ATTEMPTS", "0")
    assert load_settings("sepolia").swap_max_attempts is None


def test_bad_numbers(monkeypatch):
    monkeypatch.setenv("MONEYTREE_MAX_ATTEMPTS", "ten")
    with pytest.raises(ConfigError, match="MONEYTREE_MAX_ATTEMPTS"):
        load_settings("sepolia")


def test_liquidity_attempts_must_be_positive(monkeypatch):
    monkeypatch.setenv("MONEYTREE_MAX_ATTEMPTS", "0")
    with pytest.raises(ConfigError, match="at least 1"):
        load_settings("sepolia")
