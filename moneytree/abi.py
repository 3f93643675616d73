"""Contract ABIs and Hardhat artifact loading."""

import json
import logging
import os

from .errors import ConfigError

log = logging.getLogger("moneytree")

ERC20_ABI = json.loads("""[
  {"type":"function","name":"balanceOf","stateMutability":"view",
   "inputs":[{"name":"owner","type":"address"}],
   "outputs":[{"name":"","type":"uint256"}]},
  {"type":"function","name":"allowance","stateMutability":"view",
   "inputs":[{"name":"owner","type":"address"},{"name":"spender","type":"address"}],
   "outputs":[{"name":"","type":"uint256"}]},
  {"type":"function","name":"approve","stateMutability":"nonpayable",
   "inputs":[{"name":"spender","type":"address"},{"name":"amount","type":"uint256"}],
   "outputs":[{"name":"","type":"bool"}]},
  {"type":"function","name":"decimals","stateMutability":"view",
   "inputs":[],"outputs":[{"name":"","type":"uint8"}]},
  {"type":"function","name":"symbol","stateMutability":"view",
   "inputs":[],"outputs":[{"name":"","type":"string"}]}
]""")

MONEYTREE_TOKEN_ABI = ERC20_ABI + json.loads("""[
  {"type":"function","name":"owner","stateMutability":"view",
   "inputs":[],"outputs":[{"name":"","type":"address"}]},
  {"type":"function","name":"renounceOwnership","stateMutability":"nonpayable",
   "inputs":[],"outputs":[]},
  {"type":"function","name":"taxRate","stateMutability":"view",
   "inputs":[],"outputs":[{"name":"","type":"uint256"}]},
  {"type":"function","name":"taxCollector","stateMutability":"view",
   "inputs":[],"outputs":[{"name":"","type":"address"}]},
  {"type":"function","name":"tokensForTax","stateMutability":"view",
   "inputs":[],"outputs":[{"name":"","type":"uint256"}]},
  {"type":"function","name":"swapEnabled","stateMutability":"view",
   "inputs":[],"outputs":[{"name":"","type":"bool"}]},
  {"type":"function","name":"setTaxRate","stateMutability":"nonpayable",
   "inputs":[{"name":"newTaxRate","type":"uint256"}],"outputs":[]},
  {"type":"function","name":"setTaxCollector","stateMutability":"nonpayable",
   "inputs":[{"name":"newTaxCollector","type":"address"}],"outputs":[]},
  {"type":"function","name":"setTaxExemption","stateMutability":"nonpayable",
   "inputs":[{"name":"account","type":"address"},{"name":"exempt","type":"bool"}],"outputs":[]},
  {"type":"function","name":"setSwapEnabled","stateMutability":"nonpayable",
   "inputs":[{"name":"enabled","type":"bool"}],"outputs":[]},
  {"type":"function","name":"emergencyWithdrawETH","stateMutability":"nonpayable",
   "inputs":[],"outputs":[]}
]""")

ROUTER_V2_ABI = json.loads("""[
  {"type":"function","name":"WETH","stateMutability":"pure",
   "inputs":[],"outputs":[{"name":"","type":"address"}]},
  {"type":"function","name":"getAmountsOut","stateMutability":"view",
   "inputs":[{"name":"amountIn","type":"uint256"},{"name":"path","type":"address[]"}],
   "outputs":[{"name":"amounts","type":"uint256[]"}]},
  {"type":"function","name":"addLiquidityETH","stateMutability":"payable",
   "inputs":[{"name":"token","type":"address"},{"name":"amountTokenDesired","type":"uint256"},
             {"name":"amountTokenMin","type":"uint256"},{"name":"amountETHMin","type":"uint256"},
             {"name":"to","type":"address"},{"name":"deadline","type":"uint256"}],
   "outputs":[{"name":"amountToken","type":"uint256"},{"name":"amountETH","type":"uint256"},
              {"name":"liquidity","type":"uint256"}]},
  {"type":"function","name":"removeLiquidityETH","stateMutability":"nonpayable",
   "inputs":[{"name":"token","type":"address"},{"name":"liquidity","type":"uint256"},
             {"name":"amountTokenMin","type":"uint256"},{"name":"amountETHMin","type":"uint256"},
             {"name":"to","type":"address"},{"name":"deadline","type":"uint256"}],
   "outputs":[{"name":"amountToken","type":"uint256"},{"name":"amountETH","type":"uint256"}]},
  {"type":"function","name":"swapExactETHForTokens","stateMutability":"payable",
   "inputs":[{"name":"amountOutMin","type":"uint256"},{"name":"path","type":"address[]"},
             {"name":"to","type":"address"},{"name":"deadline","type":"uint256"}],
   "outputs":[{"name":"amounts","type":"uint256[]"}]},
  {"type":"function","name":"swapExactTokensForETH","stateMutability":"nonpayable",
   "inputs":[{"name":"amountIn","type":"uint256"},{"name":"amountOutMin","type":"uint256"},
             {"name":"path","type":"address[]"},{"name":"to","type":"address"},
             {"name":"deadline","type":"uint256"}],
   "outputs":[{"name":"amounts","type":"uint256[]"}]},
  {"type":"function","name":"swapExactTokensForETHSupportingFeeOnTransferTokens",
   "stateMutability":"nonpayable",
   "inputs":[{"name":"amountIn","type":"uint256"},{"name":"amountOutMin","type":"uint256"},
             {"name":"path","type":"address[]"},{"name":"to","type":"address"},
             {"name":"deadline","type":"uint256"}],
   "outputs":[]}
]""")

FACTORY_V2_ABI = json.loads("""[
  {"type":"function","name":"getPair","stateMutability":"view",
   "inputs":[{"name":"tokenA","type":"address"},{"name":"tokenB","type":"address"}],
   "outputs":[{"name":"pair","type":"address"}]}
]""")

PAIR_V2_ABI = ERC20_ABI + json.loads("""[
  {"type":"function","name":"getReserves","stateMutability":"view","inputs":[],
   "outputs":[{"name":"reserve0","type":"uint112"},{"name":"reserve1","type":"uint112"},
              {"name":"blockTimestampLast","type":"uint32"}]},
  {"type":"function","name":"token0","stateMutability":"view",
   "inputs":[],"outputs":[{"name":"","type":"address"}]},
  {"type":"function","name":"token1","stateMutability":"view",
   "inputs":[],"outputs":[{"name":"","type":"address"}]},
  {"type":"function","name":"totalSupply","stateMutability":"view",
   "inputs":[],"outputs":[{"name":"","type":"uint256"}]}
]""")


def artifact_path(name: str, artifacts_dir: str = "artifacts") -> str:
    return os.path.join(artifacts_dir, "contracts", f"{name}.sol", f"{name}.json")


def load_artifact(name: str, artifacts_dir: str = "artifacts") -> dict:
    """Read the ABI and bytecode Hardhat wrote for contract ``name``."""
    path = artifact_path(name, artifacts_dir)
    try:
        with open(path, "r", encoding="utf-8") as f:
            artifact = json.load(f)
    except FileNotFoundError:
        raise ConfigError(
            f"No compiled artifact for '{name}' at {path}. Run `npx hardhat compile` first."
        ) from None
    except json.JSONDecodeError as e:
        raise ConfigError(f"Artifact {path} is not valid JSON: {e}") from None

    bytecode = artifact.get("bytecode")
    if not artifact.get("abi") or not bytecode or bytecode == "0x":
        raise ConfigError(f"Artifact {path} has no ABI or bytecode (abstract contract?)")
    return {"abi": artifact["abi"], "bytecode": bytecode}


def token_abi(name: str, artifacts_dir: str = "artifacts"):
    """ABI for contract ``name``: its compiled artifact if there is one, else the built-in token ABI."""
    if not os.path.exists(artifact_path(name, artifacts_dir)):
        log.info(f"No artifact for '{name}' in {artifacts_dir}, using the built-in MoneytreeToken ABI")
        return MONEYTREE_TOKEN_ABI
    return load_artifact(name, artifacts_dir)["abi"]
