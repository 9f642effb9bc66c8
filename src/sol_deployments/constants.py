"""Configuration constants for sol-deployments library."""

# Placeholder used when MAINNET_RPC is unset, so the config stays loadable offline
DEFAULT_RPC = "https:random.com"

# Deployer key fallback (32 zero bytes), keeps the accounts list non-empty
ZERO_HASH = "0x" + "00" * 32

# Names of settings read from .env / process environment
PRIVATE_KEY_ENV = "PRIVATE_KEY"
MAINNET_RPC_ENV = "MAINNET_RPC"
ETHERSCAN_API_KEY_ENV = "ETHERSCAN_API_KEY"

# Compiler settings
SOLC_VERSION = "0.8.20"
APPEND_CBOR = False

# Project layout
SOURCES_DIR = "src"
TESTS_DIR = "test"

VERIFY_PLUGIN = "VerifyPlugin"

# Contract declaration set shared by every environment
DEFAULT_CONTRACTS = {
    "Miller": {},
}

# Closed set of deployment targets
# hardhat: in-process chain, reset every run, no lock file
# localhost: persistent local node
# mainnet: public production chain
ENVIRONMENT_CONFIG = {
    "hardhat": {
        "chain_id": 31337,
        "rpc_url": None,
        "lock_file": None,
        "verify": False,
        "plugins": [],
    },
    "localhost": {
        "chain_id": 31337,
        "rpc_url": "http://127.0.0.1:8545",
        "lock_file": "./local.deployment-lock.json",
        "verify": False,
        "plugins": [],
    },
    "mainnet": {
        "chain_id": 1,
        "rpc_url_env": MAINNET_RPC_ENV,
        "deployer": True,  # signs with PRIVATE_KEY
        "lock_file": "./deployment-lock.json",
        "verify": True,
        "plugins": [VERIFY_PLUGIN],
    },
}

# Lock file field names (on-disk schema)
LOCK_ADDRESS_KEY = "address"
LOCK_FINGERPRINT_KEY = "argsFingerprint"
LOCK_CHAIN_ID_KEY = "chainId"
