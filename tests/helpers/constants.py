"""Shared address constants for tests.

All addresses are lowercase for consistency with normalize_address().

Usage:
    from tests.helpers import ROOT_POOL, TOKEN_A
"""

# =============================================================================
# Synthetic addresses (unit tests)
# =============================================================================

ROOT_POOL = "0x" + "1" * 40
POOL_B = "0x" + "2" * 40
LINEAR_POOL = "0x" + "3" * 40

TOKEN_A = "0x" + "a" * 40
TOKEN_B = "0x" + "b" * 40
TOKEN_C = "0x" + "c" * 40
TOKEN_D = "0x" + "d" * 40
WRAPPED_TOKEN = "0x" + "e" * 40
UNKNOWN_TOKEN = "0x" + "f" * 40

# =============================================================================
# Mainnet tokens (fixture snapshot)
# =============================================================================

WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"  # Wrapped Ether (18 decimals)
USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"  # USD Coin (6 decimals)
DAI = "0x6b175474e89094c44da98b954eedeac495271d0f"  # Dai Stablecoin (18 decimals)
USDT = "0xdac17f958d2ee523a2206206994597c13d831ec7"  # Tether USD (6 decimals)

# Aave static aTokens
WA_DAI = "0x02d60b84491589974263d922d9cc7a3152618ef6"
WA_USDC = "0xd093fa4fb80d09bb30817fdcd442d4d02ed3e5de"
WA_USDT = "0xf8fd466f12e236f4c96f7cce6c79eadb819abf58"

# Balancer Aave Boosted pools
BB_A_DAI = "0xae37d54ae477268b9997d4161b96b8200755935c"
BB_A_USDC = "0x82698aecc9e28e9bb27608bd52cf57f704bd1b83"
BB_A_USDT = "0x2f4eb100552ef93840d5adc30560e5513dfffacb"
BB_A_USD = "0xa13a9247ea42d743238089903570127dda72fe44"
BB_A_USD_ID = "0xa13a9247ea42d743238089903570127dda72fe4400000000000000000000035d"

# 50% WETH / 50% bb-a-USD weighted pool
WETH_BB_A_USD = "0x08775ccb6674d6bdceb0797c364c2653ed84f384"
WETH_BB_A_USD_ID = "0x08775ccb6674d6bdceb0797c364c2653ed84f3840002000000000000000004f0"
