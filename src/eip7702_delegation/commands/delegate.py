"""
delegate.py
===========
Delegate an EOA to the smart wallet implementation with a Type-4
transaction that carries only the authorization (empty calldata).

Usage
-----
    python -m scripts delegate [--rpc-url URL] [--chain sepolia] [--dry-run]
"""

from __future__ import annotations

import sys

from eip7702_delegation.commands.common import add_dry_run, broadcast, build_parser, connect, load_environment
from eip7702_delegation.executor.eip7702_sender import build_delegation_transaction


def main(argv: list[str] | None = None) -> int:
    parser = build_parser("Delegate an EOA to the smart wallet via EIP-7702")
    add_dry_run(parser)
    args = parser.parse_args(argv)

    logger = load_environment(args)

    try:
        ctx = connect(args, logger)
    except (ValueError, ConnectionError) as e:
        logger.error(f"Setup failed: {e}")
        return 1

    smart_wallet = ctx.config.smart_wallet_address
    logger.info(f"Smart Wallet Contract Address: {smart_wallet}")

    # ===== STEP 1: Sign the authorization and build the Type-4 transaction =====
    try:
        tx = build_delegation_transaction(ctx.w3, ctx.account, ctx.config, smart_wallet)
    except Exception as e:
        logger.error(f"Error signing EIP-7702 authorization: {e}", exc_info=True)
        return 1

    # ===== STEP 2: Send it to the EOA itself =====
    try:
        tx_hash = broadcast(ctx, tx, "DELEGATE", dry_run=args.dry_run)
    except Exception as e:
        logger.error(f"Error sending EIP-7702 delegation transaction: {e}", exc_info=True)
        return 1

    if tx_hash:
        logger.info("Your EOA is now being upgraded to a smart wallet...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
