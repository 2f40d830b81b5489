"""
remove_delegation.py
====================
Remove an EOA's delegation by delegating it to the zero address, which
clears the account's code.

Usage
-----
    python -m scripts remove_delegation [--dry-run]
"""

from __future__ import annotations

import sys

from eip7702_delegation.commands.common import add_dry_run, broadcast, build_parser, connect, load_environment
from eip7702_delegation.config.contracts import ZERO_ADDRESS
from eip7702_delegation.executor.eip7702_sender import build_delegation_transaction


def main(argv: list[str] | None = None) -> int:
    parser = build_parser("Remove an EIP-7702 delegation")
    add_dry_run(parser)
    args = parser.parse_args(argv)

    logger = load_environment(args)

    try:
        ctx = connect(args, logger)
    except (ValueError, ConnectionError) as e:
        logger.error(f"Setup failed: {e}")
        return 1

    logger.info(f"Removing delegation by delegating to zero address: {ZERO_ADDRESS}")

    # STEP 1: Sign the authorization for the zero address
    try:
        tx = build_delegation_transaction(ctx.w3, ctx.account, ctx.config, ZERO_ADDRESS)
    except Exception as e:
        logger.error(f"Error signing EIP-7702 authorization for zero address: {e}", exc_info=True)
        return 1

    # STEP 2: Send the Type-4 transaction
    try:
        broadcast(ctx, tx, "REVOKE", dry_run=args.dry_run)
    except Exception as e:
        logger.error(f"Error sending EIP-7702 remove delegation transaction: {e}", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
