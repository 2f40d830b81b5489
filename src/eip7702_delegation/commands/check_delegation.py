"""
check_delegation.py
===================
Report which contract, if any, an address is delegated to.

The address comes from --address, or CHECK_ADDRESS / ADDRESS / PUBLIC_KEY
in the environment.

Usage
-----
    python -m scripts check_delegation [--address 0x...]
"""

from __future__ import annotations

import os
import sys

from eth_utils import is_address

from eip7702_delegation.commands.common import build_parser, connect, load_environment
from eip7702_delegation.helpers.delegation_code import get_delegation


def resolve_address(cli_address: str | None) -> str | None:
    return (
        cli_address
        or os.getenv("CHECK_ADDRESS")
        or os.getenv("ADDRESS")
        or os.getenv("PUBLIC_KEY")
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser("Check the EIP-7702 delegation of an address")
    parser.add_argument(
        "--address",
        help="Address to inspect (default: $CHECK_ADDRESS, $ADDRESS or $PUBLIC_KEY)"
    )
    args = parser.parse_args(argv)

    logger = load_environment(args)

    address = resolve_address(args.address)
    if not address:
        logger.error("Set CHECK_ADDRESS or ADDRESS or PUBLIC_KEY in .env")
        return 1
    if not is_address(address):
        logger.error(f"Not a valid address: {address}")
        return 1

    try:
        ctx = connect(args, logger, with_account=False)
    except (ValueError, ConnectionError) as e:
        logger.error(f"Setup failed: {e}")
        return 1

    try:
        delegated_to = get_delegation(ctx.w3, address)
    except ValueError as e:
        logger.info(f"Not delegated or invalid delegation code: {e}")
        return 0
    except Exception as e:
        logger.error(f"Error reading code for {address}: {e}", exc_info=True)
        return 1

    if delegated_to is None:
        logger.info(f"{address} has no code and is not delegated")
    else:
        logger.info(f"Delegated to contract: {delegated_to}")
        if delegated_to == ctx.config.smart_wallet_address:
            logger.info("Delegate is the configured smart wallet")
    logger.info(f"Explorer: {ctx.config.address_url(address)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
