"""
delegate_with_call_planner.py
=============================
Plan a Universal Router ETH -> UNI swap with the CallPlanner, then delegate
the EOA and execute the plan in one Type-4 transaction (Sepolia).

Usage
-----
    python -m scripts delegate_with_call_planner --amount-wei 10000000000000 [--dry-run]
"""

from __future__ import annotations

import sys

from eth_utils import encode_hex, is_address, to_checksum_address

from eip7702_delegation.commands.common import build_parser, connect, load_environment
from eip7702_delegation.commands.delegate_with_execution import add_batch_options, execute_plan
from eip7702_delegation.config.contracts import get_contract_address
from eip7702_delegation.config.network import CHAIN_ID_TO_NAME
from eip7702_delegation.helpers.call_planner import CallPlanner
from eip7702_delegation.helpers.universal_router import build_eth_to_token_swap

DEFAULT_SWAP_AMOUNT_WEI = 10_000_000_000_000  # 0.00001 ETH
DEFAULT_FEE_RECIPIENT = "0xe49acc3b16c097ec88dc9352ce4cd57ab7e35b95"
DEFAULT_SWEEP_MIN = 0x55CAC6F246


def main(argv: list[str] | None = None) -> int:
    parser = build_parser("Batch a Universal Router swap with the CallPlanner and execute it via EIP-7702")
    add_batch_options(parser)
    parser.add_argument(
        "--amount-wei",
        type=int,
        default=DEFAULT_SWAP_AMOUNT_WEI,
        help="ETH to swap, in wei (default: 0.00001 ETH)"
    )
    parser.add_argument(
        "--min-amount-out",
        type=int,
        default=0,
        help="Minimum UNI out of the swap, in wei"
    )
    parser.add_argument(
        "--sweep-min",
        type=int,
        default=DEFAULT_SWEEP_MIN,
        help="Minimum UNI the final sweep must deliver, in wei"
    )
    parser.add_argument(
        "--fee-recipient",
        default=DEFAULT_FEE_RECIPIENT,
        help="Receiver of the PAY_PORTION cut"
    )
    parser.add_argument(
        "--fee-bips",
        type=int,
        default=25,
        help="PAY_PORTION cut in basis points"
    )
    args = parser.parse_args(argv)

    logger = load_environment(args)

    if not is_address(args.fee_recipient):
        logger.error(f"--fee-recipient is not a valid address: {args.fee_recipient}")
        return 1

    try:
        ctx = connect(args, logger)
    except (ValueError, ConnectionError) as e:
        logger.error(f"Setup failed: {e}")
        return 1

    logger.info(f"Smart Wallet Contract Address: {ctx.config.smart_wallet_address}")

    # ===== Initialize CallPlanner and add the swap =====
    logger.info("=== Initializing CallPlanner ===")
    try:
        chain = CHAIN_ID_TO_NAME[ctx.config.chain_id]
        router = get_contract_address(chain, "universalRouter")
        weth = get_contract_address(chain, "weth")
        uni = get_contract_address(chain, "uni")

        swap_calldata = build_eth_to_token_swap(
            weth=weth,
            token_out=uni,
            amount_in=args.amount_wei,
            recipient=ctx.account.address,
            fee_recipient=to_checksum_address(args.fee_recipient),
            fee_bips=args.fee_bips,
            min_amount_out=args.min_amount_out,
            sweep_min=args.sweep_min,
        )

        logger.info("Adding ETH -> UNI swap call:")
        logger.info(f"- Router Contract: {router}")
        logger.info(f"- Input Token (WETH): {weth}")
        logger.info(f"- Output Token (UNI): {uni}")
        logger.info(f"- Input Amount: {args.amount_wei} wei")
        logger.debug(f"- Swap Calldata: {encode_hex(swap_calldata)}")

        planner = CallPlanner()
        planner.add(router, args.amount_wei, swap_calldata)
    except ValueError as e:
        logger.error(f"Error planning swap call: {e}")
        return 1

    logger.info(f"CallPlanner initialized with {len(planner)} calls")
    logger.info(f"Total ETH value required: {planner.total_value} wei")

    return execute_plan(ctx, planner, revert_on_failure=not args.allow_failures, dry_run=args.dry_run)


if __name__ == "__main__":
    sys.exit(main())
