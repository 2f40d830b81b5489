"""
delegate_with_execution.py
==========================
Delegate an EOA to the smart wallet AND execute batched calls through it in
the same Type-4 transaction.

Instead of empty calldata, the transaction carries an
``execute(BatchedCall)`` call that the freshly delegated EOA runs against
its own new code. The demo batch is a single 0 ETH self-transfer.

Usage
-----
    python -m scripts delegate_with_execution [--allow-failures] [--dry-run]
"""

from __future__ import annotations

import sys

from eip7702_delegation.commands.common import (
    CommandContext,
    add_dry_run,
    broadcast,
    build_parser,
    connect,
    load_environment,
)
from eip7702_delegation.executor.eip7702_sender import build_delegation_transaction
from eip7702_delegation.helpers.call_planner import CallPlanner
from eip7702_delegation.helpers.smart_wallet import create_execute, encode_batched_call
from eip7702_delegation.helpers.tx_debugger import display_execution_call, display_method_parameters


def execute_plan(ctx: CommandContext, planner: CallPlanner, revert_on_failure: bool = True,
                 dry_run: bool = False) -> int:
    """
    Encode a plan, delegate and execute it in one transaction.

    Returns:
        Process exit code; the first failing step stops the run.
    """
    logger = ctx.logger

    logger.info("=== Encoding Calls with SmartWallet ===")
    try:
        method_parameters = encode_batched_call(planner.calls, revert_on_failure=revert_on_failure)
        display_method_parameters(method_parameters)
    except Exception as e:
        logger.error(f"Error encoding smart wallet calls: {e}", exc_info=True)
        return 1

    logger.info("=== Creating Execute Call ===")
    try:
        execution_call = create_execute(method_parameters, ctx.config.smart_wallet_address)
        display_execution_call(execution_call)
    except Exception as e:
        logger.error(f"Error creating execution call: {e}", exc_info=True)
        return 1

    logger.info("=== Signing EIP-7702 Authorization ===")
    try:
        tx = build_delegation_transaction(
            ctx.w3,
            ctx.account,
            ctx.config,
            ctx.config.smart_wallet_address,
            data=execution_call.data,
            value=execution_call.value,
        )
    except Exception as e:
        logger.error(f"Error signing EIP-7702 authorization: {e}", exc_info=True)
        return 1

    logger.info("=== Sending EIP-7702 Transaction ===")
    try:
        tx_hash = broadcast(ctx, tx, "EXECUTE", dry_run=dry_run)
    except Exception as e:
        logger.error(f"Error sending EIP-7702 delegation + execution transaction: {e}", exc_info=True)
        return 1

    if tx_hash:
        logger.info("Your EOA is now delegated AND executing smart wallet operations!")
        logger.info(f"Executed {len(planner)} batched call(s) with {planner.total_value} wei")
    return 0


def add_batch_options(parser) -> None:
    add_dry_run(parser)
    parser.add_argument(
        "--allow-failures",
        action="store_true",
        help="Keep executing the batch when a call fails (revertOnFailure=false)"
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser("Delegate an EOA and execute batched calls via EIP-7702")
    add_batch_options(parser)
    args = parser.parse_args(argv)

    logger = load_environment(args)

    try:
        ctx = connect(args, logger)
    except (ValueError, ConnectionError) as e:
        logger.error(f"Setup failed: {e}")
        return 1

    logger.info(f"Smart Wallet Contract Address: {ctx.config.smart_wallet_address}")

    planner = CallPlanner()
    planner.add(ctx.account.address, 0, "0x")  # 0 ETH to self, just for demonstration
    logger.info(f"Preparing smart wallet calls: {list(planner.calls)}")

    return execute_plan(ctx, planner, revert_on_failure=not args.allow_failures, dry_run=args.dry_run)


if __name__ == "__main__":
    sys.exit(main())
