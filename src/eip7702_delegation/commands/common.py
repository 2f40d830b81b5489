"""
Shared plumbing for the delegation commands: argument parsing, environment
loading, connection setup and broadcasting.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv
from eth_account.signers.local import LocalAccount
from web3 import Web3

from eip7702_delegation.config.logging_config import (
    get_command_logger,
    log_transaction,
    setup_tx_logger,
)
from eip7702_delegation.config.network import NetworkConfig, load_network_config, load_private_key
from eip7702_delegation.executor.eip7702_sender import send_delegation_transaction
from eip7702_delegation.helpers.tx_debugger import display_transaction_details
from eip7702_delegation.helpers.web3_setup import get_web3_instance, load_account


@dataclass
class CommandContext:
    config: NetworkConfig
    w3: Web3
    account: LocalAccount | None
    logger: logging.Logger


def build_parser(description: str) -> argparse.ArgumentParser:
    """Parser with the options every command shares."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--rpc-url",
        help="RPC endpoint (default: $RPC_URL)"
    )
    parser.add_argument(
        "--chain",
        help="Chain name or id (default: $CHAIN or sepolia)"
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Environment file to load (default: .env)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser


def add_dry_run(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Build and log the transaction without broadcasting it"
    )


def parse_chain(chain: str | None) -> str | int | None:
    if chain is not None and chain.isdigit():
        return int(chain)
    return chain


def load_environment(args: argparse.Namespace) -> logging.Logger:
    """Load the env file and return the command logger."""
    load_dotenv(args.env_file)
    return get_command_logger(args.verbose)


def connect(args: argparse.Namespace, logger: logging.Logger, with_account: bool = True) -> CommandContext:
    """
    Resolve configuration, connect to the RPC and load the signer.

    Raises:
        ValueError: If configuration is missing or invalid
        ConnectionError: If the RPC endpoint is unreachable
    """
    config = load_network_config(parse_chain(args.chain), rpc_url=args.rpc_url)
    w3 = get_web3_instance(config)
    account = load_account(load_private_key()) if with_account else None
    if account is not None:
        logger.info(f"EOA: {account.address}")
    logger.info(f"Chain ID: {config.chain_id}")
    return CommandContext(config=config, w3=w3, account=account, logger=logger)


def broadcast(ctx: CommandContext, tx: dict[str, Any], action: str, dry_run: bool = False) -> str | None:
    """
    Log, sign and send a Type 4 transaction.

    Returns:
        The transaction hash, or None on a dry run

    Raises:
        Whatever the signer or RPC raises; a failed broadcast is recorded in
        the audit log before the error propagates.
    """
    display_transaction_details(tx)

    if dry_run:
        ctx.logger.info("Dry run: transaction not broadcast")
        return None

    audit = setup_tx_logger()
    try:
        tx_hash = send_delegation_transaction(ctx.w3, ctx.account, tx)
    except Exception:
        log_transaction(audit, action, ctx.account.address, ctx.config.chain_id, value=tx['value'], success=False)
        raise

    log_transaction(audit, action, ctx.account.address, ctx.config.chain_id, tx_hash=tx_hash, value=tx['value'])
    ctx.logger.info(f"EIP-7702 Type-4 transaction sent: {ctx.config.tx_url(tx_hash)}")
    return tx_hash
