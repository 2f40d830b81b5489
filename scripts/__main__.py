#!/usr/bin/env python3
"""
Entry point for running the delegation commands as a module.

Usage:
    python -m scripts                               # Show available commands
    python -m scripts delegate                      # Delegate the EOA
    python -m scripts delegate_with_call_planner    # Delegate + batched swap
"""
import importlib
import sys


AVAILABLE_COMMANDS = {
    "delegate": "Delegate the EOA to the smart wallet (authorization only)",
    "delegate_with_execution": "Delegate and execute a batched call in one transaction",
    "delegate_with_call_planner": "Plan a Universal Router swap and execute it via delegation",
    "remove_delegation": "Remove the delegation by delegating to the zero address",
    "check_delegation": "Show which contract an address is delegated to",
}


def main():
    """Main entry point for scripts module."""
    if len(sys.argv) < 2:
        print("Usage: python -m scripts <command> [options]")
        print("\nAvailable commands:")
        for cmd, desc in AVAILABLE_COMMANDS.items():
            print(f"  {cmd:30} - {desc}")
        print("\nExample: python -m scripts check_delegation --address 0x...")
        sys.exit(0)

    command = sys.argv[1]
    if command not in AVAILABLE_COMMANDS:
        print(f"Unknown command: {command}")
        print("Run 'python -m scripts' to see available commands.")
        sys.exit(1)

    module = importlib.import_module(f"eip7702_delegation.commands.{command}")
    sys.exit(module.main(sys.argv[2:]))


if __name__ == "__main__":
    main()
