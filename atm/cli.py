from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from atm.core.contracts import validate_inventory
from atm.core.domain.banknote import Banknote, Inventory
from atm.dispenser.allocator import GreedyAllocator
from atm.dispenser.errors import InsufficientFunds, InvalidInput
from atm.session import SessionConfig, WithdrawalSession

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DISPENSE_FAILED = 1
EXIT_BAD_INVENTORY = 2

DEFAULT_INVENTORY = Inventory(
    banknotes=(
        Banknote(value=5000, count=40),
        Banknote(value=1000, count=40),
        Banknote(value=200, count=40, reserve=2),
        Banknote(value=100, count=40),
    )
)


def load_inventory(path: Path) -> Inventory:
    """Снапшот из JSON файла: сначала контракт, затем модель."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    validate_inventory(data)
    return Inventory.model_validate(data)


def prompt_stdin(message: str, default: str) -> Optional[str]:
    suffix = f" [{default}]" if default else ""
    try:
        raw = input(f"{message}{suffix}: ")
    except EOFError:
        return None
    return raw if raw.strip() else default


def render_plan(records: list[dict[str, int]]) -> str:
    return json.dumps(records, indent=2)


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Calculate banknotes to dispense for an amount.")
    p.add_argument("--inventory", type=Path, default=None, help="JSON inventory snapshot")
    p.add_argument("--amount", type=int, default=None, help="Amount to dispense (skip prompt)")
    p.add_argument("--max-attempts", type=int, default=SessionConfig.max_attempts)
    p.add_argument("--log-level", type=str, default="WARNING")
    args = p.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    inventory = DEFAULT_INVENTORY
    if args.inventory is not None:
        try:
            inventory = load_inventory(args.inventory)
        except (OSError, json.JSONDecodeError, SchemaValidationError, ValidationError) as e:
            logger.error("cannot load inventory %s: %s", args.inventory, e)
            print(f"Error: invalid inventory: {e}", file=sys.stderr)
            return EXIT_BAD_INVENTORY

    if args.amount is not None:
        try:
            plan = GreedyAllocator().allocate(args.amount, inventory)
        except (InsufficientFunds, InvalidInput) as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_DISPENSE_FAILED
        print(render_plan(plan.to_records()))
        return EXIT_OK

    session = WithdrawalSession(
        inventory, prompt_stdin, config=SessionConfig(max_attempts=args.max_attempts)
    )
    outcome = session.run()
    if not outcome.success:
        print(f"Error: {outcome.error}", file=sys.stderr)
        return EXIT_DISPENSE_FAILED
    print(render_plan(outcome.plan.to_records()))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
