#!/usr/bin/env python3
# Range percentage demo

import argparse
import logging
import sys
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .poker_eval import PokerError, measure

LOGGER = logging.getLogger("holdem")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class DemoConfig(BaseModel):
    """Configuration for the range percentage demo."""

    range_text: str = "88+, 22+"
    decimals: int = Field(default=2, ge=0, le=10)
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def parse_args(argv: Optional[List[str]] = None):
    defaults = DemoConfig()
    parser = argparse.ArgumentParser(description="Percentage of starting hands covered by a range")
    parser.add_argument(
        "range_text",
        nargs="?",
        default=defaults.range_text,
        help='Range notation, e.g. "88+, AJo+, ATs+"',
    )
    parser.add_argument(
        "--decimals", type=int, default=defaults.decimals, help="Decimal places in the printed percentage"
    )
    parser.add_argument(
        "--log-level", default=defaults.log_level, help="Logging level (DEBUG shows range expansion)"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = DemoConfig(
            range_text=args.range_text,
            decimals=args.decimals,
            log_level=args.log_level,
        )
    except ValidationError as err:
        for error in err.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            print(f"Error: {field}: {error['msg']}")
        return 1

    logging.basicConfig(level=config.log_level)
    LOGGER.debug("Config: %s", config)

    try:
        percent = measure(config.range_text)
    except PokerError as err:
        print(f"Error: {err}")
        return 1

    print(f"Range percent: {percent * 100:.{config.decimals}f}%")
    return 0


if __name__ == "__main__":
    sys.exit(main())
