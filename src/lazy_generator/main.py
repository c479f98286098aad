"""Demo entry point printing the values of sample producers."""

import argparse
import logging
import sys
from typing import List, Optional

from .config import get_generator_config
from .core import fmap, to_dataframes
from .data_generator import RecordProducer, range12

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", verbose: bool = False):
    """Configure logging.

    Args:
        level: Logging level name from configuration
        verbose: Enable verbose logging
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lazy-generator-demo",
        description="Drive sample producers through the lazy generator primitives.",
    )
    parser.add_argument("--square", action="store_true", help="map x -> x*x over the values")
    parser.add_argument(
        "--records",
        type=int,
        metavar="N",
        help="stream N fake records into DataFrame batches instead",
    )
    parser.add_argument("--batch-size", type=int, help="records per DataFrame batch")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


def run_range12(square: bool = False):
    """Print each value of ``range12`` on its own line."""
    values = range12()
    if square:
        values = fmap(lambda x: x * x, values)

    with values:
        it = values.begin()
        while it != values.end():
            print(it.value)
            it.advance()


def run_records(num_records: int, batch_size: Optional[int] = None) -> int:
    """Stream fake records through DataFrame batches; return the row count."""
    producer = RecordProducer()
    total_rows = 0
    with to_dataframes(producer.records(num_records), batch_size=batch_size) as frames:
        for df in frames:
            total_rows += len(df)
            logger.debug(f"Batch columns: {list(df.columns)}")

    logger.info(f"Streamed {total_rows:,} records")
    return total_rows


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    args = parse_args(argv)

    try:
        config = get_generator_config()
        setup_logging(config.log_level, args.verbose)
        logger.debug(f"Fault policy: {config.fault_policy.value}")

        if args.records is not None:
            run_records(args.records, args.batch_size)
        else:
            run_range12(args.square)
        return 0

    except KeyboardInterrupt:
        logger.warning("Execution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Error during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
