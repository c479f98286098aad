"""Sample producers used by the demo entry point."""

import logging
from typing import Dict, Iterator

from faker import Faker

from .core import Generator, generator

logger = logging.getLogger(__name__)


@generator
def range12() -> Iterator[int]:
    """Emit 1, then 2."""
    yield 1
    yield 2


class RecordProducer:
    """Produce fake person records lazily, one per resume."""

    def __init__(self, seed: int = 42):
        """Initialize the record producer.

        Args:
            seed: Random seed for reproducibility
        """
        self.faker = Faker()
        Faker.seed(seed)

    def make_record(self, record_id: int) -> Dict:
        """Build a single fake record.

        Args:
            record_id: Value of the ``id`` column

        Returns:
            Dictionary with column names as keys
        """
        return {
            "id": record_id,
            "name": self.faker.name(),
            "email": self.faker.email(),
            "city": self.faker.city(),
            "country": self.faker.country(),
            "job": self.faker.job(),
            "company": self.faker.company(),
        }

    def records(self, num_records: int) -> Generator[Dict]:
        """Return a generator emitting ``num_records`` fake records.

        Args:
            num_records: Number of records to produce

        Returns:
            Generator handle; nothing is generated until it is driven
        """
        if num_records < 0:
            raise ValueError("num_records must not be negative")
        return Generator(self._produce(num_records))

    def _produce(self, num_records: int) -> Iterator[Dict]:
        logger.info(f"Generating {num_records:,} fake records...")
        for i in range(num_records):
            yield self.make_record(i)

            if (i + 1) % 10000 == 0:
                logger.debug(f"Generated {i + 1:,} records...")

        logger.info(f"Successfully generated {num_records:,} records")
