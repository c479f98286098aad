"""Configuration management for the library and the demo."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .core.models import FaultPolicy

# Load environment variables from .env file
load_dotenv()


@dataclass
class GeneratorConfig:
    """Generator configuration parameters."""

    fault_policy: FaultPolicy = FaultPolicy.DISCARD
    batch_size: int = 1000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Load generator configuration from environment variables.

        Supports:
        - LAZY_GENERATOR_FAULT_POLICY: "discard" (default) or "raise"
        - LAZY_GENERATOR_BATCH_SIZE: default batch size for DataFrame batches
        - LAZY_GENERATOR_LOG_LEVEL: logging level used by the demo
        """
        policy_name = os.getenv("LAZY_GENERATOR_FAULT_POLICY", "discard").strip().lower()
        try:
            fault_policy = FaultPolicy(policy_name)
        except ValueError:
            raise ValueError(
                f"Unknown fault policy: {policy_name}. "
                f"Valid options: {', '.join(p.value for p in FaultPolicy)}"
            )

        return cls(
            fault_policy=fault_policy,
            batch_size=int(os.getenv("LAZY_GENERATOR_BATCH_SIZE", "1000")),
            log_level=os.getenv("LAZY_GENERATOR_LOG_LEVEL", "INFO").upper(),
        )

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")


def get_generator_config() -> GeneratorConfig:
    """Get generator configuration."""
    return GeneratorConfig.from_env()
