"""Engine configuration."""


class EngineConfig:
    """Configuration for a GameOfLife engine."""

    def __init__(self,
                 recompute_alive_count: bool = True,
                 log_interval: int = 0):
        """Initialize engine configuration.

        Args:
            recompute_alive_count: Recount live cells after every generation and
                when a grid is loaded. When False the cached count is carried over
                unchanged between generations and loaded grids start at 0.
            log_interval: Emit a progress log line every N generations during
                multi-step advances (0 disables)

        Raises:
            ValueError: If log_interval is negative
        """
        if log_interval < 0:
            raise ValueError("log_interval must be non-negative")

        self.recompute_alive_count = bool(recompute_alive_count)
        self.log_interval = log_interval

    @classmethod
    def legacy(cls) -> 'EngineConfig':
        """Configuration that never refreshes the cached alive count."""
        return cls(recompute_alive_count=False)

    def copy(self) -> 'EngineConfig':
        """Create a copy of the configuration."""
        return EngineConfig(
            recompute_alive_count=self.recompute_alive_count,
            log_interval=self.log_interval
        )

    def __repr__(self) -> str:
        return (f"EngineConfig(recompute_alive_count={self.recompute_alive_count}, "
                f"log_interval={self.log_interval})")
