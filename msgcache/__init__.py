"""Message cache performance: short-circuits lookups for message keys known not to exist."""
