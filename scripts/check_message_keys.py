"""Print the short-circuit decision for message keys.

Usage:
    python -m scripts.check_message_keys [key ...]
If no keys are given, reads one key per line from stdin.
Uses MCP_CATALOG_PATH, MCP_LANGUAGE_CODE and MCP_MSG_PREFIXES from config.
Exit status is 1 if configuration is invalid.
"""

import sys

from pydantic import ValidationError

from msgcache.core.composition import build_components
from msgcache.core.config import get_settings
from msgcache.domain.exceptions import MessageCacheException
from msgcache.shared.telemetry.logging import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> None:
    """Load settings, build the guard and print key<TAB>decision per key."""
    try:
        settings = get_settings()
        setup_logging(stream=sys.stderr)
        components = build_components(settings)
    except (ValidationError, MessageCacheException, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    keys = sys.argv[1:] or [line.strip() for line in sys.stdin if line.strip()]
    logger.debug("Checking %d keys (locale=%s)", len(keys), settings.language_code)
    lookup_service = components.lookup_service
    short_circuited = 0
    for key in keys:
        decision = lookup_service.classify(key)
        if decision.short_circuits:
            short_circuited += 1
        print(f"{key}\t{decision.value}")

    print(
        f"{short_circuited}/{len(keys)} keys short-circuited "
        f"(locale={settings.language_code}, known keys={components.guard.registry.size})",
        file=sys.stderr,
    )


if __name__ == "__main__":
    main()
