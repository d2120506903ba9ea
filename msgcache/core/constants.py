"""Core constants: default message prefixes, cache key prefixes, debug labels.

Single source of truth for literal values shared by config, cache and
the debug output middleware.
"""

# Prefixes for messages that are known not to exist in core/extensions
# and are not user-customizable.
NOT_CUSTOMIZABLE_NONEXISTENT_MSG_PREFIXES: tuple[str, ...] = (
    # Special:SpecialPages and GlobalShortcuts
    "specialpages-specialpagegroup-",
    # Used by SkinTemplate for Vector <-> Monobook B/C
    "oasis-view-",
    "oasis-action-",
    "apioutput-view-",
    "fallback-view-",
    "mobileve-view-",
    "fandommobile-view-",
    "hydra-view-",
    "hydra-action-",
    "hydradark-view-",
    "hydradark-action-",
    "minerva-view-",
    "minerva-action-",
    "exvius-view-",
    "exvius-action-",
    # LanguageConverter
    "conversion-ns",
)

# Prefixes for messages that might exist in core/extensions but are not
# user-customizable. Known keys still win over these.
NOT_CUSTOMIZABLE_POTENTIALLY_EXISTING_MSG_PREFIXES: tuple[str, ...] = (
    # Linker
    "tooltip-",
    "accesskey-",
    # SkinTemplate namespace tab navigation
    "nstab-",
)

DEFAULT_MSG_PREFIXES: tuple[str, ...] = (
    NOT_CUSTOMIZABLE_NONEXISTENT_MSG_PREFIXES
    + NOT_CUSTOMIZABLE_POTENTIALLY_EXISTING_MSG_PREFIXES
)

# Cache key prefix for customized message text (message:<tenant>:<lang>:<key>)
CACHE_PREFIX_MESSAGE = "message"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Tenant placeholder used in cache keys when no tenant header was sent
DEFAULT_TENANT = "default"

# Label of the HTML comment appended to rendered pages when debug is on
DEBUG_COMMENT_LABEL = "MessageCachePerformance skipped messages"

# Separator between skipped keys in the debug comment
DEBUG_KEY_SEPARATOR = ", "

# Path prefix of API routes (debug output is never rendered for these)
API_PATH_PREFIX = "/api/"
