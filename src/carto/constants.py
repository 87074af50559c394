from typing import Final

# Application identity used to derive platform directories
APP_QUALIFIER: Final = "com"
APP_ORGANIZATION: Final = "athlabs"
APP_NAME: Final = "carto"

# Preferences file inside the preference directory
PREFS_FILE_NAME: Final = "settings.yaml"

# Lens definitions live under the data directory
LENSES_DIR_NAME: Final = "lenses"

# Pages crawled per domain when the user hasn't chosen a limit
DEFAULT_DOMAIN_CRAWL_LIMIT: Final = 100

# Crawl limits are stored as unsigned 32-bit counts
MAX_DOMAIN_CRAWL_LIMIT: Final = 2**32 - 1
