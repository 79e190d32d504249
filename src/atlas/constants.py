APP_NAME = "atlas"
ENV_PREFIX = "ATLAS_CONFIG"

DEFAULT_API_BASE_URL = "https://restcountries.com"
DEFAULT_API_TIMEOUT = 10.0

# restcountries caps /all at ten requested fields
DEFAULT_LIST_FIELDS = (
    "cca3",
    "name",
    "region",
    "subregion",
    "languages",
    "population",
    "capital",
    "flags",
    "borders",
    "area",
)

FAVORITES_KEY = "favorites"
USER_KEY = "user"

COUNTRIES_NAMESPACE = "countries"
SESSION_NAMESPACE = "session"
