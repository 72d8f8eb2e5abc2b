# Knowledge Graph Search API limits and wire markers
MAX_LIMIT = 20
MIN_LIMIT = 1
DEFAULT_LIMIT = 10

# Raw entity ids come back as "kg:/m/0dl567"
KG_ID_PREFIX = "kg:"

# Warning messages for non-fatal request adjustments
LIMIT_CLAMPED_HIGH = "Limit of returns are 20 entities"
LIMIT_CLAMPED_LOW = "Limit must be at least 1 entity"
KEYWORD_TRUNCATED = "Only one keyword allowed per query"
