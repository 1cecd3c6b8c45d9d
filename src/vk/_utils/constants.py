# Environment variables
ENV_VK_ACCESS_TOKEN = "VK_ACCESS_TOKEN"
ENV_VK_API_URL = "VK_API_URL"
ENV_VK_API_VERSION = "VK_API_VERSION"
ENV_VK_API_LANG = "VK_API_LANG"

# Defaults
DEFAULT_API_URL = "https://api.vk.com/method"
DEFAULT_API_VERSION = "5.131"

# Query parameters
PARAM_ACCESS_TOKEN = "access_token"
PARAM_VERSION = "v"
PARAM_LANG = "lang"

# Profile fields, see https://vk.com/dev/fields
FIELD_FIRST_NAME = "first_name"
FIELD_LAST_NAME = "last_name"
FIELD_SCREEN_NAME = "screen_name"
FIELD_NICKNAME = "nickname"

# nominative, genitive, dative, accusative, instrumental, prepositional
NAME_CASES = ("nom", "gen", "dat", "acc", "ins", "abl")
