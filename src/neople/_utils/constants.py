# Environment variables
ENV_API_KEY = "NEOPLE_API_KEY"
ENV_BASE_URL = "NEOPLE_API_URL"

# Defaults
DEFAULT_BASE_URL = "https://api.neople.co.kr"

# Query parameters
API_KEY_PARAM = "apikey"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"

# Error messages
TIMEOUT_MESSAGE = "Request timeout: The request took too long to complete."
CORS_MESSAGE = (
    "CORS Error: Cross-origin request blocked. Check API endpoint CORS settings."
)
NO_RESPONSE_MESSAGE = "Network Error: No response received"
