# Environment variables
ENV_BASE_URL = "OPENAPI_BASE_URL"
