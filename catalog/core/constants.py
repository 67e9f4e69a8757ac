"""Core constants: tree-editing limits and shared literal values."""

# Copy-name candidates tried after the base name: "<base> (copy)", "<base> (copy 2)", ...
MAX_COPY_NAME_ATTEMPTS = 50
COPY_NAME_SUFFIX = "copy"

# Prefix of synthetic slugs used when a name yields no slug characters.
SYNTHETIC_SLUG_PREFIX = "node"

# Dependency check warnings
WARNING_HAS_CHILDREN = "has child categories"
WARNING_BOUND_DOCUMENTS = "bound to {count} documents"

# Headers forwarded to the node store
HEADER_API_KEY = "x-api-key"
HEADER_USER_ID = "x-user-id"
HEADER_REQUEST_ID = "x-request-id"
HEADER_ADMIN_KEY = "x-admin-key"
