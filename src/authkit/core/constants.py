"""Application-wide constants."""

# String field lengths
MAX_EMAIL_LENGTH = 255
MAX_NAME_LENGTH = 255

# Password requirements
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128
BCRYPT_ROUNDS = 12

# Pagination defaults
DEFAULT_PAGE_SIZE = 10
DEFAULT_SORT_FIELD = "createdAt"

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"

# Keys stripped from every serialized document
INTERNAL_ID_FIELD = "_id"
PUBLIC_ID_FIELD = "id"
ALWAYS_HIDDEN_FIELDS = ("__v", "createdAt", "updatedAt")
