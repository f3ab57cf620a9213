import os

from fast_rules.utils.env_utils import env_flag

# Locale used when a validator is created without one
LOCALE_DEFAULT = os.getenv("LOCALE_DEFAULT", "en")

# Locale consulted when a key is missing from the requested catalog
LOCALE_FALLBACK = os.getenv("LOCALE_FALLBACK", "en")

# Application catalogs, merged over the bundled ones
LOCALE_PATH = os.getenv("LOCALE_PATH", os.path.join(os.getcwd(), "lang"))

# Catalog namespaces for rule messages and field display names
VALIDATION_MESSAGES_NAMESPACE = os.getenv("VALIDATION_MESSAGES_NAMESPACE", "validation.messages")
VALIDATION_FIELDS_NAMESPACE = os.getenv("VALIDATION_FIELDS_NAMESPACE", "validation.fields")

# Apply the `only` rule outcome (inert when off)
VALIDATION_ENFORCE_ONLY = env_flag("VALIDATION_ENFORCE_ONLY", False)

# Reject unknown rule names before evaluation instead of skipping them
VALIDATION_STRICT_RULES = env_flag("VALIDATION_STRICT_RULES", False)

# Table name to collection name for the `unique` rule: `lower` (User -> user),
# `snake` (EmailOTP -> email_otp) or `exact`
VALIDATION_COLLECTION_CASE = os.getenv("VALIDATION_COLLECTION_CASE", "lower")
