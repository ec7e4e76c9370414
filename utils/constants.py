"""
utils/constants.py

Purpose: Centralized static content

- Field limits for the contact form
- Phone numbering constants
- User-facing messages and the thank-you SMS template

(Prevents hardcoding across the codebase)
"""

# ============================================================
# CONTACT FORM FIELDS
# ============================================================

FIRST_NAME_MAX_LENGTH = 100
LAST_NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 200
PHONE_MAX_LENGTH = 32
SUBJECT_MAX_LENGTH = 200
MESSAGE_MAX_LENGTH = 2000

# Basic local@domain.tld shape, nothing stricter
EMAIL_PATTERN = r"[^\s@]+@[^\s@]+\.[^\s@]+"

# ============================================================
# PHONE NUMBERS (Sri Lanka)
# ============================================================

COUNTRY_CODE = "94"
LOCAL_NUMBER_LENGTH = 10          # 0771234567
INTERNATIONAL_NUMBER_LENGTH = 11  # 94771234567
PREFIXED_NUMBER_LENGTH = 12       # 094771234567

# ============================================================
# SMS
# ============================================================

SMS_BRAND_NAME = "LogozoDev"
SMS_FALLBACK_NAME = "there"
SMS_REQUEST_TIMEOUT_SECONDS = 10.0

THANKS_SMS_TEMPLATE = (
    "Hi {name}, thanks for contacting {brand}. We’ll reach you soon. — {brand}"
)

# ============================================================
# API MESSAGES
# ============================================================

INVALID_FIELDS_MESSAGE = "Missing or invalid fields"
INVALID_ID_MESSAGE = "Invalid id"
NOT_FOUND_MESSAGE = "Not found"
DATABASE_ERROR_MESSAGE = "Database error"
SERVER_ERROR_MESSAGE = "Server error"
