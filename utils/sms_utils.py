"""
utils/sms_utils.py

Purpose: SMS message builders

- Formats the thank-you SMS sent after a contact form submission
"""

from typing import Optional

from utils.constants import SMS_BRAND_NAME, SMS_FALLBACK_NAME, THANKS_SMS_TEMPLATE


def build_full_name(first_name: Optional[str], last_name: Optional[str]) -> str:
    return f"{first_name or ''} {last_name or ''}".strip()


def build_thanks_sms(full_name: Optional[str], brand: str = SMS_BRAND_NAME) -> str:
    """
    Builds the thank-you SMS text. Short enough for a single segment.

    Args:
        full_name: Submitter's name; blank names fall back to a greeting
        brand: Company name signed at the end

    Returns:
        SMS body
    """
    name = (full_name or "").strip() or SMS_FALLBACK_NAME
    return THANKS_SMS_TEMPLATE.format(name=name, brand=brand)
