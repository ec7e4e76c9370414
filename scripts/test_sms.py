"""
Test SMSlenz Integration

Run this script to verify SMSlenz is configured correctly
and can send messages.

Usage: python scripts/test_sms.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from app.core.config import Settings
from app.core.exceptions import NotificationError
from app.services.smslenz_service import SmslenzClient
from utils.sms_utils import build_thanks_sms
from utils.validation_utils import normalize_phone


def check_config(config: Settings, client: SmslenzClient) -> bool:
    """Test if SMSlenz is properly configured"""
    print("=" * 60)
    print("  SMSlenz Configuration Test")
    print("=" * 60 + "\n")

    print(f"User ID: {'✅ Set' if config.SMS_USER_ID else '❌ Not set'}")
    print(f"API Key: {'✅ Set' if config.SMS_API_KEY else '❌ Not set'}")
    print(f"Sender ID: {config.SMS_SENDER_ID or '❌ Not set'}")
    print(f"Endpoint: {config.SMS_API_URL}")
    print(f"\nConfiguration valid: {'✅ Yes' if client.is_configured() else '❌ No'}\n")

    if not client.is_configured():
        print("⚠️  Please set SMS_USER_ID, SMS_API_KEY and SMS_SENDER_ID in .env file")
        return False

    return True


def send_test_message(client: SmslenzClient):
    """Send the thank-you SMS to a number typed in by the operator"""
    print("=" * 60)
    print("  Test Message Sending")
    print("=" * 60 + "\n")

    raw = input("Enter a mobile number (e.g. 0771234567): ")
    phone = normalize_phone(raw)

    if not phone:
        print("❌ No digits in that number")
        return

    print(f"\n📤 Sending test message to {phone}...")

    try:
        result = client.send_sms(contact=phone, message=build_thanks_sms("Test User"))
    except NotificationError as e:
        print(f"\n❌ Failed to reach SMSlenz: {e.message}")
        return

    print(f"\nStatus: {result.status_code}")
    print(f"Body: {result.body[:500]}")
    print("\n✅ Gateway accepted the request" if result.is_success else "\n❌ Gateway rejected the request")


def main():
    print("\n🧪 SMSlenz Integration Test\n")

    config = Settings()
    client = SmslenzClient.from_settings(config)

    if not check_config(config, client):
        print("\n❌ Configuration test failed. Please fix .env file and try again.")
        return

    test_send = input("Do you want to send a test message? (y/n): ")
    if test_send.lower() == 'y':
        send_test_message(client)
    else:
        print("\n✅ Configuration test passed!")


if __name__ == "__main__":
    main()
