"""
Seed default business settings and a demo service zone.

Existing settings (same key and category) and zones (same name) are left
untouched, so the script can be re-run safely.

Usage:
    python db/seed_settings.py
"""
import asyncio
import sys
from pathlib import Path

# Add parent directory to Python path so we can import customer_api modules
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))

# Load .env from project root before any customer_api imports
from dotenv import load_dotenv
load_dotenv(ROOT / ".env")

from sqlalchemy import select
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

from customer_api.config import Settings
from customer_api.models.business_setting import BusinessSetting
from customer_api.models.zone import Zone


# (key_name, settings_type, live_values, is_active)
DEFAULT_SETTINGS = [
    ("business_name", "business_information", "Demo Services", True),
    ("business_logo", "business_information", "logo.png", True),
    ("country_code", "business_information", "BD", True),
    ("business_address", "business_information", "House 12, Road 5, Dhaka", True),
    ("business_phone", "business_information", "+8801700000000", True),
    ("business_email", "business_information", "support@example.com", True),
    ("currency_decimal_point", "business_information", "2", True),
    ("currency_code", "business_information", "BDT", True),
    ("currency_symbol_position", "business_information", "left", True),
    ("footer_text", "business_information", "All rights reserved", True),
    ("cookies_text", "business_information", "We use cookies to improve your experience.", True),
    ("phone_number_visibility_for_chatting", "business_information", "0", True),
    ("about_us", "pages_setup", "<p>About us</p>", True),
    ("terms_and_conditions", "pages_setup", "<p>Terms and conditions</p>", True),
    ("refund_policy", "pages_setup", "<p>Refund policy</p>", False),
    ("return_policy", "pages_setup", "<p>Return policy</p>", False),
    ("cancellation_policy", "pages_setup", "<p>Cancellation policy</p>", False),
    ("privacy_policy", "pages_setup", "<p>Privacy policy</p>", True),
    ("sms_verification", "service_setup", "0", True),
    ("email_verification", "service_setup", "0", True),
    ("google_map", "third_party", {"map_api_key_client": "", "map_api_key_server": ""}, True),
    ("app_url_playstore", "landing_button_and_links", "https://play.google.com/store", False),
    ("app_url_appstore", "landing_button_and_links", "https://apps.apple.com", False),
    ("web_url", "landing_button_and_links", "https://example.com", True),
    ("google_social_login", "social_login", "0", True),
    ("facebook_social_login", "social_login", "0", True),
    ("customer_wallet", "customer_config", "1", True),
    ("customer_loyalty_point", "customer_config", "0", True),
    ("customer_referral_earning", "customer_config", "0", True),
    (
        "customer_app_settings",
        "app_settings",
        '{"min_version_for_android": "1.0", "min_version_for_ios": "1.0"}',
        True,
    ),
    ("ssl_commerz", "payment_config", {"gateway": "ssl_commerz", "status": "1"}, True),
    ("stripe", "payment_config", {"gateway": "stripe", "status": "0"}, True),
]

# Rough outline of Dhaka city as (lat, lng)
DEMO_ZONE = (
    "Dhaka",
    [(23.70, 90.33), (23.70, 90.50), (23.90, 90.50), (23.90, 90.33)],
)


async def seed_settings():
    """Seed default settings and the demo zone."""
    settings = Settings()

    engine = create_async_engine(settings.database_url, echo=False)
    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        added = 0
        skipped = 0

        for key_name, settings_type, live_values, is_active in DEFAULT_SETTINGS:
            result = await session.execute(
                select(BusinessSetting).where(
                    BusinessSetting.key_name == key_name,
                    BusinessSetting.settings_type == settings_type,
                )
            )
            if result.scalar_one_or_none():
                print(f"{settings_type}.{key_name} already exists, skipping")
                skipped += 1
                continue

            session.add(BusinessSetting(
                key_name=key_name,
                settings_type=settings_type,
                live_values=live_values,
                test_values=live_values,
                is_active=is_active,
            ))
            added += 1
            print(f"Added {settings_type}.{key_name}")

        name, boundary = DEMO_ZONE
        result = await session.execute(select(Zone).where(Zone.name == name))
        if result.scalar_one_or_none():
            print(f"Zone '{name}' already exists, skipping")
        else:
            zone = Zone(name=name, is_active=True)
            zone.set_boundary(boundary)
            session.add(zone)
            print(f"Added zone '{name}'")

        await session.commit()

        print(f"\n{'='*60}")
        print("Seeding complete!")
        print(f"  Settings added:   {added}")
        print(f"  Settings skipped: {skipped}")
        print(f"{'='*60}")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed_settings())
