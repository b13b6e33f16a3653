# scripts/smoke_test_youtube.py
"""
YouTube API Client Smoke Test
Validates configuration, API-key reads and (optionally) OAuth reads against
the live API. Nothing is posted or modified.

Run: python scripts/smoke_test_youtube.py
Env: YOUTUBE_API_KEY, YOUTUBE_ACCESS_TOKEN (optional)
"""

import asyncio
import os
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent.parent

dotenv_path = ROOT_DIR / ".env"
if dotenv_path.exists():
    load_dotenv(dotenv_path)
    print(f"✅ Loaded .env from: {dotenv_path}")
else:
    print(f"⚠️  .env file not found at: {dotenv_path}")

from ytclient.app.config import get_config, setup_logging, validate_config
from ytclient.infrastructure.clients.youtube_api import create_youtube_client
from ytclient.services import (
    OAuthService,
    ServiceError,
    YouTubeService,
    is_retryable_error,
)


def print_section(title: str):
    """Print formatted section header"""
    print(f"\n{'='*60}")
    print(f"  {title}")
    print(f"{'='*60}")


def check_config():
    """Check configuration loading"""
    print_section("1️⃣  Configuration")

    config = get_config()
    result = validate_config(config)

    print(f"   Base URL: {config.youtube_api.base_url}")
    print(f"   Page size: {config.youtube_api.max_results_per_page}")
    for warning in result["warnings"]:
        print(f"   ⚠️  {warning}")
    for error in result["errors"]:
        print(f"   ❌ {error}")

    return result["valid"]


async def check_public_reads():
    """Fetch a well-known video with the API key"""
    print_section("2️⃣  API Key Reads")

    api_key = os.getenv("YOUTUBE_API_KEY")
    if not api_key:
        print("⏭️  Skipping (no YOUTUBE_API_KEY)")
        return None

    async with create_youtube_client(api_key) as client:
        service = YouTubeService(client)
        try:
            video = await service.get_video("dQw4w9WgXcQ")
            comments = await service.get_video_comments(video.id, max_results=5)
        except ServiceError as e:
            print(f"❌ {e.__class__.__name__}: {e}")
            if is_retryable_error(e):
                print("   ↻ Transient failure, re-running may succeed")
            return False

    print(f"✅ Title: {video.title}")
    print(f"   Views: {video.statistics.view_count:,}")
    print(f"   Fetched {len(comments)} comment threads")
    return True


async def check_oauth_reads():
    """Read the token owner's channel, subscriptions and playlists"""
    print_section("3️⃣  OAuth Reads")

    access_token = os.getenv("YOUTUBE_ACCESS_TOKEN")
    if not access_token:
        print("⏭️  Skipping (no YOUTUBE_ACCESS_TOKEN)")
        return None

    async with create_youtube_client() as client:
        oauth = OAuthService(client)
        try:
            me = await oauth.get_me(access_token)
            subscriptions = await oauth.get_my_subscriptions(access_token, 5)
            playlists = await oauth.get_my_playlists(access_token, 5)
        except ServiceError as e:
            print(f"❌ {e.__class__.__name__}: {e}")
            if is_retryable_error(e):
                print("   ↻ Transient failure, re-running may succeed")
            return False

    print(f"✅ Channel: {me.name} ({me.id})")
    print(f"   Subscriptions: {len(subscriptions)}")
    print(f"   Playlists: {len(playlists)}")
    return True


def generate_report(results: dict) -> bool:
    """Print final summary"""
    print_section("📊 Summary")

    passed = sum(1 for v in results.values() if v is True)
    failed = sum(1 for v in results.values() if v is False)
    skipped = sum(1 for v in results.values() if v is None)

    print(f"   ✅ Passed: {passed}")
    print(f"   ❌ Failed: {failed}")
    print(f"   ⏭️  Skipped: {skipped}")

    return failed == 0


def main():
    """Run all smoke checks"""
    setup_logging()

    print("\n" + "=" * 60)
    print("  🧪 YouTube API Client - Smoke Test")
    print("  " + datetime.now().strftime("%Y-%m-%d %H:%M:%S"))
    print("=" * 60)

    results = {
        "Configuration": check_config(),
        "API Key Reads": asyncio.run(check_public_reads()),
        "OAuth Reads": asyncio.run(check_oauth_reads()),
    }

    sys.exit(0 if generate_report(results) else 1)


if __name__ == "__main__":
    main()
