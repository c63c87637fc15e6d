#!/usr/bin/env python3
"""
Basic usage examples for the JW Platform management client.

Reads credentials from JWPLATFORM_MANAGEMENT_KEY / _SECRET and lists a few
videos. Pass a source URL as the first argument to also create a video.
"""

import logging
import sys

from jwplatform_management import (
    ApiError,
    ConfigurationError,
    ManagementClient,
    ManagementConfig,
    ManagementError,
    TransportError
)


def main():
    """Run basic usage examples."""
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print("=== JW Platform Management Client Examples ===\n")

    try:
        config = ManagementConfig.from_env()
        client = ManagementClient(config=config)
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        print("Set JWPLATFORM_MANAGEMENT_KEY and JWPLATFORM_MANAGEMENT_SECRET.")
        return 1

    print(f"1. Client created for: {config.protocol}://{config.server}/{config.version}")
    print(f"   Key: {config.key}\n")

    with client:
        try:
            print("2. Signed URL for /videos/list...")
            print(f"   {client.format_url('/videos/list', {'result_limit': 5})}\n")

            print("3. Listing videos...")
            response = client.get("/videos/list", {"result_limit": 5})
            for video in response.get("videos", []):
                print(f"   {video.get('key')}: {video.get('title')}")
            print()

            if len(sys.argv) > 1:
                print("4. Creating video...")
                created = client.create_video(sys.argv[1], {"title": "Example upload"})
                print(f"   Created: {created.get('video', {}).get('key')}")
        except ApiError as e:
            print(f"   API error {e.code}: {e.message}")
            return 1
        except TransportError as e:
            print(f"   Request failed: {e}")
            return 1
        except ManagementError as e:
            print(f"   Client error: {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
