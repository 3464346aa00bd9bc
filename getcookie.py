#!/usr/bin/env -S uv run --script
# /// script
# requires-python = ">=3.8"
# dependencies = [
#     "pycryptodome",
# ]
# ///
"""
Print the Chrome or Chromium cookies for a domain as JSON (macOS).

Usage:
    ./getcookie.py <domain> [browser] [profile]

Examples:
    ./getcookie.py github.com
    ./getcookie.py console.anthropic.com chromium "Profile 1"
    ./getcookie.py https://www.example.com/ -o cookies.json
"""

import argparse
import json
import sys

from chromium_cookies import CookieExtractionError, get_chromium_cookies
from chromium_cookies.browsers import SUPPORTED_BROWSERS
from chromium_cookies.config import log_level_from_env
from chromium_cookies.log import configure_logging


def build_parser():
    parser = argparse.ArgumentParser(
        prog="getcookie",
        description="Fetch Chromium cookies for a given domain on macOS",
        epilog=__doc__.split("Examples:")[1],
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("domain", help="The domain to filter cookies for (e.g., github.com)")
    parser.add_argument("browser", nargs="?", default="chrome", choices=SUPPORTED_BROWSERS,
                        help="Browser to read from (default: chrome)")
    parser.add_argument("profile", nargs="?", default="Default",
                        help="Browser profile name (default: Default)")
    parser.add_argument("-o", "--output", help="Write the JSON to this file instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else log_level_from_env())

    print(f"Fetching cookies for domain: {args.domain}", file=sys.stderr)
    print(f"Browser: {args.browser}, Profile: {args.profile}", file=sys.stderr)

    try:
        cookies = get_chromium_cookies(args.browser, args.profile, args.domain)
    except CookieExtractionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not cookies:
        print(f"No cookies found for domain: {args.domain}", file=sys.stderr)
        print(f"Make sure you are logged into https://{args.domain} in {args.browser}", file=sys.stderr)

    payload = json.dumps([cookie.to_dict() for cookie in cookies], indent=2)
    if args.output:
        with open(args.output, "w") as f:
            f.write(payload + "\n")
        print(f"✓ Wrote {len(cookies)} cookies to {args.output}", file=sys.stderr)
    else:
        print(f"✓ Found {len(cookies)} cookies", file=sys.stderr)
        print(payload)

    return 0


if __name__ == "__main__":
    sys.exit(main())
