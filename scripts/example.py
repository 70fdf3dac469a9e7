"""Call every Octopart API method once and print the results.

Usage: python scripts/example.py --api-key KEY
       OCTOPART_API_KEY=KEY python scripts/example.py
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import httpx

# Add parent directory to path for imports when running as script
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from octopart_client import ConfigurationError, OctopartClient, OctopartError, set_api_key

logging.basicConfig(
    level=logging.INFO,
    format='%(message)s',
)
logger = logging.getLogger(__name__)


EXAMPLES = [
    ("Fetch a category object by its id", "category", (4174,)),
    ("Fetch multiple category objects by their ids", "categories", ([4215, 4174, 4780],)),
    ("Execute search over category objects", "search_categories", ("resistor",)),
    ("Fetch a part object by its id", "part", (39619421,)),
    ("Fetch multiple part objects by their ids", "parts", ([39619421, 29035751, 31119928],)),
    ("Execute search over part objects", "search_parts", ("resistor",)),
    ("Suggest a part search query string", "suggest_parts", ("sn74f",)),
    ("Match (manufacturer, mpn) to part uids", "match_part", ("texas instruments", "SN74LS240N")),
    ("Fetch a partattribute object by its id", "part_attribute", ("capacitance",)),
    ("Fetch multiple partattribute objects by their ids", "part_attributes", (["capacitance", "resistance"],)),
    ("Match lines of a BOM to parts", "bom_match", ({"mpn_or_sku": "60K6871", "manufacturer": "Texas Instruments"},)),
]


def main():
    parser = argparse.ArgumentParser(description="Run example Octopart API calls")
    parser.add_argument(
        "--api-key",
        help="Octopart API key (default: OCTOPART_API_KEY env var)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log request details",
    )
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger("octopart_client").setLevel(logging.DEBUG)
    if args.api_key:
        set_api_key(args.api_key)

    try:
        client = OctopartClient()
    except ConfigurationError as e:
        print(f"Error: {e}. Pass --api-key or set OCTOPART_API_KEY")
        return 1

    failures = 0
    with client:
        for title, method, call_args in EXAMPLES:
            logger.info(f"# {title}")
            try:
                result = getattr(client, method)(*call_args)
            except (OctopartError, httpx.HTTPError) as e:
                logger.error(f"{method} failed: {e}")
                failures += 1
                continue
            print(json.dumps(result, indent=2))
    return 1 if failures else 0


if __name__ == "__main__":
    exit(main())
