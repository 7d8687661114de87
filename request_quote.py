import sys
import json
import asyncio
import httpx
from rating_api.client import RatingClient
from rating_api.core.config import settings


def parse_revenue(raw: str):
    try:
        value = float(raw)
    except ValueError:
        return raw
    return int(value) if value.is_integer() else value


async def request_quote(revenue, state: str, business: str, base_url: str) -> bool:
    payload = {"revenue": revenue, "state": state, "business": business}
    try:
        async with RatingClient(base_url=base_url) as client:
            result = await client.get_quote(payload)
    except httpx.HTTPError as e:
        print(f"Error contacting rating API at {base_url}: {e}")
        return False

    print(json.dumps(result.body, indent=2))
    if not result.ok:
        print(f"Quote rejected with status {result.status_code}")
    return result.ok


def main():
    if len(sys.argv) < 4:
        print("Usage: python request_quote.py <revenue> <state> <business> [base_url]")
        sys.exit(1)

    revenue = parse_revenue(sys.argv[1])
    state = sys.argv[2]
    business = sys.argv[3]
    base_url = sys.argv[4] if len(sys.argv) > 4 else settings.RATING_API_URL

    success = asyncio.run(request_quote(revenue, state, business, base_url))
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
