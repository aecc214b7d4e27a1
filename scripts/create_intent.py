"""Call createPaymentIntent once and print the response envelope.

Useful for checking a deployment with a real Firebase ID token.
"""

import argparse
import json
from uuid import uuid4

import httpx


def create_intent(base_url: str, id_token: str | None, amount: int) -> tuple[int, dict]:
    """POST one callable request and return (status_code, body)."""

    headers = {"x-correlation-id": str(uuid4())}
    if id_token:
        headers["Authorization"] = f"Bearer {id_token}"
    resp = httpx.post(
        f"{base_url}/createPaymentIntent",
        json={"data": {"amount": amount}},
        headers=headers,
        timeout=10.0,
    )
    return resp.status_code, resp.json()


def main() -> None:
    """Parse CLI args and issue one request."""

    parser = argparse.ArgumentParser(description="Create a payment intent through the callable endpoint.")
    parser.add_argument("--base-url", default="http://localhost:8000")
    parser.add_argument("--id-token", default=None, help="Firebase ID token of the caller")
    parser.add_argument("--amount", type=int, required=True, help="Amount in minor currency units")
    args = parser.parse_args()

    status_code, body = create_intent(args.base_url, args.id_token, args.amount)
    print(f"status={status_code}")
    print(json.dumps(body, indent=2))


if __name__ == "__main__":
    main()
