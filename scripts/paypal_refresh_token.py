#!/usr/bin/env python3
import sys

from paypal_rest.core.result import Err
from paypal_rest.integrations.paypal_client import PayPalClient


def main() -> int:
    with PayPalClient() as client:
        result = client.get_access_token(force_refresh=True)
    if isinstance(result, Err):
        print("PayPal token refresh failed:", repr(result.reason), file=sys.stderr)
        return 1
    token = result.value
    print("Refreshed PayPal access token (masked):", token[:6] + "...")
    return 0

if __name__ == "__main__":
    sys.exit(main())
