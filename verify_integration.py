#!/usr/bin/env python3
"""
Smoke check against a running server.
Run with: python3 verify_integration.py [BASE_URL]
"""

import sys

import httpx

BASE_URL = "http://localhost:8000"
TIMEOUT = 5

EXPECTED_EXAMPLE = {"name": "John", "state": "TX"}


def check_backend_health(client: httpx.Client) -> bool:
    """Backend is running and healthy."""
    print("✓ Checking backend health...")
    try:
        data = client.get("/health").json()
        assert data.get("status") == "healthy", "Backend not healthy"
        print(f"  ✓ Backend healthy: {data.get('service')}")
        return True
    except (httpx.HTTPError, ValueError, AssertionError) as e:
        print(f"  ✗ Backend health check failed: {e}")
        print(f"    Make sure backend is running on {client.base_url}")
        return False


def check_example_endpoint(client: httpx.Client) -> bool:
    """GET /api/example returns the fixed record, with and without noise in the request."""
    print("\n✓ Checking /api/example...")
    variants = [
        ("plain", {}, {}),
        ("extra query", {"foo": "bar"}, {}),
        ("accept json", {}, {"Accept": "application/json"}),
    ]
    ok = True
    for label, params, headers in variants:
        try:
            resp = client.get("/api/example", params=params, headers=headers)
            if resp.status_code == 200 and resp.json() == EXPECTED_EXAMPLE:
                print(f"  ✓ {label}")
            else:
                print(f"  ✗ {label}: {resp.status_code} {resp.text}")
                ok = False
        except httpx.HTTPError as e:
            print(f"  ✗ {label}: {e}")
            ok = False
    return ok


def check_backend_routes(client: httpx.Client) -> bool:
    """Backend publishes all expected routes."""
    print("\n✓ Checking backend routes...")
    try:
        paths = list(client.get("/openapi.json").json().get("paths", {}).keys())
    except (httpx.HTTPError, ValueError) as e:
        print(f"  ✗ Failed to fetch OpenAPI schema: {e}")
        return False

    expected_paths = ["/", "/health", "/api/example"]
    for path in expected_paths:
        if path in paths:
            print(f"  ✓ {path}")
        else:
            print(f"  ✗ {path} NOT FOUND")
    return all(p in paths for p in expected_paths)


def main(base_url: str = BASE_URL) -> int:
    print("=" * 60)
    print("EXAMPLE API SMOKE CHECK")
    print("=" * 60)

    checks = [
        ("Backend Health", check_backend_health),
        ("Example Endpoint", check_example_endpoint),
        ("Backend Routes", check_backend_routes),
    ]

    with httpx.Client(base_url=base_url, timeout=TIMEOUT) as client:
        results = [(name, check(client)) for name, check in checks]

    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)

    passed = sum(1 for _, result in results if result)
    for name, result in results:
        status = "✓ PASS" if result else "✗ FAIL"
        print(f"{status}: {name}")

    print(f"\nTotal: {passed}/{len(results)} passed")
    print("=" * 60)
    return 0 if passed == len(results) else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else BASE_URL))
