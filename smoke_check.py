"""
Simple script to check the validation endpoints against a running server.
Run this after starting the server.

Usage:
    API_KEY=... python smoke_check.py [DEVICE_ID]
"""

import os
import sys

import requests

BASE_URL = os.getenv("API_URL", "http://localhost:3000")
API_KEY = os.getenv("API_KEY", "")
DEFAULT_DEVICE = "c925255d-3ab1-4e56-92cd-645ece08cdf9"


def check_endpoints(device_id: str) -> None:
    """Call /health, /v1/templates and /v1/validate and print the results."""
    headers = {"X-API-Key": API_KEY}

    print("=" * 60)
    print("Checking Device Validation API")
    print("=" * 60)

    print("\n1. GET /health ...")
    try:
        response = requests.get(f"{BASE_URL}/health", timeout=10)
        print(f"   Status Code: {response.status_code}")
        print(f"   Body: {response.json()}")
    except requests.exceptions.ConnectionError:
        print("   ✗ Cannot connect to server. Is it running?")
        print("   Start it with: uvicorn device_validation.main:app --port 3000")
        return

    print("\n2. GET /v1/templates ...")
    response = requests.get(f"{BASE_URL}/v1/templates", headers=headers, timeout=10)
    print(f"   Status Code: {response.status_code}")
    print(f"   Body: {response.json()}")

    print(f"\n3. POST /v1/validate ({device_id}) ...")
    response = requests.post(
        f"{BASE_URL}/v1/validate",
        headers=headers,
        json={
            "device_id": device_id,
            "ip_address": "192.168.1.100",
            "session_timestamp": "2025-11-19T15:30:00Z",
        },
        timeout=30,
    )
    print(f"   Status Code: {response.status_code}")
    data = response.json()
    if response.status_code == 200:
        print(f"   Validated: {data['validated']}")
        print(f"   Confidence: {data['confidence_score']}")
        print(f"   Response time: {data['response_time_ms']}ms")
        for signal in data["signals"]:
            print(f"     - {signal}")
    else:
        print(f"   ✗ {data}")

    print("\n" + "=" * 60)
    print("Check Complete")
    print("=" * 60)


if __name__ == "__main__":
    check_endpoints(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_DEVICE)
