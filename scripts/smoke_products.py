#!/usr/bin/env python3
"""Smoke-check the product endpoints of a running catalog server."""
from __future__ import annotations

import json
import os
import sys
import time
from typing import Any

import httpx

# Default base URL - can be overridden via environment variable
BASE_URL = "http://localhost:8000"
API_PREFIX = "/api"


def print_section(title: str) -> None:
    """Print a formatted section header."""
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}\n")


def print_response(response: httpx.Response, expected_status: int | None = None) -> Any:
    """Print formatted response information."""
    status_emoji = "✅" if response.status_code < 400 else "❌"
    status_text = httpx.codes.get_reason_phrase(response.status_code) or "Unknown"
    print(f"{status_emoji} Status: {response.status_code} {status_text}")

    if expected_status and response.status_code != expected_status:
        print(f"⚠️  Expected status {expected_status}, got {response.status_code}")

    try:
        data = response.json()
    except ValueError:
        print(f"Response text: {response.text[:500]}")
        return None
    print(f"Response: {json.dumps(data, indent=2)[:1500]}")
    return data


def check_list_products(client: httpx.Client, base_url: str) -> None:
    """GET /api/products and the search/category narrowing."""
    print_section("1. List Products (GET /api/products)")
    url = f"{base_url}{API_PREFIX}/products"

    print("1.1: List all products")
    data = print_response(client.get(url), expected_status=200)
    if data is not None:
        print(f"   Found {len(data)} products")

    print("\n1.2: Search for 'mouse'")
    data = print_response(client.get(url, params={"search": "mouse"}), expected_status=200)
    if data is not None:
        print(f"   Matches: {[p['name'] for p in data]}")


def check_create_product(client: httpx.Client, base_url: str, admin_key: str) -> str | None:
    """POST /api/products with good and bad admin keys."""
    print_section("2. Create Product (POST /api/products)")
    url = f"{base_url}{API_PREFIX}/products"
    slug = f"smoke-test-{int(time.time())}"
    payload = {
        "name": "Smoke Test Product",
        "slug": slug,
        "description": "Created by the smoke script",
        "price": 9.99,
        "category": "Testing",
        "inventory": 11,
    }

    print("2.1: Wrong admin key (should return 401)")
    print_response(client.post(url, json=payload, headers={"x-admin-key": "wrong"}), expected_status=401)

    print("\n2.2: Missing fields (should return 400)")
    print_response(client.post(url, json={"name": "Incomplete"}, headers={"x-admin-key": admin_key}), expected_status=400)

    print(f"\n2.3: Create product {slug}")
    data = print_response(client.post(url, json=payload, headers={"x-admin-key": admin_key}), expected_status=201)

    print("\n2.4: Duplicate slug (should fail)")
    print_response(client.post(url, json=payload, headers={"x-admin-key": admin_key}), expected_status=500)

    return slug if data else None


def check_get_and_update(client: httpx.Client, base_url: str, admin_key: str, slug: str) -> None:
    """GET and PUT /api/products/{slug}."""
    print_section("3. Get and Update Product (GET/PUT /api/products/{slug})")
    url = f"{base_url}{API_PREFIX}/products/{slug}"

    print(f"3.1: Get {slug}")
    print_response(client.get(url), expected_status=200)

    print("\n3.2: Get a missing slug (should return 404)")
    print_response(client.get(f"{base_url}{API_PREFIX}/products/does-not-exist"), expected_status=404)

    print("\n3.3: Update inventory only")
    data = print_response(client.put(url, json={"inventory": 2}, headers={"x-admin-key": admin_key}), expected_status=200)
    if data:
        print(f"   inventory={data.get('inventory')} last_updated={data.get('last_updated')}")


def check_catalog_views(client: httpx.Client, base_url: str) -> None:
    """Dashboard and recommendation views."""
    print_section("4. Catalog Views (GET /api/catalog/...)")
    print_response(client.get(f"{base_url}{API_PREFIX}/catalog/dashboard"), expected_status=200)
    print_response(client.get(f"{base_url}{API_PREFIX}/catalog/recommendations"), expected_status=200)


def main() -> None:
    """Run all product endpoint checks."""
    base_url = os.getenv("API_BASE_URL", BASE_URL)
    admin_key = os.getenv("ADMIN_KEY", "admin123")

    print(f"Base URL: {base_url}")
    try:
        with httpx.Client(timeout=5.0) as client:
            response = client.get(f"{base_url}/health")
            if response.status_code != 200:
                print(f"\n❌ Server health check failed: {response.status_code}")
                sys.exit(1)
            print("✅ Server is running")
    except httpx.RequestError as e:
        print(f"\n❌ Cannot connect to server at {base_url}")
        print(f"   Error: {e}")
        print("\n   Make sure the FastAPI server is running:")
        print("   uvicorn storefront.main:app --reload")
        sys.exit(1)

    with httpx.Client(timeout=30.0) as client:
        check_list_products(client, base_url)
        slug = check_create_product(client, base_url, admin_key)
        if not slug:
            print("\n⚠️  Could not create a product. Remaining checks skipped.")
            return
        check_get_and_update(client, base_url, admin_key, slug)
        check_catalog_views(client, base_url)

    print_section("Summary")
    print(f"✅ All checks completed. Smoke product: {base_url}{API_PREFIX}/products/{slug}")


if __name__ == "__main__":
    main()
