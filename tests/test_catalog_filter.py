"""Tests for storefront search and category filtering."""
from __future__ import annotations

from storefront.sample_catalog import SAMPLE_PRODUCTS
from storefront.services.catalog_filter import category_options, filter_products


def test_search_mouse_across_all_categories():
    result = filter_products(SAMPLE_PRODUCTS, search="mouse", category="all")

    assert [p.name for p in result] == ["Wireless Mouse"]


def test_search_is_case_insensitive():
    result = filter_products(SAMPLE_PRODUCTS, search="LAPTOP")

    assert [p.slug for p in result] == ["laptop-pro-15", "laptop-stand"]


def test_category_only():
    result = filter_products(SAMPLE_PRODUCTS, category="Accessories")

    assert [p.slug for p in result] == ["usb-c-hub", "laptop-stand", "phone-stand"]


def test_search_and_category_combine():
    result = filter_products(SAMPLE_PRODUCTS, search="stand", category="Accessories")

    assert [p.slug for p in result] == ["laptop-stand", "phone-stand"]

    assert filter_products(SAMPLE_PRODUCTS, search="stand", category="Audio") == []


def test_empty_search_and_all_keeps_everything():
    assert filter_products(SAMPLE_PRODUCTS) == SAMPLE_PRODUCTS


def test_category_is_exact_match():
    assert filter_products(SAMPLE_PRODUCTS, category="electronics") == []


def test_category_options():
    assert category_options(SAMPLE_PRODUCTS) == ["all", "Electronics", "Accessories", "Audio", "Storage"]
    assert category_options([]) == ["all"]
