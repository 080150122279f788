"""Shared test utility functions for header parser tests."""

import sys
from pathlib import Path
from collections import Counter

sys.path.insert(0, str(Path(__file__).parent.parent))

from header_parser import Parser, parse, parse_with_diagnostics
from header_parser.ast_nodes import *


def parse_one(text: str) -> HeaderContent:
    """Parse text, assert exactly 1 content entry, return it."""
    contents = parse(text, filename="<test>")
    assert len(contents) == 1, \
        f"Expected 1 entry, got {len(contents)}: {[type(c).__name__ for c in contents]}"
    return contents[0]


def parse_item(text: str) -> Item:
    """Wrap input as the item of a '0|1|{text}' pickup and return the item."""
    pickup = parse_one(f"0|1|{text}")
    assert isinstance(pickup, VPickup), \
        f"Expected VPickup, got {type(pickup).__name__}"
    return pickup.item


def collect_errors(text: str) -> list:
    """Parse text that must fail and return its errors as a list."""
    contents, errors = parse_with_diagnostics(text, filename="<test>")
    assert contents is None, f"Expected errors, parsed {contents!r}"
    assert errors, "Expected at least one error"
    return list(errors)


def item_errors(text: str) -> list:
    return collect_errors(f"0|1|{text}")


def make_parser(text: str) -> Parser:
    """A fresh parser positioned on the first token of *text*."""
    return Parser(text, filename="<test>")


def assert_node_type(node, expected_type, **field_checks):
    """Assert node type and optionally check field values."""
    assert isinstance(node, expected_type), \
        f"Expected {expected_type.__name__}, got {type(node).__name__}"
    for field, expected in field_checks.items():
        actual = getattr(node, field, None)
        assert actual == expected, \
            f"{field}: expected {expected!r}, got {actual!r}"


def count_content_types(contents) -> Counter:
    """Count HeaderContent entries by node type."""
    return Counter(type(c).__name__ for c in contents)
