"""Pytest configuration and fixtures."""

import pytest
import structlog

from table_extract.config.settings import get_settings


@pytest.fixture(autouse=True)
def reset_settings():
    """Drop cached settings so environment overrides take effect per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def people_html():
    """A single table with a header row and one body row."""
    return """
    <table class="people list">
        <thead><tr><th> Name </th><th>Age</th></tr></thead>
        <tbody><tr><td>Alice</td><td>
            30
        </td></tr></tbody>
    </table>
    """


@pytest.fixture
def pricing_html():
    """Several tables, only one of which carries id="prices"."""
    return """
    <div>
        <table id="stock"><tr><th>Item</th><th>Count</th></tr><tr><td>pen</td><td>3</td></tr></table>
        <table id="prices"><tr><th>Item</th><th>Price</th></tr><tr><td>pen</td><td>1.50</td></tr></table>
        <table><tr><td>loose</td></tr></table>
        <table id="Prices"><tr><th>Item</th><th>Price</th></tr><tr><td>ink</td><td>9.00</td></tr></table>
    </div>
    """
