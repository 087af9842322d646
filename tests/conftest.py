"""
Pytest fixtures for the request filter tests.
"""

import os
import sys

import pytest
import pandas as pd

# Add the project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from report_filter.matcher.automaton import AutomatonTable


@pytest.fixture
def automaton_table():
    """Fresh automaton table so tests do not depend on process-wide state."""
    return AutomatonTable()


@pytest.fixture
def request_data():
    """Recorded requests of a small shop test run."""
    return pd.DataFrame({
        'name': ['Homepage.1', 'Login.1', 'Login.2', 'AddToCart.1', 'AddToCart.2', 'Logout.1'],
        'url': [
            'https://shop.example.com/',
            'https://shop.example.com/account/login',
            'https://shop.example.com/account/login?step=2',
            'https://shop.example.com/cart/add?pid=123',
            'https://shop.example.com/cart/add?pid=456',
            'https://shop.example.com/account/logout',
        ],
        'content_type': ['text/html', 'text/html', 'application/json', 'application/json', None, 'text/html'],
        'response_code': [200, 200, 302, 200, 500, 200],
        'http_method': ['GET', 'GET', 'POST', 'POST', 'POST', 'GET'],
        'transaction_name': ['TBrowse', 'TLogin', 'TLogin', 'TOrder', 'TOrder', 'TLogin'],
        'agent_name': ['ac0001_00', 'ac0001_00', 'ac0001_00', 'ac0002_00', 'ac0002_00', 'ac0002_00'],
    })


@pytest.fixture
def empty_request_data():
    """Empty dataset for edge case testing."""
    return pd.DataFrame({
        'name': [],
        'url': [],
    })
