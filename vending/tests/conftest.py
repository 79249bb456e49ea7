"""
Pytest configuration for vending machine tests.

This conftest.py adds the repository root to sys.path
so that tests can import the package without installing it.
"""

import sys
from pathlib import Path

import pytest


# Add the repository root to sys.path for proper imports
repo_root = Path(__file__).parent.parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


from vending.domain.transaction_state_machine import TransactionStateMachine  # noqa: E402
from vending.infrastructure.settings import MachineSettings, reset_settings  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings():
    """Rebuild default settings around every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def vm():
    """Create a machine with the canonical stock of 5 of everything."""
    return TransactionStateMachine()


@pytest.fixture
def empty_cash_vm():
    """Create a machine stocked with products but no coins."""
    return TransactionStateMachine(MachineSettings(initial_coin_stock=0))
