"""
Shared pytest fixtures for the SeedVault test suite.

Vault fixtures use a low PBKDF2 iteration count to keep the suite fast. Each
record stores its own count, so the protocol is the same as in production.
"""

import pytest

from seedvault.storage import JsonFileStore, MemoryStore
from seedvault.vault import SecretVault

FAST_ITERATIONS = 1000

PHRASE = ("abandon ability able about above absent absorb abstract "
          "absurd abuse access accident")
PASSWORD = "correct-horse-battery-staple"


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def file_store(tmp_path):
    return JsonFileStore(str(tmp_path / "seedvault" / "vault.json"))


@pytest.fixture
def vault(memory_store):
    return SecretVault(memory_store, iterations=FAST_ITERATIONS)
