"""Pytest fixtures for heirloom tests."""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from heirloom.adapters.memory import InMemoryWorld
from heirloom.api import InheritanceAPI
from heirloom.application.services import (
    EstateValuationService,
    HeirResolver,
    InheritancePreviewer,
    PropertyValuationService,
    ShareProvider,
    ShareStore,
)
from heirloom.core.settings import HeirloomSettings

FIXED_MS = 1_700_000_000_000


@pytest.fixture
def family_data():
    """Deceased lord (cash 1000, 2 farmland = 500) with two living children,
    one dead child and an unrelated character."""
    return [
        {"id": "lord", "cash": 1000, "propertyDetails": {"farmland": 2}, "age": 62, "isDead": True},
        {"id": "young", "fatherId": "lord", "age": 10},
        {"id": "old", "motherId": "lord", "age": 20},
        {"id": "buried", "parentId": "lord", "age": 30, "isDead": True},
        {"id": "stranger", "age": 40},
    ]


@pytest.fixture
def world(family_data):
    return InMemoryWorld(characters=family_data)


@pytest.fixture
def settings():
    return HeirloomSettings(_env_file=None)


@pytest.fixture
def api(world, settings):
    return InheritanceAPI.from_world(world, settings=settings)


@pytest.fixture
def resolver(world):
    return HeirResolver(world)


@pytest.fixture
def store(world, resolver):
    return ShareStore(resolver, world, world, clock=lambda: FIXED_MS)


@pytest.fixture
def provider(store, resolver):
    return ShareProvider(store, resolver)


@pytest.fixture
def previewer(world, provider, resolver):
    estate = EstateValuationService(world, PropertyValuationService(world))
    return InheritancePreviewer(estate, provider, resolver)
