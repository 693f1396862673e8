import os

import pytest


@pytest.fixture(scope="session")
def _registration_domain(request):
    """Initialize the registration domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from registration.domain import registration

    registration.init()
    return registration


@pytest.fixture(scope="session", autouse=True)
def setup_db(_registration_domain):
    from registration.utils.db import drop_db, setup_db

    setup_db(_registration_domain)

    yield

    drop_db(_registration_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_registration_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _registration_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    ctx.pop()


@pytest.fixture()
def store(_registration_domain):
    from registration.device.repository import build_store

    return build_store(_registration_domain)


@pytest.fixture()
def directory(store):
    from registration.device.directory import RegistrationDirectory

    return RegistrationDirectory(store)
