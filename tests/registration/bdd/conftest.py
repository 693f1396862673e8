"""Shared BDD fixtures and step definitions for the Registration domain."""

import pytest
from pytest_bdd import given, parsers, then


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


def _split(tokens):
    return [token.strip() for token in tokens.split(",") if token.strip()]


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("an empty directory")
def empty_directory(store):
    assert store.list(1000) == []


@given(parsers.cfparse('device "{reg_id}" is registered'))
def device_is_registered(directory, reg_id):
    directory.register(reg_id)


@given(parsers.cfparse('devices "{tokens}" are registered'))
def devices_are_registered(directory, tokens):
    for reg_id in _split(tokens):
        directory.register(reg_id)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("no error was raised")
def no_error_was_raised(error):
    assert error["exc"] is None


@then(parsers.cfparse('the directory holds {count:d} record for "{reg_id}"'))
@then(parsers.cfparse('the directory holds {count:d} records for "{reg_id}"'))
def directory_holds_records_for(store, count, reg_id):
    assert sum(1 for r in store.list(1000) if r.reg_id == reg_id) == count


@then(parsers.cfparse("the directory holds {count:d} record in total"))
@then(parsers.cfparse("the directory holds {count:d} records in total"))
def directory_holds_in_total(store, count):
    assert len(store.list(1000)) == count
