"""Shared BDD fixtures and step definitions for the Tracking domain."""

import pytest
from pytest_bdd import given, parsers, then
from tracking.lifecycle.state_machine import InvalidTransition, TerminalState
from tracking.timeline.timeline import append_event, get_timeline


@pytest.fixture()
def error():
    """Container for captured transition errors."""
    return {"exc": None}


@given(parsers.cfparse('an order "{order_id}" at {status}'), target_fixture="order")
def order_at(order_id, status):
    append_event(order_id, "ORDER", status)
    return {"id": order_id, "status": status}


@then(parsers.cfparse("the order status is {status}"))
def order_status_is(order, status):
    assert order["status"] == status


@then(parsers.cfparse('the timeline of "{order_id}" reads "{statuses}"'))
def timeline_reads(order_id, statuses):
    expected = [s.strip() for s in statuses.split(",")]
    assert [te.status for te in get_timeline(order_id)] == expected


@then("the move is refused as terminal")
def refused_as_terminal(error):
    assert isinstance(error["exc"], TerminalState)


@then("the move is refused as invalid")
def refused_as_invalid(error):
    assert isinstance(error["exc"], InvalidTransition)
