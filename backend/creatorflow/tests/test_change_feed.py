"""
Tests for the change feed, document store echo and in-memory projection.
"""
from datetime import date
import pytest
from creatorflow.core.errors import NotFoundError, PersistenceError
from creatorflow.services.change_feed import ChangeFeed
from creatorflow.services.projection import Projection


def test_subscriber_receives_snapshot_after_commit(store, feed):
    received = []
    feed.subscribe("tasks", lambda name, snapshot: received.append((name, snapshot)))

    store.create("tasks", title="Book studio", due_date=date(2026, 10, 20))

    assert len(received) == 1
    name, snapshot = received[0]
    assert name == "tasks"
    assert [doc["title"] for doc in snapshot] == ["Book studio"]


def test_unsubscribed_handler_is_not_called():
    feed = ChangeFeed()
    calls = []
    unsubscribe = feed.subscribe("projects", lambda name, snapshot: calls.append(snapshot))
    feed.publish("projects", [{"id": 1}])
    unsubscribe()
    feed.publish("projects", [{"id": 2}])
    assert calls == [[{"id": 1}]]
    assert feed.has_subscribers("projects") is False


def test_failing_handler_does_not_block_others():
    feed = ChangeFeed()
    calls = []

    def broken(name, snapshot):
        raise RuntimeError("boom")

    feed.subscribe("tasks", broken)
    feed.subscribe("tasks", lambda name, snapshot: calls.append(snapshot))
    feed.publish("tasks", [])
    assert calls == [[]]


def test_snapshot_is_in_arrival_order(store):
    for name in ["Zed", "Amy", "Mo"]:
        store.create("influencers", name=name)
    assert [doc["name"] for doc in store.snapshot("influencers")] == ["Zed", "Amy", "Mo"]


def test_projection_mirrors_committed_state(store, feed):
    projection = Projection()
    projection.attach(feed)

    alex = store.create("influencers", name="Alex Rivera", followers=1250000)
    store.create("influencers", name="Sarah Chen", followers=890000)
    store.update("influencers", alex.id, {"followers": 1300000})

    assert [doc["name"] for doc in projection.get("influencers")] == ["Alex Rivera", "Sarah Chen"]
    assert projection.find("influencers", alex.id)["followers"] == 1300000

    store.delete("influencers", alex.id)
    assert projection.find("influencers", alex.id) is None

    projection.detach()
    store.create("influencers", name="Late Arrival")
    assert len(projection.get("influencers")) == 1


def test_unknown_collection(store):
    with pytest.raises(NotFoundError):
        store.snapshot("advertisers")
    with pytest.raises(NotFoundError):
        store.get("tasks", 404)


def test_failed_write_is_rolled_back(store, feed):
    received = []
    feed.subscribe("tasks", lambda name, snapshot: received.append(snapshot))

    with pytest.raises(PersistenceError):
        store.create("tasks", title=None, due_date=None)

    assert received == []
    assert store.list_documents("tasks") == []
