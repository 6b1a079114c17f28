from types import SimpleNamespace
from unittest import mock

import pytest
from pyVmomi import vim


class FakeContainerView(object):
    def __init__(self, objs):
        self.view = list(objs)
        self.destroyed = False

    def Destroy(self):
        self.destroyed = True


class FakeViewManager(object):
    """Hands out container views over a fixed inventory, filtered by type."""

    def __init__(self, inventory):
        self.inventory = inventory
        self.views = []

    def CreateContainerView(self, container, type, recursive):
        objs = []
        for t in type:
            objs.extend(self.inventory.get(t, []))
        view = FakeContainerView(objs)
        self.views.append(view)
        return view


class FakePropertyCollector(object):
    """Replays a scripted list of WaitForUpdatesEx results."""

    def __init__(self, updates):
        self.updates = list(updates)
        self.filter_specs = []
        self.filters = []
        self.wait_calls = []

    def CreateFilter(self, spec, partialUpdates):
        self.filter_specs.append(spec)
        f = mock.MagicMock(name="PropertyFilter")
        self.filters.append(f)
        return f

    def WaitForUpdatesEx(self, version, options=None):
        self.wait_calls.append((version, options))
        if not self.updates:
            return None
        return self.updates.pop(0)


def make_update(version, *changes):
    """changes are (name, val) or (name, val, op) tuples."""
    change_set = []
    for c in changes:
        op = c[2] if len(c) > 2 else "assign"
        change_set.append(SimpleNamespace(name=c[0], val=c[1], op=op))
    obj_set = SimpleNamespace(obj=None, changeSet=change_set)
    return SimpleNamespace(version=version,
                           filterSet=[SimpleNamespace(objectSet=[obj_set])])


def make_context(inventory=None, updates=()):
    return SimpleNamespace(
        rootFolder=mock.sentinel.rootFolder,
        viewManager=FakeViewManager(inventory or {}),
        propertyCollector=FakePropertyCollector(updates))


def success_updates():
    return [make_update("1", ("info.state", vim.TaskInfo.State.running),
                        ("info.error", None)),
            make_update("2", ("info.state", vim.TaskInfo.State.success))]


@pytest.fixture
def task():
    return vim.Task("task-42")


@pytest.fixture
def datastore():
    return vim.Datastore("datastore-11")
