import pytest

from screens.lifecycle import ActivationEventArgs, DeactivationEventArgs, LifecycleStateMachine


class RecordingMachine(LifecycleStateMachine):
    def __init__(self):
        super().__init__()
        self.calls = []
        self.activated.connect(lambda args: self.calls.append(("activated", args)))
        self.deactivated.connect(lambda args: self.calls.append(("deactivated", args)))

    def on_initialize(self):
        self.calls.append("initialize")

    def on_activate(self):
        self.calls.append("activate")

    def on_deactivate(self, close):
        self.calls.append(("deactivate", close))


class FailingActivateMachine(LifecycleStateMachine):
    def on_activate(self):
        raise RuntimeError("activate fail")


def test_starts_fresh(qapp):
    machine = LifecycleStateMachine()
    assert not machine.is_initialized
    assert not machine.is_active


def test_first_activation_initializes_then_activates(qapp):
    machine = RecordingMachine()
    machine.activate()
    assert machine.is_initialized
    assert machine.is_active
    assert machine.calls == [
        "initialize",
        "activate",
        ("activated", ActivationEventArgs(was_initialized=True)),
    ]


def test_activate_twice_is_a_no_op(qapp):
    machine = RecordingMachine()
    machine.activate()
    changes = []
    machine.property_changed.connect(changes.append)
    machine.calls.clear()

    machine.activate()

    assert machine.calls == []
    assert changes == []


def test_deactivate_when_inactive_does_nothing(qapp):
    machine = RecordingMachine()
    changes = []
    machine.property_changed.connect(changes.append)
    machine.deactivate(False)
    assert machine.calls == []
    assert changes == []


def test_deactivate_runs_hook_before_signal(qapp):
    machine = RecordingMachine()
    machine.activate()
    machine.calls.clear()

    machine.deactivate(True)

    assert not machine.is_active
    assert machine.is_initialized
    assert machine.calls == [
        ("deactivate", True),
        ("deactivated", DeactivationEventArgs(was_closed=True)),
    ]


def test_initialize_hook_fires_once_across_cycles(qapp):
    machine = RecordingMachine()
    for _ in range(3):
        machine.activate()
        machine.deactivate(False)
        machine.deactivate(False)
    machine.activate()

    assert machine.calls.count("initialize") == 1
    assert machine.calls.count("activate") == 4
    activations = [c[1] for c in machine.calls if isinstance(c, tuple) and c[0] == "activated"]
    assert [a.was_initialized for a in activations] == [True, False, False, False]


def test_property_changes_fire_once_per_transition(qapp):
    machine = LifecycleStateMachine()
    changes = []
    machine.property_changed.connect(changes.append)

    machine.activate()
    machine.deactivate(False)
    machine.activate()

    assert changes == ["is_initialized", "is_active", "is_active", "is_active"]


def test_hook_failure_propagates_without_rollback(qapp):
    machine = FailingActivateMachine()
    events = []
    machine.activated.connect(events.append)

    with pytest.raises(RuntimeError, match="activate fail"):
        machine.activate()

    assert machine.is_initialized
    assert machine.is_active
    assert events == []


def test_reentrant_activation_from_handler_is_ignored(qapp):
    machine = RecordingMachine()
    machine.activated.connect(lambda _args: machine.activate())
    machine.activate()
    assert machine.calls.count("activate") == 1


def test_transitions_are_logged(qapp, caplog):
    machine = LifecycleStateMachine()
    with caplog.at_level("INFO", logger="screens.lifecycle"):
        machine.activate()
        machine.deactivate(True)
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("Activating ") for m in messages)
    assert any(m.startswith("Deactivating ") for m in messages)
    assert any(m.startswith("Closed ") for m in messages)
