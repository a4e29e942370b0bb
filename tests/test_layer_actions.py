"""
Tests for LayerActions (UI-side layer operations) and the Notifier.
"""
from types import SimpleNamespace

import pytest

from actions.layer_actions import LayerActions
from models.transform import Vec2
from services.notifications import Notifier


@pytest.fixture
def notifier(messages):
    notifier = Notifier()
    notifier.add_sink(messages.append)
    return notifier


@pytest.fixture
def actions(notifier):
    from models.proof import ProofDocument
    window = SimpleNamespace(proof=ProofDocument(notify=notifier), notifier=notifier)
    return LayerActions(window)


class TestNotifier:

    def test_fan_out_and_history(self, notifier, messages):
        other = []
        notifier.add_sink(other.append)
        notifier("Hello")
        assert messages == ["Hello"]
        assert other == ["Hello"]
        assert notifier.last_message == "Hello"

    def test_history_is_bounded(self):
        notifier = Notifier(max_history=2)
        for text in ("a", "b", "c"):
            notifier.notify(text)
        assert notifier.history == ["b", "c"]

    def test_failing_sink_does_not_stop_others(self, notifier, messages):
        def broken(message):
            raise RuntimeError("sink down")

        notifier.remove_sink(messages.append)
        notifier.add_sink(broken)
        notifier.add_sink(messages.append)
        notifier("Still delivered")
        assert messages == ["Still delivered"]


class TestLayerActions:

    def test_select_unknown_reports(self, actions, messages):
        assert actions.select('ghost') is False
        assert messages[-1] == "Cannot select layer 'ghost': no such layer"
        assert actions.proof.active_layer_uuid == 'background-1'

    def test_locked_layer_refuses_transform(self, actions, messages):
        actions.toggle_lock('design-1')
        assert actions.update('design-1', position=(1, 1)) is False
        assert messages[-1] == "Front Logo is locked"
        assert actions.proof.get_layer_position('design-1') == Vec2(616, 378)

    def test_locked_layer_allows_opacity_and_content(self, actions):
        actions.toggle_lock('design-1')
        assert actions.update('design-1', opacity=50) is True
        assert actions.update('design-1', content={'placement': 'back'}) is True
        assert actions.proof.get_layer_content('design-1') == {'placement': 'back'}

    def test_invalid_value_reported(self, actions, messages):
        assert actions.update('design-1', size=(0, 0)) is False
        assert messages[-1] == "Layer size must be positive, got 0x0"

    def test_nudge_active(self, actions):
        actions.select('product-1')
        assert actions.nudge_active(-10, 1)
        assert actions.proof.get_layer_position('product-1') == Vec2(406, 129)

    def test_nudge_without_selection(self, actions):
        actions.clear_selection()
        assert actions.nudge_active(1, 0) is False

    def test_rotate_wraps(self, actions):
        actions.select('design-1')
        for _ in range(5):
            actions.rotate_active(90)
        assert actions.proof.get_layer_rotation('design-1') == 90

    def test_rotate_negative(self, actions):
        actions.select('design-1')
        actions.rotate_active(-90)
        assert actions.proof.get_layer_rotation('design-1') == -90

    def test_flip(self, actions):
        actions.select('design-1')
        actions.flip_active('x')
        actions.flip_active('y')
        actions.flip_active('y')
        layer = actions.proof.get_layer('design-1')
        assert layer['flip_x'] is True
        assert layer['flip_y'] is False

    def test_delete_active(self, actions, messages):
        assert actions.delete_active() is True
        assert messages[-1] == "Deleted Business Background"
        assert actions.delete_active() is False

    def test_add_layer_above_active_and_select(self, actions):
        uuid = actions.add_layer('design')
        assert actions.proof.get_all_layer_uuids()[1] == uuid
        assert actions.proof.active_layer_uuid == uuid

    def test_shift_unknown_reports(self, actions, messages):
        assert actions.shift_up('ghost') is False
        assert messages[-1] == "Layer with UUID 'ghost' not found"
