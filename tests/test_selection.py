"""
Tests for active layer selection on ProofDocument.
"""
import pytest

from models.errors import InvalidSelectionError


class TestSelectLayer:

    def test_select_existing(self, proof, messages):
        proof.select_layer('product-1')
        assert proof.active_layer_uuid == 'product-1'
        assert proof.is_active('product-1')
        assert not proof.is_active('background-1')
        assert messages[-1] == "Selected Product Photo"

    def test_select_unknown_keeps_selection(self, proof, events):
        with pytest.raises(InvalidSelectionError):
            proof.select_layer('ghost')
        assert proof.active_layer_uuid == 'background-1'
        assert events == []

    def test_invalid_selection_is_value_error(self, proof):
        with pytest.raises(ValueError):
            proof.select_layer('ghost')

    def test_reselect_notifies_without_change_event(self, proof, messages, events):
        proof.select_layer('background-1')
        assert messages[-1] == "Selected Business Background"
        assert events == []
        assert proof.version == 0

    def test_select_hidden_or_locked_layer(self, proof):
        proof.toggle_layer_visibility('design-1')
        proof.toggle_layer_lock('design-1')
        proof.select_layer('design-1')
        assert proof.active_layer_uuid == 'design-1'

    def test_select_emits_change(self, proof, events):
        proof.select_layer('design-1')
        assert events == [('selection_changed', 'design-1')]


class TestClearSelection:

    def test_clear(self, proof, events):
        proof.clear_selection()
        assert proof.active_layer_uuid is None
        assert proof.get_active_layer() is None
        assert events == [('selection_changed', None)]

    def test_clear_when_empty_is_noop(self, proof, events):
        proof.clear_selection()
        proof.clear_selection()
        assert len(events) == 1

    def test_is_active_none(self, proof):
        proof.clear_selection()
        assert not proof.is_active(None)


class TestActiveLayer:

    def test_get_active_layer(self, proof):
        layer = proof.get_active_layer()
        assert layer['uuid'] == 'background-1'
        assert layer['kind'] == 'background'

    def test_active_layer_always_valid(self, proof):
        proof.select_layer('design-1')
        proof.remove_layer('design-1')
        assert proof.active_layer_uuid is None
        proof.select_layer('product-1')
        proof.remove_layer('background-1')
        assert proof.active_layer_uuid == 'product-1'
        assert proof.has_layer_uuid(proof.active_layer_uuid)
