"""
Tests for the ProofDocument layer store: seed state, CRUD, ordering,
change listeners, snapshots and hit testing.
"""
import pytest

from models.proof import ProofDocument, LayerKind
from models.errors import LayerNotFoundError, OutOfRangeError
from models.transform import Vec2, Size


class TestSeedState:

    def test_seed_layers_in_paint_order(self, proof):
        assert proof.get_all_layer_uuids() == ['background-1', 'product-1', 'design-1']

    def test_seed_active_layer(self, proof):
        assert proof.active_layer_uuid == 'background-1'

    def test_seed_kinds(self, proof):
        assert proof.get_layer_kind('background-1') == LayerKind.BACKGROUND
        assert proof.get_layer_kind('product-1') == LayerKind.PRODUCT
        assert proof.get_layer_kind('design-1') == LayerKind.DESIGN

    def test_background_covers_proof(self, proof):
        assert proof.get_layer_position('background-1') == Vec2(0, 0)
        assert proof.get_layer_size('background-1') == Size(proof.geometry.width_px, proof.geometry.height_px)

    def test_seed_layers_visible_and_unlocked(self, proof):
        for uuid in proof.get_all_layer_uuids():
            assert proof.is_layer_visible(uuid)
            assert not proof.is_layer_locked(uuid)
            assert proof.get_layer_opacity(uuid) == 100

    def test_index_lookups(self, proof):
        assert proof.get_layer_index_by_uuid('product-1') == 1
        assert proof.get_layer_index_by_uuid('ghost') is None
        assert proof.get_uuid_at_index(2) == 'design-1'
        assert proof.get_uuid_at_index(3) is None
        assert proof.get_uuid_at_index(-1) is None

    def test_version_starts_at_zero(self, proof):
        assert proof.version == 0

    def test_unknown_initial_active_is_dropped(self):
        proof = ProofDocument(active_layer_uuid='nope')
        assert proof.active_layer_uuid is None


class TestUpdateLayer:

    def test_partial_update_leaves_other_fields(self, proof):
        before = proof.get_layer('product-1')
        proof.update_layer('product-1', position=(10, 20))
        after = proof.get_layer('product-1')
        assert after['position'] == (10, 20)
        for field in ('size', 'opacity', 'rotation', 'name', 'visible', 'locked', 'content'):
            assert after[field] == before[field]

    def test_update_unknown_layer(self, proof):
        with pytest.raises(LayerNotFoundError) as exc_info:
            proof.update_layer('ghost', opacity=10)
        assert exc_info.value.uuid == 'ghost'

    def test_update_is_all_or_nothing(self, proof):
        with pytest.raises(OutOfRangeError):
            proof.update_layer('design-1', position=(1, 1), size=(0, 10))
        assert proof.get_layer_position('design-1') == Vec2(616, 378)
        assert proof.version == 0

    def test_opacity_clamped(self, proof):
        proof.update_layer('design-1', opacity=250)
        assert proof.get_layer_opacity('design-1') == 100

    def test_infinite_opacity_clamped(self, proof):
        proof.update_layer('product-1', opacity=float('inf'))
        assert proof.get_layer_opacity('product-1') == 100

    def test_empty_update_is_noop(self, proof, events):
        proof.update_layer('design-1')
        assert events == []
        assert proof.version == 0

    def test_content_update_merges(self, proof):
        proof.update_layer('background-1', content={'company_name': 'Acme'})
        proof.update_layer('background-1', content={'tagline': 'Best mugs'})
        content = proof.get_layer_content('background-1')
        assert content == {'fill': 'color', 'company_name': 'Acme', 'tagline': 'Best mugs'}

    def test_locked_layer_still_editable_through_model(self, proof):
        proof.toggle_layer_lock('design-1')
        proof.update_layer('design-1', position=(1, 2))
        assert proof.get_layer_position('design-1') == Vec2(1, 2)

    def test_set_layer_image(self, proof):
        proof.set_layer_image('product-1', '/tmp/mug.png')
        assert proof.get_layer_image('product-1') == '/tmp/mug.png'
        proof.set_layer_image('product-1', None)
        assert proof.get_layer_image('product-1') is None


class TestToggles:

    def test_toggle_visibility_twice_restores(self, proof):
        assert proof.toggle_layer_visibility('product-1') is False
        assert proof.toggle_layer_visibility('product-1') is True

    def test_toggle_lock_twice_restores(self, proof):
        assert proof.toggle_layer_lock('product-1') is True
        assert proof.toggle_layer_lock('product-1') is False

    def test_toggle_unknown_layer(self, proof):
        with pytest.raises(LayerNotFoundError):
            proof.toggle_layer_visibility('ghost')
        with pytest.raises(LayerNotFoundError):
            proof.toggle_layer_lock('ghost')


class TestRemoveLayer:

    def test_remove_keeps_order(self, proof):
        proof.remove_layer('product-1')
        assert proof.get_all_layer_uuids() == ['background-1', 'design-1']

    def test_remove_active_clears_selection(self, proof):
        proof.remove_layer('background-1')
        assert proof.active_layer_uuid is None

    def test_remove_other_keeps_selection(self, proof):
        proof.remove_layer('design-1')
        assert proof.active_layer_uuid == 'background-1'

    def test_remove_notifies(self, proof, messages):
        proof.remove_layer('design-1')
        assert messages[-1] == "Deleted Front Logo"

    def test_remove_unknown(self, proof):
        with pytest.raises(LayerNotFoundError):
            proof.remove_layer('ghost')
        assert proof.get_layer_count() == 3

    def test_remove_all_layers(self, proof):
        for uuid in proof.get_all_layer_uuids():
            proof.remove_layer(uuid)
        assert proof.get_layer_count() == 0
        assert proof.active_layer_uuid is None
        assert proof.find_topmost_layer_at(10, 10) is None


class TestAddAndOrder:

    def test_add_layer_on_top(self, proof, messages):
        uuid = proof.add_layer('design', name='Back Logo')
        assert proof.get_all_layer_uuids()[-1] == uuid
        assert proof.get_layer_name(uuid) == 'Back Logo'
        assert messages[-1] == "Added Back Logo"

    def test_add_layer_above_target(self, proof):
        uuid = proof.add_layer('product', target_uuid='background-1')
        assert proof.get_all_layer_uuids() == ['background-1', uuid, 'product-1', 'design-1']

    def test_add_layer_unknown_target(self, proof):
        with pytest.raises(LayerNotFoundError):
            proof.add_layer('design', target_uuid='ghost')
        assert proof.get_layer_count() == 3

    def test_add_to_empty_proof(self, empty_proof):
        uuid = empty_proof.add_layer(LayerKind.BACKGROUND)
        assert empty_proof.get_all_layer_uuids() == [uuid]
        assert empty_proof.get_layer_name(uuid) == 'Business Background'

    def test_shift_up_and_down(self, proof):
        assert proof.shift_layer_up('background-1') is True
        assert proof.get_all_layer_uuids() == ['product-1', 'background-1', 'design-1']
        assert proof.shift_layer_down('background-1') is True
        assert proof.get_all_layer_uuids() == ['background-1', 'product-1', 'design-1']

    def test_shift_at_edges(self, proof):
        assert proof.shift_layer_up('design-1') is False
        assert proof.shift_layer_down('background-1') is False
        assert proof.version == 0


class TestListeners:

    def test_listener_sees_completed_mutation(self, proof):
        seen = []

        def listener(event, uuid):
            seen.append((event, uuid, proof.get_layer_opacity('design-1'), proof.version))

        proof.add_listener(listener)
        proof.update_layer('design-1', opacity=40)
        assert seen == [('layer_updated', 'design-1', 40, 1)]

    def test_events(self, proof, events):
        uuid = proof.add_layer('design')
        proof.shift_layer_down(uuid)
        proof.select_layer(uuid)
        proof.remove_layer(uuid)
        assert events == [
            ('layer_added', uuid),
            ('layers_reordered', uuid),
            ('selection_changed', uuid),
            ('layer_removed', uuid),
        ]

    def test_version_bumps_once_per_mutation(self, proof):
        proof.update_layer('design-1', opacity=10, rotation=45, position=(1, 1))
        assert proof.version == 1
        proof.toggle_layer_visibility('design-1')
        assert proof.version == 2

    def test_failing_listener_does_not_break_others(self, proof):
        seen = []

        def broken(event, uuid):
            raise RuntimeError("boom")

        proof.add_listener(broken)
        proof.add_listener(lambda event, uuid: seen.append(event))
        proof.toggle_layer_lock('product-1')
        assert seen == ['layer_updated']
        assert proof.is_layer_locked('product-1')

    def test_remove_listener(self, proof):
        seen = []
        listener = lambda event, uuid: seen.append(event)  # noqa: E731
        proof.add_listener(listener)
        proof.remove_listener(listener)
        proof.toggle_layer_lock('product-1')
        assert seen == []

    def test_failed_mutation_does_not_notify(self, proof, events):
        with pytest.raises(LayerNotFoundError):
            proof.update_layer('ghost', opacity=1)
        assert events == []


class TestSnapshot:

    def test_snapshot_contents(self, proof):
        snapshot = proof.get_snapshot()
        assert snapshot['version'] == 0
        assert snapshot['active_layer_uuid'] == 'background-1'
        assert snapshot['geometry'] == proof.geometry
        assert [layer['uuid'] for layer in snapshot['layers']] == proof.get_all_layer_uuids()

    def test_snapshot_is_detached(self, proof):
        snapshot = proof.get_snapshot()
        snapshot['layers'][0]['opacity'] = 0
        snapshot['layers'][0]['content']['company_name'] = 'Hacked'
        snapshot['layers'].pop()
        assert proof.get_layer_opacity('background-1') == 100
        assert proof.get_layer_content('background-1')['company_name'] == ''
        assert proof.get_layer_count() == 3

    def test_get_layer_is_detached(self, proof):
        data = proof.get_layer('design-1')
        data['name'] = 'Other'
        assert proof.get_layer_name('design-1') == 'Front Logo'


class TestHitTesting:

    def test_topmost_wins(self, sample_proof):
        assert sample_proof.find_topmost_layer_at(90, 90) == 'top'
        assert sample_proof.find_topmost_layer_at(60, 60) == 'middle'
        assert sample_proof.find_topmost_layer_at(10, 10) == 'bottom'

    def test_hidden_layers_skipped(self, sample_proof):
        sample_proof.toggle_layer_visibility('top')
        assert sample_proof.find_topmost_layer_at(90, 90) == 'middle'

    def test_miss(self, sample_proof):
        assert sample_proof.find_topmost_layer_at(500, 500) is None
