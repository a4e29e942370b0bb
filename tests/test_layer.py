"""
Unit tests for Layer and Layers classes

Tests cover:
- UUID generation and persistence
- Defaults per layer kind
- Field validation (clamping, positive size, content choices)
- Layers collection operations
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

import unittest
from models.proof import Layer, Layers, LayerKind
from models.errors import OutOfRangeError
from models.transform import Vec2, Size


class TestLayerCreation(unittest.TestCase):
    """Tests for Layer construction"""

    def test_uuid_generated(self):
        layer1 = Layer()
        layer2 = Layer()
        self.assertTrue(layer1.uuid)
        self.assertNotEqual(layer1.uuid, layer2.uuid)

    def test_uuid_preserved(self):
        layer = Layer({'uuid': 'product-1', 'kind': 'product'})
        self.assertEqual(layer.uuid, 'product-1')

    def test_default_kind_is_design(self):
        layer = Layer()
        self.assertEqual(layer.kind, LayerKind.DESIGN)
        self.assertEqual(layer.content, {'placement': 'front'})

    def test_defaults(self):
        layer = Layer({'kind': 'background'})
        self.assertTrue(layer.visible)
        self.assertFalse(layer.locked)
        self.assertEqual(layer.opacity, 100)
        self.assertEqual(layer.rotation, 0)
        self.assertIsNone(layer.image_ref)
        self.assertEqual(layer.position, Vec2(0, 0))
        self.assertEqual(layer.size, Size(400, 300))
        self.assertEqual(layer.content, {'fill': 'color', 'company_name': '', 'tagline': ''})

    def test_name_falls_back_to_kind_label(self):
        self.assertEqual(Layer({'kind': 'product'}).name, 'Product Photo')
        self.assertEqual(Layer({'kind': 'product', 'name': 'Mug'}).name, 'Mug')

    def test_unknown_kind_rejected(self):
        with self.assertRaises(ValueError):
            Layer({'kind': 'sticker'})

    def test_partial_content_keeps_defaults(self):
        layer = Layer({'kind': 'background', 'content': {'company_name': 'Acme'}})
        self.assertEqual(layer.content['company_name'], 'Acme')
        self.assertEqual(layer.content['fill'], 'color')


class TestLayerValidation(unittest.TestCase):
    """Tests for normalize_changes / apply_changes"""

    def setUp(self):
        self.layer = Layer({'kind': 'design'})

    def test_opacity_clamped(self):
        self.assertEqual(self.layer.normalize_changes({'opacity': 150})['opacity'], 100)
        self.assertEqual(self.layer.normalize_changes({'opacity': -5})['opacity'], 0)
        self.assertEqual(self.layer.normalize_changes({'opacity': 49.6})['opacity'], 50)

    def test_rotation_clamped(self):
        self.assertEqual(self.layer.normalize_changes({'rotation': 720})['rotation'], 360)
        self.assertEqual(self.layer.normalize_changes({'rotation': -400})['rotation'], -360)

    def test_infinite_values_clamped(self):
        changes = self.layer.normalize_changes({'opacity': float('inf'), 'rotation': float('-inf')})
        self.assertEqual(changes['opacity'], 100)
        self.assertEqual(changes['rotation'], -360)

    def test_nan_rejected(self):
        with self.assertRaises(OutOfRangeError):
            self.layer.normalize_changes({'opacity': float('nan')})

    def test_non_finite_size_and_position_rejected(self):
        with self.assertRaises(OutOfRangeError):
            self.layer.normalize_changes({'size': (float('inf'), 100)})
        with self.assertRaises(OutOfRangeError):
            self.layer.normalize_changes({'position': ('left', 0)})

    def test_non_numeric_opacity_rejected(self):
        with self.assertRaises(OutOfRangeError):
            self.layer.normalize_changes({'opacity': 'opaque'})

    def test_size_must_be_positive(self):
        with self.assertRaises(OutOfRangeError):
            self.layer.normalize_changes({'size': (0, 100)})
        with self.assertRaises(OutOfRangeError):
            self.layer.normalize_changes({'size': (100, -1)})

    def test_unknown_field_rejected(self):
        with self.assertRaises(ValueError):
            self.layer.normalize_changes({'kind': 'product'})

    def test_invalid_content_choice_rejected(self):
        with self.assertRaises(ValueError):
            self.layer.normalize_changes({'content': {'placement': 'sleeve'}})

    def test_foreign_content_key_rejected(self):
        with self.assertRaises(ValueError):
            self.layer.normalize_changes({'content': {'tagline': 'Hello'}})

    def test_normalize_does_not_mutate(self):
        self.layer.normalize_changes({'position': (10, 20), 'opacity': 10})
        self.assertEqual(self.layer.position, Vec2(0, 0))
        self.assertEqual(self.layer.opacity, 100)

    def test_apply_changes(self):
        self.layer.apply_changes(self.layer.normalize_changes({'position': (10, 20), 'flip_x': 1}))
        self.assertEqual(self.layer.position, Vec2(10, 20))
        self.assertTrue(self.layer.flip_x)


class TestLayerExport(unittest.TestCase):

    def test_to_dict_is_detached(self):
        layer = Layer({'kind': 'background'})
        data = layer.to_dict()
        data['content']['company_name'] = 'Changed'
        data['opacity'] = 0
        self.assertEqual(layer.content['company_name'], '')
        self.assertEqual(layer.opacity, 100)

    def test_to_dict_uses_tuples(self):
        data = Layer({'position': (5, 6), 'size': (7, 8)}).to_dict()
        self.assertEqual(data['position'], (5, 6))
        self.assertEqual(data['size'], (7, 8))

    def test_round_trip_through_constructor(self):
        original = Layer({'kind': 'product', 'name': 'Shirt', 'content': {'product_type': 'T-Shirt'}})
        copy = Layer(original.to_dict())
        self.assertEqual(copy.to_dict(), original.to_dict())


class TestLayers(unittest.TestCase):
    """Tests for Layers collection"""

    def setUp(self):
        self.layers = Layers([
            {'uuid': 'a', 'kind': 'background'},
            {'uuid': 'b', 'kind': 'product'},
            {'uuid': 'c', 'kind': 'design'},
        ])

    def test_order_and_lookup(self):
        self.assertEqual(len(self.layers), 3)
        self.assertEqual(self.layers.uuids(), ['a', 'b', 'c'])
        self.assertEqual(self.layers.get_index_by_uuid('c'), 2)
        self.assertIsNone(self.layers.get_index_by_uuid('missing'))
        self.assertIn('b', self.layers)
        self.assertNotIn('missing', self.layers)

    def test_duplicate_uuid_rejected(self):
        with self.assertRaises(ValueError):
            self.layers.append(Layer({'uuid': 'a'}))

    def test_non_layer_rejected(self):
        with self.assertRaises(TypeError):
            self.layers.append({'uuid': 'd'})

    def test_move(self):
        self.layers.move(0, 2)
        self.assertEqual(self.layers.uuids(), ['b', 'c', 'a'])

    def test_remove_keeps_relative_order(self):
        self.layers.remove(self.layers.get_by_uuid('b'))
        self.assertEqual(self.layers.uuids(), ['a', 'c'])


if __name__ == '__main__':
    unittest.main()
