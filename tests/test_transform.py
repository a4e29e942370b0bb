"""
Tests for proof geometry and the Vec2/Size value types.
"""
import pytest

from models.transform import ProofGeometry, Vec2, Size


class TestProofGeometry:

    def test_default_pixel_size(self):
        geometry = ProofGeometry()
        assert geometry.width_px == 1632
        assert geometry.height_px == 1056

    def test_display_size(self):
        geometry = ProofGeometry()
        assert geometry.display_width == 680
        assert geometry.display_height == 440
        assert geometry.display_scale == pytest.approx(680 / 1632)

    def test_label(self):
        assert ProofGeometry().label == '17" × 11"'

    def test_from_config_partial(self):
        geometry = ProofGeometry.from_config({'dpi': 300})
        assert geometry.width_px == 17 * 300
        assert geometry.height_in == 11

    def test_from_config_empty(self):
        assert ProofGeometry.from_config(None) == ProofGeometry()
        assert ProofGeometry.from_config({}) == ProofGeometry()

    @pytest.mark.parametrize("kwargs", [
        {'width_in': 0},
        {'height_in': -1},
        {'dpi': 0},
        {'display_width': 0},
        {'dpi': float('inf')},
        {'width_in': float('nan')},
    ])
    def test_invalid_geometry(self, kwargs):
        with pytest.raises(ValueError):
            ProofGeometry(**kwargs)

    def test_from_config_rejects_non_object(self):
        with pytest.raises(TypeError):
            ProofGeometry.from_config([17, 11])

    def test_from_config_rejects_text_values(self):
        with pytest.raises(TypeError):
            ProofGeometry.from_config({'dpi': '96'})

    def test_geometry_is_immutable(self):
        geometry = ProofGeometry()
        with pytest.raises(AttributeError):
            geometry.dpi = 300


class TestValueTypes:

    def test_unpacking(self):
        x, y = Vec2(3, 4)
        width, height = Size(5, 6)
        assert (x, y, width, height) == (3, 4, 5, 6)

    def test_equality(self):
        assert Vec2(1, 2) == Vec2(1, 2)
        assert tuple(Size(1, 2)) == (1, 2)
