"""Tests for resolve(), Palette and the discrete accessors."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tableau_plots import (
    REGISTRY,
    InsufficientPaletteCapacityError,
    Palette,
    PaletteNotFoundError,
    TableauPaletteError,
    VariantNotRecognizedError,
    palette_names,
    resolve,
    tableau_color_pal,
    tableau_shape_pal,
)
from tableau_plots.palettes import check_pal_n

ALL_TABLES = list(REGISTRY)

tables = st.sampled_from(ALL_TABLES)
directions = st.one_of(st.integers(-5, 5), st.floats(-2.0, 2.0, allow_nan=False))


class TestResolve:
    """Test resolve()."""

    def test_tableau_10_capacity(self):
        pal = resolve("color", "regular", "Tableau 10")
        assert isinstance(pal, Palette)
        assert pal.max_n == 10
        assert pal.name == "Tableau 10"

    def test_accepts_enum_members(self, registry):
        from tableau_plots import ColorVariant, Family

        pal = resolve(Family.COLOR, ColorVariant.ORDERED_SEQUENTIAL, "Blue")
        assert pal.values == registry.get("color", "ordered-sequential", "Blue").values

    @given(tables)
    def test_max_n_matches_table_length(self, table):
        pal = resolve(table.family, table.variant, table.name)
        assert pal.max_n == len(table.values)

    def test_unknown_name_lists_every_valid_name(self):
        with pytest.raises(PaletteNotFoundError) as excinfo:
            resolve("color", "regular", "does-not-exist")

        expected = palette_names("color", "regular")
        assert list(excinfo.value.valid_names) == expected
        assert set(excinfo.value.valid_names) == set(REGISTRY.names("color", "regular"))
        message = str(excinfo.value)
        for name in expected:
            assert name in message
        assert "does-not-exist" in message

    def test_unknown_name_is_a_key_error(self):
        with pytest.raises(KeyError):
            resolve("color", "ordered-diverging", "Blue")

    @pytest.mark.parametrize("variant", ["ordered-seqential", "Regular", "reg", "", None])
    def test_unrecognised_variant(self, variant):
        with pytest.raises(VariantNotRecognizedError) as excinfo:
            resolve("color", variant, "Tableau 10")
        assert set(excinfo.value.valid_variants) == {
            "regular", "ordered-sequential", "ordered-diverging",
        }

    def test_shape_variant_not_valid_for_colors(self):
        with pytest.raises(VariantNotRecognizedError):
            resolve("color", "filled", "filled")

    def test_unknown_family(self):
        with pytest.raises(VariantNotRecognizedError):
            resolve("size", "regular", "Tableau 10")

    def test_errors_share_a_base_class(self):
        for call in (
            lambda: resolve("color", "regular", "nope"),
            lambda: resolve("color", "nope", "Tableau 10"),
            lambda: resolve("color", "regular", "Tableau 10")(11),
        ):
            with pytest.raises(TableauPaletteError):
                call()

    def test_uses_supplied_registry(self, small_registry):
        pal = resolve("color", "regular", "Three", registry=small_registry)
        assert pal.max_n == 3
        with pytest.raises(PaletteNotFoundError) as excinfo:
            resolve("color", "regular", "Tableau 10", registry=small_registry)
        assert excinfo.value.valid_names == ("Three", "One")

    def test_logs_resolution(self, log_records):
        resolve("color", "regular", "Tableau 10", direction=-1)
        messages = [r["message"] for r in log_records]
        assert any("Tableau 10" in m and "direction=-1" in m for m in messages)


class TestPaletteCall:
    """Test Palette.__call__ (apply)."""

    def test_first_three_forward(self, tableau_10):
        assert tableau_color_pal("Tableau 10")(3) == tableau_10[:3]

    def test_first_three_reversed(self, tableau_10):
        pal = tableau_color_pal("Tableau 10", direction=-1)
        assert pal(3) == [tableau_10[9], tableau_10[8], tableau_10[7]]

    def test_zero_is_empty(self):
        assert tableau_color_pal()(0) == []

    def test_exact_capacity(self, tableau_10):
        assert tableau_color_pal()(10) == tableau_10

    def test_over_capacity_fails(self):
        with pytest.raises(InsufficientPaletteCapacityError) as excinfo:
            tableau_color_pal("Tableau 10")(12)
        assert excinfo.value.max_n == 10
        assert excinfo.value.n == 12
        assert "10" in str(excinfo.value)
        assert "12" in str(excinfo.value)

    @pytest.mark.parametrize("n", [-1, 1.5, "3", None])
    def test_invalid_n(self, n):
        with pytest.raises(ValueError):
            tableau_color_pal()(n)

    def test_returns_fresh_list(self):
        pal = tableau_color_pal()
        first = pal(3)
        first.append("#000000")
        assert len(pal(3)) == 3

    def test_palette_is_immutable(self):
        pal = tableau_color_pal()
        with pytest.raises(AttributeError):
            pal.direction = -1

    @given(tables, directions, st.data())
    def test_result_is_prefix_of_full_palette(self, table, direction, data):
        pal = resolve(table.family, table.variant, table.name, direction)
        n = data.draw(st.integers(0, pal.max_n))
        result = pal(n)
        assert len(result) == n
        assert result == pal(pal.max_n)[:n]

    @given(tables, st.integers(1, 100))
    def test_over_capacity_always_fails(self, table, extra):
        pal = resolve(table.family, table.variant, table.name)
        with pytest.raises(InsufficientPaletteCapacityError) as excinfo:
            pal(pal.max_n + extra)
        assert excinfo.value.max_n == pal.max_n
        assert excinfo.value.n == pal.max_n + extra

    @given(tables)
    def test_reversal_law(self, table):
        forward = resolve(table.family, table.variant, table.name, 1)
        backward = resolve(table.family, table.variant, table.name, -1)
        m = forward.max_n
        assert forward(m)[::-1] == backward(m)


class TestDirection:
    """Only a strictly negative direction reverses."""

    @pytest.mark.parametrize("direction", [1, 0, 2, 0.5, True, False])
    def test_non_negative_is_forward(self, direction, tableau_10):
        assert tableau_color_pal(direction=direction)(10) == tableau_10

    @pytest.mark.parametrize("direction", [-1, -2, -0.5])
    def test_negative_reverses(self, direction, tableau_10):
        assert tableau_color_pal(direction=direction)(10) == tableau_10[::-1]

    def test_direction_fixed_at_construction(self, tableau_10):
        forward = tableau_color_pal()
        backward = tableau_color_pal(direction=-1)
        assert forward(2) == tableau_10[:2]
        assert backward(2) == tableau_10[:-3:-1]
        assert forward(2) == tableau_10[:2]


class TestShapePal:
    """Test tableau_shape_pal()."""

    @pytest.mark.parametrize("palette", ["default", "filled", "proportions"])
    def test_capacity_matches_table(self, palette):
        pal = tableau_shape_pal(palette)
        assert pal.max_n == len(REGISTRY.get("shape", palette, palette).values)

    def test_proportions_order(self):
        assert tableau_shape_pal("proportions")(5) == ["$○$", "$◔$", "$◑$", "$◕$", "$●$"]

    def test_unknown_shape_palette(self):
        with pytest.raises(VariantNotRecognizedError) as excinfo:
            tableau_shape_pal("hollow")
        assert set(excinfo.value.valid_variants) == {"default", "filled", "proportions"}

    def test_over_capacity(self):
        with pytest.raises(InsufficientPaletteCapacityError):
            tableau_shape_pal("proportions")(6)


class TestCheckPalN:
    """Test check_pal_n()."""

    def test_returns_int(self):
        assert check_pal_n(True, 3) == 1

    def test_numpy_integers_accepted(self):
        import numpy as np

        assert check_pal_n(np.int64(4), 10) == 4
