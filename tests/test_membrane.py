"""Tests for the Maxwell membrane conductivity model."""

import jax
import jax.numpy as jnp
import numpy as np
import pytest

from jax_brine.core.exceptions import InvalidSelectorError
from jax_brine.core.membrane import (
    gas_thermal_conductivity,
    resolve_gas_model,
    resolve_membrane,
    solid_thermal_conductivity,
    thermal_conductivity_maxwell,
)
from jax_brine.core.types import GasConductivityModel, Membrane


def _maxwell_reference(T, porosity, a, b, jonsson=False):
    k_g = 1.5e-3 * np.sqrt(T) if jonsson else 2.72e-3 + 7.77e-5 * T
    k_s = a * 1e-4 * T + b * 1e-2
    beta = (k_s - k_g) / (k_s + 2.0 * k_g)
    phi = 1.0 - porosity
    return k_g * (1.0 + 2.0 * beta * phi) / (1.0 - beta * phi)


class TestResolveMembrane:
    """Tests for material selector resolution."""

    @pytest.mark.parametrize(
        "selector, expected",
        [
            (Membrane.PTFE, Membrane.PTFE),
            (0, Membrane.PVDF),
            (3, Membrane.PES),
            (np.int32(2), Membrane.PP),
            ("ptfe", Membrane.PTFE),
            (" PES ", Membrane.PES),
        ],
    )
    def test_valid_selectors(self, selector, expected):
        assert resolve_membrane(selector) is expected

    @pytest.mark.parametrize("selector", [4, -1, "PEEK", True, 1.0, None])
    def test_invalid_selectors(self, selector):
        """Unknown materials raise instead of falling back to PES."""
        with pytest.raises(InvalidSelectorError):
            resolve_membrane(selector)

    def test_invalid_selector_is_value_error(self):
        """InvalidSelectorError should be catchable as ValueError."""
        with pytest.raises(ValueError):
            thermal_conductivity_maxwell(300.0, 0.8, 4)

    def test_gas_model_names(self):
        assert resolve_gas_model("Jonsson") is GasConductivityModel.JONSSON
        with pytest.raises(InvalidSelectorError):
            resolve_gas_model("knudsen")


class TestPhaseConductivities:
    """Tests for the gas and solid conductivity fits."""

    def test_gas_default(self):
        assert jnp.allclose(gas_thermal_conductivity(300.0), 2.72e-3 + 7.77e-5 * 300.0)

    def test_gas_jonsson(self):
        k = gas_thermal_conductivity(300.0, GasConductivityModel.JONSSON)
        assert jnp.allclose(k, 1.5e-3 * np.sqrt(300.0))

    def test_solid_ptfe(self):
        k = solid_thermal_conductivity(320.0, Membrane.PTFE)
        assert jnp.allclose(k, 5.769e-4 * 320.0 + 8.914e-2)


class TestThermalConductivityMaxwell:
    """Tests for the effective membrane conductivity."""

    def test_pvdf_reference(self):
        """PVDF at 60°C and 80 % porosity."""
        k = thermal_conductivity_maxwell(333.15, 0.8, Membrane.PVDF)
        assert jnp.allclose(k, _maxwell_reference(333.15, 0.8, 5.769, 0.9144), rtol=1e-5)
        assert jnp.abs(k - 0.041841) < 1e-5

    @pytest.mark.parametrize(
        "material, a, b",
        [
            ("PVDF", 5.769, 0.9144),
            ("PTFE", 5.769, 8.914),
            ("PP", 12.5, -23.51),
            ("PES", 4.167, 1.452),
        ],
    )
    def test_all_materials(self, material, a, b):
        k = thermal_conductivity_maxwell(320.0, 0.75, material)
        assert jnp.allclose(k, _maxwell_reference(320.0, 0.75, a, b), rtol=1e-5)

    def test_integer_codes_match_names(self):
        for code, name in enumerate(["PVDF", "PTFE", "PP", "PES"]):
            assert jnp.allclose(
                thermal_conductivity_maxwell(330.0, 0.8, code),
                thermal_conductivity_maxwell(330.0, 0.8, name),
            )

    def test_fully_porous_is_gas(self):
        """Porosity 1 leaves only the gas phase."""
        k = thermal_conductivity_maxwell(330.0, 1.0, Membrane.PTFE)
        assert jnp.allclose(k, gas_thermal_conductivity(330.0), rtol=1e-6)

    def test_solid_limit(self):
        """Porosity 0 leaves only the polymer."""
        k = thermal_conductivity_maxwell(330.0, 0.0, Membrane.PTFE)
        assert jnp.allclose(k, solid_thermal_conductivity(330.0, Membrane.PTFE), rtol=1e-5)

    def test_bounded_by_phases(self):
        """The effective value lies between the gas and solid values."""
        porosity = jnp.linspace(0.6, 0.9, 7)
        k = thermal_conductivity_maxwell(320.0, porosity, Membrane.PVDF)
        k_g = gas_thermal_conductivity(320.0)
        k_s = solid_thermal_conductivity(320.0, Membrane.PVDF)
        assert jnp.all((k > k_g) & (k < k_s))
        assert jnp.all(jnp.diff(k) < 0)

    def test_jonsson_variant(self):
        k = thermal_conductivity_maxwell(333.15, 0.8, Membrane.PVDF, gas_model="jonsson")
        expected = _maxwell_reference(333.15, 0.8, 5.769, 0.9144, jonsson=True)
        assert jnp.allclose(k, expected, rtol=1e-5)

    def test_jit_with_static_material(self):
        f = jax.jit(lambda T, eps: thermal_conductivity_maxwell(T, eps, Membrane.PP))
        k = f(jnp.array(340.0), jnp.array(0.7))
        assert jnp.allclose(k, thermal_conductivity_maxwell(340.0, 0.7, Membrane.PP), rtol=1e-5)

    def test_vmap_over_cells(self):
        T = jnp.linspace(300.0, 360.0, 9)
        k = jax.vmap(lambda t: thermal_conductivity_maxwell(t, 0.8, "PVDF"))(T)
        assert k.shape == (9,)
        assert jnp.allclose(k, thermal_conductivity_maxwell(T, 0.8, "PVDF"), rtol=1e-5)

    def test_grad_temperature(self):
        """Conductivity rises with temperature for PVDF."""
        dk_dT = jax.grad(lambda T: thermal_conductivity_maxwell(T, 0.8, Membrane.PVDF))(
            jnp.array(330.0)
        )
        assert dk_dT > 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
