"""Tests for unit and composition conversions."""

import jax
import jax.numpy as jnp
import numpy as np
import pytest

from jax_brine.core.exceptions import DomainError
from jax_brine.core.types import Celsius, Kelvin
from jax_brine.core.units import (
    MW_NACL,
    MW_WATER,
    mass_fraction_to_molality,
    mass_fraction_to_mole_fraction,
    mass_fractions_to_mole_fractions,
    molality_to_mass_fraction,
    to_celsius,
    to_kelvin,
)


class TestTemperatureConversion:
    """Tests for tagged and raw temperature handling."""

    def test_kelvin_to_celsius(self):
        """Kelvin.to_celsius should subtract 273.15."""
        t = Kelvin(value=jnp.array(298.15)).to_celsius()
        assert isinstance(t, Celsius)
        assert jnp.allclose(t.value, 25.0, atol=1e-4)

    def test_celsius_to_kelvin(self):
        """Celsius.to_kelvin should add 273.15."""
        T = Celsius(value=jnp.array(100.0)).to_kelvin()
        assert isinstance(T, Kelvin)
        assert jnp.allclose(T.value, 373.15)

    def test_tagged_values_override_raw_unit(self):
        """A tagged value is converted regardless of the raw-unit default."""
        assert jnp.allclose(to_kelvin(Celsius(value=25.0)), 298.15)
        assert jnp.allclose(to_celsius(Kelvin(value=298.15)), 25.0, atol=1e-4)

    def test_raw_values_use_declared_unit(self):
        """Raw arrays are interpreted in the declared unit."""
        assert jnp.allclose(to_kelvin(300.0), 300.0)
        assert jnp.allclose(to_kelvin(25.0, raw="C"), 298.15)
        assert jnp.allclose(to_celsius(25.0), 25.0)
        assert jnp.allclose(to_celsius(298.15, raw="K"), 25.0, atol=1e-4)

    def test_tagged_temperature_is_pytree(self):
        """Tagged temperatures should pass through jit and vmap."""
        f = jax.jit(lambda T: to_celsius(T))
        assert jnp.allclose(f(Kelvin(value=jnp.array(310.15))), 37.0, atol=1e-4)

        temps = Kelvin(value=jnp.linspace(280.0, 360.0, 5))
        out = jax.vmap(lambda T: to_celsius(T))(temps)
        assert out.shape == (5,)


class TestMolality:
    """Tests for NaCl mass fraction <-> molality."""

    def test_zero_mass_fraction(self):
        """Pure water has zero molality."""
        assert mass_fraction_to_molality(0.0) == 0.0

    def test_seawater_molality(self):
        """5 wt% NaCl is about 0.9006 mol/kg."""
        m = mass_fraction_to_molality(0.05)
        expected = 0.05 / 0.95 / MW_NACL * 1000.0
        assert jnp.allclose(m, expected, rtol=1e-5)
        assert jnp.abs(m - 0.9006) < 1e-3

    def test_strictly_increasing(self):
        """Molality should increase strictly on [0, 1)."""
        w = jnp.linspace(0.0, 0.9, 50)
        m = mass_fraction_to_molality(w)
        assert jnp.all(jnp.diff(m) > 0)

    def test_inverse_conversion(self):
        """molality_to_mass_fraction should invert the conversion."""
        w = jnp.array([0.0, 0.035, 0.1, 0.25])
        assert jnp.allclose(molality_to_mass_fraction(mass_fraction_to_molality(w)), w, atol=1e-6)

    def test_singularity_raises(self):
        """w = 1 is a division by zero and should raise DomainError."""
        with pytest.raises(DomainError):
            mass_fraction_to_molality(1.0)
        with pytest.raises(DomainError):
            mass_fraction_to_molality(jnp.array([0.1, 1.0]))

    def test_domain_error_is_arithmetic_error(self):
        """DomainError should be catchable as ArithmeticError."""
        with pytest.raises(ArithmeticError):
            mass_fraction_to_molality(1.2)

    def test_traced_singularity_is_infinite(self):
        """Under jit the singularity cannot raise and yields inf."""
        m = jax.jit(mass_fraction_to_molality)(jnp.array(1.0))
        assert jnp.isinf(m)


class TestMoleFraction:
    """Tests for mass fraction -> mole fraction conversion."""

    def test_binary_fractions_sum_to_one(self):
        """Both mole fractions of a binary mixture should sum to 1."""
        mw = [MW_WATER, MW_NACL]
        for w in [0.0, 0.035, 0.2, 0.5, 0.9, 1.0]:
            wi = jnp.array([w, 1.0 - w])
            x0 = mass_fraction_to_mole_fraction(0, mw, wi)
            x1 = mass_fraction_to_mole_fraction(1, mw, wi)
            assert jnp.allclose(x0 + x1, 1.0)

    def test_pure_component(self):
        """A pure component has mole fraction exactly 1."""
        x = mass_fraction_to_mole_fraction(0, [MW_WATER, MW_NACL], [1.0, 0.0])
        assert float(x) == 1.0

    def test_three_components(self):
        """N-component conversion should match a direct numpy calculation."""
        mw = np.array([18.01534, 58.4428, 44.0095])
        w = np.array([0.5, 0.3, 0.2])
        expected = (w / mw) / np.sum(w / mw)
        for k in range(3):
            x = mass_fraction_to_mole_fraction(k, mw, w)
            assert jnp.allclose(x, expected[k], rtol=1e-5)

    def test_vector_form(self):
        """mass_fractions_to_mole_fractions should return the full normalized vector."""
        x = mass_fractions_to_mole_fractions([MW_WATER, MW_NACL], [0.965, 0.035])
        assert x.shape == (2,)
        assert jnp.allclose(jnp.sum(x), 1.0)
        assert x[0] > 0.965  # water is the lighter molecule

    def test_cells_along_trailing_axis(self):
        """Trailing axes of the mass fractions are independent cells."""
        w = jnp.linspace(0.8, 1.0, 7)
        x = mass_fractions_to_mole_fractions([MW_WATER, MW_NACL], jnp.stack([w, 1.0 - w]))
        assert x.shape == (2, 7)
        assert jnp.allclose(jnp.sum(x, axis=0), 1.0)

    def test_index_out_of_range(self):
        """An index outside the component list should raise IndexError."""
        with pytest.raises(IndexError):
            mass_fraction_to_mole_fraction(2, [MW_WATER, MW_NACL], [0.5, 0.5])

    def test_length_mismatch(self):
        """Mismatched molar weights and mass fractions should raise ValueError."""
        with pytest.raises(ValueError):
            mass_fraction_to_mole_fraction(0, [MW_WATER, MW_NACL], [0.5, 0.3, 0.2])

    def test_jit_compilation(self):
        """Mole fraction conversion should be JIT-compilable."""
        f = jax.jit(lambda w: mass_fraction_to_mole_fraction(0, [MW_WATER, MW_NACL], w))
        wi = jnp.array([0.9, 0.1])
        assert jnp.allclose(f(wi), mass_fraction_to_mole_fraction(0, [MW_WATER, MW_NACL], wi))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
