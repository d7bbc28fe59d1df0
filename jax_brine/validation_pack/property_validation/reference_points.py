"""Literature reference points for property validation.

Hard-coded reference values used to check the correlations against
independent data.

Sources:
    Wagner, W. and Pruss, A., The IAPWS Formulation 1995 for the
    Thermodynamic Properties of Ordinary Water Substance, J. Phys. Chem.
    Ref. Data 31 (2002) 387.
    Huber, M.L. et al., New International Formulation for the Thermal
    Conductivity of H2O, J. Phys. Chem. Ref. Data 41 (2012) 033102.
    Haynes, W.M. (Ed.), CRC Handbook of Chemistry and Physics,
    "Concentrative Properties of Aqueous Solutions" (NaCl).
"""

from dataclasses import dataclass
from typing import Dict, List


@dataclass
class ReferencePoint:
    """A literature reference value of one property.

    Attributes:
        property_name: Property identifier (e.g., "saturation_pressure")
        temperature_k: Temperature in Kelvin
        mass_fraction_nacl: Mass fraction of NaCl (0 for pure water)
        value: Reference value in SI units
        unit: Unit of ``value``
        source: Source reference
        uncertainty_pct: Estimated uncertainty as percentage
    """

    property_name: str
    temperature_k: float
    mass_fraction_nacl: float
    value: float
    unit: str
    source: str = "IAPWS-95"
    uncertainty_pct: float = 0.1


# =============================================================================
# Saturation Pressure of Water
# =============================================================================
# Units: Temperature in K, Pressure in Pa
# =============================================================================

SATURATION_PRESSURE_POINTS: List[ReferencePoint] = [
    ReferencePoint("saturation_pressure", 283.15, 0.0, 1228.1, "Pa"),  # 10°C
    ReferencePoint("saturation_pressure", 298.15, 0.0, 3169.9, "Pa"),  # 25°C
    ReferencePoint("saturation_pressure", 323.15, 0.0, 12352.0, "Pa"),  # 50°C
    ReferencePoint("saturation_pressure", 348.15, 0.0, 38597.0, "Pa"),  # 75°C
    ReferencePoint("saturation_pressure", 373.15, 0.0, 101418.0, "Pa"),  # 100°C
]

# =============================================================================
# Brine Density
# =============================================================================
# Units: Temperature in K, Density in kg/m^3
# =============================================================================

DENSITY_POINTS: List[ReferencePoint] = [
    ReferencePoint("density", 293.15, 0.0, 998.21, "kg/m^3", "CRC Handbook", 0.05),
    ReferencePoint("density", 298.15, 0.0, 997.05, "kg/m^3", "CRC Handbook", 0.05),
    ReferencePoint("density", 293.15, 0.05, 1034.0, "kg/m^3", "CRC Handbook", 0.1),
    ReferencePoint("density", 293.15, 0.10, 1070.7, "kg/m^3", "CRC Handbook", 0.1),
]

# =============================================================================
# Thermal Conductivity of Water
# =============================================================================
# Units: Temperature in K, Conductivity in W/m/K
# =============================================================================

THERMAL_CONDUCTIVITY_POINTS: List[ReferencePoint] = [
    ReferencePoint("thermal_conductivity", 298.15, 0.0, 0.6065, "W/m/K", "IAPWS 2011", 1.0),
    ReferencePoint("thermal_conductivity", 323.15, 0.0, 0.6436, "W/m/K", "IAPWS 2011", 1.0),
    ReferencePoint("thermal_conductivity", 353.15, 0.0, 0.6701, "W/m/K", "IAPWS 2011", 1.0),
]

# =============================================================================
# NaCl Solubility
# =============================================================================
# Units: Temperature in K, saturated mass fraction of NaCl
# =============================================================================

SOLUBILITY_POINTS: List[ReferencePoint] = [
    ReferencePoint("solubility", 273.15, 0.0, 0.2631, "kg/kg", "CRC Handbook", 1.0),
    ReferencePoint("solubility", 298.15, 0.0, 0.2645, "kg/kg", "CRC Handbook", 1.0),
    ReferencePoint("solubility", 373.15, 0.0, 0.2810, "kg/kg", "CRC Handbook", 1.0),
]


def get_reference_data(property_name: str) -> List[ReferencePoint]:
    """Get reference data for a property.

    Args:
        property_name: One of saturation_pressure, density,
            thermal_conductivity, solubility.

    Returns:
        List of reference points for the property.

    Raises:
        ValueError: If the property is not in the database.
    """
    data_map = get_all_reference_data()

    if property_name.lower() not in data_map:
        available = ", ".join(data_map.keys())
        raise ValueError(f"Unknown property: {property_name}. Available: {available}")

    return data_map[property_name.lower()]


def get_all_reference_data() -> Dict[str, List[ReferencePoint]]:
    """Get all reference data.

    Returns:
        Dict mapping property names to their reference points.
    """
    return {
        "saturation_pressure": SATURATION_PRESSURE_POINTS,
        "density": DENSITY_POINTS,
        "thermal_conductivity": THERMAL_CONDUCTIVITY_POINTS,
        "solubility": SOLUBILITY_POINTS,
    }
