"""
Engineering constants for steel beam checks.
"""

# Modulus of elasticity of mild steel (N/mm²)
YOUNGS_MODULUS = 210000

# Typical yield strength of mild steel used for utilization (N/mm²)
YIELD_STRESS = 275

# Serviceability limit: span / deflection must be at least this (L/250)
DEFLECTION_LIMIT = 250

# Standard gravity used for kilogram-force (m/s²)
GRAVITY = 9.81

# Input length units to mm (multiply)
LENGTH_FACTORS = {
    "mm": 1,
    "cm": 10,
    "m": 1000,
}

# Input force units to N (multiply)
FORCE_FACTORS = {
    "N": 1,
    "kN": 1000,
    "kg": GRAVITY,
}

# Base stress (N/mm²) to display units
STRESS_FACTORS = {
    "N/mm²": 1,
    "MPa": 1,
    "kPa": 1000,
}

# Base deflection (mm) to display units (divide)
DEFLECTION_FACTORS = {
    "mm": 1,
    "cm": 10,
    "m": 1000,
}

# Section categories whose tables may carry major-axis values only
HOLLOW_CATEGORIES = ("chs", "shs", "rhs")

# Descriptions shown next to section properties
PROPERTY_DESCRIPTIONS = {
    "I": "Moment of Inertia (mm⁴)",
    "Z": "Section Modulus (mm³)",
    "I_major": "Major Moment of Inertia (mm⁴)",
    "Z_major": "Major Section Modulus (mm³)",
}
