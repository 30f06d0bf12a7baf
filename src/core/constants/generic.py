"""Generic constants for interest rate model calculations.

These constants are model-agnostic and shared by every rate model.
"""

# Time constants
SECONDS_PER_YEAR = 365 * 24 * 3600  # 31,536,000
SECONDS_PER_DAY = 24 * 3600

# Precision constants
WAD = 10**18  # Standard 18 decimal precision for rates and fractions
