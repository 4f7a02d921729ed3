"""
Protocol timing and monitoring constants for NeoResus.

NOTE: Only add constants here that are ACTIVELY IMPORTED elsewhere.
"""

# Tick source.

# Interval between stopwatch ticks (seconds)
TICK_INTERVAL_SEC = 1.0

# Stale-step advisory.

# Seconds spent in one step before the "decide now" advisory is raised.
# Initial steps and each PPV / compression reassessment are 30 s blocks.
STALE_STEP_THRESHOLD_SEC = 30

# Stopwatch urgency bands (seconds of total resuscitation time).
URGENCY_WARNING_SEC = 30
URGENCY_CRITICAL_SEC = 60

# Pre-ductal SpO2 targets.

# Right-inclusive upper bounds (seconds after birth) of each target band.
# Anything beyond the last bound falls into the final catch-all band.
SPO2_BAND_UPPER_BOUNDS_SEC = (60, 120, 180, 240, 300)
SPO2_BAND_TARGETS = (
    "60%-65%",
    "65%-70%",
    "70%-75%",
    "75%-80%",
    "80%-85%",
    "85%-95%",
)

# Titration target once the infant is in post-resuscitation care.
STABLE_SPO2_TARGET = "92%-96%"

# Patient defaults (term newborn).
DEFAULT_WEIGHT_KG = 3.0
DEFAULT_GESTATIONAL_AGE_WEEKS = 39
TERM_GESTATION_WEEKS = 37
