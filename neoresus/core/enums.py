from enum import Enum


class NodeId(Enum):
    """Protocol steps of the neonatal resuscitation algorithm."""
    PREP = "PREP"                  # Preparation and team briefing
    BIRTH = "BIRTH"                # Rapid evaluation at birth
    INITIAL = "INITIAL"            # Initial steps
    POST_INIT = "POST_INIT"        # Re-evaluation after initial steps
    STABLE_LABOR = "STABLE_LABOR"  # Laboured breathing / CPAP
    PPV = "PPV"                    # Positive-pressure ventilation
    PPV_EVAL = "PPV_EVAL"          # Ventilation effectiveness check
    MRSOPA = "MRSOPA"              # Ventilation corrective steps
    COMPRESS = "COMPRESS"          # Chest compressions
    MEDS = "MEDS"                  # Medications / volume
    POST_CARE = "POST_CARE"        # Post-resuscitation care


class SideEffect(Enum):
    """Extra action attached to a transition."""
    START_TIMER = "start_timer"
    FULL_RESET = "full_reset"


class UrgencyTier(Enum):
    """Colour band of the global stopwatch."""
    NORMAL = "normal"
    WARNING = "warning"
    CRITICAL = "critical"


class AppSection(Enum):
    """Top-level tabs of the desktop window."""
    GUIDANCE = "Guidance"
    GOALS = "Goals"
    CALCULATOR = "Calculator"
    CHECKLIST = "Checklist"
    THEORY = "Theory"
