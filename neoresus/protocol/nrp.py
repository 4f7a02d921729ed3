"""
Neonatal resuscitation (NRP) algorithm definition.

Canonical graph: BIRTH branches on vigorous / not vigorous, COMPRESS has a
single 60-second reassessment edge into MEDS, and MEDS either loops back to
COMPRESS or exits to post-resuscitation care once HR recovers.
"""

from neoresus.core.enums import NodeId, SideEffect
from .graph import ProtocolGraph, ProtocolNode, Transition


def create_nrp_protocol() -> ProtocolGraph:
    """Create the neonatal resuscitation protocol graph."""

    nodes = [
        ProtocolNode(
            id=NodeId.PREP,
            title="Preparation and briefing",
            description="Anticipate risk and assign roles. Check all resuscitation equipment.",
            details=(
                "Ask the four pre-birth questions to assess risk factors",
                "Name the team leader and assign each role",
                "Confirm PPV device, oxygen source and suction are ready for immediate use",
                "Pre-warm the radiant warmer and have warm towels ready",
            ),
            transitions=(
                Transition("birth-occurs", NodeId.BIRTH, "Birth (start timer)",
                           primary=True, side_effect=SideEffect.START_TIMER),
            ),
        ),
        ProtocolNode(
            id=NodeId.BIRTH,
            title="Evaluation at birth",
            description="Rapidly assess the newborn at birth to choose the next path.",
            details=(
                "Term gestation? (confirm gestational age)",
                "Good muscle tone? (observe limb movement)",
                "Breathing or crying?",
            ),
            warning=(
                "If the newborn has obvious respiratory distress or persistent cyanosis, "
                "follow the CPAP evaluation path even when HR > 100."
            ),
            transitions=(
                Transition("vigorous", NodeId.POST_CARE, "Yes (routine care)"),
                Transition("not-vigorous", NodeId.INITIAL, "No (initial steps)", primary=True),
            ),
        ),
        ProtocolNode(
            id=NodeId.INITIAL,
            title="Initial steps",
            description="Initial interventions for a non-vigorous newborn, completed within 30 seconds.",
            details=(
                "Warm: place under the radiant warmer",
                "Position: keep the airway open in the sniffing position",
                "Suction if needed: mouth before nose",
                "Dry thoroughly and remove wet linen",
                "Stimulate: gently rub the back or soles",
            ),
            transitions=(
                Transition("done", NodeId.POST_INIT, "Done, re-evaluate", primary=True),
            ),
        ),
        ProtocolNode(
            id=NodeId.POST_INIT,
            title="Re-evaluation",
            description="Decide whether positive-pressure ventilation (PPV) is needed.",
            details=(
                "Apnea or gasping?",
                "Heart rate below 100 bpm?",
                "Persistent cyanosis or laboured breathing?",
            ),
            transitions=(
                Transition("abnormal", NodeId.PPV, "Abnormal (start PPV now)", primary=True),
                Transition("breathing-difficulty-only", NodeId.STABLE_LABOR,
                           "Laboured breathing only (CPAP)"),
            ),
        ),
        ProtocolNode(
            id=NodeId.STABLE_LABOR,
            title="Breathing support",
            description="For newborns who breathe spontaneously but with difficulty.",
            details=(
                "Monitor pre-ductal SpO2 on the right hand",
                "CPAP: start at 5-8 cmH2O",
                "Titrate oxygen against the SpO2 target curve",
            ),
            transitions=(
                Transition("stable", NodeId.POST_CARE, "Vital signs stable", primary=True),
                Transition("worsens", NodeId.PPV, "Deteriorating (switch to PPV)"),
            ),
        ),
        ProtocolNode(
            id=NodeId.PPV,
            title="Positive-pressure ventilation (PPV)",
            description="The most important step of resuscitation: establish effective ventilation.",
            details=(
                "Rate: 40-60 breaths/min (\"breathe-two-three\")",
                "Initial pressure: PIP 20-25 / PEEP 5 cmH2O",
                "Attach a right-hand pulse oximeter and follow the SpO2 target",
            ),
            transitions=(
                Transition("evaluate-after-15-30s", NodeId.PPV_EVAL,
                           "Check HR after 15-30 s", primary=True),
            ),
        ),
        ProtocolNode(
            id=NodeId.PPV_EVAL,
            title="Ventilation assessment",
            description="Judge whether ventilation is effective and choose the next step.",
            details=(
                "Heart rate rising? Continue PPV",
                "HR not rising but chest moving? Continue PPV for 30 s",
                "No chest movement? Start MRSOPA corrective steps now",
            ),
            warning="If HR stays below 60 bpm, intubate before starting chest compressions.",
            transitions=(
                Transition("effective", NodeId.POST_CARE, "Effective (continue and wean)"),
                Transition("ineffective", NodeId.MRSOPA, "Ineffective (corrective steps)",
                           primary=True),
            ),
        ),
        ProtocolNode(
            id=NodeId.MRSOPA,
            title="Ventilation corrective steps (MRSOPA)",
            description="When PPV is not effective, work through the corrections in order.",
            details=(
                "M (Mask): adjust the mask to get a seal",
                "R (Reposition): return the head to the sniffing position",
                "S (Suction): suction mouth and nose",
                "O (Open): open the mouth",
                "P (Pressure): increase pressure up to 40 cmH2O",
                "A (Alternative airway): endotracheal tube or laryngeal mask",
            ),
            transitions=(
                Transition("hr-below-60", NodeId.COMPRESS, "HR < 60 (prepare compressions)",
                           primary=True),
                Transition("hr-at-or-above-60", NodeId.PPV, "HR >= 60 (resume PPV)"),
            ),
        ),
        ProtocolNode(
            id=NodeId.COMPRESS,
            title="Chest compressions",
            description="Circulatory support. Intubate and use 100% oxygen before compressions.",
            details=(
                "Technique: two-thumb encircling, depth one third of the chest diameter",
                "Ratio: 3:1 coordination (90 compressions + 30 breaths per minute)",
                "Oxygen: increase to 100% now",
            ),
            transitions=(
                Transition("evaluate-after-60s", NodeId.MEDS, "After 60 s: HR still < 60?",
                           primary=True),
            ),
        ),
        ProtocolNode(
            id=NodeId.MEDS,
            title="Medications",
            description="When compressions cannot sustain the heart rate, give epinephrine or volume.",
            details=(
                "Epinephrine: IV preferred, 0.1-0.3 mL/kg (1:10,000)",
                "Volume: if hypovolemia is suspected, NS 10-20 mL/kg",
                "Epinephrine may be repeated every 3-5 minutes",
            ),
            transitions=(
                Transition("continue-cycle", NodeId.COMPRESS, "Continue the cycle", primary=True),
                Transition("recovered", NodeId.POST_CARE, "HR recovered > 60"),
            ),
        ),
        ProtocolNode(
            id=NodeId.POST_CARE,
            title="Post-resuscitation care",
            description="Supportive care, monitoring and prevention of complications.",
            details=(
                "Titrate oxygen to keep SpO2 at 92-96%",
                "Evaluate for therapeutic hypothermia if >= 36 weeks with HIE risk",
                "Monitor glucose (> 2.5 mmol/L) and temperature (36.5-37.5 C)",
                "Document the resuscitation and update the parents",
            ),
            transitions=(
                Transition("reset", NodeId.PREP, "Reset and return to preparation",
                           primary=True, side_effect=SideEffect.FULL_RESET),
            ),
        ),
    ]

    return ProtocolGraph(nodes, initial=NodeId.PREP, name="NRP 2025")
