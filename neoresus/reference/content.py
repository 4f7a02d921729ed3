"""
Static reference text for the checklist and theory tabs.

Theory content uses **double asterisks** for emphasis; the UI converts them
to bold.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class TheorySection:
    id: str
    title: str
    content: str


CHECKLIST_ITEMS: Dict[str, Tuple[str, ...]] = {
    "pre": (
        "Risk assessment: gestational age, amniotic fluid, additional risk factors, umbilical cord management plan",
        "Team leader identified and roles assigned",
        "Radiant warmer on, warm towels and hat ready; plastic wrap for < 32 weeks",
        "Suction set to 80-100 mmHg, bulb syringe and 10F/12F catheters available",
        "Oxygen flow 10 L/min, blender set to 21% (21-30% for < 35 weeks)",
        "PPV device checked: pressure manometer, PEEP valve, correct mask sizes",
        "Pulse oximeter with neonatal probe, ECG monitor available",
        "Laryngoscope with size 0 and 1 blades, ET tubes 2.5/3.0/3.5, laryngeal mask size 1",
        "Epinephrine 1:10,000, normal saline and umbilical venous catheter kit prepared",
    ),
    "post": (
        "Temperature 36.5-37.5 C maintained",
        "Pre-ductal SpO2 titrated to 92-96%",
        "Blood glucose checked and kept above 2.5 mmol/L",
        "Evaluate eligibility for therapeutic hypothermia (>= 36 weeks, HIE risk)",
        "Monitor for apnea, hypotension and pneumothorax",
        "Resuscitation events and timings documented",
        "Parents informed; handover to the neonatal unit completed",
    ),
}

CHECKLIST_TITLES = {
    "pre": "Before resuscitation",
    "post": "After resuscitation",
}

MAJOR_CONCEPTS: Tuple[TheorySection, ...] = (
    TheorySection(
        id="ventilation",
        title="Ventilation is the single most important action",
        content=(
            "Most newborns who need help at birth respond to **effective ventilation** alone.\n"
            "A rising heart rate is the best indicator that PPV is working.\n"
            "Start PPV within **60 seconds** of birth (the golden minute) when the baby is "
            "apneic, gasping or has HR < 100 bpm."
        ),
    ),
    TheorySection(
        id="mrsopa",
        title="Ventilation corrective steps (MRSOPA)",
        content=(
            "If the chest is not moving, work through **M**ask adjustment, **R**eposition, "
            "**S**uction, **O**pen mouth, **P**ressure increase and **A**lternative airway.\n"
            "Reassess chest movement after each correction; once the chest moves, ventilate "
            "for **30 seconds** before reassessing heart rate."
        ),
    ),
    TheorySection(
        id="oxygen",
        title="Oxygen titration",
        content=(
            "Begin resuscitation of term and late-preterm babies with **21% oxygen**, "
            "21-30% for those under 35 weeks.\n"
            "Follow the minute-by-minute **pre-ductal SpO2 targets** measured on the right hand "
            "and avoid hyperoxia once the baby is stable."
        ),
    ),
    TheorySection(
        id="compressions",
        title="Chest compressions",
        content=(
            "Start compressions when HR stays **below 60 bpm** after at least 30 seconds of "
            "ventilation that moves the chest, preferably through an alternative airway.\n"
            "Use the **two-thumb** technique at one third of the chest diameter with a "
            "**3:1** ratio and 100% oxygen. Reassess after 60 seconds."
        ),
    ),
    TheorySection(
        id="epinephrine",
        title="Epinephrine and volume",
        content=(
            "Give epinephrine 1:10,000 when HR remains below 60 bpm despite 60 seconds of "
            "compressions and effective ventilation.\n"
            "**IV/IO 0.1-0.3 mL/kg** is preferred; the endotracheal dose is **0.5-1.0 mL/kg** "
            "while vascular access is being obtained. Repeat every 3-5 minutes.\n"
            "Give normal saline **10-20 mL/kg over 5-10 minutes** for suspected hypovolemia."
        ),
    ),
)
