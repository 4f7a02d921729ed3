"""
Read-only reference tabs: SpO2 goals, checklists and theory notes.
"""

import html
import re

from PySide6.QtWidgets import QWidget, QFrame, QVBoxLayout, QHBoxLayout, QLabel, QCheckBox, QToolBox
from PySide6.QtCore import Qt

from neoresus.core.constants import STABLE_SPO2_TARGET
from neoresus.monitors.spo2 import SPO2_TARGETS
from neoresus.reference.content import CHECKLIST_ITEMS, CHECKLIST_TITLES, MAJOR_CONCEPTS
from .styles import COLORS, FONTS, STYLE_CHECKBOX, get_card_style, get_tinted_frame_style

_BOLD = re.compile(r"\*\*(.*?)\*\*")


def markup_to_html(text: str) -> str:
    """Convert **bold** markers and newlines in reference text to rich text."""
    escaped = html.escape(text)
    return _BOLD.sub(r"<b>\1</b>", escaped).replace("\n", "<br>")


class GoalsWidget(QWidget):
    """Minute-by-minute pre-ductal SpO2 targets and the stable target."""
    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(12)

        card = QFrame()
        card.setStyleSheet(get_card_style())
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(16, 12, 16, 12)
        title = QLabel("Target pre-ductal SpO2 after birth")
        title.setStyleSheet(f"color: {COLORS['text_secondary']}; font-weight: 700;")
        card_layout.addWidget(title)

        self.rows = []
        for time_label, target in SPO2_TARGETS:
            row = QHBoxLayout()
            lbl_time = QLabel(time_label)
            lbl_time.setStyleSheet("font-weight: 700;")
            lbl_target = QLabel(target)
            lbl_target.setStyleSheet(f"color: {COLORS['primary']}; font-weight: 700;")
            row.addWidget(lbl_time)
            row.addStretch()
            row.addWidget(lbl_target)
            card_layout.addLayout(row)
            self.rows.append((time_label, target))
        layout.addWidget(card)

        stable = QFrame()
        stable.setStyleSheet(get_tinted_frame_style(COLORS['goal']))
        stable_layout = QVBoxLayout(stable)
        for text, size in (
            ("Stable-phase SpO2 target", FONTS['size_small']),
            (STABLE_SPO2_TARGET, FONTS['size_display']),
            ("Titrate oxygen to stay in range and avoid hyperoxia", FONTS['size_small']),
        ):
            lbl = QLabel(text)
            lbl.setAlignment(Qt.AlignCenter)
            lbl.setStyleSheet(f"font-size: {size}; font-weight: 800;")
            stable_layout.addWidget(lbl)
        layout.addWidget(stable)
        layout.addStretch()


class ChecklistWidget(QWidget):
    """Pre- and post-resuscitation checklists. Ticks are not persisted."""
    def __init__(self, parent=None):
        super().__init__(parent)
        self.checkboxes = {}
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(12)

        for key, items in CHECKLIST_ITEMS.items():
            accent = COLORS['primary'] if key == "pre" else COLORS['drug']
            card = QFrame()
            card.setStyleSheet(get_card_style(accent_color=accent) + STYLE_CHECKBOX)
            card_layout = QVBoxLayout(card)
            card_layout.setContentsMargins(16, 12, 16, 12)

            header = QHBoxLayout()
            title = QLabel(CHECKLIST_TITLES.get(key, key))
            title.setStyleSheet(f"color: {accent}; font-size: {FONTS['size_large']}; font-weight: 800;")
            header.addWidget(title)
            header.addStretch()
            count = QLabel(f"{len(items)} items")
            count.setStyleSheet(f"color: {COLORS['text_dim']}; font-size: {FONTS['size_small']};")
            header.addWidget(count)
            card_layout.addLayout(header)

            boxes = []
            for item in items:
                cb = QCheckBox(item)
                card_layout.addWidget(cb)
                boxes.append(cb)
            self.checkboxes[key] = boxes
            layout.addWidget(card)
        layout.addStretch()


class TheoryWidget(QWidget):
    """Collapsible theory notes; one section open at a time."""
    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)

        title = QLabel("2025 NRP key concepts")
        title.setStyleSheet(f"font-size: {FONTS['size_large']}; font-weight: 800;")
        layout.addWidget(title)

        self.toolbox = QToolBox()
        for concept in MAJOR_CONCEPTS:
            body = QLabel(markup_to_html(concept.content))
            body.setTextFormat(Qt.RichText)
            body.setWordWrap(True)
            body.setAlignment(Qt.AlignTop | Qt.AlignLeft)
            body.setStyleSheet(f"font-size: {FONTS['size_normal']}; padding: 8px;")
            self.toolbox.addItem(body, concept.title)
        layout.addWidget(self.toolbox, stretch=1)
