from typing import Optional

from PySide6.QtWidgets import QWidget, QFrame, QVBoxLayout, QGridLayout, QLabel
from PySide6.QtCore import Qt

from neoresus.core.errors import InvalidParameterError
from neoresus.patient.dosing import (
    DosageResult,
    UVC_EMERGENCY_DEPTH,
    compute_dosages,
)
from .styles import COLORS, FONTS, get_card_style, get_tinted_frame_style

INVALID_VALUE = "--"


class ValueTile(QFrame):
    """Caption plus a large value, tinted with the card's accent colour."""
    def __init__(self, caption: str, unit: str, color: str, parent=None):
        super().__init__(parent)
        self.unit = unit
        self.setStyleSheet(get_tinted_frame_style(color))
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 10, 12, 10)
        lbl_caption = QLabel(caption.upper())
        lbl_caption.setAlignment(Qt.AlignCenter)
        lbl_caption.setStyleSheet(f"font-size: {FONTS['size_small']}; font-weight: 800;")
        layout.addWidget(lbl_caption)
        self.lbl_value = QLabel(INVALID_VALUE)
        self.lbl_value.setAlignment(Qt.AlignCenter)
        self.lbl_value.setStyleSheet(f"font-size: {FONTS['size_title']}; font-weight: 800;")
        layout.addWidget(self.lbl_value)

    def set_value(self, value: str):
        if value == INVALID_VALUE or not self.unit:
            self.lbl_value.setText(value)
        else:
            self.lbl_value.setText(f"{value} {self.unit}")

    def value(self) -> str:
        return self.lbl_value.text()


class CalculatorWidget(QWidget):
    """
    Weight-linked airway, epinephrine and volume cards.
    Invalid weight withholds every value and shows the error instead.
    """
    def __init__(self, weight_kg: float, parent=None):
        super().__init__(parent)
        self.result = None
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(14)

        # Airway
        airway = self._card("Airway", COLORS['airway'])
        grid = QGridLayout()
        self.tile_et_size = ValueTile("ET tube ID", "mm", COLORS['airway'])
        self.tile_et_depth = ValueTile("Insertion depth (lip)", "cm", COLORS['airway'])
        self.tile_lma = ValueTile("Laryngeal mask", "", COLORS['airway'])
        self.tile_uvc = ValueTile("UVC (emergency)", "", COLORS['airway'])
        self.tile_uvc.set_value(UVC_EMERGENCY_DEPTH)
        grid.addWidget(self.tile_et_size, 0, 0)
        grid.addWidget(self.tile_et_depth, 0, 1)
        grid.addWidget(self.tile_lma, 1, 0)
        grid.addWidget(self.tile_uvc, 1, 1)
        airway.layout().addLayout(grid)
        self.lbl_airway_title = airway.title_label
        layout.addWidget(airway)

        # Epinephrine
        epi = self._card("Epinephrine (1:10,000)", COLORS['drug'])
        self.tile_epi_iv = ValueTile("IV / IO  0.1-0.3 mL/kg", "", COLORS['drug'])
        self.tile_epi_et = ValueTile("Endotracheal  0.5-1.0 mL/kg", "", COLORS['text_secondary'])
        epi.layout().addWidget(self.tile_epi_iv)
        epi.layout().addWidget(self.tile_epi_et)
        note = QLabel("Endotracheal dose only while IV/IO access is being established.")
        note.setWordWrap(True)
        note.setStyleSheet(f"color: {COLORS['text_dim']}; font-size: {FONTS['size_small']};")
        epi.layout().addWidget(note)
        layout.addWidget(epi)

        # Volume expansion
        fluid = self._card("Volume expansion (normal saline)", COLORS['fluid'])
        self.tile_volume = ValueTile("Single bolus  10-20 mL/kg", "", COLORS['fluid'])
        fluid.layout().addWidget(self.tile_volume)
        push = QLabel("Give over 5-10 minutes.")
        push.setStyleSheet(f"color: {COLORS['text_secondary']}; font-size: {FONTS['size_small']}; font-weight: 700;")
        fluid.layout().addWidget(push)
        layout.addWidget(fluid)

        self.lbl_error = QLabel("")
        self.lbl_error.setWordWrap(True)
        self.lbl_error.setStyleSheet(f"color: {COLORS['danger']}; font-weight: 700;")
        layout.addWidget(self.lbl_error)

        footer = QLabel("Values follow the 2025 NRP guideline. Always apply clinical judgement.")
        footer.setAlignment(Qt.AlignCenter)
        footer.setStyleSheet(f"color: {COLORS['text_dim']}; font-size: {FONTS['size_small']}; font-style: italic;")
        layout.addWidget(footer)
        layout.addStretch()

        self.update_weight(weight_kg)

    def _card(self, title: str, color: str) -> QFrame:
        card = QFrame()
        card.setStyleSheet(get_card_style(accent_color=color))
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(16, 12, 16, 12)
        lbl = QLabel(title)
        lbl.setStyleSheet(f"color: {color}; font-size: {FONTS['size_large']}; font-weight: 800;")
        card_layout.addWidget(lbl)
        card.title_label = lbl
        return card

    def update_weight(self, weight_kg) -> Optional[DosageResult]:
        """Recompute every tile for a new weight. Returns None when withheld."""
        try:
            self.result = compute_dosages(weight_kg)
        except InvalidParameterError as exc:
            self.result = None
            self.lbl_error.setText(f"Dosages withheld: {exc}")
            for tile in self._dose_tiles():
                tile.set_value(INVALID_VALUE)
            self.lbl_airway_title.setText("Airway")
            return None

        r = self.result
        self.lbl_error.setText("")
        self.lbl_airway_title.setText(f"Airway ({weight_kg:g} kg)")
        self.tile_et_size.set_value(r.et_size)
        self.tile_et_depth.set_value(r.et_depth)
        self.tile_lma.set_value(f"Size {r.lma_size}")
        self.tile_epi_iv.set_value(r.epi_iv)
        self.tile_epi_et.set_value(r.epi_et)
        self.tile_volume.set_value(r.volume_expansion)
        return r

    def _dose_tiles(self):
        return (
            self.tile_et_size,
            self.tile_et_depth,
            self.tile_lma,
            self.tile_epi_iv,
            self.tile_epi_et,
            self.tile_volume,
        )
