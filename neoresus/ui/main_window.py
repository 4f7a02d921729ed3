import logging
import sys
from typing import Optional

from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QHBoxLayout,
    QVBoxLayout,
    QLabel,
    QSpinBox,
    QDoubleSpinBox,
    QFrame,
    QScrollArea,
    QTabWidget,
)
from PySide6.QtCore import QTimer

from neoresus.core.engine import StepEngine
from neoresus.core.enums import AppSection
from neoresus.core.errors import InvalidParameterError
from neoresus.core.state import SessionConfig
from neoresus.patient.patient import PatientParameters
from neoresus.protocol.graph import ProtocolGraph
from neoresus.ui.calculator_widget import CalculatorWidget
from neoresus.ui.guidance_panel import GuidancePanel
from neoresus.ui.reference_widgets import GoalsWidget, ChecklistWidget, TheoryWidget
from neoresus.ui.styles import (
    COLORS,
    FONTS,
    STYLE_SPINBOX,
    STYLE_TAB_WIDGET,
    STYLE_SCROLLAREA,
    get_base_widget_style,
    get_card_style,
)

logger = logging.getLogger(__name__)

APP_TITLE = "Neonatal Resuscitation"
GUIDELINE_BADGE = "2025 NRP"


class MainWindow(QMainWindow):
    """Main window: patient header, section tabs and the 1 Hz stopwatch tick."""
    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        patient: Optional[PatientParameters] = None,
        graph: Optional[ProtocolGraph] = None,
    ):
        super().__init__()
        self.setWindowTitle(f"NeoResus - {APP_TITLE}")
        self.resize(480, 900)
        self.setStyleSheet(get_base_widget_style())

        self.config = config or SessionConfig()
        self.patient = patient or PatientParameters(
            weight_kg=self.config.default_weight_kg,
            gestational_age_weeks=self.config.default_gestational_age_weeks,
        )
        self.engine = StepEngine(graph=graph, config=self.config)

        self.setup_ui()

        # Stopwatch tick; runs only while the engine is running
        self.timer = QTimer(self)
        self.timer.setInterval(int(self.config.tick_interval_sec * 1000))
        self.timer.timeout.connect(self.on_tick)
        self._sync_timer()

    def setup_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        base_layout = QVBoxLayout(central)
        base_layout.setContentsMargins(0, 0, 0, 0)
        base_layout.setSpacing(0)

        base_layout.addWidget(self._build_header())

        self.tabs = QTabWidget()
        self.tabs.setStyleSheet(STYLE_TAB_WIDGET)
        base_layout.addWidget(self.tabs, stretch=1)

        self.guidance = GuidancePanel(self.engine)
        self.guidance.state_changed.connect(self._sync_timer)
        self.calculator = CalculatorWidget(self.patient.weight_kg)
        self.goals = GoalsWidget()
        self.checklist = ChecklistWidget()
        self.theory = TheoryWidget()

        self.sections = {
            AppSection.GUIDANCE: self.guidance,
            AppSection.GOALS: self.goals,
            AppSection.CALCULATOR: self.calculator,
            AppSection.CHECKLIST: self.checklist,
            AppSection.THEORY: self.theory,
        }
        for section, widget in self.sections.items():
            scroll = QScrollArea()
            scroll.setStyleSheet(STYLE_SCROLLAREA)
            scroll.setWidgetResizable(True)
            scroll.setWidget(widget)
            self.tabs.addTab(scroll, section.value)

    def _build_header(self) -> QFrame:
        header = QFrame()
        header.setStyleSheet(f"QFrame {{ background-color: {COLORS['header']}; border-bottom: 1px solid {COLORS['border']}; }}")
        layout = QVBoxLayout(header)
        layout.setContentsMargins(16, 10, 16, 10)

        title_row = QHBoxLayout()
        lbl_title = QLabel(APP_TITLE)
        lbl_title.setStyleSheet(f"font-size: {FONTS['size_title']}; font-weight: 800;")
        title_row.addWidget(lbl_title)
        title_row.addStretch()
        lbl_badge = QLabel(GUIDELINE_BADGE)
        lbl_badge.setStyleSheet(f"color: {COLORS['primary']}; font-size: {FONTS['size_small']}; font-weight: 800;")
        title_row.addWidget(lbl_badge)
        layout.addLayout(title_row)

        inputs = QFrame()
        inputs.setStyleSheet(get_card_style(radius=10) + STYLE_SPINBOX)
        inputs_layout = QHBoxLayout(inputs)
        inputs_layout.setContentsMargins(12, 8, 12, 8)

        inputs_layout.addWidget(QLabel("Weight:"))
        self.sb_weight = QDoubleSpinBox()
        self.sb_weight.setRange(0.0, 8.0)
        self.sb_weight.setDecimals(1)
        self.sb_weight.setSingleStep(0.1)
        self.sb_weight.setSuffix(" kg")
        self.sb_weight.setValue(self.patient.weight_kg)
        self.sb_weight.valueChanged.connect(self.on_weight_changed)
        inputs_layout.addWidget(self.sb_weight)

        inputs_layout.addWidget(QLabel("Gestation:"))
        self.sb_ga = QSpinBox()
        self.sb_ga.setRange(0, 45)
        self.sb_ga.setSuffix(" wk")
        self.sb_ga.setValue(self.patient.gestational_age_weeks)
        self.sb_ga.valueChanged.connect(self.on_gestational_age_changed)
        inputs_layout.addWidget(self.sb_ga)
        inputs_layout.addStretch()
        layout.addWidget(inputs)

        self.lbl_patient = QLabel("")
        self.lbl_patient.setStyleSheet(f"color: {COLORS['text_secondary']}; font-size: {FONTS['size_small']}; font-weight: 700;")
        layout.addWidget(self.lbl_patient)
        self._update_patient_label()
        return header

    # Patient parameters

    def on_weight_changed(self, value: float):
        self.calculator.update_weight(value)
        self._set_patient(weight_kg=value)

    def on_gestational_age_changed(self, value: int):
        self._set_patient(gestational_age_weeks=value)

    def _set_patient(self, **changes):
        params = {
            "weight_kg": self.patient.weight_kg,
            "gestational_age_weeks": self.patient.gestational_age_weeks,
        }
        params.update(changes)
        try:
            self.patient = PatientParameters(**params)
        except InvalidParameterError as exc:
            logger.warning("Rejected patient parameters: %s", exc)
            self.lbl_patient.setText(str(exc))
            self.lbl_patient.setStyleSheet(f"color: {COLORS['danger']}; font-size: {FONTS['size_small']}; font-weight: 700;")
            return
        self._update_patient_label()

    def _update_patient_label(self):
        term = "term" if self.patient.is_term else "preterm"
        self.lbl_patient.setText(
            f"{self.patient.weight_kg:g} kg, {self.patient.gestational_age_weeks} weeks ({term})"
        )
        self.lbl_patient.setStyleSheet(f"color: {COLORS['text_secondary']}; font-size: {FONTS['size_small']}; font-weight: 700;")

    # Stopwatch

    def on_tick(self):
        self.engine.tick()
        self.guidance.update_state(self.engine.get_snapshot())

    def _sync_timer(self):
        """Start or stop the tick source to follow the engine's running flag."""
        if self.engine.running and not self.timer.isActive():
            self.timer.start()
        elif not self.engine.running and self.timer.isActive():
            self.timer.stop()

    def closeEvent(self, event):
        self.timer.stop()
        super().closeEvent(event)


def main(
    config: Optional[SessionConfig] = None,
    patient: Optional[PatientParameters] = None,
    graph: Optional[ProtocolGraph] = None,
):
    app = QApplication.instance()
    if not app:
        app = QApplication(sys.argv)
    window = MainWindow(config=config, patient=patient, graph=graph)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
