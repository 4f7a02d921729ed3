"""
GuidancePanel - decision-guidance view of the resuscitation protocol.

Renders the engine snapshot (stopwatch, current step, stage warning, SpO2
target, stale-step advisory) and routes every button through the engine.
"""

from PySide6.QtWidgets import QFrame, QVBoxLayout, QHBoxLayout, QLabel, QPushButton
from PySide6.QtCore import Qt, Signal

from neoresus.core.engine import StepEngine
from neoresus.core.errors import InvalidTransitionError
from neoresus.core.state import SessionSnapshot
from .styles import (
    COLORS,
    FONTS,
    get_banner_style,
    get_button_style,
    get_card_style,
    get_stopwatch_style,
    get_tinted_frame_style,
)


class GuidancePanel(QFrame):
    """
    Step-by-step guidance through the protocol graph.

    Emits `state_changed` after every command so the owner can keep its tick
    source in sync with the engine's running flag.
    """
    state_changed = Signal()

    def __init__(self, engine: StepEngine, parent=None):
        super().__init__(parent)
        self.engine = engine
        self._rendered_node = None
        self.action_buttons = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(12)

        # Stale-step advisory
        self.advisory_banner = QFrame()
        self.advisory_banner.setStyleSheet(get_banner_style(COLORS['advisory']))
        adv_layout = QHBoxLayout(self.advisory_banner)
        adv_layout.setContentsMargins(12, 8, 8, 8)
        self.lbl_advisory = QLabel("")
        self.lbl_advisory.setWordWrap(True)
        adv_layout.addWidget(self.lbl_advisory, stretch=1)
        self.btn_dismiss = QPushButton("Dismiss")
        self.btn_dismiss.setStyleSheet(get_button_style(variant="neutral", padding="4px 10px", radius=8))
        self.btn_dismiss.clicked.connect(self.on_dismiss_clicked)
        adv_layout.addWidget(self.btn_dismiss)
        layout.addWidget(self.advisory_banner)

        # Stopwatch card
        timer_card = QFrame()
        timer_card.setStyleSheet(get_card_style())
        timer_layout = QHBoxLayout(timer_card)
        timer_layout.setContentsMargins(16, 12, 16, 12)
        timer_text = QVBoxLayout()
        lbl_caption = QLabel("TOTAL RESUSCITATION TIME")
        lbl_caption.setStyleSheet(f"color: {COLORS['text_dim']}; font-size: {FONTS['size_small']}; font-weight: 700;")
        timer_text.addWidget(lbl_caption)
        self.lbl_time = QLabel("00:00")
        timer_text.addWidget(self.lbl_time)
        timer_layout.addLayout(timer_text)
        timer_layout.addStretch()

        self.btn_toggle = QPushButton("Start")
        self.btn_toggle.clicked.connect(self.on_toggle_clicked)
        timer_layout.addWidget(self.btn_toggle)
        self.btn_reset = QPushButton("Reset")
        self.btn_reset.setStyleSheet(get_button_style(variant="neutral"))
        self.btn_reset.clicked.connect(self.on_reset_clicked)
        timer_layout.addWidget(self.btn_reset)
        layout.addWidget(timer_card)

        # Stage warning
        self.warning_banner = QFrame()
        self.warning_banner.setStyleSheet(get_banner_style(COLORS['warning'], alpha=0.08))
        warn_layout = QHBoxLayout(self.warning_banner)
        warn_layout.setContentsMargins(12, 10, 12, 10)
        self.lbl_warning = QLabel("")
        self.lbl_warning.setWordWrap(True)
        warn_layout.addWidget(self.lbl_warning)
        layout.addWidget(self.warning_banner)

        # Decision card
        card = QFrame()
        card.setStyleSheet(get_card_style(radius=20))
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(20, 16, 20, 16)
        card_layout.setSpacing(8)

        header = QHBoxLayout()
        lbl_stage = QLabel("CURRENT STEP")
        lbl_stage.setStyleSheet(f"color: {COLORS['primary']}; font-size: {FONTS['size_small']}; font-weight: 700;")
        header.addWidget(lbl_stage)
        header.addStretch()
        self.lbl_total_elapsed = QLabel("")
        self.lbl_total_elapsed.setStyleSheet(f"color: {COLORS['text_dim']}; font-size: {FONTS['size_small']}; font-weight: 700;")
        header.addWidget(self.lbl_total_elapsed)
        card_layout.addLayout(header)

        self.lbl_title = QLabel("")
        self.lbl_title.setStyleSheet(f"font-size: {FONTS['size_title']}; font-weight: 800;")
        card_layout.addWidget(self.lbl_title)

        self.lbl_description = QLabel("")
        self.lbl_description.setWordWrap(True)
        self.lbl_description.setStyleSheet(f"color: {COLORS['text_secondary']}; font-size: {FONTS['size_medium']};")
        card_layout.addWidget(self.lbl_description)

        self.lbl_details = QLabel("")
        self.lbl_details.setWordWrap(True)
        self.lbl_details.setTextFormat(Qt.RichText)
        self.lbl_details.setStyleSheet(f"font-size: {FONTS['size_normal']}; font-weight: 600;")
        card_layout.addWidget(self.lbl_details)

        self.actions_layout = QVBoxLayout()
        self.actions_layout.setSpacing(8)
        card_layout.addLayout(self.actions_layout)

        self.lbl_status = QLabel("")
        self.lbl_status.setWordWrap(True)
        self.lbl_status.setStyleSheet(f"color: {COLORS['danger']}; font-size: {FONTS['size_small']}; font-weight: 600;")
        card_layout.addWidget(self.lbl_status)
        layout.addWidget(card)

        # SpO2 target
        self.spo2_banner = QFrame()
        self.spo2_banner.setStyleSheet(get_tinted_frame_style(COLORS['primary'], alpha=0.1))
        spo2_layout = QHBoxLayout(self.spo2_banner)
        spo2_layout.setContentsMargins(16, 10, 16, 10)
        lbl_spo2_caption = QLabel("SpO2 target after birth\nPre-ductal (right hand)")
        lbl_spo2_caption.setStyleSheet(f"font-size: {FONTS['size_small']}; font-weight: 700;")
        spo2_layout.addWidget(lbl_spo2_caption)
        spo2_layout.addStretch()
        self.lbl_spo2 = QLabel("")
        self.lbl_spo2.setStyleSheet(f"font-size: {FONTS['size_title']}; font-weight: 800;")
        spo2_layout.addWidget(self.lbl_spo2)
        layout.addWidget(self.spo2_banner)

        layout.addStretch()

        self.update_state(self.engine.get_snapshot())

    # Rendering

    def update_state(self, snapshot: SessionSnapshot):
        """Refresh all widgets from a snapshot. Called after commands and ticks."""
        if snapshot.current_node != self._rendered_node:
            self._render_node(snapshot)

        self.lbl_time.setText(snapshot.elapsed_label)
        self.lbl_time.setStyleSheet(get_stopwatch_style(snapshot.urgency_tier))
        self._set_run_state(snapshot.is_running)

        seconds = snapshot.global_elapsed_seconds
        self.lbl_total_elapsed.setText(f"{seconds}s elapsed" if seconds > 0 else "")

        self.advisory_banner.setVisible(snapshot.stale_step_advisory)
        self.lbl_advisory.setText(
            f"{snapshot.per_node_elapsed_seconds}s in this step. Decide and move to the next step."
        )

        self.spo2_banner.setVisible(seconds > 0)
        self.lbl_spo2.setText(snapshot.target_spo2)

    def _render_node(self, snapshot: SessionSnapshot):
        node = snapshot.node
        self._rendered_node = node.id
        self.lbl_title.setText(node.title)
        self.lbl_description.setText(node.description)
        self.lbl_details.setText("<br>".join(f"&#10003; {d}" for d in node.details))
        self.warning_banner.setVisible(bool(node.warning))
        self.lbl_warning.setText(node.warning or "")
        self.lbl_status.setText("")

        while self.actions_layout.count():
            item = self.actions_layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()
        self.action_buttons = {}
        for transition in snapshot.transitions:
            btn = QPushButton(transition.caption or transition.label)
            btn.setStyleSheet(get_button_style(variant="primary" if transition.primary else "neutral", padding="14px 20px"))
            btn.clicked.connect(lambda _checked=False, label=transition.label: self.on_action_clicked(label))
            self.actions_layout.addWidget(btn)
            self.action_buttons[transition.label] = btn

    def _set_run_state(self, running: bool):
        if running:
            self.btn_toggle.setText("Pause")
            self.btn_toggle.setStyleSheet(get_button_style(variant="warning"))
        else:
            self.btn_toggle.setText("Start")
            self.btn_toggle.setStyleSheet(get_button_style(variant="success"))

    # Commands

    def on_action_clicked(self, label: str):
        self.lbl_status.setText("")
        try:
            self.engine.advance(label)
        except InvalidTransitionError as exc:
            self.lbl_status.setText(str(exc))
        self._after_command()

    def on_toggle_clicked(self):
        self.engine.toggle_running()
        self._after_command()

    def on_reset_clicked(self):
        self.engine.reset()
        self._after_command()

    def on_dismiss_clicked(self):
        self.engine.dismiss_advisory()
        self._after_command()

    def _after_command(self):
        self.update_state(self.engine.get_snapshot())
        self.state_changed.emit()

    def click_action(self, label: str):
        """Programmatic click for testing."""
        btn = self.action_buttons.get(label)
        if btn is None:
            # Route through the engine so the rejection is reported
            self.on_action_clicked(label)
        else:
            btn.click()
