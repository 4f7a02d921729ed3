import sys
import unittest

from PySide6.QtWidgets import QApplication

from neoresus.core.engine import StepEngine
from neoresus.core.enums import AppSection, NodeId
from neoresus.core.state import SessionConfig
from neoresus.patient.patient import PatientParameters
from neoresus.ui.calculator_widget import INVALID_VALUE, CalculatorWidget
from neoresus.ui.guidance_panel import GuidancePanel
from neoresus.ui.main_window import MainWindow
from neoresus.ui.reference_widgets import ChecklistWidget, GoalsWidget, TheoryWidget, markup_to_html


# Helper to get QApp
def get_qapp():
    app = QApplication.instance()
    if not app:
        app = QApplication(sys.argv)
    return app


class TestGuidancePanel(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = get_qapp()

    def setUp(self):
        self.engine = StepEngine()
        self.panel = GuidancePanel(self.engine)

    def tick(self, n):
        for _ in range(n):
            self.engine.tick()
        self.panel.update_state(self.engine.get_snapshot())

    def test_initial_render(self):
        self.assertEqual(list(self.panel.action_buttons), ["birth-occurs"])
        self.assertEqual(self.panel.lbl_time.text(), "00:00")
        self.assertEqual(self.panel.btn_toggle.text(), "Start")
        self.assertTrue(self.panel.spo2_banner.isHidden())
        self.assertTrue(self.panel.advisory_banner.isHidden())

    def test_click_flow(self):
        self.panel.click_action("birth-occurs")
        self.assertEqual(self.engine.state.current_node, NodeId.BIRTH)
        self.assertEqual(self.panel.btn_toggle.text(), "Pause")
        self.assertEqual(set(self.panel.action_buttons), {"vigorous", "not-vigorous"})
        self.assertFalse(self.panel.warning_banner.isHidden())

        self.panel.click_action("not-vigorous")
        self.assertEqual(self.engine.state.current_node, NodeId.INITIAL)
        self.assertEqual(self.panel.lbl_title.text(), self.engine.get_snapshot().node.title)

    def test_invalid_action_reported_in_status(self):
        self.panel.click_action("abnormal")
        self.assertEqual(self.engine.state.current_node, NodeId.PREP)
        self.assertIn("abnormal", self.panel.lbl_status.text())

    def test_stopwatch_and_spo2(self):
        self.panel.click_action("birth-occurs")
        self.tick(61)
        self.assertEqual(self.panel.lbl_time.text(), "01:01")
        self.assertEqual(self.panel.lbl_total_elapsed.text(), "61s elapsed")
        self.assertFalse(self.panel.spo2_banner.isHidden())
        self.assertEqual(self.panel.lbl_spo2.text(), "65%-70%")

    def test_advisory_banner_and_dismiss(self):
        self.panel.click_action("birth-occurs")
        self.tick(30)
        self.assertFalse(self.panel.advisory_banner.isHidden())
        self.panel.btn_dismiss.click()
        self.assertTrue(self.panel.advisory_banner.isHidden())
        self.assertEqual(self.engine.state.per_node_elapsed_seconds, 30)

    def test_toggle_and_reset(self):
        self.panel.btn_toggle.click()
        self.assertTrue(self.engine.running)
        self.panel.click_action("birth-occurs")
        self.tick(5)
        self.panel.btn_reset.click()
        self.assertEqual(self.engine.state.current_node, NodeId.PREP)
        self.assertFalse(self.engine.running)
        self.assertEqual(self.panel.lbl_time.text(), "00:00")
        self.assertEqual(list(self.panel.action_buttons), ["birth-occurs"])

    def test_state_changed_emitted(self):
        received = []
        self.panel.state_changed.connect(lambda: received.append(True))
        self.panel.btn_toggle.click()
        self.panel.click_action("not-a-label")
        self.assertEqual(len(received), 2)


class TestCalculatorWidget(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = get_qapp()

    def test_values_for_term_weight(self):
        widget = CalculatorWidget(3.0)
        self.assertEqual(widget.tile_et_size.value(), "3.5 mm")
        self.assertEqual(widget.tile_et_depth.value(), "9.0 cm")
        self.assertEqual(widget.tile_lma.value(), "Size 2.0")
        self.assertEqual(widget.tile_epi_iv.value(), "0.30-0.90 mL")
        self.assertEqual(widget.tile_volume.value(), "30-60 mL")
        self.assertEqual(widget.tile_uvc.value(), "3-5 cm")
        self.assertEqual(widget.lbl_error.text(), "")

    def test_invalid_weight_withholds_values(self):
        widget = CalculatorWidget(3.0)
        self.assertIsNone(widget.update_weight(0))
        self.assertIsNone(widget.result)
        for tile in widget._dose_tiles():
            self.assertEqual(tile.value(), INVALID_VALUE)
        self.assertIn("withheld", widget.lbl_error.text())
        # Recovers on the next valid weight
        self.assertIsNotNone(widget.update_weight(1.5))
        self.assertEqual(widget.tile_et_size.value(), "3.0 mm")
        self.assertEqual(widget.lbl_error.text(), "")


class TestReferenceWidgets(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = get_qapp()

    def test_goals_rows(self):
        widget = GoalsWidget()
        self.assertEqual(len(widget.rows), 6)

    def test_checklists(self):
        widget = ChecklistWidget()
        self.assertEqual(set(widget.checkboxes), {"pre", "post"})
        self.assertTrue(all(not cb.isChecked() for cb in widget.checkboxes["pre"]))

    def test_theory_sections(self):
        widget = TheoryWidget()
        self.assertEqual(widget.toolbox.count(), 5)

    def test_markup(self):
        self.assertEqual(markup_to_html("**HR** < 60\nstart"), "<b>HR</b> &lt; 60<br>start")


class TestMainWindow(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = get_qapp()

    def setUp(self):
        self.window = MainWindow(config=SessionConfig())

    def tearDown(self):
        self.window.close()

    def test_tabs(self):
        titles = [self.window.tabs.tabText(i) for i in range(self.window.tabs.count())]
        self.assertEqual(titles, [section.value for section in AppSection])

    def test_timer_follows_running_flag(self):
        self.assertFalse(self.window.timer.isActive())
        self.assertEqual(self.window.timer.interval(), 1000)
        self.window.guidance.click_action("birth-occurs")
        self.assertTrue(self.window.timer.isActive())
        self.window.guidance.btn_toggle.click()
        self.assertFalse(self.window.timer.isActive())
        self.window.guidance.btn_toggle.click()
        self.assertTrue(self.window.timer.isActive())
        self.window.guidance.btn_reset.click()
        self.assertFalse(self.window.timer.isActive())

    def test_on_tick_updates_display(self):
        self.window.guidance.click_action("birth-occurs")
        self.window.on_tick()
        self.window.on_tick()
        self.assertEqual(self.window.guidance.lbl_time.text(), "00:02")

    def test_weight_change_updates_calculator(self):
        self.window.sb_weight.setValue(0.8)
        self.assertEqual(self.window.calculator.tile_et_size.value(), "2.5 mm")
        self.assertEqual(self.window.patient.weight_kg, 0.8)

    def test_zero_weight_rejected(self):
        self.window.sb_weight.setValue(0.0)
        self.assertIsNone(self.window.calculator.result)
        self.assertEqual(self.window.patient.weight_kg, 3.0)
        self.assertIn("weight_kg", self.window.lbl_patient.text())

    def test_gestational_age_label(self):
        self.window.sb_ga.setValue(30)
        self.assertIn("preterm", self.window.lbl_patient.text())

    def test_close_stops_timer(self):
        self.window.show()
        self.window.guidance.click_action("birth-occurs")
        self.window.close()
        self.assertFalse(self.window.timer.isActive())

    def test_initial_patient(self):
        window = MainWindow(patient=PatientParameters(1.2, 30))
        self.assertAlmostEqual(window.sb_weight.value(), 1.2)
        self.assertEqual(window.calculator.tile_et_size.value(), "3.0 mm")
        window.close()


if __name__ == "__main__":
    unittest.main()
