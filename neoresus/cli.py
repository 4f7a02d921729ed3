import argparse
import logging
import sys
import time

from neoresus.core.engine import StepEngine
from neoresus.core.session import ResuscitationSession
from neoresus.core.state import SessionConfig, load_config
from neoresus.patient.patient import PatientParameters
from neoresus.protocol import PROTOCOL_BUILDERS

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser():
    parser = argparse.ArgumentParser(description="NeoResus - Neonatal Resuscitation Guide")
    parser.add_argument("--mode", choices=["ui", "headless"], default="ui", help="Run mode (default: ui)")
    parser.add_argument("--duration", type=float, default=10.0, help="Stopwatch duration for headless mode in seconds")
    parser.add_argument("--protocol", choices=sorted(PROTOCOL_BUILDERS), default="nrp", help="Protocol graph (default: nrp)")
    parser.add_argument("--config", type=str, help="Path to JSON configuration file")
    parser.add_argument("--weight", type=float, help="Initial patient weight in kg")
    parser.add_argument("--gestational-age", type=int, help="Initial gestational age in weeks")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO", help="Logging level (default: INFO)")
    return parser


def resolve_settings(args):
    """Build the session config and starting patient from file and flags."""
    config = load_config(args.config) if args.config else SessionConfig()
    weight = args.weight if args.weight is not None else config.default_weight_kg
    ga = args.gestational_age if args.gestational_age is not None else config.default_gestational_age_weeks
    patient = PatientParameters(weight_kg=weight, gestational_age_weeks=ga)
    return config, patient


def run_headless(args, config, patient):
    """
    Print the dosage card, then run the stopwatch for `duration` seconds and
    print the time, urgency and SpO2 target at every tick. No protocol
    actions are taken; the session stays at the initial step.
    """
    engine = StepEngine(graph=PROTOCOL_BUILDERS[args.protocol](), config=config)
    with ResuscitationSession(config=config, engine=engine) as session:
        session.update_patient(patient.weight_kg, patient.gestational_age_weeks)
        print(f"Dosages for {session.patient.weight_kg:g} kg:")
        for key, value in session.dosages().as_dict().items():
            print(f"  {key}: {value}")

        print(f"Running stopwatch for {args.duration}s...")
        session.toggle_running()
        deadline = time.monotonic() + args.duration
        last_printed = -1
        while True:
            snap = session.snapshot()
            if snap.global_elapsed_seconds != last_printed:
                last_printed = snap.global_elapsed_seconds
                print(
                    f"Time: {snap.elapsed_label} | Urgency: {snap.urgency_tier.value} "
                    f"| SpO2 target: {snap.target_spo2}"
                )
            if time.monotonic() >= deadline:
                break
            time.sleep(min(0.1, config.tick_interval_sec / 2))
        session.toggle_running()
        return session.snapshot()


def run_ui(args, config, patient):
    """Open the guidance window."""
    from neoresus.ui.main_window import main as ui_main

    ui_main(config=config, patient=patient, graph=PROTOCOL_BUILDERS[args.protocol]())


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config, patient = resolve_settings(args)
    except (OSError, ValueError) as e:
        logger.error("Error loading configuration: %s", e)
        sys.exit(1)

    logger.info("Starting NeoResus (%.1f kg, %d weeks)", patient.weight_kg, patient.gestational_age_weeks)
    if args.mode == "headless":
        run_headless(args, config, patient)
    else:
        run_ui(args, config, patient)


if __name__ == "__main__":
    main()
