"""Interactive command-line calculator."""

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

import structlog

from calorie_calculator.application.questionnaire import QuestionnaireSession
from calorie_calculator.domain.questionnaire.core.value_objects import (
    MeasurementUnit,
    RawAnswer,
    StepTransition,
)
from calorie_calculator.domain.questionnaire.validation import StepDefinition, StepKind
from calorie_calculator.domain.shared.value_objects import AnswerField
from calorie_calculator.infrastructure.config import (
    LOG_LEVELS,
    CalculatorSettings,
    ConfigurationError,
    load_env_file,
)
from calorie_calculator.infrastructure.engine_factory import create_calculation_engine
from calorie_calculator.infrastructure.export import DocumentExporter, JsonExporter
from calorie_calculator.infrastructure.logging_config import configure_logging

logger = structlog.get_logger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

BACK_COMMAND = "back"
SKIP_COMMAND = "skip"
QUIT_COMMAND = "quit"

QUESTIONS = {
    AnswerField.AGE: "How old are you?",
    AnswerField.GENDER: "What is your gender?",
    AnswerField.HEIGHT_CM: "How tall are you?",
    AnswerField.WEIGHT_KG: "What is your current weight?",
    AnswerField.GOAL: "What is your goal?",
    AnswerField.ACTIVITY: "How active are you?",
    AnswerField.BODY_FAT_PCT: "Do you know your body fat percentage? (optional)",
    AnswerField.WAIST_CM: "What is your waist measurement?",
    AnswerField.WORK: "What kind of work do you do?",
    AnswerField.SLEEP_HOURS: "How many hours do you sleep per night?",
    AnswerField.STRESS: "How would you rate your stress level?",
}

IMPERIAL_UNITS = {
    AnswerField.HEIGHT_CM: MeasurementUnit.FT_IN,
    AnswerField.WEIGHT_KG: MeasurementUnit.LBS,
    AnswerField.WAIST_CM: MeasurementUnit.IN,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calorie-calculator",
        description="Guided calorie, macro and body metrics calculator",
    )
    parser.add_argument(
        "--imperial",
        action="store_true",
        help="Enter height in ft/in, weight in lbs and waist in inches",
    )
    parser.add_argument("--json", metavar="PATH", help="Write the JSON export to PATH")
    parser.add_argument(
        "--report", metavar="PATH", help="Write the text report to PATH"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Log level (default: CALC_LOG_LEVEL or INFO)",
    )
    return parser


def run(
    argv: Optional[Sequence[str]] = None,
    input_fn: InputFn = input,
    output: OutputFn = print,
) -> int:
    """Run the questionnaire and print the results.

    Args:
        argv: Command-line arguments (defaults to sys.argv)
        input_fn: Reads one line of user input
        output: Writes one line of output

    Returns:
        int: Exit code (0 success, 1 aborted or failed, 2 bad configuration)
    """
    args = build_parser().parse_args(argv)

    load_env_file()
    try:
        settings = CalculatorSettings.from_env()
    except ConfigurationError as error:
        output(f"❌ Configuration error: {error}")
        return 2

    configure_logging(args.log_level or settings.log_level, settings.log_json)
    session = QuestionnaireSession(create_calculation_engine(settings))

    output("Calorie Calculator")
    output("=" * 50)
    output(f"Type '{BACK_COMMAND}' to return to the previous question, '{QUIT_COMMAND}' to exit.")

    try:
        completed = _ask_questions(session, args.imperial, input_fn, output)
    except EOFError:
        completed = False
    if not completed:
        output("Aborted.")
        return 1

    outcome = session.compute()
    if not outcome.ok:
        output(f"❌ {outcome.error}")
        return 1

    for warning in outcome.warnings:
        output(f"⚠️  {warning.message()}")

    result = outcome.result
    document = DocumentExporter()
    output("")
    output(
        document.render(
            session.store, result, outcome.recommendations, outcome.warnings
        ).rstrip("\n")
    )

    try:
        if args.json:
            text = JsonExporter().to_json(
                session.store, result, outcome.recommendations, outcome.warnings
            )
            Path(args.json).write_text(text, encoding="utf-8")
            logger.info("JSON export written", path=args.json)
            output(f"✅ JSON export written to {args.json}")

        if args.report:
            path = document.write(
                args.report, session.store, result, outcome.recommendations, outcome.warnings
            )
            output(f"✅ Report written to {path}")
    except OSError as error:
        logger.error("Export failed", error=str(error))
        output(f"❌ Export failed: {error}")
        return 1

    return 0


def _ask_questions(
    session: QuestionnaireSession,
    imperial: bool,
    input_fn: InputFn,
    output: OutputFn,
) -> bool:
    while session.is_answering:
        definition = session.next_question()
        progress = session.progress()
        output("")
        output(f"[{definition.field.step()}/{progress.total_steps}] {_question(definition, imperial)}")

        unit = IMPERIAL_UNITS.get(definition.field) if imperial else None
        answer = input_fn("> ").strip()
        command = answer.lower()

        if command == QUIT_COMMAND:
            return False
        if command == BACK_COMMAND:
            session.go_back()
            continue

        if command == SKIP_COMMAND:
            raw = RawAnswer.skip()
        elif unit == MeasurementUnit.FT_IN:
            inches = input_fn("inches> ").strip()
            raw = RawAnswer.feet_inches(answer, inches)
        elif definition.kind == StepKind.CHOICE:
            raw = RawAnswer.choice(answer)
        else:
            raw = RawAnswer.number(answer, unit)

        transition = session.submit(raw)
        if transition.needs_confirmation:
            transition = _confirm(session, transition, input_fn)
        if not transition.ok and transition.error:
            output(f"❌ {transition.error}")
    return True


def _confirm(
    session: QuestionnaireSession, transition: StepTransition, input_fn: InputFn
) -> StepTransition:
    reply = input_fn(f"{transition.prompt} [y/N] ").strip().lower()
    if reply in ("y", "yes"):
        return session.confirm_override()
    return transition


def _question(definition: StepDefinition, imperial: bool) -> str:
    text = QUESTIONS[definition.field]
    if definition.kind == StepKind.CHOICE:
        options = ", ".join(option.value for option in definition.choices)
        return f"{text} ({options})"

    unit = IMPERIAL_UNITS.get(definition.field) if imperial else None
    if unit == MeasurementUnit.FT_IN:
        return f"{text} (feet, then inches)"
    if unit is not None:
        return f"{text} ({unit.value})"
    if definition.default_unit is not None:
        return f"{text} ({definition.default_unit.value})"
    if definition.kind == StepKind.OPTIONAL_NUMBER:
        return f"{text} [type '{SKIP_COMMAND}' or leave empty to skip]"
    return text


def main() -> None:
    sys.exit(run())
