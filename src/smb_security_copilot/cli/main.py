from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from ..catalog import DEFAULT_AFFILIATES, DEFAULT_QUESTIONS
from ..core import DEFAULT_RULES, PlanEvaluator
from ..io import dump_result_file, load_affiliate_file, load_answers_file
from ..models import AnswerValidationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smb-plan",
        description="Build a prioritized SMB security plan from questionnaire answers.",
    )
    parser.add_argument("input", nargs="?", help="JSON file containing an object of question key -> answer")
    parser.add_argument(
        "--out",
        default="output/plan.json",
        help="Output JSON file path (default: output/plan.json)",
    )
    parser.add_argument("--affiliates", default="", help="Optional JSON vendor catalog replacing the built-in one")
    parser.add_argument(
        "--include-vendors",
        action="store_true",
        help="Embed the vendor options for each step's category in the output",
    )
    parser.add_argument(
        "--list-questions",
        action="store_true",
        help="Print the questionnaire as JSON and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.list_questions:
        print(json.dumps([q.to_payload() for q in DEFAULT_QUESTIONS], indent=2))
        return 0

    if not args.input:
        print("error: an input file is required (or pass --list-questions)", file=sys.stderr)
        return 2

    input_path = Path(args.input).resolve()
    output_path = Path(args.out).resolve()

    if not input_path.exists() or not input_path.is_file():
        print(f"error: input file not found: {input_path}", file=sys.stderr)
        return 2

    affiliates = DEFAULT_AFFILIATES
    if args.affiliates:
        affiliates_path = Path(args.affiliates).resolve()
        try:
            affiliates = load_affiliate_file(affiliates_path)
        except (OSError, ValueError) as exc:
            print(f"error: invalid affiliate catalog: {exc}", file=sys.stderr)
            return 2

    evaluator = PlanEvaluator(DEFAULT_QUESTIONS, DEFAULT_RULES, affiliates)

    try:
        answers = load_answers_file(input_path)
        plan = evaluator.evaluate(answers)
    except AnswerValidationError as exc:
        for issue in exc.issues:
            print(f"error: {issue.key or '<input>'}: {issue.problem} ({issue.value!r})", file=sys.stderr)
        return 2
    except (OSError, ValueError) as exc:
        print(f"error: invalid input: {exc}", file=sys.stderr)
        return 2

    payload = evaluator.plan_payload(plan, include_vendors=args.include_vendors)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    dump_result_file(output_path, payload)

    print(f"score={plan.score}")
    print(f"steps={','.join(plan.step_ids) or '-'}")
    print(f"wrote={output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
