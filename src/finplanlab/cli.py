"""
Command-line interface for FinPlanLab.
"""

from __future__ import annotations

import argparse
import json
import sys

import numpy as np
import pandas as pd

from finplanlab import ConfigError, Household, ProjectionConfig
from finplanlab.core.context import DEFAULT_HORIZON_AGE
from finplanlab.kpi import lifetime_cashflow_totals


def _load_json(path: str) -> dict:
    """Load JSON from file path."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy scalars and arrays and pandas DataFrames."""

    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.ndarray):
            return obj.tolist()
        elif isinstance(obj, pd.DataFrame):
            return obj.to_dict("records")
        return super().default(obj)


def _save_json(path: str, data: dict) -> None:
    """Save data as JSON to file path."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False, cls=NumpyEncoder)


def _config_from_args(args) -> ProjectionConfig:
    return ProjectionConfig(
        horizon_age=args.horizon_age,
        current_year=args.current_year,
    )


def cmd_example(_) -> int:
    """Print a minimal household JSON."""
    example = {
        "profile": {
            "name": "Demo Household",
            "birthYear": 1985,
            "retirementAge": 60,
            "currentCash": 20000,
            "targetAssets": 1000000,
        },
        "incomes": [
            {
                "id": "salary",
                "title": "Salary",
                "amount": 4000,
                "frequency": "monthly",
                "startYear": 2025,
                "endYear": 2044,
                "growthRate": 2.0,
            }
        ],
        "expenses": [
            {
                "id": "living",
                "title": "Living costs",
                "amount": 2500,
                "frequency": "monthly",
                "startYear": 2025,
                "endYear": 2075,
                "growthRate": 2.0,
            }
        ],
        "savings": [
            {
                "id": "fund",
                "title": "Index fund",
                "amount": 300,
                "frequency": "monthly",
                "startYear": 2025,
                "endYear": 2044,
                "interestRate": 0.04,
            }
        ],
        "pensions": [
            {
                "id": "state",
                "title": "National pension",
                "type": "national",
                "monthlyAmount": 1200,
                "startYear": 2050,
                "endYear": 2075,
            }
        ],
        "realEstates": [
            {
                "id": "home",
                "title": "Home",
                "currentValue": 350000,
                "growthRate": 2.0,
                "startYear": 2025,
                "endYear": 2075,
            }
        ],
        "debts": [
            {
                "id": "mortgage",
                "title": "Mortgage",
                "debtAmount": 200000,
                "interestRate": 0.04,
                "debtType": "equal",
                "startYear": 2025,
                "endYear": 2049,
            }
        ],
    }
    json.dump(example, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def cmd_project(args) -> int:
    """Project a household JSON and export both series as JSON."""
    try:
        household = Household.from_dict(_load_json(args.input))
        results = household.run(_config_from_args(args))
        payload = results.to_dict()

        if args.output:
            _save_json(args.output, payload)
            print(
                f"Projected {len(results.cashflow)} years; results saved to {args.output}"
            )
        else:
            json.dump(payload, sys.stdout, indent=2, ensure_ascii=False, cls=NumpyEncoder)
            sys.stdout.write("\n")
        return 0

    except (ConfigError, OSError, ValueError) as e:
        print(f"Error projecting household: {e}", file=sys.stderr)
        return 1


def cmd_summary(args) -> int:
    """Print headline totals of a household projection."""
    try:
        household = Household.from_dict(_load_json(args.input))
        results = household.run(_config_from_args(args))
    except (ConfigError, OSError, ValueError) as e:
        print(f"Error projecting household: {e}", file=sys.stderr)
        return 1

    summary = results.summary()
    print(f"Years: {summary['first_year']}..{summary['last_year']}")
    print(f"Lifetime supply: {summary['total_supply']:,.0f}")
    print(f"Lifetime demand: {summary['total_demand']:,.0f}")
    print(f"Net cash flow:   {summary['net_cashflow']:,.0f}")
    if summary["first_deficit_year"] is not None:
        print(f"First deficit year: {summary['first_deficit_year']}")
    if summary["final_net_worth"] is not None:
        print(f"Final net worth: {summary['final_net_worth']:,.0f}")
        print(f"Gap to target:   {summary['target_gap']:,.0f}")

    if args.verbose:
        totals = lifetime_cashflow_totals(results.cashflow)
        print("\nSupply:")
        print(totals["supply"].to_string(index=False))
        print("\nDemand:")
        print(totals["demand"].to_string(index=False))
    return 0


def _add_projection_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("input", help="Household JSON file")
    parser.add_argument(
        "--current-year",
        type=int,
        default=None,
        help="First projected year (default: this year)",
    )
    parser.add_argument(
        "--horizon-age",
        type=int,
        default=DEFAULT_HORIZON_AGE,
        help=f"Age at which the projection stops (default: {DEFAULT_HORIZON_AGE})",
    )


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="finplanlab",
        description="FinPlanLab - Household cash-flow and net-worth projections",
    )

    # Version argument
    parser.add_argument("--version", action="version", version="FinPlanLab 0.1.0")

    subparsers = parser.add_subparsers(
        dest="cmd", required=True, help="Available commands"
    )

    # Example command
    example_parser = subparsers.add_parser(
        "example", help="Print a minimal household JSON"
    )
    example_parser.set_defaults(func=cmd_example)

    # Project command
    project_parser = subparsers.add_parser(
        "project", help="Project a household JSON and export JSON results"
    )
    _add_projection_args(project_parser)
    project_parser.add_argument(
        "-o", "--output", default=None, help="Output results JSON file (default: stdout)"
    )
    project_parser.set_defaults(func=cmd_project)

    # Summary command
    summary_parser = subparsers.add_parser(
        "summary", help="Print headline totals of a household projection"
    )
    _add_projection_args(summary_parser)
    summary_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Also print supply/demand tables"
    )
    summary_parser.set_defaults(func=cmd_summary)

    # Parse arguments and execute
    args = parser.parse_args(argv)
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
