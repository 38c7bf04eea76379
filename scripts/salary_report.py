"""Print one staff member's monthly payroll estimate.

Usage: python scripts/salary_report.py STAFF_ID [YEAR MONTH] [--json]
Year/month default to the current month.
"""
from __future__ import annotations

import argparse
import importlib
import json
import sys
from datetime import date
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.payroll_engine.payroll_engine.app_logger import setup_logging
from src.payroll_engine.payroll_engine.container import build_container
from src.payroll_engine.payroll_engine.core.exceptions import DomainError


def _money(value: float) -> str:
    return f"{value:>14,.2f}"


def print_report(data: dict) -> None:
    monthly = data["salaryStructure"]["monthly"]
    days = data["workingDays"]
    prorated = data["proratedSalary"]
    fine = data["fineInfo"]

    print(f"Staff {data['staffId']}  {data['year']}-{data['month']:02d}")
    if data["migratedFromLegacy"]:
        print("  (salary estimated from legacy gross/net)")
    print("-" * 44)
    for label, key in (
        ("Basic", "basicSalary"),
        ("Dearness allowance", "dearnessAllowance"),
        ("House rent allowance", "houseRentAllowance"),
        ("Special allowance", "specialAllowance"),
        ("Gross salary", "grossSalary"),
        ("Deductions", "totalMonthlyDeductions"),
        ("Net monthly salary", "netMonthlySalary"),
    ):
        print(f"{label:<24}{_money(monthly[key])}")
    print(f"{'Total CTC (yearly)':<24}{_money(data['salaryStructure']['totalCTC'])}")
    print("-" * 44)
    print(
        f"Days: total={days['totalDays']} working={days['workingDays']} "
        f"holidays={days['holidayCount']} weekOffs={days['weekOffCount']} present={data['presentDays']:g}"
    )
    print(f"{'Attendance %':<24}{_money(prorated['attendancePercentage'])}")
    print(f"{'Prorated net':<24}{_money(prorated['proratedNetSalary'])}")
    print(f"{'Late fine':<24}{_money(fine['totalFineAmount'])}  ({fine['lateDays']} days, {fine['totalLateMinutes']} min)")
    print(f"{'Final net':<24}{_money(data['finalNetSalary'])}")


def main(argv=None) -> int:
    today = date.today()
    parser = argparse.ArgumentParser(description="Monthly payroll estimate for one staff member")
    parser.add_argument("staff_id", type=int)
    parser.add_argument("year", type=int, nargs="?", default=today.year)
    parser.add_argument("month", type=int, nargs="?", default=today.month)
    parser.add_argument("--json", action="store_true", help="print the raw JSON estimate")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(db_config=settings.DB_CONFIG, settings=settings)

    try:
        estimate = container.payroll_service.monthly_estimate(args.staff_id, args.year, args.month)
    except DomainError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(estimate.to_dict(), indent=2))
    else:
        print_report(estimate.to_dict())
    return 0


if __name__ == "__main__":
    sys.exit(main())
