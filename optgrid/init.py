# Optgrid Option Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""init.py"""
from pathlib import Path

from optgrid.console import console

TEMPLATE_TABLE = """\
# optgrid.yaml: option table for a small expense tracker
# Try: optgrid help, optgrid help add, optgrid classify -ev --from 2301 lunch
version: "1.0.0"
options:
  - short: h
    long: help
    arity: 1
    hints: ["[option]"]
    description: Prints help message
  - short: a
    long: add
    arity: 4
    hints: ["<money>", "<last_4_digits>", "<item>", "<remark>"]
    description: Adds an expense or income record
    group: Records
  - short: f
    long: fetch
    arity: 1
    hints: ["[yymmdd]"]
    description: Fetches all records of the specified day or today
    group: Records
  - short: d
    long: delete
    arity: 1
    hints: ["<serial_no>"]
    description: Deletes record of the given serial number
    group: Records
  - long: sort
    arity: 1
    hints: ["<new/old/high/low>"]
    description: Sorts records in the given order
    group: Ranges
  - long: from
    arity: 1
    hints: ["<yymmdd/yymm/yyww/yy>"]
    description: Provides a start point for range operations (inclusive)
    group: Ranges
  - long: to
    arity: 1
    hints: ["<yymmdd/yymm/yyww/yy>"]
    description: Provides a finish point for range operations (inclusive)
    group: Ranges
  - short: e
    long: expense
    description: Does expense-related operations only
    group: Filters
  - short: i
    long: income
    description: Does income-related operations only
    group: Filters
  - short: w
    long: week
    description: Signals the date string in format of yyww
    group: Filters
  - short: v
    long: verbose
    description: Prints verbose messages
  - long: now
    keyword: today
    description: "Gets today's date information: year, month, week, date"
"""


def init_project(name: str = ".") -> None:
    target = Path(name).resolve()
    target.mkdir(parents=True, exist_ok=True)

    table_path = target / "optgrid.yaml"

    if table_path.exists():
        console.print(f"⚠️  Option table already exists in {target}. Skipping.")
        return

    table_path.write_text(TEMPLATE_TABLE, encoding="UTF-8")

    console.print(f"✅ Initialized option table in {target}")
