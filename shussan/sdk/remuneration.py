"""Standard monthly remuneration (標準報酬月額) lookup.

Maps a monthly gross salary to the nearest grade in the remuneration table.
The decision boundary between adjacent grades is their midpoint; a salary
exactly on the midpoint goes to the upper grade (salary < midpoint picks the
lower one).
"""

import logging
from typing import Any, Dict, List, Optional

from .rules import load_rules
from .schemas import Rules

logger = logging.getLogger(__name__)


def standard_remuneration(salary: float, rules: Optional[Rules] = None) -> int:
    """Get the standard monthly remuneration grade for a salary.

    Salaries below the first grade map to the first grade; salaries at or
    above the last grade map to the last grade.

    Args:
        salary: Monthly gross salary in yen (>= 0)
        rules: Rules to use (default: load_rules())

    Returns:
        One of the table's grade values
    """
    rules = rules or load_rules()
    table = rules.standard_remuneration_table

    if salary < table[0]:
        return table[0]
    if salary >= table[-1]:
        return table[-1]

    for current, nxt in zip(table, table[1:]):
        # salary < (current + next) / 2, kept in integers
        if salary * 2 < current + nxt:
            logger.debug(f"salary {salary} -> grade {current}")
            return current

    return table[-1]


def list_brackets(rules: Optional[Rules] = None) -> List[Dict[str, Any]]:
    """List grades with the salary range that maps to each.

    Returns:
        List of dicts with:
            - grade: 1-based grade number
            - remuneration: grade value
            - salary_from: lowest salary mapping here (None for the first grade)
            - salary_below: salaries below this map here (None for the last grade)
    """
    rules = rules or load_rules()
    table = rules.standard_remuneration_table

    brackets = []
    for i, value in enumerate(table):
        lower = (table[i - 1] + value) // 2 if i > 0 else None
        upper = (value + table[i + 1]) // 2 if i < len(table) - 1 else None
        brackets.append({
            "grade": i + 1,
            "remuneration": value,
            "salary_from": lower,
            "salary_below": upper,
        })
    return brackets
