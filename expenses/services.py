from functools import partial
from typing import Any, Callable, Dict, List, Sequence

from expenses.demos import (
    either_validation_demo,
    functional_pipelines_demo,
    monadic_composition_demo,
    option_types_demo,
    pattern_matching_demo,
)
from expenses.domain import Category, Expense
from expenses.logging_setup import get_logger

logger = get_logger("expenses.services")

TITLE = "=== Expense Tracker Sandbox ==="
FOOTER = "=== Sandbox Complete ==="


def _step_name(section: Callable[..., Any]) -> str:
    if isinstance(section, partial):
        section = section.func
    return getattr(section, "__name__", str(section))


class ReportService:
    """Runs injected demo sections in order and collects their output.

    sections: sequence of zero-argument callables returning a list of lines.
    """

    def __init__(self, sections: Sequence[Callable[[], List[str]]]):
        self.sections = sections

    def run(self) -> Dict[str, Any]:
        """Run every section and return the combined lines with per-section steps."""
        report: Dict[str, Any] = {"steps": [], "lines": [TITLE, ""]}

        for section in self.sections:
            name = _step_name(section)
            out = section()
            logger.debug("Section %s produced %d lines", name, len(out))
            report["steps"].append({"section": name, "output": out})
            report["lines"].extend(out)

        report["lines"].append(FOOTER)
        return report


def default_sections(
    expenses: Sequence[Expense], cats: Sequence[Category]
) -> List[Callable[[], List[str]]]:
    return [
        partial(option_types_demo, expenses, cats),
        either_validation_demo,
        partial(functional_pipelines_demo, expenses),
        partial(pattern_matching_demo, expenses),
        partial(monadic_composition_demo, expenses),
    ]
