import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from expenses.logging_setup import configure_logging, get_logger
from expenses.services import ReportService, default_sections
from expenses.transforms import sample_categories, sample_expenses

logger = get_logger("expenses.cli")


def main() -> int:
    """Print every demo section to stdout. Always exits 0."""
    configure_logging()

    categories = sample_categories()
    expenses = sample_expenses(categories)
    logger.info("Running demos over %d sample expenses", len(expenses))

    report = ReportService(default_sections(expenses, categories)).run()
    for line in report["lines"]:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
