import logging
import os
import sys

from tab_browser.analysis import summarise_columns
from tab_browser.logging_config import configure_logging
from tab_browser.services.workbench import create_workbench

configure_logging()

logger = logging.getLogger(__name__)

workbench = create_workbench(os.getenv("TAB_BROWSER_CONFIG", "config"))


if __name__ == "__main__":
    # Optional: a CSV/JSON file to load on startup
    if len(sys.argv) > 1:
        workbench.import_file(sys.argv[1])

        store = workbench.store
        for summary in summarise_columns(store.get_data(), store.get_column_names()):
            print(summary.to_text())
            print()
    else:
        logger.info("No data file given; workbench is empty")
