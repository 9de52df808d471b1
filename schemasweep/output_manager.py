"""
Output Manager — Writes the report to its fixed location.

The report always lands at {base_dir}/reports/schemasweep-report.json,
overwriting the previous run's file. base_dir is the invocation directory
unless --output-dir is given.

Pipeline context:
    Step 5 (write report). Only called once the whole pipeline has
    succeeded, so a failed run never leaves a partial report behind.
"""

import os
import json
from typing import Any, Dict, Optional

from config.settings import DEFAULT_SETTINGS


class OutputManager:
    """Resolves the report path and serializes the report to it.

    Attributes:
        base_dir: Directory the reports/ folder is created in.
        reports_dir: Full path of the reports/ folder.
        report_path: Full path of the report file.
    """

    def __init__(self, base_dir: Optional[str] = None):
        self.base_dir = os.path.abspath(base_dir or os.getcwd())
        self.reports_dir = os.path.join(self.base_dir, DEFAULT_SETTINGS["REPORTS_DIR"])
        self.report_path = os.path.join(self.reports_dir, DEFAULT_SETTINGS["REPORT_FILENAME"])

    def write_report(self, report: Dict[str, Any]) -> str:
        """Write the report as pretty-printed JSON.

        Returns:
            The path of the written file.
        """
        os.makedirs(self.reports_dir, exist_ok=True)
        with open(self.report_path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2, ensure_ascii=False)
        return self.report_path
