"""
Export utility.

Batch CSV I/O for review requests and generated reviews. This is the
surrounding application's side of the agent; the agent itself never
touches files.
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import List, Optional

import pandas as pd

import config.settings as settings
from src.models.review_request import ReviewRequest
from src.models.review_result import ReviewResult
from src.utils.monitoring import REVIEW_COPY_FAILED

logger = logging.getLogger(__name__)


class ReviewExporter:
    """
    Loads batch requests and writes generated reviews.

    Output:
    - reviews_<stamp>.csv (one row per request)
    - reviews_<stamp>_metadata.json (counts and averages)
    """

    def __init__(self, output_dir: str, monitor=None):
        """
        Args:
            output_dir: Directory for exported files (created if missing)
            monitor: Optional event sink notified on export failure
        """
        self.output_dir = output_dir
        self.monitor = monitor

    def load_requests(self, csv_path: str) -> List[ReviewRequest]:
        """
        Load review requests from CSV.

        Expected columns: features, staff, comments, platform. Features are
        separated by ';'. Missing columns and empty cells read as empty.

        Args:
            csv_path: Path to input CSV

        Returns:
            Requests in file order
        """
        df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)

        unknown = [col for col in df.columns if col not in settings.BATCH_COLUMNS]
        if unknown:
            logger.warning(f"Ignoring unknown columns in {csv_path}: {unknown}")

        for col in settings.BATCH_COLUMNS:
            if col not in df.columns:
                df[col] = ""

        requests = []
        for row in df[settings.BATCH_COLUMNS].to_dict(orient="records"):
            requests.append(
                ReviewRequest(
                    features=row["features"].split(settings.BATCH_FEATURE_SEPARATOR),
                    staff=row["staff"],
                    comments=row["comments"],
                    platform=row["platform"]
                )
            )

        logger.info(f"Loaded {len(requests)} review requests from {csv_path}")
        return requests

    def to_frame(self, requests: List[ReviewRequest], results: List[ReviewResult]) -> pd.DataFrame:
        """Flatten requests and their results into one table."""
        if len(requests) != len(results):
            raise ValueError(
                f"Got {len(requests)} requests but {len(results)} results"
            )

        rows = []
        for request, result in zip(requests, results):
            rows.append({
                "platform": request.platform,
                "features": settings.BATCH_FEATURE_SEPARATOR.join(request.features),
                "success": result.success,
                "review": result.text,
                "confidence": round(result.confidence, 4),
                "quality_score": round(result.quality_score, 4),
                "error": result.error or "",
            })

        columns = ["platform", "features", "success", "review", "confidence", "quality_score", "error"]
        return pd.DataFrame(rows, columns=columns)

    def save_results(
        self,
        requests: List[ReviewRequest],
        results: List[ReviewResult],
        stamp: Optional[str] = None
    ) -> str:
        """
        Write results CSV and metadata JSON.

        Args:
            requests: Batch requests
            results: Results in the same order
            stamp: File name suffix (defaults to current UTC time)

        Returns:
            Path to the CSV file

        Raises:
            OSError: If files cannot be written (after notifying the monitor)
        """
        stamp = stamp or datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        df = self.to_frame(requests, results)

        csv_path = os.path.join(self.output_dir, f"reviews_{stamp}.csv")
        metadata_path = os.path.join(self.output_dir, f"reviews_{stamp}_metadata.json")

        succeeded = int(df["success"].sum()) if not df.empty else 0
        metadata = {
            "total_requests": len(df),
            "succeeded": succeeded,
            "failed": len(df) - succeeded,
            "average_quality_score": float(df.loc[df["success"], "quality_score"].mean()) if succeeded else 0.0,
            "platforms": {k: int(v) for k, v in df["platform"].value_counts().items()},
            "generated_at": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        }

        try:
            os.makedirs(self.output_dir, exist_ok=True)
            df.to_csv(csv_path, index=False)
            with open(metadata_path, "w") as f:
                json.dump(metadata, f, indent=2)
        except OSError as e:
            logger.error(f"Failed to export reviews to {self.output_dir}: {e}")
            if self.monitor is not None:
                self.monitor.track(REVIEW_COPY_FAILED, {"path": csv_path, "error": str(e)})
            raise

        logger.info(
            f"Exported {len(df)} reviews to {csv_path} "
            f"({succeeded} succeeded, {len(df) - succeeded} failed)"
        )
        return csv_path
