"""BootstrapLoader: seeds an empty LogStore with demo logs.

Expected layout (by convention):

    <demo_logs_path>/sample_logs_<region lowercased>.json

Each file is a JSON array shaped like:

    [
      {"raw": {"time": 1704067200000, "log": "service started"}},
      ...
    ]

Loading is best-effort per region: a missing or unparsable file skips that
region with a warning, while a failed insert transaction aborts the whole
bootstrap with BootstrapHardError.

The loader itself cannot tell whether content was already loaded; use
``bootstrap_if_empty`` to apply the "only when the store is empty" rule.
"""

import json
import logging
from pathlib import Path
from typing import List, Sequence, Tuple

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from configs.settings import Settings
from exceptions.exceptions import BootstrapHardError, BootstrapSoftError, StorageError
from ..models.log_models import BootstrapReport, DemoRecord, RegionLoadResult
from .log_store import LogStore


logger = logging.getLogger(__name__)

DEFAULT_REGIONS = ("NA", "EU", "AP")

_RECORDS = TypeAdapter(List[DemoRecord])


class BootstrapLoader:
    """Reads per-region demo files and inserts them into a LogStore.

    Parameters
    ----------
    store:
        Target store; rows are inserted with one transaction per region.
    demo_logs_path:
        Directory holding the ``sample_logs_<region>.json`` files.
        Defaults to "../demo_logs" relative to the working directory.
    regions:
        Region codes to load, in order.
    """

    def __init__(
        self,
        store: LogStore,
        demo_logs_path: str = "../demo_logs",
        regions: Sequence[str] = DEFAULT_REGIONS,
    ) -> None:
        self.store = store
        self.demo_logs_path = Path(demo_logs_path)
        self.regions = list(regions)

    def region_file(self, region: str) -> Path:
        """Return the expected demo file path for the given region."""
        return self.demo_logs_path / f"sample_logs_{region.lower()}.json"

    def read_region(self, region: str) -> List[DemoRecord]:
        """Read and validate the demo file for ``region``.

        Raises
        ------
        BootstrapSoftError
            If the file cannot be read or does not hold a list of records.
        """
        path = self.region_file(region)
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise BootstrapSoftError(region, e) from e
        except ValueError as e:  # JSONDecodeError, UnicodeDecodeError
            raise BootstrapSoftError(region, f"invalid JSON in {path.name}: {e}") from e

        try:
            return _RECORDS.validate_python(data)
        except PydanticValidationError as e:
            raise BootstrapSoftError(
                region, f"unexpected record format in {path.name} ({e.error_count()} errors)"
            ) from e

    def load_region(self, region: str) -> RegionLoadResult:
        try:
            records = self.read_region(region)
        except BootstrapSoftError as e:
            logger.warning("[BOOTSTRAP] Warning: %s", e)
            return RegionLoadResult.skipped(region, str(e.reason))

        try:
            count = self.store.insert_many(
                region, ((rec.raw.time, rec.raw.log) for rec in records)
            )
        except StorageError as e:
            raise BootstrapHardError(region, e) from e

        logger.info("[BOOTSTRAP] Loaded %d logs for %s region", count, region)
        return RegionLoadResult.loaded(region, count)

    def load(self) -> BootstrapReport:
        """Attempt every region and return the aggregated report."""
        logger.info("[BOOTSTRAP] Loading demo logs from %s", self.demo_logs_path)
        report = BootstrapReport()
        for region in self.regions:
            report.results.append(self.load_region(region))
        return report


def bootstrap_if_empty(store: LogStore, loader: BootstrapLoader) -> BootstrapReport:
    """Run ``loader`` only when ``store`` holds no rows at all.

    Any existing row, whatever its origin, suppresses demo loading.
    """
    if store.count() > 0:
        logger.info("[BOOTSTRAP] Store already populated, skipping demo data")
        return BootstrapReport(store_was_populated=True)

    report = loader.load()
    skipped = report.skipped_regions
    logger.info(
        "[BOOTSTRAP] Done: %d logs loaded, %d region(s) skipped%s",
        report.total_loaded,
        len(skipped),
        f" ({', '.join(sorted(skipped))})" if skipped else "",
    )
    return report


def open_store(settings: Settings) -> Tuple[LogStore, BootstrapReport]:
    """Open the configured LogStore, create its schema and bootstrap if empty.

    StorageError and BootstrapHardError propagate; both are meant to stop
    the process at startup.
    """
    store = LogStore(settings.db_path, timeout=settings.db_timeout)
    try:
        store.create_schema_if_absent()
        loader = BootstrapLoader(
            store,
            demo_logs_path=str(settings.demo_logs_path),
            regions=settings.regions,
        )
        report = bootstrap_if_empty(store, loader)
    except Exception:
        store.close()
        raise
    return store, report
