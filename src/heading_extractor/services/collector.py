"""Parallel heading collection across documents."""

import asyncio
import time
from collections.abc import Iterable
from concurrent.futures import Executor, ThreadPoolExecutor
from pathlib import Path
from typing import Any

import logfire

from heading_extractor.core.config import ExtractionConfig
from heading_extractor.models.headings import DocumentResult
from heading_extractor.services.heading_set import HeadingSet
from heading_extractor.services.scanner import DocumentScanner


class ParallelCollector:
    """Service for scanning many documents on a bounded worker pool."""

    def __init__(
        self,
        config: ExtractionConfig | None = None,
        scanner: DocumentScanner | None = None,
    ):
        """Initialize parallel collector.

        Args:
            config: Extraction configuration; supplies the pool size
            scanner: Scanner run once per document
        """
        self.config = config or ExtractionConfig()
        self.scanner = scanner or DocumentScanner()
        self.results: list[DocumentResult] = []
        self.metrics = {
            "documents_scanned": 0,
            "documents_failed": 0,
            "headings_merged": 0,
            "total_execution_time": 0.0,
        }

    @property
    def pool_size(self) -> int:
        return self.config.pool_size

    async def _scan_isolated(
        self,
        loop: asyncio.AbstractEventLoop,
        executor: Executor,
        document_id: str,
    ) -> DocumentResult:
        """Scan one document, turning any escaped exception into a failed result."""
        try:
            return await loop.run_in_executor(executor, self.scanner.scan, document_id)
        except Exception as e:
            logfire.error(f"Scanner failed for {document_id}: {e}", document_id=document_id)
            return DocumentResult.failed(document_id, f"{type(e).__name__}: {e}")

    def _merge(self, result: DocumentResult, merged: HeadingSet) -> None:
        self.results.append(result)
        self.metrics["documents_scanned"] += 1
        if not result.ok:
            self.metrics["documents_failed"] += 1
            return
        self.metrics["headings_merged"] += merged.update(result.headings)

    async def collect_async(
        self,
        document_ids: Iterable[str | Path],
        headings: HeadingSet | None = None,
    ) -> HeadingSet:
        """Scan every document and merge the results.

        Results are merged as workers finish, so which casing of a
        case-insensitive duplicate survives depends on completion order.

        Args:
            document_ids: Documents to scan
            headings: Optional set to merge into; a new one is created otherwise

        Returns:
            The merged heading set
        """
        ids = [str(d) for d in document_ids]
        merged = headings if headings is not None else HeadingSet()
        self.results = []
        if not ids:
            return merged

        start_time = time.time()
        loop = asyncio.get_running_loop()
        with (
            logfire.span("Collect headings", documents=len(ids), workers=self.pool_size),
            ThreadPoolExecutor(
                max_workers=self.pool_size, thread_name_prefix="heading-scan"
            ) as executor,
        ):
            tasks = [
                asyncio.ensure_future(self._scan_isolated(loop, executor, doc)) for doc in ids
            ]
            for next_done in asyncio.as_completed(tasks):
                self._merge(await next_done, merged)

        self.metrics["total_execution_time"] += time.time() - start_time
        logfire.info(
            "Headings collected",
            documents=len(ids),
            failed=sum(1 for r in self.results if not r.ok),
            headings=len(merged),
        )
        return merged

    def collect(self, document_ids: Iterable[str | Path]) -> HeadingSet:
        """Synchronous wrapper around ``collect_async``.

        Must not be called from inside a running event loop.
        """
        return asyncio.run(self.collect_async(document_ids))

    @property
    def failed_documents(self) -> list[str]:
        return [r.document_id for r in self.results if not r.ok]

    def get_metrics(self) -> dict[str, Any]:
        """Get collection metrics.

        Returns:
            Dictionary of metrics
        """
        return {
            **self.metrics,
            "pool_size": self.pool_size,
            "avg_execution_time": (
                self.metrics["total_execution_time"] / max(self.metrics["documents_scanned"], 1)
            ),
        }


__all__ = ["ParallelCollector"]
