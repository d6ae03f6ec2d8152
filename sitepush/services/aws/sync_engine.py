"""
Website synchronization engine.

Provides the main :class:`WebsiteSyncService` that coordinates manifest
building, diffing and change-set application for one deploy.
"""
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from ...models.entries import ChangeSet
from ...models.report import SyncReport
from ...utils.logger import get_logger
from ..differ import diff
from ..executor import ProgressSink, SyncExecutor, describe, ADD, UPDATE, REMOVE
from ..manifest import build_local_manifest, build_remote_manifest
from .operations import S3Operations

log = get_logger(__name__)


class WebsiteSyncService:
    """Reconciles a website bucket with the local upload directory.

    Args:
        operations: :class:`S3Operations` bound to the target bucket
        context: :class:`~sitepush.models.context.SyncContext`
        progress: Status-line sink passed through to the executor
    """

    def __init__(self, operations: S3Operations, context, progress: Optional[ProgressSink] = None):
        self.operations = operations
        self.context = context
        self.progress = progress or log.info

    # ── Planning ───────────────────────────────────────────────────────

    def plan(self) -> ChangeSet:
        """Build both manifests concurrently and diff them.

        Returns:
            The change set for this run

        Raises:
            LocalReadError: If the upload directory cannot be read.
            RemoteError: If the bucket listing fails.
            ConfigurationError: If two local files map to the same key.
        """
        log.debug("Building manifests for %s from %s",
                  self.context.bucket, self.context.upload_directory)

        with ThreadPoolExecutor(max_workers=2) as pool:
            local_future = pool.submit(
                build_local_manifest,
                self.context.upload_directory,
                self.context.trailing_slashes,
            )
            remote_future = pool.submit(build_remote_manifest, self.operations)
            local = local_future.result()
            remote = remote_future.result()

        changes = diff(local, remote)
        log.debug("Plan: %d to add, %d to update, %d to remove",
                  len(changes.add), len(changes.update), len(changes.remove))
        return changes

    # ── Main sync entry point ──────────────────────────────────────────

    def synchronize(self, dry_run: bool = False) -> SyncReport:
        """Make the bucket match the upload directory.

        Args:
            dry_run: Report the planned operations without writing

        Returns:
            :class:`SyncReport` for the run
        """
        changes = self.plan()

        if changes.is_empty:
            log.info("Bucket %s is already up to date", self.context.bucket)
            return SyncReport(dry_run=dry_run)

        if dry_run:
            return self._dry_run(changes)

        executor = SyncExecutor(self.operations, self.context, progress=self.progress)
        return executor.apply(changes)

    def _dry_run(self, changes: ChangeSet) -> SyncReport:
        changes.assert_exclusive()
        report = SyncReport(dry_run=True)

        for entry in changes.add:
            self.progress(f"[dry-run] {describe(ADD, entry)}")
            report.added.append(entry.target_key)
        for entry in changes.update:
            self.progress(f"[dry-run] {describe(UPDATE, entry)}")
            report.updated.append(entry.target_key)
        for entry in changes.remove:
            self.progress(f"[dry-run] {describe(REMOVE, entry)}")
            report.removed.append(entry.key)

        return report
