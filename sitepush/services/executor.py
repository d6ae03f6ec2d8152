"""
Change-set application.

Uploads run first (adds, then updates), removals only once every
upload has finished. Within a phase up to ``context.concurrency``
operations run at once on a thread pool.

When an operation fails, no further operations are issued. Operations
already in flight are allowed to finish, then the first error is
raised with a :class:`~sitepush.models.report.SyncReport` attached as
``error.report`` listing what completed and what was never attempted.
"""
import mimetypes
import os
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from typing import Callable, List, Optional, Tuple

from ..exceptions import LocalReadError, SitePushError
from ..models.entries import ChangeSet
from ..models.report import SyncReport
from ..utils.logger import get_logger

log = get_logger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"

ADD = "add"
UPDATE = "update"
REMOVE = "remove"

ProgressSink = Callable[[str], None]


def guess_content_type(path: str) -> str:
    """MIME type from the file extension, ``application/octet-stream`` if unknown."""
    content_type, _ = mimetypes.guess_type(path)
    return content_type or DEFAULT_CONTENT_TYPE


def describe(action: str, entry) -> str:
    """Human-readable progress line for one operation."""
    if action == ADD:
        return f"Adding {entry.relative_path} as {entry.target_key}"
    if action == UPDATE:
        return f"Updating {entry.relative_path} as {entry.target_key}"
    return f"Removing {entry.key}"


def _key_of(action: str, entry) -> str:
    return entry.key if action == REMOVE else entry.target_key


class SyncExecutor:
    """Applies a :class:`ChangeSet` to the bucket.

    Args:
        operations: :class:`~sitepush.services.aws.operations.S3Operations`
        context: :class:`~sitepush.models.context.SyncContext`
        progress: Called with one status line before each operation;
            defaults to logging at INFO
    """

    def __init__(self, operations, context, progress: Optional[ProgressSink] = None):
        self.operations = operations
        self.context = context
        self.progress = progress or log.info

    # ── Single operations ──────────────────────────────────────────────

    def _read_body(self, entry) -> bytes:
        full_path = os.path.join(self.context.upload_directory, entry.relative_path)
        try:
            with open(full_path, 'rb') as f:
                return f.read()
        except OSError as e:
            raise LocalReadError(full_path, e) from e

    def upload(self, entry):
        """Upload one local entry with content-type and cache-control metadata."""
        body = self._read_body(entry)
        content_type = guess_content_type(entry.relative_path)
        cache_control = self.context.cache_policy.resolve(
            entry.relative_path, entry.target_key, content_type
        )
        self.operations.put_object(
            entry.target_key,
            body,
            content_type=content_type,
            cache_control=cache_control,
            acl=self.context.acl,
        )

    def remove(self, entry):
        """Delete one remote-only key."""
        self.operations.delete_object(entry.key)

    def _perform(self, action: str, entry):
        if action == REMOVE:
            self.remove(entry)
        else:
            self.upload(entry)

    # ── Phases ─────────────────────────────────────────────────────────

    @staticmethod
    def _record(report: SyncReport, action: str, entry):
        key = _key_of(action, entry)
        if action == ADD:
            report.added.append(key)
        elif action == UPDATE:
            report.updated.append(key)
        else:
            report.removed.append(key)
        report.last_completed = key

    def _run_phase(self, tasks: List[Tuple[str, object]], report: SyncReport):
        """Run *tasks* with bounded concurrency.

        Returns:
            Tuple of (first error or None, tasks never issued)
        """
        first_error: Optional[SitePushError] = None
        in_flight = {}
        next_index = 0

        with ThreadPoolExecutor(max_workers=self.context.concurrency) as pool:
            while True:
                while (first_error is None and next_index < len(tasks)
                       and len(in_flight) < self.context.concurrency):
                    action, entry = tasks[next_index]
                    next_index += 1
                    self.progress(describe(action, entry))
                    future = pool.submit(self._perform, action, entry)
                    in_flight[future] = (action, entry)

                if not in_flight:
                    break

                done, _ = wait(in_flight, return_when=FIRST_COMPLETED)
                for future in done:
                    action, entry = in_flight.pop(future)
                    try:
                        future.result()
                    except SitePushError as e:
                        if first_error is None:
                            first_error = e
                            report.failed_key = _key_of(action, entry)
                            report.error = e
                        else:
                            log.error("Additional failure while draining: %s", e,
                                      extra={"key": _key_of(action, entry)})
                        continue
                    self._record(report, action, entry)

        return first_error, tasks[next_index:]

    def apply(self, change_set: ChangeSet) -> SyncReport:
        """Apply *change_set* and return what was done.

        Raises:
            ConfigurationError: If a key appears in more than one category.
            RemoteError: On the first failed put or delete.
            LocalReadError: If a file cannot be re-read at upload time.
        """
        change_set.assert_exclusive()

        report = SyncReport()
        uploads = [(ADD, e) for e in change_set.add] + [(UPDATE, e) for e in change_set.update]
        removals = [(REMOVE, e) for e in change_set.remove]

        error, skipped = self._run_phase(uploads, report)
        if error is None:
            error, skipped = self._run_phase(removals, report)
        else:
            skipped = skipped + removals

        if error is not None:
            report.not_attempted = [_key_of(action, entry) for action, entry in skipped]
            error.report = report
            raise error

        log.debug("Applied %d change(s) to %s", report.completed, self.context.bucket)
        return report
