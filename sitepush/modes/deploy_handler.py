"""Handler for the 'deploy' subcommand.

Usage:
    sitepush deploy [--dry-run] [--concurrency N] [--json]
"""
import json

from colorama import Fore, Style

from ..exceptions import SitePushError
from ..services.aws.sync_engine import WebsiteSyncService
from ..utils.display.display_utils import print_banner, print_progress, print_sync_summary
from ..utils.logger import get_logger
from .base_handler import ModeHandler

log = get_logger(__name__)


class DeployHandler(ModeHandler):
    """Handles ``sitepush deploy`` — synchronize the bucket with the build output."""

    def display_banner(self):
        if not self.json_output:
            print_banner("Synchronize website")

    def _print_report(self, report):
        if self.json_output:
            print(json.dumps(report.to_dict(), indent=2))
        else:
            print_sync_summary(report)

    def execute_workflow(self, context):
        sync_context = context["sync_context"]
        dry_run = getattr(self.args, 'dry_run', False)

        if self.json_output:
            # stdout carries only the report
            progress = log.debug
        else:
            progress = print_progress
            print(f"  Bucket           : {Fore.WHITE}{sync_context.bucket}{Style.RESET_ALL}")
            print(f"  Upload directory : {sync_context.upload_directory}")
            print(f"  Concurrency      : {sync_context.concurrency}\n")

        service = WebsiteSyncService(context["operations"], sync_context, progress=progress)

        try:
            report = service.synchronize(dry_run=dry_run)
        except SitePushError as e:
            log.error("Deploy aborted: %s", e, extra={"key": getattr(e.report, "failed_key", None)})
            if e.report is not None:
                self._print_report(e.report)
            return None

        self._print_report(report)
        return report

    def display_completion(self, result):
        if self.json_output:
            return
        if result.dry_run:
            print(f"\n{Fore.GREEN}[SUCCESS] Dry run complete, no changes made{Style.RESET_ALL}\n")
        else:
            print(f"\n{Fore.GREEN}[SUCCESS] Website synchronized{Style.RESET_ALL}\n")
