"""Handler for the 'plan' subcommand.

Usage:
    sitepush plan [--json]
"""
import json

from ..exceptions import SitePushError
from ..services.aws.sync_engine import WebsiteSyncService
from ..utils.display.display_utils import print_banner, print_change_set
from ..utils.logger import get_logger
from .base_handler import ModeHandler

log = get_logger(__name__)


class PlanHandler(ModeHandler):
    """Handles ``sitepush plan`` — show the change set without applying it."""

    def display_banner(self):
        if not self.json_output:
            print_banner("Plan")

    def execute_workflow(self, context):
        service = WebsiteSyncService(context["operations"], context["sync_context"])

        try:
            change_set = service.plan()
        except SitePushError as e:
            log.error("Planning failed: %s", e)
            return None

        if self.json_output:
            print(json.dumps(change_set.to_dict(), indent=2))
        else:
            print_change_set(change_set)
        # An empty plan is still a successful run
        return {"change_set": change_set}

    def display_completion(self, result):
        pass
