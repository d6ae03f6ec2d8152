"""Base mode handler with template method pattern."""
import os
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from botocore.exceptions import BotoCoreError
from colorama import Fore, Style

from ..exceptions import ConfigurationError
from ..services.aws.operations import S3Operations
from ..utils.config_loader import ConfigLoader
from ..utils.logger import get_logger

log = get_logger(__name__)


class ModeHandler(ABC):
    """Abstract base class for all command handlers.

    Args:
        args: Parsed CLI arguments
        operations: Pre-built :class:`S3Operations`; when omitted one is
            created from the configured AWS profile
    """

    def __init__(self, args, operations: Optional[S3Operations] = None):
        self.args = args
        self.operations = operations
        self.json_output = getattr(args, 'json', False)
        self.config: Dict[str, Any] = {}
        self.config_path = ConfigLoader.get_config_path(getattr(args, 'config_file', None))

    def execute(self) -> int:
        """Execute mode workflow (Template Method).

        Returns:
            Exit code (0 for success, 1 for failure)
        """
        self.display_banner()

        if not self.validate_prerequisites():
            return 1

        context = self.prepare_context()
        if context is None:
            return 1

        result = self.execute_workflow(context)

        if result:
            self.display_completion(result)

        return 0 if result else 1

    @abstractmethod
    def display_banner(self):
        """Display mode-specific banner."""
        pass

    def validate_prerequisites(self) -> bool:
        """Load the config file.

        Returns:
            True if the configuration could be loaded
        """
        try:
            self.config = ConfigLoader.load(self.config_path)
        except ConfigurationError as e:
            log.error("%s", e)
            print(f"{Fore.YELLOW}[TIP] Create one with: sitepush config '{{\"domain\": \"example.com\"}}'{Style.RESET_ALL}")
            return False
        return True

    def prepare_context(self) -> Optional[Dict[str, Any]]:
        """Build the sync context and S3 operations.

        Returns:
            Context dictionary, or None if the configuration is invalid
        """
        try:
            sync_context = ConfigLoader.build_sync_context(
                self.config,
                base_dir=os.path.dirname(self.config_path),
                concurrency=getattr(self.args, 'concurrency', None),
            )
        except ConfigurationError as e:
            log.error("Invalid configuration: %s", e)
            return None

        operations = self.operations
        if operations is None:
            try:
                operations = S3Operations.from_profile(
                    sync_context.bucket,
                    profile_name=self.config.get('aws_profile') or None,
                    region=self.config.get('aws_region') or None,
                )
            except BotoCoreError as e:
                log.error("Could not initialize AWS session: %s", e)
                return None

        return {"sync_context": sync_context, "operations": operations}

    @abstractmethod
    def execute_workflow(self, context: Dict[str, Any]) -> Any:
        """Execute mode-specific workflow.

        Args:
            context: Prepared context dictionary

        Returns:
            Result object (mode-specific), or None/False if failed
        """
        pass

    def display_completion(self, result: Any):
        """Display completion message."""
        print(f"\n{Fore.GREEN}[SUCCESS] Done{Style.RESET_ALL}\n")
