"""
sitepush - Main CLI interface
Static website deployment to S3

Subcommands:
  deploy  synchronize the bucket with the upload directory
  plan    show what deploy would change
  config  update keys of the config file
"""
import sys
import argparse
from colorama import init

from . import __version__
from .utils.config_loader import handle_config_update

# Initialize colorama
init(autoreset=True)

# ── Help-text epilogs for subcommands ──────────────────────────────────────

DEPLOY_EXAMPLES = """\
Examples:
  sitepush deploy
  sitepush deploy --dry-run
  sitepush deploy --concurrency 8
  sitepush deploy --json > report.json
  sitepush --config-file site/sitepush.json deploy

Uploads new and changed files, deletes objects with no local
counterpart, and stops at the first failed operation.
"""

CONFIG_EXAMPLES = """\
Examples:
  sitepush config '{"domain": "example.com", "upload_directory": "public"}'
  sitepush config '{"cache": 3600}'
  sitepush config '{"cache_control_rules": {".html": "no-cache"}}'
"""


# ── Argument Parser ────────────────────────────────────────────────────────

def create_argument_parser():
    """Create and configure the subparser-based argument parser."""
    parser = argparse.ArgumentParser(
        prog='sitepush',
        description='sitepush — Deploy a static website to S3',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument('--version', action='version', version=f'sitepush {__version__}')
    parser.add_argument('--config-file', help='Path to sitepush.json (default: ./sitepush.json)')
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('--verbose', action='store_true', help='Enable verbose output')
    verbosity.add_argument('--quiet', action='store_true', help='Only show warnings and errors')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # ── deploy ─────────────────────────────────────────────────────────
    deploy_parser = subparsers.add_parser(
        'deploy',
        help='Synchronize the bucket with the upload directory',
        description='Upload, update and remove objects so the bucket matches the build output.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=DEPLOY_EXAMPLES,
    )
    deploy_parser.add_argument('--dry-run', action='store_true',
                               help='Show planned operations without changing the bucket')
    deploy_parser.add_argument('--concurrency', type=int, default=None,
                               help='Maximum simultaneous uploads/deletes (overrides config)')
    deploy_parser.add_argument('--json', action='store_true',
                               help='Print the run report as JSON on stdout')

    # ── plan ───────────────────────────────────────────────────────────
    plan_parser = subparsers.add_parser(
        'plan',
        help='Show what deploy would change',
        description='List objects to add, update and remove.',
    )
    plan_parser.add_argument('--json', action='store_true',
                             help='Print the change set as JSON on stdout')

    # ── config ─────────────────────────────────────────────────────────
    config_parser = subparsers.add_parser(
        'config',
        help='Update the config file with a JSON object',
        description='Merge a JSON object into sitepush.json (created if missing).',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=CONFIG_EXAMPLES,
    )
    config_parser.add_argument('updates', help='JSON object of configuration keys')

    return parser


# ── Main Entry Point ──────────────────────────────────────────────────────

def main(argv=None):
    """Main CLI entry point."""
    from .utils.logger import setup_logging

    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, quiet=args.quiet)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == 'config':
        return handle_config_update(args.updates, args.config_file)

    from .modes.deploy_handler import DeployHandler
    from .modes.plan_handler import PlanHandler

    handlers = {
        'deploy': lambda: DeployHandler(args),
        'plan': lambda: PlanHandler(args),
    }

    return handlers[args.command]().execute()


if __name__ == '__main__':
    sys.exit(main())
