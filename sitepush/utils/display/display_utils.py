"""
Display and console utilities for sitepush
"""
from colorama import Fore, Style

from ... import __version__


def print_banner(title):
    """Display the sitepush banner with a section title."""
    banner = (
        f"\n{Fore.CYAN}  ▸ sitepush {__version__}{Style.RESET_ALL}"
        f"  {Fore.WHITE}— {title}{Style.RESET_ALL}\n"
    )
    print(banner)


def print_progress(line):
    """Default progress sink for CLI runs."""
    print(f"  {line}", flush=True)


def print_change_set(change_set):
    """Print every planned operation grouped by category.

    Args:
        change_set: :class:`~sitepush.models.entries.ChangeSet`
    """
    if change_set.is_empty:
        print(f"{Fore.GREEN}  Nothing to do — bucket matches the upload directory{Style.RESET_ALL}")
        return

    for entry in change_set.add:
        print(f"  {Fore.GREEN}+ {entry.target_key}{Style.RESET_ALL}  ({entry.relative_path})")
    for entry in change_set.update:
        print(f"  {Fore.YELLOW}~ {entry.target_key}{Style.RESET_ALL}  ({entry.relative_path})")
    for entry in change_set.remove:
        print(f"  {Fore.RED}- {entry.key}{Style.RESET_ALL}")

    print(
        f"\n  {len(change_set.add)} to add, {len(change_set.update)} to update, "
        f"{len(change_set.remove)} to remove"
    )


def print_sync_summary(report):
    """Print the outcome of a run.

    Args:
        report: :class:`~sitepush.models.report.SyncReport`
    """
    label = "Would apply" if report.dry_run else "Applied"
    print(f"\n{Fore.CYAN}Summary:{Style.RESET_ALL}")
    print(f"  {label}: {len(report.added)} added, {len(report.updated)} updated, "
          f"{len(report.removed)} removed")

    if not report.succeeded:
        print(f"  {Fore.RED}Failed key      : {report.failed_key}{Style.RESET_ALL}")
        print(f"  Last completed  : {report.last_completed or '(none)'}")
        print(f"  Not attempted   : {len(report.not_attempted)}")
        for key in report.not_attempted[:20]:
            print(f"    • {key}")
        if len(report.not_attempted) > 20:
            print(f"    … and {len(report.not_attempted) - 20} more")
