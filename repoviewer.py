#!/usr/bin/env python3
"""Browse an organization's GitHub repositories and their contributors."""

from __future__ import annotations

import argparse
import logging
import sys

from colorama import init

from integrations.github.github import RestAPI
from integrations.github.models import GitHubAPIError, GitHubRateLimitError
from models import Colors, ViewerConfig
from viewer import OrgViewer, TerminalPresenter

# Initialize colorama for cross-platform color support
init(autoreset=True)


class Display:
    """Console output helpers for the CLI."""

    @staticmethod
    def print_banner() -> None:
        banner = f"""
{Colors.HEADER}╔══════════════════════════════════════════════════════════════╗
║                        📦 REPOVIEWER                         ║
║          Organization Repositories and Contributors          ║
╚══════════════════════════════════════════════════════════════╝{Colors.RESET}
"""
        print(banner)

    @staticmethod
    def print_config(config: ViewerConfig) -> None:
        print(f"{Colors.INFO}🔍 Organization: {Colors.WARNING}{config.org}{Colors.RESET}")
        print(f"   {Colors.INFO}•{Colors.RESET} API: {Colors.URL}{config.api_url}{Colors.RESET}")
        if config.repo_id:
            print(f"   {Colors.INFO}•{Colors.RESET} Repository: {Colors.SUCCESS}{config.repo_id}{Colors.RESET}")
        print()

    @staticmethod
    def print_error(message: str) -> None:
        print(f"{Colors.ERROR}❌ Error: {message}{Colors.RESET}")

    @staticmethod
    def prompt_repository() -> str:
        return input(f"{Colors.INFO}Repository id (empty to quit): {Colors.RESET}").strip()


def create_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Show the repositories of a GitHub organization with their contributors.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:

    # List the repositories of the default organization
    repoviewer

    # Show one repository and its contributors
    repoviewer --org HackYourFuture --repo 123456

    # Pick repositories interactively
    repoviewer --interactive
    """,
    )
    parser.add_argument("--org", "-o", default=None, help="Organization to list (default: $GITHUB_ORG or HackYourFuture)")
    parser.add_argument("--repo", "-r", default=None, help="Repository id to select after loading the list")
    parser.add_argument("--interactive", "-i", action="store_true", help="Prompt for repository ids to select")
    parser.add_argument("--api-url", default=None, help="GitHub API base URL (default: $GITHUB_API_URL or api.github.com)")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds (default: 30)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")
    return parser


def build_config_from_args(args: argparse.Namespace) -> ViewerConfig:
    """Merge command line flags over the environment configuration."""
    config = ViewerConfig.from_env()
    if args.org:
        config.org = args.org
    if args.api_url:
        config.api_url = args.api_url
    if args.timeout is not None:
        config.timeout = args.timeout
    config.repo_id = args.repo
    config.interactive = args.interactive
    config.verbose = args.verbose
    return config


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def select_and_report(presenter: TerminalPresenter, repository_id: str) -> bool:
    """Apply one selection, printing a GitHub failure instead of raising it."""
    try:
        presenter.on_select(repository_id)
    except GitHubAPIError as exc:
        Display.print_error(str(exc))
        return False
    return True


def run(config: ViewerConfig, presenter: TerminalPresenter | None = None) -> OrgViewer:
    """Load the organization and apply the selections requested by *config*."""
    presenter = presenter or TerminalPresenter(Colors)
    client = RestAPI(base_url=config.api_url, timeout=config.timeout)
    viewer = OrgViewer(client, presenter, org=config.org)
    viewer.start()

    # an interactive session outlives a failed selection
    if config.repo_id and config.interactive:
        select_and_report(presenter, config.repo_id)
    elif config.repo_id:
        presenter.on_select(config.repo_id)

    if config.interactive:
        while True:
            try:
                choice = Display.prompt_repository()
            except EOFError:
                break
            if not choice:
                break
            select_and_report(presenter, choice)

    return viewer


def main() -> int:
    args = create_argument_parser().parse_args()
    config = build_config_from_args(args)
    configure_logging(config.verbose)

    Display.print_banner()
    Display.print_config(config)

    try:
        run(config)
    except GitHubRateLimitError as exc:
        Display.print_error(str(exc))
        print(f"{Colors.INFO}💡 Unauthenticated requests are limited per hour; wait for the reset time.{Colors.RESET}")
        return 1
    except GitHubAPIError as exc:
        Display.print_error(str(exc))
        return 1
    except KeyboardInterrupt:
        print(f"\n{Colors.WARNING}Interrupted.{Colors.RESET}")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
