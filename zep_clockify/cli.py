"""
CLI interface for ZEP project imports and Clockify queries.
Provides the projects import and the clockify list/info commands.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional
from tabulate import tabulate

from .clockify_client import ClockifyClient
from .config_loader import AppConfig, ConfigLoader
from .errors import ClockifyError, ZepClockifyError
from .logging_setup import setup_logging
from .projects_loader import load_projects
from .utils import truncate_string

logger = logging.getLogger(__name__)

RESOURCES = ('workspace', 'project')


class CLI:
    """Command-line interface for project imports and Clockify queries."""

    def __init__(self, config: AppConfig):
        """
        Initialize CLI.

        Args:
            config: Application settings
        """
        self.config = config

    def run_projects(self, csv_path: Path) -> None:
        """
        Import a ZEP project export and print its projects.

        Args:
            csv_path: Path to the CSV export
        """
        logger.info("Run Projects Import...")
        logger.info(f"Load input {csv_path}...")

        projects = load_projects(csv_path, encoding=self.config.csv_encoding)

        table_data = []
        for project in projects:
            status = project.status.value if project.status else ''
            start = project.start_date.isoformat() if project.start_date else ''
            logger.info(
                f"ID={project.id}, Status={status}, Name={project.name}, "
                f"Start={start}, Description={project.description}"
            )
            table_data.append([
                project.id,
                project.name,
                status,
                start,
                truncate_string(project.description.replace('\n', ' '), 60),
            ])

        print(f"\nProjects in {csv_path.name} ({len(projects)}):\n")
        print(tabulate(table_data,
                      headers=['ID', 'Name', 'Status', 'Start', 'Description'],
                      tablefmt='grid'))

    def list_resources(self, resource: str, workspace_id: Optional[str] = None) -> None:
        """
        List all workspaces, or all projects of a workspace.

        Args:
            resource: 'workspace' or 'project'
            workspace_id: Workspace ID, required for projects
        """
        with self._client() as client:
            if resource == 'workspace':
                workspaces = client.get_workspaces()
                print(tabulate([[w.id, w.name] for w in workspaces],
                               headers=['ID', 'Name'], tablefmt='grid'))
            else:
                projects = client.get_projects(workspace_id)
                print(tabulate([[p.id, p.name, p.billable] for p in projects],
                               headers=['ID', 'Name', 'Billable'], tablefmt='grid'))

    def show_info(self, resource: str, workspace_id: str,
                  project_id: Optional[str] = None) -> None:
        """
        Print details of a workspace or project.

        Args:
            resource: 'workspace' or 'project'
            workspace_id: Workspace ID
            project_id: Project ID, required for projects
        """
        with self._client() as client:
            if resource == 'workspace':
                workspace = next((w for w in client.get_workspaces() if w.id == workspace_id), None)
                if workspace is None:
                    raise ClockifyError(f"Cannot find workspace with ID '{workspace_id}'")

                print("Workspace Info:\n")
                print(f"ID:\t{workspace.id}")
                print(f"Name:\t{workspace.name}")
                print()
            else:
                project = client.get_project(workspace_id, project_id)

                print("Project Info:\n")
                print(f"ID:       {project.id}")
                print(f"ClientID: {project.client_id}")
                print(f"Name:     {project.name}")
                print(f"Billable: {project.billable}")
                print(f"Public:   {project.public}")
                print(f"Color:    {project.color}")
                print(f"Note:\n{project.note}")
                print()

    def _client(self) -> ClockifyClient:
        return ClockifyClient(self.config.clockify_config())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='zep-clockify',
        description="Import ZEP project exports and query Clockify",
    )

    parser.add_argument('--config-dir', type=Path, help='Directory containing global_config.yaml')
    parser.add_argument('--log-level', type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured log level')
    parser.add_argument('--log-dir', type=Path, help='Write log files to this directory')
    parser.add_argument('--json-logs', action='store_true', help='Write JSON-formatted log files')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # projects command
    projects_parser = subparsers.add_parser('projects', help='Import a ZEP project export')
    projects_parser.add_argument('csv', type=Path, help='Path to the CSV export')

    # clockify command
    clockify_parser = subparsers.add_parser('clockify', help='Query the Clockify API')
    clockify_parser.add_argument('action', choices=['list', 'info'],
                                 help='list: all objects of a resource, info: details of one')
    clockify_parser.add_argument('resource', choices=RESOURCES, help='Resource type')
    clockify_parser.add_argument('workspace_id', nargs='?', help='Workspace ID')
    clockify_parser.add_argument('project_id', nargs='?', help='Project ID')

    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    """Load the config file if given and apply command line overrides."""
    config = ConfigLoader(args.config_dir).load_app_config() if args.config_dir else AppConfig()

    if args.log_level:
        config.logging.level = args.log_level
    if args.log_dir:
        config.logging.log_dir = args.log_dir
    if args.json_logs:
        config.logging.json_format = True
    return config


def run_command(cli: CLI, args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if args.command == 'projects':
        cli.run_projects(args.csv)
        return

    # clockify
    needs_workspace = args.action == 'info' or args.resource != 'workspace'
    if needs_workspace and not args.workspace_id:
        parser.error("Missing workspace ID")
    if args.action == 'info' and args.resource == 'project' and not args.project_id:
        parser.error("Missing project ID")

    if args.action == 'list':
        cli.list_resources(args.resource, args.workspace_id)
    else:
        cli.show_info(args.resource, args.workspace_id, args.project_id)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        config = load_config(args)
    except (ZepClockifyError, FileNotFoundError) as e:
        print(f"Error: {e}")
        return 1

    setup_logging(
        log_dir=config.logging.log_dir,
        log_level=config.logging.level,
        json_format=config.logging.json_format,
        console_output=config.logging.console_output,
    )
    logger.info(f"Command: {args.command}")

    try:
        run_command(CLI(config), args, parser)
    except ZepClockifyError as e:
        logger.error("FAILED")
        logger.error(f"Error: {e}")
        return 1

    logger.info("SUCCESS")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
