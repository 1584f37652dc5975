from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from .board.model import columns_to_dict
from .config import Settings
from .container import TaskboardContainer
from .errors import TaskboardError
from .logging_utils import configure_logging
from .server import create_app


def _settings(args: argparse.Namespace) -> Settings:
    data_dir = Path(args.data_dir).expanduser() if args.data_dir else None
    return Settings(data_dir=data_dir, log_level=args.log_level)


def _ctx(args: argparse.Namespace) -> TaskboardContainer:
    settings = _settings(args)
    configure_logging(settings.log_level)
    return TaskboardContainer(settings)


def _server(args: argparse.Namespace) -> int:
    try:
        import uvicorn
    except ImportError:
        sys.stderr.write("Install server extras: pip install 'taskboard[server]'\n")
        return 1

    settings = _settings(args)
    configure_logging(settings.log_level)
    app = create_app(settings=settings)
    uvicorn.run(app, host=args.host, port=args.port, log_level=settings.log_level.lower())
    return 0


def _user_list(args: argparse.Namespace) -> int:
    container = _ctx(args)
    users = container.users.list()
    payload = [
        {
            "email": u.email,
            "username": u.username,
            "columns": len(u.tasks),
            "projects": len(u.projects),
        }
        for u in users
    ]
    sys.stdout.write(json.dumps({"users": payload}, indent=2) + "\n")
    return 0


def _board_show(args: argparse.Namespace) -> int:
    container = _ctx(args)
    try:
        if args.project:
            tasks = container.board.get_project_tasks(args.email, args.project)
        else:
            tasks = container.board.get_tasks(args.email)
    except TaskboardError as exc:
        sys.stderr.write(exc.message + "\n")
        return 1
    sys.stdout.write(json.dumps({"tasks": columns_to_dict(tasks)}, indent=2) + "\n")
    return 0


def _project_list(args: argparse.Namespace) -> int:
    container = _ctx(args)
    try:
        summaries = container.board.list_project_summaries(args.email)
    except TaskboardError as exc:
        sys.stderr.write(exc.message + "\n")
        return 1
    sys.stdout.write(json.dumps({"projectsNames": summaries}, indent=2) + "\n")
    return 0


def _config_show(args: argparse.Namespace) -> int:
    sys.stdout.write(json.dumps(_settings(args).to_dict(), indent=2) + "\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Taskboard API server and data inspection")
    parser.add_argument("--data-dir", default=None, help="Data directory (default: $TASKBOARD_DATA_DIR or ./.taskboard)")
    parser.add_argument("--log-level", default=None, help="Log level (default: $TASKBOARD_LOG_LEVEL or INFO)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    server = subparsers.add_parser("server", help="Start the API server")
    server.add_argument("--host", default="127.0.0.1")
    server.add_argument("--port", default=3001, type=int)
    server.set_defaults(func=_server)

    user = subparsers.add_parser("user", help="Inspect users")
    user_sub = user.add_subparsers(dest="user_cmd", required=True)
    ulist = user_sub.add_parser("list", help="List registered users")
    ulist.set_defaults(func=_user_list)

    board = subparsers.add_parser("board", help="Print a user's board as JSON")
    board.add_argument("email")
    board.add_argument("--project", default=None, help="Show this project's board instead")
    board.set_defaults(func=_board_show)

    project = subparsers.add_parser("project", help="Inspect projects")
    project_sub = project.add_subparsers(dest="project_cmd", required=True)
    plist = project_sub.add_parser("list", help="List a user's projects")
    plist.add_argument("email")
    plist.set_defaults(func=_project_list)

    config = subparsers.add_parser("config", help="Show effective settings")
    config.set_defaults(func=_config_show)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    handler = getattr(args, "func", None)
    if handler is None:
        parser.print_help()
        return 1
    return int(handler(args) or 0)


if __name__ == "__main__":
    raise SystemExit(main())
