#!/usr/bin/env python3

import argparse
import logging
import signal
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Sequence

from clipshelf.clipboard import Pasteboard, get_pasteboard
from clipshelf.config import BACKENDS, StoreConfig
from clipshelf.database import KeyValueStore
from clipshelf.models import ClipboardItem
from clipshelf.services import (
    AppPresenter,
    CaptureService,
    ClipboardHistoryStore,
    KeyboardPresenter,
    ViewMode,
)

logger = logging.getLogger(__name__)


def _preview(text: str, width: int = 60) -> str:
    lines = [line for line in text.splitlines() if line.strip()]
    first_line = lines[0].strip() if lines else repr(text)
    if len(first_line) > width:
        return first_line[:width - 3] + "..."
    return first_line


def format_rows(items: Sequence[ClipboardItem]) -> List[str]:
    return [
        f"{index:>3}  {'*' if item.is_pinned else ' '}  {item.id}  {_preview(item.content)}"
        for index, item in enumerate(items)
    ]


class ClipshelfApp:
    """Wires config, shared medium, store and pasteboard for one process."""

    def __init__(
        self,
        config: StoreConfig,
        backend: Optional[KeyValueStore] = None,
        pasteboard: Optional[Pasteboard] = None,
    ):
        self.config = config
        self.backend = backend or config.create_backend()
        self.store = ClipboardHistoryStore(self.backend)
        self._pasteboard = pasteboard

    @property
    def pasteboard(self) -> Pasteboard:
        if self._pasteboard is None:
            self._pasteboard = get_pasteboard()
        return self._pasteboard

    def close(self) -> None:
        self.backend.close()

    def __enter__(self) -> "ClipshelfApp":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-b", "--backend",
        choices=BACKENDS,
        default=None,
        help="Shared storage backend (default: $CLIPSHELF_BACKEND or redis)"
    )
    parser.add_argument(
        "--namespace",
        default=None,
        help="Namespace shared by the app and the keyboard"
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory for the file backend"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose debug logging"
    )


def _config_from_args(args: argparse.Namespace) -> StoreConfig:
    config = StoreConfig.from_env()
    overrides = {}
    if args.backend:
        overrides["backend"] = args.backend
    if args.namespace:
        overrides["namespace"] = args.namespace
    if args.data_dir:
        overrides["data_dir"] = args.data_dir.expanduser()
    if getattr(args, "interval", None) is not None:
        overrides["poll_interval"] = args.interval
    if not overrides:
        return config
    return replace(config, **overrides)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s: %(message)s'
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="clipshelf",
        description="clipshelf - clipboard history shared with the clipshelf keyboard"
    )
    _add_common_arguments(parser)
    commands = parser.add_subparsers(dest="command", required=True)

    list_cmd = commands.add_parser("list", help="Show the history")
    list_cmd.add_argument("--pinned", action="store_true", help="Only pinned items")

    commands.add_parser("capture", help="Save the current pasteboard text")

    pin_cmd = commands.add_parser("pin", help="Pin or unpin an item")
    pin_cmd.add_argument("item_id")

    delete_cmd = commands.add_parser("delete", help="Delete an item")
    delete_cmd.add_argument("item_id")

    copy_cmd = commands.add_parser("copy", help="Put an item back on the pasteboard")
    copy_cmd.add_argument("item_id")

    commands.add_parser("clear", help="Delete every item")
    commands.add_parser("status", help="Report on the shared storage")

    watch_cmd = commands.add_parser("watch", help="Capture pasteboard changes until interrupted")
    watch_cmd.add_argument(
        "-i", "--interval",
        type=float,
        default=None,
        help="Polling interval in seconds (default: $CLIPSHELF_POLL_INTERVAL or 0.5)"
    )

    return parser.parse_args(argv)


def run_app(args: argparse.Namespace, app: ClipshelfApp) -> int:
    presenter = AppPresenter(app.store, app.pasteboard)
    presenter.appear()

    if args.command == "list":
        presenter.set_mode(ViewMode.PINNED if args.pinned else ViewMode.ALL)
        for line in format_rows(presenter.rows()):
            print(line)
        return 0

    if args.command == "capture":
        item = presenter.capture_pasteboard()
        if item is None:
            print("Nothing new on the pasteboard")
        else:
            print(f"Captured {item.id}")
        return 0

    if args.command == "pin":
        item = presenter.toggle_pin(args.item_id)
        if item is None:
            print(f"No item {args.item_id}", file=sys.stderr)
            return 1
        print(f"{'Pinned' if item.is_pinned else 'Unpinned'} {item.id}")
        return 0

    if args.command == "delete":
        if not presenter.delete(args.item_id):
            print(f"No item {args.item_id}", file=sys.stderr)
            return 1
        print(f"Deleted {args.item_id}")
        return 0

    if args.command == "copy":
        if app.store.get(args.item_id) is None:
            print(f"No item {args.item_id}", file=sys.stderr)
            return 1
        if not presenter.select(args.item_id):
            print("Could not write to the pasteboard", file=sys.stderr)
            return 1
        return 0

    if args.command == "clear":
        presenter.clear()
        return 0

    if args.command == "status":
        for key, value in app.backend.health_check().items():
            print(f"{key}: {value}")
        print(f"items: {len(app.store)}")
        return 0

    if args.command == "watch":
        service = CaptureService(
            app.store,
            app.pasteboard,
            on_capture=lambda item: print(f"Captured {item.id}: {_preview(item.content)}"),
            poll_interval=app.config.poll_interval,
        )

        def signal_handler(signum, frame):
            service.stop()

        signal.signal(signal.SIGTERM, signal_handler)
        print("Watching the pasteboard. Press Ctrl+C to stop")
        service.run_forever()
        return 0

    raise ValueError(f"Unknown command {args.command!r}")


def parse_keyboard_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="clipshelf-keyboard",
        description="clipshelf keyboard - pick a remembered clip and type it out"
    )
    _add_common_arguments(parser)
    commands = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("list", "Show temporary (unpinned) or pinned items"),
        ("insert", "Write a row's text at the cursor (stdout)"),
        ("pin", "Pin or unpin a row"),
        ("delete", "Delete a row"),
    ):
        cmd = commands.add_parser(name, help=help_text)
        if name != "list":
            cmd.add_argument("index", type=int)
        cmd.add_argument("--pinned", action="store_true", help="Use the pinned view")

    return parser.parse_args(argv)


def run_keyboard(args: argparse.Namespace, app: ClipshelfApp) -> int:
    presenter = KeyboardPresenter(
        app.store,
        app.pasteboard,
        insert_text=sys.stdout.write,
        mode=ViewMode.PINNED if args.pinned else ViewMode.TEMPORARY,
    )
    if args.command == "list":
        for line in format_rows(presenter.appear()):
            print(line)
        return 0

    # rows are numbered as the last list showed them, before any new capture
    presenter.refresh()
    item = presenter.row(args.index)
    if item is None:
        print(f"No row {args.index} in the {presenter.mode.value} view", file=sys.stderr)
        return 1

    if args.command == "insert":
        presenter.select(item.id)
        sys.stdout.flush()
        return 0

    if args.command == "pin":
        item = presenter.toggle_pin(item.id)
        print(f"{'Pinned' if item.is_pinned else 'Unpinned'} {item.id}")
        return 0

    if args.command == "delete":
        presenter.delete(item.id)
        print(f"Deleted {item.id}")
        return 0

    raise ValueError(f"Unknown command {args.command!r}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    _setup_logging(args.verbose)

    try:
        with ClipshelfApp(_config_from_args(args)) as app:
            return run_app(args, app)
    except (ValueError, NotImplementedError) as e:
        logger.error(f"Fatal error: {e}")
        return 1


def keyboard_main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_keyboard_args(argv)
    _setup_logging(args.verbose)

    try:
        with ClipshelfApp(_config_from_args(args)) as app:
            return run_keyboard(args, app)
    except (ValueError, NotImplementedError) as e:
        logger.error(f"Fatal error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
