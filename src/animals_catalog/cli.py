"""
Command-line entrypoint for the animals catalog.

- Parses CLI args and Firebase config
- Initializes HttpClient, AnimalsAPI and CatalogController
- Runs one action per invocation:
    list   -> load, filter, print
    add    -> fill the form, submit
    edit   -> load, begin_edit, overwrite given fields, submit
    delete -> load, confirm, delete

Exit codes: 0 ok, 1 rejected or store failure, 2 usage / unknown id, 130 interrupted.
"""
from __future__ import annotations
import argparse, asyncio, sys
from typing import Callable, List, Optional, Sequence

from .api import AnimalsAPI, AnimalsGateway
from .config import FirebaseConfig, config_from_args, parse_args
from .controller import CatalogController, DeleteState
from .errors import PersistenceError
from .models import AnimalRecord

TEXT_FIELDS = ("name", "location", "population", "description", "category")

def prompt_confirm(message: str) -> bool:
    try:
        answer = input(f"{message} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")

def format_record(record: AnimalRecord) -> str:
    image = "yes" if record.get("image") else "no"
    return (f"{record.get('id', '-'):<22} {record.get('name', ''):<24} {record.get('category', ''):<12} "
            f"{record.get('location', ''):<20} pop={record.get('population', '')} image={image}")

def print_records(records: List[AnimalRecord]) -> None:
    for r in records:
        print(format_record(r))
    print(f"{len(records)} record(s).")

async def execute(args: argparse.Namespace, gateway: AnimalsGateway, confirm: Callable[[str], bool]) -> int:
    if getattr(args, "yes", False):
        confirm = lambda _msg: True
    controller = CatalogController(gateway, confirm=confirm)

    if args.command == "add":
        controller.show_form()
        for field in TEXT_FIELDS:
            controller.update_field(field, getattr(args, field))
        controller.handle_image_upload(args.image)
        doc_id = await controller.submit()
        if doc_id is None:
            return 1
        print(f"Created {doc_id}.")
        return 0

    try:
        await controller.load_animals()
    except PersistenceError as e:
        print(f"[error] Could not load animals: {e}", file=sys.stderr)
        return 1

    if args.command == "list":
        controller.search_query = args.query
        controller.selected_category = args.category
        print_records(controller.filtered_animals)
        return 0

    index = controller.find_index(args.id)
    if index is None:
        print(f"[error] No animal with id {args.id!r}.", file=sys.stderr)
        return 2

    if args.command == "edit":
        controller.begin_edit(index)
        for field in TEXT_FIELDS:
            value = getattr(args, field)
            if value is not None:
                controller.update_field(field, value)
        controller.handle_image_upload(args.image)
        if await controller.submit() is None:
            return 1
        print(f"Updated {args.id}.")
        return 0

    # delete
    outcome = await controller.request_delete(index)
    if outcome is DeleteState.DELETED:
        print(f"Deleted {args.id}.")
        return 0
    return 0 if outcome is DeleteState.CANCELLED else 1

async def run(args: argparse.Namespace, config: FirebaseConfig) -> int:
    async with AnimalsAPI.client_for(config) as http:
        api = AnimalsAPI(http, config.project_id, config.collection)
        print(f"""
            ====== Animals Catalog ======
            Project        : {config.project_id}
            Auth domain    : {config.auth_domain or '-'}
            Collection     : {config.collection}
            Timeouts (s)   : connect={config.connect_timeout} read={config.read_timeout}
            =============================
        """)
        return await execute(args, api, prompt_confirm)

def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    try:
        config = config_from_args(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)
    try:
        sys.exit(asyncio.run(run(args, config)))
    except OSError as e:
        print(f"[error] {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("Aborted.", file=sys.stderr)
        sys.exit(130)
