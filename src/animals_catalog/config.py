from __future__ import annotations
import argparse, os
from dataclasses import dataclass
from typing import Optional, Sequence

DEFAULT_BASE_URL = "https://firestore.googleapis.com/v1"
DEFAULT_COLLECTION = "animals"

@dataclass(frozen=True)
class FirebaseConfig:
    api_key: str
    auth_domain: str
    project_id: str
    base_url: str = DEFAULT_BASE_URL
    collection: str = DEFAULT_COLLECTION
    connect_timeout: Optional[float] = None
    read_timeout: Optional[float] = None

def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    return float(raw) if raw else None

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="animals-catalog", description="Endangered animals catalog (Firestore-backed)")
    p.add_argument("--api-key", default=os.getenv("FIREBASE_API_KEY", ""))
    p.add_argument("--auth-domain", default=os.getenv("FIREBASE_AUTH_DOMAIN", ""))
    p.add_argument("--project-id", default=os.getenv("FIREBASE_PROJECT_ID", ""))
    p.add_argument("--base-url", default=os.getenv("FIRESTORE_BASE_URL", DEFAULT_BASE_URL))
    p.add_argument("--collection", default=os.getenv("ANIMALS_COLLECTION", DEFAULT_COLLECTION))
    p.add_argument("--connect-timeout", type=float, default=_env_float("CONNECT_TIMEOUT"))
    p.add_argument("--read-timeout", type=float, default=_env_float("READ_TIMEOUT"))

    sub = p.add_subparsers(dest="command", required=True)

    ls = sub.add_parser("list", help="list records, optionally filtered")
    ls.add_argument("--query", default="")
    ls.add_argument("--category", default="")

    add = sub.add_parser("add", help="create a record")
    for field in ("name", "location", "population", "description", "category"):
        add.add_argument(f"--{field}", default="")
    add.add_argument("--image", default=None, help="path of an image file")

    edit = sub.add_parser("edit", help="update a record by id")
    edit.add_argument("id")
    for field in ("name", "location", "population", "description", "category"):
        edit.add_argument(f"--{field}", default=None)
    edit.add_argument("--image", default=None, help="path of a replacement image file")

    rm = sub.add_parser("delete", help="delete a record by id")
    rm.add_argument("id")
    rm.add_argument("--yes", action="store_true", help="skip the confirmation prompt")
    return p

def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)

def config_from_args(args: argparse.Namespace) -> FirebaseConfig:
    if not args.project_id:
        raise ValueError("--project-id (or FIREBASE_PROJECT_ID) is required")
    return FirebaseConfig(
        api_key=args.api_key,
        auth_domain=args.auth_domain,
        project_id=args.project_id,
        base_url=args.base_url,
        collection=args.collection,
        connect_timeout=args.connect_timeout,
        read_timeout=args.read_timeout,
    )
