"""Management command to look up weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from backend.api.views import get_lookup_service


class Command(BaseCommand):
    help = "Print the daily forecast table for a place name"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("term", type=str, help="Place name, e.g. london")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        result = get_lookup_service().lookup(options["term"])
        if not result.ok:
            raise CommandError(f"{result.status.value}: {result.detail}")
        self.stdout.write(json.dumps(result.as_dict()))
