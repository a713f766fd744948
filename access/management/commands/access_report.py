# access/management/commands/access_report.py
from __future__ import annotations

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from access.exceptions import EntitlementLookupError
from access.metrics import dashboard
from access.principal import Principal
from access.resolver import resolve_all
from territory.hierarchy import TARGETS


class Command(BaseCommand):
    help = "Print what a user can see: accessible ids per level and school/table coverage."

    def add_arguments(self, parser):
        parser.add_argument("--email", required=True, help="Login email of the user to inspect.")
        parser.add_argument("--show-ids", action="store_true", help="List the ids, not just the counts.")

    def handle(self, *args, **opts):
        User = get_user_model()
        email = opts["email"].strip().lower()
        user = User.objects.select_related("role").filter(email__iexact=email).first()
        if user is None:
            raise CommandError(f'User "{email}" not found.')

        principal = Principal.from_user(user)
        self.stdout.write(self.style.NOTICE(
            f">> {user.display_name} (role: {principal.role_name or '-'}, "
            f"active grants: {len(principal.active_grants())})"
        ))

        try:
            resolutions = resolve_all(principal)
            coverage = dashboard(principal)
        except EntitlementLookupError as exc:
            raise CommandError(f"Resolution failed (retry later): {exc}") from exc

        for target in TARGETS:
            resolution = resolutions[target]
            if resolution.unrestricted:
                self.stdout.write(f"  {target:<9} unrestricted")
                continue
            label = "table ids" if target == "citizen" else "ids"
            line = f"  {target:<9} {len(resolution.ids)} {label}"
            if opts["show_ids"] and resolution.ids:
                line += ": " + ", ".join(str(pk) for pk in sorted(resolution.ids))
            self.stdout.write(line)

        self.stdout.write("")
        for label, counts in coverage.items():
            self.stdout.write(
                f"  {label:<9} total={counts.total} "
                f"with={counts.with_assignment} without={counts.without_assignment}"
            )
