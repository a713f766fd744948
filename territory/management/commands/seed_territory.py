# territory/management/commands/seed_territory.py
from django.core.management.base import BaseCommand
from django.db import transaction
from django.apps import apps


def M(model_name):
    return apps.get_model("territory", model_name)


# section -> localities -> circuits -> schools -> table numbers
DEMO_TREE = [
    ("Sección Primera", 1, [
        ("San Fernando", [
            ("Circuito 1", [
                ("Escuela N° 1 Domingo F. Sarmiento", "Constitución 1050", [1, 2, 3]),
                ("Escuela N° 5 Juana Manso", "Madero 520", [4, 5]),
            ]),
            ("Circuito 2", [
                ("Escuela N° 9 Manuel Belgrano", "Sarmiento 1430", [6, 7, 8]),
            ]),
        ]),
        ("Victoria", [
            ("Circuito 3", [
                ("Escuela N° 12 Rosario Vera Peñaloza", "Alsina 800", [9, 10]),
            ]),
        ]),
    ]),
]


class Command(BaseCommand):
    help = "Seed a small demo hierarchy: Sections, Localities, Circuits, Schools and Tables."

    def add_arguments(self, parser):
        parser.add_argument("--dry-run", action="store_true", help="Simulate without writing to DB.")

    @transaction.atomic
    def handle(self, *args, **opts):
        dry = opts["dry_run"]

        Section = M("Section")
        Locality = M("Locality")
        Circuit = M("Circuit")
        School = M("School")
        Table = M("Table")

        counts = {"sections": 0, "localities": 0, "circuits": 0, "schools": 0, "tables": 0}

        for section_name, number, localities in DEMO_TREE:
            self.stdout.write(f"-> {section_name}")
            section, created = Section.objects.get_or_create(
                name=section_name, defaults={"number": number, "slug": f"seccion-{number}"},
            )
            counts["sections"] += int(created)

            for locality_name, circuits in localities:
                locality, created = Locality.objects.get_or_create(name=locality_name, section=section)
                counts["localities"] += int(created)

                for circuit_name, schools in circuits:
                    circuit, created = Circuit.objects.get_or_create(name=circuit_name, locality=locality)
                    counts["circuits"] += int(created)

                    for school_name, street, table_numbers in schools:
                        school, created = School.objects.get_or_create(
                            name=school_name, circuit=circuit, defaults={"street": street},
                        )
                        counts["schools"] += int(created)

                        for table_number in table_numbers:
                            _, created = Table.objects.get_or_create(number=table_number, school=school)
                            counts["tables"] += int(created)

        summary = ", ".join(f"{name}={value}" for name, value in counts.items())
        if dry:
            transaction.set_rollback(True)
            self.stdout.write(self.style.WARNING(f"Dry-run enabled, rolled back ({summary})."))
            return

        self.stdout.write(self.style.SUCCESS(f"Territory seed completed ({summary})."))
