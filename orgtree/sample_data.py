"""Built-in sample organisation.

Used by the CLI when no --data file is given, and by `orgtree sample` as a
starting point for custom input files.
"""

import random

from orgtree.domain.organisation.models import Department


def _id() -> int:
    return random.randrange(1000)


def _employee(name: str, role: str, *durations: int) -> dict:
    return {
        "type": "employee",
        "name": name,
        "role": role,
        "tasks": [{"id": _id(), "duration": duration} for duration in durations],
    }


PUSH_BASED = Department.model_validate(
    {
        "type": "department",
        "name": "Push-Based HQ 🏢",
        "children": [
            {
                "type": "department",
                "name": "Leadership 👨‍💼",
                "children": [
                    _employee("Michael Hladky", "C", 12, 7),
                    _employee("Johanna Hladky", "C", 6, 3),
                    _employee("Julia Rapczynska", "B", 9),
                ],
            },
            {
                "type": "department",
                "name": "Engineering 💻",
                "children": [
                    # Supervisors first, then everyone else alphabetically
                    _employee("Julian Jandl", "B", 5, 4),
                    _employee("Adrian Romanski", "A", 8),
                    _employee("Christopher Holder", "A", 8, 5),
                    _employee("Edouard Bozon", "A", 7),
                    _employee("Edouard Maleix", "A", 7, 2),
                    _employee("Enea Jahollari", "A", 3, 6),
                    _employee("Hanna Skryl", "A", 2, 7),
                    _employee("Kirill Karnaukhov", "A", 9),
                    _employee("Lars Gyrup Brink Nielsen", "A", 6, 5),
                    _employee("Michael Berger", "A", 5, 4),
                    _employee("Ondrej Svoreň", "A", 4, 3),
                    _employee("Vojtech Mašek", "X", 3, 5),
                    _employee("Manuel Matuzovic", "X", 6, 3, 2),
                    _employee("Maria Korneeva", "X", 7),
                    _employee("Stefan Baumgartner", "X", 4, 5),
                    _employee("Tanja Ulianova", "X", 6, 3),
                    _employee("Alexander Lichter", "X", 8),
                ],
            },
            {
                "type": "department",
                "name": "Marketing 📢",
                "children": [
                    _employee("Alex Schwaiger", "B", 5, 2),
                    _employee("Iulia Enescu", "A", 6, 3),
                ],
            },
        ],
    }
)
