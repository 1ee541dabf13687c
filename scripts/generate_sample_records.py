"""Write sample list-screen exports for trying out the caseview CLI."""

import random
import sys
from datetime import date, timedelta
from pathlib import Path

import pandas as pd

FIRST_NAMES = ["Anna", "Bram", "Chris", "Dewi", "Eva", "Finn", "Guus", "Hanna", "Iris", "Jesse", "Lotte", "Milan"]
LAST_NAMES = ["de Vries", "Bakker", "Mulder", "Jansen", "Visser", "Smit", "Meijer", "de Boer", "Bos", "Peters"]
INSURERS = ["Zilveren Kruis", "CZ", "VGZ", "Menzis", None]
THERAPY_TYPES = ["CBT", "EMDR", "Schema therapy", "ACT"]

THERAPISTS = [
    {"id": "t1", "first_name": "Eva", "last_name": "Jansen", "status": "active",
     "specializations": ["CBT", "EMDR"], "accepting_clients": True},
    {"id": "t2", "first_name": "Frank", "last_name": "Smit", "status": "on_leave",
     "specializations": ["Schema therapy"], "accepting_clients": False},
    {"id": "t3", "first_name": "Gijs", "last_name": "Visser", "status": "active",
     "specializations": ["ACT", "CBT"], "accepting_clients": True},
]


def make_clients(count: int, rng: random.Random) -> list[dict]:
    clients = []
    for i in range(1, count + 1):
        first, last = rng.choice(FIRST_NAMES), rng.choice(LAST_NAMES)
        therapist = rng.choice(THERAPISTS + [None])
        registered = date(2023, 1, 1) + timedelta(days=rng.randrange(700))
        clients.append(
            {
                "id": f"c{i}",
                "first_name": first,
                "last_name": last,
                "email": f"{first.lower()}.{last.lower().replace(' ', '')}{i}@example.nl",
                "phone": f"06{rng.randrange(10**8):08d}",
                "status": rng.choice(["new", "active", "active", "on_hold", "inactive", "discharged"]),
                "assigned_therapist_id": therapist["id"] if therapist else None,
                "therapist_name": f"{therapist['first_name']} {therapist['last_name']}" if therapist else None,
                "insurance_company": rng.choice(INSURERS),
                "therapy_type": rng.choice(THERAPY_TYPES),
                "total_sessions": rng.randrange(0, 40),
                "registration_date": registered.isoformat(),
                "intake_completed": rng.random() > 0.3,
            }
        )
    return clients


def main():
    output_dir = Path(sys.argv[1] if len(sys.argv) > 1 else "data")
    output_dir.mkdir(parents=True, exist_ok=True)
    rng = random.Random(42)

    clients = make_clients(60, rng)
    therapists = [
        {**therapist, "email": f"{therapist['first_name'].lower()}@example.nl",
         "client_count": sum(1 for c in clients if c["assigned_therapist_id"] == therapist["id"])}
        for therapist in THERAPISTS
    ]

    for name, records in (("clients", clients), ("therapists", therapists)):
        path = output_dir / f"{name}.json"
        pd.DataFrame(records).to_json(path, orient="records", indent=2)
        print(f"Wrote {len(records)} {name} to {path}")

    print(f"\nTry: caseview browse {output_dir / 'clients.json'}")


if __name__ == "__main__":
    main()
