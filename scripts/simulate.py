"""
Form Submission Simulation Script

Fires a batch of concurrent reservation and contact submissions at a
running instance and reports how each one ended.
Run from project root: python scripts/simulate.py

Author: El Sabor Web Team
Version: 1.0.0
"""

import argparse
import asyncio
import random
import sys
import time
from datetime import date, datetime, timedelta
from typing import Any

import httpx

# Configuration
API_BASE_URL = "http://localhost:3000"
TOTAL_SUBMISSIONS = 20

# Sample data for random submissions
FIRST_NAMES = ["Ana", "Lucía", "Carlos", "Marta", "James", "Emma", "Javier", "Sofía"]
LAST_NAMES = ["García", "López", "Martín", "Smith", "Ruiz", "Brown", "Díaz"]
REQUESTS = ["", "Mesa en la terraza", "Trona para bebé", "Cumpleaños", "Sin gluten"]
MESSAGES = [
    "¿Tenéis menú del día los sábados?",
    "Do you have vegetarian options?",
    "Quisiera organizar una cena de empresa para 20 personas.",
]
LANGUAGES = ["", "/es", "/en"]


def generate_person() -> dict[str, str]:
    """Generate a random visitor."""
    first = random.choice(FIRST_NAMES)
    last = random.choice(LAST_NAMES)
    return {
        "nombre": f"{first} {last}",
        "email": f"{first.lower()}.{random.randint(1, 999)}@example.com",
    }


def generate_reservation() -> dict[str, str]:
    """Reservation between two and thirty days ahead."""
    day = date.today() + timedelta(days=random.randint(2, 30))
    return {
        **generate_person(),
        "fecha": day.isoformat(),
        "hora": f"{random.randint(13, 22):02d}:{random.choice(['00', '15', '30', '45'])}",
        "personas": str(random.randint(1, 8)),
        "peticiones": random.choice(REQUESTS),
    }


def generate_contact() -> dict[str, str]:
    return {**generate_person(), "mensaje": random.choice(MESSAGES)}


async def submit(
    client: httpx.AsyncClient,
    num: int,
    kind: str,
) -> dict[str, Any]:
    """Post one form and record the outcome."""
    prefix = random.choice(LANGUAGES)
    data = generate_reservation() if kind == "reserva" else generate_contact()
    start_time = time.time()

    try:
        response = await client.post(f"{API_BASE_URL}{prefix}/{kind}", data=data, timeout=30.0)
        elapsed = round(time.time() - start_time, 3)
        return {
            "num": num,
            "kind": kind,
            "success": response.status_code == 200,
            "status": response.status_code,
            "error": None if response.status_code == 200 else response.text[:100],
            "time": elapsed,
        }
    except httpx.HTTPError as e:
        elapsed = round(time.time() - start_time, 3)
        return {
            "num": num,
            "kind": kind,
            "success": False,
            "status": None,
            "error": str(e)[:100],
            "time": elapsed,
        }


async def run_simulation(num_submissions: int = TOTAL_SUBMISSIONS) -> dict[str, Any]:
    """Send ``num_submissions`` forms concurrently, alternating flows."""
    print("=" * 70)
    print("🍽️  FORM SUBMISSION SIMULATION")
    print("=" * 70)
    print(f"📋 Total Submissions: {num_submissions}")
    print(f"🎯 Target: {API_BASE_URL}")
    print(f"⏰ Started: {datetime.now().strftime('%H:%M:%S')}")
    print("=" * 70)

    start_time = time.time()

    async with httpx.AsyncClient() as client:
        tasks = [
            submit(client, i + 1, "reserva" if i % 2 == 0 else "contacto")
            for i in range(num_submissions)
        ]
        results = await asyncio.gather(*tasks)

    total_time = round(time.time() - start_time, 2)
    successful = [r for r in results if r["success"]]
    failed = [r for r in results if not r["success"]]

    print(f"\n✅ Successful: {len(successful)}/{num_submissions}")
    print(f"❌ Failed: {len(failed)}/{num_submissions}")
    print(f"⏱️  Total Time: {total_time}s")

    if successful:
        avg_time = round(sum(r["time"] for r in successful) / len(successful), 3)
        print(f"   Average Response: {avg_time}s")

    if failed:
        print("\n⚠️  Failed Submission Details (showing first 5):")
        for f in failed[:5]:
            print(f"   #{f['num']} [{f['kind']}] {f['status']}: {f['error']}")

    print("=" * 70)

    return {
        "total": num_submissions,
        "successful": len(successful),
        "failed": len(failed),
        "total_time": total_time,
        "results": results,
    }


async def check_single_flows() -> bool:
    """Pre-flight checks before the batch."""
    async with httpx.AsyncClient() as client:
        print("\n1️⃣ Health Check...")
        response = await client.get(f"{API_BASE_URL}/health")
        if response.status_code != 200:
            print(f"   ❌ Failed: {response.text}")
            return False
        print(f"   ✅ Status: {response.json().get('status')}")

        print("\n2️⃣ Unsupported language prefix...")
        response = await client.get(f"{API_BASE_URL}/fr/carta")
        print(f"   {'✅' if response.status_code == 404 else '❌'} {response.status_code}")

        print("\n3️⃣ Reservation for today (must be rejected)...")
        data = generate_reservation()
        data["fecha"] = date.today().isoformat()
        response = await client.post(f"{API_BASE_URL}/reserva", data=data)
        print(f"   {'✅' if response.status_code == 400 else '❌'} {response.status_code}")

    return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Form Submission Simulation")
    parser.add_argument("--submissions", type=int, default=TOTAL_SUBMISSIONS, help="Number of submissions")
    parser.add_argument("--skip-checks", action="store_true", help="Skip pre-flight checks")
    args = parser.parse_args()

    if not args.skip_checks and not asyncio.run(check_single_flows()):
        print("\n❌ Pre-flight checks failed.")
        sys.exit(1)

    asyncio.run(run_simulation(args.submissions))
