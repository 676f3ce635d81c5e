#!/usr/bin/env python3
"""
Local Form Simulator

Drive the activity generator form from your terminal.

Usage:
    python simulate_form.py

Requirements:
    - Server running locally (uvicorn connect_app.main:app --port 8000)
    - App dependencies installed
"""

import httpx
import sys

FIELDS = [
    ("yearLevel", "Year Level (e.g. Year 8, Grade 10)"),
    ("subjectArea", "Subject Area"),
    ("unitTopic", "Unit Topic"),
]


class FormSimulator:
    """Interactive form simulator for local testing."""

    def __init__(self, base_url: str = "http://localhost:8000"):
        self.base_url = base_url
        self.client = httpx.Client(base_url=base_url, timeout=10)

    def screen(self) -> str:
        return self.client.get("/api/form/screen").text

    def fill(self, name: str, value: str) -> None:
        self.client.patch("/api/form", json={name: value})

    def generate(self) -> str:
        """Submit the form and wait for the result."""
        response = self.client.post("/api/form/generate")
        if response.status_code == 202:
            print("\nGenerating...")
            self.client.get("/api/form", params={"wait": "true"})
        elif response.status_code == 409:
            print("\nStill generating, please wait.")
        return self.screen()

    def display_screen(self, content: str):
        """Display the page in the terminal."""
        width = 60
        print("\n" + "┌" + "─" * width + "┐")
        for line in content.split('\n'):
            # Wrap long lines
            while len(line) > width - 2:
                print("│ " + line[:width-2] + " │")
                line = line[width-2:]
            print("│ " + line.ljust(width-2) + " │")
        print("└" + "─" * width + "┘")

    def run(self):
        """Run interactive simulator."""

        print("\n" + "=" * 50)
        print("  FORM SIMULATOR - Connect Activity Generator")
        print("  Commands: fill, generate, print, new, quit")
        print("=" * 50)

        self.display_screen(self.screen())

        while True:
            try:
                command = input("\nCommand: ").strip().lower()

                if command == 'quit':
                    print("\nGoodbye!")
                    break

                if command == 'fill':
                    for name, label in FIELDS:
                        value = input(f"  {label}: ").strip()
                        if value:
                            self.fill(name, value)
                    self.display_screen(self.screen())
                elif command == 'generate':
                    self.display_screen(self.generate())
                elif command == 'print':
                    response = self.client.get("/api/form/print")
                    if response.status_code == 200:
                        print("\n" + response.text)
                    else:
                        print("\nNothing to print yet.")
                elif command == 'new':
                    self.client.post("/api/form/reset")
                    self.display_screen(self.screen())
                elif command:
                    print("Unknown command.")

            except httpx.ConnectError:
                print("ERROR: Cannot connect to server. Is uvicorn running?")
            except KeyboardInterrupt:
                print("\n\nGoodbye!")
                break

        self.client.close()


def check_server():
    """Check if the server is running."""
    try:
        response = httpx.get("http://localhost:8000/health", timeout=5)
        return response.status_code == 200
    except httpx.HTTPError:
        return False


if __name__ == "__main__":
    print("Checking server...")

    if not check_server():
        print("\n❌ Server not running!")
        print("\nStart the server first:")
        print("  uvicorn connect_app.main:app --reload --port 8000")
        sys.exit(1)

    print("✓ Server is running")

    simulator = FormSimulator()
    simulator.run()
