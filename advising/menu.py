"""Interactive console menu for the ABCU CS advising assistant.

Options:
  1. Load Data Structure  - rebuild the catalog from a course file
  2. Print Course List    - every defined course, sorted by ID
  3. Print Course         - one course with its prerequisite titles
  9. Exit
"""

from __future__ import annotations

import argparse
import sys
from typing import List, TextIO

from .catalog import CourseCatalog
from .data_loader import load_course_file
from .schemas import LoadReport, LookupStatus

VALID_OPTIONS = "1, 2, 3, or 9"


class InputClosed(Exception):
    """Raised when the input stream reaches EOF at a prompt."""


class AdvisingSession:
    """Owns the catalog and the data-loaded flag for one console run."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.catalog = CourseCatalog()
        self.data_loaded = False

    def log(self, message: str = ""):
        """Print with flush so piped terminals show output immediately."""
        print(message, file=self.stdout, flush=True)

    def read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise InputClosed()
        return line.rstrip("\n").rstrip("\r")

    def show_menu(self):
        self.log()
        self.log("Welcome to the ABCU Computer Science Advising Assistant")
        self.log("--------------------------------------------------------")
        self.log("  1. Load Data Structure")
        self.log("  2. Print Course List")
        self.log("  3. Print Course")
        self.log("  9. Exit")
        self.log()
        self.log("What would you like to do? ")

    def load(self, filename: str) -> LoadReport:
        report = load_course_file(self.catalog, filename)
        if not report.ok:
            print(f"Error: Could not open file: {filename}", file=self.stderr, flush=True)
            self.data_loaded = False
            return report

        self.data_loaded = True
        self.log(f"Data loaded successfully from {filename}")
        if report.warnings:
            self.log("Note: Some lines were skipped or had issues:")
            for warning in report.warnings:
                self.log(f"  - {warning}")
        return report

    def print_course_list(self):
        self.log()
        self.log("Computer Science Course List")
        self.log("----------------------------")
        for summary in self.catalog.list_courses():
            self.log(f"{summary.id}, {summary.title}")
        self.log()

    def print_course(self, query: str):
        result = self.catalog.lookup(query)
        if result.status is LookupStatus.INVALID_QUERY:
            self.log("Error: empty course ID.")
            return
        if result.status is LookupStatus.NOT_FOUND:
            self.log(f"Course not found: {result.query}")
            return

        course = result.course
        self.log()
        self.log(f"{course.id}: {course.title}")
        if not course.prerequisites:
            self.log("Prerequisites: None")
        else:
            self.log("Prerequisites:")
            for prereq in course.prerequisites:
                self.log(f"  - {prereq.id}: {prereq.title or 'Title unknown'}")
        self.log()

    def handle_choice(self, choice: int) -> bool:
        """Run one menu action. Returns False when the session should end."""
        if choice == 1:
            self.log("Enter the file name to load: ")
            filename = self.read_line().strip()
            if not filename:
                self.log("Error: file name cannot be empty.")
                return True
            self.load(filename)
        elif choice in (2, 3):
            if not self.data_loaded:
                self.log("Please load data first using option 1.")
                return True
            if choice == 2:
                self.print_course_list()
            else:
                self.log("Enter a course ID (e.g., CSCI300): ")
                self.print_course(self.read_line())
        elif choice == 9:
            self.log("Thank you for using the ABCU CS Advising Assistant. Goodbye!")
            return False
        else:
            self.log(f"Invalid option. Please enter {VALID_OPTIONS}.")
        return True

    def run(self):
        while True:
            self.show_menu()
            try:
                choice_line = self.read_line().strip()
                if not choice_line:
                    self.log(f"Please enter a menu option ({VALID_OPTIONS}).")
                    continue
                if not (choice_line.isascii() and choice_line.isdigit()):
                    self.log(f"Invalid option. Please enter {VALID_OPTIONS}.")
                    continue
                if not self.handle_choice(int(choice_line)):
                    return
            except InputClosed:
                self.log()
                self.log("Input closed. Exiting.")
                return


def parse_args(argv: List[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Browse ABCU computer science courses and their prerequisites."
    )
    parser.add_argument(
        "--file",
        help="Optional course CSV to load before the menu starts (CourseID, Title, Prereq...).",
    )
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    session = AdvisingSession()
    if args.file:
        session.load(args.file)
    session.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
