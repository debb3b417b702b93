import os
import signal
import sys
from time import sleep
import logging
from typing import Any, Sequence

from config import (
    DEFAULT_ALGORITHM,
    SAMPLE_PREFIX_PATTERN,
    SAMPLE_Z_STRING,
    SAMPLE_TEXT,
    SAMPLE_PATTERN,
)
from kmp import prefix_function, kmp_match
from z_algorithm import z_function, z_match
from pdfreader import read_document_pages, get_document_title
from text_matcher import SUPPORTED_ALGORITHMS, search_pages, show_matches
from logging_config import setup_logging

logger = logging.getLogger("app")


class Colors:
    GREEN = '\033[92m'
    RED = '\033[91m'
    YELLOW = '\033[93m'
    BLUE = '\033[94m'
    RESET = '\033[0m'


def format_array(label: str, values: Sequence[Any]) -> str:
    """Render an array on one line, e.g. 'LPS Array: 0 1 0'."""
    return f"{label}: {' '.join(str(v) for v in values)}".rstrip()


def run_samples() -> None:
    """Print the arrays computed for the built-in sample inputs."""
    print(f"Pattern: {SAMPLE_PREFIX_PATTERN}")
    print(format_array("LPS Array", prefix_function(SAMPLE_PREFIX_PATTERN)))
    print()
    print(f"Text: {SAMPLE_TEXT}")
    print(f"Pattern: {SAMPLE_PATTERN}")
    print(format_array("KMP State Array", kmp_match(SAMPLE_TEXT, SAMPLE_PATTERN)))
    print()
    print(f"String: {SAMPLE_Z_STRING}")
    print(format_array("Z-array", z_function(SAMPLE_Z_STRING)))
    print()
    print(f"Text: {SAMPLE_TEXT}")
    print(f"Pattern: {SAMPLE_PATTERN}")
    print(format_array("Z-array", z_match(SAMPLE_TEXT, SAMPLE_PATTERN)))


class StringMatcherApp:
    """
    Menu-driven front end for the KMP and Z-algorithm matchers.
    """

    def __init__(self):
        signal.signal(signal.SIGINT, self._signal_handler)
        logger.info("StringMatcherApp initialized.")

    def _clear_terminal(self):
        """Clears the terminal screen without triggering signal handlers."""
        if os.name == 'nt':  # For Windows
            os.system('cls')
        else:  # For Unix systems
            print('\033[H\033[J')

    def _signal_handler(self, signum, frame):
        """Handles interrupt signals (e.g., Ctrl+C) gracefully."""
        if signum == signal.SIGINT:
            logger.info("Interrupt signal received. Shutting down application.")
            print("\n\nInterrupt signal received. Exiting...")
            sys.exit(0)

    def _pause(self):
        input("\nPress Enter to continue...")

    def _prefix_function(self):
        print("Prefix Function")
        print("---------------")
        pattern = input("Enter the pattern: ")
        print(format_array("LPS Array", prefix_function(pattern)))
        self._pause()

    def _kmp_search(self):
        print("KMP Search")
        print("----------")
        text = input("Enter the text: ")
        pattern = input("Enter the pattern: ")
        state = kmp_match(text, pattern)
        print(format_array("KMP State Array", state))
        ends = [i for i, matched in enumerate(state) if pattern and matched == len(pattern)]
        if ends:
            print(f"{Colors.GREEN}Occurrences end at: {', '.join(map(str, ends))}{Colors.RESET}")
        else:
            print(f"{Colors.YELLOW}No occurrences found.{Colors.RESET}")
        self._pause()

    def _z_function(self):
        print("Z-Function")
        print("----------")
        s = input("Enter the string: ")
        print(format_array("Z-array", z_function(s)))
        self._pause()

    def _z_search(self):
        print("Z-Algorithm Search")
        print("------------------")
        text = input("Enter the text: ")
        pattern = input("Enter the pattern: ")
        z = z_match(text, pattern)
        print(format_array("Z-array", z))
        starts = [i for i, matched in enumerate(z) if pattern and matched == len(pattern)]
        if starts:
            print(f"{Colors.GREEN}Occurrences start at: {', '.join(map(str, starts))}{Colors.RESET}")
        else:
            print(f"{Colors.YELLOW}No occurrences found.{Colors.RESET}")
        self._pause()

    def _search_document(self):
        print("Search a Document")
        print("-----------------")
        file_path = input("Enter the path to the PDF or text document: ").strip()

        # Handle double-quoted paths from win11 right click copy as path
        if file_path.startswith('"') and file_path.endswith('"'):
            file_path = file_path[1:-1]

        if not file_path:
            print(f"{Colors.RED}Error: No file path provided.{Colors.RESET}")
            self._pause()
            return
        file_path = os.path.normpath(file_path)
        if not os.path.exists(file_path):
            logger.warning(f"File not found: {file_path}")
            print(f"{Colors.RED}File not found. Please check the path and try again.{Colors.RESET}")
            self._pause()
            return

        pages = read_document_pages(file_path)
        if pages is None:
            print(f"{Colors.RED}Failed to read the document. See the logs for details.{Colors.RESET}")
            self._pause()
            return

        pattern = input("Enter the pattern: ")
        algorithm = input(f"Algorithm ({'/'.join(SUPPORTED_ALGORITHMS)}) [{DEFAULT_ALGORITHM}]: ").strip().lower()
        algorithm = algorithm or DEFAULT_ALGORITHM
        ignore_case = input("Ignore case? (y/N): ").strip().lower() == 'y'

        try:
            matches = search_pages(pages, pattern, algorithm, ignore_case)
        except ValueError as e:
            logger.warning(f"Document search rejected: {e}")
            print(f"{Colors.RED}{e}{Colors.RESET}")
            self._pause()
            return

        print(f"\nDocument: {get_document_title(file_path)} ({len(pages)} page(s))")
        if not matches:
            print(f"{Colors.YELLOW}No occurrences found.{Colors.RESET}")
        for page_number in sorted({match['page'] for match in matches}):
            print(f"\nPage {page_number}:")
            show_matches(pages[page_number - 1], pattern, algorithm, ignore_case)
        self._pause()

    def _run_samples(self):
        print("Samples")
        print("-------")
        run_samples()
        self._pause()

    def run(self):
        """Main application loop."""
        menu_actions = {
            '1': self._prefix_function,
            '2': self._kmp_search,
            '3': self._z_function,
            '4': self._z_search,
            '5': self._search_document,
            '6': self._run_samples,
        }

        while True:
            self._clear_terminal()
            print(f"\n{Colors.BLUE}String Matcher{Colors.RESET}")
            print("---------------------------------------")
            print("1. Prefix function of a pattern")
            print("2. KMP search")
            print("3. Z-function of a string")
            print("4. Z-algorithm search")
            print("5. Search a document")
            print("6. Run samples")
            print("7. Exit")
            print("---------------------------------------")
            choice = input("Enter your choice: ").strip()

            if choice in menu_actions:
                logger.info(f"User selected menu option: {choice}")
                self._clear_terminal()
                menu_actions[choice]()
            elif choice == '7':
                logger.info("User selected exit. Shutting down application.")
                print("Exiting the system...")
                break
            else:
                logger.warning(f"Invalid menu choice: {choice}")
                print(f"{Colors.RED}Invalid choice. Please try again.{Colors.RESET}")
                sleep(1)


def main():
    setup_logging()
    logger.info("Application starting...")
    try:
        StringMatcherApp().run()
    except (KeyboardInterrupt, EOFError):
        print("\nInput closed. Exiting.")
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        print(f"\n{Colors.RED}An unexpected error occurred in the application: {e}{Colors.RESET}")
        sys.exit(1)


if __name__ == "__main__":
    main()
