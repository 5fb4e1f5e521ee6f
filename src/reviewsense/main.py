"""Main entry point for ReviewSense."""

from reviewsense.cli import main as cli_main


def main():
    """Main entry point - delegates to the CLI (``ui`` launches Streamlit)."""
    cli_main()


if __name__ == "__main__":
    main()
