"""Allow ``python -m rest_api_generator``."""

from rest_api_generator.cli import run

if __name__ == "__main__":
    run()
