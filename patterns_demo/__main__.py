"""Main entry point for the patterns demo."""

import argparse
import io
import sys

from patterns_demo import configure_logging, load_config_from_env, run_demo


def main() -> None:
    """Parse arguments, load configuration and run the demonstration."""
    parser = argparse.ArgumentParser(
        description="Demonstrate the Factory Method, Composite and Strategy patterns.",
    )
    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="Path to the environment configuration file.",
    )
    parser.add_argument(
        "--with-encryption",
        action="store_true",
        help="Also run the encryption strategy demonstration.",
    )
    args = parser.parse_args()

    config = load_config_from_env(args.env_file)
    if args.with_encryption:
        config.show_encryption = True
    configure_logging(config)

    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding="utf-8")
    run_demo(config)


if __name__ == "__main__":
    main()
