#!/usr/bin/env python3
"""
Load the default config file and print what the assistant would run with.

Usage: python scripts/check_config.py [PATH]
"""
import sys

from my_assistant.config import ConfigError, default_config_path, load_config


def main():
    config_path = sys.argv[1] if len(sys.argv) > 1 else str(default_config_path())
    print(f"Loading config from: {config_path}")

    try:
        config = load_config(config_path)
    except ConfigError as e:
        print(f"Error loading config: {e}")
        sys.exit(1)

    print("Config loaded successfully")
    print(f"Agent provider: {config.agent.provider}")
    print(f"Model: {config.agent.model}")
    print(f"API Key: {config.masked_api_key()}")
    print(f"Base URL: {config.agent.base_url or 'not set'}")
    print(f"Channels: {len(config.channels)}")
    print(f"Log level: {config.log_level}")


if __name__ == "__main__":
    main()
