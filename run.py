#!/usr/bin/env python3
"""
TransLuxe - Launcher
====================
Start the live translation server.

Usage:
    python run.py
    python -m transluxe
"""
import sys
from pathlib import Path

# Add package to path if running directly
package_dir = Path(__file__).parent
if str(package_dir) not in sys.path:
    sys.path.insert(0, str(package_dir))


# Colors for terminal output
class Colors:
    RESET = '\033[0m'
    BOLD = '\033[1m'
    RED = '\033[91m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    CYAN = '\033[96m'


def check_backend() -> bool:
    """Check if the translation backend answers."""
    from transluxe.services.lingva_client import LingvaClient

    client = LingvaClient()
    try:
        return client.is_healthy()
    finally:
        client.close()


def main():
    """Main entry point"""
    from transluxe.config import config
    from transluxe.app import run_server

    print(f"\n{Colors.CYAN}{'='*60}{Colors.RESET}")
    print(f"{Colors.BOLD}{Colors.GREEN}  TRANSLUXE - Live Translator{Colors.RESET}")
    print(f"{Colors.CYAN}{'='*60}{Colors.RESET}")

    print(f"{Colors.YELLOW}🔍 Checking translation backend...{Colors.RESET}")
    if check_backend():
        print(f"{Colors.GREEN}   ✓ {config.backend.base_url} is reachable{Colors.RESET}")
    else:
        print(f"{Colors.RED}   ⚠️  {config.backend.base_url} not reachable{Colors.RESET}")
        print(f"{Colors.YELLOW}   Translations will show an error until it is back{Colors.RESET}")
    print()

    run_server()


if __name__ == '__main__':
    main()
