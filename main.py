# main.py
import sys

from evm_wallet_api.cli import CLI

def main():
    # Bare invocation serves the API
    return CLI().main(sys.argv[1:] or ["serve"])

if __name__ == "__main__":
    sys.exit(main())
