# src/evm_wallet_api/cli/cli.py
import argparse
import asyncio
import getpass
import json
import os
import sys
from typing import List, Optional

from ..chain.explorer import ExplorerClient
from ..chain.provider import ChainGateway
from ..exceptions import ConfigurationError, WalletApiError
from ..utils.config import Settings, load_settings
from ..wallet import AccountInspector, StatusTracker, TransactionService, WalletGenerator

PRIVATE_KEY_ENV = "WALLET_PRIVATE_KEY"

class CLI:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        gateway: Optional[ChainGateway] = None,
    ):
        self._settings = settings
        self._gateway = gateway
        self.generator = WalletGenerator()

    @property
    def settings(self) -> Settings:
        # Only commands that touch the chain need POLYGON_RPC
        if self._settings is None:
            self._settings = load_settings()
        return self._settings

    @property
    def gateway(self) -> ChainGateway:
        if self._gateway is None:
            self._gateway = ChainGateway.from_settings(self.settings)
        return self._gateway

    def main(self, args: List[str]) -> int:
        parser = self.create_parser()
        args = parser.parse_args(args)

        if not hasattr(args, 'func'):
            parser.print_help()
            return 1

        try:
            args.func(args)
        except ConfigurationError as e:
            print(f"Configuration error: {e.message}", file=sys.stderr)
            return 2
        except WalletApiError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            return 1
        return 0

    def create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='EVM wallet API')
        subparsers = parser.add_subparsers(title='commands', dest='command')

        serve = subparsers.add_parser('serve', help='Run the HTTP API')
        serve.add_argument('--host', help='Bind host (default: HOST setting)')
        serve.add_argument('--port', type=int, help='Bind port (default: PORT setting)')
        serve.set_defaults(func=self.serve)

        # Wallet commands
        wallet_parser = subparsers.add_parser('wallet', help='Wallet operations')
        wallet_subparsers = wallet_parser.add_subparsers()

        create_wallet = wallet_subparsers.add_parser('create', help='Create new wallet')
        create_wallet.set_defaults(func=self.create_wallet)

        balance = wallet_subparsers.add_parser('balance', help='Get wallet balance')
        balance.add_argument('address', help='Wallet address')
        balance.set_defaults(func=self.get_balance)

        info = wallet_subparsers.add_parser('info', help='Get balance, nonce and account type')
        info.add_argument('address', help='Wallet address')
        info.set_defaults(func=self.get_wallet_info)

        # Transaction commands
        tx_parser = subparsers.add_parser('tx', help='Transaction operations')
        tx_subparsers = tx_parser.add_subparsers()

        send_tx = tx_subparsers.add_parser(
            'send', help=f'Send native currency, key read from ${PRIVATE_KEY_ENV} or prompted'
        )
        send_tx.add_argument('recipient', help='Recipient address')
        send_tx.add_argument('amount', help='Amount in display units, e.g. 0.1')
        send_tx.set_defaults(func=self.send_transaction)

        status = tx_subparsers.add_parser('status', help='Get transaction status')
        status.add_argument('tx_hash', help='Transaction hash')
        status.set_defaults(func=self.get_status)

        history = tx_subparsers.add_parser('history', help='List past transactions of an address')
        history.add_argument('address', help='Wallet address')
        history.add_argument('--page', type=int, default=1)
        history.set_defaults(func=self.get_history)

        return parser

    def serve(self, args):
        import uvicorn

        from ..api.server import create_app
        from ..monitoring.logging_config import LogConfig

        settings = self.settings
        LogConfig(log_dir=settings.LOG_DIR, level=settings.LOG_LEVEL).setup_logging()
        uvicorn.run(
            create_app(settings, gateway=self.gateway),
            host=args.host or settings.HOST,
            port=args.port or settings.PORT,
            log_config=None,
        )

    def _run(self, awaitable):
        async def run_and_close():
            try:
                return await awaitable
            finally:
                await self.gateway.close()
        return asyncio.run(run_and_close())

    def create_wallet(self, args):
        _print_json(self.generator.generate().to_dict())

    def get_balance(self, args):
        inspector = AccountInspector(self.gateway, self.settings)
        balance = self._run(inspector.get_balance(args.address))
        _print_json({"address": args.address, "balance": balance})

    def get_wallet_info(self, args):
        inspector = AccountInspector(self.gateway, self.settings)
        _print_json(self._run(inspector.get_wallet_info(args.address)).to_dict())

    def send_transaction(self, args):
        private_key = os.environ.get(PRIVATE_KEY_ENV) or getpass.getpass('Private key: ')
        service = TransactionService(self.gateway)
        result = self._run(service.send(private_key, args.recipient, args.amount))
        _print_json(result.to_dict())

    def get_status(self, args):
        tracker = StatusTracker(self.gateway)
        _print_json(self._run(tracker.get_status(args.tx_hash)).to_dict())

    def get_history(self, args):
        settings = self.settings
        explorer = ExplorerClient(
            settings.EXPLORER_API_URL,
            api_key=settings.EXPLORER_API_KEY,
            timeout=settings.EXPLORER_TIMEOUT,
        )
        transactions = asyncio.run(explorer.get_transactions(args.address, page=args.page))
        _print_json({"address": args.address, "transactions": transactions})

def _print_json(payload):
    print(json.dumps(payload, indent=2))

def main():
    cli = CLI()
    return cli.main(sys.argv[1:])

if __name__ == "__main__":
    sys.exit(main())
