#!/usr/bin/env python3
"""
Main entry point for the gas ledger scanner.

This script orchestrates a one-off scan:
1. Parse command-line arguments
2. Load contract artifacts and build the catalog
3. Scan the requested block range
4. Write the finalized ledger as JSON
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from .catalog import load_artifacts
from .config import GasReporterConfig
from .errors import GasLedgerError
from .reporting import build_output, resolve_output_path, save_json_snapshot
from .watcher import TransactionWatcher

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Attribute gas usage in a block range to contract methods and deployments',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables (can also be set in .env file):
  GAS_REPORTER_RPC_URL             JSON-RPC endpoint to scan
  GAS_REPORTER_BLOCK_LIMIT         Block gas limit for % of limit statistics
  GAS_REPORTER_ETH_PRICE           Token price in the reporting currency
  GAS_REPORTER_GAS_PRICE           Gas price in gwei
  GAS_REPORTER_TRACK_CALLDATA_FEE  Query the L1 gas price oracle per transaction
  GAS_REPORTER_L1_RPC_URL          Endpoint exposing the gas price oracle
  GAS_REPORTER_PROXY_RESOLVER      "EtherRouter" to resolve proxied calls via lookup(bytes4)

Priority: Command-line arguments > Environment variables > Defaults
        """
    )
    parser.add_argument(
        '--artifacts',
        type=Path,
        default=os.getenv('GAS_REPORTER_ARTIFACTS'),
        help='Artifact JSON file or build directory (env: GAS_REPORTER_ARTIFACTS)'
    )
    parser.add_argument('--start', type=int, required=True, help='First block to scan')
    parser.add_argument('--end', type=int, default=None, help='Last block to scan (default: latest)')
    parser.add_argument('--rpc-url', default=None, help='JSON-RPC endpoint (env: GAS_REPORTER_RPC_URL)')
    parser.add_argument('--block-limit', type=int, default=None, help='Block gas limit')
    parser.add_argument(
        '--l1-fees',
        action='store_true',
        default=None,
        help='Track L1 calldata fees through the gas price oracle'
    )
    parser.add_argument(
        '--show-all',
        action='store_true',
        default=None,
        help='Include catalog entries that were never called'
    )
    parser.add_argument(
        '--method-sig',
        action='store_true',
        default=None,
        help='Display full method signatures instead of names'
    )
    parser.add_argument('--output', type=Path, default=None, help='Write the JSON snapshot to this file')
    parser.add_argument(
        '--debug',
        action='store_true',
        default=False,
        help='Enable debug mode to log to file (default: False)'
    )
    return parser.parse_args(argv)


def configure_logging(debug: bool) -> None:
    if debug:
        output_dir = Path("output")
        output_dir.mkdir(exist_ok=True)
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
            handlers=[
                logging.FileHandler(output_dir / 'scan_gas.log')
            ]
        )
    else:
        logging.basicConfig(
            level=logging.WARNING,
            format='%(asctime)s - %(levelname)s - %(message)s',
            handlers=[
                logging.StreamHandler()
            ]
        )


def main(argv=None) -> int:
    """Main entry point."""
    load_dotenv(override=True)
    args = parse_args(argv)
    configure_logging(args.debug)

    if not args.artifacts:
        logger.error("No artifacts given (use --artifacts or GAS_REPORTER_ARTIFACTS)")
        return 2

    try:
        config = GasReporterConfig.from_env(
            rpc_url=args.rpc_url,
            block_limit=args.block_limit,
            track_calldata_fee=args.l1_fees,
            show_all_methods=args.show_all,
            show_method_sig=args.method_sig,
            output_file=args.output,
        )
        watcher = TransactionWatcher(config)
        watcher.ledger.initialize(load_artifacts(args.artifacts))

        end_block = args.end
        if end_block is None:
            end_block = watcher.current_block_number()

        watcher.collect_gas_usage(args.start, end_block)
        snapshot = watcher.ledger.finalize()
    except GasLedgerError as e:
        logger.error(f"Gas scan failed: {e}")
        return 1

    output_path = resolve_output_path(config)
    if output_path:
        save_json_snapshot(snapshot, config, output_path)
    else:
        print(json.dumps(build_output(snapshot, config), indent=2))

    if snapshot.unresolved_calls:
        logger.warning(f"{snapshot.unresolved_calls} call(s) could not be attributed")
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == '__main__':
    cli()
