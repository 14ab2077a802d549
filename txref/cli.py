"""Command-line interface for encoding, decoding, and classifying txrefs."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from .classifier import classify_input_string
from .codec import decode, encode_for_network
from .config import ConfigurationError, TxrefConfig, load_config
from .constants import Network, published_limits
from .errors import TxrefError

logger = logging.getLogger(__name__)

COMPACT_JSON_SEPARATORS = (",", ":")


class CLIError(RuntimeError):
    """Raised when CLI arguments are invalid."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Transaction position reference (txref) tools")
    parser.add_argument("--config", default=None, help="Path to a YAML config file")
    parser.add_argument(
        "--json",
        dest="output",
        action="store_const",
        const="json",
        default=None,
        help="Emit compact JSON instead of text",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser(
        "encode", help="encode a block height and transaction position as a txref"
    )
    encode_parser.add_argument("block_height", type=int, help="Height of the block holding the transaction")
    encode_parser.add_argument(
        "transaction_position", type=int, help="Position of the transaction within its block"
    )
    encode_parser.add_argument(
        "--txo-index",
        type=int,
        default=0,
        help="Output index; a non-zero value produces an extended txref",
    )
    encode_parser.add_argument(
        "--extended",
        action="store_const",
        const=True,
        default=None,
        help="Produce an extended txref even when --txo-index is 0",
    )
    network_group = encode_parser.add_mutually_exclusive_group()
    network_group.add_argument(
        "--testnet", dest="network", action="store_const", const=Network.TEST, default=None
    )
    network_group.add_argument(
        "--mainnet", dest="network", action="store_const", const=Network.MAIN
    )
    encode_parser.add_argument("--hrp", default=None, help="Override the human-readable prefix")

    decode_parser = subparsers.add_parser("decode", help="decode a txref into its fields")
    decode_parser.add_argument("txref", help="txref to decode, with or without separators or HRP")

    classify_parser = subparsers.add_parser(
        "classify", help="guess whether input is a txref, txid, or address"
    )
    classify_parser.add_argument("value", help="String to classify")

    subparsers.add_parser("limits", help="print the published txref length limits")

    return parser


def _emit(config: TxrefConfig, data: dict[str, Any], text: str) -> None:
    if config.output == "json":
        print(json.dumps(data, separators=COMPACT_JSON_SEPARATORS))
    else:
        print(text)


def cmd_encode(args: argparse.Namespace, config: TxrefConfig) -> None:
    network = args.network or config.network
    force_extended = config.force_extended if args.extended is None else args.extended
    # a configured HRP belongs to the configured network
    default_hrp = config.resolved_hrp if network is config.network else network.hrp
    hrp = args.hrp or default_hrp
    txref = encode_for_network(
        network,
        args.block_height,
        args.transaction_position,
        txo_index=args.txo_index,
        force_extended=force_extended,
        hrp=hrp,
    )
    _emit(config, {"txref": txref}, txref)


def cmd_decode(args: argparse.Namespace, config: TxrefConfig) -> None:
    result = decode(args.txref)
    network = result.network
    lines = [
        f"txref: {result.txref}",
        f"hrp: {result.hrp}",
        f"network: {network.value if network is not None else 'unknown'}",
        f"magic code: {result.magic_code}",
        f"block height: {result.block_height}",
        f"transaction position: {result.transaction_position}",
        f"txo index: {result.txo_index}",
        f"encoding: {result.encoding.value}",
    ]
    if result.commentary:
        lines.append(f"commentary: {result.commentary}")
    _emit(config, result.to_dict(), "\n".join(lines))


def cmd_classify(args: argparse.Namespace, config: TxrefConfig) -> None:
    kind = classify_input_string(args.value)
    _emit(config, {"input": args.value, "kind": kind.value}, kind.value)


def cmd_limits(config: TxrefConfig) -> None:
    limits = published_limits()
    _emit(config, limits, "\n".join(f"{key}: {value}" for key, value in limits.items()))


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        overrides = {"output": args.output} if args.output else None
        config = load_config(config_path=args.config, overrides=overrides)
        logging.basicConfig(level=config.log_level)
        if args.command == "encode":
            cmd_encode(args, config)
        elif args.command == "decode":
            cmd_decode(args, config)
        elif args.command == "classify":
            cmd_classify(args, config)
        elif args.command == "limits":
            cmd_limits(config)
        else:  # pragma: no cover - argparse enforces choices
            raise CLIError(f"Unknown command: {args.command}")
    except KeyboardInterrupt:  # pragma: no cover - interactive use
        logger.info("Interrupted by user")
    except TxrefError as exc:
        parser.exit(1, f"error [{exc.code}]: {exc}\n")
    except (CLIError, ConfigurationError) as exc:
        parser.exit(1, f"error: {exc}\n")


if __name__ == "__main__":
    main(sys.argv[1:])
