import argparse
import json
import sys
from typing import Optional, Sequence

from qrislink.config import get_settings
from qrislink.domain import MpmDecoder
from qrislink.exceptions import InvalidPayloadError, MalformedTlvError
from qrislink.parsing.checksum import checksum_record, sign_payload
from qrislink.parsing.schema import MPM_TAGS, resolve_by_id_among
from qrislink.parsing.tlv import decode_tlv
from qrislink.parsing.validation import rejection_reason


def _read_payload(args: argparse.Namespace) -> str:
    if args.payload == "-":
        return sys.stdin.read().strip()
    return args.payload.strip()


def _print_table(payload: str) -> None:
    print(f"{'TAG':6} | {'LEN':3} | {'NAME':32} | VALUE")
    print("-" * 80)
    for record in decode_tlv(payload):
        node = resolve_by_id_among(MPM_TAGS, record.tag)
        name = node.label if node else "Unknown Tag"
        print(f"{record.tag:6} | {record.length:03} | {name:32} | {record.value}")
        if node is None or not node.is_composite:
            continue
        try:
            children = decode_tlv(record.value)
        except MalformedTlvError:
            continue
        for child in children:
            child_node = node.find_child(child.tag)
            child_name = child_node.label if child_node else "Unknown Subtag"
            print(f"{record.tag}.{child.tag:3} | {child.length:03} | {child_name:32} | {child.value}")


def _cmd_decode(args: argparse.Namespace) -> int:
    decoder = MpmDecoder()
    payload = _read_payload(args)
    try:
        decoded = decoder.decode(payload, strict=args.strict)
    except InvalidPayloadError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        return 1
    if args.table:
        _print_table(decoded.raw)
    else:
        print(json.dumps(decoded.as_dict(), indent=2, ensure_ascii=False))
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    payload = _read_payload(args)
    strict = args.strict or get_settings().strict_validation
    reason = rejection_reason(payload, strict=strict)
    if reason is not None:
        print(f"[!] Invalid: {reason}")
        return 1
    record = checksum_record(payload)
    if not record.verifiable:
        print("[!] Checksum could not be verified: no 6304 tail")
        return 1
    if not record.is_valid:
        print(f"[!] CRC mismatch: calculated {record.computed_value}, found {record.embedded_value}")
        return 1
    print(f"[OK] CRC-16/CCITT-FALSE valid: {record.computed_value}")
    return 0


def _cmd_checksum(args: argparse.Namespace) -> int:
    payload = _read_payload(args)
    if args.sign:
        print(sign_payload(payload))
        return 0
    record = checksum_record(payload)
    if not record.computed_value:
        print("[!] No checksum header (63 + length) found", file=sys.stderr)
        return 1
    print(record.computed_value)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="qrislink", description="Decode and validate QRIS MPM payloads.")
    sub = parser.add_subparsers(dest="command", required=True)

    decode = sub.add_parser("decode", help="Decode a payload and print it as JSON.")
    decode.add_argument("payload", help="The payload string, or '-' to read from stdin.")
    decode.add_argument("--strict", action="store_true", default=None, help="Check mandatory tags before decoding.")
    decode.add_argument("--table", action="store_true", help="Print a tag table instead of JSON.")
    decode.set_defaults(func=_cmd_decode)

    validate = sub.add_parser("validate", help="Check the format and the checksum of a payload.")
    validate.add_argument("payload", help="The payload string, or '-' to read from stdin.")
    validate.add_argument("--strict", action="store_true", help="Check mandatory tags as well.")
    validate.set_defaults(func=_cmd_validate)

    checksum = sub.add_parser("checksum", help="Compute the checksum of a payload.")
    checksum.add_argument("payload", help="The payload string, or '-' to read from stdin.")
    checksum.add_argument("--sign", action="store_true", help="Print the payload with its checksum record appended.")
    checksum.set_defaults(func=_cmd_checksum)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
