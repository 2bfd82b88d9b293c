"""
Encode or decode a redirect token with the configured key material.

Usage:
    uv run python -m utils.redirect_token encode "https://example.com/jobs/123"
    uv run python -m utils.redirect_token decode <token>
"""

import argparse
import sys
from notifications.embed_builder import build_redirect_url
from notifications.link_codec import LinkCodec
from shared.config import load_settings


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Encode/decode job redirect tokens")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode a job URL")
    encode_parser.add_argument("url")

    decode_parser = subparsers.add_parser("decode", help="Decode a redirect token")
    decode_parser.add_argument("token")

    args = parser.parse_args(argv)

    settings = load_settings()
    codec = LinkCodec.from_settings(settings)

    if args.command == "encode":
        token = codec.encode(args.url)
        if token is None:
            print("✗ Could not encode URL", file=sys.stderr)
            return 1
        print(token)
        print(build_redirect_url(settings.redirect_base_url, token))
        return 0

    url = codec.decode(args.token)
    if url is None:
        print("✗ Invalid or corrupted token", file=sys.stderr)
        return 1
    print(url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
