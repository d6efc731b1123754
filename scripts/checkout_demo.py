"""Create one checkout session against a provider and print the response.

Credentials come from the environment (or `.env`); the request body is given
as inline JSON or a JSON file in the provider's request shape.
"""

import argparse
import asyncio
import json
from pathlib import Path

from afripay.checkout import PROCESSORS, get_processor
from afripay.common.config import AfripaySettings, load_settings
from afripay.common.errors import AfriPayError
from afripay.common.logging import configure_logging
from afripay.common.startup import log_startup_config


async def run_checkout(provider: str, mode: str, payload: dict, settings: AfripaySettings) -> dict:
    """Validate the payload, run one checkout, return the provider's body."""

    processor = get_processor(provider, settings=settings)
    request = processor.request_model.model_validate(payload)
    response = await processor.initiate_checkout(request, mode)
    return response.to_wire()


def main() -> None:
    """Parse CLI args and create one checkout session."""

    parser = argparse.ArgumentParser(description="Create a checkout session with one payment provider.")
    parser.add_argument("--provider", required=True, choices=sorted(PROCESSORS))
    parser.add_argument("--mode", default="test", help="test (sandbox) or prod")
    parser.add_argument("--json", dest="json_inline", default=None, help="Inline JSON request")
    parser.add_argument("--file", dest="json_file", default=None, help="Path to JSON request file")
    args = parser.parse_args()

    if bool(args.json_inline) == bool(args.json_file):
        raise SystemExit("Provide exactly one of --json or --file")

    if args.json_inline:
        payload = json.loads(args.json_inline)
    else:
        payload = json.loads(Path(args.json_file).read_text())

    settings = load_settings()
    configure_logging(settings.log_level)
    processor_cls = PROCESSORS[args.provider]
    log_startup_config(
        "checkout-demo",
        settings,
        ("log_level", *processor_cls.credential_fields, *processor_cls.optional_fields),
    )

    try:
        body = asyncio.run(run_checkout(args.provider, args.mode, payload, settings))
    except AfriPayError as exc:
        raise SystemExit(f"{exc.kind.value}: {exc.message}") from exc
    print(json.dumps(body, indent=2))


if __name__ == "__main__":
    main()
