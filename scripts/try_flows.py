#!/usr/bin/env python3
"""
Flow Try-Out Script

Runs one of the model invocation flows against the real Gemini API without
starting the server. Needs GOOGLE_API_KEY in the environment or .env.

Usage:
    python scripts/try_flows.py ask "What is a credit score?"
    python scripts/try_flows.py bill path/to/receipt.jpg
    python scripts/try_flows.py score --age 34 --location "Patna, Bihar" --occupation Tailor \\
        --income 12000 --credit-history "No defaults" --loan-amount 50000
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from credit_assist.flows import (
    BillParserFlow,
    CreditScoreFlow,
    FlowError,
    GeminiModelClient,
    InputValidationError,
    LiteracyFlow,
)
from credit_assist.flows.data_uri import sniff_image_mime, to_data_uri

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a Credit Assist flow against Gemini")
    sub = parser.add_subparsers(dest="flow", required=True)

    ask = sub.add_parser("ask", help="Ask the financial literacy assistant")
    ask.add_argument("question")

    bill = sub.add_parser("bill", help="Parse a bill image")
    bill.add_argument("image", type=Path)

    score = sub.add_parser("score", help="Calculate a credit score")
    score.add_argument("--age", type=int, required=True)
    score.add_argument("--location", required=True)
    score.add_argument("--occupation", required=True)
    score.add_argument("--income", type=float, required=True)
    score.add_argument("--credit-history", required=True)
    score.add_argument("--loan-amount", type=float, required=True)

    return parser


async def run(args: argparse.Namespace) -> int:
    client = GeminiModelClient()

    if args.flow == "ask":
        flow = LiteracyFlow(client)
        payload = {"question": args.question}
    elif args.flow == "bill":
        data = args.image.read_bytes()
        mime_type = sniff_image_mime(data)
        if mime_type is None:
            print(f"❌ {args.image} is not a PNG, JPG or WEBP image")
            return 1
        flow = BillParserFlow(client)
        payload = {"photoDataUri": to_data_uri(data, mime_type)}
    else:
        flow = CreditScoreFlow(client)
        payload = {
            "personalInfo": {"age": args.age, "location": args.location, "occupation": args.occupation},
            "financialInfo": {
                "income": args.income,
                "creditHistory": args.credit_history,
                "loanAmount": args.loan_amount,
            },
        }

    try:
        result = await flow.invoke(payload)
    except InputValidationError as e:
        print("❌ Invalid input:")
        for violation in e.violations:
            print(f"   - {violation.field}: {violation.message}")
        return 1
    except FlowError as e:
        print(f"❌ {type(e).__name__}: {e.message}")
        return 1

    print("✅ Result:")
    print(json.dumps(result.model_dump(by_alias=True), indent=2, ensure_ascii=False))
    return 0


def main() -> None:
    args = build_parser().parse_args()
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
