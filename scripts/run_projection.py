from __future__ import annotations

import argparse
import json
import os
import sys

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(SCRIPT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Project 12 months of affiliate growth against equivalent paid acquisition."
    )
    parser.add_argument("--revenue", help="Current monthly revenue ($).")
    parser.add_argument("--cac", help="Current customer acquisition cost ($).")
    parser.add_argument("--commission", help="Affiliate commission rate (%%).")
    parser.add_argument("--aov", help="Average order value ($).")
    parser.add_argument("--cltv", help="One-year customer lifetime value ($).")
    parser.add_argument("--cogs", help="Cost of goods sold (%% of revenue).")
    parser.add_argument(
        "--summary-only",
        action="store_true",
        help="Print only the 12-month totals.",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL.")
    return parser.parse_args()


def main() -> int:
    args = parse_args()

    from affiliate_roi.core.errors import InvalidInputError
    from affiliate_roi.core.logging import configure_logging
    from affiliate_roi.schemas.projection import ProjectionRequest
    from affiliate_roi.services.projection_service import ProjectionService

    configure_logging(args.log_level)
    request = ProjectionRequest(
        current_revenue=args.revenue,
        acquisition_cost=args.cac,
        commission_percent=args.commission,
        average_order_value=args.aov,
        lifetime_value=args.cltv,
        cogs_percent=args.cogs,
    )
    try:
        response = ProjectionService().project(request)
    except InvalidInputError as exc:
        error = {"code": exc.code, "message": exc.message, "details": exc.details}
        print(json.dumps(error, indent=2), file=sys.stderr)
        return 2

    payload = response.summary if args.summary_only else response
    print(json.dumps(payload.model_dump(by_alias=True), indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
