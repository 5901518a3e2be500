"""Example: compute period billing summaries through the service layer (no Flask).

    python examples/example_usage.py 2024-02-01 2024-02-29
"""

import argparse
import importlib
import json

from dotenv import load_dotenv

from config import get_settings_module
from period_billing.common.logging_config import configure_logging
from period_billing.container import build_container


def main():
    parser = argparse.ArgumentParser(description="Preview billing summaries for a period")
    parser.add_argument("start_date", help="YYYY-MM-DD")
    parser.add_argument("end_date", help="YYYY-MM-DD")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(db_config=settings.DB_CONFIG, settings=settings)
    summaries = container.billing_service.compute_summaries(args.start_date, args.end_date)
    print(json.dumps([s.to_dict() for s in summaries], indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
