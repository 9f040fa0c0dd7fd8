"""Send every pending notification to the push gateway in one pass.

Intended to be run from cron or a worker; each invocation opens a single
gateway connection and exits once the batch is done.
"""

from __future__ import annotations

import argparse
import logging

from sqlalchemy.exc import SQLAlchemyError

from pushgate.application.use_cases.notifications import send_notifications
from pushgate.domain.exceptions import PushGatewayError
from pushgate.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the delivery run."""

    parser = argparse.ArgumentParser(
        description="Deliver pending push notifications through the binary gateway.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log frame level details while delivering.",
    )
    parser.add_argument(
        "--skip-oversized",
        action="store_true",
        help="Leave notifications whose frame is too large unsent and keep going.",
    )
    return parser.parse_args()


def main() -> None:
    """Run one delivery pass and print its summary."""

    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    initialize_database()

    session = SessionLocal()
    try:
        report = send_notifications(session, skip_oversized=args.skip_oversized)
    except PushGatewayError as exc:
        session.rollback()
        raise SystemExit(f"Delivery aborted: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not update notifications in the database: {exc}") from exc
    except OSError as exc:
        raise SystemExit(f"Push gateway unavailable: {exc}") from exc
    else:
        print(
            "Delivery finished:\n"
            f"  Sent: {len(report.sent)}\n"
            f"  Failed: {len(report.failed)}\n"
            f"  Oversized: {len(report.oversized)}"
        )
        for notification_id, error_code in report.failed.items():
            print(f"    #{notification_id}: error code {error_code if error_code is not None else '-'}")
    finally:
        session.close()


if __name__ == "__main__":
    main()
