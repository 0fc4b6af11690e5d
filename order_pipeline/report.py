"""
Processing report: tabulate and print a batch of ProcessingResults.
"""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from order_pipeline.errors import ValidationError
from order_pipeline.types import ProcessingResult

RESULT_COLUMNS = [
    "order_id",
    "symbol",
    "side",
    "quantity",
    "price",
    "notional",
    "is_direct_market_access",
    "state",
    "destination",
    "error_type",
    "error",
    "record_failed",
]


def _abort_reason(result: ProcessingResult) -> str | None:
    if result.error is None:
        return None
    if isinstance(result.error, ValidationError):
        return f"ValidationError({result.error.reason})"
    return type(result.error).__name__


def results_to_dataframe(results: Sequence[ProcessingResult]) -> pd.DataFrame:
    """
    One row per result, in input order.

    Columns: order fields, state and destination values, error_type (class name,
    with the reason for validation errors), error message, record_failed.
    """
    rows = [
        {
            "order_id": r.order.order_id,
            "symbol": r.order.symbol,
            "side": r.order.side.value,
            "quantity": r.order.quantity,
            "price": float(r.order.price),
            "notional": float(r.order.notional),
            "is_direct_market_access": r.order.is_direct_market_access,
            "state": r.state.value,
            "destination": r.destination.value if r.destination is not None else None,
            "error_type": _abort_reason(r),
            "error": str(r.error) if r.error is not None else None,
            "record_failed": r.record_error is not None,
        }
        for r in results
    ]
    if not rows:
        return pd.DataFrame(columns=RESULT_COLUMNS)
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def print_summary(results: Sequence[ProcessingResult]) -> pd.DataFrame:
    """
    Print counts by state, routed orders by destination, and abort reasons.

    Returns
    -------
    pd.DataFrame
        The results table (see results_to_dataframe) for programmatic use.
    """
    df = results_to_dataframe(results)
    done = df[df["state"] == "done"]
    aborted = df[df["state"] == "aborted"]
    print("--- Order Processing Summary ---")
    print(f"Orders:          {len(df)}")
    print(f"Done:            {len(done)}")
    print(f"Aborted:         {len(aborted)}")
    for destination, count in done.groupby("destination").size().items():
        print(f"  {destination:<14} {count}")
    if not aborted.empty:
        print("Abort reasons:")
        for reason, count in aborted.groupby("error_type").size().items():
            print(f"  {reason:<30} {count}")
    print(f"Record failures: {int(df['record_failed'].sum()) if not df.empty else 0}")
    print(f"Routed notional: {done['notional'].sum():,.2f}")
    print("--------------------------------")
    return df
