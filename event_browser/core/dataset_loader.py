from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Tuple, Union

import pandas as pd

from event_browser.core.exceptions import DatasetLoadError
from event_browser.core.record import EventRecord

logger = logging.getLogger(__name__)

ID_COLUMN = "event_id"
FLAG_COLUMNS = ("suitable_for_young", "suitable_for_adult", "suitable_for_senior")


def _is_url(source: str) -> bool:
    scheme, sep, _ = source.partition("://")
    return bool(sep) and scheme.lower() in ("http", "https", "ftp", "file")


def read_events_frame(source: Union[str, Path]) -> pd.DataFrame:
    """
    Parse the delimited text resource into a DataFrame.

    The id column is read as text so numeric ids keep their written form.
    Every parser failure is re-raised as DatasetLoadError with a message
    fit for display.
    """
    source_str = str(source)

    if not _is_url(source_str) and not Path(source_str).is_file():
        raise DatasetLoadError(f"Events dataset not found at {source_str}.")

    try:
        df = pd.read_csv(source_str, dtype={ID_COLUMN: str})
    except pd.errors.EmptyDataError as e:
        raise DatasetLoadError(f"Events dataset at {source_str} is empty.") from e
    except pd.errors.ParserError as e:
        raise DatasetLoadError(f"Events dataset at {source_str} is malformed: {e}") from e
    except (OSError, ValueError) as e:
        raise DatasetLoadError(f"Could not read events dataset at {source_str}: {e}") from e

    if ID_COLUMN not in df.columns:
        raise DatasetLoadError(
            f"Events dataset at {source_str} has no '{ID_COLUMN}' column."
        )

    return df


def infer_cell(value: Any) -> Any:
    """
    Per-cell typing for text cells: numeric text becomes a float.

    A column mixing encodings (True, "True", 1) is read as text as a whole,
    so the cell has to be typed on its own before flag normalisation.
    """
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return value
    return value


def records_from_frame(df: pd.DataFrame) -> Tuple[EventRecord, ...]:
    """
    Convert rows to EventRecords, dropping rows without an identifier.
    """
    records: List[EventRecord] = []
    dropped = 0

    df = df.copy()
    for col in FLAG_COLUMNS:
        if col in df.columns and not pd.api.types.is_bool_dtype(df[col]):
            df[col] = df[col].map(infer_cell)

    for row in df.to_dict("records"):
        record = EventRecord.from_row(row)
        if not record.event_id:
            dropped += 1
            continue
        records.append(record)

    if dropped:
        logger.debug(
            "Dropped rows without an event id",
            extra={"n_dropped": dropped, "n_rows": len(df)},
        )

    return tuple(records)


def load_events(source: Union[str, Path]) -> Tuple[EventRecord, ...]:
    """
    Load the events dataset from a path or URL.

    :param source: path or URL of the CSV resource
    :return: the base collection, in file order
    :raises DatasetLoadError: if the resource cannot be read or parsed
    """
    logger.info("Loading events dataset", extra={"source": str(source)})

    df = read_events_frame(source)
    try:
        records = records_from_frame(df)
    except (TypeError, ValueError) as e:
        raise DatasetLoadError(f"Events dataset at {source} has malformed values: {e}") from e

    logger.info(
        "Events dataset loaded",
        extra={
            "source": str(source),
            "n_rows": len(df),
            "n_records": len(records),
        },
    )
    return records
