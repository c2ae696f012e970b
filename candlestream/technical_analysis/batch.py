"""
Batch drivers over pandas DataFrames.

Indicators are streaming objects; these helpers feed an OHLC DataFrame
through a fresh instance row by row and collect the results as a DataFrame.
Nothing here computes in a vectorized way: the output is exactly what a
live stream of the same candles would produce.

Functions:
    run_frame: One config over one DataFrame.
    run_symbols: One config over several DataFrames in parallel.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
import logging
from typing import Dict, Optional

import numpy as np
import pandas as pd

from .base import IndicatorConfig
from .exceptions import MissingInputError

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ('open', 'high', 'low', 'close')


def run_frame(config: IndicatorConfig, df: pd.DataFrame) -> pd.DataFrame:
    """
    Run an indicator over every row of an OHLC DataFrame.

    The instance is seeded with the first row and then stepped with every
    row, including the first, in index order.

    Args:
        config: Indicator configuration.
        df: DataFrame with at least 'open', 'high', 'low', 'close' columns.

    Returns:
        DataFrame on the same index with columns ``value_0..`` for raw values
        and ``signal_0..`` for signals as signed ratios in [-1, 1].

    Raises:
        MissingInputError: If OHLC columns are missing.
        InvalidParameterError: If the config does not validate.
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise MissingInputError(missing, list(REQUIRED_COLUMNS), config.indicator_name)

    n_values, n_signals = config.size()
    columns = [f'value_{i}' for i in range(n_values)] + [f'signal_{i}' for i in range(n_signals)]

    if df.empty:
        return pd.DataFrame(columns=columns, index=df.index, dtype=float)

    # itertuples rows expose .open/.high/.low/.close, which satisfies Candle
    candles = df[list(REQUIRED_COLUMNS)].itertuples(index=False)
    first = next(candles)
    instance = config.init(first)

    out = np.empty((len(df), n_values + n_signals), dtype=float)
    out[0] = _flatten(instance.step(first))
    for i, candle in enumerate(candles, start=1):
        out[i] = _flatten(instance.step(candle))

    logger.debug(f"{instance.name}: processed {len(df)} candles")
    return pd.DataFrame(out, index=df.index, columns=columns)


def _flatten(result) -> list:
    return list(result.values) + [s.ratio() for s in result.signals]


def run_symbols(
    config: IndicatorConfig,
    frames: Dict[str, pd.DataFrame],
    max_workers: Optional[int] = None
) -> Dict[str, pd.DataFrame]:
    """
    Run one indicator config over several symbols concurrently.

    Every symbol gets its own instance; instances share no state, so no
    locking is involved.

    Args:
        config: Indicator configuration, shared read-only.
        frames: Mapping of symbol to OHLC DataFrame.
        max_workers: Thread pool size (defaults to the executor's choice).

    Returns:
        Mapping of symbol to result DataFrame.
    """
    results: Dict[str, pd.DataFrame] = {}
    if not frames:
        return results

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(run_frame, config, df): symbol for symbol, df in frames.items()}
        for future in as_completed(futures):
            symbol = futures[future]
            results[symbol] = future.result()
            logger.debug(f"Finished {config.indicator_name} for {symbol}")

    return results
