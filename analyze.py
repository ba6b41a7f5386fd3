#!/usr/bin/env python3
"""Data loading and aggregation for the data science salaries dataset."""

import os
import pandas as pd
from pathlib import Path
from dotenv import load_dotenv
from job_groups import map_job_title, describe_experience, describe_company_size

load_dotenv()

DATA_PATH = Path(os.getenv("SALARY_DATA_PATH", Path(__file__).parent / "data" / "ds_salaries.csv"))

REQUIRED_COLUMNS = ["experience_level", "company_size", "job_title", "salary_in_usd"]
CATEGORY_COLUMNS = ["experience_level", "company_size", "job_title"]


class ParseError(ValueError):
    """Raised when the salary file is missing columns or has bad salary values."""


def _check_salaries(df: pd.DataFrame) -> pd.Series:
    """Coerce salary_in_usd to numbers, rejecting anything non-numeric or negative."""
    raw = df["salary_in_usd"]
    salaries = pd.to_numeric(raw, errors="coerce")

    bad = salaries.isna() | (salaries < 0)
    if bad.any():
        # +2: header line plus 1-based numbering
        rows = [int(i) + 2 for i in df.index[bad][:5]]
        values = raw[bad].head(5).tolist()
        raise ParseError(
            f"Invalid salary_in_usd on line(s) {rows}: {values}"
        )
    return salaries


def load_data(path=DATA_PATH) -> pd.DataFrame:
    """Load the salaries dataset with a numeric salary_in_usd column."""
    df = pd.read_csv(path, dtype={col: str for col in CATEGORY_COLUMNS}, keep_default_na=False)

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ParseError(f"Missing column(s) in {path}: {', '.join(missing)}")

    df["salary_in_usd"] = _check_salaries(df)
    return df


def with_job_groups(df: pd.DataFrame, groups=None) -> pd.DataFrame:
    """Return a copy of df with a job_group column (the input is left untouched)."""
    if groups is None:
        return df.assign(job_group=df["job_title"].map(map_job_title))
    return df.assign(job_group=df["job_title"].map(lambda t: map_job_title(t, groups)))


def _key_series(df: pd.DataFrame, key) -> pd.Series:
    if callable(key):
        return key(df)
    return df[key]


def rollup(df: pd.DataFrame, reduce, *keys) -> dict:
    """Group df by one or more keys and reduce each group.

    Keys are column names or callables returning a Series aligned with df.
    Returns {key: reduce(group)} for one key, {key_a: {key_b: ...}} for two,
    and so on. Groups keep first-seen order; missing key values form their
    own group so every row is counted.
    """
    if not keys:
        return reduce(df)

    by = [_key_series(df, key) for key in keys]
    result = {}
    for group_keys, group in df.groupby(by, sort=False, dropna=False):
        if not isinstance(group_keys, tuple):
            group_keys = (group_keys,)
        bucket = result
        for key in group_keys[:-1]:
            bucket = bucket.setdefault(key, {})
        bucket[group_keys[-1]] = reduce(group)
    return result


def mean_salary(group: pd.DataFrame) -> float:
    return float(group["salary_in_usd"].mean())


def mean_salary_by(df: pd.DataFrame, key) -> dict:
    """Average salary_in_usd per value of key."""
    return rollup(df, mean_salary, key)


def count_by(df: pd.DataFrame, *keys) -> dict:
    """Number of records per key (nested for several keys)."""
    return rollup(df, len, *keys)


def mean_salary_by_experience(df: pd.DataFrame) -> pd.DataFrame:
    """Average salary per experience level, lowest first (bar chart order)."""
    averages = mean_salary_by(df, "experience_level")
    data = pd.DataFrame(list(averages.items()), columns=["experience_level", "avg_salary"])
    return data.sort_values("avg_salary", kind="stable").reset_index(drop=True)


def mean_salary_by_company_size(df: pd.DataFrame) -> pd.DataFrame:
    """Average salary per company size, in first-seen order."""
    averages = mean_salary_by(df, "company_size")
    return pd.DataFrame(list(averages.items()), columns=["company_size", "avg_salary"])


def summarize(df: pd.DataFrame) -> dict:
    """Headline numbers for the console report.

    Returns dict with:
    - total: number of records
    - mean_salary: overall average salary (None when empty)
    - by_experience: DataFrame from mean_salary_by_experience
    - by_company_size: DataFrame from mean_salary_by_company_size
    - by_job_group: {job_group: count}
    """
    grouped = with_job_groups(df)
    return {
        "total": len(df),
        "mean_salary": mean_salary(df) if len(df) else None,
        "by_experience": mean_salary_by_experience(df),
        "by_company_size": mean_salary_by_company_size(df),
        "by_job_group": count_by(grouped, "job_group"),
    }


def print_report(summary: dict) -> None:
    print("=" * 60)
    print("DATA SCIENCE SALARIES")
    print("=" * 60)
    print(f"\nTotal records: {summary['total']}")
    if summary["mean_salary"] is not None:
        print(f"Average salary: ${summary['mean_salary']:,.2f}")

    print("\nAVERAGE SALARY BY EXPERIENCE LEVEL")
    print("-" * 40)
    for row in summary["by_experience"].itertuples(index=False):
        print(f"  {describe_experience(row.experience_level):<18} ${row.avg_salary:>14,.2f}")

    print("\nAVERAGE SALARY BY COMPANY SIZE")
    print("-" * 40)
    for row in summary["by_company_size"].itertuples(index=False):
        print(f"  {describe_company_size(row.company_size):<18} ${row.avg_salary:>14,.2f}")

    print("\nRECORDS BY JOB GROUP")
    print("-" * 40)
    for group, count in summary["by_job_group"].items():
        print(f"  {group:<18} {count:>6}")


def main():
    import argparse
    parser = argparse.ArgumentParser(description='Summarize the salaries dataset')
    parser.add_argument('--data', default=str(DATA_PATH), help='Salaries CSV')
    args = parser.parse_args()

    print(f"Loading {args.data}...")
    try:
        df = load_data(args.data)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print_report(summarize(df))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
