"""Shared fixtures for the salary chart tests."""

import matplotlib
matplotlib.use("Agg")

import pandas as pd
import pytest

COLUMNS = ["experience_level", "company_size", "job_title", "salary_in_usd"]


def make_records(rows) -> pd.DataFrame:
    """DataFrame from (experience_level, job_title, company_size, salary) tuples."""
    return pd.DataFrame(
        [{"experience_level": e, "job_title": t, "company_size": c, "salary_in_usd": s}
         for e, t, c, s in rows],
        columns=COLUMNS,
    )


@pytest.fixture
def records():
    return make_records([
        ("EN", "Data Scientist", "S", 100),
        ("EN", "Data Scientist", "S", 200),
        ("SE", "Data Engineer", "M", 300),
    ])


@pytest.fixture
def salaries_csv(tmp_path):
    """Small salaries file in the dataset's column layout."""
    path = tmp_path / "ds_salaries.csv"
    path.write_text(
        "work_year,experience_level,employment_type,job_title,salary_in_usd,company_size\n"
        "2023,SE,FT,Data Scientist,150000,M\n"
        "2023,MI,FT,Data Analyst,90000,L\n"
        "2023,EN,FT,Data Engineer,70000,S\n"
        "2023,EX,FT,Head of Data,250000,L\n"
        "2023,SE,FT,Product Manager,160000,M\n"
    )
    return path
