"""Tests for job title grouping."""

import math
from types import MappingProxyType

import pytest

from job_groups import (
    JOB_TITLE_GROUPS,
    describe_company_size,
    describe_experience,
    map_job_title,
)


@pytest.mark.parametrize("group, titles", list(JOB_TITLE_GROUPS.items()))
def test_every_listed_title_maps_to_its_group(group, titles):
    for title in titles:
        assert map_job_title(title) == group


def test_examples():
    assert map_job_title("Data Scientist") == "Scientist"
    assert map_job_title("Mystery Title") == "Other"
    assert map_job_title("Statistician") == "Other"


def test_match_is_exact_and_case_sensitive():
    assert map_job_title("data scientist") == "Other"
    assert map_job_title("Data Scientist ") == "Other"
    assert map_job_title("Senior Data Scientist") == "Other"


def test_missing_titles_are_other():
    assert map_job_title(None) == "Other"
    assert map_job_title(math.nan) == "Other"
    assert map_job_title("") == "Other"


def test_first_group_wins_with_injected_table():
    groups = MappingProxyType({
        "First": ("Shared Title",),
        "Second": ("Shared Title", "Only Second"),
    })
    assert map_job_title("Shared Title", groups) == "First"
    assert map_job_title("Only Second", groups) == "Second"
    assert map_job_title("Data Scientist", groups) == "Other"


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        JOB_TITLE_GROUPS["Engineer"] = ("Anything",)


def test_describe_experience():
    assert describe_experience("SE") == "Senior Level"
    assert describe_experience("EN") == "Entry Level"
    assert describe_experience("XX") == "XX"


def test_describe_company_size():
    assert describe_company_size("S") == "Small"
    assert describe_company_size("L") == "Large"
    assert describe_company_size("XL") == "XL"
