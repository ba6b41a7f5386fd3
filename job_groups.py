"""
Job title grouping and category lookups for the salary dataset.

Handles:
- Job titles: exact title → broad group (Engineer, Analyst, ...)
- Experience level and company size codes → readable descriptions
"""

from types import MappingProxyType

import pandas as pd

# Too many similar job titles to chart individually, so each known title
# belongs to one broad group. Matching is exact and case-sensitive.
JOB_TITLE_GROUPS = MappingProxyType({
    'Engineer': (
        'Data Engineer', 'Machine Learning Engineer', 'Software Engineer',
        'ML Engineer', 'Platform Engineer', 'Backend Engineer', 'Frontend Engineer',
    ),
    'Analyst': ('Data Analyst', 'Business Analyst', 'Research Analyst', 'Marketing Analyst'),
    'Scientist': ('Data Scientist', 'ML Scientist', 'Research Scientist', 'AI Scientist'),
    'Manager': (
        'Engineering Manager', 'Product Manager', 'Project Manager',
        'Data Manager', 'Analytics Manager',
    ),
    'Consultant': ('Data Consultant', 'Analytics Consultant', 'Business Consultant'),
    'Other': (
        'Data Architect', 'Statistician', 'Quantitative Researcher',
        'BI Developer', 'Data Specialist',
    ),
})

DEFAULT_GROUP = 'Other'

EXPERIENCE_DESCRIPTIONS = MappingProxyType({
    'SE': 'Senior Level',
    'EX': 'Executive Level',
    'MI': 'Mid Level',
    'EN': 'Entry Level',
})

COMPANY_SIZE_DESCRIPTIONS = MappingProxyType({
    'S': 'Small',
    'M': 'Medium',
    'L': 'Large',
})

# Sankey node categories
EXPERIENCE = 'experience'
JOB_GROUP = 'job_group'
COMPANY_SIZE = 'company_size'


def map_job_title(title, groups=JOB_TITLE_GROUPS) -> str:
    """
    Map a job title to its broad group.

    Groups are searched in declaration order and the first one listing the
    exact title wins. Anything not listed (including missing titles) falls
    into 'Other'.
    """
    if title is None or (not isinstance(title, str) and pd.isna(title)):
        return DEFAULT_GROUP

    for group, titles in groups.items():
        if title in titles:
            return group

    return DEFAULT_GROUP


def describe_experience(code) -> str:
    """Readable experience level, e.g. 'SE' → 'Senior Level'."""
    return EXPERIENCE_DESCRIPTIONS.get(code, str(code))


def describe_company_size(code) -> str:
    """Readable company size, e.g. 'M' → 'Medium'."""
    return COMPANY_SIZE_DESCRIPTIONS.get(code, str(code))


if __name__ == '__main__':
    tests = [
        ('Data Scientist', 'Scientist'),
        ('ML Engineer', 'Engineer'),
        ('Analytics Consultant', 'Consultant'),
        ('Statistician', 'Other'),
        ('data scientist', 'Other'),  # case-sensitive
        ('Mystery Title', 'Other'),
    ]

    print("Job title grouping tests:")
    for title, expected in tests:
        result = map_job_title(title)
        status = "✓" if result == expected else "✗"
        print(f"  {status} '{title}' → '{result}' (expected: '{expected}')")
