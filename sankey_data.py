"""
Flow graph for the Sankey diagram:
experience level → job title group → company size.

Nodes are plain dicts ({'name', 'category'}) and links are
{'source', 'target', 'value'} with node list indices, the shape both
plotly's go.Sankey and the chart code consume.
"""

import pandas as pd

from analyze import count_by, with_job_groups
from job_groups import JOB_TITLE_GROUPS, EXPERIENCE, JOB_GROUP, COMPANY_SIZE

# Column feeding each node category, in node list order
STAGES = [
    (EXPERIENCE, 'experience_level'),
    (JOB_GROUP, 'job_group'),
    (COMPANY_SIZE, 'company_size'),
]


def _first_seen(values: pd.Series) -> list:
    return values.drop_duplicates().tolist()


def _same_name(a, b) -> bool:
    # Missing values (None/NaN) all name the same node
    if pd.isna(a) or pd.isna(b):
        return pd.isna(a) and pd.isna(b)
    return a == b


def _node_index(nodes: list, name, category=None) -> int:
    """Index of the first node with this name (and category, if given)."""
    for i, node in enumerate(nodes):
        if _same_name(node['name'], name) and (category is None or node['category'] == category):
            return i
    raise KeyError(name)


def _links(nodes: list, counts: dict, source_category: str, target_category: str,
           keyed: bool) -> list:
    """Flatten {source: {target: count}} into link dicts."""
    links = []
    for source, targets in counts.items():
        for target, count in targets.items():
            links.append({
                'source': _node_index(nodes, source, source_category if keyed else None),
                'target': _node_index(nodes, target, target_category if keyed else None),
                'value': int(count),
            })
    return links


def prepare_sankey_data(df: pd.DataFrame, groups=JOB_TITLE_GROUPS, keyed: bool = False) -> dict:
    """
    Build Sankey nodes and links from salary records.

    Args:
        df: Records with experience_level, job_title and company_size columns
        groups: Job title table passed to map_job_title
        keyed: Look nodes up by (category, name) instead of name alone.
            By default the first node with a matching name is used, so a
            label shared by two categories collapses onto one node.

    Returns:
        {'nodes': [{'name', 'category'}, ...],
         'links': [{'source', 'target', 'value'}, ...]}
        Experience → group links come first, then group → company size.
    """
    if df.empty:
        return {'nodes': [], 'links': []}

    grouped = with_job_groups(df, groups)

    nodes = []
    for category, column in STAGES:
        nodes.extend({'name': name, 'category': category}
                     for name in _first_seen(grouped[column]))

    exp_to_job = count_by(grouped, 'experience_level', 'job_group')
    job_to_comp = count_by(grouped, 'job_group', 'company_size')

    links = (_links(nodes, exp_to_job, EXPERIENCE, JOB_GROUP, keyed)
             + _links(nodes, job_to_comp, JOB_GROUP, COMPANY_SIZE, keyed))

    return {'nodes': nodes, 'links': links}


def link_totals(data: dict) -> tuple:
    """Total weight of (experience → group, group → company size) links."""
    categories = [node['category'] for node in data['nodes']]
    first = sum(link['value'] for link in data['links']
                if categories[link['source']] == EXPERIENCE)
    second = sum(link['value'] for link in data['links'] if categories[link['source']] != EXPERIENCE)
    return first, second
