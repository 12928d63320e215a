"""
Builds the chart groups of a parsed file.

Engine columns that belong together (the eight exhaust gas temperatures, the
oil and fuel pressures, ...) are drawn on a shared chart. Every column not
claimed by one of these fixed groups gets a chart of its own.
"""

from typing import List, Optional, Sequence, Tuple

from data.models import ChartGroup, ParsedTable, Series
from data.parsers.parser_helpers import is_numeric_column
from utils.logger import Logger

# (title, member column names), in display order. Names match case-sensitively.
CHART_GROUPS: List[Tuple[str, List[str]]] = [
    ("EGT1 a EGT8", [f"EGT{i}" for i in range(1, 9)]),
    ("Oil-Pressur et Fuel-P", ["oil-Pressur", "fuel-P"]),
    ("Admission", ["admission"]),
    ("Etage-2", ["etage-2"]),
    ("Turbo_Oil, Exhaut_R, Exhaust_L", ["Turbo_Oil", "Exhaut_R", "Exhaust_L"]),
]


def build_label(column: str, unit: Optional[str]) -> str:
    """Series legend label: 'EGT1 (°C)', or the bare column name without a unit."""
    if unit and unit.strip():
        return f"{column} ({unit})"
    return column


def group_definitions(table: ParsedTable, fixed_groups=None) -> List[Tuple[str, List[str]]]:
    """
    Fixed group definitions followed by one singleton definition per unclaimed header.

    Args:
        table: Parsed file
        fixed_groups: (title, members) pairs, defaults to CHART_GROUPS

    Returns:
        Ordered list of (title, member column names)
    """
    if fixed_groups is None:
        fixed_groups = CHART_GROUPS

    claimed = {name for _, members in fixed_groups for name in members}
    remaining = [header for header in table.headers if header not in claimed]
    return list(fixed_groups) + [(header, [header]) for header in remaining]


def build_group(table: ParsedTable, title: str, members: Sequence[str]) -> ChartGroup:
    """
    Assembles one chart group from the members present in the table.

    Members missing from the table are ignored, and a column holding only gaps
    yields no series. The group is returned even when no series is left.
    """
    existing = [name for name in members if name in table.columns]

    # First member with a non-blank unit
    unit = next((table.units[name] for name in existing if table.units.get(name, "").strip()), None)

    series = []
    for name in existing:
        values = table.columns[name]
        if not is_numeric_column(values):
            Logger.log_message_static(f"Grouper: Column '{name}' has no numeric value, skipped", Logger.DEBUG)
            continue
        series.append(Series(label=build_label(name, table.units.get(name)), values=values))

    display_title = f"{title} [{unit}]" if unit else title
    return ChartGroup(title=display_title, unit=unit, series=tuple(series))


def build_groups(table: ParsedTable, fixed_groups=None) -> List[ChartGroup]:
    """
    Maps the columns of a parsed table onto chart groups.

    Args:
        table: Parsed file
        fixed_groups: (title, members) pairs, defaults to CHART_GROUPS

    Returns:
        Fixed groups in their declared order, then one group per remaining header
    """
    groups = [build_group(table, title, members) for title, members in group_definitions(table, fixed_groups)]

    empty = sum(1 for group in groups if not group.has_data)
    Logger.log_message_static(
        f"Grouper: Built {len(groups)} groups for '{table.file_name}' ({empty} without data)", Logger.DEBUG)
    return groups
